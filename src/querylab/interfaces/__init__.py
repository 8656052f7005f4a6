"""Interfaces (ports) for querylab.

Abstract contracts implemented by the adapters package.
"""
