"""Entrypoints for querylab.

Currently only the command-line interface (`querylab.entrypoints.cli.main`).
"""
