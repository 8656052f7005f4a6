"""Adapters package.

Concrete implementations that bind querylab's plain domain classes to
SQLAlchemy: metadata, engine, table mapping and the unit of work.
"""
