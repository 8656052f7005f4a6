"""Packaged Alembic environment and revisions for the querylab schema."""
