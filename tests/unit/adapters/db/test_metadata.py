"""Tests for the naming convention applied via `metadata`.

Alembic autogenerate relies on deterministic constraint and index names to
avoid spurious diffs, so the names of the mapped tables are locked here.
"""

from __future__ import annotations

from sqlalchemy import ForeignKeyConstraint, PrimaryKeyConstraint

from querylab.adapters.db.metadata import metadata
from querylab.adapters.orm import member, team


def test_tables_attached_to_shared_metadata():
    """Both tables live on the naming-convention metadata."""
    assert metadata.tables["team"] is team
    assert metadata.tables["member"] is member


def test_primary_key_names():
    """Primary keys are named pk_<table>."""
    assert team.primary_key.name == "pk_team"
    assert member.primary_key.name == "pk_member"
    assert isinstance(member.primary_key, PrimaryKeyConstraint)


def test_foreign_key_name():
    """Foreign keys are named fk_<table>_<cols>_<reftable>."""
    (fk,) = [c for c in member.constraints if isinstance(c, ForeignKeyConstraint)]
    assert fk.name == "fk_member_team_id_team"
    assert fk.referred_table is team


def test_index_name():
    """Indexes are named ix_<table>_<column labels>."""
    assert {ix.name for ix in member.indexes} == {"ix_member_member_team_id"}
