"""Table definitions and imperative mapping for the entity model.

Defines the ``team`` and ``member`` tables on the shared naming-convention
metadata and maps the plain `Team` and `Member` classes onto them.

| Table    | Columns                                       |
|----------|-----------------------------------------------|
| team     | team_id (PK), name                            |
| member   | member_id (PK), username (nullable), age,     |
|          | team_id (FK -> team.team_id, nullable)        |

`Member.team` is the owning side of the association and loads lazily
(one extra SELECT on first access). `Team.members` is its inverse.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Column, ForeignKey, Integer, String, Table, inspect
from sqlalchemy.orm import registry, relationship

from querylab.domain.model import Member, Team

from .db.metadata import metadata

__all__ = ["team", "member", "mapper_registry", "start_mappers", "is_loaded"]

logger = logging.getLogger(__name__)

mapper_registry = registry(metadata=metadata)

team = Table(
    "team",
    metadata,
    Column("team_id", Integer, primary_key=True),
    Column("name", String(100), nullable=False),
    comment="Teams members belong to.",
)

member = Table(
    "member",
    metadata,
    Column("member_id", Integer, primary_key=True),
    Column("username", String(100), nullable=True),
    Column("age", Integer, nullable=False, server_default="0"),
    Column("team_id", Integer, ForeignKey("team.team_id"), nullable=True, index=True),
    comment="Members; team_id is the owning side of the member/team association.",
)


def start_mappers() -> None:
    """Map `Team` and `Member` onto their tables.

    Safe to call more than once; later calls are no-ops.
    """
    if _is_mapped(Member):
        return

    logger.debug("mapping Team and Member onto %s", sorted(metadata.tables))
    mapper_registry.map_imperatively(
        Team,
        team,
        properties={
            "id": team.c.team_id,
            "members": relationship(
                Member, back_populates="team", order_by=member.c.member_id
            ),
        },
    )
    mapper_registry.map_imperatively(
        Member,
        member,
        properties={
            "id": member.c.member_id,
            "team": relationship(Team, back_populates="members", lazy="select"),
        },
    )


def is_loaded(entity: Any, attribute: str) -> bool:
    """Tell whether ``attribute`` of a persistent ``entity`` is already populated.

    An association pulled in by a fetch join counts as loaded; one that would
    be fetched by a lazy load on first access does not.
    """
    return attribute not in inspect(entity).unloaded


def _is_mapped(cls: type) -> bool:
    return inspect(cls, raiseerr=False) is not None
