"""Projection targets.

Flat, mutable records with no identity. Every field defaults to ``None`` so
the bean and field projections can build an empty instance first and fill
it in afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from querylab.queries.projections import DtoBundle


@dataclass
class MemberDto:
    """Username and age of a member."""

    username: str | None = None
    age: int | None = None

    @classmethod
    def projection(
        cls,
        username: ColumnElement[str | None],
        age: ColumnElement[int],
    ) -> DtoBundle:
        """Typed constructor projection bound to exactly two expressions.

        Example:
            ```py
            session.scalars(select(MemberDto.projection(Member.username, Member.age)))
            ```
        """
        from querylab.queries.projections import constructor  # pylint: disable=import-outside-toplevel

        return constructor(cls, username, age)


@dataclass
class UserDto:
    """Same shape as `MemberDto`, with ``name`` in place of ``username``."""

    name: str | None = None
    age: int | None = None
