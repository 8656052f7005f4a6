"""Dynamic member search predicates.

Each helper turns an optional search condition into a SQL expression, or
``None`` when the condition is absent. ``None`` means "no filter" and is
dropped before the statement is built, so the helpers compose freely.

Two search styles are provided on top of them:

- `search_member_builder` accumulates conditions in a list, one ``if`` per
  condition.
- `search_member_where` hands the nullable predicates straight to
  ``where`` and relies on `and_all` to drop the missing ones.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import and_, select

from querylab.domain.model import Member

if TYPE_CHECKING:
    from sqlalchemy.orm import Session
    from sqlalchemy.sql.elements import ColumnElement

__all__ = [
    "username_eq",
    "age_eq",
    "and_all",
    "all_eq",
    "search_member_builder",
    "search_member_where",
]

logger = logging.getLogger(__name__)


def username_eq(username_cond: str | None) -> ColumnElement[bool] | None:
    """Match members by exact username; ``None`` disables the filter."""
    if username_cond is None:
        return None
    return Member.username == username_cond


def age_eq(age_cond: int | None) -> ColumnElement[bool] | None:
    """Match members by exact age; ``None`` disables the filter."""
    return Member.age == age_cond if age_cond is not None else None


def and_all(*predicates: ColumnElement[bool] | None) -> ColumnElement[bool] | None:
    """AND together the predicates that are not ``None``.

    Returns:
        The single remaining predicate, their conjunction, or ``None`` when
        every input was ``None``.
    """
    present = [p for p in predicates if p is not None]
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return and_(*present)


def all_eq(
    username_cond: str | None, age_cond: int | None
) -> ColumnElement[bool] | None:
    """Username and age conditions combined under one reusable name.

    Either condition may be ``None``; when both are, there is no filter at
    all and ``None`` is returned.
    """
    return and_all(username_eq(username_cond), age_eq(age_cond))


def search_member_builder(
    session: Session, username_cond: str | None, age_cond: int | None
) -> list[Member]:
    """Search members by accumulating the present conditions one by one."""
    conditions: list[ColumnElement[bool]] = []
    if username_cond is not None:
        conditions.append(Member.username == username_cond)
    if age_cond is not None:
        conditions.append(Member.age == age_cond)

    stmt = select(Member).where(*conditions).order_by(Member.id)
    logger.debug("member search (builder) with %d condition(s)", len(conditions))
    return list(session.scalars(stmt))


def search_member_where(
    session: Session, username_cond: str | None, age_cond: int | None
) -> list[Member]:
    """Search members with the composed `all_eq` predicate."""
    stmt = select(Member)
    if (predicate := all_eq(username_cond, age_cond)) is not None:
        stmt = stmt.where(predicate)
    logger.debug(
        "member search (where) username=%r age=%r", username_cond, age_cond
    )
    return list(session.scalars(stmt.order_by(Member.id)))
