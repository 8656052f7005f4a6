"""Result fetching helpers.

Thin wrappers over `Session.execute` that name the common ways of reading a
select statement:

| Helper          | Returns                                            |
|-----------------|----------------------------------------------------|
| `fetch`         | list of results, empty when nothing matches        |
| `fetch_one`     | the single result, ``None`` when nothing matches   |
| `fetch_first`   | the first result of ``limit(1)``, or ``None``      |
| `fetch_count`   | number of rows the statement yields                |
| `fetch_results` | a page of results plus the total row count         |

Statements that select a single entity, column or projection yield the
objects themselves; wider selects yield `Row` tuples.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import MultipleResultsFound

from querylab.errors import NonUniqueResultError

if TYPE_CHECKING:
    from sqlalchemy import Result, Select
    from sqlalchemy.orm import Session

__all__ = [
    "QueryResults",
    "fetch",
    "fetch_one",
    "fetch_first",
    "fetch_count",
    "fetch_results",
]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class QueryResults(Generic[T]):
    """One page of results together with the unpaged total."""

    results: Sequence[T]
    total: int
    offset: int
    limit: int | None

    @property
    def is_empty(self) -> bool:
        """True when the page holds no results."""
        return not self.results


def _execute(session: Session, stmt: Select) -> Result[Any]:
    result = session.execute(stmt)
    if len(stmt.column_descriptions) == 1:
        return result.scalars()  # type: ignore[return-value]
    return result


def fetch(session: Session, stmt: Select) -> list[Any]:
    """Run ``stmt`` and return every result."""
    return list(_execute(session, stmt).all())


def fetch_one(session: Session, stmt: Select) -> Any | None:
    """Run ``stmt`` and return its only result, or ``None`` if there is none.

    Raises:
        NonUniqueResultError: If more than one row matches.
    """
    try:
        return _execute(session, stmt).one_or_none()
    except MultipleResultsFound as e:
        raise NonUniqueResultError(str(e)) from e


def fetch_first(session: Session, stmt: Select) -> Any | None:
    """Run ``stmt`` limited to one row and return that row's result, if any."""
    return fetch_one(session, stmt.limit(1))


def fetch_count(session: Session, stmt: Select) -> int:
    """Count the rows ``stmt`` would return, ignoring any ordering or paging."""
    inner = stmt.order_by(None).limit(None).offset(None).subquery()
    count_stmt = select(func.count()).select_from(inner)  # pylint: disable=not-callable
    return session.execute(count_stmt).scalar_one()


def fetch_results(
    session: Session, stmt: Select, *, offset: int = 0, limit: int | None = None
) -> QueryResults[Any]:
    """Fetch one page of ``stmt`` plus the total number of rows.

    Issues two queries: a count over the unpaged statement, then the page.

    Raises:
        ValueError: If ``offset`` is negative or ``limit`` is below 1.
    """
    if offset < 0:
        raise ValueError("offset must be >= 0")
    if limit is not None and limit < 1:
        raise ValueError("limit cannot be <= 0")

    total = fetch_count(session, stmt)
    page = stmt.offset(offset)
    if limit is not None:
        page = page.limit(limit)
    return QueryResults(
        results=fetch(session, page), total=total, offset=offset, limit=limit
    )
