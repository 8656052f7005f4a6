"""Fixtures for generating test data."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from querylab.domain.model import Member, Team
from querylab.sample_data import SampleData, seed

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

# pylint: disable=redefined-outer-name


@pytest.fixture
def sample(session: Session) -> SampleData:
    """The four sample members in teamA/teamB, flushed to the test session."""
    return seed(session)


@pytest.fixture
def add_members(session: Session) -> Callable[..., list[Member]]:
    """Factory fixture: persist extra members and flush them.

    Accepts ``(username, age)`` pairs or bare usernames (age 0), plus an
    optional ``team`` keyword applied to all of them; for example:
        add_members("teamA", "teamB")
        add_members((None, 100), ("member5", 100))
    """

    def _add(
        *entries: str | None | tuple[str | None, int], team: Team | None = None
    ) -> list[Member]:
        created = []
        for entry in entries:
            username, age = entry if isinstance(entry, tuple) else (entry, 0)
            created.append(Member(username, age, team))
        session.add_all(created)
        session.flush()
        return created

    return _add
