"""Sample teams and members.

Two teams with two members each. Every query walkthrough in the test-suite
starts from this data set:

| member  | age | team  |
|---------|-----|-------|
| member1 | 10  | teamA |
| member2 | 20  | teamA |
| member3 | 30  | teamB |
| member4 | 40  | teamB |
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from querylab.domain.model import Member, Team

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

TEAM_NAMES = ("teamA", "teamB")
MEMBER_ROWS = (
    ("member1", 10, "teamA"),
    ("member2", 20, "teamA"),
    ("member3", 30, "teamB"),
    ("member4", 40, "teamB"),
)


@dataclass(frozen=True)
class SampleData:
    """The persisted sample entities, by name."""

    teams: dict[str, Team]
    members: dict[str, Member]


def seed(session: Session) -> SampleData:
    """Persist the sample teams and members and flush them.

    Teams are added before their members so the foreign keys resolve. The
    caller owns the transaction: nothing is committed here.
    """
    teams = {name: Team(name) for name in TEAM_NAMES}
    session.add_all(teams.values())

    members = {
        username: Member(username, age, teams[team_name])
        for username, age, team_name in MEMBER_ROWS
    }
    session.add_all(members.values())
    session.flush()

    logger.info("seeded %d teams and %d members", len(teams), len(members))
    return SampleData(teams=teams, members=members)
