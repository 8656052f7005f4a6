"""Entity model: members and the teams they belong to.

`Member` owns the association (it holds the team reference that ends up
in the ``team_id`` column). `Team.members` is the inverse side and is only
kept in step in memory by `Member.change_team`.
"""

from __future__ import annotations


class Team:
    """A named team with a collection of members."""

    id: int | None
    name: str
    members: list[Member]

    def __init__(self, name: str) -> None:
        self.id = None
        self.name = name
        self.members = []

    def __repr__(self) -> str:
        return f"Team(id={self.id!r}, name={self.name!r})"


class Member:
    """A member with a username, an age and an optional team."""

    id: int | None
    username: str | None
    age: int
    team: Team | None

    def __init__(
        self, username: str | None, age: int = 0, team: Team | None = None
    ) -> None:
        self.id = None
        self.username = username
        self.age = age
        self.team = None
        if team is not None:
            self.change_team(team)

    def change_team(self, team: Team) -> None:
        """Move the member to ``team``, updating both sides of the association."""
        self.team = team
        if self not in team.members:
            team.members.append(self)

    # team excluded: printing must never trigger a lazy load
    def __repr__(self) -> str:
        return f"Member(id={self.id!r}, username={self.username!r}, age={self.age!r})"
