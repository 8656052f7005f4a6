"""Error definitions for querylab.

Only failures raised by querylab's own helpers live here. Errors produced
by SQLAlchemy or the database driver propagate unchanged, apart from the
few that `querylab.queries.results` translates.
"""


class QueryLabError(Exception):
    """Base class for querylab errors."""


class ProjectionError(QueryLabError):
    """Raised when a result row cannot be turned into the projection target."""

    def __init__(self, target: type, reason: str) -> None:
        super().__init__(f"Cannot project onto {target.__name__}: {reason}")
        self.target = target
        self.reason = reason


class NonUniqueResultError(QueryLabError):
    """Raised when a single result was expected but several rows matched."""
