"""Query helpers: dynamic predicates, DTO projections and result fetching."""

from .predicates import (
    age_eq,
    all_eq,
    and_all,
    search_member_builder,
    search_member_where,
    username_eq,
)
from .projections import DtoBundle, ProjectionMode, bean, constructor, fields
from .results import (
    QueryResults,
    fetch,
    fetch_count,
    fetch_first,
    fetch_one,
    fetch_results,
)

__all__ = [
    "age_eq",
    "all_eq",
    "and_all",
    "search_member_builder",
    "search_member_where",
    "username_eq",
    "DtoBundle",
    "ProjectionMode",
    "bean",
    "constructor",
    "fields",
    "QueryResults",
    "fetch",
    "fetch_count",
    "fetch_first",
    "fetch_one",
    "fetch_results",
]
