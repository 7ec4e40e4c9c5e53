"""Member/team search with dynamic predicates and count-query elision."""

from __future__ import annotations

from .domain import FilterCriteria, PageResult, PageWindow, ProjectedRow
from .engine import SearchEngine
from .exceptions import (
    CancellationError,
    MemberSearchError,
    QueryConstructionError,
    StoreError,
)
from .options import SearchOptions
from .pagination import CountDecision, CountPlan, paginate, plan_count
from .persistence.repository import MEMBER_TEAM_GRAPH, MemberRepository
from .ports import IStoreExecutor
from .predicates import Equals, Gte, Lte, Predicate, build_predicates
from .projection import MEMBER_TEAM_PROJECTION, Projection

__all__ = [
    # Request / result types
    "FilterCriteria",
    "PageResult",
    "PageWindow",
    "ProjectedRow",
    "SearchOptions",
    # Predicates
    "Equals",
    "Gte",
    "Lte",
    "Predicate",
    "build_predicates",
    # Pagination planner
    "CountDecision",
    "CountPlan",
    "paginate",
    "plan_count",
    # Projection
    "MEMBER_TEAM_PROJECTION",
    "Projection",
    # Search surface
    "IStoreExecutor",
    "MEMBER_TEAM_GRAPH",
    "MemberRepository",
    "SearchEngine",
    # Exceptions
    "CancellationError",
    "MemberSearchError",
    "QueryConstructionError",
    "StoreError",
]
