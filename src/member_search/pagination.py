"""
Pagination planner: decides whether a page needs a count query.

Given a content page already fetched for ``(offset, limit)`` with ``n``
rows, the total can often be derived from the page alone:

1. ``FIRST_PAGE_UNDER_FULL`` when ``offset == 0`` and ``n < limit``. The
   whole result fits on the first page, total is ``n``.
2. ``LAST_PAGE`` when ``0 < n < limit``. A short, non-empty page proves no
   further rows exist, total is ``offset + n``.
3. ``COUNT_REQUIRED`` for anything else, including an empty page past the
   first one (the data may end anywhere before ``offset``).

The planner is independent of any ORM; :func:`paginate` receives the count
query as an awaitable supplier and only calls it in case 3.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from .domain.paging import PageResult

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from .domain.paging import PageWindow

logger = logging.getLogger("member_search.pagination")

T = TypeVar("T")


class CountDecision(str, Enum):
    FIRST_PAGE_UNDER_FULL = "first_page_under_full"
    LAST_PAGE = "last_page"
    COUNT_REQUIRED = "count_required"


@dataclass(frozen=True)
class CountPlan:
    """Outcome of :func:`plan_count`.

    ``total`` is set for the two skip cases and ``None`` when a count
    query must be issued.
    """

    decision: CountDecision
    total: int | None = None

    def __post_init__(self) -> None:
        if (self.total is None) != self.requires_count_query:
            raise ValueError(
                f"{self.decision.value} plan cannot carry total={self.total}"
            )

    @property
    def requires_count_query(self) -> bool:
        return self.decision is CountDecision.COUNT_REQUIRED


def plan_count(offset: int, limit: int, n: int) -> CountPlan:
    """Decide how the total of a fetched page is obtained.

    Raises:
        ValueError: On a negative offset, a non-positive limit, or a page
            holding more rows than ``limit``.
    """
    if offset < 0 or limit <= 0:
        raise ValueError(f"Invalid window: offset={offset}, limit={limit}")
    if n < 0 or n > limit:
        raise ValueError(f"Page size {n} is outside [0, {limit}]")

    if offset == 0 and n < limit:
        return CountPlan(CountDecision.FIRST_PAGE_UNDER_FULL, total=n)
    if 0 < n < limit:
        return CountPlan(CountDecision.LAST_PAGE, total=offset + n)
    return CountPlan(CountDecision.COUNT_REQUIRED)


async def paginate(
    content: list[T],
    window: PageWindow,
    count_query: Callable[[], Awaitable[int]],
    *,
    always_count: bool = False,
) -> PageResult[T]:
    """
    Build a :class:`PageResult`, awaiting *count_query* only when needed.

    With ``always_count`` the skip cases are ignored and the count query is
    always awaited.  Errors raised by *count_query* propagate unchanged.
    """
    plan = plan_count(window.offset, window.limit, len(content))
    if plan.total is not None and not always_count:
        logger.debug(
            "Count query skipped (%s): total=%d", plan.decision.value, plan.total
        )
        return PageResult(content=content, total=plan.total, window=window)

    total = await count_query()
    # A non-empty page proves offset + n rows exist; an empty one proves nothing.
    floor = window.offset + len(content) if content else 0
    if total < floor:
        logger.warning(
            "Count query returned %d, below the %d rows already paged; "
            "using %d",
            total,
            floor,
            floor,
        )
        total = floor
    logger.debug("Count query issued: total=%d", total)
    return PageResult(content=content, total=total, window=window)
