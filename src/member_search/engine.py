"""
SearchEngine: criteria in, projected rows (or a page of them) out.

Wires the predicate builder, the query assembler, a store executor, the
projection and the pagination planner.  Store round-trips are sequential:
the content query first, then the count query only when the planner asks
for one.  Nothing here catches ``StoreError`` or cancellation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from .options import SearchOptions
from .pagination import paginate
from .persistence.assembler import assemble, assemble_count
from .predicates.builder import build_predicates

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from .domain.criteria import FilterCriteria
    from .domain.paging import PageResult, PageWindow
    from .persistence.joins import JoinGraph
    from .ports import IStoreExecutor
    from .predicates.ast import Predicate
    from .projection import Projection

    PredicateBuilder = Callable[[FilterCriteria], Sequence[Predicate]]

logger = logging.getLogger("member_search.engine")

R = TypeVar("R")


class SearchEngine(Generic[R]):
    """
    Filtered, optionally paged search over one join graph and projection.

    Usage::

        engine = SearchEngine(executor, MEMBER_TEAM_GRAPH, MEMBER_TEAM_PROJECTION)
        rows = await engine.search(FilterCriteria(team_name="teamA"))
        page = await engine.search_paged(criteria, PageWindow(offset=0, limit=10))
    """

    def __init__(
        self,
        executor: IStoreExecutor,
        graph: JoinGraph,
        projection: Projection[R],
        *,
        predicate_builder: PredicateBuilder | None = None,
        options: SearchOptions | None = None,
    ) -> None:
        self.executor = executor
        self.graph = graph
        self.projection = projection
        self.options = options or SearchOptions()
        self._build_predicates = predicate_builder or build_predicates

    async def search(
        self,
        criteria: FilterCriteria,
        options: SearchOptions | None = None,
    ) -> list[R]:
        """Return every row matching *criteria* (unpaged)."""
        opts = options or self.options
        predicates = self._build_predicates(criteria)
        query = assemble(
            predicates, self.projection, self.graph, order_by=opts.order_by
        )
        rows = await self.executor.execute(query)
        return [self.projection.project(row) for row in rows]

    async def search_paged(
        self,
        criteria: FilterCriteria,
        window: PageWindow,
        options: SearchOptions | None = None,
    ) -> PageResult[R]:
        """
        Return one page of rows matching *criteria* plus the total count.

        The count query is skipped when the page alone determines the total
        (see :mod:`member_search.pagination`), unless ``always_count`` is set.
        """
        opts = options or self.options
        predicates = list(self._build_predicates(criteria))
        if not opts.order_by:
            logger.debug("Paged search without ordering; page order is store-defined")

        query = assemble(
            predicates,
            self.projection,
            self.graph,
            window=window,
            order_by=opts.order_by,
        )
        # Fail fast on a bad count query before any round-trip.
        count_query = assemble_count(
            predicates, self.graph, elide_joins=opts.elide_count_joins
        )

        rows = await self.executor.execute(query)
        content = [self.projection.project(row) for row in rows]

        async def run_count() -> int:
            return await self.executor.execute_scalar(count_query)

        return await paginate(
            content, window, run_count, always_count=opts.always_count
        )

