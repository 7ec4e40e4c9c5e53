from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from ..engine import SearchEngine
from ..projection import MEMBER_TEAM_PROJECTION
from .executor import SQLAlchemyStoreExecutor
from .joins import JoinGraph, JoinSpec
from .models import MemberModel

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from ..domain.criteria import FilterCriteria
    from ..domain.paging import PageResult, PageWindow
    from ..domain.rows import ProjectedRow
    from ..options import SearchOptions
    from ..ports import IStoreExecutor

MEMBER_TEAM_GRAPH = JoinGraph("member", MemberModel, [JoinSpec("team", "team")])


class MemberRepository:
    """
    Members and the member/team search.

    Works on a caller-managed ``AsyncSession``: ``add`` only stages and
    flushes, committing is the caller's business.  The search methods run
    through a :class:`SearchEngine`; pass ``executor`` to substitute the
    store executor (e.g. a query-counting double in tests)::

        repo = MemberRepository(session)
        page = await repo.search_paged(
            FilterCriteria(team_name="teamA"), PageWindow(offset=0, limit=10)
        )
    """

    def __init__(
        self,
        session: AsyncSession,
        *,
        executor: IStoreExecutor | None = None,
        options: SearchOptions | None = None,
    ) -> None:
        self.session = session
        self.engine: SearchEngine[ProjectedRow] = SearchEngine(
            executor or SQLAlchemyStoreExecutor(session),
            MEMBER_TEAM_GRAPH,
            MEMBER_TEAM_PROJECTION,
            options=options,
        )

    # -- CRUD ---------------------------------------------------------------

    async def add(self, member: MemberModel) -> int:
        self.session.add(member)
        await self.session.flush()
        return member.id

    async def get(self, member_id: int) -> MemberModel | None:
        return await self.session.get(MemberModel, member_id)

    async def list_all(self) -> list[MemberModel]:
        result = await self.session.execute(
            select(MemberModel).order_by(MemberModel.id)
        )
        return list(result.scalars().all())

    async def find_by_username(self, username: str) -> list[MemberModel]:
        result = await self.session.execute(
            select(MemberModel)
            .where(MemberModel.username == username)
            .order_by(MemberModel.id)
        )
        return list(result.scalars().all())

    # -- search -------------------------------------------------------------

    async def search(
        self,
        criteria: FilterCriteria,
        options: SearchOptions | None = None,
    ) -> list[ProjectedRow]:
        return await self.engine.search(criteria, options)

    async def search_paged(
        self,
        criteria: FilterCriteria,
        window: PageWindow,
        options: SearchOptions | None = None,
    ) -> PageResult[ProjectedRow]:
        """Paged search; the count query is skipped when the page settles it."""
        return await self.engine.search_paged(criteria, window, options)

    async def search_page_simple(
        self,
        criteria: FilterCriteria,
        window: PageWindow,
        options: SearchOptions | None = None,
    ) -> PageResult[ProjectedRow]:
        """Paged search that always issues the count query."""
        opts = (options or self.engine.options).with_always_count()
        return await self.engine.search_paged(criteria, window, opts)
