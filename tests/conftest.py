from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from member_search.persistence import (
    Base,
    MemberModel,
    QueryKind,
    SQLAlchemyStoreExecutor,
    TeamModel,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Mapping, Sequence

    from member_search.persistence import QueryDescriptor


class QueryCountingExecutor:
    """Store executor double that records every query it forwards."""

    def __init__(self, inner: Any) -> None:
        self.inner = inner
        self.queries: list[QueryDescriptor] = []

    @property
    def content_queries(self) -> int:
        return sum(1 for q in self.queries if q.kind is QueryKind.CONTENT)

    @property
    def count_queries(self) -> int:
        return sum(1 for q in self.queries if q.kind is QueryKind.COUNT)

    async def execute(self, query: QueryDescriptor) -> Sequence[Mapping[str, Any]]:
        self.queries.append(query)
        return await self.inner.execute(query)

    async def execute_scalar(self, query: QueryDescriptor) -> int:
        self.queries.append(query)
        return await self.inner.execute_scalar(query)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
async def engine():
    eng = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as sess:
        yield sess


@pytest.fixture
def spy(session) -> QueryCountingExecutor:
    return QueryCountingExecutor(SQLAlchemyStoreExecutor(session))


async def seed_members(session: AsyncSession) -> None:
    """teamA: member1 (10), member2 (20); teamB: member3 (30), member4 (40)."""
    team_a = TeamModel(name="teamA")
    team_b = TeamModel(name="teamB")
    session.add_all([team_a, team_b])
    session.add_all(
        [
            MemberModel(username="member1", age=10, team=team_a),
            MemberModel(username="member2", age=20, team=team_a),
            MemberModel(username="member3", age=30, team=team_b),
            MemberModel(username="member4", age=40, team=team_b),
        ]
    )
    await session.commit()


@pytest.fixture
async def seeded(session) -> AsyncSession:
    await seed_members(session)
    return session
