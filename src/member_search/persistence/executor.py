"""
SQLAlchemy store executor.

Runs assembled queries on a caller-managed ``AsyncSession``.  The executor
never begins, commits or rolls back: it runs inside whatever transaction
the session already carries.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import StoreError
from .assembler import QueryKind

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from sqlalchemy.ext.asyncio import AsyncSession

    from .assembler import QueryDescriptor

logger = logging.getLogger(__name__)


class SQLAlchemyStoreExecutor:
    """
    ``IStoreExecutor`` implementation over an ``AsyncSession``.

    Driver and SQL failures surface as :class:`StoreError` chained to the
    original ``SQLAlchemyError``.  Cancellation propagates untouched.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def execute(self, query: QueryDescriptor) -> Sequence[Mapping[str, Any]]:
        if query.kind is not QueryKind.CONTENT:
            raise ValueError(f"execute() expects a content query, got {query.kind}")
        logger.debug("Executing content query (joins=%s)", query.joins)
        try:
            result = await self._session.execute(query.statement)
            return list(result.mappings().all())
        except SQLAlchemyError as e:
            raise StoreError(f"Content query failed: {e}") from e

    async def execute_scalar(self, query: QueryDescriptor) -> int:
        if query.kind is not QueryKind.COUNT:
            raise ValueError(
                f"execute_scalar() expects a count query, got {query.kind}"
            )
        logger.debug("Executing count query (joins=%s)", query.joins)
        try:
            value = await self._session.scalar(query.statement)
        except SQLAlchemyError as e:
            raise StoreError(f"Count query failed: {e}") from e
        return int(value or 0)
