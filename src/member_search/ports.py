"""IStoreExecutor: protocol for running assembled queries against a store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from .persistence.assembler import QueryDescriptor


@runtime_checkable
class IStoreExecutor(Protocol):
    """
    Runs :class:`QueryDescriptor` instances inside the caller's transaction.

    Implementations raise :class:`~member_search.exceptions.StoreError` on
    connectivity or syntax failures and must let cancellation propagate.
    """

    async def execute(self, query: QueryDescriptor) -> Sequence[Mapping[str, Any]]:
        """Run a content query and return its rows keyed by column label."""
        ...

    async def execute_scalar(self, query: QueryDescriptor) -> int:
        """Run a count query and return its single integer value."""
        ...
