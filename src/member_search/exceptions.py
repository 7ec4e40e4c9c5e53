"""Exceptions for the member search layer."""

from __future__ import annotations

import asyncio

#: Raised when the awaiting task is cancelled; never wrapped or swallowed.
CancellationError = asyncio.CancelledError


class MemberSearchError(Exception):
    """Root exception for the member search layer."""


class QueryConstructionError(MemberSearchError):
    """Raised when a projection, predicate, ordering or join reference
    cannot be resolved against the join graph."""


class StoreError(MemberSearchError):
    """Raised by a store executor when a round-trip fails
    (connectivity, syntax, constraint violation, timeout)."""


__all__: list[str] = [
    "CancellationError",
    "MemberSearchError",
    "QueryConstructionError",
    "StoreError",
]
