"""
Search options.

``SearchOptions`` carries result-shaping parameters that are not part of
the criteria: ordering and the count-query strategy for paged searches.
The criteria define *what* to match; the options define *how* the
results are returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class SearchOptions:
    """
    Immutable container for result-shaping parameters.

    Attributes:
        order_by: Field paths to order by.
            Prefix with ``-`` for descending, e.g. ``["-member.age", "member.id"]``.
            Empty means store-defined order, which is not stable across pages.
        elide_count_joins: Let count queries drop joins that can neither
            filter nor duplicate primary rows.
        always_count: Issue the count query for every page instead of
            deriving the total from short pages.
    """

    order_by: list[str] = field(default_factory=list)
    elide_count_joins: bool = False
    always_count: bool = False

    def with_ordering(self, *fields: str) -> SearchOptions:
        """Return a copy with updated ordering."""
        return replace(self, order_by=list(fields))

    def with_count_join_elision(self, enabled: bool = True) -> SearchOptions:
        return replace(self, elide_count_joins=enabled)

    def with_always_count(self, enabled: bool = True) -> SearchOptions:
        return replace(self, always_count=enabled)
