"""
Page window and page result.

``PageWindow`` is the requested slice (``offset``/``limit``) of an ordered
result set.  ``PageResult`` is the returned slice together with the total
number of matching rows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
R = TypeVar("R")


class PageWindow(BaseModel):
    """Requested slice of an ordered result set.

    Attributes:
        offset: Number of rows to skip (``>= 0``).
        limit: Maximum number of rows to return (``> 0``).
    """

    model_config = ConfigDict(frozen=True)

    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=20, gt=0)

    @classmethod
    def of_page(cls, page: int, size: int) -> PageWindow:
        """Build a window from a zero-based page number and a page size."""
        return cls(offset=page * size, limit=size)

    @property
    def page_number(self) -> int:
        """Zero-based page number this window starts in."""
        return self.offset // self.limit

    def next(self) -> PageWindow:
        return PageWindow(offset=self.offset + self.limit, limit=self.limit)


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """A page of results plus the total number of matching rows.

    Raises:
        ValueError: If ``total`` is smaller than the page content.
    """

    content: list[T]
    total: int
    window: PageWindow = field(default_factory=PageWindow)

    def __post_init__(self) -> None:
        if self.total < len(self.content):
            raise ValueError(
                f"total ({self.total}) is smaller than the page content "
                f"({len(self.content)})"
            )

    @property
    def number(self) -> int:
        return self.window.page_number

    @property
    def size(self) -> int:
        return self.window.limit

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.window.limit)

    @property
    def has_next(self) -> bool:
        return self.window.offset + len(self.content) < self.total

    @property
    def has_previous(self) -> bool:
        return self.window.offset > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def map(self, fn: Callable[[T], R]) -> PageResult[R]:
        """Return a copy with every content item converted by *fn*."""
        return PageResult(
            content=[fn(item) for item in self.content],
            total=self.total,
            window=self.window,
        )
