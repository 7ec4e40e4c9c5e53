"""Request and result types of the member search."""

from __future__ import annotations

from .criteria import FilterCriteria, has_text
from .paging import PageResult, PageWindow
from .rows import ProjectedRow

__all__ = [
    "FilterCriteria",
    "PageResult",
    "PageWindow",
    "ProjectedRow",
    "has_text",
]
