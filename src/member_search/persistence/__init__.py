"""SQLAlchemy side of the member search: models, joins, assembly, execution."""

from __future__ import annotations

from .assembler import (
    COMPARISONS,
    QueryDescriptor,
    QueryKind,
    assemble,
    assemble_count,
    build_where,
)
from .executor import SQLAlchemyStoreExecutor
from .joins import JoinGraph, JoinKind, JoinSpec
from .models import Base, MemberModel, TeamModel

__all__ = [
    "COMPARISONS",
    "Base",
    "JoinGraph",
    "JoinKind",
    "JoinSpec",
    "MemberModel",
    "QueryDescriptor",
    "QueryKind",
    "SQLAlchemyStoreExecutor",
    "TeamModel",
    "assemble",
    "assemble_count",
    "build_where",
]
