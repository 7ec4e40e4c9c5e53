"""Predicate variants and the criteria-to-predicate builder."""

from __future__ import annotations

from .ast import (
    Equals,
    Gte,
    Lte,
    Predicate,
    PredicateOperator,
    predicate_from_dict,
)
from .builder import AGE, TEAM_NAME, USERNAME, build_predicates

__all__ = [
    "AGE",
    "Equals",
    "Gte",
    "Lte",
    "Predicate",
    "PredicateOperator",
    "TEAM_NAME",
    "USERNAME",
    "build_predicates",
    "predicate_from_dict",
]
