"""
Predicate variants.

A predicate is a single boolean condition bound to one field path
(``"<alias>.<attribute>"``) and one comparison.  A list of predicates is
composed with AND, so its order never changes the matched rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class PredicateOperator(str, Enum):
    """Comparisons a predicate can carry."""

    EQ = "="
    GE = ">="
    LE = "<="


@dataclass(frozen=True)
class Predicate:
    """Base class of the tagged predicate variants."""

    op: ClassVar[PredicateOperator]

    attr: str
    value: Any

    @property
    def alias(self) -> str:
        """The join-graph alias the field path starts with."""
        return self.attr.split(".", 1)[0]

    def to_dict(self) -> dict[str, Any]:
        """Serialise to ``{"op", "attr", "val"}``."""
        return {"op": self.op.value, "attr": self.attr, "val": self.value}


@dataclass(frozen=True)
class Equals(Predicate):
    op: ClassVar[PredicateOperator] = PredicateOperator.EQ


@dataclass(frozen=True)
class Gte(Predicate):
    """Inclusive lower bound."""

    op: ClassVar[PredicateOperator] = PredicateOperator.GE


@dataclass(frozen=True)
class Lte(Predicate):
    """Inclusive upper bound."""

    op: ClassVar[PredicateOperator] = PredicateOperator.LE


def predicate_from_dict(data: dict[str, Any]) -> Predicate:
    """Rebuild a predicate from its ``to_dict()`` form.

    Raises:
        ValueError: If ``op`` is not a supported operator or ``attr`` is missing.
    """
    attr = data.get("attr")
    if not attr:
        raise ValueError(f"Predicate missing 'attr': {data}")
    op = PredicateOperator(data.get("op"))
    variant = _VARIANTS[op]
    return variant(attr, data.get("val"))


_VARIANTS: dict[PredicateOperator, type[Predicate]] = {
    PredicateOperator.EQ: Equals,
    PredicateOperator.GE: Gte,
    PredicateOperator.LE: Lte,
}
