"""Turn sparse ``FilterCriteria`` into an ordered list of predicates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..domain.criteria import has_text
from .ast import Equals, Gte, Lte, Predicate

if TYPE_CHECKING:
    from ..domain.criteria import FilterCriteria

USERNAME = "member.username"
TEAM_NAME = "team.name"
AGE = "member.age"


def build_predicates(criteria: FilterCriteria) -> list[Predicate]:
    """
    Build one predicate per present criteria field.

    Strings are present when non-blank after trimming; the untrimmed value is
    what gets compared.  Numeric bounds are inclusive.  Contradictory bounds
    (``age_min > age_max``) are kept as-is and simply match nothing.
    """
    predicates: list[Predicate] = []
    if has_text(criteria.username):
        predicates.append(Equals(USERNAME, criteria.username))
    if has_text(criteria.team_name):
        predicates.append(Equals(TEAM_NAME, criteria.team_name))
    if criteria.age_min is not None:
        predicates.append(Gte(AGE, criteria.age_min))
    if criteria.age_max is not None:
        predicates.append(Lte(AGE, criteria.age_max))
    return predicates
