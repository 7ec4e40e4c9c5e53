"""Search criteria built per request from external input."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def has_text(value: str | None) -> bool:
    """Return ``True`` when *value* is set and not blank after trimming."""
    return value is not None and value.strip() != ""


class FilterCriteria(BaseModel):
    """Sparse member search criteria.

    Every field is optional and independent. An unset (or, for strings,
    blank) field places no constraint on the result.

    Both snake_case names and camelCase aliases are accepted::

        FilterCriteria(team_name="teamA")
        FilterCriteria.model_validate({"teamName": "teamA", "ageMin": 10})
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    username: str | None = None
    team_name: str | None = None
    age_min: int | None = None
    age_max: int | None = None

    @property
    def present_fields(self) -> list[str]:
        """Names of the fields that contribute a constraint, in field order."""
        present: list[str] = []
        if has_text(self.username):
            present.append("username")
        if has_text(self.team_name):
            present.append("team_name")
        if self.age_min is not None:
            present.append("age_min")
        if self.age_max is not None:
            present.append("age_max")
        return present
