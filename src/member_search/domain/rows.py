"""Flat member/team result row."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectedRow:
    """A member joined to at most one team.

    ``team_id`` and ``team_name`` are ``None`` when the member has no team.
    """

    member_id: int
    username: str
    age: int | None
    team_id: int | None = None
    team_name: str | None = None
