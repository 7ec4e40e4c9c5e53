"""
Result projection.

A :class:`Projection` names the output fields of a query and the field path
each one reads from the join graph.  The assembler labels every selected
column with the output name; :meth:`Projection.project` then maps a labelled
raw row onto the row type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .domain.rows import ProjectedRow
from .exceptions import QueryConstructionError

if TYPE_CHECKING:
    from collections.abc import Mapping

R = TypeVar("R")


@dataclass(frozen=True)
class Projection(Generic[R]):
    """
    Ordered ``(output_name, field_path)`` pairs plus the row type they build.

    Attributes:
        row_type: Callable accepting every output name as a keyword argument.
        fields: ``(output_name, "<alias>.<attribute>")`` pairs, in select order.
    """

    row_type: type[R]
    fields: tuple[tuple[str, str], ...]

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.fields]

    @property
    def aliases(self) -> set[str]:
        """Join-graph aliases this projection reads from."""
        return {path.split(".", 1)[0] for _, path in self.fields}

    def project(self, raw_row: Mapping[str, Any]) -> R:
        """Map one labelled raw row onto ``row_type``.

        Missing related rows arrive as ``None`` and stay ``None``.

        Raises:
            QueryConstructionError: If the raw row lacks a projected label.
        """
        values: dict[str, Any] = {}
        for name in self.names:
            try:
                values[name] = raw_row[name]
            except KeyError as e:
                raise QueryConstructionError(
                    f"Raw row has no column labelled {name!r}"
                ) from e
        return self.row_type(**values)


MEMBER_TEAM_PROJECTION: Projection[ProjectedRow] = Projection(
    row_type=ProjectedRow,
    fields=(
        ("member_id", "member.id"),
        ("username", "member.username"),
        ("age", "member.age"),
        ("team_id", "team.id"),
        ("team_name", "team.name"),
    ),
)
