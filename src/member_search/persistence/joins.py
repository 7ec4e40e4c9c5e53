"""
Join graph: the root entity plus the relationships joined onto it.

Field paths (``"<alias>.<attribute>"``) used by projections, predicates and
ordering are resolved against the graph.  Unknown aliases, relationships or
attributes raise :class:`QueryConstructionError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import RelationshipProperty
from sqlalchemy.orm.interfaces import MANYTOONE

from ..exceptions import QueryConstructionError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqlalchemy import Select


class JoinKind(str, Enum):
    LEFT = "left"
    INNER = "inner"


@dataclass(frozen=True)
class JoinSpec:
    """
    One relationship of the root model joined under *alias*.

    Attributes:
        alias: Name field paths use to address the joined entity.
        relationship: Relationship attribute name on the root model.
        kind: Left (outer) or inner join.
    """

    alias: str
    relationship: str
    kind: JoinKind = JoinKind.LEFT


class JoinGraph:
    """
    The root model and its joins, resolved once at construction.

    Raises:
        QueryConstructionError: If a join names a relationship the root model
            does not have, or two entries share an alias.
    """

    def __init__(
        self,
        root_alias: str,
        root_model: type[Any],
        joins: Sequence[JoinSpec] = (),
    ) -> None:
        self.root_alias = root_alias
        self.root_model = root_model
        self.joins: tuple[JoinSpec, ...] = tuple(joins)
        self._models: dict[str, type[Any]] = {root_alias: root_model}
        self._relationships: dict[str, Any] = {}

        for join in self.joins:
            if join.alias in self._models:
                raise QueryConstructionError(f"Duplicate join alias {join.alias!r}")
            rel_attr = getattr(root_model, join.relationship, None)
            prop = getattr(rel_attr, "property", None)
            if not isinstance(prop, RelationshipProperty):
                raise QueryConstructionError(
                    f"Model {root_model.__name__} has no relationship "
                    f"{join.relationship!r}"
                )
            self._relationships[join.alias] = rel_attr
            self._models[join.alias] = prop.mapper.class_

    @property
    def aliases(self) -> list[str]:
        return list(self._models)

    def model_for(self, alias: str) -> type[Any]:
        try:
            return self._models[alias]
        except KeyError as e:
            raise QueryConstructionError(
                f"Alias {alias!r} is not reachable from {self.root_alias!r}; "
                f"known aliases: {', '.join(self._models)}"
            ) from e

    def resolve(self, path: str) -> Any:
        """Resolve ``"<alias>.<attribute>"`` to a mapped column attribute."""
        alias, sep, attr = path.partition(".")
        if not sep or not attr:
            raise QueryConstructionError(
                f"Field path {path!r} must look like '<alias>.<attribute>'"
            )
        model = self.model_for(alias)
        if attr not in sa_inspect(model).column_attrs:
            raise QueryConstructionError(
                f"Model {model.__name__} has no column attribute {attr!r} "
                f"(from {path!r})"
            )
        return getattr(model, attr)

    def is_elidable(self, join: JoinSpec, referenced_aliases: Iterable[str]) -> bool:
        """
        Whether *join* can be dropped from a count query.

        Only a left join over a many-to-one relationship whose foreign key
        covers the target's whole primary key is safe: it keeps every root
        row and matches at most one related row.  A one-to-many
        relationship declared with ``uselist=False`` does not qualify.
        A join some predicate reads from is never elidable.
        """
        if join.alias in set(referenced_aliases):
            return False
        if join.kind is not JoinKind.LEFT:
            return False
        prop = self._relationships[join.alias].property
        if prop.direction is not MANYTOONE:
            return False
        remote_keys = {remote.key for _, remote in prop.local_remote_pairs}
        target_pk = {col.key for col in prop.mapper.primary_key}
        return remote_keys == target_pk

    def apply(
        self, stmt: Select[Any], joins: Iterable[JoinSpec] | None = None
    ) -> Select[Any]:
        """Select from the root model and add *joins* (default: all)."""
        stmt = stmt.select_from(self.root_model)
        for join in self.joins if joins is None else joins:
            rel_attr = self._relationships[join.alias]
            if join.kind is JoinKind.LEFT:
                stmt = stmt.outerjoin(rel_attr)
            else:
                stmt = stmt.join(rel_attr)
        return stmt
