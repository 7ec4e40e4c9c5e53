"""
Assemble predicates, a projection and a join graph into executable queries.

``assemble`` builds the content query: every join of the graph, the labelled
projection columns, the ANDed predicates and, optionally, ordering and the
page window.  ``assemble_count`` builds the matching count query from the
same predicates and join graph; it never carries ordering or offset/limit,
and only drops joins when asked to and when the join graph proves it safe.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, asc, desc, func, select

from ..exceptions import QueryConstructionError
from ..predicates.ast import PredicateOperator

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from sqlalchemy import ColumnElement, Select

    from ..domain.paging import PageWindow
    from ..predicates.ast import Predicate
    from ..projection import Projection
    from .joins import JoinGraph


class QueryKind(str, Enum):
    CONTENT = "content"
    COUNT = "count"


@dataclass(frozen=True)
class QueryDescriptor:
    """
    An executable statement plus what went into it.

    Attributes:
        statement: The SQLAlchemy ``Select``.
        kind: Content or count query.
        joins: Aliases of the joins applied, in join order.
        predicates: Predicates compiled into the WHERE clause.
        window: Page window applied (content queries only).
    """

    statement: Select[Any]
    kind: QueryKind
    joins: tuple[str, ...] = ()
    predicates: tuple[Predicate, ...] = ()
    window: PageWindow | None = field(default=None)


#: Column comparison applied for each predicate operator.
COMPARISONS: dict[
    PredicateOperator, Callable[[Any, Any], ColumnElement[bool]]
] = {
    PredicateOperator.EQ: operator.eq,
    PredicateOperator.GE: operator.ge,
    PredicateOperator.LE: operator.le,
}


def _compile(graph: JoinGraph, predicate: Predicate) -> ColumnElement[bool]:
    column = graph.resolve(predicate.attr)
    try:
        compare = COMPARISONS[predicate.op]
    except KeyError as e:
        raise QueryConstructionError(
            f"No column comparison for operator {predicate.op!r}"
        ) from e
    return compare(column, predicate.value)


def build_where(
    graph: JoinGraph, predicates: Sequence[Predicate]
) -> ColumnElement[bool] | None:
    """
    Compile *predicates* into one ANDed expression.

    Returns ``None`` for an empty sequence so that no WHERE clause is added.

    Raises:
        QueryConstructionError: If a predicate path is not reachable from
            *graph* or its operator has no column comparison.
    """
    clauses = [_compile(graph, p) for p in predicates]
    if not clauses:
        return None
    if len(clauses) == 1:
        return clauses[0]
    return and_(*clauses)


def _order_clauses(graph: JoinGraph, order_by: Sequence[str]) -> list[Any]:
    clauses: list[Any] = []
    for field_expr in order_by:
        if field_expr.startswith("-"):
            clauses.append(desc(graph.resolve(field_expr[1:])))
        else:
            clauses.append(asc(graph.resolve(field_expr)))
    return clauses


def assemble(
    predicates: Sequence[Predicate],
    projection: Projection[Any],
    graph: JoinGraph,
    window: PageWindow | None = None,
    order_by: Sequence[str] | None = None,
) -> QueryDescriptor:
    """
    Build the content query.

    All joins of *graph* are applied regardless of which aliases the
    predicates touch, so root rows without a related match survive unless
    a predicate on the related entity filters them out.

    Raises:
        QueryConstructionError: If a projection, predicate or ordering path
            is not reachable from *graph*.
    """
    columns = [graph.resolve(path).label(name) for name, path in projection.fields]
    stmt = graph.apply(select(*columns))

    where = build_where(graph, predicates)
    if where is not None:
        stmt = stmt.where(where)

    if order_by:
        stmt = stmt.order_by(*_order_clauses(graph, order_by))

    if window is not None:
        stmt = stmt.offset(window.offset).limit(window.limit)

    return QueryDescriptor(
        statement=stmt,
        kind=QueryKind.CONTENT,
        joins=tuple(j.alias for j in graph.joins),
        predicates=tuple(predicates),
        window=window,
    )


def assemble_count(
    predicates: Sequence[Predicate],
    graph: JoinGraph,
    *,
    elide_joins: bool = False,
) -> QueryDescriptor:
    """
    Build the count query for *predicates* over *graph*.

    With ``elide_joins`` the joins that :meth:`JoinGraph.is_elidable` proves
    safe are left out; every other join is kept.
    """
    joins = graph.joins
    if elide_joins:
        referenced = {p.alias for p in predicates}
        joins = tuple(j for j in joins if not graph.is_elidable(j, referenced))

    stmt = graph.apply(select(func.count()), joins)
    where = build_where(graph, predicates)
    if where is not None:
        stmt = stmt.where(where)

    return QueryDescriptor(
        statement=stmt,
        kind=QueryKind.COUNT,
        joins=tuple(j.alias for j in joins),
        predicates=tuple(predicates),
    )
