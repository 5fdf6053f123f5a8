"""Query Filters — translates core FilterClauses into SQLAlchemy WHERE conditions.

Invariants:
    - CONTAINS is lower(column) LIKE %value% with LIKE wildcards escaped
    - Every clause field must be present in the resolver map (KeyError otherwise:
      a programming error, not user input)
    - Conditions are returned as a list, ANDed by the caller via .where(*conditions)

Design Decisions:
    - A resolver wraps the column predicate, so relationship hops (order → customer,
      order → any line → product) stay out of the comparison logic
"""

from typing import Callable, Mapping, Sequence

from sqlalchemy import func
from sqlalchemy.sql.elements import ColumnElement

from backoffice.core.search_filters import FilterClause, FilterOp

Predicate = Callable[[ColumnElement], ColumnElement]
Resolver = Callable[[Predicate], ColumnElement]


def column(col) -> Resolver:
    """Resolver for a column on the searched entity itself."""
    return lambda predicate: predicate(col)


def compare(col, clause: FilterClause) -> ColumnElement:
    if clause.op is FilterOp.CONTAINS:
        return func.lower(col).contains(clause.value, autoescape=True)
    if clause.op is FilterOp.GTE:
        return col >= clause.value
    if clause.op is FilterOp.LTE:
        return col <= clause.value
    return col == clause.value


def build_conditions(
    clauses: Sequence[FilterClause], resolvers: Mapping[str, Resolver],
) -> list[ColumnElement]:
    conditions = []
    for clause in clauses:
        resolve = resolvers[clause.field]
        conditions.append(resolve(lambda col, c=clause: compare(col, c)))
    return conditions
