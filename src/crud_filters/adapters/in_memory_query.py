"""
In-Memory Query.

A query builder for development and testing. Records the clauses filter
logic adds and evaluates them against a list of row dicts, so filter
behavior can be checked without an ORM.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

Row = Dict[str, Any]


def _like(left: Any, pattern: Any) -> bool:
    if left is None:
        return False
    return str(pattern).strip("%").lower() in str(left).lower()


OPERATORS: Dict[str, Callable[[Any, Any], bool]] = {
    "=": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "like": _like,
}


@dataclass(frozen=True)
class Clause:
    """One recorded restriction."""

    kind: str
    column: str
    args: Tuple[Any, ...] = ()

    def matches(self, row: Row) -> bool:
        value = row.get(self.column)
        if self.kind == "where":
            op, expected = self.args
            if value is None and op != "=":
                return False
            return OPERATORS[op](value, expected)
        if self.kind == "where_in":
            return value in self.args[0]
        if self.kind == "where_between":
            low, high = self.args
            return value is not None and low <= value <= high
        if self.kind == "where_null":
            return value is None
        if self.kind == "where_not_null":
            return value is not None
        raise ValueError(f"Unknown clause kind: {self.kind}")


class InMemoryQuery:
    """Recording query builder over an in-memory row list."""

    def __init__(self, rows: Optional[Iterable[Row]] = None) -> None:
        """
        Initialize query.

        Args:
            rows: Rows the clauses are evaluated against
        """
        self._rows: List[Row] = list(rows or [])
        self._clauses: List[Clause] = []

    def where(self, column: str, value: Any, op: str = "=") -> "InMemoryQuery":
        """Restrict to rows where ``column <op> value``."""
        if op not in OPERATORS:
            raise ValueError(f"Unsupported operator: {op}")
        self._clauses.append(Clause("where", column, (op, value)))
        return self

    def where_in(self, column: str, values: Iterable[Any]) -> "InMemoryQuery":
        self._clauses.append(Clause("where_in", column, (tuple(values),)))
        return self

    def where_between(self, column: str, low: Any, high: Any) -> "InMemoryQuery":
        self._clauses.append(Clause("where_between", column, (low, high)))
        return self

    def where_null(self, column: str) -> "InMemoryQuery":
        self._clauses.append(Clause("where_null", column))
        return self

    def where_not_null(self, column: str) -> "InMemoryQuery":
        self._clauses.append(Clause("where_not_null", column))
        return self

    @property
    def clauses(self) -> List[Clause]:
        """Recorded clauses, in order."""
        return list(self._clauses)

    def has_clause(self, column: str, kind: Optional[str] = None) -> bool:
        """Check whether any clause restricts column (optionally of one kind)."""
        return any(
            c.column == column and (kind is None or c.kind == kind)
            for c in self._clauses
        )

    def get(self) -> List[Row]:
        """Rows matching every clause."""
        return [row for row in self._rows if all(c.matches(row) for c in self._clauses)]

    def count(self) -> int:
        return len(self.get())
