"""Value types for the non-WHERE parts of a SELECT statement."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from sqlfluent.exceptions import SQLBuilderError

__all__ = (
    "JoinClause",
    "JoinRegistry",
    "JoinType",
    "LimitSpec",
    "TableRef",
)


class JoinType(str, Enum):
    """Common join keywords. Any other string is accepted as-is by the builder."""

    INNER = "INNER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    FULL = "FULL"
    CROSS = "CROSS"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TableRef:
    """The FROM target of a query."""

    name: str
    alias: Optional[str] = None

    def to_sql(self) -> str:
        if self.alias:
            return f"{self.name} {self.alias}"
        return self.name


@dataclass(frozen=True)
class JoinClause:
    """A single ``<TYPE> JOIN <table> <alias> ON <condition>`` fragment."""

    table: str
    alias: str
    condition: str
    type: Union[JoinType, str] = JoinType.INNER

    def to_sql(self) -> str:
        return f"{self.type!s} JOIN {self.table} {self.alias} ON {self.condition}"


@dataclass(frozen=True)
class LimitSpec:
    """Row count and offset, rendered offset first: ``LIMIT <offset>, <count>``."""

    count: int
    offset: int = 0

    def __post_init__(self) -> None:
        for name in ("count", "offset"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"LIMIT {name} must be an integer, got {type(value).__name__}."
                raise SQLBuilderError(msg)

    def to_sql(self) -> str:
        return f"LIMIT {self.offset}, {self.count}"


class JoinRegistry:
    """Joins in first-seen order, keyed by alias.

    Adding a join under an alias that is already registered replaces the earlier
    definition in its original position.
    """

    __slots__ = ("_entries", "_index")

    def __init__(self) -> None:
        self._entries: list[JoinClause] = []
        self._index: dict[str, int] = {}

    def add(self, join: JoinClause) -> None:
        position = self._index.get(join.alias)
        if position is None:
            self._index[join.alias] = len(self._entries)
            self._entries.append(join)
        else:
            self._entries[position] = join

    def get(self, alias: str) -> Optional[JoinClause]:
        position = self._index.get(alias)
        return None if position is None else self._entries[position]

    def clear(self) -> None:
        self._entries.clear()
        self._index.clear()

    def copy(self) -> "JoinRegistry":
        new_registry = JoinRegistry()
        new_registry._entries = self._entries.copy()
        new_registry._index = self._index.copy()
        return new_registry

    def __contains__(self, alias: object) -> bool:
        return alias in self._index

    def __iter__(self) -> Iterator[JoinClause]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
