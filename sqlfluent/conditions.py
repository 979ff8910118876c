"""WHERE clause condition datastructures.

A builder stores its filters as a sequence of :class:`Condition` objects. Each
variant knows how to render its own SQL fragment and which values it binds, so the
builder can produce the WHERE text and the parameter list in the same pass.
"""

from abc import ABC, abstractmethod
from typing import Any

__all__ = (
    "PLACEHOLDER",
    "Condition",
    "EqualsCondition",
    "OpCondition",
    "RawCondition",
)

PLACEHOLDER = "?"


class Condition(ABC):
    """Abstract base class for conditions that can be appended to a WHERE clause."""

    __slots__ = ()

    @abstractmethod
    def to_sql(self) -> str:
        """Render the condition as a SQL boolean fragment."""
        ...

    def extract_parameters(self) -> "tuple[Any, ...]":
        """Extract the values this condition binds, in placeholder order.

        Returns:
            Tuple of positional parameter values.
        """
        return ()

    @abstractmethod
    def get_cache_key(self) -> "tuple[Any, ...]":
        """Return a tuple that identifies the condition's configuration."""
        ...

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Condition):
            return NotImplemented
        return type(self) is type(other) and self.get_cache_key() == other.get_cache_key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.get_cache_key()))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.__slots__)
        return f"{type(self).__name__}({fields})"


class RawCondition(Condition):
    """A complete boolean SQL expression, rendered verbatim with nothing bound.

    Example:
        >>> RawCondition("u.setting_id IS NOT NULL").to_sql()
        'u.setting_id IS NOT NULL'
    """

    __slots__ = ("expression",)

    expression: str

    def __init__(self, expression: str) -> None:
        self.expression = expression

    def to_sql(self) -> str:
        return self.expression

    def get_cache_key(self) -> "tuple[Any, ...]":
        return ("raw", self.expression)


class OpCondition(Condition):
    """Compare a column against one bound value with an explicit operator.

    The operator is passed through literally, so ``"<"``, ``"LIKE"`` or ``"!="`` all
    work without being checked.
    """

    __slots__ = ("column", "operator", "value")

    column: str
    operator: str
    value: Any

    def __init__(self, column: str, operator: str, value: Any) -> None:
        self.column = column
        self.operator = operator
        self.value = value

    def to_sql(self) -> str:
        return f"{self.column} {self.operator} {PLACEHOLDER}"

    def extract_parameters(self) -> "tuple[Any, ...]":
        return (self.value,)

    def get_cache_key(self) -> "tuple[Any, ...]":
        return ("op", self.column, self.operator, self.value)

    def __hash__(self) -> int:
        # Bound values may be unhashable (lists, dicts) and are left out of the hash.
        return hash((type(self).__name__, self.column, self.operator))


class EqualsCondition(OpCondition):
    """Shorthand for ``<column> = ?``."""

    __slots__ = ()

    def __init__(self, column: str, value: Any) -> None:
        super().__init__(column, "=", value)

    def __repr__(self) -> str:
        return f"EqualsCondition(column={self.column!r}, value={self.value!r})"
