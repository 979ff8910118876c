"""Shared typing helpers."""

from enum import Enum
from typing import Any, Final, Literal, Union

from msgspec import UnsetType
from typing_extensions import TypeAlias, TypeGuard

__all__ = ("Empty", "EmptyType", "is_empty")


class _EmptyEnum(Enum):
    """A sentinel enum used as placeholder."""

    EMPTY = 0


EmptyType: TypeAlias = Union[Literal[_EmptyEnum.EMPTY], UnsetType]
Empty: Final = _EmptyEnum.EMPTY


def is_empty(value: Any) -> "TypeGuard[EmptyType]":
    """Check whether ``value`` is the ``Empty`` sentinel or ``msgspec.UNSET``."""
    return value is Empty or isinstance(value, UnsetType)
