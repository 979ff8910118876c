"""Configuration for query builders."""

from dataclasses import dataclass, replace
from typing import Any, Optional

from sqlfluent.exceptions import ImproperConfigurationError

__all__ = ("DEFAULT_DIALECT", "BuilderConfig")

# ``LIMIT <offset>, <count>`` is only understood by MySQL-family parsers.
DEFAULT_DIALECT = "mysql"


@dataclass(frozen=True)
class BuilderConfig:
    """Configuration for query builder behavior.

    Attributes:
        dialect: sqlglot dialect used when validating compiled statements.
        validate_on_compile: Parse every statement produced by ``build()`` and raise on syntax errors.
        log_statements: Emit compiled SQL and parameters on the ``sqlfluent.builder`` logger at DEBUG level.
    """

    dialect: Optional[str] = DEFAULT_DIALECT
    validate_on_compile: bool = False
    log_statements: bool = False

    def __post_init__(self) -> None:
        if self.dialect is not None and not isinstance(self.dialect, str):
            msg = f"dialect must be a string or None, got {type(self.dialect).__name__}"
            raise ImproperConfigurationError(msg)
        for flag in ("validate_on_compile", "log_statements"):
            if not isinstance(getattr(self, flag), bool):
                msg = f"{flag} must be a bool, got {type(getattr(self, flag)).__name__}"
                raise ImproperConfigurationError(msg)

    def replace(self, **changes: Any) -> "BuilderConfig":
        """Return a copy of this configuration with ``changes`` applied."""
        return replace(self, **changes)
