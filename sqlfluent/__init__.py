"""sqlfluent: fluent SELECT statement building with positional parameters."""

from sqlfluent import exceptions, utils
from sqlfluent.__metadata__ import __version__
from sqlfluent.builder import CompiledQuery, QueryBuilder
from sqlfluent.clauses import JoinClause, JoinType, LimitSpec, TableRef
from sqlfluent.conditions import Condition, EqualsCondition, OpCondition, RawCondition
from sqlfluent.config import BuilderConfig
from sqlfluent.exceptions import ImproperConfigurationError, SQLBuilderError, SQLFluentError, SQLParsingError
from sqlfluent.typing import Empty, EmptyType

__all__ = (
    "BuilderConfig",
    "CompiledQuery",
    "Condition",
    "Empty",
    "EmptyType",
    "EqualsCondition",
    "ImproperConfigurationError",
    "JoinClause",
    "JoinType",
    "LimitSpec",
    "OpCondition",
    "QueryBuilder",
    "RawCondition",
    "SQLBuilderError",
    "SQLFluentError",
    "SQLParsingError",
    "TableRef",
    "__version__",
    "exceptions",
    "utils",
)
