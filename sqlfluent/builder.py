"""Fluent SELECT query builder with positional parameter binding.

This module provides a chainable interface for accumulating the pieces of a SELECT
statement and compiling them into SQL text with ``?`` placeholders plus the ordered
list of values to bind to them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, NoReturn, Optional, Union

from sqlglot import exp
from typing_extensions import Self

from sqlfluent.clauses import JoinClause, JoinRegistry, JoinType, LimitSpec, TableRef
from sqlfluent.conditions import Condition, EqualsCondition, OpCondition, RawCondition
from sqlfluent.config import BuilderConfig
from sqlfluent.exceptions import SQLBuilderError
from sqlfluent.typing import Empty, EmptyType, is_empty
from sqlfluent.utils.logging import get_logger, log_with_context
from sqlfluent.validation import parse_statement

__all__ = (
    "CompiledQuery",
    "QueryBuilder",
)

logger = get_logger("builder")


@dataclass(frozen=True)
class CompiledQuery:
    """A compiled SQL statement with its positional parameters."""

    sql: str
    parameters: "tuple[Any, ...]" = field(default_factory=tuple)

    def __str__(self) -> str:
        return self.sql


class QueryBuilder:
    """Chainable builder for SELECT statements.

    Every configuration method mutates the builder and returns it, so calls can be
    chained. Fragments are trusted: column names, operators, join conditions and
    ordering expressions are written into the output exactly as given. Only filter
    values are bound as parameters.

    Example:
        >>> query = QueryBuilder("users", "u").filter("username", "admin")
        >>> query.compile()
        'SELECT * FROM users u WHERE username = ?'
        >>> query.params()
        ['admin']

    Args:
        table: Main table name.
        alias: Optional alias for the main table.
        config: Builder configuration. Defaults to :class:`BuilderConfig`.
    """

    __slots__ = (
        "_conditions",
        "_group",
        "_having",
        "_joins",
        "_limit",
        "_orders",
        "_selects",
        "_table",
        "config",
    )

    def __init__(
        self,
        table: Optional[str] = None,
        alias: Optional[str] = None,
        config: Optional[BuilderConfig] = None,
    ) -> None:
        self.config = config or BuilderConfig()
        self._table: Optional[TableRef] = None
        self._joins = JoinRegistry()
        self._conditions: list[Condition] = []
        self._orders: list[str] = []
        self._selects: list[str] = []
        self._group: Optional[str] = None
        self._having: Optional[str] = None
        self._limit: Optional[LimitSpec] = None
        if table is not None:
            self._table = TableRef(table, alias)

    @staticmethod
    def _raise_sql_builder_error(message: str, cause: Optional[BaseException] = None) -> NoReturn:
        """Helper to raise SQLBuilderError, potentially with a cause.

        Args:
            message: The error message.
            cause: The optional original exception to chain.

        Raises:
            SQLBuilderError: Always raises this exception.
        """
        raise SQLBuilderError(message) from cause

    @property
    def table(self) -> Optional[TableRef]:
        return self._table

    @property
    def conditions(self) -> "tuple[Condition, ...]":
        return tuple(self._conditions)

    @property
    def joins(self) -> "tuple[JoinClause, ...]":
        return tuple(self._joins)

    def from_(self, table: str, alias: Optional[str] = None) -> Self:
        """Set the FROM target, replacing any previous one.

        Args:
            table: Table name.
            alias: Optional table alias.

        Returns:
            The current builder instance for method chaining.
        """
        self._table = TableRef(table, alias)
        return self

    def filter(
        self,
        column: str,
        operator: "Union[str, Any, EmptyType]" = Empty,
        value: "Union[Any, EmptyType]" = Empty,
    ) -> Self:
        """Add a WHERE condition.

        The shape of the condition depends on how many arguments are given:

        - ``filter("u.setting_id IS NOT NULL")`` adds a raw condition, nothing is bound.
        - ``filter("username", "admin")`` adds ``username = ?`` and binds ``"admin"``.
        - ``filter("date_created", "<", 100)`` adds ``date_created < ?`` and binds ``100``.

        Conditions are combined with ``AND`` in the order they were added.

        Args:
            column: Column name, or a complete boolean expression when used alone.
            operator: Comparison operator, or the value when ``value`` is omitted.
            value: Value to bind.

        Returns:
            The current builder instance for method chaining.
        """
        if is_empty(operator):
            if not is_empty(value):
                self._raise_sql_builder_error("filter() needs an operator when called with a value keyword.")
            return self.where_raw(column)
        if is_empty(value):
            return self.where_eq(column, operator)
        return self.where_op(column, operator, value)

    def where_raw(self, expression: str) -> Self:
        """Add a verbatim boolean expression to the WHERE clause."""
        return self.add_condition(RawCondition(expression))

    def where_eq(self, column: str, value: Any) -> Self:
        """Add ``<column> = ?`` to the WHERE clause and bind ``value``."""
        return self.add_condition(EqualsCondition(column, value))

    def where_op(self, column: str, operator: str, value: Any) -> Self:
        """Add ``<column> <operator> ?`` to the WHERE clause and bind ``value``."""
        return self.add_condition(OpCondition(column, operator, value))

    def add_condition(self, condition: Condition) -> Self:
        """Append a pre-built condition to the WHERE clause.

        Raises:
            SQLBuilderError: If ``condition`` is not a :class:`Condition`.
        """
        if not isinstance(condition, Condition):
            msg = f"Expected a Condition, got {type(condition).__name__}."
            self._raise_sql_builder_error(msg)
        self._conditions.append(condition)
        return self

    def join(
        self,
        table: str,
        alias: str,
        condition: str,
        type: "Union[JoinType, str]" = JoinType.INNER,  # noqa: A002
    ) -> Self:
        """Add a join, replacing any earlier join registered under the same alias.

        Args:
            table: Table to join.
            alias: Alias for the joined table. Joins are keyed by alias.
            condition: Raw ``ON`` condition.
            type: Join keyword, e.g. ``"LEFT"`` or :attr:`JoinType.LEFT`.

        Returns:
            The current builder instance for method chaining.
        """
        self._joins.add(JoinClause(table=table, alias=alias, condition=condition, type=type))
        return self

    def inner_join(self, table: str, alias: str, condition: str) -> Self:
        return self.join(table, alias, condition, JoinType.INNER)

    def left_join(self, table: str, alias: str, condition: str) -> Self:
        return self.join(table, alias, condition, JoinType.LEFT)

    def right_join(self, table: str, alias: str, condition: str) -> Self:
        return self.join(table, alias, condition, JoinType.RIGHT)

    def full_join(self, table: str, alias: str, condition: str) -> Self:
        return self.join(table, alias, condition, JoinType.FULL)

    def order(self, order: str) -> Self:
        """Append an ORDER BY fragment such as ``"username ASC"``."""
        self._orders.append(order)
        return self

    def limit(self, count: int, offset: int = 0) -> Self:
        """Set LIMIT and offset, replacing any previous limit.

        Example:
            ``limit(5)`` renders ``LIMIT 0, 5`` and ``limit(5, 1)`` renders ``LIMIT 1, 5``.

        Raises:
            SQLBuilderError: If ``count`` or ``offset`` is not an integer.
        """
        self._limit = LimitSpec(count, offset)
        return self

    def group(self, group: str) -> Self:
        """Set the GROUP BY expression, replacing any previous one."""
        self._group = group
        return self

    def having(self, having: str) -> Self:
        """Set the HAVING expression, replacing any previous one."""
        self._having = having
        return self

    def select(self, column: str) -> Self:
        """Add one column expression to the select list."""
        self._selects.append(column)
        return self

    def _compile_where(self) -> "tuple[Optional[str], list[Any]]":
        if not self._conditions:
            return None, []
        fragments: list[str] = []
        parameters: list[Any] = []
        for condition in self._conditions:
            fragments.append(condition.to_sql())
            parameters.extend(condition.extract_parameters())
        return " AND ".join(fragments), parameters

    def _render(self) -> CompiledQuery:
        parts = ["SELECT " + (", ".join(self._selects) if self._selects else "*")]
        if self._table is not None:
            parts.append(f"FROM {self._table.to_sql()}")
        parts.extend(join.to_sql() for join in self._joins)

        where, parameters = self._compile_where()
        if where:
            parts.append(f"WHERE {where}")
        if self._group:
            parts.append(f"GROUP BY {self._group}")
        if self._having:
            parts.append(f"HAVING {self._having}")
        if self._orders:
            parts.append("ORDER BY " + ", ".join(self._orders))
        if self._limit is not None:
            parts.append(self._limit.to_sql())

        return CompiledQuery(sql=" ".join(parts), parameters=tuple(parameters))

    def build(self) -> CompiledQuery:
        """Compile the statement text and its parameters in one pass.

        Building does not change the builder, so it can be called any number of times.

        Raises:
            SQLParsingError: If ``config.validate_on_compile`` is set and the result does not parse.

        Returns:
            CompiledQuery: The SQL string and the parameters in placeholder order.
        """
        query = self._render()

        if self.config.log_statements:
            log_with_context(
                logger,
                logging.DEBUG,
                "Compiled SELECT statement",
                sql=query.sql,
                parameter_count=len(query.parameters),
            )
        if self.config.validate_on_compile:
            parse_statement(query.sql, self.config.dialect)
        return query

    def compile(self) -> str:
        """Compile the builder into a SQL string with ``?`` placeholders.

        Returns:
            The SQL statement.
        """
        return self.build().sql

    def to_sql(self) -> str:
        """Alias of :meth:`compile`."""
        return self.compile()

    def params(self) -> "list[Any]":
        """Return the values bound by the current filters, in placeholder order."""
        return self._compile_where()[1]

    def validate(self, dialect: Optional[str] = None) -> exp.Expression:
        """Parse the compiled statement with sqlglot.

        Args:
            dialect: Dialect to parse with. Defaults to ``config.dialect``.

        Raises:
            SQLParsingError: If the compiled statement is not a valid SELECT.

        Returns:
            The parsed sqlglot expression.
        """
        return parse_statement(self.build().sql, dialect or self.config.dialect)

    def reset(self) -> None:
        """Return the builder to an empty state.

        The table reference is cleared too; call :meth:`from_` before compiling a
        statement that needs a FROM clause.
        """
        self._table = None
        self._joins.clear()
        self._conditions.clear()
        self._orders.clear()
        self._selects.clear()
        self._group = None
        self._having = None
        self._limit = None

    def copy(self) -> "QueryBuilder":
        """Return an independent builder with the same state and configuration."""
        new_builder = QueryBuilder(config=self.config)
        new_builder._table = self._table
        new_builder._joins = self._joins.copy()
        new_builder._conditions = self._conditions.copy()
        new_builder._orders = self._orders.copy()
        new_builder._selects = self._selects.copy()
        new_builder._group = self._group
        new_builder._having = self._having
        new_builder._limit = self._limit
        return new_builder

    def __str__(self) -> str:
        return self.compile()

    def __repr__(self) -> str:
        query = self._render()
        return f"{type(self).__name__}({query.sql!r}, params={list(query.parameters)!r})"
