"""Syntax checking of compiled statements with sqlglot."""

from typing import Optional

import sqlglot
from sqlglot import exp
from sqlglot.errors import ErrorLevel, SqlglotError

from sqlfluent.exceptions import SQLParsingError
from sqlfluent.utils.logging import get_logger

__all__ = ("parse_statement",)

logger = get_logger("validation")


def parse_statement(sql: str, dialect: Optional[str] = None) -> exp.Expression:
    """Parse a compiled statement and make sure it is a single SELECT.

    ``?`` placeholders are understood by sqlglot and parse into
    :class:`sqlglot.exp.Placeholder` nodes.

    Args:
        sql: The statement to parse.
        dialect: sqlglot dialect to read with.

    Raises:
        SQLParsingError: If the statement cannot be parsed or is not a SELECT.

    Returns:
        The parsed sqlglot expression.
    """
    try:
        expression = sqlglot.parse_one(sql, read=dialect, error_level=ErrorLevel.RAISE)
    except SqlglotError as e:
        logger.debug("Failed to parse statement: %s", sql)
        msg = f"Failed to parse compiled statement: {e!s}"
        raise SQLParsingError(msg) from e

    if not isinstance(expression, exp.Select):
        msg = f"Compiled statement must parse to a SELECT, got {type(expression).__name__}."
        raise SQLParsingError(msg)
    return expression
