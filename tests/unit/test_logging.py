"""Unit tests for sqlfluent.utils.logging."""

import json
import logging

import pytest

from sqlfluent import BuilderConfig, QueryBuilder
from sqlfluent.utils.logging import StatementFormatter, get_logger, log_with_context


def test_get_logger_namespacing() -> None:
    assert get_logger().name == "sqlfluent"
    assert get_logger("builder").name == "sqlfluent.builder"
    assert get_logger("sqlfluent.validation").name == "sqlfluent.validation"


def test_statement_formatter_merges_fields() -> None:
    record = logging.LogRecord("sqlfluent.builder", logging.DEBUG, __file__, 10, "compiled %s", ("ok",), None)
    record.extra_fields = {"sql": "SELECT * FROM users WHERE id = ?", "parameter_count": 1}

    payload = json.loads(StatementFormatter().format(record))

    assert payload["message"] == "compiled ok"
    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "sqlfluent.builder"
    assert payload["sql"] == "SELECT * FROM users WHERE id = ?"
    assert payload["parameter_count"] == 1


def test_statement_formatter_without_fields() -> None:
    record = logging.LogRecord("sqlfluent", logging.INFO, __file__, 10, "plain", (), None)

    payload = json.loads(StatementFormatter().format(record))

    assert payload["message"] == "plain"
    assert "sql" not in payload


def test_formatter_renders_builder_records(caplog: pytest.LogCaptureFixture) -> None:
    """Test a compiled statement record serializes with its statement fields."""
    builder = QueryBuilder("users", "u", config=BuilderConfig(log_statements=True)).filter("u.id", ">", 3)

    with caplog.at_level(logging.DEBUG, logger="sqlfluent"):
        builder.compile()

    record = next(record for record in caplog.records if record.name == "sqlfluent.builder")
    payload = json.loads(StatementFormatter().format(record))
    assert payload["sql"] == "SELECT * FROM users u WHERE u.id > ?"
    assert payload["parameter_count"] == 1


def test_log_with_context_respects_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("context")

    with caplog.at_level(logging.INFO, logger="sqlfluent"):
        log_with_context(logger, logging.DEBUG, "hidden", value=1)
        log_with_context(logger, logging.INFO, "shown", value=2)

    records = [record for record in caplog.records if record.name == "sqlfluent.context"]
    assert [record.getMessage() for record in records] == ["shown"]
    assert records[0].extra_fields == {"value": 2}  # type: ignore[attr-defined]
