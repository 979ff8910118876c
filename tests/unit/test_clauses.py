"""Unit tests for sqlfluent.clauses."""

import dataclasses

import pytest

from sqlfluent.clauses import JoinClause, JoinRegistry, JoinType, LimitSpec, TableRef
from sqlfluent.exceptions import SQLBuilderError


def test_table_ref_rendering() -> None:
    assert TableRef("users", "u").to_sql() == "users u"
    assert TableRef("users").to_sql() == "users"


def test_table_ref_is_immutable() -> None:
    table = TableRef("users", "u")

    with pytest.raises(dataclasses.FrozenInstanceError):
        table.name = "accounts"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("join_type", "expected"),
    [
        (JoinType.INNER, "INNER JOIN t x ON x.id = y.id"),
        (JoinType.LEFT, "LEFT JOIN t x ON x.id = y.id"),
        ("NATURAL LEFT", "NATURAL LEFT JOIN t x ON x.id = y.id"),
    ],
)
def test_join_clause_rendering(join_type: "JoinType | str", expected: str) -> None:
    assert JoinClause("t", "x", "x.id = y.id", join_type).to_sql() == expected


def test_join_type_is_a_string() -> None:
    assert JoinType.FULL == "FULL"
    assert str(JoinType.CROSS) == "CROSS"


def test_join_registry_keeps_first_seen_order() -> None:
    registry = JoinRegistry()
    registry.add(JoinClause("a_table", "a", "a.id = 1"))
    registry.add(JoinClause("b_table", "b", "b.id = 1"))
    registry.add(JoinClause("a_other", "a", "a.id = 2", JoinType.LEFT))

    assert [join.table for join in registry] == ["a_other", "b_table"]
    assert len(registry) == 2
    assert "a" in registry
    assert registry.get("a") == JoinClause("a_other", "a", "a.id = 2", JoinType.LEFT)
    assert registry.get("missing") is None


def test_join_registry_clear_and_copy() -> None:
    registry = JoinRegistry()
    registry.add(JoinClause("a_table", "a", "a.id = 1"))
    clone = registry.copy()

    registry.clear()

    assert not registry
    assert "a" not in registry
    assert [join.alias for join in clone] == ["a"]


def test_limit_spec() -> None:
    assert LimitSpec(5).to_sql() == "LIMIT 0, 5"
    assert LimitSpec(5, 1).to_sql() == "LIMIT 1, 5"


@pytest.mark.parametrize(("count", "offset"), [("5", 0), (5, 1.5), (True, 0)])
def test_limit_spec_rejects_non_integers(count: object, offset: object) -> None:
    with pytest.raises(SQLBuilderError, match="must be an integer"):
        LimitSpec(count, offset)  # type: ignore[arg-type]
