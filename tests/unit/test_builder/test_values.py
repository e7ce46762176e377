"""Tests for value rendering and placeholder naming."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

import pytest

from mysqlbuilder.builder._values import NULL_LITERAL, classify_value, is_numeric, parameter_name, render_bool
from mysqlbuilder.typing import DBNull


@pytest.mark.parametrize("value", [None, DBNull])
@pytest.mark.parametrize("prefix", ["@", "@update_"])
def test_null_values_render_as_null_literal(value: Any, prefix: str) -> None:
    """None and DBNull render as NULL without binding a parameter."""
    rendered = classify_value("name", value, prefix)

    assert rendered.sql == NULL_LITERAL == "NULL"
    assert rendered.parameter is None
    assert not rendered.is_parameter


@pytest.mark.parametrize(("value", "expected"), [(True, "1"), (False, "0")])
@pytest.mark.parametrize("prefix", ["@", "@update_"])
def test_booleans_render_the_same_in_both_clauses(value: bool, expected: str, prefix: str) -> None:
    """Booleans become 1/0 whichever clause they are rendered for."""
    rendered = classify_value("active", value, prefix)

    assert rendered.sql == expected
    assert not rendered.is_parameter


def test_render_bool_matches_integer_conversion() -> None:
    """The boolean literal equals the decimal text of its integer value."""
    for value in (True, False):
        assert render_bool(value) == str(int(value))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (5, "'5'"),
        (0, "'0'"),
        (-42, "'-42'"),
        (3.5, "'3.5'"),
        (Decimal("10.25"), "'10.25'"),
        (12345678901234567890, "'12345678901234567890'"),
    ],
)
def test_numbers_render_as_quoted_literals(value: Any, expected: str) -> None:
    """Numbers are inlined as their quoted string form."""
    rendered = classify_value("amount", value, "@")

    assert rendered.sql == expected
    assert not rendered.is_parameter


def test_bool_is_not_numeric() -> None:
    """bool is an int subclass but never takes the numeric path."""
    assert is_numeric(1)
    assert not is_numeric(True)
    assert not is_numeric("1")
    assert not is_numeric(complex(1, 2))


@pytest.mark.parametrize(
    "value",
    ["alice", "", "5", date(2024, 1, 31), datetime(2024, 1, 31, 12, 30), b"\x00\x01", complex(1, 2)],
)
def test_other_values_bind_parameters(value: Any) -> None:
    """Anything else is bound to a placeholder named after the field."""
    rendered = classify_value("userName", value, "@")

    assert rendered.is_parameter
    assert rendered.sql == rendered.parameter == "@user_Name"
    assert rendered.value is value


def test_update_prefix_is_used_for_placeholder() -> None:
    """The prefix of the clause is placed in front of the stem."""
    assert classify_value("userName", "alice", "@update_").sql == "@update_user_Name"


@pytest.mark.parametrize(
    ("field", "prefix", "expected"),
    [
        ("userName", "@", "@user_Name"),
        ("userName", "@update_", "@update_user_Name"),
        ("id", "@", "@id"),
        ("UserName", "@", "@User_Name"),
        ("created-at", "@", "@created_at"),
    ],
)
def test_parameter_name(field: str, prefix: str, expected: str) -> None:
    """Placeholder names are the prefix followed by the field stem."""
    assert parameter_name(field, prefix) == expected
