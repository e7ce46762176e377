"""Tests for mysqlbuilder.utils.text."""

import pytest

from mysqlbuilder.utils.text import is_blank, is_word_char, parameter_stem


@pytest.mark.parametrize(
    ("field", "expected"),
    [
        ("userName", "user_Name"),
        ("id", "id"),
        ("user_id", "user_id"),
        ("UserName", "User_Name"),
        ("ID", "I_D"),
        ("order-ID", "order__I_D"),
        ("first name", "first_name"),
        ("a.b", "a_b"),
        ("-Name", "__Name"),
        ("price$", "price_"),
        ("createdAtUTC", "created_At_U_T_C"),
        ("x1Y2", "x1_Y2"),
        ("名前", "名前"),
        ("_Hidden", "__Hidden"),
    ],
)
def test_parameter_stem(field: str, expected: str) -> None:
    """Non-word characters become underscores and inner capitals are split."""
    assert parameter_stem(field) == expected


def test_parameter_stem_is_deterministic() -> None:
    """The same field always yields the same stem."""
    assert parameter_stem("userName") == parameter_stem("userName")


def test_parameter_stem_only_splits_ascii_capitals() -> None:
    """Non-ASCII uppercase letters are kept without a separator."""
    assert parameter_stem("straßeÄnderung") == "straßeÄnderung"


@pytest.mark.parametrize(("value", "expected"), [(None, True), ("", True), ("  \t", True), ("a", False), (" a ", False)])
def test_is_blank(value: str, expected: bool) -> None:
    """Blank means missing, empty or whitespace only."""
    assert is_blank(value) is expected


@pytest.mark.parametrize(("char", "expected"), [("a", True), ("Z", True), ("7", True), ("_", True), ("-", False), (" ", False)])
def test_is_word_char(char: str, expected: bool) -> None:
    """Letters, digits and underscores are word characters."""
    assert is_word_char(char) is expected


@pytest.mark.parametrize(
    ("field", "expected"),
    [
        ("éY", "é_Y"),
        ("a‿b", "a‿b"),
        ("x²", "x_"),
        ("ⅧZ", "__Z"),
        ("n٣M", "n٣_M"),
    ],
)
def test_parameter_stem_unicode_word_classes(field: str, expected: str) -> None:
    """Combining marks, connector punctuation and decimal digits are kept; other numerals are not."""
    assert parameter_stem(field) == expected


@pytest.mark.parametrize(
    ("char", "expected"),
    [("\u0301", True), ("\u203f", True), ("\u0663", True), ("\u00b2", False), ("\u2167", False), ("$", False)],
)
def test_is_word_char_unicode_categories(char: str, expected: bool) -> None:
    """Word characters follow the letter, mark, decimal digit and connector categories."""
    assert is_word_char(char) is expected
