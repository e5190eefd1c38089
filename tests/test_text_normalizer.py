"""Tests for text normalization profiles."""

import pytest

from kmyjournal.utils.text_normalizer import (
    escape,
    fold_newlines,
    format_name,
    is_top_level_account,
)


def test_escape_folds_newlines():
    """Newlines become the separator token."""
    assert escape("a\nb") == "a => b"


def test_escape_replaces_special_characters():
    """Colons and semicolons become spaces, then whitespace collapses."""
    assert escape("a:b;c") == "a b c"
    assert escape("x | [y]") == "x y"


def test_escape_trims_and_collapses_whitespace():
    assert escape("  lots   of\tspace  ") == "lots of space"


def test_escape_preserves_case():
    assert escape("Checking Account") == "Checking Account"


def test_escape_custom_separator():
    assert escape("line one\nline two", " / ") == "line one / line two"


@pytest.mark.parametrize("blank", [None, "", "   ", "\t"])
def test_blank_in_blank_out(blank):
    """Blank input is returned unchanged by both profiles."""
    assert escape(blank) == blank
    assert format_name(blank) == blank


def test_escape_only_special_characters_yields_empty():
    assert escape(":;|") == ""


@pytest.mark.parametrize(
    "text",
    ["plain", "Grocery Store", "a => b", "Salary February 2024"],
)
def test_escape_is_idempotent(text):
    assert escape(escape(text)) == escape(text)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Asset", "asset"),
        ("Liability", "liability"),
        ("Equity", "equity"),
        ("Income", "revenue"),
        ("EXPENSE", "expense"),
        ("Checking Account", "checking account"),
        ("Incomes", "incomes"),
    ],
)
def test_format_name(name, expected):
    assert format_name(name) == expected


def test_format_name_maps_after_escaping():
    """Top-level mapping applies to the escaped, trimmed result."""
    assert format_name("  Income: ") == "revenue"


def test_fold_newlines_only_touches_newlines():
    assert fold_newlines("a:b\nc") == "a:b => c"
    assert fold_newlines(None) == ""


def test_is_top_level_account():
    assert is_top_level_account("Income")
    assert not is_top_level_account("Checking")
    assert not is_top_level_account("")
