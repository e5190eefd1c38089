"""Tests for fraction expression evaluation."""

from fractions import Fraction

import pytest

from kmyjournal.domain.errors import DomainError, MalformedExpressionError
from kmyjournal.utils.fraction import evaluate_fraction, parse_fraction, to_decimal


@pytest.mark.parametrize(
    "expression,expected",
    [
        ("400/10", "40.00"),
        ("-5", "-5.00"),
        ("+5", "5.00"),
        ("4250/100", "42.50"),
        ("-4250/100", "-42.50"),
        ("0/1", "0.00"),
        ("7", "7.00"),
    ],
)
def test_evaluate_fraction(expression, expected):
    assert evaluate_fraction(expression) == expected


def test_evaluation_is_left_to_right_without_precedence():
    """1+2/4 is (1+2)/4, not 1+(2/4)."""
    assert evaluate_fraction("1+2/4") == "0.75"
    assert parse_fraction("10-4/3") == Fraction(2)


def test_leading_sign_applies_to_first_number():
    assert parse_fraction("-5/2") == Fraction(-5, 2)


def test_terminating_fraction_keeps_extra_places():
    assert evaluate_fraction("1/8") == "0.125"


def test_non_terminating_fraction_rounds_to_max_scale():
    assert evaluate_fraction("1/3") == "0.33333333"
    assert evaluate_fraction("2/3", max_scale=4) == "0.6667"


def test_min_scale_is_configurable():
    assert evaluate_fraction("5", min_scale=0) == "5"
    assert evaluate_fraction("5", min_scale=3) == "5.000"


def test_to_decimal_is_exact_for_large_values():
    assert str(to_decimal(Fraction(123456789012345, 100))) == "1234567890123.45"


@pytest.mark.parametrize(
    "expression",
    ["12x", "", "1.5", "1*2", "1//2", "5/", "/5", "--5", "1 + 2", None],
)
def test_malformed_expression(expression):
    with pytest.raises(MalformedExpressionError):
        evaluate_fraction(expression)


def test_division_by_zero_is_malformed():
    with pytest.raises(MalformedExpressionError, match="division by zero"):
        evaluate_fraction("5/0")


def test_malformed_expression_carries_expression():
    with pytest.raises(MalformedExpressionError) as excinfo:
        evaluate_fraction("12x")
    assert excinfo.value.expression == "12x"
    assert isinstance(excinfo.value, DomainError)
    assert isinstance(excinfo.value, ValueError)


def test_small_amounts_render_without_exponent():
    assert evaluate_fraction("1/10000000") == "0.0000001"
    assert evaluate_fraction("-1/100000000") == "-0.00000001"
    assert evaluate_fraction("1/300000000") == "0.00000000"


def test_amounts_beyond_default_precision_are_exact():
    assert (
        evaluate_fraction("12345678901234567890123456789012/1")
        == "12345678901234567890123456789012.00"
    )
    assert (
        evaluate_fraction("-123456789012345678901234567890123/100")
        == "-1234567890123456789012345678901.23"
    )
