from decimal import Decimal

import pytest

from monetary_tools.errors import InvalidArgumentError, InvalidFormatError
from monetary_tools.utils.decimal_parser import DecimalParser, parse_decimal


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("7", Decimal("7")),
        ("0.5", Decimal("0.5")),
        ("+3.10", Decimal("3.10")),
        ("7.", Decimal("7")),
        ("007.0500", Decimal("7.05")),
    ],
)
def test_parse_valid_input(text, expected):
    assert parse_decimal(text) == expected


def test_parse_keeps_fractional_digits():
    # No rounding: all fractional digits are kept
    assert parse_decimal("1.123456789012345678") == Decimal("1.123456789012345678")


def test_parse_adds_fractional_part_to_negative_integer_part():
    # Integer part -5 plus fractional part 0.25
    assert parse_decimal("-5.25") == Decimal("-4.75")
    assert parse_decimal("-0.5") == Decimal("0.5")


@pytest.mark.parametrize("text", ["", None])
def test_parse_empty_or_missing_input(text):
    with pytest.raises(InvalidArgumentError):
        parse_decimal(text)


@pytest.mark.parametrize(
    "text",
    [
        "123.45.67",
        "1..2",
        "...",
    ],
)
def test_parse_too_many_separators(text):
    with pytest.raises(InvalidFormatError):
        parse_decimal(text)


@pytest.mark.parametrize(
    "text",
    [
        "abc",
        "12a.5",
        "12.5a",
        ".5",
        "1.-5",
        "1.+5",
        "1e3",
        "1.5e3",
        "NaN",
        "Infinity",
        "1,000.00",
        "-",
    ],
)
def test_parse_invalid_literal(text):
    with pytest.raises(InvalidFormatError):
        parse_decimal(text)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_decimal("")
    with pytest.raises(ValueError):
        parse_decimal("x")


def test_decimal_parser_delegates_to_parse_decimal():
    assert DecimalParser.parse("123.45") == Decimal("123.45")
    assert DecimalParser().parse("-5.25") == Decimal("-4.75")
    with pytest.raises(InvalidFormatError):
        DecimalParser.parse("1.2.3")
