from decimal import Decimal

import pytest

from monetary_tools.errors import InvalidArgumentError
from monetary_tools.utils.numeric_tools import as_decimal, to_decimal_arg, truncate


def test_as_decimal():
    value = Decimal("1.5")
    assert as_decimal(value) is value
    assert as_decimal(0.1) == Decimal("0.1")
    assert as_decimal("2.50") == Decimal("2.50")
    assert as_decimal(3) == Decimal("3")


@pytest.mark.parametrize("value", [None, True, "abc", [], Decimal("NaN"), float("-inf")])
def test_to_decimal_arg_rejects_invalid_values(value):
    with pytest.raises(InvalidArgumentError, match=r"\$amount"):
        to_decimal_arg(value, "amount")


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("100.75"), Decimal("100")),
        (Decimal("-100.75"), Decimal("-100")),
        (Decimal("0.99"), Decimal("0")),
        (Decimal("-0.99"), Decimal("0")),
        (Decimal("5"), Decimal("5")),
    ],
)
def test_truncate_rounds_toward_zero(value, expected):
    assert truncate(value) == expected
