from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, getcontext, localcontext

from monetary_tools.utils.numeric_tools import DecimalLike, as_decimal

# Symbol and number of decimal places used when none are provided
DEFAULT_CURRENCY_SYMBOL = "$"
DEFAULT_CURRENCY_DECIMALS = 2


def format_currency(
    value: DecimalLike,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
    decimals: int = DEFAULT_CURRENCY_DECIMALS,
) -> str:
    """Format $value in currency style, like '-$1,234.50'.

    The value is rounded half away from zero to $decimals places and grouped
    with thousands separators. A negative value gets a leading '-' before
    $symbol. A value that rounds to zero is printed without sign.

    Args:
        value: Amount to format (Decimal-like scalar).
        symbol (str): Currency symbol placed before the digits.
        decimals (int): Number of decimal places (0 or more).

    Returns:
        str: Formatted amount.

    Raises:
        ValueError: If $decimals is negative.
    """
    if decimals < 0:
        raise ValueError(f"$decimals must be >= 0, but provided value is: {decimals}")

    decimal_value = as_decimal(value)

    # Precision must hold all integer digits plus $decimals, or quantize fails
    with localcontext() as ctx:
        ctx.prec = max(getcontext().prec, decimal_value.adjusted() + decimals + 2)
        quantum = Decimal(1).scaleb(-decimals)
        rounded = decimal_value.quantize(quantum, rounding=ROUND_HALF_UP)

        sign = "-" if rounded < 0 else ""
        return f"{sign}{symbol}{abs(rounded):,.{decimals}f}"
