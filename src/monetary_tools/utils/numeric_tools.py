from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_DOWN
from typing import TypeAlias

from monetary_tools.errors import InvalidArgumentError

# Use where optimal type is `int`, but other types are also acceptable (and will be converted to `int`)
IntLike: TypeAlias = int | float | str | Decimal

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def to_decimal_arg(value: DecimalLike, name: str) -> Decimal:
    """Convert argument $value named $name into a finite `Decimal`.

    Args:
        value: Argument value as `DecimalLike`.
        name: Parameter name used in the error message.

    Returns:
        Value converted to `Decimal`.

    Raises:
        InvalidArgumentError: If $value is None, a bool, not convertible, or not finite.
    """
    # Raise: bool is an int subclass, but never a meaningful amount
    if value is None or isinstance(value, bool):
        raise InvalidArgumentError(f"${name} must be a Decimal-like number, but provided value is: {value!r}")

    try:
        result = as_decimal(value)
    except (ValueError, TypeError, InvalidOperation) as e:
        raise InvalidArgumentError(f"${name} cannot be converted to Decimal, provided value is: {value!r}") from e

    # Raise: NaN and Infinity are not amounts
    if not result.is_finite():
        raise InvalidArgumentError(f"${name} must be finite, but provided value is: {value!r}")

    return result


def truncate(value: Decimal) -> Decimal:
    """Discard the fractional portion of $value, rounding toward zero.

    `truncate(Decimal("-100.75"))` returns `Decimal("-100")`.
    """
    return value.to_integral_value(rounding=ROUND_DOWN)
