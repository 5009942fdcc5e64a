from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable

from monetary_tools.errors import InvalidArgumentError
from monetary_tools.utils.currency_format import format_currency
from monetary_tools.utils.numeric_tools import DecimalLike, IntLike, to_decimal_arg, truncate

logger = logging.getLogger(__name__)


class MutableAmount:
    """Mutable decimal amount with independent setters for sign, integer and fractional part.

    The initial amount must be non-negative. After construction, the setters may
    freely change the sign. All setters return `self`, so calls can be chained:

        MutableAmount("100.75").set_sign(-1).set_integer_part(50).amount  # Decimal("49.25")

    Note that `set_integer_part` keeps the fractional remainder together with its
    sign. Above, -100.75 has remainder -0.75, so the new amount is 50 + (-0.75).
    """

    def __init__(self, initial: DecimalLike):
        """Initialize MutableAmount with $initial amount.

        Args:
            initial: Initial non-negative amount (Decimal-like scalar).

        Raises:
            InvalidArgumentError: If $initial is negative or not convertible to Decimal.
        """
        initial_value = to_decimal_arg(initial, "initial")

        # Raise: initial amount cannot be negative
        if initial_value < 0:
            raise InvalidArgumentError(f"$initial must be >= 0, but provided value is: {initial_value}")

        self._amount = initial_value

    @property
    def amount(self) -> Decimal:
        """Get the current amount."""
        return self._amount

    def set_sign(self, sign: int) -> MutableAmount:
        """Set sign of the amount, keeping its absolute value.

        Args:
            sign (int): 1 for positive, -1 for negative.

        Returns:
            MutableAmount: This instance.

        Raises:
            InvalidArgumentError: If $sign is not 1 or -1.
        """
        # Raise: only +1 and -1 are valid signs
        if isinstance(sign, bool) or sign not in (1, -1):
            raise InvalidArgumentError(f"$sign must be 1 or -1, but provided value is: {sign!r}")

        self._amount = abs(self._amount) * int(sign)
        logger.debug(f"Set sign {sign} on {self!r}")
        return self

    def set_integer_part(self, integer_part: IntLike) -> MutableAmount:
        """Replace the integer part, keeping the current fractional remainder.

        The remainder is `amount - truncate(amount)` and keeps the sign of the
        current amount. The new amount is `integer_part + remainder`.

        Args:
            integer_part: New integer part. Must be a whole number.

        Returns:
            MutableAmount: This instance.

        Raises:
            InvalidArgumentError: If $integer_part is not a whole number.
        """
        integer_value = to_decimal_arg(integer_part, "integer_part")

        # Raise: integer part must not carry a fraction
        if integer_value != truncate(integer_value):
            raise InvalidArgumentError(f"$integer_part must be a whole number, but provided value is: {integer_part!r}")

        remainder = self._amount - truncate(self._amount)
        self._amount = integer_value + remainder
        logger.debug(f"Set integer part {integer_value} on {self!r}")
        return self

    def set_fractional_part(self, fractional_part: DecimalLike) -> MutableAmount:
        """Replace the fractional part, keeping the truncated integer part.

        The new amount is `truncate(amount) + fractional_part`.

        Args:
            fractional_part: New fractional part in range [0, 1).

        Returns:
            MutableAmount: This instance.

        Raises:
            InvalidArgumentError: If $fractional_part is outside [0, 1).
        """
        fractional_value = to_decimal_arg(fractional_part, "fractional_part")

        # Raise: fractional part must be within [0, 1)
        if not (0 <= fractional_value < 1):
            raise InvalidArgumentError(f"$fractional_part must be in range [0, 1), but provided value is: {fractional_part!r}")

        self._amount = truncate(self._amount) + fractional_value
        logger.debug(f"Set fractional part {fractional_value} on {self!r}")
        return self

    def display(self, write: Callable[[str], object] = print) -> None:
        """Write the amount in currency style (e.g. '-$100.75') using $write."""
        write(format_currency(self._amount))

    def __str__(self) -> str:
        return str(self._amount)

    def __repr__(self) -> str:
        """Return string like 'MutableAmount(100.75)'."""
        return f"{self.__class__.__name__}({self._amount})"
