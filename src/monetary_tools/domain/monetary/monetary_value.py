from __future__ import annotations

from decimal import Decimal

from monetary_tools.errors import InvalidArgumentError
from monetary_tools.utils.numeric_tools import DecimalLike, to_decimal_arg


class MonetaryValue:
    """Immutable monetary amount paired with a currency code.

    The currency code is any non-empty string. It is not checked against a list
    of known codes, and it is kept exactly as provided (no upper-casing or trimming).
    The amount is not restricted: zero and negative values are allowed.

    Attributes:
        amount (Decimal): Signed amount.
        currency (str): Currency code (e.g., "USD").
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: DecimalLike, currency: str):
        """Initialize MonetaryValue with $amount and $currency.

        Args:
            amount: Numeric amount (Decimal-like scalar).
            currency (str): Non-empty currency code.

        Raises:
            InvalidArgumentError: If $currency is None or empty, or if $amount cannot
                be converted to a finite Decimal.
        """
        # Raise: currency must be a non-empty string
        if not isinstance(currency, str) or not currency:
            raise InvalidArgumentError(f"$currency must be a non-empty string, but provided value is: {currency!r}")

        object.__setattr__(self, "_amount", to_decimal_arg(amount, "amount"))
        object.__setattr__(self, "_currency", currency)

    def __setattr__(self, name, value) -> None:
        raise AttributeError(f"Cannot set ${name} because `{self.__class__.__name__}` is immutable")

    def __delattr__(self, name) -> None:
        raise AttributeError(f"Cannot delete ${name} because `{self.__class__.__name__}` is immutable")

    @property
    def amount(self) -> Decimal:
        """Get the amount."""
        return self._amount

    @property
    def currency(self) -> str:
        """Get the currency code."""
        return self._currency

    def sign(self) -> int:
        """Return polarity of $amount: 1 if positive, -1 if negative, 0 if zero."""
        if self._amount > 0:
            return 1
        if self._amount < 0:
            return -1
        return 0

    def describe(self) -> str:
        """Return string like '100.75 USD'.

        Uses the default textual form of `Decimal`, so no thousands separators
        and no currency symbol are added.
        """
        return f"{self._amount} {self._currency}"

    def __eq__(self, other) -> bool:
        """Check equality with another MonetaryValue."""
        if not isinstance(other, MonetaryValue):
            return False
        return self.amount == other.amount and self.currency == other.currency

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self.amount, self.currency))

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        """Return string like 'MonetaryValue(100.75, USD)'."""
        return f"{self.__class__.__name__}({self.amount}, {self.currency})"
