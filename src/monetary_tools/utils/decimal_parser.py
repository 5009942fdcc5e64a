from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation

from monetary_tools.errors import InvalidArgumentError, InvalidFormatError

logger = logging.getLogger(__name__)

# Separator between integer and fractional segments
SEPARATOR = "."

# Fixed-point decimal literal: optional sign, digits, optional '.' with digits (no exponent)
_DECIMAL_LITERAL = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)\s*")


def _parse_literal(literal: str, source: str) -> Decimal:
    """Parse fixed-point decimal $literal, which is a segment of input $source."""
    # Raise: only fixed-point literals are accepted (no exponent, NaN or Infinity)
    if _DECIMAL_LITERAL.fullmatch(literal) is None:
        raise InvalidFormatError(f"Segment '{literal}' of $text '{source}' is not a valid decimal literal")

    try:
        return Decimal(literal.strip())
    except InvalidOperation as e:
        raise InvalidFormatError(f"Segment '{literal}' of $text '{source}' is not a valid decimal literal") from e


def parse_decimal(text: str) -> Decimal:
    """Parse string in format 'integer.fraction' into `Decimal`.

    $text is split on '.'. The first segment is the integer part. The second
    segment, if present, is read as the fractional part '0.<segment>'. Both
    parts are added together, so the sign of the integer part does not apply
    to the fractional part:

        parse_decimal("123.45")  -> Decimal("123.45")
        parse_decimal("7")       -> Decimal("7")
        parse_decimal("-5.25")   -> Decimal("-4.75")   # -5 + 0.25

    Args:
        text (str): String to parse.

    Returns:
        Decimal: Sum of integer and fractional parts.

    Raises:
        InvalidArgumentError: If $text is None or empty.
        InvalidFormatError: If $text has more than one '.' or a segment is not
            a valid decimal literal.
    """
    # Raise: input must be a non-empty string
    if not isinstance(text, str) or not text:
        raise InvalidArgumentError(f"$text must be a non-empty string, but provided value is: {text!r}")

    segments = text.split(SEPARATOR)

    # Raise: at most one separator is allowed
    if len(segments) > 2:
        raise InvalidFormatError(f"$text '{text}' contains more than one '{SEPARATOR}' separator")

    integer_part = _parse_literal(segments[0], text)
    fractional_part = _parse_literal(f"0.{segments[1]}", text) if len(segments) == 2 else Decimal(0)

    result = integer_part + fractional_part
    logger.debug(f"Parsed $text '{text}' into {result}")
    return result


class DecimalParser:
    """Stateless parser of 'integer.fraction' strings.

    Thin object seam over `parse_decimal`, for callers that pass a parser around.
    """

    @staticmethod
    def parse(text: str) -> Decimal:
        """Parse $text into `Decimal`. See `parse_decimal` for rules and errors."""
        return parse_decimal(text)
