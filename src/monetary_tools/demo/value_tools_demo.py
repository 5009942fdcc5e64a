from __future__ import annotations

import logging
import os
from decimal import Decimal
from typing import Callable

from dotenv import load_dotenv

from monetary_tools.domain.monetary.monetary_value import MonetaryValue
from monetary_tools.domain.monetary.mutable_amount import MutableAmount
from monetary_tools.errors import InvalidArgumentError, InvalidFormatError
from monetary_tools.utils.decimal_parser import parse_decimal


logger = logging.getLogger(__name__)

# Environment variable with the logging level (can be set in .env file)
LOG_LEVEL_ENV_VAR = "VALUE_TOOLS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

# Inputs for the parser demonstration
PARSE_INPUTS: list[str] = ["123.45", "7", "-5.25", "123.45.67", "12a.5", ""]


def configure_logging() -> None:
    # load settings from .env file (if present)
    load_dotenv()
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format="%(levelname)s %(name)s: %(message)s")


def demo_monetary_value(out: Callable[[str], object] = print) -> None:
    for value in [MonetaryValue(Decimal("100.75"), "USD"), MonetaryValue(Decimal("-20"), "EUR"), MonetaryValue(0, "JPY")]:
        out(f"{value.describe()} (sign: {value.sign()})")

    # Empty currency is rejected
    try:
        MonetaryValue(Decimal("1"), "")
    except InvalidArgumentError as e:
        out(f"Error: {e}")


def demo_decimal_parser(out: Callable[[str], object] = print) -> None:
    for text in PARSE_INPUTS:
        try:
            out(f"parse('{text}') = {parse_decimal(text)}")
        except (InvalidArgumentError, InvalidFormatError) as e:
            out(f"parse('{text}') failed: {e}")


def demo_mutable_amount(out: Callable[[str], object] = print) -> None:
    amount = MutableAmount(Decimal("100.75"))
    amount.display(out)

    amount.set_sign(-1)
    amount.display(out)

    # Fractional remainder (-0.75) keeps the sign of the previous amount
    amount.set_integer_part(50)
    amount.display(out)

    amount.set_fractional_part(Decimal("0.5"))
    amount.display(out)

    for invalid in [Decimal("1.0"), Decimal("-0.1")]:
        try:
            amount.set_fractional_part(invalid)
        except InvalidArgumentError as e:
            out(f"Error: {e}")


def run(out: Callable[[str], object] = print) -> None:
    logger.info("Running value tools demo")

    out("--- MonetaryValue ---")
    demo_monetary_value(out)

    out("--- DecimalParser ---")
    demo_decimal_parser(out)

    out("--- MutableAmount ---")
    demo_mutable_amount(out)

    logger.info("Value tools demo finished")

