__version__ = "0.0.1"

from monetary_tools.domain.monetary.monetary_value import MonetaryValue
from monetary_tools.domain.monetary.mutable_amount import MutableAmount
from monetary_tools.errors import InvalidArgumentError, InvalidFormatError
from monetary_tools.utils.decimal_parser import DecimalParser, parse_decimal

__all__ = [
    "MonetaryValue",
    "MutableAmount",
    "DecimalParser",
    "parse_decimal",
    "InvalidArgumentError",
    "InvalidFormatError",
]
