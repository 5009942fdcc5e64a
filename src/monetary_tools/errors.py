class InvalidArgumentError(ValueError):
    """Raised when an argument violates a precondition of the called operation.

    Examples: empty currency, negative initial amount, sign other than +1/-1,
    fractional part outside [0, 1), or empty input passed to the parser.
    """

    pass


class InvalidFormatError(ValueError):
    """Raised when a string is not a valid decimal literal or has too many '.' separators."""

    pass
