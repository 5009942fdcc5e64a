"""Monetary domain package.

Contains the immutable `MonetaryValue` (amount + currency code) and the
`MutableAmount` cell whose sign, integer part and fractional part can be
replaced independently. All amounts are held as `Decimal`.
"""
from decimal import getcontext

# Precision used for all amount arithmetic
DECIMAL_PRECISION = 28

getcontext().prec = DECIMAL_PRECISION
