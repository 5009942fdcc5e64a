"""
Only the root tests/ directory carries an __init__.py.

Subdirectories (unit/, integration/, ...) are namespace packages (PEP 420), so test
modules get unique dotted names like `tests.unit.monetary_tools.utils.test_decimal_parser`
without extra __init__.py files. Keep test file names unique across the tree anyway.
"""
