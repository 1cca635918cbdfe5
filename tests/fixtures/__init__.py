"""Test fixtures for portfolio_options tests.

This package provides reusable test fixtures for:
- A fixed reference day for DTE arithmetic
- AlertableOption records for alert rule tests
- Raw position records for enrichment tests

Fixtures are auto-discovered by pytest through conftest.py.
"""

from tests.fixtures.option_fixtures import (
    as_of,
    long_call_itm,
    make_option,
    raw_position,
)

__all__ = [
    "as_of",
    "long_call_itm",
    "make_option",
    "raw_position",
]
