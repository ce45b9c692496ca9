"""
Pytest configuration and shared fixtures for nordid tests.
"""

from datetime import datetime

import pytest

from nordid.clock import FixedClock


@pytest.fixture
def clock_2019() -> FixedClock:
    """Clock at 2019-08-13, the reference date of the classic test numbers."""
    return FixedClock(datetime(2019, 8, 13, 13, 41, 30))


@pytest.fixture
def clock_2024() -> FixedClock:
    """Clock at 2024-06-01."""
    return FixedClock(datetime(2024, 6, 1, 12, 0, 0))
