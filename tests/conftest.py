"""
Shared test fixtures for the taskparse test suite.
"""

import pytest

from taskparse.usage import Usage


@pytest.fixture
def usage():
    """A fresh, empty usage registry."""
    return Usage()
