"""
Shared test fixtures and utilities for the linepath test suite.
"""

import pytest

from linepath import PathParser
from linepath.exceptions import ErrorLevel


@pytest.fixture
def parser():
    """Parser producing user-level error messages."""
    return PathParser()


@pytest.fixture
def developer_parser():
    """Parser producing developer-level error messages with source echo."""
    return PathParser(error_level=ErrorLevel.DEVELOPER)


@pytest.fixture
def triangle(parser):
    """Closed triangle used by the sequence operation tests."""
    return parser.parse("M 50 50 L 150 50 L 100 150 z")
