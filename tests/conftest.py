"""Pytest configuration for life-tools tests."""

from typing import Iterator

import pytest

GLIDER = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]


@pytest.fixture
def glider() -> Iterator[list]:
    yield list(GLIDER)
