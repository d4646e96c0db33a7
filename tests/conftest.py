"""
Shared pytest fixtures and configuration for dirtymap tests.
"""

import pytest

from dirtymap import TrackedMap


@pytest.fixture
def empty_map():
    """Provide a fresh, unseeded TrackedMap."""
    return TrackedMap()


@pytest.fixture
def seeded_map():
    """Provide a TrackedMap seeded with {"a": 1}, nothing dirty."""
    return TrackedMap({"a": 1})
