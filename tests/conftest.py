"""Shared fixtures for dotconf tests."""

import pytest

from dotconf.config import loaded_env


@pytest.fixture(autouse=True)
def clear_loaded_env():
    """Mirrored .env values are process-wide; isolate every test."""
    loaded_env.clear()
    yield
    loaded_env.clear()
