"""Fixtures for voxnova.logging tests."""

from unittest.mock import Mock

import pytest

from voxnova.configuration import Settings
from voxnova.logging import setup


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture
def restore_logging():
    """Put the suppressed test configuration back after a test."""
    yield
    with pytest.MonkeyPatch.context() as mp:
        mp.setattr(setup, "_is_test_environment", lambda: True)
        setup.configure_logging()
