"""Shared pytest fixtures."""

import pytest

from voxnova.configuration import Settings


@pytest.fixture
def test_settings(monkeypatch):
    """Settings built from a clean environment."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("VOXNOVA_ENVIRONMENT", raising=False)
    return Settings(_env_file=None)
