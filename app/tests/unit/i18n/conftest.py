"""Feature-level fixtures for i18n system tests."""

from datetime import datetime, timezone

import pytest
from babel import Locale

from voxnova.i18n import Translator
from tests.factories.i18n import make_config


@pytest.fixture
def translator():
    """Translator with English primary and Spanish fallback."""
    return Translator(make_config(locale="en", fallback="es"))


@pytest.fixture
def en():
    """Babel English (United States) locale."""
    return Locale.parse("en_US")


@pytest.fixture
def es():
    """Babel Spanish locale."""
    return Locale.parse("es")


@pytest.fixture
def new_year_noon():
    """2000-01-01T12:00:00Z."""
    return datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)
