"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_config,
    make_en_messages,
    make_es_messages,
    make_message,
)

__all__ = [
    "make_catalog",
    "make_config",
    "make_en_messages",
    "make_es_messages",
    "make_message",
]
