"""Voxnova - locale-chain message resolution with CLDR-aware formatting.

Example:
    from voxnova import init_i18n

    t = init_i18n({"locale": "en", "translations": {"en": {...}}, "fallback": "en"})
    t("greeting", {"name": "John"})
"""

from voxnova.i18n import (
    ArgumentTypeError,
    I18nConfig,
    I18nError,
    InvalidCatalogError,
    Message,
    MissingParamOptionsError,
    Translator,
    create_translator,
    init_i18n,
)

__all__ = [
    "ArgumentTypeError",
    "I18nConfig",
    "I18nError",
    "InvalidCatalogError",
    "Message",
    "MissingParamOptionsError",
    "Translator",
    "create_translator",
    "init_i18n",
]
