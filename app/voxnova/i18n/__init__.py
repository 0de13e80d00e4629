"""i18n system - translation resolution and locale-aware formatting.

Resolves dot-notation message keys across a locale fallback chain and
substitutes typed placeholders (plural, number, date, list, enum).

Main components:
- models: Message, Namespace, TranslationCatalog, ParamOptions, I18nConfig
- resolvers: locale chain construction and formatting locale lookup
- interpolation: placeholder substitution
- formatters: Babel-backed plural/number/date/list/enum formatting
- translator: Translator service
- factory: create_translator() and init_i18n()
"""

from voxnova.i18n.exceptions import (
    ArgumentTypeError,
    I18nError,
    InvalidCatalogError,
    MissingParamOptionsError,
)
from voxnova.i18n.factory import create_translator, init_i18n
from voxnova.i18n.interpolation import interpolate
from voxnova.i18n.models import (
    DateOptions,
    I18nConfig,
    ListOptions,
    Message,
    Namespace,
    NumberOptions,
    ParamOptions,
    PluralOptions,
    TranslationCatalog,
)
from voxnova.i18n.resolvers import build_locale_chain, expand_locale
from voxnova.i18n.translator import Translator

__all__ = [
    "ArgumentTypeError",
    "DateOptions",
    "I18nConfig",
    "I18nError",
    "InvalidCatalogError",
    "ListOptions",
    "Message",
    "MissingParamOptionsError",
    "Namespace",
    "NumberOptions",
    "ParamOptions",
    "PluralOptions",
    "TranslationCatalog",
    "Translator",
    "build_locale_chain",
    "create_translator",
    "expand_locale",
    "init_i18n",
    "interpolate",
]
