"""Placeholder substitution for message templates.

Placeholders are written ``{name}`` or ``{name:type}``. Arguments are applied
one at a time, in the order given, to the partially substituted template:
the typed placeholder for an argument wins over the untyped one, and every
occurrence of the matched placeholder is replaced.
"""

import re
from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Dict, Optional, Tuple

from babel import Locale

from voxnova.i18n.exceptions import ArgumentTypeError, MissingParamOptionsError
from voxnova.i18n.formatters import (
    format_date,
    format_enum,
    format_list,
    format_number,
    format_plural,
)
from voxnova.i18n.models import ParamOptions
from voxnova.i18n.resolvers import resolve_formatting_locale
from voxnova.logging import get_module_logger

logger = get_module_logger()

NUMBER_TYPES = (int, float, Decimal)

Options = Optional[ParamOptions]


def find_placeholder(template: str, name: str) -> Tuple[str, Optional[str]]:
    """Locate the placeholder for ``name`` in ``template``.

    Returns:
        The placeholder text to replace and its declared type. When no typed
        placeholder exists this is ``("{name}", None)``, whether or not the
        untyped form is present.
    """
    match = re.search(r"\{" + re.escape(name) + r":([^}]+)\}", template)
    if match:
        return match.group(0), match.group(1)
    return f"{{{name}}}", None


def interpolate(
    template: str,
    options: Optional[ParamOptions],
    args: Mapping[str, Any],
    locale: str,
) -> str:
    """Replace every placeholder named in ``args`` with its formatted value.

    Arguments with no matching placeholder are ignored.

    Args:
        template: Message template.
        options: Formatting metadata of the message, if any.
        args: Parameter name -> value.
        locale: Locale tag of the catalog the template came from.

    Returns:
        The substituted message.

    Raises:
        ArgumentTypeError: If a plural, number, date or list placeholder
            receives a value of the wrong kind.
        MissingParamOptionsError: If a plural placeholder has no plural
            options declared.
    """
    result = template
    formatting_locale: Optional[Locale] = None

    for name, value in args.items():
        name = str(name)
        placeholder, param_type = find_placeholder(result, name)
        if placeholder not in result:
            continue

        formatter = TYPED_FORMATTERS.get(param_type) if param_type else None
        if formatter is None:
            replacement = str(value)
        else:
            if formatting_locale is None:
                formatting_locale = resolve_formatting_locale(locale)
            replacement = formatter(name, value, options, formatting_locale)

        result = result.replace(placeholder, replacement)

    return result


def _type_mismatch(name: str, expected: str, value: Any) -> ArgumentTypeError:
    error = ArgumentTypeError(name, expected, value)
    logger.error(
        "invalid_argument_type",
        parameter=name,
        expected=expected,
        received=error.received,
    )
    return error


def _require_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, NUMBER_TYPES):
        raise _type_mismatch(name, "number", value)


def _plural(name: str, value: Any, options: Options, locale: Locale) -> str:
    _require_number(name, value)
    plural_options = options.get("plural", name) if options else None
    if plural_options is None:
        logger.error("missing_plural_options", parameter=name)
        raise MissingParamOptionsError(name)
    return format_plural(value, plural_options, locale)


def _number(name: str, value: Any, options: Options, locale: Locale) -> str:
    _require_number(name, value)
    number_options = options.get("number", name) if options else None
    return format_number(value, number_options, locale)


def _date(name: str, value: Any, options: Options, locale: Locale) -> str:
    if not isinstance(value, date):
        raise _type_mismatch(name, "date", value)
    date_options = options.get("date", name) if options else None
    return format_date(value, date_options, locale)


def _list(name: str, value: Any, options: Options, locale: Locale) -> str:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise _type_mismatch(name, "list", value)
    list_options = options.get("list", name) if options else None
    return format_list(value, list_options, locale)


def _enum(name: str, value: Any, options: Options, locale: Locale) -> str:
    mapping = options.get("enum", name) if options else None
    if mapping is None or str(value) not in mapping:
        logger.debug("enum_value_unmapped", parameter=name, value=str(value))
    return format_enum(value, mapping)


TYPED_FORMATTERS: Dict[str, Callable[[str, Any, Options, Locale], str]] = {
    "plural": _plural,
    "number": _number,
    "date": _date,
    "list": _list,
    "enum": _enum,
}
