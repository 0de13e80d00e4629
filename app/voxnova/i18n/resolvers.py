"""Locale resolution for translation lookup and formatting.

Builds the ordered locale chain a translator searches, and maps a catalog
locale tag onto the closest locale Babel has CLDR data for.
"""

from typing import List, Sequence, Tuple, Union

from babel import Locale, UnknownLocaleError

from voxnova.logging import get_module_logger

logger = get_module_logger()

DEFAULT_FORMATTING_LOCALE = "en"


def expand_locale(locale: str) -> List[str]:
    """Expand a locale tag into itself followed by its parent tags.

    Tags are lower-cased, then the trailing ``-subtag`` is stripped repeatedly
    until nothing is left.

    Args:
        locale: Locale tag (e.g., "pt-BR-x").

    Returns:
        Tags from most to least specific (e.g., ["pt-br-x", "pt-br", "pt"]).
        An empty tag expands to an empty list.
    """
    locales = []
    tag = locale.lower()
    while tag:
        locales.append(tag)
        tag = tag.rpartition("-")[0]
    return locales


def build_locale_chain(
    locale: str,
    fallback: Union[str, Sequence[str], None] = None,
) -> Tuple[str, ...]:
    """Build the ordered, duplicate-free list of locales to search.

    The primary locale and its parents come first, then each fallback locale
    with its parents in the order given. A tag already present keeps its
    first position.

    Args:
        locale: Primary locale tag.
        fallback: One fallback tag or a sequence of them.

    Returns:
        Tuple of lower-cased locale tags.
    """
    if fallback is None:
        fallbacks: Sequence[str] = []
    elif isinstance(fallback, str):
        fallbacks = [fallback]
    else:
        fallbacks = fallback

    chain = dict.fromkeys(expand_locale(locale))
    for fallback_locale in fallbacks:
        chain.update(dict.fromkeys(expand_locale(fallback_locale)))
    return tuple(chain)


def resolve_formatting_locale(locale: str) -> Locale:
    """Find the Babel locale used to format values for a catalog locale.

    Tries the tag, then its parents, so private or unknown subtags do not
    prevent locale-aware formatting.

    Args:
        locale: Catalog locale tag (e.g., "pt-br-x").

    Returns:
        The most specific Babel Locale known, or the default formatting
        locale when none of the candidates is known.
    """
    for candidate in expand_locale(locale):
        try:
            return Locale.parse(candidate, sep="-")
        except (ValueError, UnknownLocaleError):
            continue

    logger.debug(
        "formatting_locale_unknown",
        locale=locale,
        default_locale=DEFAULT_FORMATTING_LOCALE,
    )
    return Locale.parse(DEFAULT_FORMATTING_LOCALE)
