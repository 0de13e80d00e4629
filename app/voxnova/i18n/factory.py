"""Factory functions for creating translators.

Usage:
    from voxnova.i18n import init_i18n

    t = init_i18n(
        {
            "locale": "en-US",
            "translations": {"en": en_messages, "es": es_messages},
            "fallback": "es",
        }
    )
    t("cart.summary", {"items": 3})
"""

from typing import Any, Callable, Mapping, Sequence, Union

from voxnova.i18n.models import I18nConfig, TranslationCatalog
from voxnova.i18n.translator import Translator
from voxnova.logging import get_module_logger

logger = get_module_logger()

TranslateFn = Callable[..., str]


def create_translator(
    locale: str,
    translations: Mapping[str, Union[TranslationCatalog, Mapping[str, Any]]],
    fallback: Union[str, Sequence[str], None] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        locale: Primary locale tag.
        translations: Catalog (or raw catalog mapping) per locale tag.
        fallback: One fallback locale tag or an ordered sequence of them.

    Returns:
        Translator: Configured translator instance

    Raises:
        pydantic.ValidationError: If the configuration or a catalog is invalid.
    """
    if fallback is None:
        fallback = []
    elif not isinstance(fallback, str):
        fallback = list(fallback)

    config = I18nConfig(locale=locale, translations=translations, fallback=fallback)
    return Translator(config)


def init_i18n(config: Union[I18nConfig, Mapping[str, Any]]) -> TranslateFn:
    """Build the ``translate(key, args=None)`` callable for an application.

    Args:
        config: An I18nConfig, or a mapping with the keys ``locale``,
            ``translations`` and ``fallback``. Other keys are rejected.

    Returns:
        The bound ``Translator.translate`` method.

    Raises:
        pydantic.ValidationError: If the configuration or a catalog is invalid.
    """
    if not isinstance(config, I18nConfig):
        config = I18nConfig.model_validate(config)

    translator = Translator(config)
    logger.info(
        "translator_created",
        locale=config.locale,
        locales=translator.get_available_locales(),
    )
    return translator.translate
