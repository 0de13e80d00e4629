"""Translation service for resolving keys into localized messages.

Searches the locale chain for the first catalog holding the key, then
substitutes the arguments using that catalog's locale.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from voxnova.i18n.interpolation import interpolate
from voxnova.i18n.models import I18nConfig, Message, TranslationCatalog
from voxnova.i18n.resolvers import build_locale_chain
from voxnova.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Resolves translation keys across a chain of locales.

    Missing translations never raise: the key itself is returned so the
    gap stays visible in rendered output.

    Attributes:
        config: Configuration the translator was built from.
        catalogs: TranslationCatalog by lower-cased locale tag.
        locale_chain: Locales searched, in order.
    """

    def __init__(self, config: I18nConfig):
        """Initialize Translator.

        Args:
            config: Primary locale, catalogs and fallback locale(s).
        """
        self.config = config
        self.catalogs: Dict[str, TranslationCatalog] = dict(config.translations)
        self.locale_chain: Tuple[str, ...] = build_locale_chain(
            config.locale, config.fallback_locales
        )
        logger.info(
            "initialized_translator",
            locale=config.locale,
            locale_chain=list(self.locale_chain),
            catalog_count=len(self.catalogs),
        )

    def translate(self, key: str, args: Optional[Mapping[str, Any]] = None) -> str:
        """Retrieve and interpolate a translated message.

        Args:
            key: Dot-separated message key (e.g., "cart.summary").
            args: Optional parameter name -> value for placeholders.

        Returns:
            The formatted message, or ``key`` if no locale in the chain has it.

        Raises:
            ArgumentTypeError: If an argument does not match its placeholder type.
            MissingParamOptionsError: If a plural placeholder lacks options.
        """
        resolved = self._resolve(key)
        if resolved is None:
            logger.warning(
                "translation_not_found",
                key=key,
                locale_chain=list(self.locale_chain),
            )
            return key

        locale, message = resolved
        if locale != self.locale_chain[0]:
            logger.debug(
                "used_fallback_translation",
                key=key,
                requested_locale=self.locale_chain[0],
                fallback_locale=locale,
            )

        return interpolate(message.template, message.options, args or {}, locale)

    __call__ = translate

    def has_message(self, key: str) -> bool:
        """Check if any locale in the chain has a message for ``key``."""
        return self._resolve(key) is not None

    def get_available_locales(self) -> List[str]:
        """Get the locale tags catalogs were supplied for."""
        return list(self.catalogs.keys())

    def _resolve(self, key: str) -> Optional[Tuple[str, Message]]:
        for locale in self.locale_chain:
            catalog = self.catalogs.get(locale)
            if catalog is None:
                continue
            message = catalog.get_message(key)
            # An empty template counts as untranslated
            if message is not None and message.template:
                return locale, message
        return None
