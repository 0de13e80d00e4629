"""Translation models for the i18n system.

Catalog nodes are an explicit tagged union: every entry of a ``Namespace`` is
either a ``Message`` (a template plus its placeholder options) or a nested
``Namespace``. Raw authoring mappings are converted once, at construction, so
lookups never have to guess a node's kind from its shape.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    InstanceOf,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from voxnova.i18n.exceptions import InvalidCatalogError

PLURAL_CATEGORIES = ("zero", "one", "two", "few", "many", "other")

Style = Literal["full", "long", "medium", "short"]


class IntlOptions(BaseModel):
    """Base for formatting options.

    Field names are snake_case; the camelCase spelling used by ``Intl``
    (``maximumFractionDigits``, ``dateStyle``...) is accepted as an alias.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


class NumberOptions(IntlOptions):
    """Locale-aware number formatting options."""

    style: Literal["decimal", "percent", "currency", "unit"] = "decimal"
    currency: Optional[str] = None
    currency_display: Literal["symbol", "narrowSymbol", "code", "name"] = "symbol"
    currency_sign: Literal["standard", "accounting"] = "standard"
    unit: Optional[str] = None
    unit_display: Literal["short", "long", "narrow"] = "short"
    minimum_integer_digits: Optional[int] = Field(default=None, ge=1, le=21)
    minimum_fraction_digits: Optional[int] = Field(default=None, ge=0, le=100)
    maximum_fraction_digits: Optional[int] = Field(default=None, ge=0, le=100)
    minimum_significant_digits: Optional[int] = Field(default=None, ge=1, le=21)
    maximum_significant_digits: Optional[int] = Field(default=None, ge=1, le=21)
    use_grouping: bool = True
    sign_display: Literal["auto", "always", "exceptZero", "negative", "never"] = "auto"
    notation: Literal["standard", "compact"] = "standard"
    compact_display: Literal["short", "long"] = "short"
    rounding_mode: Literal[
        "halfExpand", "halfEven", "halfTrunc", "ceil", "floor", "expand", "trunc"
    ] = "halfExpand"

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v: Optional[str]) -> Optional[str]:
        """Currency codes are ISO 4217, compared upper-case."""
        return v.upper() if v else v

    @model_validator(mode="after")
    def check_required_fields(self) -> "NumberOptions":
        if self.style == "currency" and not self.currency:
            raise ValueError("currency is required with style 'currency'")
        if self.style == "unit" and not self.unit:
            raise ValueError("unit is required with style 'unit'")
        if (
            self.minimum_fraction_digits is not None
            and self.maximum_fraction_digits is not None
            and self.minimum_fraction_digits > self.maximum_fraction_digits
        ):
            raise ValueError(
                "minimum_fraction_digits cannot exceed maximum_fraction_digits"
            )
        if (
            self.minimum_significant_digits is not None
            and self.maximum_significant_digits is not None
            and self.minimum_significant_digits > self.maximum_significant_digits
        ):
            raise ValueError(
                "minimum_significant_digits cannot exceed maximum_significant_digits"
            )
        return self


class DateOptions(IntlOptions):
    """Locale-aware date/time formatting options.

    Either the ``date_style``/``time_style`` shortcuts or individual
    components may be given, not both.
    """

    date_style: Optional[Style] = None
    time_style: Optional[Style] = None
    weekday: Optional[Literal["long", "short", "narrow"]] = None
    era: Optional[Literal["long", "short", "narrow"]] = None
    year: Optional[Literal["numeric", "2-digit"]] = None
    month: Optional[Literal["numeric", "2-digit", "long", "short", "narrow"]] = None
    day: Optional[Literal["numeric", "2-digit"]] = None
    hour: Optional[Literal["numeric", "2-digit"]] = None
    minute: Optional[Literal["numeric", "2-digit"]] = None
    second: Optional[Literal["numeric", "2-digit"]] = None
    time_zone_name: Optional[Literal["long", "short"]] = None
    hour12: Optional[bool] = None
    time_zone: Optional[str] = None

    @model_validator(mode="after")
    def check_style_or_components(self) -> "DateOptions":
        if (self.date_style or self.time_style) and self.has_components:
            raise ValueError(
                "date_style/time_style cannot be combined with individual components"
            )
        return self

    @property
    def has_components(self) -> bool:
        return any(
            getattr(self, name) is not None
            for name in (
                "weekday",
                "era",
                "year",
                "month",
                "day",
                "hour",
                "minute",
                "second",
                "time_zone_name",
            )
        )


class ListOptions(IntlOptions):
    """Locale-aware list formatting options."""

    type: Literal["conjunction", "disjunction", "unit"] = "conjunction"
    style: Literal["long", "short", "narrow"] = "long"


class PluralOptions(IntlOptions):
    """Plural forms for one parameter, keyed by CLDR plural category.

    ``other`` is mandatory and used whenever the selected category has no
    text. ``{?}`` inside a form is replaced by the formatted count.
    """

    zero: Optional[str] = None
    one: Optional[str] = None
    two: Optional[str] = None
    few: Optional[str] = None
    many: Optional[str] = None
    other: str
    type: Literal["cardinal", "ordinal"] = "cardinal"
    formatter: Optional[NumberOptions] = None

    def form_for(self, category: str) -> str:
        """Return the text for ``category``, falling back to ``other``."""
        text = getattr(self, category, None) if category in PLURAL_CATEGORIES else None
        return self.other if text is None else text


class ParamOptions(BaseModel):
    """Per-placeholder formatting metadata of a message.

    Keyed first by placeholder type, then by parameter name.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    plural: Dict[str, PluralOptions] = Field(default_factory=dict)
    number: Dict[str, NumberOptions] = Field(default_factory=dict)
    date: Dict[str, DateOptions] = Field(default_factory=dict)
    list: Dict[str, ListOptions] = Field(default_factory=dict)
    enum: Dict[str, Dict[str, str]] = Field(default_factory=dict)

    def get(self, param_type: str, name: str) -> Optional[Any]:
        """Return the options declared for ``name`` under ``param_type``."""
        section = getattr(self, param_type, None)
        if not isinstance(section, dict):
            return None
        return section.get(name)


@dataclass(frozen=True)
class Message:
    """A single catalog entry.

    Attributes:
        template: Message text with ``{name}`` / ``{name:type}`` placeholders.
        options: Formatting metadata for typed placeholders, if any.
    """

    template: str
    options: Optional[ParamOptions] = None


@dataclass
class Namespace:
    """A nested level of a catalog mapping keys to messages or namespaces."""

    entries: Dict[str, Union[Message, "Namespace"]] = field(default_factory=dict)

    def get_message(self, path: str) -> Optional[Message]:
        """Retrieve the message at a dot-separated path.

        Empty segments (leading, trailing or doubled dots) are skipped.
        Paths that step through a message or end on a namespace resolve to
        nothing.

        Args:
            path: Dot-separated key (e.g., "incident.created").

        Returns:
            The Message, or None if the path does not name one.
        """
        segments = [segment for segment in path.split(".") if segment]
        if not segments:
            return None

        node: Union[Message, Namespace] = self
        for segment in segments:
            if not isinstance(node, Namespace):
                return None
            child = node.entries.get(segment)
            if child is None:
                return None
            node = child

        return node if isinstance(node, Message) else None

    def has_message(self, path: str) -> bool:
        """Check if a message exists at ``path``."""
        return self.get_message(path) is not None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], prefix: str = "") -> "Namespace":
        """Build a namespace from a raw authoring mapping.

        Accepted values: a string (message without options), a
        ``(template, options)`` pair, a ``Message``, a ``Namespace`` or a
        nested mapping.

        Raises:
            InvalidCatalogError: If a key or value cannot be converted.
        """
        entries: Dict[str, Union[Message, Namespace]] = {}
        for key, value in data.items():
            path = f"{prefix}.{key}" if prefix else str(key)
            if not isinstance(key, str) or not key or "." in key:
                raise InvalidCatalogError(
                    path, "keys must be non-empty strings without '.'"
                )
            entries[key] = _build_node(value, path)
        return cls(entries=entries)


@dataclass
class TranslationCatalog:
    """All messages of a single locale.

    Attributes:
        locale: Locale tag the catalog is written in.
        messages: Root namespace of the catalog.
    """

    locale: str
    messages: Namespace = field(default_factory=Namespace)

    def get_message(self, path: str) -> Optional[Message]:
        return self.messages.get_message(path)

    def has_message(self, path: str) -> bool:
        return self.messages.has_message(path)

    @classmethod
    def from_mapping(cls, locale: str, data: Mapping[str, Any]) -> "TranslationCatalog":
        """Build a catalog for ``locale`` from a raw authoring mapping."""
        if isinstance(data, Namespace):
            return cls(locale=locale, messages=data)
        if not isinstance(data, Mapping):
            raise InvalidCatalogError(
                locale, f"expected a mapping, got {type(data).__name__}"
            )
        return cls(locale=locale, messages=Namespace.from_mapping(data))


def _build_node(value: Any, path: str) -> Union[Message, Namespace]:
    if isinstance(value, (Message, Namespace)):
        return value
    if isinstance(value, str):
        return Message(value)
    if isinstance(value, Mapping):
        return Namespace.from_mapping(value, prefix=path)
    if isinstance(value, (tuple, list)):
        if len(value) != 2 or not isinstance(value[0], str):
            raise InvalidCatalogError(path, "expected a (template, options) pair")
        template, options = value
        return Message(template, _build_options(options, path))
    raise InvalidCatalogError(path, f"unsupported entry type {type(value).__name__}")


def _build_options(options: Any, path: str) -> Optional[ParamOptions]:
    if options is None or isinstance(options, ParamOptions):
        return options
    try:
        return ParamOptions.model_validate(options)
    except ValidationError as e:
        raise InvalidCatalogError(path, str(e)) from e


class I18nConfig(BaseModel):
    """Configuration of a translator instance.

    Attributes:
        locale: Primary locale tag (e.g., "en-US").
        translations: Catalog per locale tag. Raw mappings are converted to
            TranslationCatalog objects; tags are lower-cased.
        fallback: One locale tag or an ordered list of them.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    locale: str
    translations: Dict[str, InstanceOf[TranslationCatalog]]
    fallback: Union[str, List[str]] = Field(default_factory=list)

    @field_validator("translations", mode="before")
    @classmethod
    def build_catalogs(cls, v: Any) -> Any:
        """Convert raw catalog mappings and normalise locale tags."""
        if not isinstance(v, Mapping):
            return v
        catalogs: Dict[str, TranslationCatalog] = {}
        for tag, catalog in v.items():
            normalized = str(tag).lower()
            if normalized in catalogs:
                raise ValueError(f"Duplicate translations for locale: {tag}")
            if not isinstance(catalog, TranslationCatalog):
                catalog = TranslationCatalog.from_mapping(str(tag), catalog)
            catalogs[normalized] = catalog
        return catalogs

    @property
    def fallback_locales(self) -> List[str]:
        """Fallback locales as a list, whatever form they were given in."""
        if isinstance(self.fallback, str):
            return [self.fallback]
        return list(self.fallback)
