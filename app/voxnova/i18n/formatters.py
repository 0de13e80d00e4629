"""Locale-aware value formatting backed by Babel's CLDR data.

Each formatter takes an already validated value, the declared options (or
None for defaults) and a Babel Locale. The option models mirror the ``Intl``
formatting options, so defaults follow what ``Intl`` does where Babel allows.
"""

import copy
import decimal
from datetime import date, datetime, timezone
from typing import Iterable, Mapping, Optional, Tuple, Union

from babel import Locale
from babel.dates import format_date as babel_format_date
from babel.dates import (
    format_datetime,
    format_time,
    get_datetime_format,
    get_timezone,
    match_skeleton,
    tokenize_pattern,
    untokenize_pattern,
)
from babel.lists import format_list as babel_format_list
from babel.numbers import (
    NumberPattern,
    format_compact_currency,
    format_compact_decimal,
    format_currency,
    get_currency_precision,
    get_plus_sign_symbol,
    parse_pattern,
)
from babel.units import format_unit

from voxnova.i18n.models import DateOptions, ListOptions, NumberOptions, PluralOptions

Number = Union[int, float, decimal.Decimal]

ROUNDING_MODES = {
    "halfExpand": decimal.ROUND_HALF_UP,
    "halfEven": decimal.ROUND_HALF_EVEN,
    "halfTrunc": decimal.ROUND_HALF_DOWN,
    "ceil": decimal.ROUND_CEILING,
    "floor": decimal.ROUND_FLOOR,
    "expand": decimal.ROUND_UP,
    "trunc": decimal.ROUND_DOWN,
}

LIST_STYLES = {
    "conjunction": "standard",
    "disjunction": "or",
    "unit": "unit",
}

# Intl defaults for (minimum, maximum) fraction digits per style
DEFAULT_FRACTION_DIGITS = {
    "decimal": (0, 3),
    "percent": (0, 0),
    "unit": (0, 3),
}

MAX_SIGNIFICANT_DIGITS = 21

# Separates a currency code from an adjacent digit (CLDR currencySpacing)
CURRENCY_SPACING = "\u00a0"

# (option name, {option value: skeleton field}) in CLDR skeleton order
DATE_SKELETON_FIELDS = (
    ("era", {"long": "GGGG", "short": "G", "narrow": "GGGGG"}),
    ("year", {"numeric": "y", "2-digit": "yy"}),
    (
        "month",
        {
            "numeric": "M",
            "2-digit": "MM",
            "short": "MMM",
            "long": "MMMM",
            "narrow": "MMMMM",
        },
    ),
    ("weekday", {"long": "EEEE", "short": "EEE", "narrow": "EEEEE"}),
    ("day", {"numeric": "d", "2-digit": "dd"}),
)

# Pattern letters a matched CLDR pattern may use for each option
DATE_PATTERN_LETTERS = {
    "era": "G",
    "year": "yYu",
    "month": "ML",
    "weekday": "Ece",
    "day": "d",
    "hour": "hHKk",
    "time_zone_name": "zv",
}

DEFAULT_DATE_SKELETON = "yMd"


def select_plural_category(value: Number, plural_type: str, locale: Locale) -> str:
    """Select the CLDR plural category of ``value`` for ``locale``.

    Args:
        value: The count.
        plural_type: "cardinal" (counting) or "ordinal" (ranking).
        locale: Babel locale.

    Returns:
        One of "zero", "one", "two", "few", "many", "other".
    """
    rule = locale.ordinal_form if plural_type == "ordinal" else locale.plural_form
    return rule(value)


def format_plural(value: Number, options: PluralOptions, locale: Locale) -> str:
    """Pick the plural form for ``value`` and fill its ``{?}`` marker."""
    category = select_plural_category(value, options.type, locale)
    count = format_number(value, options.formatter, locale)
    return options.form_for(category).replace("{?}", count)


def format_number(
    value: Number, options: Optional[NumberOptions], locale: Locale
) -> str:
    """Format a number according to ``options``.

    Rounding follows ``options.rounding_mode`` (half away from zero unless
    told otherwise), applied through the decimal context Babel quantizes in.
    Significant digits, when given, take precedence over fraction digits.
    """
    options = options or NumberOptions()

    with decimal.localcontext() as ctx:
        ctx.rounding = ROUNDING_MODES[options.rounding_mode]

        if options.style == "unit":
            return format_unit(
                value,
                options.unit,
                length=options.unit_display,
                format=_decimal_format(options, DEFAULT_FRACTION_DIGITS["unit"]),
                locale=locale,
            )

        if options.notation == "compact" and options.style != "percent":
            return _format_compact(value, options, locale)

        pattern, currency_digits = _number_pattern(options, locale)
        value, significant = _round_significant(value, options, pattern.scale)
        if significant is not None:
            pattern.frac_prec = significant
            currency_digits = False
        _apply_sign_display(pattern, value, options.sign_display, locale)

        if options.style == "currency" and options.currency_display == "name":
            return format_currency(
                value,
                options.currency,
                format=pattern,
                locale=locale,
                currency_digits=currency_digits,
                format_type="name",
                group_separator=options.use_grouping,
            )

        return pattern.apply(
            value,
            locale,
            currency=options.currency,
            currency_digits=currency_digits,
            decimal_quantization=True,
            group_separator=options.use_grouping,
        )


def format_date(
    value: Union[date, datetime], options: Optional[DateOptions], locale: Locale
) -> str:
    """Format a date or datetime according to ``options``.

    Aware datetimes are converted to ``options.time_zone`` (UTC when not
    set); naive datetimes are taken as UTC. Plain dates are formatted as
    calendar dates with no time zone shift.

    Individual components are matched against the locale's available
    skeletons, then the matched pattern's fields are widened to the
    requested widths (``month="long"`` gives "January", not "Jan").
    """
    options = options or DateOptions()
    target_tz = get_timezone(options.time_zone) if options.time_zone else timezone.utc
    value, tzinfo = _localize(value, target_tz)

    if options.date_style or options.time_style:
        return _format_styles(value, options, tzinfo, locale)

    return format_datetime(
        value,
        _date_pattern(options, locale),
        tzinfo=tzinfo,
        locale=locale,
    )


def format_list(
    items: Iterable[object], options: Optional[ListOptions], locale: Locale
) -> str:
    """Join items into a locale-aware "a, b, and c" style list."""
    options = options or ListOptions()
    style = LIST_STYLES[options.type]
    if options.style != "long":
        style = f"{style}-{options.style}"
    return babel_format_list([str(item) for item in items], style=style, locale=locale)


def format_enum(value: object, mapping: Optional[Mapping[str, str]]) -> str:
    """Map a raw enum value to its display text.

    Unmapped values are rendered as-is.
    """
    raw = str(value)
    if mapping and raw in mapping:
        return mapping[raw]
    return raw


def _fraction_bounds(
    options: NumberOptions, defaults: Tuple[int, int]
) -> Optional[Tuple[int, int]]:
    minimum = options.minimum_fraction_digits
    maximum = options.maximum_fraction_digits
    if minimum is None and maximum is None:
        return None
    if minimum is None:
        minimum = min(defaults[0], maximum)
    if maximum is None:
        maximum = max(defaults[1], minimum)
    return minimum, maximum


def _decimal_format(
    options: NumberOptions, defaults: Tuple[int, int]
) -> Optional[str]:
    """Build a decimal pattern string when digits were customised."""
    bounds = _fraction_bounds(options, defaults)
    if bounds is None and options.minimum_integer_digits is None:
        return None
    minimum, maximum = bounds or defaults
    zeros = options.minimum_integer_digits or 1
    digits = "#" * max(0, 4 - zeros) + "0" * zeros
    pattern = f"{digits[:-3]},{digits[-3:]}"
    if maximum:
        pattern += "." + "0" * minimum + "#" * (maximum - minimum)
    return pattern


def _number_pattern(
    options: NumberOptions, locale: Locale
) -> Tuple[NumberPattern, bool]:
    """Return the locale pattern adjusted to ``options``, and whether the
    currency's own precision should apply."""
    if options.style == "percent":
        pattern = locale.percent_formats[None]
        defaults = DEFAULT_FRACTION_DIGITS["percent"]
    elif options.style == "currency":
        precision = get_currency_precision(options.currency)
        defaults = (precision, precision)
        if options.currency_display == "name":
            pattern = locale.decimal_formats[None]
        else:
            formats = locale.currency_formats
            pattern = formats.get(options.currency_sign) or formats["standard"]
    else:
        pattern = locale.decimal_formats[None]
        defaults = DEFAULT_FRACTION_DIGITS["decimal"]

    pattern = copy.copy(pattern)
    bounds = _fraction_bounds(options, defaults)
    if bounds is not None:
        pattern.frac_prec = bounds
    if options.minimum_integer_digits is not None:
        pattern.int_prec = (
            options.minimum_integer_digits,
            max(pattern.int_prec[1], options.minimum_integer_digits),
        )
    if options.style == "currency" and options.currency_display == "code":
        pattern.prefix = tuple(_code_affix(p, prefix=True) for p in pattern.prefix)
        pattern.suffix = tuple(_code_affix(s, prefix=False) for s in pattern.suffix)

    return pattern, bounds is None


def _code_affix(part: str, prefix: bool) -> str:
    """Switch a pattern affix to the ISO code, spaced from the digits."""
    part = part.replace("¤", "¤¤")
    if prefix and part.endswith("¤"):
        return part + CURRENCY_SPACING
    if not prefix and part.startswith("¤"):
        return CURRENCY_SPACING + part
    return part


def _round_significant(
    value: Number, options: NumberOptions, scale: int
) -> Tuple[Number, Optional[Tuple[int, int]]]:
    """Round ``value`` to the requested significant digits.

    Returns:
        The rounded value and the fraction digit bounds that display it, or
        the value unchanged and None when no significant digits were set.
        ``scale`` is the pattern's power of ten (2 for percent).
    """
    minimum = options.minimum_significant_digits
    maximum = options.maximum_significant_digits
    if minimum is None and maximum is None:
        return value, None
    minimum = minimum or 1
    maximum = maximum or MAX_SIGNIFICANT_DIGITS

    number = decimal.Decimal(str(value)).scaleb(scale)
    if number.is_zero():
        return value, (minimum - 1, minimum - 1)

    quantum = decimal.Decimal(1).scaleb(number.adjusted() - maximum + 1)
    rounded = number.quantize(quantum)
    exponent = rounded.adjusted()
    bounds = (max(0, minimum - 1 - exponent), max(0, maximum - 1 - exponent))
    return rounded.scaleb(-scale), bounds


def _apply_sign_display(
    pattern: NumberPattern, value: Number, sign_display: str, locale: Locale
) -> None:
    if sign_display == "auto":
        return

    is_zero = decimal.Decimal(str(value)).is_zero()
    positive_prefix, negative_prefix = pattern.prefix
    positive_suffix = pattern.suffix[0]

    if sign_display == "never" or (is_zero and sign_display != "always"):
        negative_prefix = positive_prefix
        pattern.suffix = (positive_suffix, positive_suffix)
    if sign_display == "always" or (sign_display == "exceptZero" and not is_zero):
        positive_prefix = get_plus_sign_symbol(locale) + positive_prefix

    pattern.prefix = (positive_prefix, negative_prefix)


def _format_compact(value: Number, options: NumberOptions, locale: Locale) -> str:
    fraction_digits = options.maximum_fraction_digits
    if fraction_digits is None:
        # Two significant digits, as Intl does for compact notation
        mantissa = _compact_mantissa(value, locale, options)
        fraction_digits = 1 if abs(mantissa) < 10 else 0
    if options.style == "currency":
        return format_compact_currency(
            value,
            options.currency,
            format_type=options.compact_display,
            locale=locale,
            fraction_digits=fraction_digits,
        )
    return format_compact_decimal(
        value,
        format_type=options.compact_display,
        locale=locale,
        fraction_digits=fraction_digits,
    )


def _compact_mantissa(
    value: Number, locale: Locale, options: NumberOptions
) -> decimal.Decimal:
    """The part of ``value`` a compact pattern displays (1.234 for 1234 as "1K")."""
    number = decimal.Decimal(str(value))
    patterns = locale.compact_decimal_formats[options.compact_display]["other"]
    for magnitude in sorted((int(m) for m in patterns), reverse=True):
        if abs(number) >= magnitude:
            pattern = parse_pattern(patterns[str(magnitude)]).pattern
            if pattern == "0":
                return number
            zeros = pattern.count("0")
            return number / (magnitude // (10 ** (zeros - 1)))
    return number


def _localize(value: Union[date, datetime], target_tz):
    if not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day), None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(target_tz), target_tz


def _format_styles(
    value: datetime, options: DateOptions, tzinfo, locale: Locale
) -> str:
    if options.date_style and options.time_style:
        return (
            get_datetime_format(options.date_style, locale=locale)
            .replace("'", "")
            .replace(
                "{0}",
                format_time(value, options.time_style, tzinfo=tzinfo, locale=locale),
            )
            .replace("{1}", babel_format_date(value, options.date_style, locale=locale))
        )
    if options.date_style:
        return babel_format_date(value, options.date_style, locale=locale)
    return format_time(value, options.time_style, tzinfo=tzinfo, locale=locale)


def _date_pattern(options: DateOptions, locale: Locale) -> str:
    """Find the locale pattern for the requested components.

    A date part and a time part with no joint skeleton are matched on their
    own and joined with the locale's date-time glue pattern.
    """
    date_skeleton, time_skeleton = _date_skeletons(options, locale)
    skeleton = date_skeleton + time_skeleton

    pattern = _match_pattern(skeleton, options, locale)
    if pattern is None and date_skeleton and time_skeleton:
        date_pattern = _match_pattern(date_skeleton, options, locale)
        time_pattern = _match_pattern(time_skeleton, options, locale)
        if date_pattern is not None and time_pattern is not None:
            glue = get_datetime_format(_glue_style(options), locale=locale)
            pattern = glue.replace("{1}", date_pattern).replace("{0}", time_pattern)
    if pattern is None:
        pattern = _match_pattern(
            skeleton, options, locale, allow_different_fields=True
        )
    return pattern


def _match_pattern(
    skeleton: str,
    options: DateOptions,
    locale: Locale,
    allow_different_fields: bool = False,
) -> Optional[str]:
    skeletons = locale.datetime_skeletons
    if skeleton not in skeletons:
        skeleton = match_skeleton(
            skeleton, skeletons, allow_different_fields=allow_different_fields
        )
        if skeleton is None:
            return None
    return _widen_fields(str(skeletons[skeleton]), options)


def _widen_fields(pattern: str, options: DateOptions) -> str:
    """Give the pattern's fields the widths the options ask for.

    Text fields (three letters or more) take the requested width outright.
    Numeric fields are only ever padded, for "2-digit".
    """
    requested = {}
    for name, fields in DATE_SKELETON_FIELDS:
        choice = getattr(options, name)
        if choice is not None:
            width = len(fields[choice])
            requested.update(dict.fromkeys(DATE_PATTERN_LETTERS[name], width))
    if options.hour == "2-digit":
        requested.update(dict.fromkeys(DATE_PATTERN_LETTERS["hour"], 2))
    if options.time_zone_name == "long":
        requested.update(dict.fromkeys(DATE_PATTERN_LETTERS["time_zone_name"], 4))

    tokens = []
    for kind, token in tokenize_pattern(pattern):
        if kind == "field":
            letter, width = token
            wanted = requested.get(letter)
            if wanted is not None and (wanted >= 3 or width < wanted < 3):
                token = (letter, wanted)
        tokens.append((kind, token))
    return untokenize_pattern(tokens)


def _glue_style(options: DateOptions) -> str:
    if options.month == "long":
        return "full" if options.weekday is not None else "long"
    if options.month == "short":
        return "medium"
    return "short"


def _date_skeletons(options: DateOptions, locale: Locale) -> Tuple[str, str]:
    """Return the (date, time) halves of the skeleton for ``options``."""
    if not options.has_components:
        return DEFAULT_DATE_SKELETON, ""

    date_skeleton = ""
    for name, fields in DATE_SKELETON_FIELDS:
        choice = getattr(options, name)
        if choice is not None:
            date_skeleton += fields[choice]

    time_skeleton = ""
    if options.hour is not None:
        letter = _hour_letter(options.hour12, locale)
        time_skeleton += letter * (2 if options.hour == "2-digit" else 1)
    if options.minute is not None:
        time_skeleton += "mm" if options.minute == "2-digit" else "m"
    if options.second is not None:
        time_skeleton += "ss" if options.second == "2-digit" else "s"
    if options.time_zone_name is not None:
        time_skeleton += "zzzz" if options.time_zone_name == "long" else "z"
    return date_skeleton, time_skeleton


def _hour_letter(hour12: Optional[bool], locale: Locale) -> str:
    if hour12 is not None:
        return "h" if hour12 else "H"
    # Locale preference, read from its short time pattern
    short_time = locale.time_formats["short"].pattern
    return "h" if "h" in short_time or "K" in short_time else "H"
