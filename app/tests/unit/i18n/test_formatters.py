"""Tests for voxnova.i18n.formatters module."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from babel import Locale

from voxnova.i18n.formatters import (
    format_date,
    format_enum,
    format_list,
    format_number,
    format_plural,
    select_plural_category,
)
from voxnova.i18n.models import DateOptions, ListOptions, NumberOptions, PluralOptions


@pytest.mark.unit
class TestSelectPluralCategory:
    """Tests for CLDR plural category selection."""

    @pytest.mark.parametrize("value,category", [(0, "other"), (1, "one"), (2, "other")])
    def test_english_cardinal(self, en, value, category):
        assert select_plural_category(value, "cardinal", en) == category

    @pytest.mark.parametrize(
        "value,category",
        [(1, "one"), (2, "two"), (3, "few"), (4, "other"), (11, "other"), (22, "two")],
    )
    def test_english_ordinal(self, en, value, category):
        assert select_plural_category(value, "ordinal", en) == category

    @pytest.mark.parametrize(
        "value,category", [(1, "one"), (3, "few"), (5, "many"), (21, "one")]
    )
    def test_russian_cardinal(self, value, category):
        assert select_plural_category(value, "cardinal", Locale.parse("ru")) == category

    def test_fractional_value(self, en):
        """Fractions are not singular in English."""
        assert select_plural_category(1.5, "cardinal", en) == "other"


@pytest.mark.unit
class TestFormatPlural:
    """Tests for format_plural()."""

    def test_count_marker_replaced(self, en):
        """{?} is replaced by the formatted count."""
        options = PluralOptions(one="1 message", other="{?} messages")
        assert format_plural(2, options, en) == "2 messages"
        assert format_plural(1, options, en) == "1 message"

    def test_count_uses_formatter(self, en):
        """The count is rendered with the plural's number options."""
        options = PluralOptions(
            other="{?} messages",
            formatter=NumberOptions(minimum_fraction_digits=1),
        )
        assert format_plural(1000, options, en) == "1,000.0 messages"

    def test_ordinal_forms(self, en):
        """Ordinal plurals select by rank."""
        options = PluralOptions(
            type="ordinal", one="{?}st", two="{?}nd", few="{?}rd", other="{?}th"
        )
        assert [format_plural(n, options, en) for n in (1, 2, 3, 4, 11, 23)] == [
            "1st",
            "2nd",
            "3rd",
            "4th",
            "11th",
            "23rd",
        ]

    def test_missing_category_uses_other(self, en):
        """Categories without text fall back to other."""
        options = PluralOptions(other="{?} items")
        assert format_plural(1, options, en) == "1 items"


@pytest.mark.unit
class TestFormatNumber:
    """Tests for format_number()."""

    def test_default_decimal(self, en):
        assert format_number(1234.5, None, en) == "1,234.5"

    def test_default_rounds_to_three_fraction_digits(self, en):
        assert format_number(3.14159, None, en) == "3.142"

    @pytest.mark.parametrize(
        "value,expected", [(12, "$12.00"), (12.12, "$12.12"), (12.129, "$12.13")]
    )
    def test_currency_uses_currency_precision(self, en, value, expected):
        options = NumberOptions(style="currency", currency="USD")
        assert format_number(value, options, en) == expected

    def test_currency_in_spanish(self, es):
        options = NumberOptions(style="currency", currency="EUR")
        result = format_number(12.5, options, es)
        assert "12,50" in result
        assert "€" in result

    def test_currency_code_display(self, en):
        options = NumberOptions(
            style="currency", currency="USD", currency_display="code"
        )
        result = format_number(12, options, en)
        assert "USD" in result
        assert "$" not in result

    def test_currency_name_display(self, en):
        options = NumberOptions(
            style="currency", currency="USD", currency_display="name"
        )
        assert format_number(2, options, en) == "2.00 US dollars"

    def test_percent(self, en):
        assert format_number(0.256, NumberOptions(style="percent"), en) == "26%"

    def test_maximum_fraction_digits(self, en):
        options = NumberOptions(maximum_fraction_digits=2)
        assert format_number(3.14159, options, en) == "3.14"

    def test_minimum_fraction_digits(self, en):
        options = NumberOptions(minimum_fraction_digits=2)
        assert format_number(5, options, en) == "5.00"

    def test_currency_fraction_override(self, en):
        options = NumberOptions(
            style="currency", currency="USD", maximum_fraction_digits=0
        )
        assert format_number(12.5, options, en) == "$13"

    def test_minimum_integer_digits(self, en):
        assert format_number(7, NumberOptions(minimum_integer_digits=3), en) == "007"

    def test_grouping_disabled(self, en):
        options = NumberOptions(use_grouping=False)
        assert format_number(1234567, options, en) == "1234567"

    def test_decimal_values(self, en):
        assert format_number(Decimal("0.5"), None, en) == "0.5"

    @pytest.mark.parametrize(
        "mode,expected",
        [("halfExpand", "3"), ("halfEven", "2"), ("floor", "2"), ("ceil", "3")],
    )
    def test_rounding_modes(self, en, mode, expected):
        options = NumberOptions(maximum_fraction_digits=0, rounding_mode=mode)
        assert format_number(2.5, options, en) == expected

    def test_negative_half_expand_rounds_away_from_zero(self, en):
        options = NumberOptions(maximum_fraction_digits=0)
        assert format_number(-2.5, options, en) == "-3"

    def test_unit(self, en):
        options = NumberOptions(style="unit", unit="kilometer-per-hour")
        assert format_number(16, options, en) == "16 km/h"

    def test_compact(self, en):
        options = NumberOptions(notation="compact")
        assert format_number(1000000, options, en) == "1M"

    def test_currency_code_spaced_from_digits(self, en):
        options = NumberOptions(
            style="currency", currency="USD", currency_display="code"
        )
        assert format_number(12.5, options, en) == "USD\u00a012.50"
        assert format_number(-12.5, options, en) == "-USD\u00a012.50"

    def test_currency_code_after_number(self, es):
        options = NumberOptions(
            style="currency", currency="EUR", currency_display="code"
        )
        assert format_number(12.5, options, es) == "12,50\u00a0EUR"

    @pytest.mark.parametrize(
        "value,expected", [(1234567, "1.2M"), (12345, "12K"), (999, "999")]
    )
    def test_compact_two_significant_digits(self, en, value, expected):
        options = NumberOptions(notation="compact")
        assert format_number(value, options, en) == expected

    def test_compact_long(self, en):
        options = NumberOptions(notation="compact", compact_display="long")
        assert format_number(1500, options, en) == "1.5 thousand"

    def test_compact_fraction_override(self, en):
        options = NumberOptions(notation="compact", maximum_fraction_digits=2)
        assert format_number(1234567, options, en) == "1.23M"

    @pytest.mark.parametrize(
        "value,options,expected",
        [
            (1234567, {"maximumSignificantDigits": 3}, "1,230,000"),
            (3.14159, {"maximumSignificantDigits": 3}, "3.14"),
            (5, {"minimumSignificantDigits": 3}, "5.00"),
            (0, {"minimumSignificantDigits": 2}, "0.0"),
            (0.2567, {"style": "percent", "maximumSignificantDigits": 2}, "26%"),
        ],
    )
    def test_significant_digits(self, en, value, options, expected):
        options = NumberOptions.model_validate(options)
        assert format_number(value, options, en) == expected

    def test_significant_digits_override_currency_precision(self, en):
        options = NumberOptions(
            style="currency", currency="USD", maximum_significant_digits=2
        )
        assert format_number(12.345, options, en) == "$12"

    @pytest.mark.parametrize(
        "sign_display,value,expected",
        [
            ("always", 5, "+5"),
            ("always", 0, "+0"),
            ("exceptZero", 5, "+5"),
            ("exceptZero", 0, "0"),
            ("exceptZero", -5, "-5"),
            ("never", -5, "5"),
            ("negative", -5, "-5"),
            ("auto", -5, "-5"),
        ],
    )
    def test_sign_display(self, en, sign_display, value, expected):
        options = NumberOptions(sign_display=sign_display)
        assert format_number(value, options, en) == expected

    def test_sign_display_with_currency(self, en):
        options = NumberOptions.model_validate(
            {"style": "currency", "currency": "USD", "signDisplay": "always"}
        )
        assert format_number(12, options, en) == "+$12.00"

    def test_camel_case_options(self, en):
        options = NumberOptions.model_validate(
            {"style": "currency", "currency": "USD", "currencyDisplay": "code"}
        )
        assert "USD" in format_number(1, options, en)


@pytest.mark.unit
class TestFormatDate:
    """Tests for format_date()."""

    def test_medium_date_style(self, en, new_year_noon):
        options = DateOptions(date_style="medium")
        assert format_date(new_year_noon, options, en) == "Jan 1, 2000"

    def test_long_date_style(self, en, new_year_noon):
        options = DateOptions.model_validate({"dateStyle": "long"})
        assert format_date(new_year_noon, options, en) == "January 1, 2000"

    def test_default_is_numeric_date(self, en, new_year_noon):
        assert format_date(new_year_noon, None, en) == "1/1/2000"

    def test_plain_date(self, en):
        options = DateOptions(date_style="medium")
        assert format_date(date(2000, 1, 1), options, en) == "Jan 1, 2000"

    def test_aware_datetime_converted_to_utc(self, en):
        """Aware values are shown in UTC unless a time zone is given."""
        value = datetime(2000, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=5)))
        options = DateOptions(date_style="medium")
        assert format_date(value, options, en) == "Dec 31, 1999"

    def test_naive_datetime_taken_as_utc(self, en):
        options = DateOptions(date_style="medium")
        assert format_date(datetime(2000, 1, 1, 23, 30), options, en) == "Jan 1, 2000"

    def test_time_style(self, en, new_year_noon):
        result = format_date(new_year_noon, DateOptions(time_style="short"), en)
        assert "12:00" in result
        assert "PM" in result

    def test_date_and_time_style(self, en, new_year_noon):
        options = DateOptions(date_style="medium", time_style="short")
        result = format_date(new_year_noon, options, en)
        assert result.startswith("Jan 1, 2000")
        assert "12:00" in result

    def test_components(self, en, new_year_noon):
        options = DateOptions(year="numeric", month="long", day="numeric")
        assert format_date(new_year_noon, options, en) == "January 1, 2000"

    def test_long_month_component(self, en, new_year_noon):
        options = DateOptions(year="numeric", month="long")
        assert format_date(new_year_noon, options, en) == "January 2000"

    def test_long_weekday_component(self, en, new_year_noon):
        options = DateOptions(weekday="long")
        assert format_date(new_year_noon, options, en) == "Saturday"

    def test_long_weekday_with_date(self, en, new_year_noon):
        options = DateOptions(
            weekday="long", year="numeric", month="long", day="numeric"
        )
        assert format_date(new_year_noon, options, en) == "Saturday, January 1, 2000"

    def test_narrow_month(self, en, new_year_noon):
        assert format_date(new_year_noon, DateOptions(month="narrow"), en) == "J"

    def test_two_digit_components(self, en, new_year_noon):
        options = DateOptions(year="numeric", month="2-digit", day="2-digit")
        assert format_date(new_year_noon, options, en) == "01/01/2000"

    def test_long_era(self, en, new_year_noon):
        options = DateOptions(era="long", year="numeric")
        assert format_date(new_year_noon, options, en) == "2000 Anno Domini"

    def test_hour12_false(self, en):
        value = datetime(2000, 1, 1, 15, 5, tzinfo=timezone.utc)
        options = DateOptions(hour="numeric", minute="2-digit", hour12=False)
        assert format_date(value, options, en) == "15:05"

    def test_hour12_true(self, en):
        value = datetime(2000, 1, 1, 15, 5, tzinfo=timezone.utc)
        options = DateOptions(hour="numeric", minute="2-digit", hour12=True)
        result = format_date(value, options, en)
        assert result.startswith("3:05")
        assert result.endswith("PM")

    def test_date_and_time_components(self, en, new_year_noon):
        """Date and time parts with no joint pattern are glued together."""
        options = DateOptions(
            year="numeric",
            month="numeric",
            day="numeric",
            hour="numeric",
            minute="2-digit",
        )
        result = format_date(new_year_noon, options, en)
        assert result.startswith("1/1/2000")
        assert "12:00" in result

    def test_spanish_medium(self, es, new_year_noon):
        options = DateOptions(date_style="medium")
        assert "2000" in format_date(new_year_noon, options, es)


@pytest.mark.unit
class TestFormatList:
    """Tests for format_list()."""

    def test_conjunction(self, en):
        assert format_list(["a", "b", "c"], None, en) == "a, b, and c"

    def test_two_items(self, en):
        assert format_list(["a", "b"], None, en) == "a and b"

    def test_disjunction(self, en):
        options = ListOptions(type="disjunction")
        assert format_list(["a", "b", "c"], options, en) == "a, b, or c"

    def test_single_and_empty(self, en):
        assert format_list(["a"], None, en) == "a"
        assert format_list([], None, en) == ""

    def test_spanish_conjunction(self, es):
        assert format_list(["pizza", "tacos"], None, es) == "pizza y tacos"

    def test_items_converted_to_text(self, en):
        assert format_list((1, 2), None, en) == "1 and 2"


@pytest.mark.unit
class TestFormatEnum:
    """Tests for format_enum()."""

    def test_mapped_value(self):
        assert format_enum("runner", {"runner": "corredor"}) == "corredor"

    def test_unmapped_value_is_raw(self):
        assert format_enum("swimmer", {"runner": "corredor"}) == "swimmer"

    def test_no_mapping(self):
        assert format_enum("runner", None) == "runner"

    def test_non_string_value(self):
        assert format_enum(1, {"1": "first"}) == "first"
