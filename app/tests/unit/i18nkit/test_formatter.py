"""Tests for i18nkit.formatter module."""

import datetime as dt

import pytest

from i18nkit import (
    DateTimeFormatter,
    FormattingError,
    LocaleData,
    LocalizeOptions,
    MissingFormatsRootError,
    MissingFormatTableError,
    MissingTypeFormatsError,
    UnderlyingFormatError,
    UnknownFormatNameError,
)
from i18nkit.formatter import check_directives, weekday_index
from tests.factories.locale_data import make_date_formats, make_locale_data


def make_formatter(raw):
    return DateTimeFormatter(LocaleData(raw))


class ExplodingDate(dt.date):
    """Date whose strftime always fails."""

    def strftime(self, fmt):
        raise ValueError(f"bad format: {fmt}")


class TestWeekdayIndex:
    """Tests for weekday_index()."""

    def test_sunday_is_zero(self):
        """Sunday maps to 0 and Saturday to 6."""
        assert weekday_index(dt.date(2026, 1, 4)) == 0
        assert weekday_index(dt.date(2026, 1, 1)) == 4
        assert weekday_index(dt.date(2026, 1, 3)) == 6


class TestCheckDirectives:
    """Tests for check_directives()."""

    @pytest.mark.parametrize(
        "pattern", ["%Y-%m-%d", "%I:%M:%S %p", "100%% sure", "%%Q", "no directives"]
    )
    def test_accepts_supported(self, pattern):
        """Supported directives and escaped percents pass."""
        check_directives(pattern)

    @pytest.mark.parametrize(
        "pattern,message",
        [
            ("%Y %Q", "unknown directive '%Q'"),
            ("%Y %", "format string ends with a stray '%'"),
            ("%%%", "format string ends with a stray '%'"),
        ],
    )
    def test_rejects_unsupported(self, pattern, message):
        """Unknown directives and a trailing % raise ValueError."""
        with pytest.raises(ValueError) as exc_info:
            check_directives(pattern)
        assert str(exc_info.value) == message


class TestFormatLookupErrors:
    """Tests for missing or malformed format definitions."""

    @pytest.mark.parametrize("method", ["date", "time"])
    def test_no_formats_root(self, method, new_year):
        """No formats mapping raises MissingFormatsRootError."""
        formatter = make_formatter({"translations": {}})
        with pytest.raises(MissingFormatsRootError) as exc_info:
            getattr(formatter, method)(new_year)
        assert str(exc_info.value) == (
            f"failed to format {method}: could not read formats definition"
        )
        assert exc_info.value.kind == method

    @pytest.mark.parametrize("method", ["date", "time"])
    def test_formats_root_wrong_type(self, method, new_year):
        """A non-mapping formats value raises MissingFormatsRootError."""
        formatter = make_formatter({"formats": ["a"]})
        with pytest.raises(MissingFormatsRootError):
            getattr(formatter, method)(new_year)

    @pytest.mark.parametrize("method", ["date", "time"])
    def test_type_formats_missing(self, method, new_year):
        """No formats.<kind> raises MissingTypeFormatsError."""
        formatter = make_formatter({"formats": {}})
        with pytest.raises(MissingTypeFormatsError) as exc_info:
            getattr(formatter, method)(new_year)
        assert str(exc_info.value) == (
            f"failed to format {method}: could not read '{method}' formats"
        )

    def test_type_formats_wrong_type(self, new_year):
        """formats.date set to a scalar raises MissingTypeFormatsError."""
        formatter = make_formatter({"formats": {"date": 1}})
        with pytest.raises(MissingTypeFormatsError):
            formatter.date(new_year)

    @pytest.mark.parametrize("table", [None, 3, "x"])
    def test_format_table_wrong_type(self, table, new_year):
        """A missing or scalar format table raises MissingFormatTableError."""
        raw = {"formats": {"date": {"formats": table}, "time": {"formats": table}}}
        formatter = make_formatter(raw)
        with pytest.raises(MissingFormatTableError):
            formatter.date(new_year)
        with pytest.raises(MissingFormatTableError):
            formatter.time(new_year)

    def test_unknown_format_name(self, new_year):
        """A missing format name raises UnknownFormatNameError."""
        formatter = make_formatter(make_locale_data())
        with pytest.raises(UnknownFormatNameError) as exc_info:
            formatter.date(new_year, format_name="nope")
        assert exc_info.value.format_name == "nope"
        assert str(exc_info.value) == (
            "failed to format date: failed to read format 'nope'"
        )

    def test_format_name_not_a_string(self, new_year):
        """A non-string format entry raises UnknownFormatNameError."""
        raw = {"formats": {"time": {"formats": {"default": ["%H"]}}}}
        with pytest.raises(UnknownFormatNameError):
            make_formatter(raw).time(new_year)

    def test_errors_share_base_class(self, new_year):
        """All formatting errors derive from FormattingError."""
        with pytest.raises(FormattingError):
            make_formatter({}).date(new_year)


class TestDate:
    """Tests for DateTimeFormatter.date()."""

    def test_iso_format(self):
        """strftime directives are expanded."""
        formatter = make_formatter(make_locale_data())
        assert formatter.date(dt.date(2026, 1, 1)) == "2026-01-01"

    def test_accepts_datetime(self, new_year):
        """datetime values are accepted."""
        formatter = make_formatter(make_locale_data())
        assert formatter.date(new_year) == "2026-01-01"

    def test_name_placeholders(self, new_year):
        """%a %A %b %B use the locale's name tables."""
        date_formats = make_date_formats({"default": "%a %A %b %B"})
        formatter = make_formatter(make_locale_data(date_formats=date_formats))
        assert formatter.date(new_year) == "thu thursday jan january"

    def test_name_placeholders_mixed_with_directives(self):
        """Names and strftime directives combine."""
        formatter = make_formatter(make_locale_data())
        result = formatter.date(dt.date(2026, 3, 9), format_name="long")
        assert result == "09 of mar 2026"

    def test_missing_name_tables(self, new_year):
        """Absent, empty or short tables leave placeholders in the output."""
        raw = {
            "formats": {
                "date": {
                    "abbr_month_names": None,
                    "month_names": "not a list",
                    "abbr_day_names": ["sun", "mon", "tue", "wed"],
                    "day_names": ["sunday", "monday", "tuesday", "wednesday"],
                    "formats": {"default": "%a %A %b %B"},
                }
            }
        }
        assert make_formatter(raw).date(new_year) == "%a %A %b %B"

    def test_partial_substitution(self, new_year):
        """Resolved names and unresolved placeholders can coexist."""
        raw = {
            "formats": {
                "date": {
                    "month_names": ["janeiro"],
                    "formats": {"default": "%d %B / %A"},
                }
            }
        }
        assert make_formatter(raw).date(new_year) == "01 janeiro / %A"

    def test_escaped_percent_is_not_a_placeholder(self, new_year):
        """%%a stays a literal %a and is not replaced by a name."""
        date_formats = make_date_formats({"default": "%%a %a"})
        formatter = make_formatter(make_locale_data(date_formats=date_formats))
        assert formatter.date(new_year) == "%a thu"

    def test_named_format(self):
        """format_name selects a non-default entry."""
        date_formats = make_date_formats({"default": "%Y-%m-%d", "no-day": "%Y-%m"})
        formatter = make_formatter(make_locale_data(date_formats=date_formats))
        assert formatter.date(dt.date(2026, 1, 1), format_name="no-day") == "2026-01"

    def test_options_struct(self):
        """LocalizeOptions selects the format."""
        date_formats = make_date_formats({"default": "%Y-%m-%d", "no-day": "%Y-%m"})
        formatter = make_formatter(make_locale_data(date_formats=date_formats))
        result = formatter.date(dt.date(2026, 1, 1), LocalizeOptions("no-day"))
        assert result == "2026-01"

    def test_underlying_error_is_wrapped(self):
        """strftime failures raise UnderlyingFormatError."""
        formatter = make_formatter(make_locale_data())
        with pytest.raises(UnderlyingFormatError) as exc_info:
            formatter.date(ExplodingDate(2026, 1, 1))
        assert str(exc_info.value).startswith("failed to format date: bad format")
        assert isinstance(exc_info.value.__cause__, ValueError)

    @pytest.mark.parametrize("pattern", ["%Y %Q", "%Y %"])
    def test_invalid_directive_raises(self, pattern, new_year):
        """A format string strftime cannot honour raises UnderlyingFormatError."""
        date_formats = make_date_formats({"default": pattern})
        formatter = make_formatter(make_locale_data(date_formats=date_formats))
        with pytest.raises(UnderlyingFormatError) as exc_info:
            formatter.date(new_year)
        assert exc_info.value.kind == "date"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_unresolved_placeholder_is_not_invalid(self, new_year):
        """An escaped unresolved placeholder does not trip the directive check."""
        raw = {"formats": {"date": {"formats": {"default": "%a %Y"}}}}
        assert make_formatter(raw).date(new_year) == "%a 2026"

    def test_empty_format_name_is_not_default(self, new_year):
        """An explicit empty format name is looked up, not replaced."""
        formatter = make_formatter(make_locale_data())
        with pytest.raises(UnknownFormatNameError) as exc_info:
            formatter.date(new_year, format_name="")
        assert exc_info.value.format_name == ""

    def test_idempotent(self, new_year):
        """Repeated calls give identical results."""
        formatter = make_formatter(make_locale_data())
        results = {formatter.date(new_year, format_name="long") for _ in range(5)}
        assert results == {"01 of jan 2026"}


class TestTime:
    """Tests for DateTimeFormatter.time()."""

    def test_default_format(self, new_year):
        """The default time format is applied."""
        formatter = make_formatter(make_locale_data())
        assert formatter.time(new_year) == "01:05:09 PM"

    def test_named_format(self, new_year):
        """format_name selects a non-default entry."""
        formatter = make_formatter(make_locale_data())
        assert formatter.time(new_year, format_name="short") == "13:05"

    def test_accepts_time(self):
        """datetime.time values are accepted."""
        formatter = make_formatter(make_locale_data())
        assert formatter.time(dt.time(7, 30), format_name="short") == "07:30"

    def test_name_placeholders_not_substituted(self, new_year):
        """Time formats do not use the date name tables."""
        raw = make_locale_data(time_formats={"formats": {"default": "%%b %H"}})
        assert make_formatter(raw).time(new_year) == "%b 13"

    def test_invalid_directive_raises(self, new_year):
        """Unknown time directives raise UnderlyingFormatError."""
        raw = make_locale_data(time_formats={"formats": {"default": "%H %Q"}})
        with pytest.raises(UnderlyingFormatError) as exc_info:
            make_formatter(raw).time(new_year)
        assert str(exc_info.value) == "failed to format time: unknown directive '%Q'"

    def test_underlying_error_is_wrapped(self):
        """strftime failures raise UnderlyingFormatError."""
        formatter = make_formatter(make_locale_data())
        with pytest.raises(UnderlyingFormatError) as exc_info:
            formatter.time(ExplodingDate(2026, 1, 1))
        assert exc_info.value.kind == "time"


class TestAvailableFormats:
    """Tests for DateTimeFormatter.available_formats()."""

    def test_lists_string_formats(self):
        """Only string entries are listed, in definition order."""
        date_formats = make_date_formats({"default": "%Y", "long": "%d", "bad": 1})
        formatter = make_formatter(make_locale_data(date_formats=date_formats))
        assert formatter.available_formats("date") == ("default", "long")

    def test_missing_formats(self):
        """Missing tables yield an empty tuple."""
        assert make_formatter({}).available_formats("time") == ()
