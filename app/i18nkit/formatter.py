"""Locale-aware date and time formatting.

Format strings live under ``formats.date.formats`` and
``formats.time.formats``. Date formats may use ``%a``, ``%A``, ``%b`` and
``%B``, which are replaced with the locale's day and month names before the
rest of the string goes through strftime.
"""

import datetime as dt
import re
from typing import Optional, Tuple, Union

from i18nkit.exceptions import (
    MissingFormatsRootError,
    MissingFormatTableError,
    MissingTypeFormatsError,
    UnderlyingFormatError,
    UnknownFormatNameError,
)
from i18nkit.logging import get_module_logger
from i18nkit.models import LocaleData, LocalizeOptions

logger = get_module_logger()

DATE = "date"
TIME = "time"

# Placeholder -> name table under formats.date
NAME_TABLES = {
    "%a": "abbr_day_names",
    "%A": "day_names",
    "%b": "abbr_month_names",
    "%B": "month_names",
}

# "%%" is matched first so escaped percents are never read as placeholders
_PLACEHOLDER_PATTERN = re.compile(r"%%|%[aAbB]")

# Directives strftime is allowed to expand; anything else is rejected
SUPPORTED_DIRECTIVES = frozenset("aAbBcCdDeFfGgHIjklmMnprRSTtuUVvwWxXyYzZ%")

_DIRECTIVE_PATTERN = re.compile(r"%(.?)", re.DOTALL)


def weekday_index(value: dt.date) -> int:
    """Day of week with Sunday as 0."""
    return value.isoweekday() % 7


def check_directives(pattern: str) -> None:
    """Reject directives outside SUPPORTED_DIRECTIVES.

    Raises:
        ValueError: For an unknown directive or a trailing "%".
    """
    for match in _DIRECTIVE_PATTERN.finditer(pattern):
        directive = match.group(1)
        if not directive:
            raise ValueError("format string ends with a stray '%'")
        if directive not in SUPPORTED_DIRECTIVES:
            raise ValueError(f"unknown directive '%{directive}'")


class DateTimeFormatter:
    """Formats dates and times using one locale's format tables.

    Attributes:
        data: LocaleData the formats and name tables are read from.
    """

    def __init__(self, data: LocaleData):
        self.data = data

    def date(
        self,
        value: dt.date,
        options: Optional[LocalizeOptions] = None,
        *,
        format_name: Optional[str] = None,
    ) -> str:
        """Format a date with the locale's date format.

        Args:
            value: Date or datetime to format.
            options: LocalizeOptions selecting the format name.
            format_name: Shortcut overriding ``options.format_name``.

        Returns:
            Formatted date.

        Raises:
            FormattingError: A subclass naming the stage that failed.
        """
        date_formats = self._type_formats(DATE)
        pattern = self._pattern(DATE, date_formats, options, format_name)
        pattern = self._substitute_names(pattern, date_formats, value)
        return self._strftime(DATE, pattern, value)

    def time(
        self,
        value: Union[dt.time, dt.datetime],
        options: Optional[LocalizeOptions] = None,
        *,
        format_name: Optional[str] = None,
    ) -> str:
        """Format a time with the locale's time format.

        Day and month name placeholders are not substituted.

        Raises:
            FormattingError: A subclass naming the stage that failed.
        """
        time_formats = self._type_formats(TIME)
        pattern = self._pattern(TIME, time_formats, options, format_name)
        return self._strftime(TIME, pattern, value)

    def available_formats(self, kind: str) -> Tuple[str, ...]:
        """List the format names defined for "date" or "time"."""
        formats = self.data.mapping("formats")
        type_formats = formats.mapping(kind) if formats is not None else None
        table = type_formats.mapping("formats") if type_formats is not None else None
        if table is None:
            return ()
        return tuple(name for name in table if table.string(name) is not None)

    def _type_formats(self, kind: str) -> LocaleData:
        formats = self.data.mapping("formats")
        if formats is None:
            logger.warning("format_failed", kind=kind, stage="formats_root")
            raise MissingFormatsRootError(kind)

        type_formats = formats.mapping(kind)
        if type_formats is None:
            logger.warning("format_failed", kind=kind, stage="type_formats")
            raise MissingTypeFormatsError(kind)

        return type_formats

    def _pattern(
        self,
        kind: str,
        type_formats: LocaleData,
        options: Optional[LocalizeOptions],
        format_name: Optional[str],
    ) -> str:
        table = type_formats.mapping("formats")
        if table is None:
            logger.warning("format_failed", kind=kind, stage="format_table")
            raise MissingFormatTableError(kind)

        name = format_name
        if name is None:
            name = (options or LocalizeOptions()).format_name
        pattern = table.string(name)
        if pattern is None:
            logger.warning(
                "format_failed", kind=kind, stage="format_name", format_name=name
            )
            raise UnknownFormatNameError(kind, name)

        return pattern

    def _substitute_names(
        self, pattern: str, date_formats: LocaleData, value: dt.date
    ) -> str:
        def replace(match: "re.Match[str]") -> str:
            token = match.group(0)
            if token == "%%":
                return token

            names = date_formats.sequence(NAME_TABLES[token])
            if token in ("%a", "%A"):
                index = weekday_index(value)
            else:
                index = value.month - 1

            if names is None or index >= len(names):
                logger.debug(
                    "date_placeholder_unresolved",
                    placeholder=token,
                    table=NAME_TABLES[token],
                )
                # Escaped so strftime emits the placeholder literally
                return "%" + token

            return str(names[index])

        return _PLACEHOLDER_PATTERN.sub(replace, pattern)

    def _strftime(self, kind: str, pattern: str, value) -> str:
        try:
            check_directives(pattern)
            return value.strftime(pattern)
        except (ValueError, TypeError) as e:
            logger.warning("format_failed", kind=kind, stage="strftime", error=str(e))
            raise UnderlyingFormatError(kind, e) from e
