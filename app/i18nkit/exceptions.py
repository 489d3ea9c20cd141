"""Custom exceptions for the i18n system.

Translation lookups never raise; these exceptions cover locale loading and
the date/time formatting path, one class per failed stage.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            i18n.date(now)
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class LocaleLoadError(I18nError):
    """Raised when a locale store cannot provide a locale's data.

    Example:
        >>> YAMLLocaleStore(Path("locales")).load("xx")
        Traceback (most recent call last):
        ...
        LocaleLoadError: failed to read locale file: ...
    """

    pass


class FormattingError(I18nError):
    """Base exception for date/time formatting failures.

    Attributes:
        kind: Formatting kind that failed ("date" or "time").
    """

    def __init__(self, kind: str, reason: str):
        self.kind = kind
        self.reason = reason
        super().__init__(f"failed to format {kind}: {reason}")


class MissingFormatsRootError(FormattingError):
    """Raised when the locale data has no ``formats`` mapping."""

    def __init__(self, kind: str):
        super().__init__(kind, "could not read formats definition")


class MissingTypeFormatsError(FormattingError):
    """Raised when ``formats.<kind>`` is missing or is not a mapping."""

    def __init__(self, kind: str):
        super().__init__(kind, f"could not read '{kind}' formats")


class MissingFormatTableError(FormattingError):
    """Raised when ``formats.<kind>.formats`` is missing or is not a mapping."""

    def __init__(self, kind: str):
        super().__init__(kind, f"could not read '{kind}' format table")


class UnknownFormatNameError(FormattingError):
    """Raised when the requested format name does not resolve to a string.

    Example:
        >>> i18n.date(now, format_name="nope")
        Traceback (most recent call last):
        ...
        UnknownFormatNameError: failed to format date: failed to read format 'nope'
    """

    def __init__(self, kind: str, format_name: str):
        self.format_name = format_name
        super().__init__(kind, f"failed to read format '{format_name}'")


class UnderlyingFormatError(FormattingError):
    """Raised when strftime rejects the format string or the value."""

    def __init__(self, kind: str, error: Exception):
        super().__init__(kind, str(error))
