"""i18n facade binding one locale store and one locale.

Usage:
    from i18nkit import I18n, MapLocaleStore

    store = MapLocaleStore({"en": {"translations": {"hello": "world"}}})
    i18n = I18n(store, "en")

    i18n.translate("hello")                      # "world"
    i18n.translate("new_message", count=3)
    i18n.date(datetime.now(), format_name="long")
    i18n.time(datetime.now())
"""

import datetime as dt
from typing import Mapping, Optional, Union

from i18nkit.exceptions import LocaleLoadError
from i18nkit.formatter import DateTimeFormatter
from i18nkit.logging import get_module_logger
from i18nkit.models import LocaleData, LocalizeOptions, TranslateOptions
from i18nkit.storage.base import LocaleStore
from i18nkit.translator import Translator

logger = get_module_logger()


class I18n:
    """Translations and date/time formatting for a single locale.

    The locale's data is loaded once at construction and never reloaded;
    every call is a pure function of that snapshot and its arguments, so an
    instance may be shared by concurrent readers.

    Attributes:
        locale: Locale identifier the instance was built for.
        data: Loaded LocaleData snapshot.
    """

    def __init__(self, store: LocaleStore, locale: str):
        """Load a locale from a store.

        Args:
            store: LocaleStore providing the data.
            locale: Locale identifier (e.g., "en").

        Raises:
            LocaleLoadError: If the store cannot load the locale.
        """
        try:
            data = store.load(locale)
        except LocaleLoadError:
            logger.error("locale_load_failed", locale=locale)
            raise
        except Exception as e:
            logger.error("locale_load_failed", locale=locale, error=str(e))
            raise LocaleLoadError(f"failed to load locale '{locale}': {e}") from e

        if not isinstance(data, Mapping):
            logger.error(
                "locale_load_failed", locale=locale, returned=type(data).__name__
            )
            raise LocaleLoadError(
                f"failed to load locale '{locale}': store returned "
                f"{type(data).__name__}, expected a mapping"
            )

        self._locale = locale
        self._data = data if isinstance(data, LocaleData) else LocaleData(data)
        self._translator = Translator(self._data)
        self._formatter = DateTimeFormatter(self._data)
        logger.info("locale_loaded", locale=locale, key_count=len(self._data))

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def data(self) -> LocaleData:
        return self._data

    def translate(
        self,
        key: str,
        options: Optional[TranslateOptions] = None,
        *,
        count: Optional[int] = None,
    ) -> str:
        """Translate a key; returns the key itself when nothing applies."""
        return self._translator.translate(key, options, count=count)

    def has_translation(self, key: str) -> bool:
        return self._translator.has_translation(key)

    def date(
        self,
        value: dt.date,
        options: Optional[LocalizeOptions] = None,
        *,
        format_name: Optional[str] = None,
    ) -> str:
        """Format a date.

        Raises:
            FormattingError: If the format cannot be resolved or applied.
        """
        return self._formatter.date(value, options, format_name=format_name)

    def time(
        self,
        value: Union[dt.time, dt.datetime],
        options: Optional[LocalizeOptions] = None,
        *,
        format_name: Optional[str] = None,
    ) -> str:
        """Format a time.

        Raises:
            FormattingError: If the format cannot be resolved or applied.
        """
        return self._formatter.time(value, options, format_name=format_name)

    def available_formats(self, kind: str):
        return self._formatter.available_formats(kind)
