"""i18nkit - translations and locale-aware date/time formatting.

Resolves strings and date/time representations for one locale from a nested
key-value dataset provided by a locale store.

Main components:
- models: LocaleData, TranslateOptions, LocalizeOptions
- storage: LocaleStore, MapLocaleStore, YAMLLocaleStore
- translator: Translator with plural selection and interpolation
- formatter: DateTimeFormatter with day/month name substitution
- service: I18n facade bound to one store and locale
- factory: create_i18n() for YAML-backed instances
"""

from i18nkit.exceptions import (
    FormattingError,
    I18nError,
    LocaleLoadError,
    MissingFormatsRootError,
    MissingFormatTableError,
    MissingTypeFormatsError,
    UnderlyingFormatError,
    UnknownFormatNameError,
)
from i18nkit.factory import create_i18n
from i18nkit.formatter import DateTimeFormatter
from i18nkit.models import LocaleData, LocalizeOptions, TranslateOptions
from i18nkit.service import I18n
from i18nkit.storage import LocaleStore, MapLocaleStore, YAMLLocaleStore
from i18nkit.translator import Translator

__all__ = [
    "I18n",
    "create_i18n",
    "LocaleData",
    "TranslateOptions",
    "LocalizeOptions",
    "LocaleStore",
    "MapLocaleStore",
    "YAMLLocaleStore",
    "Translator",
    "DateTimeFormatter",
    "I18nError",
    "LocaleLoadError",
    "FormattingError",
    "MissingFormatsRootError",
    "MissingTypeFormatsError",
    "MissingFormatTableError",
    "UnknownFormatNameError",
    "UnderlyingFormatError",
]
