"""Locale stores: the abstract capability and its two backends."""

from i18nkit.storage.base import LocaleStore
from i18nkit.storage.memory import MapLocaleStore
from i18nkit.storage.yaml_store import YAMLLocaleStore

__all__ = ["LocaleStore", "MapLocaleStore", "YAMLLocaleStore"]
