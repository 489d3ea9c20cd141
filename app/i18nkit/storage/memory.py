"""Static in-memory locale store."""

from typing import Any, Mapping

from i18nkit.logging import get_module_logger
from i18nkit.models import LocaleData
from i18nkit.storage.base import LocaleStore

logger = get_module_logger()


class MapLocaleStore(LocaleStore):
    """Locale store backed by a mapping of locale -> data.

    Unknown locales load as empty data rather than failing.

    Attributes:
        data: Mapping of locale identifier to raw locale data.
    """

    def __init__(self, data: Mapping[str, Any]):
        self.data = data

    def load(self, locale: str) -> LocaleData:
        raw = self.data.get(locale)
        if raw is None:
            logger.debug("unknown_locale_loaded_empty", locale=locale)
            return LocaleData()
        return LocaleData(raw)
