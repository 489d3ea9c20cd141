"""Locale store interface.

Defines the single capability the i18n core needs from a storage backend.
"""

from abc import ABC, abstractmethod

from i18nkit.models import LocaleData


class LocaleStore(ABC):
    """Abstract base for locale stores.

    Implementations decide where a locale's data lives and how it is parsed.
    """

    @abstractmethod
    def load(self, locale: str) -> LocaleData:
        """Load the data for a locale.

        Args:
            locale: Locale identifier (e.g., "en", "pt").

        Returns:
            LocaleData holding the locale's translations and formats.

        Raises:
            LocaleLoadError: If the locale data cannot be read or parsed.
        """
        pass
