"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale settings class
"""

from i18nkit.configuration.i18n import I18nSettings
from i18nkit.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
