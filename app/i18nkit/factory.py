"""Factory functions for creating i18n components.

Builds YAML-backed I18n instances from settings.
"""

from importlib import resources
from pathlib import Path
from typing import Optional, Union

from i18nkit.configuration import Settings, settings as default_settings
from i18nkit.logging import get_module_logger
from i18nkit.service import I18n
from i18nkit.storage.yaml_store import YAMLLocaleStore

logger = get_module_logger()


def bundled_locales_dir():
    """Return the directory of locale files shipped with the package."""
    return resources.files("i18nkit") / "locales"


def create_i18n(
    locale: Optional[str] = None,
    locales_dir: Union[str, Path, None] = None,
    settings: Optional[Settings] = None,
) -> I18n:
    """Create a YAML-backed I18n instance.

    Args:
        locale: Locale to load (default: settings.i18n.default_locale).
        locales_dir: Directory with <locale>.yml files (default:
            settings.i18n.locales_dir, then the bundled locales).
        settings: Settings to read defaults from (default: global settings).

    Returns:
        I18n: Instance bound to the loaded locale.

    Raises:
        LocaleLoadError: If the locale file cannot be loaded.

    Usage:
        # Defaults (bundled locales, default locale from settings)
        i18n = create_i18n()

        # Custom directory
        i18n = create_i18n("pt", locales_dir=Path("/srv/locales"))
    """
    settings = settings or default_settings
    locale = locale or settings.i18n.default_locale

    directory = locales_dir or settings.i18n.locales_dir
    if directory is None:
        directory = bundled_locales_dir()

    store = YAMLLocaleStore(directory)
    i18n = I18n(store, locale)

    logger.info("i18n_created", locale=locale, locales_dir=str(directory))
    return i18n
