"""Locale resolution settings."""

from typing import Optional

from pydantic import Field

from i18nkit.configuration.base import ComponentSettings


class I18nSettings(ComponentSettings):
    """Settings for locale loading and formatting defaults.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale loaded when none is requested (default: en)
        I18N_LOCALES_DIR: Directory holding <locale>.yml files. When unset,
            the locales bundled with the package are used.

    Example:
        ```python
        from i18nkit.configuration import settings

        locale = settings.i18n.default_locale
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale loaded when none is requested",
    )
    locales_dir: Optional[str] = Field(
        default=None,
        alias="I18N_LOCALES_DIR",
        description="Directory containing <locale>.yml files",
    )
