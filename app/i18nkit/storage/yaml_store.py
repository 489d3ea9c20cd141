"""YAML-file-backed locale store.

Reads ``<locale>.yml`` from a directory. The directory may be a
``pathlib.Path`` or any ``importlib.resources`` traversable, so locale files
can ship as package data.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Union

import yaml

from i18nkit.exceptions import LocaleLoadError
from i18nkit.logging import get_module_logger
from i18nkit.models import LocaleData
from i18nkit.storage.base import LocaleStore

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

logger = get_module_logger()


class YAMLLocaleStore(LocaleStore):
    """Loader for ``<locale>.yml`` files.

    Attributes:
        directory: Directory (or traversable) containing the YAML files.
    """

    def __init__(self, directory: Union[str, Path, "Traversable"]):
        """Initialize YAML locale store.

        Args:
            directory: Path or traversable holding ``<locale>.yml`` files.
        """
        self.directory = Path(directory) if isinstance(directory, str) else directory

    def load(self, locale: str) -> LocaleData:
        """Load ``<locale>.yml`` from the directory.

        Args:
            locale: Locale identifier.

        Returns:
            LocaleData parsed from the file. An empty file yields empty data.

        Raises:
            LocaleLoadError: If the file cannot be read, is not valid YAML,
                or its top level is not a mapping.
        """
        filename = f"{locale}.yml"
        try:
            contents = (self.directory / filename).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("locale_file_unreadable", file=filename, error=str(e))
            raise LocaleLoadError(f"failed to read locale file: {e}") from e

        try:
            data = yaml.safe_load(contents)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=filename, error=str(e))
            raise LocaleLoadError(f"failed to read locale file: {e}") from e

        if data is None:
            return LocaleData()

        if not isinstance(data, dict):
            logger.error("invalid_yaml_format", file=filename, expected="dict")
            raise LocaleLoadError(
                f"failed to read locale file: {filename} must contain a mapping"
            )

        logger.info("loaded_locale_file", file=filename, key_count=len(data))
        return LocaleData(data)
