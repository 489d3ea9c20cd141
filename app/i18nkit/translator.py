"""Translation service for retrieving and interpolating translated messages.

Entries live under the ``translations`` mapping of a locale's data. An entry
is either a plain string or a mapping of count selectors:

    new_message:
      "1": "you have a new message"
      "2..": "you have {{.count}} new messages"
      other: "no message"

Selectors are exact counts ("1"), closed ranges ("2..5") or open ranges
("2.."). They are tried in the order they are defined. ``other`` is only
consulted when the count is zero or negative; a positive count that matches
no selector returns the key itself, even when ``other`` exists.
"""

import re
from typing import Optional

from i18nkit.interpolation import interpolate
from i18nkit.logging import get_module_logger
from i18nkit.models import LocaleData, TranslateOptions

logger = get_module_logger()

OTHER_SELECTOR = "other"

_NUMBER_PATTERN = re.compile(r"^\d+$")
_RANGE_PATTERN = re.compile(r"^(\d+)\.\.(\d+)?$")


def selector_matches(selector: str, count: int) -> bool:
    """Check whether a plural selector matches a count.

    Args:
        selector: Exact count ("3"), closed range ("1..2") or open range ("2..").
        count: Count to test.

    Returns:
        True if the selector matches.
    """
    if _NUMBER_PATTERN.match(selector) and selector == str(count):
        return True

    range_match = _RANGE_PATTERN.match(selector)
    if not range_match:
        return False

    start = int(range_match.group(1))
    end = range_match.group(2)
    if end is None:
        return count >= start
    return start <= count <= int(end)


class Translator:
    """Resolves translation keys against one locale's data.

    Attributes:
        data: LocaleData the translations are read from.
    """

    def __init__(self, data: LocaleData):
        self.data = data

    @property
    def translations(self) -> Optional[LocaleData]:
        return self.data.mapping("translations")

    def has_translation(self, key: str) -> bool:
        """Check if an entry exists for key.

        Args:
            key: Translation key.

        Returns:
            True if the locale defines the key.
        """
        translations = self.translations
        return translations is not None and key in translations

    def translate(
        self,
        key: str,
        options: Optional[TranslateOptions] = None,
        *,
        count: Optional[int] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Never raises: missing content resolves to the key itself.

        Args:
            key: Translation key.
            options: TranslateOptions (count, extra template variables).
            count: Shortcut overriding ``options.count``.

        Returns:
            Translated message, or key if no translation applies.
        """
        options = options or TranslateOptions()
        if count is not None:
            options = TranslateOptions(count=count, variables=options.variables)

        translations = self.translations
        if translations is None or key not in translations:
            logger.debug("translation_not_found", key=key)
            return key

        entry = translations[key]
        if isinstance(entry, str):
            return entry

        if not isinstance(entry, LocaleData):
            logger.debug("translation_entry_unsupported", key=key)
            return key

        if options.count <= 0:
            if OTHER_SELECTOR in entry:
                return str(entry[OTHER_SELECTOR])
            return key

        for selector, message in entry.items():
            if selector == OTHER_SELECTOR:
                continue
            if selector_matches(selector, options.count):
                return interpolate(str(message), options.template_values())

        logger.debug("plural_selector_not_matched", key=key, count=options.count)
        return key
