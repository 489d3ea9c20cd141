"""Locale data models for the i18n system.

Defines the immutable nested structure a locale store produces and the
option structs accepted by translate(), date() and time().
"""

from collections.abc import Mapping as MappingABC
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple


def freeze(value: Any) -> Any:
    """Convert raw parsed data into its immutable form.

    Mappings become LocaleData (keys coerced to str, order preserved),
    lists and tuples become tuples, scalars are returned unchanged.

    Args:
        value: Raw value (e.g. from yaml.safe_load).

    Returns:
        Frozen value.
    """
    if isinstance(value, LocaleData):
        return value
    if isinstance(value, MappingABC):
        return LocaleData(value)
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Convert frozen data back to plain dicts and lists."""
    if isinstance(value, LocaleData):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


class LocaleData(MappingABC):
    """Read-only nested key-value data for a single locale.

    Values are strings (or other scalars), nested LocaleData, or tuples.
    Accessors check the value type at each access site and return None
    instead of raising when a key is missing or holds another type.

    Example:
        >>> data = LocaleData({"formats": {"date": {"formats": {"default": "%Y"}}}})
        >>> data.mapping("formats").mapping("date").mapping("formats").string("default")
        '%Y'
    """

    __slots__ = ("_items",)

    def __init__(self, raw: Optional[Mapping[Any, Any]] = None):
        items: Dict[str, Any] = {}
        for key, value in (raw or {}).items():
            items[str(key)] = freeze(value)
        self._items = items

    def __getitem__(self, key: str) -> Any:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"LocaleData({self._items!r})"

    def mapping(self, key: str) -> Optional["LocaleData"]:
        """Return the nested mapping stored under key, if any."""
        value = self._items.get(key)
        return value if isinstance(value, LocaleData) else None

    def string(self, key: str) -> Optional[str]:
        """Return the string stored under key, if any."""
        value = self._items.get(key)
        return value if isinstance(value, str) else None

    def sequence(self, key: str) -> Optional[Tuple[Any, ...]]:
        """Return the sequence stored under key, if any."""
        value = self._items.get(key)
        return value if isinstance(value, tuple) else None

    def to_dict(self) -> Dict[str, Any]:
        """Return a mutable deep copy as plain dicts and lists."""
        return thaw(self)


@dataclass(frozen=True)
class TranslateOptions:
    """Options for translate().

    Attributes:
        count: Count used for plural selection and as ``{{.count}}``.
        variables: Extra template values. ``count`` always takes precedence.
    """

    count: int = 0
    variables: Mapping[str, Any] = field(default_factory=dict)

    def template_values(self) -> Dict[str, Any]:
        """Build the values available to ``{{.name}}`` placeholders."""
        values = dict(self.variables)
        values["count"] = self.count
        return values


@dataclass(frozen=True)
class LocalizeOptions:
    """Options for date() and time().

    Attributes:
        format_name: Entry of the locale's format table to use.
    """

    format_name: str = "default"
