"""Text models.

Defines the data structures shared by the registry, the reconciler and the
store/cache backends.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional


class TextSnapshot(Mapping[str, str]):
    """Immutable key -> text mapping for exactly one locale.

    Built once per activation and replaced wholesale, never updated in
    place. Behaves as a read-only ``Mapping``.

    Attributes:
        locale: Locale the texts belong to.
    """

    __slots__ = ("_locale", "_texts")

    def __init__(
        self, locale: Optional[str], texts: Optional[Mapping[str, str]] = None
    ):
        self._locale = locale
        self._texts = MappingProxyType(dict(texts or {}))

    @property
    def locale(self) -> Optional[str]:
        return self._locale

    def __getitem__(self, key: str) -> str:
        return self._texts[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._texts)

    def __len__(self) -> int:
        return len(self._texts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextSnapshot):
            return self._locale == other._locale and dict(self._texts) == dict(
                other._texts
            )
        if isinstance(other, Mapping):
            return dict(self._texts) == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TextSnapshot(locale={self._locale!r}, size={len(self._texts)})"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for cache storage."""
        return {"locale": self._locale, "texts": dict(self._texts)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TextSnapshot":
        """Rebuild a snapshot from ``to_dict`` output.

        Raises:
            ValueError: If the payload is not a serialized snapshot.
        """
        if not isinstance(data, Mapping) or "locale" not in data:
            raise ValueError("Not a serialized TextSnapshot")
        texts = data.get("texts") or {}
        if not isinstance(texts, Mapping):
            raise ValueError("Serialized TextSnapshot texts must be a mapping")
        return cls(locale=data["locale"], texts=texts)

    @classmethod
    def from_rows(cls, locale: str, rows: List["TextRow"]) -> "TextSnapshot":
        """Build a snapshot from store rows; later rows win on duplicate keys."""
        return cls(locale=locale, texts={row.key: row.value for row in rows})


@dataclass(frozen=True)
class TextRow:
    """A single row of the durable texts table.

    Attributes:
        key: Text key (e.g., "welcome").
        value: Translated text.
        locale: Locale code of the row.
        scope: Optional grouping used by editors (e.g., "global", "admin").
    """

    key: str
    value: str
    locale: str
    scope: Optional[str] = None


@dataclass(frozen=True)
class LocaleEntry:
    """One configured locale.

    Attributes:
        code: Code used in URLs and in the texts table (e.g., "en").
        locale: Optional canonical locale returned by detection instead of code.
        attributes: Display attributes (name, native name, flag, ...).
        is_default: True for the fallback locale.
    """

    code: str
    locale: Optional[str] = None
    attributes: Mapping[str, Any] = field(default_factory=dict)
    is_default: bool = False

    @property
    def canonical(self) -> str:
        """Canonical locale, the code itself when no override is configured."""
        return self.locale or self.code


class LocaleTable(Mapping[str, LocaleEntry]):
    """Read-only table of configured locales and the fallback locale."""

    def __init__(self, entries: Mapping[str, Mapping[str, Any]], default_locale: str):
        self.default_locale = default_locale
        table = {}
        for code, attributes in entries.items():
            attributes = dict(attributes or {})
            canonical = attributes.pop("locale", None)
            table[code] = LocaleEntry(
                code=code,
                locale=canonical,
                attributes=MappingProxyType(attributes),
                is_default=code == default_locale,
            )
        self._entries = MappingProxyType(table)

    def __getitem__(self, code: str) -> LocaleEntry:
        return self._entries[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LocaleTable(codes={list(self._entries)!r}, default={self.default_locale!r})"

    @classmethod
    def from_settings(cls, locale_settings) -> "LocaleTable":
        """Build the table from ``LocaleSettings``."""
        return cls(locale_settings.locales, locale_settings.default_locale)


class MissingKeySet:
    """Keys requested during a session that had no translation.

    Maps each key to itself: the key is the placeholder value stored for
    editors to translate later. Set semantics, insertion order preserved.
    """

    def __init__(self, keys: Optional[List[str]] = None):
        self._keys: Dict[str, str] = {}
        for key in keys or []:
            self.add(key)

    def add(self, key: str) -> bool:
        """Record a key; returns False when it was already recorded."""
        if key in self._keys:
            return False
        self._keys[key] = key
        return True

    def items(self):
        return self._keys.items()

    def keys(self) -> List[str]:
        return list(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)

    def __repr__(self) -> str:
        return f"MissingKeySet({list(self._keys)!r})"
