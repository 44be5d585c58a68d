"""Translation models for the localization core.

Defines the closed set of canonical locales and the value objects that flow
between the resolver, the loader and the branding step.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Union


class Locale(str, Enum):
    """Canonical locale identifiers.

    The set is closed: every member has exactly one bundled message catalog
    and one brand name (or falls back to the primary locale's brand name).
    """

    EN = "en"
    FA = "fa"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Args:
            locale_str: Canonical locale code (e.g., "en", "fa").

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If locale string is not a canonical locale.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    @property
    def language(self) -> str:
        """Bare language code of the locale (e.g., "en" from "en-US")."""
        return self.value.split("-")[0]


LocaleLike = Union[Locale, str]


def locale_code(locale: LocaleLike) -> str:
    """Return the plain string code for a Locale or a raw code."""
    if isinstance(locale, Locale):
        return locale.value
    return str(locale)


@dataclass(frozen=True)
class TranslationCatalog:
    """Message catalog for a single locale.

    Messages are a flat mapping of message key (e.g. "update.available.title")
    to message template. Templates are opaque here; placeholder syntax is
    interpreted by downstream formatters.

    Attributes:
        locale: The Locale this catalog is for.
        messages: Read-only mapping {key: message_template}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    locale: Locale
    messages: Mapping[str, Any] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.messages, MappingProxyType):
            object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def get_message(self, key: str) -> Optional[Any]:
        """Retrieve a message template by key, or None if not found."""
        return self.messages.get(key)

    def has_message(self, key: str) -> bool:
        return key in self.messages

    def with_messages(self, messages: Mapping[str, Any]) -> "TranslationCatalog":
        """Return a copy of this catalog holding ``messages``."""
        return replace(self, messages=MappingProxyType(dict(messages)))

    def to_dict(self) -> dict:
        """Return a fresh, independently owned dict of the messages."""
        return dict(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


@dataclass(frozen=True)
class LocaleBundle:
    """Everything needed to load one canonical locale.

    Attributes:
        locale: Canonical locale the bundle serves.
        load_catalog: Callable returning the locale's TranslationCatalog.
        load_locale_data: Callable registering the locale's auxiliary
            formatting data (plural, number, date/time, list, relative time).
    """

    locale: Locale
    load_catalog: Callable[[], TranslationCatalog]
    load_locale_data: Callable[[], Any]


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading a locale's translations.

    Attributes:
        catalog: The catalog handed to callers (requested or recovered).
        requested_locale: The locale the caller asked for.
        recovered: True when ``catalog`` is a fallback after a failure.
        reason: Failure description when recovered.
    """

    catalog: TranslationCatalog
    requested_locale: LocaleLike
    recovered: bool = False
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.recovered
