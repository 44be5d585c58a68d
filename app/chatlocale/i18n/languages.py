"""Registry of language identifiers known to the application."""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from chatlocale.i18n.models import Locale

# Keys may be full tags ("pt-BR") or bare language codes ("en").
AVAILABLE_LANGUAGES: Mapping[str, Locale] = MappingProxyType(
    {locale.value: locale for locale in Locale}
)


class LocaleCatalog:
    """Static lookup from language identifier to canonical locale.

    Attributes:
        entries: Read-only mapping {language_identifier: Locale}.
    """

    def __init__(self, entries: Optional[Mapping[str, Locale]] = None):
        self.entries: Mapping[str, Locale] = MappingProxyType(
            dict(AVAILABLE_LANGUAGES if entries is None else entries)
        )

    def canonical_locale_for(self, language: str) -> Optional[Locale]:
        """Look up the canonical locale for a language identifier.

        Args:
            language: Full tag or bare language code, matched exactly.

        Returns:
            The canonical Locale, or None if the identifier is unknown.
        """
        return self.entries.get(language)

    @property
    def supported_locales(self) -> list:
        """Distinct canonical locales reachable through the catalog."""
        return list(dict.fromkeys(self.entries.values()))

    def __contains__(self, language: object) -> bool:
        return language in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
