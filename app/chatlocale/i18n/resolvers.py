"""Locale resolution logic for device-reported locale tags.

Reduces an arbitrary tag such as "en-US" or "fa-IR" to one canonical locale.
"""

from typing import Iterable, Optional

from chatlocale.i18n.languages import LocaleCatalog
from chatlocale.i18n.models import Locale
from chatlocale.logging import get_module_logger

logger = get_module_logger()

TAG_SEPARATOR = "-"


def language_code(tag: str) -> str:
    """Bare language code of a locale tag ("en-US" -> "en")."""
    return tag.split(TAG_SEPARATOR, 1)[0]


class LocaleResolver:
    """Resolves raw locale tags to canonical locales.

    Lookup order:
    1. Full tag as given (e.g. "en-US")
    2. Bare language code (e.g. "en")
    3. Default locale

    No case normalization is applied; "EN-us" only matches catalog
    entries spelled the same way.
    """

    def __init__(
        self,
        catalog: Optional[LocaleCatalog] = None,
        default_locale: Locale = Locale.FA,
    ):
        """Initialize locale resolver.

        Args:
            catalog: Language identifier registry (default: AVAILABLE_LANGUAGES).
            default_locale: Locale returned when no lookup succeeds.
        """
        self.catalog = catalog if catalog is not None else LocaleCatalog()
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale.value)

    def resolve(self, locale_tag: Optional[str]) -> Locale:
        """Resolve a raw locale tag to a canonical locale.

        Never raises: absent or unknown tags resolve to the default locale.

        Args:
            locale_tag: Tag in ``language[-region]`` form, or None.

        Returns:
            Canonical Locale.
        """
        if not locale_tag:
            return self.default_locale

        locale = self.catalog.canonical_locale_for(locale_tag)
        if locale is None:
            locale = self.catalog.canonical_locale_for(language_code(locale_tag))
        if locale is None:
            self.log.debug("no_matching_locale", locale_tag=locale_tag)
            return self.default_locale
        return locale

    def resolve_from_device_locales(self, locale_tags: Iterable[str]) -> Locale:
        """Resolve the first locale reported by the device.

        Args:
            locale_tags: Device locale tags in preference order.

        Returns:
            Canonical Locale for the first tag, or the default locale if
            the device reported none.
        """
        first = next(iter(locale_tags), None)
        return self.resolve(first)
