"""Brand name substitution over message catalogs."""

import re
from typing import Any, Dict, Mapping

from chatlocale.i18n.models import Locale, LocaleLike, TranslationCatalog, locale_code

LEGACY_BRAND_TOKEN = "Mattermost"


class BrandingTransformer:
    """Rewrites the legacy product name in message values to a brand name.

    The token is matched case-insensitively and every occurrence is
    replaced. The brand name is inserted verbatim.

    Attributes:
        brand_names: Mapping {locale_code: brand_name}.
        primary_locale: Locale whose brand name is used when a locale has none.
        token: Legacy product name being replaced.
    """

    def __init__(
        self,
        brand_names: Mapping[str, str],
        primary_locale: LocaleLike = Locale.FA,
        token: str = LEGACY_BRAND_TOKEN,
    ):
        if not token:
            raise ValueError("Legacy brand token must not be empty")

        self.brand_names = {locale_code(k): v for k, v in brand_names.items()}
        self.primary_locale = locale_code(primary_locale)
        self.token = token
        self._pattern = re.compile(re.escape(token), re.IGNORECASE)

        if self.primary_locale not in self.brand_names:
            raise ValueError(
                f"No brand name configured for primary locale {self.primary_locale}"
            )
        for code, brand_name in self.brand_names.items():
            if brand_name and self._pattern.search(brand_name):
                raise ValueError(
                    f"Brand name for {code} contains the legacy token {token!r}"
                )

    def brand_name_for(self, locale: LocaleLike) -> str:
        """Brand name for ``locale``, falling back to the primary locale's."""
        brand_name = self.brand_names.get(locale_code(locale))
        return brand_name or self.brand_names[self.primary_locale]

    def apply(self, messages: Mapping[str, Any], locale: LocaleLike) -> Dict[str, Any]:
        """Return a new dict with the token replaced in every string value.

        The input mapping is not modified. Non-string values and strings
        without the token are carried over as the same objects.
        """
        brand_name = self.brand_name_for(locale)
        branded = {}
        for key, value in messages.items():
            if isinstance(value, str) and self._pattern.search(value):
                value = self._pattern.sub(lambda _match: brand_name, value)
            branded[key] = value
        return branded

    def apply_to_catalog(
        self, catalog: TranslationCatalog, locale: LocaleLike
    ) -> TranslationCatalog:
        """Return a branded copy of ``catalog`` (same locale and timestamp)."""
        return catalog.with_messages(self.apply(catalog.messages, locale))


def apply_branding(
    messages: Mapping[str, Any],
    locale: LocaleLike,
    brand_names: Mapping[str, str],
    primary_locale: LocaleLike = Locale.FA,
    token: str = LEGACY_BRAND_TOKEN,
) -> Dict[str, Any]:
    """Functional form of BrandingTransformer.apply."""
    return BrandingTransformer(brand_names, primary_locale, token).apply(
        messages, locale
    )
