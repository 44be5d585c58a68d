"""Translator composing locale resolution, catalog loading and branding.

Raw locale tag -> LocaleResolver -> canonical locale -> TranslationLoader
(catalog + formatting data) -> BrandingTransformer -> catalog for consumers.
"""

import re
from typing import Any, Dict, Optional

from chatlocale.i18n.branding import BrandingTransformer
from chatlocale.i18n.dates import DateLibraryLocale, date_locale
from chatlocale.i18n.loader import TranslationLoader
from chatlocale.i18n.models import Locale, LoadResult
from chatlocale.i18n.resolvers import LocaleResolver, language_code
from chatlocale.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Resolves locales and serves branded message catalogs.

    Every operation takes the locale tag explicitly; there is no ambient
    "current locale" apart from the date library's, which only changes
    through sync_date_locale().

    Attributes:
        resolver: LocaleResolver for raw locale tags.
        loader: TranslationLoader for canonical locales.
        branding: BrandingTransformer applied to every catalog.
        date_library: Date formatting facility kept in sync by sync_date_locale().
        default_locale: Locale resolved from the device locale at startup.
    """

    def __init__(
        self,
        resolver: LocaleResolver,
        loader: TranslationLoader,
        branding: BrandingTransformer,
        date_library: DateLibraryLocale = date_locale,
        device_locale: Optional[str] = None,
    ):
        """Initialize Translator.

        Args:
            resolver: LocaleResolver instance.
            loader: TranslationLoader instance.
            branding: BrandingTransformer instance.
            date_library: Date library locale holder (default: process-wide one).
            device_locale: Locale tag reported by the device, if known.
        """
        self.resolver = resolver
        self.loader = loader
        self.branding = branding
        self.date_library = date_library
        self.default_locale: Locale = resolver.resolve(device_locale)
        logger.info(
            "initialized_translator",
            default_locale=self.default_locale.value,
            device_locale=device_locale,
        )

    def get_locale_from_language(self, locale_tag: Optional[str]) -> Locale:
        return self.resolver.resolve(locale_tag)

    def load_translations(self, locale_tag: Optional[str]) -> LoadResult:
        """Resolve, load and brand; the result records any recovery.

        Branding uses the resolved locale even when the loader fell back to
        the primary locale's catalog.
        """
        locale = self.resolver.resolve(locale_tag)
        result = self.loader.load_result(locale)
        branded = self.branding.apply_to_catalog(result.catalog, locale)
        return LoadResult(
            catalog=branded,
            requested_locale=locale,
            recovered=result.recovered,
            reason=result.reason,
        )

    def get_translations(self, locale_tag: Optional[str]) -> Dict[str, Any]:
        """Branded message catalog for a raw locale tag, as a fresh dict."""
        return self.load_translations(locale_tag).catalog.to_dict()

    def get_localized_message(
        self,
        locale_tag: Optional[str],
        key: str,
        default_message: Optional[str] = None,
    ) -> str:
        """Localized message for ``key``.

        Returns:
            The message, else ``default_message``, else an empty string.
        """
        message = self.get_translations(locale_tag).get(key)
        if message:
            return str(message)
        return default_message or ""

    def format_message(
        self,
        locale_tag: Optional[str],
        key: str,
        variables: Optional[Dict[str, Any]] = None,
        default_message: Optional[str] = None,
    ) -> str:
        """Localized message with ``{name}`` / ``{{name}}`` placeholders filled.

        Raises:
            ValueError: If a placeholder has no value in ``variables``.
        """
        message = self.get_localized_message(locale_tag, key, default_message)
        return self._interpolate(message, variables or {})

    def sync_date_locale(self, locale_tag: Optional[str] = None) -> str:
        """Point the date library at the resolved locale's language code.

        Uses default_locale when no tag is given. If the date library
        rejects the code, its previous locale is kept.

        Returns:
            The date library's locale after the call.
        """
        if locale_tag:
            locale = self.resolver.resolve(locale_tag)
        else:
            locale = self.default_locale
        code = language_code(locale.value)
        try:
            self.date_library.set_locale(code)
        except ValueError as e:
            logger.warning(
                "date_locale_not_supported",
                locale=code,
                current_locale=self.date_library.locale,
                error=str(e),
            )
        return self.date_library.locale

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        """Replace ``{{var}}`` and ``{var}`` placeholders with values.

        Raises:
            ValueError: If variable not found in variables dict.
        """
        double_matches = re.findall(r"\{\{(\w+)\}\}", message)
        single_matches = re.findall(r"\{(\w+)\}", message)

        for var_name in dict.fromkeys(double_matches + single_matches):
            if var_name not in variables:
                logger.error(
                    "missing_interpolation_variable",
                    variable=var_name,
                    available_variables=list(variables.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {var_name}")

        # Double-brace first so "{{var}}" does not leave stray braces
        for var_name in double_matches:
            message = message.replace(f"{{{{{var_name}}}}}", str(variables[var_name]))
        for var_name in single_matches:
            message = message.replace(f"{{{var_name}}}", str(variables[var_name]))

        return message
