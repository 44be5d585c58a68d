"""i18n system - locale resolution, message catalogs and branding.

Main components:
- models: Locale, TranslationCatalog, LocaleBundle, LoadResult
- languages: LocaleCatalog registry of known language identifiers
- resolvers: LocaleResolver reducing raw tags to canonical locales
- loader: CatalogSource/YAMLCatalogSource and the recovering TranslationLoader
- locale_data: FormattingRuntime with Babel-backed per-locale formatting data
- branding: BrandingTransformer replacing the legacy product name
- translator: Translator composing the pieces
- service: module-level API over a process-wide Translator
"""

from chatlocale.i18n.branding import BrandingTransformer, apply_branding
from chatlocale.i18n.dates import DateLibraryLocale, date_locale
from chatlocale.i18n.factory import build_locale_bundles, create_translator
from chatlocale.i18n.languages import AVAILABLE_LANGUAGES, LocaleCatalog
from chatlocale.i18n.loader import CatalogSource, TranslationLoader, YAMLCatalogSource
from chatlocale.i18n.locale_data import (
    FormattingRuntime,
    LocaleFormatter,
    formatting_runtime,
)
from chatlocale.i18n.models import LoadResult, Locale, LocaleBundle, TranslationCatalog
from chatlocale.i18n.prompts import UpdatePrompt, build_update_prompt
from chatlocale.i18n.resolvers import LocaleResolver
from chatlocale.i18n.service import (
    get_default_locale,
    get_locale_from_language,
    get_localized_message,
    get_translations,
    get_translator,
    sync_external_date_library_locale,
)
from chatlocale.i18n.translator import Translator

__all__ = [
    "AVAILABLE_LANGUAGES",
    "BrandingTransformer",
    "CatalogSource",
    "DateLibraryLocale",
    "FormattingRuntime",
    "LoadResult",
    "Locale",
    "LocaleBundle",
    "LocaleCatalog",
    "LocaleFormatter",
    "LocaleResolver",
    "TranslationCatalog",
    "TranslationLoader",
    "Translator",
    "UpdatePrompt",
    "YAMLCatalogSource",
    "apply_branding",
    "build_locale_bundles",
    "build_update_prompt",
    "create_translator",
    "date_locale",
    "formatting_runtime",
    "get_default_locale",
    "get_locale_from_language",
    "get_localized_message",
    "get_translations",
    "get_translator",
    "sync_external_date_library_locale",
]
