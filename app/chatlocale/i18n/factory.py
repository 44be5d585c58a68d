"""Factory functions for creating i18n components.

Builds the locale bundle table and a fully wired Translator from settings.
"""

from functools import partial
from pathlib import Path
from typing import Dict, Optional

from chatlocale.configuration import LocalizationSettings, settings
from chatlocale.i18n.branding import BrandingTransformer
from chatlocale.i18n.dates import DateLibraryLocale, date_locale
from chatlocale.i18n.languages import LocaleCatalog
from chatlocale.i18n.loader import CatalogSource, TranslationLoader, YAMLCatalogSource
from chatlocale.i18n.locale_data import FormattingRuntime, formatting_runtime
from chatlocale.i18n.models import Locale, LocaleBundle
from chatlocale.i18n.resolvers import LocaleResolver
from chatlocale.i18n.translator import Translator
from chatlocale.logging import get_module_logger

logger = get_module_logger()

DEFAULT_TRANSLATIONS_DIR = Path(__file__).resolve().parents[1] / "locales"


def build_locale_bundles(
    source: CatalogSource,
    runtime: FormattingRuntime = formatting_runtime,
) -> Dict[Locale, LocaleBundle]:
    """Build the {Locale: LocaleBundle} dispatch table.

    Adding a canonical locale only needs a Locale member and its catalog file.
    """
    return {
        locale: LocaleBundle(
            locale=locale,
            load_catalog=partial(source.load, locale),
            load_locale_data=partial(runtime.register, locale),
        )
        for locale in Locale
    }


def create_translator(
    i18n_settings: Optional[LocalizationSettings] = None,
    source: Optional[CatalogSource] = None,
    runtime: FormattingRuntime = formatting_runtime,
    date_library: DateLibraryLocale = date_locale,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        i18n_settings: Localization settings (default: settings.i18n).
        source: Catalog source (default: YAML files in TRANSLATIONS_DIR or
            the bundled locales directory).
        runtime: Formatting runtime receiving per-locale data.
        date_library: Date library locale holder.

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If the primary locale is not canonical or the
            translations directory does not exist.

    Usage:
        translator = create_translator()
        translator.get_translations("en-US")
    """
    config = i18n_settings or settings.i18n
    primary_locale = Locale.from_string(config.primary_locale)

    if source is None:
        source = YAMLCatalogSource(
            translations_dir=config.translations_dir or DEFAULT_TRANSLATIONS_DIR,
            use_cache=config.use_cache,
        )

    loader = TranslationLoader(
        bundles=build_locale_bundles(source, runtime),
        primary_locale=primary_locale,
    )
    translator = Translator(
        resolver=LocaleResolver(LocaleCatalog(), default_locale=primary_locale),
        loader=loader,
        branding=BrandingTransformer(
            config.brand_names,
            primary_locale=primary_locale,
            token=config.legacy_brand_token,
        ),
        date_library=date_library,
        device_locale=config.device_locale,
    )
    logger.info(
        "translator_created",
        primary_locale=primary_locale.value,
        locale_count=len(loader.supported_locales),
    )
    return translator
