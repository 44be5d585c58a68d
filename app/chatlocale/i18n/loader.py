"""Translation loading interface and implementations.

Defines the contract for reading message catalogs, a YAML-based source, and
the TranslationLoader that dispatches on canonical locale and recovers from
load failures.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from chatlocale.i18n.models import (
    Locale,
    LocaleBundle,
    LocaleLike,
    LoadResult,
    TranslationCatalog,
    locale_code,
)
from chatlocale.logging import get_module_logger

logger = get_module_logger()


class CatalogSource(ABC):
    """Abstract base for message catalog sources.

    Implementations define how bundled translation resources are located
    and parsed for each canonical locale.
    """

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Load the message catalog for a locale.

        Args:
            locale: Locale to load translations for.

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load catalogs for all locales the source provides."""


class YAMLCatalogSource(CatalogSource):
    """Source for YAML-based message catalogs.

    Expects files named ``<domain>.<locale>.yml`` in the translations
    directory. All files for one locale are merged; nested mappings are
    flattened to dotted keys, so ``update: {available: {title: ...}}``
    becomes ``update.available.title``.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        use_cache: Whether parsed catalogs are kept in memory.
        cache: Loaded catalogs (locale -> catalog).
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML catalog source.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_source",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, locale: Locale) -> TranslationCatalog:
        """Load and merge every ``*.<locale>.yml`` file.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            return self.cache[locale]

        yaml_files = sorted(self.translations_dir.glob(f"*.{locale.value}.yml"))
        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.value} in {self.translations_dir}"
            )

        messages: Dict[str, Any] = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e
            if data:
                self._merge_yaml_data(messages, data, yaml_file)

        catalog = TranslationCatalog(
            locale=locale,
            messages=messages,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        logger.info(
            "loaded_translations",
            locale=locale.value,
            file_count=len(yaml_files),
            message_count=len(catalog),
        )

        if self.use_cache:
            self.cache[locale] = catalog
        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load catalogs for every canonical locale with files present.

        Raises:
            ValueError: If no translation files found at all.
        """
        locales_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # "mobile.en.yml" -> stem "mobile.en" -> "en"
            parts = yaml_file.stem.split(".")
            if len(parts) >= 2:
                try:
                    locales_found.add(Locale.from_string(parts[-1]))
                except ValueError:
                    pass

        if not locales_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return {locale: self.load(locale) for locale in locales_found}

    def _merge_yaml_data(
        self,
        messages: Dict[str, Any],
        data: Any,
        source_file: Path,
        prefix: str = "",
    ) -> None:
        """Flatten parsed YAML into ``messages``; later files override earlier ones.

        Raises:
            ValueError: If the top level of the file is not a mapping.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid catalog format in {source_file}: expected a mapping, "
                f"got {type(data).__name__}"
            )

        for key, value in data.items():
            full_key = f"{prefix}{key}"
            if isinstance(value, dict):
                self._merge_yaml_data(messages, value, source_file, f"{full_key}.")
            else:
                messages[full_key] = value

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_translation_cache")


class TranslationLoader:
    """Loads a canonical locale's catalog and formatting data.

    Dispatches through a table of LocaleBundles built once at startup.
    Loading never raises: an unknown locale or any failure while loading
    the catalog or the formatting data is logged once and answered with
    the primary locale's catalog.

    Attributes:
        bundles: Mapping {Locale: LocaleBundle}.
        primary_locale: Locale whose catalog is served on failure.
    """

    def __init__(
        self,
        bundles: Mapping[Locale, LocaleBundle],
        primary_locale: Locale = Locale.FA,
    ):
        self.bundles = dict(bundles)
        self.primary_locale = primary_locale

        if primary_locale not in self.bundles:
            raise ValueError(
                f"No bundle registered for primary locale {primary_locale.value}"
            )

    def load_result(self, locale: LocaleLike) -> LoadResult:
        """Load translations for ``locale``, reporting whether it recovered."""
        code = locale_code(locale)
        try:
            bundle = self._bundle_for(code)
            bundle.load_locale_data()
            catalog = bundle.load_catalog()
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "translation_load_failed",
                locale=code,
                fallback_locale=self.primary_locale.value,
                error=str(e),
            )
            return LoadResult(
                catalog=self._fallback_catalog(),
                requested_locale=locale,
                recovered=True,
                reason=f"{type(e).__name__}: {e}",
            )
        return LoadResult(catalog=catalog, requested_locale=locale)

    def load(self, locale: LocaleLike) -> TranslationCatalog:
        """Catalog for ``locale`` (or the primary locale's after a failure)."""
        return self.load_result(locale).catalog

    @property
    def supported_locales(self) -> list:
        return list(self.bundles)

    def _bundle_for(self, code: str) -> LocaleBundle:
        for locale, bundle in self.bundles.items():
            if locale.value == code:
                return bundle
        raise KeyError(f"No translations registered for locale {code}")

    def _fallback_catalog(self) -> TranslationCatalog:
        try:
            return self.bundles[self.primary_locale].load_catalog()
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "fallback_translation_load_failed",
                locale=self.primary_locale.value,
                error=str(e),
            )
            return TranslationCatalog(locale=self.primary_locale)
