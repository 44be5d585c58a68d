"""Localization feature settings."""

import re
from pathlib import Path
from typing import Dict, Optional

from pydantic import Field, model_validator

from chatlocale.configuration.base import FeatureSettings


class LocalizationSettings(FeatureSettings):
    """Locale resolution and branding configuration.

    Environment Variables:
        PRIMARY_LOCALE: Canonical locale used when nothing else matches (default: fa)
        DEVICE_LOCALE: Locale tag reported by the device, e.g. "en-US" (optional)
        LEGACY_BRAND_TOKEN: Product name rewritten in message values (default: Mattermost)
        BRAND_NAMES: JSON object mapping canonical locale to brand name
        TRANSLATIONS_DIR: Directory with <domain>.<locale>.yml catalogs
            (default: bundled chatlocale/locales)
        TRANSLATIONS_CACHE_ENABLED: Cache parsed catalogs in memory (default: True)

    Example:
        ```python
        from chatlocale.configuration import settings

        primary = settings.i18n.primary_locale
        brand = settings.i18n.brand_names["en"]
        ```
    """

    primary_locale: str = Field(
        default="fa",
        alias="PRIMARY_LOCALE",
        description="Canonical locale used as the default and branding fallback",
    )
    device_locale: Optional[str] = Field(
        default=None,
        alias="DEVICE_LOCALE",
        description="Locale tag reported by the device/OS",
    )
    legacy_brand_token: str = Field(
        default="Mattermost",
        alias="LEGACY_BRAND_TOKEN",
        description="Product name replaced case-insensitively in message values",
    )
    brand_names: Dict[str, str] = Field(
        default_factory=lambda: {
            "en": "Andisheh Hosseini Elementary",
            "fa": "دبستان اندیشه حسینی",
        },
        alias="BRAND_NAMES",
        description="Brand name per canonical locale",
    )
    translations_dir: Optional[Path] = Field(
        default=None,
        alias="TRANSLATIONS_DIR",
        description="Directory containing YAML message catalogs",
    )
    use_cache: bool = Field(
        default=True,
        alias="TRANSLATIONS_CACHE_ENABLED",
        description="Cache parsed message catalogs in memory",
    )

    @model_validator(mode="after")
    def validate_branding(self) -> "LocalizationSettings":
        """Brand map must cover the primary locale and never reintroduce the token."""
        if not self.legacy_brand_token:
            raise ValueError("LEGACY_BRAND_TOKEN must not be empty")
        if self.primary_locale not in self.brand_names:
            raise ValueError(
                f"BRAND_NAMES has no entry for primary locale {self.primary_locale}"
            )
        token = re.compile(re.escape(self.legacy_brand_token), re.IGNORECASE)
        for locale, brand_name in self.brand_names.items():
            if token.search(brand_name):
                raise ValueError(
                    f"Brand name for {locale} contains legacy token "
                    f"{self.legacy_brand_token!r}"
                )
        return self
