"""Configuration module - public API.

Centralized configuration using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Locale and branding settings class

Example:
    ```python
    from chatlocale.configuration import settings

    brand_names = settings.i18n.brand_names
    ```
"""

from chatlocale.configuration.i18n import LocalizationSettings
from chatlocale.configuration.settings import Settings, settings

__all__ = ["Settings", "LocalizationSettings", "settings"]
