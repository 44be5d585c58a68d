"""Module-level localization API.

Thin functions over a process-wide Translator created lazily from settings.
Most UI code only needs get_translations() or get_localized_message().

Usage:
    from chatlocale.i18n import get_translations, get_localized_message

    messages = get_translations("en-US")
    title = get_localized_message("fa-IR", "update.available.title", "Update available")
"""

from functools import lru_cache
from typing import Any, Dict, Optional

from chatlocale.i18n.factory import create_translator
from chatlocale.i18n.models import Locale
from chatlocale.i18n.translator import Translator


@lru_cache(maxsize=1)
def get_translator() -> Translator:
    """Process-wide Translator built from settings on first use."""
    return create_translator()


def get_default_locale() -> Locale:
    """Locale resolved from the device locale (DEVICE_LOCALE setting)."""
    return get_translator().default_locale


def get_locale_from_language(locale_tag: Optional[str]) -> Locale:
    return get_translator().get_locale_from_language(locale_tag)


def get_translations(locale_tag: Optional[str]) -> Dict[str, Any]:
    return get_translator().get_translations(locale_tag)


def get_localized_message(
    locale_tag: Optional[str],
    key: str,
    default_message: Optional[str] = None,
) -> str:
    return get_translator().get_localized_message(locale_tag, key, default_message)


def sync_external_date_library_locale(locale_tag: Optional[str] = None) -> str:
    """Set the date library locale to the resolved locale's language code."""
    return get_translator().sync_date_locale(locale_tag)
