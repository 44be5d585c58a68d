"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    TEST_BRAND_NAMES,
    make_locale_bundle,
    make_translation_catalog,
    make_translator,
)

__all__ = [
    "TEST_BRAND_NAMES",
    "make_locale_bundle",
    "make_translation_catalog",
    "make_translator",
]
