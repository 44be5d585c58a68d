"""Tests for chatlocale.i18n.branding module."""

import pytest

from chatlocale.i18n import BrandingTransformer, Locale, apply_branding
from tests.factories.i18n import TEST_BRAND_NAMES, make_translation_catalog


@pytest.fixture
def branding():
    return BrandingTransformer(TEST_BRAND_NAMES, primary_locale=Locale.FA)


class TestBrandingTransformer:
    """Tests for BrandingTransformer."""

    def test_replaces_every_occurrence(self, branding):
        messages = {"k": "Mattermost and Mattermost Desktop"}
        assert branding.apply(messages, Locale.EN) == {"k": "Acme and Acme Desktop"}

    def test_match_ignores_case(self, branding):
        messages = {"k": "MATTERMOST, mattermost and MatterMost"}
        assert branding.apply(messages, Locale.EN)["k"] == "Acme, Acme and Acme"

    def test_brand_per_locale(self, branding):
        messages = {"k": "Welcome to Mattermost"}
        assert branding.apply(messages, Locale.EN)["k"] == "Welcome to Acme"
        assert branding.apply(messages, Locale.FA)["k"] == "Welcome to Fabrikam"

    def test_accepts_plain_locale_codes(self, branding):
        assert branding.apply({"k": "Mattermost"}, "en") == {"k": "Acme"}

    def test_unconfigured_locale_uses_primary_brand(self, branding):
        assert branding.brand_name_for("de") == "Fabrikam"
        assert branding.apply({"k": "Mattermost"}, "de") == {"k": "Fabrikam"}

    def test_empty_brand_name_counts_as_unset(self):
        branding = BrandingTransformer({"en": "", "fa": "Fabrikam"}, Locale.FA)
        assert branding.brand_name_for(Locale.EN) == "Fabrikam"

    def test_brand_name_inserted_verbatim(self):
        """Backslashes and group references in brand names are not expanded."""
        branding = BrandingTransformer({"fa": r"Acme \1 \g<0>"}, Locale.FA)
        assert branding.apply({"k": "Mattermost!"}, Locale.FA)["k"] == r"Acme \1 \g<0>!"

    def test_brand_case_not_adjusted(self, branding):
        assert branding.apply({"k": "MATTERMOST"}, Locale.EN)["k"] == "Acme"

    def test_non_string_values_pass_through(self, branding):
        nested = ["Mattermost"]
        messages = {"list": nested, "count": 3, "none": None}
        branded = branding.apply(messages, Locale.EN)

        assert branded["list"] is nested
        assert branded["list"] == ["Mattermost"]
        assert branded["count"] == 3
        assert branded["none"] is None

    def test_non_matching_values_unchanged(self, branding):
        messages = {"a": "Log In", "b": "Matter most", "c": ""}
        branded = branding.apply(messages, Locale.EN)

        assert branded == messages
        for key, value in messages.items():
            assert branded[key] is value

    def test_preserves_key_set(self, branding):
        messages = {"a": "Mattermost", "b": "plain", "c": 1}
        assert set(branding.apply(messages, Locale.EN)) == set(messages)

    def test_does_not_mutate_input(self, branding):
        messages = {"a": "Mattermost"}
        branded = branding.apply(messages, Locale.EN)

        assert messages == {"a": "Mattermost"}
        assert branded is not messages

    def test_idempotent(self, branding):
        messages = {"a": "Mattermost and mattermost", "b": "plain"}
        once = branding.apply(messages, Locale.FA)
        assert branding.apply(once, Locale.FA) == once

    def test_custom_token(self):
        branding = BrandingTransformer({"fa": "Acme"}, Locale.FA, token="Legacy.Chat")
        branded = branding.apply({"a": "legacy.chat", "b": "LegacyXChat"}, Locale.FA)
        assert branded == {"a": "Acme", "b": "LegacyXChat"}

    def test_requires_primary_brand(self):
        with pytest.raises(ValueError):
            BrandingTransformer({"en": "Acme"}, primary_locale=Locale.FA)

    def test_rejects_empty_token(self):
        with pytest.raises(ValueError, match="must not be empty"):
            BrandingTransformer(TEST_BRAND_NAMES, Locale.FA, token="")

    def test_rejects_brand_containing_token(self):
        with pytest.raises(ValueError, match="contains the legacy token"):
            BrandingTransformer({"en": "Mattermost Kids", "fa": "Fabrikam"}, Locale.FA)

    def test_rejects_brand_containing_token_any_case(self):
        with pytest.raises(ValueError, match="contains the legacy token"):
            BrandingTransformer({"fa": "my MATTERMOST"}, Locale.FA)

    def test_apply_to_catalog(self, branding):
        catalog = make_translation_catalog(locale=Locale.EN)
        branded = branding.apply_to_catalog(catalog, Locale.EN)

        assert branded is not catalog
        assert branded.locale is Locale.EN
        assert branded.loaded_at == catalog.loaded_at
        assert branded.get_message("app.welcome") == "Welcome to Acme"
        assert catalog.get_message("app.welcome") == "Welcome to Mattermost"


def test_apply_branding_function():
    branded = apply_branding({"k": "Mattermost"}, "en", TEST_BRAND_NAMES)
    assert branded == {"k": "Acme"}
