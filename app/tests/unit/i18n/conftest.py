"""Feature-level fixtures for i18n system tests.

Provides temporary YAML catalogs and translators wired to them.
"""

import pytest

from chatlocale.i18n import (
    DateLibraryLocale,
    FormattingRuntime,
    YAMLCatalogSource,
)
from tests.factories.i18n import make_translator, write_yaml

EN_MESSAGES = {
    "app.title": "Mattermost",
    "app.welcome": "Welcome to Mattermost",
    "app.compare": "Mattermost and Mattermost Desktop",
    "app.shout": "MATTERMOST rocks, mattermost rolls",
    "app.plain": "Hello {name}",
    "update": {
        "available": {
            "title": "Update available",
            "message": "Version {version} of Mattermost is available.",
            "confirm": "Update",
            "cancel": "Later",
        }
    },
}

FA_MESSAGES = {
    "app.title": "Mattermost",
    "app.welcome": "به Mattermost خوش آمدید",
    "app.compare": "Mattermost و Mattermost Desktop",
    "app.plain": "سلام {name}",
    "update": {
        "available": {
            "title": "به‌روزرسانی موجود است",
            "message": "نسخه {version} از Mattermost منتشر شده است.",
            "confirm": "به‌روزرسانی",
            "cancel": "بعداً",
        }
    },
}


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML catalogs.

    Returns a directory structure like:
    - mobile.en.yml
    - mobile.fa.yml
    """
    write_yaml(tmp_path / "mobile.en.yml", EN_MESSAGES)
    write_yaml(tmp_path / "mobile.fa.yml", FA_MESSAGES)
    return tmp_path


@pytest.fixture
def yaml_source(temp_translations_dir):
    """YAMLCatalogSource for the temporary directory, without caching."""
    return YAMLCatalogSource(temp_translations_dir, use_cache=False)


@pytest.fixture
def formatting_runtime():
    """Fresh formatting runtime so registrations do not leak between tests."""
    return FormattingRuntime()


@pytest.fixture
def date_library():
    return DateLibraryLocale()


@pytest.fixture
def translator(yaml_source, formatting_runtime, date_library):
    """Translator over the temporary catalogs with brands Acme (en) / Fabrikam (fa)."""
    return make_translator(
        yaml_source,
        runtime=formatting_runtime,
        date_library=date_library,
    )
