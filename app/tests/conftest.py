import pytest

from chatlocale.i18n import get_translator


@pytest.fixture(autouse=True)
def reset_process_translator():
    """Drop the lazily built process-wide Translator between tests."""
    get_translator.cache_clear()
    yield
    get_translator.cache_clear()
