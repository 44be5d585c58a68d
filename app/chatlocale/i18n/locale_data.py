"""Process-wide registry of locale formatting data.

Message formatting downstream needs plural rules, number, date/time, list and
relative-time data for a locale before rendering any message in it. The data
comes from Babel's CLDR tables; registering a locale loads them eagerly.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Iterable, Optional, Union

from babel import Locale as BabelLocale
from babel.dates import format_datetime, format_timedelta
from babel.lists import format_list
from babel.numbers import format_decimal

from chatlocale.i18n.models import LocaleLike, locale_code
from chatlocale.logging import get_module_logger

logger = get_module_logger()

# plural, number, date/time, list and relative-time (unit) data
LOCALE_DATA_TABLES = (
    "plural_form",
    "decimal_formats",
    "datetime_formats",
    "list_patterns",
    "unit_display_names",
)


@dataclass(frozen=True)
class LocaleFormatter:
    """Formatting helpers bound to one registered locale."""

    code: str
    babel_locale: BabelLocale

    def plural_category(self, count: Union[int, float]) -> str:
        """CLDR plural category for ``count`` ("one", "other", ...)."""
        return self.babel_locale.plural_form(count)

    def format_number(self, number: Union[int, float]) -> str:
        return format_decimal(number, locale=self.babel_locale)

    def format_datetime(self, value: datetime, format: str = "medium") -> str:
        return format_datetime(value, format=format, locale=self.babel_locale)

    def format_list(self, items: Iterable[str], style: str = "standard") -> str:
        return format_list(list(items), style=style, locale=self.babel_locale)

    def format_relative_time(self, delta: timedelta) -> str:
        """Relative time such as "in 3 days" or "2 hours ago"."""
        return format_timedelta(delta, add_direction=True, locale=self.babel_locale)


class FormattingRuntime:
    """Registry of per-locale formatting data.

    Registration is idempotent; registering a locale twice returns the
    formatter created the first time.
    """

    def __init__(self):
        self._formatters: Dict[str, LocaleFormatter] = {}

    def register(self, locale: LocaleLike) -> LocaleFormatter:
        """Load and register formatting data for ``locale``.

        Raises:
            babel.UnknownLocaleError: If CLDR has no data for the locale.
        """
        code = locale_code(locale)
        formatter = self._formatters.get(code)
        if formatter is not None:
            return formatter

        babel_locale = BabelLocale.parse(code)
        # Missing data must fail here, not at render time
        for table in LOCALE_DATA_TABLES:
            getattr(babel_locale, table)

        formatter = LocaleFormatter(code=code, babel_locale=babel_locale)
        self._formatters[code] = formatter
        logger.debug("registered_locale_data", locale=code)
        return formatter

    def get(self, locale: LocaleLike) -> Optional[LocaleFormatter]:
        return self._formatters.get(locale_code(locale))

    def is_registered(self, locale: LocaleLike) -> bool:
        return locale_code(locale) in self._formatters

    @property
    def registered_locales(self) -> list:
        return list(self._formatters)

    def clear(self) -> None:
        self._formatters.clear()


formatting_runtime = FormattingRuntime()
