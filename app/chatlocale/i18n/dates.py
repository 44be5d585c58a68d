"""Locale state for the Arrow-based date formatting facility."""

from datetime import datetime
from typing import Optional, Union

import arrow
from arrow.locales import get_locale

from chatlocale.logging import get_module_logger

logger = get_module_logger()

DateLike = Union[datetime, arrow.Arrow, str]


class DateLibraryLocale:
    """Holds the locale used for date formatting and humanizing.

    Attributes:
        locale: Bare language code passed to Arrow (e.g. "en", "fa").
    """

    def __init__(self, locale: str = "en"):
        self.locale = locale

    def set_locale(self, locale: str) -> str:
        """Switch the date formatting locale.

        Raises:
            ValueError: If Arrow has no locale for ``locale``.
        """
        get_locale(locale)
        self.locale = locale
        logger.info("date_locale_set", locale=locale)
        return locale

    def format(self, value: DateLike, fmt: str = "YYYY-MM-DD HH:mm") -> str:
        return arrow.get(value).format(fmt, locale=self.locale)

    def humanize(self, value: DateLike, other: Optional[DateLike] = None) -> str:
        """Relative description such as "2 hours ago" in the current locale."""
        if other is not None:
            other = arrow.get(other)
        return arrow.get(value).humanize(other, locale=self.locale)


date_locale = DateLibraryLocale()
