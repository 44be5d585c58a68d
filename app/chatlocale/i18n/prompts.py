"""Localized texts for the "update available" dialog."""

from dataclasses import dataclass
from typing import Optional

from chatlocale.i18n.service import get_translator
from chatlocale.i18n.translator import Translator

DEFAULT_TITLE = "Update available"
DEFAULT_MESSAGE = (
    "Version {version} is available. You can download the latest update now."
)
DEFAULT_CONFIRM = "Update"
DEFAULT_CANCEL = "Later"


@dataclass(frozen=True)
class UpdatePrompt:
    """Texts shown when a newer app version is available."""

    title: str
    message: str
    confirm: str
    cancel: str


def build_update_prompt(
    version: str,
    locale_tag: Optional[str] = None,
    translator: Optional[Translator] = None,
) -> UpdatePrompt:
    """Compose the update dialog texts.

    Args:
        version: Version string of the available release.
        locale_tag: Locale tag to render in (default: the device's locale).
        translator: Translator to use (default: the process-wide one).
    """
    translator = translator or get_translator()
    tag = locale_tag or translator.default_locale.value

    return UpdatePrompt(
        title=translator.get_localized_message(
            tag, "update.available.title", DEFAULT_TITLE
        ),
        message=translator.get_localized_message(
            tag, "update.available.message", DEFAULT_MESSAGE
        ).replace("{version}", version),
        confirm=translator.get_localized_message(
            tag, "update.available.confirm", DEFAULT_CONFIRM
        ),
        cancel=translator.get_localized_message(
            tag, "update.available.cancel", DEFAULT_CANCEL
        ),
    )
