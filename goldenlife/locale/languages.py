"""Supported languages and their presentation attributes."""

from dataclasses import dataclass
from enum import StrEnum


class TextDirection(StrEnum):
    LTR = "ltr"
    RTL = "rtl"


@dataclass(frozen=True)
class LanguageInfo:
    tag: str
    name: str
    font_family: str

    @property
    def direction(self) -> TextDirection:
        return TextDirection.RTL if self.tag == RTL_LANGUAGE else TextDirection.LTR


FALLBACK_LANGUAGE = "en"
# Persian is the only right-to-left language offered.
RTL_LANGUAGE = "fa"

LATIN_FONT = "Inter, sans-serif"
PERSIAN_FONT = "Vazirmatn, Tahoma, sans-serif"

LANGUAGES: dict[str, LanguageInfo] = {
    "en": LanguageInfo(tag="en", name="English", font_family=LATIN_FONT),
    "hu": LanguageInfo(tag="hu", name="Magyar", font_family=LATIN_FONT),
    "fa": LanguageInfo(tag="fa", name="فارسی", font_family=PERSIAN_FONT),
}


def is_supported(tag: str) -> bool:
    return tag in LANGUAGES


def normalize_tag(raw: str | None) -> str | None:
    """Reduce a locale string to a supported primary language tag.

    Accepts POSIX (`hu_HU.UTF-8`) and BCP 47 (`fa-IR`) spellings. Returns
    None when nothing supported can be extracted.
    """
    if not raw:
        return None
    primary = raw.split(".", 1)[0].split("@", 1)[0].replace("_", "-").split("-", 1)[0]
    tag = primary.strip().lower()
    return tag if is_supported(tag) else None
