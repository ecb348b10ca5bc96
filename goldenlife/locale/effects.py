"""Presentation side effects of the current language.

The effects are a pure function of the language tag and are written in full
on every change. LocaleState is the only caller; nothing else touches the
document's direction, language or font.
"""

from dataclasses import dataclass

from goldenlife.locale.languages import LANGUAGES, TextDirection


@dataclass
class Document:
    """Global presentation state of the rendered application."""

    dir: TextDirection = TextDirection.LTR
    lang: str = "en"
    font_family: str = ""


@dataclass(frozen=True)
class LocaleEffects:
    dir: TextDirection
    lang: str
    font_family: str


def compute_locale_effects(tag: str) -> LocaleEffects:
    info = LANGUAGES[tag]
    return LocaleEffects(dir=info.direction, lang=info.tag, font_family=info.font_family)


def apply_locale_effects(document: Document, tag: str) -> LocaleEffects:
    effects = compute_locale_effects(tag)
    document.dir = effects.dir
    document.lang = effects.lang
    document.font_family = effects.font_family
    return effects
