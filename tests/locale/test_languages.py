"""Tests for goldenlife/locale/languages.py and effects.py."""

import pytest

from goldenlife.locale.effects import Document, apply_locale_effects, compute_locale_effects
from goldenlife.locale.languages import (
    LANGUAGES,
    LATIN_FONT,
    PERSIAN_FONT,
    TextDirection,
    normalize_tag,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("hu_HU.UTF-8", "hu"),
        ("fa-IR", "fa"),
        ("EN", "en"),
        ("en_GB@euro", "en"),
        ("de_DE", None),
        ("", None),
        (None, None),
    ],
)
def test_normalize_tag(raw, expected):
    assert normalize_tag(raw) == expected


def test_only_persian_is_right_to_left():
    directions = {tag: info.direction for tag, info in LANGUAGES.items()}

    assert directions == {
        "en": TextDirection.LTR,
        "hu": TextDirection.LTR,
        "fa": TextDirection.RTL,
    }


def test_effects_are_pure_function_of_tag():
    assert compute_locale_effects("fa") == compute_locale_effects("fa")
    assert compute_locale_effects("hu").font_family == LATIN_FONT


def test_apply_overwrites_every_field():
    document = Document(dir=TextDirection.RTL, lang="fa", font_family=PERSIAN_FONT)

    apply_locale_effects(document, "hu")

    assert document == Document(dir=TextDirection.LTR, lang="hu", font_family=LATIN_FONT)
