"""Locale state.

Owns the current language, the persisted language preference and the
document's direction/font side effects. The language is detected once at
startup (persisted choice, then environment, then fallback) and afterwards
changes only through set_language().
"""

import logging
import os
import re
from collections.abc import Callable, Mapping
from typing import Any

from goldenlife.locale.effects import Document, apply_locale_effects
from goldenlife.locale.exceptions import UnsupportedLanguageError
from goldenlife.locale.languages import (
    FALLBACK_LANGUAGE,
    TextDirection,
    is_supported,
    normalize_tag,
)
from goldenlife.locale.resources import RESOURCES
from goldenlife.locale.storage import PreferenceStore

logger = logging.getLogger(__name__)

# Checked in order, like the C library does.
ENV_LOCALE_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")

LanguageListener = Callable[[str], None]


def environment_language(environ: Mapping[str, str] | None = None) -> str | None:
    """Supported language hinted by the process environment, if any."""
    env = os.environ if environ is None else environ
    for name in ENV_LOCALE_VARS:
        tag = normalize_tag(env.get(name))
        if tag:
            return tag
    return None


def detect_language(
    store: PreferenceStore,
    environ: Mapping[str, str] | None = None,
    fallback: str = FALLBACK_LANGUAGE,
) -> str:
    """Pick the initial language: persisted choice, environment hint, fallback."""
    persisted = store.load_language()
    if persisted and is_supported(persisted):
        return persisted
    hinted = environment_language(environ)
    if hinted:
        return hinted
    return fallback if is_supported(fallback) else FALLBACK_LANGUAGE


def _lookup(resources: Mapping[str, Any], key: str) -> str | None:
    node: Any = resources
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


class LocaleState:
    def __init__(
        self,
        store: PreferenceStore,
        document: Document | None = None,
        fallback: str = FALLBACK_LANGUAGE,
    ):
        self._store = store
        self._fallback = fallback if is_supported(fallback) else FALLBACK_LANGUAGE
        self.document = document or Document()
        self._language = self._fallback
        self._listeners: list[LanguageListener] = []
        apply_locale_effects(self.document, self._language)

    @property
    def language(self) -> str:
        return self._language

    @property
    def direction(self) -> TextDirection:
        return self.document.dir

    @property
    def is_rtl(self) -> bool:
        return self.document.dir is TextDirection.RTL

    def subscribe(self, listener: LanguageListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _apply(self, tag: str) -> None:
        self._language = tag
        apply_locale_effects(self.document, tag)
        for listener in list(self._listeners):
            listener(tag)

    def initialize(self, environ: Mapping[str, str] | None = None) -> str:
        """Run the detector and apply its result. Does not persist anything."""
        tag = detect_language(self._store, environ, self._fallback)
        self._apply(tag)
        logger.info("Locale initialized to %s", tag, extra={"language": tag})
        return tag

    def set_language(self, tag: str) -> None:
        """Switch language by explicit user choice and persist it.

        Raises:
            UnsupportedLanguageError: If tag is not a supported language
        """
        if not is_supported(tag):
            raise UnsupportedLanguageError(tag)
        self._store.save_language(tag)
        self._apply(tag)
        logger.info("Language changed to %s", tag, extra={"language": tag})

    def translate(self, key: str, **values: Any) -> str:
        """Look up a dotted key, falling back to English, then to the key itself."""
        text = _lookup(RESOURCES.get(self._language, {}), key)
        if text is None:
            text = _lookup(RESOURCES[FALLBACK_LANGUAGE], key)
        if text is None:
            return key
        return _PLACEHOLDER.sub(
            lambda m: str(values.get(m.group(1), m.group(0))), text
        )
