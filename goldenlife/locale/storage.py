"""Persistence for the user's language choice.

The choice has to outlive the process, so the default store is a small JSON
file under the user's home directory.
"""

import logging
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)


class StoredPreferences(BaseModel):
    language: str | None = None


class PreferenceStore(Protocol):
    """Where the language choice is kept between runs."""

    def load_language(self) -> str | None:
        """Return the persisted language tag, if any."""
        ...

    def save_language(self, tag: str) -> None:
        """Persist a language tag."""
        ...


class MemoryPreferenceStore:
    """Process-local store; used when persistence is not wanted (and in tests)."""

    def __init__(self, language: str | None = None):
        self.language = language

    def load_language(self) -> str | None:
        return self.language

    def save_language(self, tag: str) -> None:
        self.language = tag


class JsonFilePreferenceStore:
    """Keeps preferences in a JSON file, created on first save."""

    def __init__(self, path: Path):
        self.path = path

    def _read(self) -> StoredPreferences:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return StoredPreferences()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(
                "Ignoring unreadable preferences file %s (%s)", self.path, type(e).__name__
            )
            return StoredPreferences()
        try:
            return StoredPreferences.model_validate_json(raw)
        except PydanticValidationError:
            logger.warning("Ignoring unreadable preferences file %s", self.path)
            return StoredPreferences()

    def load_language(self) -> str | None:
        return self._read().language

    def save_language(self, tag: str) -> None:
        preferences = self._read().model_copy(update={"language": tag})
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(preferences.model_dump_json(), encoding="utf-8")
        tmp_path.replace(self.path)
