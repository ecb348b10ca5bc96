"""Locale domain exceptions."""

from goldenlife.core.exceptions import ValidationError


class UnsupportedLanguageError(ValidationError):
    """Raised when a language tag is not one of the supported languages."""

    error_type = "unsupported_language"

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Unsupported language: {tag!r}")
