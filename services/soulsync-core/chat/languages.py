"""Locale code to language name lookup used inside prompts."""

from types import MappingProxyType
from typing import Optional

DEFAULT_LANGUAGE = "English"

LANGUAGES = MappingProxyType({
    "en-US": "English",
    "hi-IN": "Hindi",
    "mr-IN": "Marathi",
    "te-IN": "Telugu",
})


def resolve_language(code: Optional[str]) -> str:
    """Return the display name for a locale code, or English if unknown."""
    if not code:
        return DEFAULT_LANGUAGE
    return LANGUAGES.get(code, DEFAULT_LANGUAGE)


def supported_locales() -> list[str]:
    return list(LANGUAGES)
