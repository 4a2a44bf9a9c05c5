"""Language registry.

Languages are registered by code. Use :func:`get_language` to look one up
and :data:`LANGUAGES` to enumerate them.
"""

from __future__ import annotations

from wftslang.errors import UnknownLanguageError
from wftslang.languages.base import Language
from wftslang.languages.proto_divine import ProtoDivineLanguage
from wftslang.languages.star import StarLanguage

LANGUAGES: dict[str, Language] = {
    lang.code: lang for lang in (StarLanguage(), ProtoDivineLanguage())
}


def get_language(code: str) -> Language:
    """Return the language registered under ``code``.

    Raises:
        UnknownLanguageError: If no language has that code.
    """
    try:
        return LANGUAGES[code]
    except KeyError:
        raise UnknownLanguageError(code, sorted(LANGUAGES)) from None


def available_languages() -> list[str]:
    """Codes of all registered languages, sorted."""
    return sorted(LANGUAGES)


__all__ = [
    "LANGUAGES",
    "Language",
    "ProtoDivineLanguage",
    "StarLanguage",
    "available_languages",
    "get_language",
]
