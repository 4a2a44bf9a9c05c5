"""Error types raised by the phonology core.

Two families, both rooted at :class:`PhonologyError` (a ``ValueError``):

    - **ValidationError**: a value was built from parts that violate a
      phonotactic or morphological rule (invalid onset, coda, syllable,
      word, inflection base, template).
    - **ParseError**: a phoneme sequence or orthographic string could not
      be split into the requested structure.

Every error keeps the offending inputs as attributes so callers (and the
CLI) can report exactly what was rejected. None of them is transient:
building the same value again fails the same way.
"""

from __future__ import annotations

from typing import Any, Sequence


def _fmt_phonemes(phonemes: Sequence[Any]) -> str:
    return "[" + ", ".join(repr(p) for p in phonemes) + "]"


class PhonologyError(ValueError):
    """Base class for all errors raised by wftslang."""


class ValidationError(PhonologyError):
    """A value violates a construction invariant."""


class ParseError(PhonologyError):
    """Input could not be parsed into the requested structure."""


class UnknownLanguageError(PhonologyError, KeyError):
    """No language is registered under the requested code."""

    def __init__(self, code: str, known: Sequence[str] = ()) -> None:
        self.code = code
        self.known = tuple(known)
        super().__init__(
            f"Unknown language {code!r}. Known: {', '.join(self.known) or 'none'}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class InvalidOnset(ValidationError):
    def __init__(self, outer: Any, medial: Any, inner: Any) -> None:
        self.outer = outer
        self.medial = medial
        self.inner = inner
        super().__init__(
            f"Invalid onset made of outer={outer!r}, medial={medial!r}, "
            f"inner={inner!r}"
        )


class InvalidCoda(ValidationError):
    def __init__(self, inner: Any, outer: Any) -> None:
        self.inner = inner
        self.outer = outer
        super().__init__(f"Invalid coda made of inner={inner!r}, outer={outer!r}")


class InvalidSyllable(ValidationError):
    def __init__(self, onset: Any, nucleus: Any, coda: Any) -> None:
        self.onset = onset
        self.nucleus = nucleus
        self.coda = coda
        super().__init__(
            f"Invalid syllable made of onset={onset!r}, nucleus={nucleus!r}, "
            f"coda={coda!r}"
        )


class InvalidWord(ValidationError):
    def __init__(self, syllables: Sequence[Any], reason: str = "") -> None:
        self.syllables = tuple(syllables)
        self.reason = reason
        detail = f" ({reason})" if reason else ""
        super().__init__(
            f"Invalid word made of syllables={list(self.syllables)!r}{detail}"
        )


class InvalidBaseForm(ValidationError):
    """A lexical base form does not fit the requested inflection class."""

    def __init__(self, base: Any, inflection_class: str) -> None:
        self.base = base
        self.inflection_class = inflection_class
        super().__init__(
            f"Invalid base form {base!r} for {inflection_class}"
        )


class TemplateError(ValidationError):
    """Base class for template hole errors."""


class TemplateHoleOutOfBounds(TemplateError):
    def __init__(self, phonemes: Sequence[Any], hole: int) -> None:
        self.phonemes = tuple(phonemes)
        self.hole = hole
        super().__init__(
            f"Hole {hole} out of bounds of phonemes {_fmt_phonemes(phonemes)}"
        )


class InvalidTemplateHole(TemplateError):
    def __init__(self, template: Any, hole: int) -> None:
        self.template = template
        self.hole = hole
        super().__init__(f"Invalid hole {hole} of template {template!r}")


class NonFilledTemplate(TemplateError):
    def __init__(self, template: Any) -> None:
        self.template = template
        super().__init__(f"Template {template!r} is not fully filled")


# ---------------------------------------------------------------------------
# Parse errors
# ---------------------------------------------------------------------------


class InvalidPhonemeSpelling(ParseError):
    """Text contains a spelling that maps to no phoneme of the language."""

    def __init__(self, text: str, position: int, language: str) -> None:
        self.text = text
        self.position = position
        self.language = language
        super().__init__(
            f"Invalid {language} orthography {text[position:position + 1]!r} "
            f"at position {position} of {text!r}"
        )


class OnsetParseError(ParseError):
    def __init__(self, phonemes: Sequence[Any]) -> None:
        self.phonemes = tuple(phonemes)
        super().__init__(f"Parse error on onset {_fmt_phonemes(phonemes)}")


class CodaParseError(ParseError):
    def __init__(self, phonemes: Sequence[Any]) -> None:
        self.phonemes = tuple(phonemes)
        super().__init__(f"Parse error on coda {_fmt_phonemes(phonemes)}")


class SyllableParseError(ParseError):
    def __init__(self, phonemes: Sequence[Any]) -> None:
        self.phonemes = tuple(phonemes)
        super().__init__(f"Parse error on syllable {_fmt_phonemes(phonemes)}")


class WordParseError(ParseError):
    def __init__(self, phonemes: Sequence[Any], text: str | None = None) -> None:
        self.phonemes = tuple(phonemes)
        self.text = text
        shown = repr(text) if text is not None else _fmt_phonemes(phonemes)
        super().__init__(f"Parse error on word {shown}")
