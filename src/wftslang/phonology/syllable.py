"""Onsets, codas and syllables.

All three are frozen dataclasses validated on construction: an instance
that exists is phonotactically legal in its language. Building one from
illegal parts raises :class:`~wftslang.errors.InvalidOnset`,
:class:`~wftslang.errors.InvalidCoda` or
:class:`~wftslang.errors.InvalidSyllable`.

The ``parse`` constructors take a flat phoneme sequence instead of slots
and try slot assignments in a fixed preference order, keeping the first
legal one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from wftslang.errors import (
    CodaParseError,
    InvalidCoda,
    InvalidOnset,
    InvalidSyllable,
    OnsetParseError,
    SyllableParseError,
)
from wftslang.inventory import Phoneme
from wftslang.languages import get_language
from wftslang.phonetics.transcription import Transcription
from wftslang.phonetics.variation import Variation

# Slot assignments tried by parse(), in order, by number of phonemes.
_ONSET_SLOTS: dict[int, tuple[tuple[str, ...], ...]] = {
    0: ((),),
    1: (("outer",), ("medial",), ("inner",)),
    2: (("outer", "medial"), ("outer", "inner"), ("medial", "inner")),
    3: (("outer", "medial", "inner"),),
}
_CODA_SLOTS: dict[int, tuple[tuple[str, ...], ...]] = {
    0: ((),),
    1: (("inner",), ("outer",)),
    2: (("inner", "outer"),),
}


def _single_language(phonemes: Sequence[Phoneme | None]) -> str | None:
    """Code shared by all given phonemes, or None if there are none.

    Raises:
        ValueError: If the phonemes come from different languages.
    """
    codes = {p.language for p in phonemes if p is not None}
    if len(codes) > 1:
        raise ValueError(f"Mixed languages: {sorted(codes)}")
    return codes.pop() if codes else None


# ---------------------------------------------------------------------------
# Onset
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Onset:
    """Up to three consonants before the nucleus: outer, medial, inner."""

    outer: Phoneme | None = None
    medial: Phoneme | None = None
    inner: Phoneme | None = None

    def __post_init__(self) -> None:
        slots = (self.outer, self.medial, self.inner)
        try:
            code = _single_language(slots)
        except ValueError:
            raise InvalidOnset(*slots) from None
        if code is not None and not get_language(code).valid_onset(*slots):
            raise InvalidOnset(*slots)

    @classmethod
    def new(
        cls,
        outer: Phoneme | None = None,
        medial: Phoneme | None = None,
        inner: Phoneme | None = None,
    ) -> Onset:
        """Build an onset from its slots.

        Raises:
            InvalidOnset: If the slots do not form a legal onset.
        """
        return cls(outer, medial, inner)

    @classmethod
    def parse(cls, phonemes: Sequence[Phoneme]) -> Onset:
        """Assign ``phonemes`` to slots, outermost slots first.

        Raises:
            OnsetParseError: If no assignment is legal.
        """
        for slots in _ONSET_SLOTS.get(len(phonemes), ()):
            try:
                return cls(**dict(zip(slots, phonemes)))
            except InvalidOnset:
                continue
        raise OnsetParseError(phonemes)

    @property
    def phonemes(self) -> tuple[Phoneme, ...]:
        return tuple(p for p in (self.outer, self.medial, self.inner) if p is not None)

    def __len__(self) -> int:
        return len(self.phonemes)

    def narrow_pronunc(self) -> Variation:
        """Unstressed narrow pronunciation of the onset on its own."""
        return Transcription(stressed=False).add_phonemes(self.phonemes).narrow_pronunc()

    def __repr__(self) -> str:
        return f"Onset({_slots(self.outer, self.medial, self.inner)})"


# ---------------------------------------------------------------------------
# Coda
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Coda:
    """Up to two consonants after the nucleus: inner, then outer."""

    inner: Phoneme | None = None
    outer: Phoneme | None = None

    def __post_init__(self) -> None:
        slots = (self.inner, self.outer)
        try:
            code = _single_language(slots)
        except ValueError:
            raise InvalidCoda(*slots) from None
        if code is not None and not get_language(code).valid_coda(*slots):
            raise InvalidCoda(*slots)

    @classmethod
    def new(cls, inner: Phoneme | None = None, outer: Phoneme | None = None) -> Coda:
        """Build a coda from its slots.

        Raises:
            InvalidCoda: If the slots do not form a legal coda.
        """
        return cls(inner, outer)

    @classmethod
    def parse(cls, phonemes: Sequence[Phoneme]) -> Coda:
        """Assign ``phonemes`` to slots, inner slot first.

        Raises:
            CodaParseError: If no assignment is legal.
        """
        for slots in _CODA_SLOTS.get(len(phonemes), ()):
            try:
                return cls(**dict(zip(slots, phonemes)))
            except InvalidCoda:
                continue
        raise CodaParseError(phonemes)

    @property
    def phonemes(self) -> tuple[Phoneme, ...]:
        return tuple(p for p in (self.inner, self.outer) if p is not None)

    def __len__(self) -> int:
        return len(self.phonemes)

    def narrow_pronunc(self) -> Variation:
        """Unstressed narrow pronunciation of the coda on its own."""
        return Transcription(stressed=False).add_phonemes(self.phonemes).narrow_pronunc()

    def __repr__(self) -> str:
        return f"Coda({_slots(self.inner, self.outer)})"


EMPTY_ONSET = Onset()
EMPTY_CODA = Coda()


# ---------------------------------------------------------------------------
# Syllable
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Syllable:
    """Onset, nucleus and coda of a single language."""

    onset: Onset
    nucleus: Phoneme
    coda: Coda = EMPTY_CODA

    def __post_init__(self) -> None:
        try:
            code = _single_language(
                self.onset.phonemes + (self.nucleus,) + self.coda.phonemes
            )
        except ValueError:
            raise InvalidSyllable(self.onset, self.nucleus, self.coda) from None
        if not get_language(code).valid_nucleus(self.onset, self.nucleus, self.coda):
            raise InvalidSyllable(self.onset, self.nucleus, self.coda)

    @classmethod
    def new(
        cls, onset: Onset | None, nucleus: Phoneme, coda: Coda | None = None
    ) -> Syllable:
        """Build a syllable; ``None`` stands for an empty onset or coda.

        Raises:
            InvalidSyllable: If the parts do not form a legal syllable.
        """
        return cls(onset or EMPTY_ONSET, nucleus, coda or EMPTY_CODA)

    @classmethod
    def parse(cls, phonemes: Sequence[Phoneme]) -> Syllable:
        """Build a syllable from a flat phoneme sequence.

        Vowels are preferred as nucleus; other nucleus-capable phonemes
        are tried afterwards, left to right.

        Raises:
            SyllableParseError: If no split into onset, nucleus and coda
                is legal.
        """
        phonemes = tuple(phonemes)
        if not phonemes:
            raise SyllableParseError(phonemes)
        lang = get_language(phonemes[0].language)
        candidates = sorted(
            (i for i, p in enumerate(phonemes) if lang.can_be_nucleus(p)),
            key=lambda i: not phonemes[i].is_vowel,
        )
        for i in candidates:
            try:
                return cls(
                    Onset.parse(phonemes[:i]),
                    phonemes[i],
                    Coda.parse(phonemes[i + 1:]),
                )
            except (OnsetParseError, CodaParseError, InvalidSyllable):
                continue
        raise SyllableParseError(phonemes)

    @property
    def language(self) -> str:
        """Code of the syllable's language."""
        return self.nucleus.language

    @property
    def phonemes(self) -> tuple[Phoneme, ...]:
        return self.onset.phonemes + (self.nucleus,) + self.coda.phonemes

    def to_text(self) -> str:
        return "".join(p.orthography for p in self.phonemes)

    def to_broad_ipa(self) -> str:
        return "".join(p.broad_ipa for p in self.phonemes)

    def narrow_pronunc(self, stressed: bool = True) -> Variation:
        """Narrow pronunciation of the syllable read as a word of its own."""
        return Transcription(stressed=stressed).add_syllable(self).narrow_pronunc()

    def __str__(self) -> str:
        return self.to_text()


def _slots(*phonemes: Phoneme | None) -> str:
    return ", ".join("-" if p is None else repr(p) for p in phonemes)
