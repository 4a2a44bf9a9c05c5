"""Data models for phonemes and phoneme inventories.

Pure data containers with no I/O. A :class:`Phoneme` is the atomic sound
unit of one constructed language: it knows its identity, its articulatory
class and how it is spelled, both orthographically and in broad IPA. An
:class:`Inventory` is the per-language lookup table over those phonemes,
keyed by symbol and by spelling.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from wftslang.errors import InvalidPhonemeSpelling


class PhonemeClass(Enum):
    """Articulatory class of a phoneme, from most to least sonorous."""

    VOWEL = "vowel"
    APPROXIMANT = "approximant"
    NASAL = "nasal"
    FRICATIVE = "fricative"
    TENSE = "tense"
    """Tense obstruent: ejective stops in Star, plain stops in Proto-Divine."""
    LAX = "lax"
    """Lax obstruent: aspirated stops."""

    @property
    def rank(self) -> int:
        """Obstruency rank: 0 for vowels up to 5 for lax obstruents."""
        return _CLASS_ORDER.index(self)

    @property
    def is_consonant(self) -> bool:
        return self is not PhonemeClass.VOWEL

    @property
    def is_sonorant(self) -> bool:
        return self in (
            PhonemeClass.VOWEL,
            PhonemeClass.APPROXIMANT,
            PhonemeClass.NASAL,
        )

    @property
    def is_obstruent(self) -> bool:
        return not self.is_sonorant


_CLASS_ORDER: tuple[PhonemeClass, ...] = tuple(PhonemeClass)


@dataclass(frozen=True)
class Phoneme:
    """A single phoneme of a constructed language.

    Immutable and compared by value, so phonemes are usable in sets and
    as dict keys.

    Attributes:
        symbol: Identifier unique within the language (e.g., 'kw', 'aa').
        language: Code of the owning language (e.g., 'star', 'div').
        phoneme_class: Articulatory class.
        orthography: Orthographic spelling (e.g., 'ḱ').
        broad_ipa: Broad phonemic IPA (e.g., 'kʷʰ').
    """

    symbol: str
    language: str
    phoneme_class: PhonemeClass
    orthography: str
    broad_ipa: str

    @property
    def is_vowel(self) -> bool:
        return self.phoneme_class is PhonemeClass.VOWEL

    def __repr__(self) -> str:
        return f"{self.language}:{self.symbol}"

    def __str__(self) -> str:
        return self.orthography


@dataclass
class Inventory:
    """The phoneme inventory of one language.

    Phonemes are kept in the language's canonical order. Spelling lookup
    is case-insensitive and NFC-normalized; multi-character spellings are
    matched greedily, longest first.

    Attributes:
        language: Code of the language this inventory belongs to.
        language_name: Human-readable language name.
        phonemes: Phonemes in canonical order.
    """

    language: str
    language_name: str
    phonemes: tuple[Phoneme, ...]
    _by_symbol: dict[str, Phoneme] = field(init=False, repr=False)
    _by_spelling: dict[str, Phoneme] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.phonemes = tuple(self.phonemes)
        self._by_symbol = {}
        self._by_spelling = {}
        for phoneme in self.phonemes:
            if phoneme.language != self.language:
                raise ValueError(
                    f"Phoneme {phoneme!r} does not belong to language "
                    f"{self.language!r}"
                )
            if phoneme.symbol in self._by_symbol:
                raise ValueError(f"Duplicate phoneme symbol {phoneme.symbol!r}")
            spelling = _normalize(phoneme.orthography)
            if spelling in self._by_spelling:
                raise ValueError(f"Duplicate phoneme spelling {spelling!r}")
            self._by_symbol[phoneme.symbol] = phoneme
            self._by_spelling[spelling] = phoneme

    # --- Lookup ---

    def __getitem__(self, symbol: str) -> Phoneme:
        """Return the phoneme with the given symbol.

        Raises:
            KeyError: If no phoneme has that symbol.
        """
        return self._by_symbol[symbol]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Phoneme):
            return self._by_symbol.get(item.symbol) == item
        return item in self._by_symbol

    def __iter__(self):
        return iter(self.phonemes)

    def __len__(self) -> int:
        return len(self.phonemes)

    def by_spelling(self, spelling: str) -> Phoneme:
        """Return the phoneme spelled ``spelling``.

        Raises:
            InvalidPhonemeSpelling: If the spelling is unknown.
        """
        phoneme = self._by_spelling.get(_normalize(spelling))
        if phoneme is None:
            raise InvalidPhonemeSpelling(spelling, 0, self.language)
        return phoneme

    def tokenize(self, text: str) -> list[Phoneme]:
        """Split an orthographic string into phonemes.

        Args:
            text: Orthographic text without syllable separators.

        Returns:
            Phonemes in text order.

        Raises:
            InvalidPhonemeSpelling: At the first position no spelling matches.
        """
        normalized = _normalize(text)
        longest = max((len(s) for s in self._by_spelling), default=0)
        phonemes: list[Phoneme] = []
        pos = 0
        while pos < len(normalized):
            for size in range(min(longest, len(normalized) - pos), 0, -1):
                phoneme = self._by_spelling.get(normalized[pos:pos + size])
                if phoneme is not None:
                    phonemes.append(phoneme)
                    pos += size
                    break
            else:
                raise InvalidPhonemeSpelling(normalized, pos, self.language)
        return phonemes

    # --- Classification ---

    def of_class(self, phoneme_class: PhonemeClass) -> list[Phoneme]:
        """Phonemes of a single articulatory class, in canonical order."""
        return [p for p in self.phonemes if p.phoneme_class is phoneme_class]

    @property
    def vowels(self) -> list[Phoneme]:
        return self.of_class(PhonemeClass.VOWEL)

    @property
    def consonants(self) -> list[Phoneme]:
        return [p for p in self.phonemes if p.phoneme_class.is_consonant]

    @property
    def size(self) -> int:
        """Total number of phonemes."""
        return len(self.phonemes)

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        """Export as a plain Python dict, suitable for JSON serialization."""
        return {
            "language": self.language,
            "language_name": self.language_name,
            "phonemes": [
                {
                    "symbol": p.symbol,
                    "class": p.phoneme_class.value,
                    "orthography": p.orthography,
                    "broad_ipa": p.broad_ipa,
                }
                for p in self.phonemes
            ],
        }

    def __repr__(self) -> str:
        return (
            f"Inventory(lang={self.language_name!r} [{self.language}], "
            f"phonemes={self.size})"
        )


def _normalize(text: str) -> str:
    return unicodedata.normalize("NFC", text).lower()
