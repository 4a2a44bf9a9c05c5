"""Narrow pronunciation of one or more words.

A :class:`Transcription` flattens words into a phoneme stream while
remembering where syllables and words start. Its narrow pronunciation is
derived in three steps:

    1. Look up each phoneme's triggers in its language's trigger table.
    2. Resolve one :class:`~wftslang.phonetics.context.Context` per
       position (see :func:`~wftslang.phonetics.context.resolve_contexts`).
    3. Walk the stream, adding stress or syllable-break markers at syllable
       starts and the allophones selected by each context, expanding the
       :class:`~wftslang.phonetics.variation.Variation` as it goes.

Usage:
    >>> from wftslang import Word
    >>> word = Word.parse_str("kwaŋ", "div")
    >>> str(Transcription.from_words([word]).narrow_pronunc())
    'ˈkwæɲ ~ ˈkβ̞æɲ ~ ˈkʋæɲ ~ ˈkwaɲ ~ ˈkβ̞aɲ ~ ˈkʋaɲ'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable

from wftslang.inventory import Phoneme
from wftslang.phonetics.context import Context, resolve_contexts
from wftslang.phonetics.variation import (
    SECONDARY_STRESS,
    STRESS,
    SYLLABLE_BREAK,
    Variation,
)

if TYPE_CHECKING:
    from wftslang.languages.base import Language
    from wftslang.phonology.syllable import Syllable
    from wftslang.phonology.word import Word

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transcription:
    """A phoneme stream with syllable and word boundaries.

    Attributes:
        phonemes: Phonemes in order.
        syllable_starts: Indices of phonemes that start a syllable.
        word_starts: Indices of phonemes that start a word.
        stressed: Whether the first syllable of each word carries primary
            stress.
    """

    phonemes: tuple[Phoneme, ...] = ()
    syllable_starts: frozenset[int] = frozenset()
    word_starts: frozenset[int] = frozenset()
    stressed: bool = True

    @classmethod
    def from_words(cls, words: Iterable[Word], stressed: bool = True) -> Transcription:
        transcription = cls(stressed=stressed)
        for word in words:
            transcription = transcription.add_word(word)
        return transcription

    def add_word(self, word: Word) -> Transcription:
        """Return a transcription with ``word`` appended as a new word."""
        start = len(self.phonemes)
        transcription = self
        for syllable in word.syllables:
            transcription = transcription.add_syllable(syllable)
        return replace(transcription, word_starts=self.word_starts | {start})

    def add_syllable(self, syllable: Syllable) -> Transcription:
        """Return a transcription with ``syllable`` appended to the last word."""
        start = len(self.phonemes)
        return replace(
            self,
            phonemes=self.phonemes + syllable.phonemes,
            syllable_starts=self.syllable_starts | {start},
        )

    def add_phonemes(self, phonemes: Iterable[Phoneme]) -> Transcription:
        """Return a transcription with ``phonemes`` appended, no boundary."""
        return replace(self, phonemes=self.phonemes + tuple(phonemes))

    def __len__(self) -> int:
        return len(self.phonemes)

    # --- Phonetics ---

    def contexts(self) -> list[Context]:
        """Resolved phonetic context of every phoneme."""
        triggers = [
            _language(p).triggers_of(p) for p in self.phonemes
        ]
        return resolve_contexts(triggers)

    def narrow_pronunc(self) -> Variation:
        """All admissible narrow pronunciations, with stress markup."""
        variation = Variation()
        syllable_index = 0
        for i, (phoneme, ctx) in enumerate(zip(self.phonemes, self.contexts())):
            if i in self.word_starts:
                syllable_index = 0
            if i in self.syllable_starts:
                variation = variation.add_phones([self._marker(syllable_index)])
                syllable_index += 1
            phones = _language(phoneme).allophones_of(phoneme, ctx)
            variation = variation.add_phones(phones)
        logger.debug(
            "Narrow pronunciation of %d phonemes: %d alternatives",
            len(self.phonemes), len(variation),
        )
        return variation

    def _marker(self, syllable_index: int) -> str:
        if syllable_index == 0 and self.stressed:
            return STRESS
        if syllable_index % 2 == 0:
            return SECONDARY_STRESS
        return SYLLABLE_BREAK


def pronounce_words(words: Iterable[Word], stressed: bool = True) -> Variation:
    """Narrow pronunciation of ``words`` read as one utterance.

    Contexts flow across word boundaries; stress counting restarts at each
    word.
    """
    return Transcription.from_words(words, stressed=stressed).narrow_pronunc()


def _language(phoneme: Phoneme) -> Language:
    from wftslang.languages import get_language

    return get_language(phoneme.language)
