"""Word transformations used by morphology.

Each operation copies the syllables of a word, rebuilds the targeted
syllable from its parts and rebuilds the word, so the result is validated
exactly like a freshly built word. Illegal results raise
:class:`~wftslang.errors.InvalidSyllable` or
:class:`~wftslang.errors.InvalidWord`; nothing is ever coerced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wftslang.inventory import Phoneme
from wftslang.phonology.syllable import Coda, Syllable

if TYPE_CHECKING:
    from wftslang.phonology.word import Word

FINAL = -1
INITIAL = 0


def _rebuild(word: Word, index: int, **parts) -> Word:
    syllables = list(word.syllables)
    old = syllables[index]
    syllables[index] = Syllable.new(
        parts.get("onset", old.onset),
        parts.get("nucleus", old.nucleus),
        parts.get("coda", old.coda),
    )
    return type(word).new(syllables)


def replace_final_nucleus(word: Word, nucleus: Phoneme) -> Word:
    """Replace the nucleus of the last syllable."""
    return _rebuild(word, FINAL, nucleus=nucleus)


def replace_final_coda(word: Word, coda: Coda) -> Word:
    """Replace the coda of the last syllable."""
    return _rebuild(word, FINAL, coda=coda)


def replace_final_rhyme(word: Word, nucleus: Phoneme, coda: Coda) -> Word:
    """Replace nucleus and coda of the last syllable at once.

    Unlike chaining :func:`replace_final_nucleus` and
    :func:`replace_final_coda`, no intermediate word has to be legal.
    """
    return _rebuild(word, FINAL, nucleus=nucleus, coda=coda)


def replace_initial_nucleus(word: Word, nucleus: Phoneme) -> Word:
    """Replace the nucleus of the first syllable."""
    return _rebuild(word, INITIAL, nucleus=nucleus)


def replace_initial_coda(word: Word, coda: Coda) -> Word:
    """Replace the coda of the first syllable."""
    return _rebuild(word, INITIAL, coda=coda)


def replace_initial_rhyme(word: Word, nucleus: Phoneme, coda: Coda) -> Word:
    """Replace nucleus and coda of the first syllable at once."""
    return _rebuild(word, INITIAL, nucleus=nucleus, coda=coda)


def append_syllable(word: Word, syllable: Syllable) -> Word:
    """Add a syllable after the last one."""
    return type(word).new(word.syllables + (syllable,))


def prepend_syllable(word: Word, syllable: Syllable) -> Word:
    """Add a syllable before the first one."""
    return type(word).new((syllable,) + word.syllables)
