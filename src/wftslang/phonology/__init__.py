"""Phonology: syllables, words, word transformations and templates."""

from wftslang.phonology.syllable import EMPTY_CODA, EMPTY_ONSET, Coda, Onset, Syllable
from wftslang.phonology.template import (
    Morpheme,
    Template,
    morpheme_broad_ipa,
    morpheme_text,
)
from wftslang.phonology.word import Word

__all__ = [
    "Coda",
    "EMPTY_CODA",
    "EMPTY_ONSET",
    "Morpheme",
    "Onset",
    "Syllable",
    "Template",
    "Word",
    "morpheme_broad_ipa",
    "morpheme_text",
]
