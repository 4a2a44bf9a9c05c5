"""Words: validated syllable sequences, their parsing and spelling.

A :class:`Word` is a non-empty tuple of syllables of one language such
that every junction between adjacent syllables is legal (see
:meth:`~wftslang.languages.base.Language.cluster_violation`). Like
syllables, words are validated on construction and never mutated: every
transformation returns a new, freshly validated word.

Parsing a flat phoneme sequence is a search. Nuclei are fixed first
(every vowel, plus as few other nucleus-capable phonemes as possible),
then each consonant cluster between two nuclei is split, trying the
boundary before the cluster's most obstruent consonant first and then
longest onsets first. The first split under which every onset, coda,
syllable and junction is legal wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations, pairwise, product
from typing import TYPE_CHECKING, Collection, Iterable, Sequence

from wftslang.errors import (
    InvalidWord,
    ParseError,
    ValidationError,
    WordParseError,
)
from wftslang.inventory import Phoneme
from wftslang.languages import Language, get_language
from wftslang.languages.base import SEPARATORS
from wftslang.phonetics.transcription import Transcription
from wftslang.phonology import transform
from wftslang.phonology.syllable import Coda, Onset, Syllable

if TYPE_CHECKING:
    from wftslang.phonetics.variation import Variation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Word:
    """A legal, non-empty sequence of syllables of a single language."""

    syllables: tuple[Syllable, ...]

    def __post_init__(self) -> None:
        syllables = tuple(self.syllables)
        object.__setattr__(self, "syllables", syllables)
        if not syllables:
            raise InvalidWord(syllables, "no syllables")
        codes = {s.language for s in syllables}
        if len(codes) > 1:
            raise InvalidWord(syllables, f"mixed languages {sorted(codes)}")
        lang = get_language(codes.pop())
        for prev, curr in pairwise(syllables):
            reason = lang.cluster_violation(prev, curr)
            if reason is not None:
                raise InvalidWord(syllables, reason)

    # --- Construction ---

    @classmethod
    def new(cls, syllables: Iterable[Syllable]) -> Word:
        """Build a word from syllables.

        Raises:
            InvalidWord: If the sequence is empty, mixes languages or has
                an illegal syllable junction.
        """
        return cls(tuple(syllables))

    @classmethod
    def parse(
        cls, phonemes: Sequence[Phoneme], breaks: Collection[int] = ()
    ) -> Word:
        """Syllabify a phoneme sequence.

        Args:
            phonemes: Phonemes of a single language.
            breaks: Indices at which a syllable must start.

        Raises:
            WordParseError: If no syllabification is legal.
        """
        phonemes = tuple(phonemes)
        if not phonemes:
            raise WordParseError(phonemes)
        word = _syllabify(cls, phonemes, frozenset(breaks))
        if word is None:
            raise WordParseError(phonemes)
        logger.debug("Syllabified %r as %r", phonemes, word)
        return word

    @classmethod
    def parse_str(cls, text: str, language: str | Language) -> Word:
        """Parse orthographic text.

        Any of ``'``, ``-`` and ``.`` in ``text`` forces a syllable break.

        Raises:
            InvalidPhonemeSpelling: If ``text`` holds an unknown spelling.
            WordParseError: If the phonemes cannot be syllabified.
        """
        lang = get_language(language) if isinstance(language, str) else language
        segments = _split_segments(text)
        if not segments or any(not s for s in segments):
            raise WordParseError((), text)
        phonemes: list[Phoneme] = []
        breaks: list[int] = []
        for segment in segments:
            if phonemes:
                breaks.append(len(phonemes))
            phonemes.extend(lang.tokenize(segment))
        word = _syllabify(cls, tuple(phonemes), frozenset(breaks))
        if word is None:
            raise WordParseError(phonemes, text)
        return word

    # --- Views ---

    @property
    def language(self) -> str:
        """Code of the word's language."""
        return self.syllables[0].language

    @property
    def phonemes(self) -> tuple[Phoneme, ...]:
        return tuple(p for s in self.syllables for p in s.phonemes)

    def __len__(self) -> int:
        return len(self.syllables)

    def to_text(self) -> str:
        """Orthographic spelling that parses back to this word.

        Languages that always separate syllables join them with their
        separator. Otherwise the separator is only written when the
        unseparated spelling would syllabify differently.
        """
        lang = get_language(self.language)
        parts = [s.to_text() for s in self.syllables]
        if lang.always_separate:
            return lang.syllable_separator.join(parts)
        plain = "".join(parts)
        try:
            reparsed = type(self).parse_str(plain, lang)
        except ParseError:
            reparsed = None
        if reparsed == self:
            return plain
        return lang.syllable_separator.join(parts)

    def to_broad_ipa(self) -> str:
        """Broad IPA with initial stress and ``.`` between syllables."""
        return "ˈ" + ".".join(s.to_broad_ipa() for s in self.syllables)

    def narrow_pronunc(self, stressed: bool = True) -> Variation:
        """All admissible narrow pronunciations of this word alone."""
        return Transcription.from_words([self], stressed=stressed).narrow_pronunc()

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        shown = ".".join(s.to_text() for s in self.syllables)
        return f"Word({shown!r}, lang={self.language!r})"

    # --- Transformations ---

    def replace_final_nucleus(self, nucleus: Phoneme) -> Word:
        return transform.replace_final_nucleus(self, nucleus)

    def replace_final_coda(self, coda: Coda) -> Word:
        return transform.replace_final_coda(self, coda)

    def replace_final_rhyme(self, nucleus: Phoneme, coda: Coda) -> Word:
        return transform.replace_final_rhyme(self, nucleus, coda)

    def replace_initial_nucleus(self, nucleus: Phoneme) -> Word:
        return transform.replace_initial_nucleus(self, nucleus)

    def replace_initial_coda(self, coda: Coda) -> Word:
        return transform.replace_initial_coda(self, coda)

    def replace_initial_rhyme(self, nucleus: Phoneme, coda: Coda) -> Word:
        return transform.replace_initial_rhyme(self, nucleus, coda)

    def append_syllable(self, syllable: Syllable) -> Word:
        return transform.append_syllable(self, syllable)

    def prepend_syllable(self, syllable: Syllable) -> Word:
        return transform.prepend_syllable(self, syllable)


# ---------------------------------------------------------------------------
# Syllabification
# ---------------------------------------------------------------------------


def _split_segments(text: str) -> list[str]:
    segments = [""]
    for char in text.strip():
        if char in SEPARATORS:
            segments.append("")
        else:
            segments[-1] += char
    return segments


def _syllabify(
    cls: type[Word], phonemes: tuple[Phoneme, ...], breaks: frozenset[int]
) -> Word | None:
    lang = get_language(phonemes[0].language)
    vowels = [i for i, p in enumerate(phonemes) if p.is_vowel]
    optional = [
        i for i, p in enumerate(phonemes)
        if not p.is_vowel and lang.can_be_nucleus(p)
    ]
    for size in range(len(optional) + 1):
        for extra in combinations(optional, size):
            nuclei = sorted(vowels + list(extra))
            if not nuclei:
                continue
            word = _split_clusters(cls, phonemes, nuclei, breaks)
            if word is not None:
                return word
    return None


def _split_clusters(
    cls: type[Word],
    phonemes: tuple[Phoneme, ...],
    nuclei: list[int],
    breaks: frozenset[int],
) -> Word | None:
    if any(b <= nuclei[0] or b > nuclei[-1] for b in breaks):
        return None
    options: list[list[int]] = []
    for left, right in pairwise(nuclei):
        forced = [b for b in breaks if left < b <= right]
        if len(forced) > 1:
            return None
        options.append(forced or _split_points(phonemes, left, right))

    for starts in product(*options):
        bounds = [0, *starts, len(phonemes)]
        try:
            syllables = [
                Syllable(
                    Onset.parse(phonemes[begin:nucleus]),
                    phonemes[nucleus],
                    Coda.parse(phonemes[nucleus + 1:end]),
                )
                for (begin, end), nucleus in zip(pairwise(bounds), nuclei)
            ]
            return cls(tuple(syllables))
        except (ParseError, ValidationError):
            continue
    return None


def _split_points(phonemes: tuple[Phoneme, ...], left: int, right: int) -> list[int]:
    """Syllable start positions between two nuclei, most preferred first."""
    points = list(range(left + 1, right + 1))
    if len(points) == 1:
        return points
    cluster = range(left + 1, right)
    hardest = max(cluster, key=lambda i: phonemes[i].phoneme_class.rank)
    return [hardest] + [p for p in points if p != hardest]
