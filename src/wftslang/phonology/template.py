"""Templates: phoneme sequences with insertion points.

Some morphemes are not words on their own but frames into which other
material is inserted (an infix slot, a prefix slot). A :class:`Template`
keeps the fixed phonemes and the sorted positions of its holes; filling
every hole and calling :meth:`Template.into_word` yields a word.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, Union

from wftslang.errors import (
    InvalidTemplateHole,
    NonFilledTemplate,
    TemplateHoleOutOfBounds,
)
from wftslang.inventory import Phoneme
from wftslang.languages import get_language
from wftslang.phonology.word import Word

HOLE_MARK = "-"


@dataclass(frozen=True)
class Template:
    """Phonemes with holes.

    Attributes:
        phonemes: Fixed phonemes, in order.
        holes: Sorted insertion indices into ``phonemes``; ``len(phonemes)``
            is a hole at the very end.
    """

    phonemes: tuple[Phoneme, ...]
    holes: tuple[int, ...] = ()

    @classmethod
    def new(cls, phonemes: Sequence[Phoneme], holes: Iterable[int] = ()) -> Template:
        """Build a template.

        Raises:
            TemplateHoleOutOfBounds: If a hole is negative, past the end or
                given twice.
        """
        phonemes = tuple(phonemes)
        seen: set[int] = set()
        for hole in holes:
            if hole < 0 or hole > len(phonemes) or hole in seen:
                raise TemplateHoleOutOfBounds(phonemes, hole)
            seen.add(hole)
        return cls(phonemes, tuple(sorted(seen)))

    @classmethod
    def parse_str(cls, text: str, language: str) -> Template:
        """Read a template spelled with ``-`` at each hole, e.g. ``"ka-t"``."""
        lang = get_language(language)
        phonemes: list[Phoneme] = []
        holes: list[int] = []
        for i, part in enumerate(text.split(HOLE_MARK)):
            if i > 0:
                holes.append(len(phonemes))
            if part:
                phonemes.extend(lang.tokenize(part))
        return cls.new(phonemes, holes)

    @property
    def is_filled(self) -> bool:
        return not self.holes

    def fill(self, hole: int, phonemes: Sequence[Phoneme]) -> Template:
        """Insert ``phonemes`` at ``hole``.

        Holes after the filled one move right by ``len(phonemes)``.

        Raises:
            InvalidTemplateHole: If ``hole`` is not a hole of this template.
        """
        if hole not in self.holes:
            raise InvalidTemplateHole(self, hole)
        inserted = tuple(phonemes)
        return Template(
            self.phonemes[:hole] + inserted + self.phonemes[hole:],
            tuple(
                h + len(inserted) if h > hole else h
                for h in self.holes
                if h != hole
            ),
        )

    def into_word(self) -> Word:
        """Syllabify the filled template.

        Raises:
            NonFilledTemplate: If holes remain.
            WordParseError: If the phonemes do not form a word.
        """
        if self.holes:
            raise NonFilledTemplate(self)
        return Word.parse(self.phonemes)

    def _render(self, spell: Callable[[Phoneme], str]) -> str:
        out = []
        for i, phoneme in enumerate(self.phonemes):
            if i in self.holes:
                out.append(HOLE_MARK)
            out.append(spell(phoneme))
        if len(self.phonemes) in self.holes:
            out.append(HOLE_MARK)
        return "".join(out)

    def to_text(self) -> str:
        return self._render(lambda p: p.orthography)

    def to_broad_ipa(self) -> str:
        return self._render(lambda p: p.broad_ipa)

    def __str__(self) -> str:
        return self.to_text()


Morpheme = Union[Word, Template]
"""A lexical unit: either a complete word or a template awaiting material."""


def morpheme_text(morpheme: Morpheme) -> str:
    return morpheme.to_text()


def morpheme_broad_ipa(morpheme: Morpheme) -> str:
    return morpheme.to_broad_ipa()
