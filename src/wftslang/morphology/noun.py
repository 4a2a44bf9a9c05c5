"""Star noun inflection, class 1.

A class 1 noun is stored as its nominative divine singular. Every other
form replaces the rhyme of the final syllable (nucleus for gender, coda
for case) and may append a number suffix syllable:

    >>> noun = Class1Noun(Word.parse_str("kas", "star"))
    >>> noun.inflect(BasicCase.ACCUSATIVE, Gender.ANIMATE, Number.PLURAL).word.to_text()
    "kán'é"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cache
from itertools import product
from typing import Iterator

from wftslang.errors import InvalidBaseForm
from wftslang.inventory import Phoneme
from wftslang.languages import get_language
from wftslang.morphology.grammemes import BasicCase, Gender, Number
from wftslang.phonology import Coda, Syllable, Word

logger = logging.getLogger(__name__)

INFLECTION_CLASS = "Star noun class 1"

Inflection = tuple[BasicCase, Gender, Number]


@dataclass(frozen=True)
class Affix:
    """What an inflection does to the final syllable of the base.

    Attributes:
        nucleus: Replacement nucleus, or None to keep the base's.
        coda: Replacement coda, or None to keep the base's.
        suffix: Syllable appended after the base, if any.
    """

    nucleus: Phoneme | None = None
    coda: Coda | None = None
    suffix: Syllable | None = None

    def apply(self, base: Word) -> Word:
        """Inflect ``base``.

        Raises:
            InvalidSyllable: If the new final rhyme is illegal.
            InvalidWord: If the result violates a word invariant.
        """
        if self.nucleus is not None and self.coda is not None:
            word = base.replace_final_rhyme(self.nucleus, self.coda)
        elif self.nucleus is not None:
            word = base.replace_final_nucleus(self.nucleus)
        elif self.coda is not None:
            word = base.replace_final_coda(self.coda)
        else:
            word = base
        if self.suffix is not None:
            word = word.append_syllable(self.suffix)
        return word

    def __str__(self) -> str:
        # e.g. "-á-" for a nucleus alone, "-án" with a coda
        out = "-"
        if self.nucleus is not None:
            out += self.nucleus.orthography
        if self.coda is not None:
            out += "".join(p.orthography for p in self.coda.phonemes)
        elif self.nucleus is not None:
            out += "-"
        if self.suffix is not None:
            out += self.suffix.to_text()
        return out


@dataclass(frozen=True)
class Inflected:
    """An inflected form together with the grammemes it realizes."""

    word: Word
    case: BasicCase
    gender: Gender
    number: Number


@cache
def _affix_table() -> dict[Inflection, Affix]:
    star = get_language("star")
    ph = star.__getitem__

    def syllable(text: str) -> Syllable:
        return Syllable.parse(star.tokenize(text))

    acc = Coda.new(None, ph("N"))
    acc_nullar = Coda.new(None, ph("Mg"))
    acc_collective = Coda.new(ph("W"), None)
    top = Coda.new(None, ph("F"))
    top_animate = Coda.new(ph("W"), None)
    top_inanimate_nullar = Coda.new(ph("Y"), None)
    post = Coda.new(ph("Y"), ph("S"))
    post_animate = Coda.new(ph("Y"), None)

    suffixes = {
        Number.SINGULAR: None,
        Number.PLURAL: syllable("é"),
        Number.NULLAR: syllable("en"),
        Number.COLLECTIVE: syllable("iẋ"),
    }
    post_collective = syllable("iw")

    table = {}
    for case, gender, number in product(BasicCase.all(), Gender.all(), Number.all()):
        if case is BasicCase.NOMINATIVE:
            coda = None
        elif case is BasicCase.ACCUSATIVE:
            coda = {
                Number.NULLAR: acc_nullar,
                Number.COLLECTIVE: acc_collective,
            }.get(number, acc)
        elif case is BasicCase.TOPICAL:
            if gender is Gender.ANIMATE:
                coda = top_animate
            elif gender is Gender.INANIMATE and number is Number.NULLAR:
                coda = top_inanimate_nullar
            else:
                coda = top
        else:
            coda = post_animate if gender is Gender.ANIMATE else post

        if gender is Gender.DIVINE:
            nucleus = None
        elif gender is Gender.ANIMATE:
            if case is BasicCase.ACCUSATIVE and number in (Number.NULLAR, Number.COLLECTIVE):
                nucleus = ph("Ee")
            else:
                nucleus = ph("Aa")
        else:
            nucleus = ph("I")

        if case is BasicCase.POSTPOSITIONAL and number is Number.COLLECTIVE:
            suffix = post_collective
        else:
            suffix = suffixes[number]

        table[case, gender, number] = Affix(nucleus, coda, suffix)
    return table


class Class1Noun:
    """A Star class 1 noun.

    Args:
        nom_div_sing: The nominative divine singular form.

    Raises:
        InvalidBaseForm: If the base is not a Star word, or its final
            syllable ends in an open ``e``, ``é`` or ``i``.
    """

    _CLOSED_ONLY = ("E", "Ee", "I")

    def __init__(self, nom_div_sing: Word) -> None:
        if nom_div_sing.language != "star":
            raise InvalidBaseForm(nom_div_sing, INFLECTION_CLASS)
        last = nom_div_sing.syllables[-1]
        if last.nucleus.symbol in self._CLOSED_ONLY and not last.coda:
            raise InvalidBaseForm(nom_div_sing, INFLECTION_CLASS)
        self.nom_div_sing = nom_div_sing

    @classmethod
    def parse_str(cls, text: str) -> Class1Noun:
        return cls(Word.parse_str(text, "star"))

    @staticmethod
    def affix(case: BasicCase, gender: Gender, number: Number) -> Affix:
        return _affix_table()[case, gender, number]

    @staticmethod
    def affix_table() -> dict[Inflection, Affix]:
        """Affix of every inflection, in paradigm order."""
        return dict(_affix_table())

    def inflect(self, case: BasicCase, gender: Gender, number: Number) -> Inflected:
        """Build one inflected form.

        Raises:
            ValidationError: If this base cannot take the affix.
        """
        word = self.affix(case, gender, number).apply(self.nom_div_sing)
        logger.debug(
            "Inflected %r for %s %s %s: %r",
            self.nom_div_sing, case, gender, number, word,
        )
        return Inflected(word, case, gender, number)

    def paradigm(self) -> Iterator[Inflected]:
        """Every inflected form, case-major."""
        for case, gender, number in product(BasicCase.all(), Gender.all(), Number.all()):
            yield self.inflect(case, gender, number)

    def inflection_map(self) -> dict[Word, list[Inflection]]:
        """Group the paradigm by form.

        Returns:
            Each distinct word mapped to the inflections it realizes, in
            paradigm order.
        """
        forms: dict[Word, list[Inflection]] = {}
        for inflected in self.paradigm():
            forms.setdefault(inflected.word, []).append(
                (inflected.case, inflected.gender, inflected.number)
            )
        return forms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Class1Noun):
            return NotImplemented
        return self.nom_div_sing == other.nom_div_sing

    def __hash__(self) -> int:
        return hash(self.nom_div_sing)

    def __repr__(self) -> str:
        return f"Class1Noun({self.nom_div_sing!r})"
