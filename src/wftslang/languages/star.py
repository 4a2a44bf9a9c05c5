"""Star: the language of the Star people.

Thirty phonemes. Stops come in an ejective (tense) and an aspirated (lax)
series at five places of articulation, matched by five nasals and five
fricatives. Onsets take up to three consonants, codas up to two. The
approximant ``r`` can head a syllable on its own.

Allophony is mostly colouring: palatals front what follows them, velars
back it, labials round it, and the open vowels retract the dorsal
consonant before them to a uvular.
"""

from __future__ import annotations

from wftslang.inventory import Inventory, Phoneme, PhonemeClass
from wftslang.languages.base import Language
from wftslang.phonetics.allophones import rules
from wftslang.phonetics.context import Triggers

CODE = "star"

_V = PhonemeClass.VOWEL
_A = PhonemeClass.APPROXIMANT
_N = PhonemeClass.NASAL
_F = PhonemeClass.FRICATIVE
_T = PhonemeClass.TENSE
_L = PhonemeClass.LAX

# symbol, class, orthography, broad IPA
_PHONEMES = (
    ("B", _T, "b", "pʼ"),
    ("Gw", _T, "ǵ", "kʷʼ"),
    ("D", _T, "d", "tʼ"),
    ("J", _T, "j", "cʼ"),
    ("G", _T, "g", "kʼ"),
    ("P", _L, "p", "pʰ"),
    ("Kw", _L, "ḱ", "kʷʰ"),
    ("T", _L, "t", "tʰ"),
    ("C", _L, "c", "cʰ"),
    ("K", _L, "k", "kʰ"),
    ("M", _N, "m", "m"),
    ("Mg", _N, "ḿ", "ŋʷ"),
    ("N", _N, "n", "n"),
    ("Nj", _N, "ń", "ɲ"),
    ("Ng", _N, "ŋ", "ŋ"),
    ("F", _F, "f", "f"),
    ("Xw", _F, "ẋ", "xʷ"),
    ("S", _F, "s", "s"),
    ("X", _F, "x", "x"),
    ("H", _F, "h", "ħ"),
    ("W", _A, "w", "w"),
    ("R", _A, "r", "ɹ"),
    ("Y", _A, "y", "j"),
    ("Rr", _A, "ŕ", "ʕ"),
    ("Ii", _V, "í", "iː"),
    ("I", _V, "i", "i"),
    ("Ee", _V, "é", "eː"),
    ("E", _V, "e", "e"),
    ("A", _V, "a", "a"),
    ("Aa", _V, "á", "aː"),
)

INVENTORY = Inventory(
    language=CODE,
    language_name="Star",
    phonemes=tuple(
        Phoneme(symbol, CODE, cls, ortho, ipa)
        for symbol, cls, ortho, ipa in _PHONEMES
    ),
)


def _triggers() -> dict[str, Triggers]:
    palatalizes = {"C", "J", "Nj", "Y"}
    # fricatives pick palatality up from either side, vowels only from the left
    palatalizable = {"S", "X", "Xw"}
    palatalizable_progressive = {p.symbol for p in INVENTORY.vowels}
    fronts = {"C", "J", "Nj", "Y", "Rr", "H"}
    velarizes = {"K", "G", "Ng", "X"}
    labializes = {"Kw", "Gw", "Mg", "Xw", "W"}
    retracts = {"A", "Aa"}
    return {
        p.symbol: Triggers(
            palatalizes=p.symbol in palatalizes,
            palatalizable=p.symbol in palatalizable,
            palatalizable_progressive=p.symbol in palatalizable_progressive,
            fronts=p.symbol in fronts,
            velarizes=p.symbol in velarizes,
            labializes=p.symbol in labializes,
            retracts=p.symbol in retracts,
        )
        for p in INVENTORY
    }


def _vowel(front: str, velar: str, labial: str, default: str):
    return rules(
        ("palatalized_progressive", [front]),
        ("fronted", [front]),
        ("velarized", [velar]),
        ("labialized", [labial]),
        ("", [default]),
    )


def _fixed(phone: str):
    return rules(("", [phone]))


_ALLOPHONES = {
    # Ejectives
    "B": _fixed("pʼ"),
    "Gw": _fixed("kʷʼ"),
    "D": _fixed("tʼ"),
    "J": _fixed("cʼ"),
    "G": rules(("retracted", ["qʼ"]), ("", ["kʼ"])),
    # Aspirates
    "P": _fixed("pʰ"),
    "Kw": rules(("retracted", ["qʷʰ"]), ("", ["kʷʰ"])),
    "T": _fixed("tʰ"),
    "C": _fixed("cʰ"),
    "K": _fixed("kʰ"),
    # Nasals
    "M": _fixed("m"),
    "Mg": rules(("retracted", ["ɴ͡mʷ"]), ("", ["ŋ͡mʷ"])),
    "N": _fixed("n"),
    "Nj": _fixed("ɲ"),
    "Ng": rules(("retracted", ["ɴ"]), ("", ["ŋ"])),
    # Fricatives
    "F": _fixed("f"),
    "Xw": rules(("palatalized", ["çʷ"]), ("retracted", ["χʷ"]), ("", ["xʷ"])),
    "S": rules(("palatalized", ["ɕ"]), ("", ["s"])),
    "X": rules(("palatalized", ["ç"]), ("retracted", ["χ"]), ("", ["x"])),
    "H": _fixed("ħ"),
    # Approximants
    "W": rules(("retracted", ["w̠"]), ("", ["w"])),
    "R": _fixed("ɹ"),
    "Y": _fixed("j"),
    "Rr": _fixed("ʕ"),
    # Vowels
    "Ii": _vowel("iː", "ɯə̯", "uː", "ɨː"),
    "I": _vowel("i", "ɯ", "u", "ɨ"),
    "Ee": _vowel("e̞ː", "ɤ̞ə̯", "o̞ː", "əː"),
    "E": _vowel("e̞", "ɤ̞", "o̞", "ə"),
    "A": _vowel("æ", "ɑ", "ɒ", "ä"),
    "Aa": _vowel("æː", "ɑː", "ɒɔ̯", "äː"),
}


class StarLanguage(Language):
    """Star phonotactics."""

    def __init__(self) -> None:
        super().__init__(
            inventory=INVENTORY,
            triggers=_triggers(),
            allophones=_ALLOPHONES,
            bypass_classes=(_T, _L),
            syllable_separator="'",
            always_separate=False,
        )
        self._syllabic = INVENTORY["R"]

    def valid_onset(self, outer, medial, inner) -> bool:
        if inner is not None and inner.phoneme_class is not _A:
            return False
        if outer is not None and outer == medial:
            return False
        if self.is_class(outer, _T):
            allowed = (_T, _F, _N)
        elif self.is_class(outer, _L):
            allowed = (_L, _F, _N)
        elif outer is None or outer.phoneme_class is _F:
            allowed = (_N,)
        else:
            return False
        return medial is None or medial.phoneme_class in allowed

    def valid_coda(self, inner, outer) -> bool:
        if inner is not None and inner.phoneme_class is not _A:
            return False
        return outer is None or outer.phoneme_class in (_F, _N)

    def valid_nucleus(self, onset, nucleus, coda) -> bool:
        if nucleus.is_vowel:
            return True
        return (
            nucleus == self._syllabic
            and onset.inner != self._syllabic
            and coda.inner != self._syllabic
        )

    def can_be_nucleus(self, phoneme: Phoneme) -> bool:
        return phoneme.is_vowel or phoneme == self._syllabic
