"""Proto-Divine: the reconstructed ancestor of the divine tongues.

Eighteen phonemes: three plain stops, three fricatives, three nasals,
three approximants and six vowels. A syllable is at most an obstruent
plus a sonorant, a vowel and a single consonant. Syllables are always
written apart, joined by ``-``.

Obstruents voice between voiced sounds; ``k``, ``h`` and ``ŋ`` palatalize
next to front vowels and ``j``; vowels lose their palatal or labial
colouring next to ``j`` or ``w``.
"""

from __future__ import annotations

from wftslang.inventory import Inventory, Phoneme, PhonemeClass
from wftslang.languages.base import Language
from wftslang.phonetics.allophones import rules
from wftslang.phonetics.context import Triggers

CODE = "div"

_V = PhonemeClass.VOWEL
_A = PhonemeClass.APPROXIMANT
_N = PhonemeClass.NASAL
_F = PhonemeClass.FRICATIVE
_T = PhonemeClass.TENSE

_PHONEMES = (
    ("P", _T, "p", "p"),
    ("T", _T, "t", "t"),
    ("K", _T, "k", "k"),
    ("F", _F, "f", "f"),
    ("S", _F, "s", "s"),
    ("H", _F, "h", "x"),
    ("M", _N, "m", "m"),
    ("N", _N, "n", "n"),
    ("Ng", _N, "ŋ", "ŋ"),
    ("W", _A, "w", "w"),
    ("L", _A, "l", "l"),
    ("J", _A, "j", "j"),
    ("Ae", _V, "a", "a"),
    ("E", _V, "e", "e"),
    ("I", _V, "i", "i"),
    ("Ao", _V, "å", "ɒ"),
    ("O", _V, "o", "o"),
    ("U", _V, "u", "u"),
)

INVENTORY = Inventory(
    language=CODE,
    language_name="Proto-Divine",
    phonemes=tuple(
        Phoneme(symbol, CODE, cls, ortho, ipa)
        for symbol, cls, ortho, ipa in _PHONEMES
    ),
)

_TRIGGERS = {
    # Obstruents do not voice their neighbours
    "P": Triggers(),
    "T": Triggers(),
    "K": Triggers(palatalizable=True),
    "F": Triggers(),
    "S": Triggers(),
    "H": Triggers(palatalizable=True),
    # Sonorants
    "M": Triggers(voices=True),
    "N": Triggers(voices=True),
    "Ng": Triggers(voices=True, palatalizable=True),
    "W": Triggers(voices=True, dissocs_labial=True),
    "L": Triggers(voices=True),
    "J": Triggers(voices=True, palatalizes=True, dissocs_palatal=True),
    # Vowels
    "Ae": Triggers(voices=True, palatalizes=True),
    "E": Triggers(voices=True, palatalizes=True),
    "I": Triggers(voices=True, palatalizes=True),
    "Ao": Triggers(voices=True),
    "O": Triggers(voices=True),
    "U": Triggers(voices=True),
}

_ALLOPHONES = {
    "P": rules(("voiced", ["b"]), ("", ["p"])),
    "T": rules(("voiced", ["d"]), ("", ["t"])),
    "K": rules(
        ("voiced palatalized", ["ɟ"]),
        ("voiced", ["g"]),
        ("palatalized", ["c"]),
        ("", ["k"]),
    ),
    "F": rules(("voiced", ["v", "β"]), ("", ["ɸ", "f"])),
    "S": rules(("voiced", ["z"]), ("", ["s"])),
    "H": rules(
        ("voiced palatalized", ["ʝ"]),
        ("voiced", ["ɣ"]),
        ("palatalized", ["ç"]),
        ("", ["x", "h"]),
    ),
    "M": rules(("", ["m"])),
    "N": rules(("", ["n"])),
    "Ng": rules(("palatalized", ["ɲ"]), ("", ["ŋ"])),
    "W": rules(("", ["w", "β̞", "ʋ"])),
    "L": rules(("", ["l", "ɾ"])),
    "J": rules(("", ["j"])),
    "Ae": rules(("palatal_dissoc", ["a"]), ("", ["æ", "a"])),
    "E": rules(("palatal_dissoc", ["e̞"]), ("", ["e", "e̞"])),
    "I": rules(("palatal_dissoc", ["ɪ"]), ("", ["i"])),
    "Ao": rules(("labial_dissoc", ["ɒ"]), ("", ["ɒ", "ɒ̝"])),
    "O": rules(("labial_dissoc", ["o̞"]), ("", ["o", "o̞"])),
    "U": rules(("labial_dissoc", ["ʊ"]), ("", ["u"])),
}


class ProtoDivineLanguage(Language):
    """Proto-Divine phonotactics."""

    def __init__(self) -> None:
        super().__init__(
            inventory=INVENTORY,
            triggers=_TRIGGERS,
            allophones=_ALLOPHONES,
            bypass_classes=(_T, _F),
            syllable_separator="-",
            always_separate=True,
        )

    def valid_onset(self, outer, medial, inner) -> bool:
        if medial is not None:
            return False
        if outer is not None and outer.phoneme_class not in (_T, _F):
            return False
        return inner is None or inner.phoneme_class in (_N, _A)

    def valid_coda(self, inner, outer) -> bool:
        if inner is not None:
            return outer is None and inner.phoneme_class is _A
        return outer is None or outer.phoneme_class in (_T, _F, _N)

    def valid_nucleus(self, onset, nucleus: Phoneme, coda) -> bool:
        return nucleus.is_vowel
