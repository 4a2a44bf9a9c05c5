"""Tests for Onset, Coda and Syllable construction and parsing."""

import pytest

from helpers import star_coda, star_onset, star_syllable
from wftslang.errors import (
    CodaParseError,
    InvalidCoda,
    InvalidOnset,
    InvalidSyllable,
    OnsetParseError,
    SyllableParseError,
)
from wftslang.phonology import EMPTY_CODA, EMPTY_ONSET, Coda, Onset, Syllable


class TestOnset:
    """Onsets validate on construction."""

    def test_new_valid(self, star):
        onset = star_onset("D", "J", "R")
        assert onset.phonemes == (star["D"], star["J"], star["R"])
        assert len(onset) == 3

    def test_new_invalid_carries_slots(self, star):
        with pytest.raises(InvalidOnset) as info:
            star_onset("D", "C", "R")
        assert info.value.outer == star["D"]
        assert info.value.medial == star["C"]
        assert info.value.inner == star["R"]

    def test_direct_construction_is_validated(self, star):
        with pytest.raises(InvalidOnset):
            Onset(star["K"], star["K"])

    def test_empty(self):
        assert len(EMPTY_ONSET) == 0
        assert not EMPTY_ONSET
        assert Onset.new() == EMPTY_ONSET

    def test_mixed_languages(self, star, div):
        with pytest.raises(InvalidOnset):
            Onset.new(star["K"], None, div["W"])

    def test_repr(self):
        assert repr(star_onset("T", "-", "W")) == "Onset(star:T, -, star:W)"


class TestOnsetParse:
    """Slot assignment preference."""

    def test_single_fricative_goes_outer(self, star):
        assert Onset.parse([star["S"]]) == star_onset("S", "-", "-")

    def test_single_nasal_goes_medial(self, star):
        assert Onset.parse([star["Nj"]]) == star_onset("-", "Nj", "-")

    def test_single_approximant_goes_inner(self, star):
        assert Onset.parse([star["W"]]) == star_onset("-", "-", "W")

    def test_pairs(self, star):
        assert Onset.parse([star["P"], star["S"]]) == star_onset("P", "S", "-")
        assert Onset.parse([star["T"], star["W"]]) == star_onset("T", "-", "W")
        assert Onset.parse([star["Ng"], star["Y"]]) == star_onset("-", "Ng", "Y")

    def test_too_long(self, star):
        with pytest.raises(OnsetParseError):
            Onset.parse([star["K"], star["F"], star["Y"], star["W"]])

    def test_no_legal_assignment(self, star):
        with pytest.raises(OnsetParseError) as info:
            Onset.parse([star["K"], star["K"]])
        assert info.value.phonemes == (star["K"], star["K"])


class TestCoda:
    """Codas validate on construction and parse inner-first."""

    def test_phonemes_order(self, star):
        assert star_coda("Y", "F").phonemes == (star["Y"], star["F"])

    def test_invalid(self, star):
        with pytest.raises(InvalidCoda):
            star_coda("M", "S")

    def test_parse(self, star):
        assert Coda.parse([star["W"]]) == star_coda("W", "-")
        assert Coda.parse([star["S"]]) == star_coda("-", "S")
        assert Coda.parse([star["R"], star["N"]]) == star_coda("R", "N")
        assert Coda.parse([]) == EMPTY_CODA

    def test_parse_failure(self, star):
        with pytest.raises(CodaParseError):
            Coda.parse([star["K"]])


class TestSyllable:
    """Nucleus rule and flattened phoneme view."""

    def test_full_syllable(self, star):
        syllable = star_syllable(("K", "P", "Y"), "Ee", ("W", "N"))
        assert [p.symbol for p in syllable.phonemes] == ["K", "P", "Y", "Ee", "W", "N"]
        assert syllable.to_text() == "kpyéwn"
        assert syllable.to_broad_ipa() == "kʰpʰjeːwn"
        assert syllable.language == "star"

    def test_syllabic_r(self):
        syllable = star_syllable(("S", "-", "W"), "R")
        assert str(syllable) == "swr"

    def test_open_vowel_syllable_with_nasal_coda(self):
        star_syllable(("F", "-", "-"), "I", ("-", "Ng"))

    def test_syllabic_r_after_inner_r(self):
        with pytest.raises(InvalidSyllable):
            star_syllable(("X", "-", "R"), "R")

    def test_syllabic_r_before_inner_r(self):
        with pytest.raises(InvalidSyllable):
            star_syllable(("S", "-", "-"), "R", ("R", "-"))

    def test_consonant_nucleus(self):
        with pytest.raises(InvalidSyllable):
            star_syllable(("-", "-", "-"), "K")

    def test_mixed_languages(self, star, div):
        with pytest.raises(InvalidSyllable):
            Syllable.new(None, div["Ae"], star_coda("-", "S"))

    def test_new_defaults(self, star):
        assert Syllable.new(None, star["A"]) == Syllable(EMPTY_ONSET, star["A"], EMPTY_CODA)

    def test_hashable_value(self):
        a = star_syllable(("K", "-", "-"), "A")
        b = star_syllable(("K", "-", "-"), "A")
        assert a == b
        assert len({a, b}) == 1


class TestSyllableParse:
    """Nucleus location within one syllable."""

    def test_prefers_vowel_nucleus(self, star):
        phonemes = [star[s] for s in ("D", "J", "R", "A")]
        assert Syllable.parse(phonemes) == star_syllable(("D", "J", "R"), "A")

    def test_syllabic_r_without_vowel(self, star):
        phonemes = [star[s] for s in ("S", "W", "R")]
        assert Syllable.parse(phonemes).nucleus == star["R"]

    def test_empty(self):
        with pytest.raises(SyllableParseError):
            Syllable.parse([])

    def test_no_nucleus(self, star):
        with pytest.raises(SyllableParseError):
            Syllable.parse([star["K"], star["S"]])


class TestNarrowPronunciation:
    """Onsets and codas read unstressed, syllables as a word of their own."""

    def test_onset_is_unstressed(self, div):
        onset = Onset.parse([div["K"], div["W"]])
        assert onset.narrow_pronunc().strings() == ["kw", "kβ̞", "kʋ"]

    def test_empty_onset(self):
        assert str(EMPTY_ONSET.narrow_pronunc()) == ""

    def test_coda(self, star):
        assert str(Coda.parse([star["S"]]).narrow_pronunc()) == "s"

    def test_syllable_matches_single_syllable_word(self, div):
        syllable = Syllable.parse(div.tokenize("kwaŋ"))
        assert syllable.narrow_pronunc().strings() == [
            "ˈkwæɲ", "ˈkβ̞æɲ", "ˈkʋæɲ",
            "ˈkwaɲ", "ˈkβ̞aɲ", "ˈkʋaɲ",
        ]

    def test_unstressed_syllable(self):
        pronunc = star_syllable(("K", "-", "-"), "A").narrow_pronunc(stressed=False)
        assert str(pronunc) == "ˌkʰɑ"
