"""Tests for allophone rules, Variation and narrow transcription."""

import pytest

from wftslang.phonetics import (
    MARKERS,
    SECONDARY_STRESS,
    STRESS,
    SYLLABLE_BREAK,
    VARIATION_SEPARATOR,
    AllophoneRule,
    Context,
    Transcription,
    Variation,
    pronounce_words,
    select_phones,
)
from wftslang.phonetics.allophones import rules, validate_table
from wftslang.phonology import Word


# ---------------------------------------------------------------------------
# Allophone rules
# ---------------------------------------------------------------------------


class TestAllophoneRules:
    """First matching rule wins."""

    TABLE = rules(
        ("voiced palatalized", ["ɟ"]),
        ("voiced", ["g"]),
        ("", ["k"]),
    )

    def test_first_match(self):
        assert select_phones(self.TABLE, Context(voiced=True, palatalized=True)) == ("ɟ",)
        assert select_phones(self.TABLE, Context(voiced=True)) == ("g",)
        assert select_phones(self.TABLE, Context(palatalized=True)) == ("k",)

    def test_unknown_flag(self):
        with pytest.raises(ValueError, match="Unknown context flags"):
            AllophoneRule(frozenset({"nasalized"}), ("ã",))

    def test_rule_needs_a_phone(self):
        with pytest.raises(ValueError):
            AllophoneRule(frozenset(), ())

    def test_no_match(self):
        with pytest.raises(LookupError):
            select_phones(rules(("voiced", ["g"])), Context())

    def test_validate_table(self):
        validate_table({"K": self.TABLE}, ["K"])
        with pytest.raises(ValueError, match="No allophone rules"):
            validate_table({"K": self.TABLE}, ["K", "G"])
        with pytest.raises(ValueError, match="fallback"):
            validate_table({"K": rules(("voiced", ["g"]))}, ["K"])


# ---------------------------------------------------------------------------
# Variation
# ---------------------------------------------------------------------------


class TestVariation:
    """Cartesian expansion of alternatives."""

    def test_default_is_single_empty_pronunciation(self):
        variation = Variation()
        assert variation.pronuncs == ((),)
        assert variation.is_empty
        assert str(variation) == ""

    def test_new_phone_outermost(self):
        variation = Variation().add_phones(["a", "b"]).add_phones(["x", "y"])
        assert variation.strings() == ["ax", "bx", "ay", "by"]

    def test_add_phones_returns_new_value(self):
        base = Variation()
        base.add_phones(["a"])
        assert base == Variation()

    def test_add_phone_seqs(self):
        variation = Variation().add_phones(["a"]).add_phone_seqs([("b", "c"), ("d",)])
        assert variation.strings() == ["abc", "ad"]

    def test_str_joins_with_separator(self):
        variation = Variation().add_phones(["a", "b"])
        assert str(variation) == f"a{VARIATION_SEPARATOR}b"
        assert VARIATION_SEPARATOR == " ~ "

    def test_len_and_iter(self):
        variation = Variation().add_phones(["a", "b", "c"])
        assert len(variation) == 3
        assert list(variation) == [("a",), ("b",), ("c",)]


# ---------------------------------------------------------------------------
# Transcription
# ---------------------------------------------------------------------------


class TestTranscription:
    """Boundary bookkeeping."""

    def test_empty_transcription(self):
        assert Transcription().narrow_pronunc() == Variation()
        assert str(pronounce_words([])) == ""

    def test_boundaries(self):
        first = Word.parse_str("mof-ji", "div")
        second = Word.parse_str("ka", "div")
        transcription = Transcription.from_words([first, second])
        assert len(transcription) == 7
        assert transcription.syllable_starts == {0, 3, 5}
        assert transcription.word_starts == {0, 5}

    def test_contexts_aligned(self, kas):
        assert len(Transcription.from_words([kas]).contexts()) == 3


class TestProtoDivinePronunciation:
    """Palatalization, voicing and dissociation."""

    def test_kwang(self):
        variation = Word.parse_str("kwaŋ", "div").narrow_pronunc()
        assert variation.pronuncs[0] == (STRESS, "k", "w", "æ", "ɲ")
        assert variation.strings() == [
            "ˈkwæɲ", "ˈkβ̞æɲ", "ˈkʋæɲ",
            "ˈkwaɲ", "ˈkβ̞aɲ", "ˈkʋaɲ",
        ]

    def test_three_syllables(self):
        variation = Word.parse_str("mof-ji-hju", "div").narrow_pronunc()
        assert variation.strings() == [
            "ˈmov.jɪˌʝju",
            "ˈmo̞v.jɪˌʝju",
            "ˈmoβ.jɪˌʝju",
            "ˈmo̞β.jɪˌʝju",
        ]

    def test_markers_in_order(self):
        pronunc = Word.parse_str("mof-ji-hju", "div").narrow_pronunc().pronuncs[0]
        markers = [p for p in pronunc if p in MARKERS]
        assert markers == [STRESS, SYLLABLE_BREAK, SECONDARY_STRESS]

    def test_voiced_palatal_stop(self):
        variation = Word.parse_str("i-ka", "div").narrow_pronunc()
        assert variation.strings() == ["ˈi.ɟæ", "ˈi.ɟa"]

    def test_voiceless_word_initial_fricative(self):
        assert Word.parse_str("fu", "div").narrow_pronunc().strings() == ["ˈɸu", "ˈfu"]

    def test_unstressed(self):
        variation = Word.parse_str("ka", "div").narrow_pronunc(stressed=False)
        assert variation.pronuncs[0][0] == SECONDARY_STRESS


class TestStarPronunciation:
    """Colouring and retraction."""

    @pytest.mark.parametrize("text, expected", [
        ("ka", "ˈkʰɑ"),
        ("ga", "ˈqʼɑ"),
        ("ca", "ˈcʰæ"),
        ("wa", "ˈw̠ɒ"),
        ("sa", "ˈsä"),
        ("cas", "ˈcʰæɕ"),
        ("ḱi", "ˈkʷʰu"),
        ("sań", "ˈsäɲ"),
        ("ay", "ˈäj"),
    ])
    def test_single_syllable(self, text, expected):
        variation = Word.parse_str(text, "star").narrow_pronunc()
        assert str(variation) == expected

    def test_single_syllable_has_no_secondary_markers(self):
        pronunc = Word.parse_str("kas", "star").narrow_pronunc().pronuncs[0]
        assert pronunc[0] == STRESS
        assert SECONDARY_STRESS not in pronunc
        assert SYLLABLE_BREAK not in pronunc

    def test_syllabic_r(self, fingswrkpey):
        assert str(fingswrkpey.narrow_pronunc()) == "ˈfɨŋ.swɹˌkʰpʰəːj"

    def test_stress_resets_per_word(self):
        ka = Word.parse_str("ka", "star")
        assert str(pronounce_words([ka, ka])) == "ˈkʰɑˈkʰɑ"

    def test_vowels_palatalize_only_from_the_left(self):
        assert str(Word.parse_str("ya", "star").narrow_pronunc()) == "ˈjæ"
        assert str(Word.parse_str("ay", "star").narrow_pronunc()) == "ˈäj"

    def test_fricatives_palatalize_from_either_side(self):
        assert str(Word.parse_str("cas", "star").narrow_pronunc()) == "ˈcʰæɕ"
        assert str(Word.parse_str("sya", "star").narrow_pronunc()) == "ˈɕjæ"
        # a vowel before ``ń`` does not, so ``s`` stays plain
        assert str(Word.parse_str("sań", "star").narrow_pronunc()) == "ˈsäɲ"
