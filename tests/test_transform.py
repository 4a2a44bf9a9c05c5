"""Tests for word transformation operations."""

import pytest

from helpers import star_coda, star_syllable
from wftslang.errors import InvalidSyllable, InvalidWord
from wftslang.phonology import Word, transform


@pytest.fixture
def kay_sna() -> Word:
    """kay.sna: legal only while the first coda is there."""
    return Word.new([
        star_syllable(("K", "-", "-"), "A", ("Y", "-")),
        star_syllable(("S", "N", "-"), "A"),
    ])


class TestFinalSyllable:
    """replace_final_* operations."""

    def test_replace_final_nucleus(self, star, kas):
        assert kas.replace_final_nucleus(star["Aa"]).to_text() == "kás"

    def test_replace_final_coda(self, kas):
        assert kas.replace_final_coda(star_coda("Y", "S")).to_text() == "kays"

    def test_replace_final_rhyme(self, star, kas):
        word = kas.replace_final_rhyme(star["I"], star_coda("-", "N"))
        assert word.to_text() == "kin"

    def test_consonant_nucleus_rejected(self, star, kas):
        with pytest.raises(InvalidSyllable):
            kas.replace_final_nucleus(star["K"])

    def test_original_unchanged(self, star, kas):
        kas.replace_final_nucleus(star["Aa"])
        assert kas.to_text() == "kas"

    def test_result_is_a_valid_word(self, star, kas):
        word = kas.replace_final_rhyme(star["Ee"], star_coda("W", "F"))
        assert Word.new(word.syllables) == word


class TestInitialSyllable:
    """replace_initial_* operations."""

    def test_replace_initial_nucleus(self, star, kay_sna):
        assert kay_sna.replace_initial_nucleus(star["I"]).syllables[0].to_text() == "kiy"

    def test_replace_initial_rhyme(self, star, kay_sna):
        word = kay_sna.replace_initial_rhyme(star["E"], star_coda("W", "-"))
        assert word.syllables[0].to_text() == "kew"

    def test_removing_coda_breaks_cluster_rule(self, kay_sna):
        with pytest.raises(InvalidWord):
            kay_sna.replace_initial_coda(star_coda("-", "-"))

    def test_module_functions_match_methods(self, star, kay_sna):
        assert (
            transform.replace_initial_nucleus(kay_sna, star["I"])
            == kay_sna.replace_initial_nucleus(star["I"])
        )


class TestAppendPrepend:
    """Adding whole syllables."""

    def test_append(self, kas):
        word = kas.append_syllable(star_syllable(nucleus="Ee"))
        assert len(word) == 2
        assert word.to_text() == "kas'é"

    def test_prepend(self, kas):
        word = kas.prepend_syllable(star_syllable(("T", "-", "-"), "I"))
        assert [s.to_text() for s in word.syllables] == ["ti", "kas"]

    def test_append_repeated_boundary(self, kas):
        with pytest.raises(InvalidWord):
            kas.append_syllable(star_syllable(("S", "-", "-"), "A"))
