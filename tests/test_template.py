"""Tests for templates and morphemes."""

import pytest

from wftslang.errors import (
    InvalidTemplateHole,
    NonFilledTemplate,
    TemplateHoleOutOfBounds,
    WordParseError,
)
from wftslang.phonology import Template, Word, morpheme_broad_ipa, morpheme_text


def _ks(star) -> list:
    return [star["K"], star["S"]]


class TestTemplateNew:
    """Hole validation."""

    def test_holes_sorted(self, star):
        assert Template.new(_ks(star), [2, 0]).holes == (0, 2)

    def test_hole_at_end_allowed(self, star):
        assert Template.new(_ks(star), [2]).to_text() == "ks-"

    def test_hole_past_end(self, star):
        with pytest.raises(TemplateHoleOutOfBounds) as info:
            Template.new(_ks(star), [3])
        assert info.value.hole == 3

    def test_duplicate_hole(self, star):
        with pytest.raises(TemplateHoleOutOfBounds):
            Template.new(_ks(star), [1, 1])

    def test_negative_hole(self, star):
        with pytest.raises(TemplateHoleOutOfBounds):
            Template.new(_ks(star), [-1])


class TestTemplateFill:
    """Filling holes and turning templates into words."""

    def test_parse_str(self, star):
        template = Template.parse_str("-k-s", "star")
        assert template.phonemes == (star["K"], star["S"])
        assert template.holes == (0, 1)

    def test_fill_shifts_later_holes(self, star):
        template = Template.parse_str("-k-s", "star").fill(0, [star["A"]])
        assert template.holes == (2,)
        assert template.to_text() == "ak-s"

    def test_fill_all_then_into_word(self, star):
        template = Template.parse_str("-k-s", "star")
        word = template.fill(0, [star["A"]]).fill(2, [star["I"]]).into_word()
        assert word == Word.parse_str("akis", "star")

    def test_fill_returns_new_value(self, star):
        template = Template.parse_str("k-s", "star")
        template.fill(1, [star["A"]])
        assert template.holes == (1,)
        assert not template.is_filled

    def test_fill_unknown_hole(self, star):
        with pytest.raises(InvalidTemplateHole) as info:
            Template.parse_str("k-s", "star").fill(0, [star["A"]])
        assert info.value.hole == 0

    def test_into_word_requires_filled(self):
        with pytest.raises(NonFilledTemplate):
            Template.parse_str("k-s", "star").into_word()

    def test_into_word_illegal_phonemes(self, star):
        with pytest.raises(WordParseError):
            Template.parse_str("k-s", "star").fill(1, [star["T"]]).into_word()


class TestMorpheme:
    """Text and broad IPA of words and templates alike."""

    def test_template_projections(self):
        template = Template.parse_str("-k-s", "star")
        assert morpheme_text(template) == "-k-s"
        assert morpheme_broad_ipa(template) == "-kʰ-s"
        assert str(template) == "-k-s"

    def test_word_projections(self, kas):
        assert morpheme_text(kas) == "kas"
        assert morpheme_broad_ipa(kas) == "ˈkʰas"
