"""Shared test fixtures for wftslang."""

from __future__ import annotations

import pytest

from helpers import star_syllable
from wftslang.languages import get_language
from wftslang.phonology import Word


@pytest.fixture
def star():
    """The Star language."""
    return get_language("star")


@pytest.fixture
def div():
    """The Proto-Divine language."""
    return get_language("div")


@pytest.fixture
def fingswrkpey() -> Word:
    """Star fiŋ.swr.kpéy, built syllable by syllable."""
    return Word.new([
        star_syllable(("F", "-", "-"), "I", ("-", "Ng")),
        star_syllable(("S", "-", "W"), "R"),
        star_syllable(("K", "P", "-"), "Ee", ("Y", "-")),
    ])


@pytest.fixture
def kas() -> Word:
    """Star kas: one closed syllable."""
    return Word.parse_str("kas", "star")
