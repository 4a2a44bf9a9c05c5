"""Builders for Star test values from slot symbols."""

from __future__ import annotations

from wftslang.languages import get_language
from wftslang.phonology import Coda, Onset, Syllable


def slots(lang, *symbols):
    """Map slot symbols to phonemes; ``"-"`` stands for an empty slot."""
    return [None if s == "-" else lang[s] for s in symbols]


def star_onset(*symbols) -> Onset:
    return Onset.new(*slots(get_language("star"), *symbols))


def star_coda(*symbols) -> Coda:
    return Coda.new(*slots(get_language("star"), *symbols))


def star_syllable(onset=("-", "-", "-"), nucleus="A", coda=("-", "-")) -> Syllable:
    """Build a Star syllable, e.g. ``star_syllable(("K", "P", "Y"), "Ee", ("W", "N"))``."""
    star = get_language("star")
    return Syllable.new(star_onset(*onset), star[nucleus], star_coda(*coda))
