"""Morphology: grammemes and Star noun inflection."""

from wftslang.morphology.grammemes import BasicCase, Gender, Number
from wftslang.morphology.noun import Affix, Class1Noun, Inflected, Inflection

__all__ = [
    "Affix",
    "BasicCase",
    "Class1Noun",
    "Gender",
    "Inflected",
    "Inflection",
    "Number",
]
