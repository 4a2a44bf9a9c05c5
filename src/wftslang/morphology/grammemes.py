"""Grammatical categories nouns inflect for."""

from __future__ import annotations

from enum import Enum


class _Grammeme(Enum):
    @classmethod
    def all(cls) -> tuple:
        """Every value, in declaration order."""
        return tuple(cls)

    def __str__(self) -> str:
        return self.value


class BasicCase(_Grammeme):
    NOMINATIVE = "nominative"
    ACCUSATIVE = "accusative"
    TOPICAL = "topical"
    POSTPOSITIONAL = "postpositional"


class Gender(_Grammeme):
    DIVINE = "divine"
    ANIMATE = "animate"
    INANIMATE = "inanimate"


class Number(_Grammeme):
    SINGULAR = "singular"
    PLURAL = "plural"
    NULLAR = "nullar"
    """Zero referents: 'no X'."""
    COLLECTIVE = "collective"
