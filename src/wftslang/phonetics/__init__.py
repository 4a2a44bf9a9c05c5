"""Phonetics: trigger contexts, allophone selection and narrow pronunciation."""

from wftslang.phonetics.allophones import AllophoneRule, select_phones
from wftslang.phonetics.context import NEUTRAL, Context, Triggers, resolve_contexts
from wftslang.phonetics.transcription import Transcription, pronounce_words
from wftslang.phonetics.variation import (
    MARKERS,
    SECONDARY_STRESS,
    STRESS,
    SYLLABLE_BREAK,
    VARIATION_SEPARATOR,
    Variation,
)

__all__ = [
    "AllophoneRule",
    "Context",
    "MARKERS",
    "NEUTRAL",
    "SECONDARY_STRESS",
    "STRESS",
    "SYLLABLE_BREAK",
    "Transcription",
    "Triggers",
    "VARIATION_SEPARATOR",
    "Variation",
    "pronounce_words",
    "resolve_contexts",
    "select_phones",
]
