"""Phoneme inventories: phoneme classes, phonemes and per-language lookup tables."""

from wftslang.inventory.models import Inventory, Phoneme, PhonemeClass

__all__ = [
    "Inventory",
    "Phoneme",
    "PhonemeClass",
]
