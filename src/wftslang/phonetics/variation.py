"""Variation: the set of admissible narrow pronunciations of a transcription."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

STRESS = "ˈ"
SECONDARY_STRESS = "ˌ"
SYLLABLE_BREAK = "."

MARKERS = frozenset({STRESS, SECONDARY_STRESS, SYLLABLE_BREAK})
"""Every symbol placed at a syllable start rather than realizing a phoneme."""

VARIATION_SEPARATOR = " ~ "
"""Separator placed between alternatives when a Variation is displayed."""

Pronunc = tuple[str, ...]
"""A single narrow pronunciation: a sequence of phones and markers."""


@dataclass(frozen=True)
class Variation:
    """Alternative narrow pronunciations, in generation order.

    The default Variation holds one empty pronunciation, the identity of
    the Cartesian expansion. Each call to :meth:`add_phones` returns a new
    Variation: every existing pronunciation extended by every alternative,
    grouped by alternative.
    """

    pronuncs: tuple[Pronunc, ...] = ((),)

    def add_phones(self, phones: Sequence[str]) -> Variation:
        """Extend by alternative single phones.

        Args:
            phones: One or more alternative phone spellings.
        """
        return Variation(tuple(
            pronunc + (phone,) for phone in phones for pronunc in self.pronuncs
        ))

    def add_phone_seqs(self, seqs: Iterable[Sequence[str]]) -> Variation:
        """Extend by alternative phone sequences."""
        return Variation(tuple(
            pronunc + tuple(seq) for seq in seqs for pronunc in self.pronuncs
        ))

    @property
    def is_empty(self) -> bool:
        """True when no pronunciation holds any phone."""
        return all(not p for p in self.pronuncs)

    def strings(self) -> list[str]:
        """Each pronunciation rendered as a string."""
        return ["".join(p) for p in self.pronuncs]

    def __iter__(self) -> Iterator[Pronunc]:
        return iter(self.pronuncs)

    def __len__(self) -> int:
        return len(self.pronuncs)

    def __str__(self) -> str:
        return VARIATION_SEPARATOR.join(self.strings())
