"""Base class for constructed languages.

A :class:`Language` bundles everything the phonology core needs to know
about one conlang: its inventory, the slot rules for onsets and codas, the
nucleus rule, the classes allowed to bypass the cross-syllable cluster
rule, how syllables are separated in writing, and the phonetic trigger and
allophone tables. The syllable, word and transcription models are generic
and consult the language of their phonemes for every decision.

To add a language, subclass :class:`Language`, implement the three slot
predicates and register an instance in :mod:`wftslang.languages`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Mapping, Sequence

from wftslang.inventory import Inventory, Phoneme, PhonemeClass
from wftslang.phonetics.allophones import AllophoneRule, select_phones, validate_table
from wftslang.phonetics.context import NEUTRAL, Context, Triggers

if TYPE_CHECKING:
    from wftslang.phonology.syllable import Coda, Onset, Syllable

SEPARATORS = "'-."
"""Characters accepted in orthographic input as forced syllable breaks."""


class Language(ABC):
    """A constructed language's phonology.

    Args:
        inventory: The language's phonemes.
        triggers: Phonetic triggers keyed by phoneme symbol. Symbols not
            listed trigger nothing.
        allophones: Ordered allophone rules keyed by phoneme symbol; every
            phoneme needs a table ending with an unconditional rule.
        bypass_classes: Classes whose onsets may exceed the preceding coda
            by more than one phoneme.
        syllable_separator: Character written between syllables.
        always_separate: Write the separator between every pair of
            syllables instead of only where the spelling is ambiguous.
    """

    def __init__(
        self,
        inventory: Inventory,
        triggers: Mapping[str, Triggers],
        allophones: Mapping[str, Sequence[AllophoneRule]],
        bypass_classes: Iterable[PhonemeClass],
        syllable_separator: str = "'",
        always_separate: bool = False,
    ) -> None:
        unknown = set(triggers) - {p.symbol for p in inventory}
        if unknown:
            raise ValueError(f"Triggers given for unknown phonemes: {sorted(unknown)}")
        validate_table(allophones, (p.symbol for p in inventory))
        if syllable_separator not in SEPARATORS:
            raise ValueError(f"Unsupported syllable separator {syllable_separator!r}")

        self.inventory = inventory
        self.triggers = dict(triggers)
        self.allophones = {s: tuple(rules) for s, rules in allophones.items()}
        self.bypass_classes = frozenset(bypass_classes)
        self.syllable_separator = syllable_separator
        self.always_separate = always_separate

    @property
    def code(self) -> str:
        return self.inventory.language

    @property
    def name(self) -> str:
        return self.inventory.language_name

    def __getitem__(self, symbol: str) -> Phoneme:
        return self.inventory[symbol]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r})"

    # --- Phonotactics ---

    @abstractmethod
    def valid_onset(
        self,
        outer: Phoneme | None,
        medial: Phoneme | None,
        inner: Phoneme | None,
    ) -> bool:
        """Whether the three onset slots form a legal onset."""

    @abstractmethod
    def valid_coda(self, inner: Phoneme | None, outer: Phoneme | None) -> bool:
        """Whether the two coda slots form a legal coda."""

    @abstractmethod
    def valid_nucleus(self, onset: Onset, nucleus: Phoneme, coda: Coda) -> bool:
        """Whether ``nucleus`` may head a syllable with this onset and coda."""

    def can_be_nucleus(self, phoneme: Phoneme) -> bool:
        """Whether ``phoneme`` may head some syllable. Vowels by default."""
        return phoneme.is_vowel

    def cluster_violation(self, prev: Syllable, curr: Syllable) -> str | None:
        """Check the junction of two adjacent syllables.

        Returns:
            ``None`` if the junction is legal, otherwise the reason.
        """
        last = prev.phonemes[-1]
        first = curr.phonemes[0]
        if last == first:
            return f"repeated phoneme {last!r} across syllable boundary"
        onset_len = len(curr.onset)
        coda_len = len(prev.coda)
        if (
            onset_len - coda_len > 1
            and curr.onset.phonemes[0].phoneme_class not in self.bypass_classes
        ):
            return (
                f"onset of {onset_len} after coda of {coda_len} starting with "
                f"{curr.onset.phonemes[0]!r}"
            )
        return None

    # --- Phonetics ---

    def triggers_of(self, phoneme: Phoneme) -> Triggers:
        return self.triggers.get(phoneme.symbol, NEUTRAL)

    def allophones_of(self, phoneme: Phoneme, ctx: Context) -> tuple[str, ...]:
        """Narrow phones ``phoneme`` may surface as in ``ctx``."""
        return select_phones(self.allophones[phoneme.symbol], ctx)

    # --- Orthography ---

    def tokenize(self, text: str) -> list[Phoneme]:
        """Split orthographic text (without separators) into phonemes."""
        return self.inventory.tokenize(text)

    def is_class(self, phoneme: Phoneme | None, *classes: PhonemeClass) -> bool:
        """Whether ``phoneme`` is present and of one of ``classes``."""
        return phoneme is not None and phoneme.phoneme_class in classes
