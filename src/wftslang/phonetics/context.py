"""Phonetic triggers, contexts and the two-pass context resolver.

Each phoneme carries :class:`Triggers`: the effects it can have on its
neighbours. Each position of a transcription gets a :class:`Context`: the
environment it is actually realized in, computed from the triggers of the
phonemes around it.

Some triggers depend on context themselves (a palatalizable consonant
palatalizes its neighbours only when it is itself palatalized), so
contexts are resolved with one forward sweep followed by one backward
sweep. No fixpoint iteration is performed: chains that would need more
than two sweeps to settle are left as the second sweep leaves them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence


@dataclass(frozen=True)
class Triggers:
    """Effects a phoneme can induce on its neighbours.

    Attributes:
        palatalizes: Palatalizes both neighbours.
        palatalizable: Becomes a palatalizer itself once palatalized.
        palatalizable_progressive: Becomes a palatalizer itself once
            palatalized by its left neighbour.
        dissocs_palatal: Dissociates palatality of neighbouring vowels.
        dissocs_labial: Dissociates labiality of neighbouring vowels.
        voices: Voices a neighbour that is flanked by voicers on both sides.
        fronts: Fronts the following phoneme.
        velarizes: Velarizes (backs) the following phoneme.
        labializes: Labializes (rounds) the following phoneme.
        retracts: Retracts the preceding phoneme.
    """

    palatalizes: bool = False
    palatalizable: bool = False
    palatalizable_progressive: bool = False
    dissocs_palatal: bool = False
    dissocs_labial: bool = False
    voices: bool = False
    fronts: bool = False
    velarizes: bool = False
    labializes: bool = False
    retracts: bool = False

    def with_ctx(self, ctx: Context) -> Triggers:
        """Resolve these triggers against the phoneme's own context."""
        return replace(
            self,
            palatalizes=(
                self.palatalizes
                or (self.palatalizable and ctx.palatalized)
                or (self.palatalizable_progressive and ctx.palatalized_progressive)
            ),
            voices=self.voices or ctx.voiced,
        )


NEUTRAL = Triggers()
"""Trigger set contributed by an absent neighbour."""


@dataclass(frozen=True)
class Context:
    """Realized phonetic environment of one phoneme position."""

    palatalized: bool = False
    palatalized_progressive: bool = False
    voiced: bool = False
    palatal_dissoc: bool = False
    labial_dissoc: bool = False
    fronted: bool = False
    velarized: bool = False
    labialized: bool = False
    retracted: bool = False

    @classmethod
    def from_triggers(cls, prev: Triggers, next: Triggers) -> Context:
        """Build a context from the triggers of both neighbours.

        Palatalization and dissociation spread from either side, voicing
        needs both sides. Colouring (fronting, velarization, labialization)
        and ``palatalized_progressive`` come from the left, retraction from
        the right.
        """
        return cls(
            palatalized=prev.palatalizes or next.palatalizes,
            palatalized_progressive=prev.palatalizes,
            voiced=prev.voices and next.voices,
            palatal_dissoc=prev.dissocs_palatal or next.dissocs_palatal,
            labial_dissoc=prev.dissocs_labial or next.dissocs_labial,
            fronted=prev.fronts,
            velarized=prev.velarizes,
            labialized=prev.labializes,
            retracted=next.retracts,
        )

    def flags(self) -> frozenset[str]:
        """Names of the flags set in this context."""
        return frozenset(
            name for name, value in vars(self).items() if value
        )


def resolve_contexts(triggers: Sequence[Triggers]) -> list[Context]:
    """Compute one :class:`Context` per position.

    Args:
        triggers: Raw triggers of each phoneme, in transcription order.

    Returns:
        Contexts aligned with ``triggers``. Empty input gives empty output.
    """
    contexts = _progress(triggers)
    _regress(triggers, contexts)
    return contexts


def _progress(triggers: Sequence[Triggers]) -> list[Context]:
    """Forward sweep: left neighbour resolved, right neighbour raw."""
    contexts: list[Context] = []
    prev = NEUTRAL
    for i, curr in enumerate(triggers):
        following = triggers[i + 1] if i + 1 < len(triggers) else NEUTRAL
        ctx = Context.from_triggers(prev, following)
        contexts.append(ctx)
        prev = curr.with_ctx(ctx)
    return contexts


def _regress(triggers: Sequence[Triggers], contexts: list[Context]) -> None:
    """Backward sweep, correcting ``contexts`` in place.

    The left neighbour is resolved with its forward context, the right
    neighbour with the context this sweep already gave it.
    """
    following = NEUTRAL
    for i in range(len(triggers) - 1, -1, -1):
        if i > 0:
            prev = triggers[i - 1].with_ctx(contexts[i - 1])
        else:
            prev = NEUTRAL
        contexts[i] = Context.from_triggers(prev, following)
        following = triggers[i].with_ctx(contexts[i])
