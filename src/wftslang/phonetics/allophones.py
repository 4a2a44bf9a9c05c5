"""Allophone tables: context-conditioned phone alternatives per phoneme."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from wftslang.phonetics.context import Context

_CONTEXT_FLAGS = frozenset(Context.__dataclass_fields__)


@dataclass(frozen=True)
class AllophoneRule:
    """Phones a phoneme surfaces as when every flag in ``when`` is set.

    Attributes:
        when: Context flag names that must all be true. Empty means always.
        phones: Alternative phone spellings, in display order.
    """

    when: frozenset[str]
    phones: tuple[str, ...]

    def __post_init__(self) -> None:
        unknown = self.when - _CONTEXT_FLAGS
        if unknown:
            raise ValueError(f"Unknown context flags: {sorted(unknown)}")
        if not self.phones:
            raise ValueError("An allophone rule needs at least one phone.")

    def matches(self, ctx: Context) -> bool:
        return all(getattr(ctx, flag) for flag in self.when)


def rules(*entries: tuple[str | Iterable[str], Sequence[str]]) -> tuple[AllophoneRule, ...]:
    """Build an ordered rule list from ``(when, phones)`` pairs.

    ``when`` is a space-separated flag string (``""`` for the fallback)
    or an iterable of flag names.
    """
    built = []
    for when, phones in entries:
        flags = when.split() if isinstance(when, str) else when
        built.append(AllophoneRule(frozenset(flags), tuple(phones)))
    return tuple(built)


def select_phones(table: Sequence[AllophoneRule], ctx: Context) -> tuple[str, ...]:
    """Return the phones of the first rule matching ``ctx``.

    Raises:
        LookupError: If no rule matches; tables end with a fallback rule.
    """
    for rule in table:
        if rule.matches(ctx):
            return rule.phones
    raise LookupError(f"No allophone rule matches {ctx!r}")


def validate_table(
    tables: Mapping[str, Sequence[AllophoneRule]], symbols: Iterable[str]
) -> None:
    """Check that every symbol has a table ending in an unconditional rule."""
    for symbol in symbols:
        table = tables.get(symbol)
        if not table:
            raise ValueError(f"No allophone rules for phoneme {symbol!r}")
        if table[-1].when:
            raise ValueError(
                f"Allophone rules for {symbol!r} must end with a fallback rule"
            )
