from __future__ import annotations

from collections import Counter
from typing import Iterable

from .models import ModeResult


def frequency_table(identities: Iterable[str]) -> Counter[str]:
    counts: Counter[str] = Counter()
    for ident in identities:
        if ident:
            counts[ident] += 1
    return counts


def top_entry(counts: Counter[str]) -> ModeResult | None:
    """
    Most frequent identity, or None for an empty table.

    Ties go to the identity seen first while the table was built: Counter keeps
    insertion order and max() returns the first maximal item.
    """
    if not counts:
        return None
    author, count = max(counts.items(), key=lambda kv: kv[1])
    return ModeResult(author=author, count=count)
