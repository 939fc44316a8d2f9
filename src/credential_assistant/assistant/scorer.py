from __future__ import annotations

from typing import AbstractSet, Iterable, Optional

from .io_types import KnowledgeEntry, Match

# Raising this trades fewer false positive matches for more fallback lookups.
ACCEPT_THRESHOLD = 0.3


def jaccard(left: AbstractSet[str], right: AbstractSet[str]) -> float:
    union = len(left | right)
    if union == 0:
        return 0.0
    return len(left & right) / union


def score(query: AbstractSet[str], entry: KnowledgeEntry) -> float:
    """Jaccard similarity between query keywords and the entry's question."""
    return jaccard(query, entry.keywords)


def select_best(
    query: AbstractSet[str],
    entries: Iterable[KnowledgeEntry],
    threshold: float = ACCEPT_THRESHOLD,
) -> Optional[Match]:
    """Return the highest scoring entry if it clears ``threshold``.

    Entries are visited in order and the best is only replaced on a strict
    improvement, so the earliest entry wins ties.
    """

    best: Optional[KnowledgeEntry] = None
    best_score = 0.0
    for entry in entries:
        s = score(query, entry)
        if best is None or s > best_score:
            best, best_score = entry, s
    if best is None or best_score < threshold:
        return None
    return Match(entry=best, score=best_score)


__all__ = ["ACCEPT_THRESHOLD", "jaccard", "score", "select_best"]
