from __future__ import annotations

from typing import FrozenSet, List, Sequence

from .tokenizer import tokenize

HISTORY_WINDOW = 3
HISTORY_KEYWORD_CAP = 5


def history_keywords(history: Sequence[str]) -> List[str]:
    """Return up to ``HISTORY_KEYWORD_CAP`` distinct keywords from recent history.

    Only the last ``HISTORY_WINDOW`` utterances are scanned, oldest first, and
    the first distinct keywords encountered are kept.
    """

    picked: List[str] = []
    for utterance in list(history)[-HISTORY_WINDOW:]:
        for token in tokenize(utterance):
            if token in picked:
                continue
            picked.append(token)
            if len(picked) == HISTORY_KEYWORD_CAP:
                return picked
    return picked


def aggregate(current: str, history: Sequence[str] = ()) -> FrozenSet[str]:
    """Blend keywords of ``current`` with capped keywords from ``history``."""
    return frozenset(tokenize(current)) | frozenset(history_keywords(history))


__all__ = ["HISTORY_KEYWORD_CAP", "HISTORY_WINDOW", "aggregate", "history_keywords"]
