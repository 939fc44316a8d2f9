"""Keyword extraction shared by the knowledge base and the query side."""

from __future__ import annotations

import re
from typing import List

STOPWORDS = frozenset(
    ["the", "and", "for", "with", "how", "what", "can", "do", "i", "to", "in", "on"]
)
MIN_TOKEN_LENGTH = 3

# ASCII word characters only; accented letters are stripped like punctuation.
_NON_WORD = re.compile(r"[^\w]", re.ASCII)


def _strip(token: str) -> str:
    return _NON_WORD.sub("", token)


def tokenize(text: str) -> List[str]:
    """Return the keywords of ``text`` in order of appearance.

    The text is lower-cased and split on whitespace. Whole tokens found in
    ``STOPWORDS`` are dropped before stripping, so ``"how?"`` survives as
    ``how``. Each remaining token is reduced to ASCII word characters and kept
    if at least three characters are left. Duplicates are kept.
    """

    keywords: List[str] = []
    for raw in text.lower().split():
        if raw in STOPWORDS:
            continue
        token = _strip(raw)
        if len(token) < MIN_TOKEN_LENGTH:
            continue
        keywords.append(token)
    return keywords


__all__ = ["STOPWORDS", "tokenize"]
