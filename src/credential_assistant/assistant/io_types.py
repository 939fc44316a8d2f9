from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import FrozenSet, Optional


@dataclass(frozen=True)
class KnowledgeEntry:
    """A canonical question, its answer and the question's cached keywords."""

    question: str
    answer: str
    keywords: FrozenSet[str] = frozenset()
    topic: Optional[str] = None


@dataclass(frozen=True)
class Match:
    """Best knowledge base entry for a query together with its score."""

    entry: KnowledgeEntry
    score: float


class ReplySource(str, Enum):
    EMPTY = "empty"
    KNOWLEDGE_BASE = "knowledge_base"
    FALLBACK = "fallback"
    DEFLECTION = "deflection"


@dataclass(frozen=True)
class Reply:
    """Output of the matching pipeline."""

    text: str
    source: ReplySource
    question: Optional[str] = None
    score: Optional[float] = None
    rule: Optional[str] = None
    keywords: FrozenSet[str] = frozenset()


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Message:
    """A single chat message; never mutated once created."""

    id: str
    role: Role
    content: str
    timestamp: datetime = field(default_factory=_utcnow)
