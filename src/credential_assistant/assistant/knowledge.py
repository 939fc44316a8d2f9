from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

import yaml
from loguru import logger

from .io_types import KnowledgeEntry
from .tokenizer import tokenize


def make_entry(question: str, answer: str, topic: Optional[str] = None) -> KnowledgeEntry:
    return KnowledgeEntry(
        question=question,
        answer=answer,
        keywords=frozenset(tokenize(question)),
        topic=topic,
    )


class KnowledgeBase:
    """Read-only question/answer table, iterated in insertion order.

    Entries are built once and never added, removed or changed afterwards, so
    a single instance can be shared by every conversation.
    """

    def __init__(self, entries: List[KnowledgeEntry]):
        by_question: Dict[str, KnowledgeEntry] = {}
        for entry in entries:
            if entry.question in by_question:
                raise ValueError(f"duplicate question: {entry.question!r}")
            by_question[entry.question] = entry
        self._entries = tuple(entries)
        self._by_question = MappingProxyType(by_question)
        for entry in self.unreachable():
            logger.warning(
                "Knowledge entry {!r} has no keywords and can never be scored",
                entry.question,
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "KnowledgeBase":
        return cls([make_entry(q, a) for q, a in mapping.items()])

    @classmethod
    def from_yaml(cls, path: Path) -> "KnowledgeBase":
        raw = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        entries: List[KnowledgeEntry] = []
        for item in raw.get("entries", []):
            try:
                question, answer = item["question"], item["answer"]
            except (KeyError, TypeError) as exc:
                raise ValueError(f"malformed knowledge entry in {path}: {item!r}") from exc
            entries.append(make_entry(str(question), str(answer), item.get("topic")))
        kb = cls(entries)
        logger.info("Loaded {} knowledge entries from {}", len(kb), path)
        return kb

    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[KnowledgeEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, question: object) -> bool:
        return question in self._by_question

    def questions(self) -> List[str]:
        return [entry.question for entry in self._entries]

    def get(self, question: str) -> KnowledgeEntry:
        return self._by_question[question]

    def answer(self, question: str) -> str:
        return self._by_question[question].answer

    def unreachable(self) -> List[KnowledgeEntry]:
        """Entries whose question tokenizes to nothing."""
        return [entry for entry in self._entries if not entry.keywords]


@lru_cache(maxsize=1)
def load_default() -> KnowledgeBase:
    """Return the shipped knowledge base, loaded once per process."""
    from .. import config

    return KnowledgeBase.from_yaml(config.KNOWLEDGE_PATH)
