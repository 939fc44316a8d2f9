from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple

from loguru import logger

from .context import aggregate
from .fallback import DEFAULT_RULES, DEFLECTION_TEXT, FallbackResolver, FallbackRule
from .io_types import Reply, ReplySource
from .knowledge import KnowledgeBase
from .scorer import select_best

EMPTY_INPUT_TEXT = "Sorry, I didn't catch that. Could you rephrase?"


@dataclass
class MatchingEngine:
    """Knowledge base lookup with fallback rules and a final deflection.

    The engine holds no per-conversation state; history is passed in on every
    call, so one instance can serve any number of sessions.
    """

    kb: KnowledgeBase
    rules: Tuple[FallbackRule, ...] = DEFAULT_RULES
    fallback: FallbackResolver = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.fallback = FallbackResolver(self.kb, self.rules)

    # ------------------------------------------------------------------
    def reply(self, utterance: str, history: Sequence[str] = ()) -> Reply:
        if not utterance.strip():
            return Reply(text=EMPTY_INPUT_TEXT, source=ReplySource.EMPTY)

        keywords = aggregate(utterance, history)
        match = select_best(keywords, self.kb)
        if match is not None:
            logger.debug(
                "Matched {!r} with score {:.3f}", match.entry.question, match.score
            )
            return Reply(
                text=match.entry.answer,
                source=ReplySource.KNOWLEDGE_BASE,
                question=match.entry.question,
                score=match.score,
                keywords=keywords,
            )

        rule = self.fallback.resolve(utterance)
        if rule is not None:
            logger.debug("No match above threshold; fallback rule {}", rule.name)
            return Reply(
                text=self.fallback.answer(rule),
                source=ReplySource.FALLBACK,
                question=rule.question,
                rule=rule.name,
                keywords=keywords,
            )

        logger.debug("No match or fallback rule for {!r}", utterance)
        return Reply(text=DEFLECTION_TEXT, source=ReplySource.DEFLECTION, keywords=keywords)

    def respond(self, utterance: str, history: Sequence[str] = ()) -> str:
        """Return the reply text for ``utterance``; always non-empty."""
        return self.reply(utterance, history).text


def explain(reply: Reply) -> str:
    """Describe in one line why ``reply`` was chosen."""

    kw = ", ".join(sorted(reply.keywords)) or "no keywords"
    if reply.source is ReplySource.KNOWLEDGE_BASE:
        return f"Answered {reply.question!r} (score {reply.score:.2f}) from keywords {kw}."
    if reply.source is ReplySource.FALLBACK:
        return f"No close question; rule {reply.rule} pointed to {reply.question!r}."
    if reply.source is ReplySource.DEFLECTION:
        return f"Nothing matched keywords {kw}; suggested supported topics."
    return "Empty message; asked to rephrase."
