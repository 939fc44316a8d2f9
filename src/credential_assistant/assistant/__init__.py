from __future__ import annotations

from functools import lru_cache

from .engine import EMPTY_INPUT_TEXT, MatchingEngine, explain
from .fallback import DEFAULT_RULES, DEFLECTION_TEXT, FallbackResolver, FallbackRule
from .io_types import KnowledgeEntry, Match, Message, Reply, ReplySource, Role
from .knowledge import KnowledgeBase, load_default
from .session import WELCOME_TEXT, ConversationSession, SessionState

# ---------------------------------------------------------------------------
# Default components
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> MatchingEngine:
    """Engine over the shipped knowledge base, shared by all sessions."""
    return MatchingEngine(load_default())


def new_session() -> ConversationSession:
    return ConversationSession(get_engine())


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def respond(utterance: str, session: ConversationSession) -> str:
    """Answer ``utterance`` using the session's recent user messages as context."""
    return session.engine.respond(utterance, session.recent_user_utterances)


__all__ = [
    "DEFAULT_RULES",
    "DEFLECTION_TEXT",
    "EMPTY_INPUT_TEXT",
    "WELCOME_TEXT",
    "ConversationSession",
    "FallbackResolver",
    "FallbackRule",
    "KnowledgeBase",
    "KnowledgeEntry",
    "Match",
    "MatchingEngine",
    "Message",
    "Reply",
    "ReplySource",
    "Role",
    "SessionState",
    "explain",
    "get_engine",
    "load_default",
    "new_session",
    "respond",
]
