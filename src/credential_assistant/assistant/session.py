from __future__ import annotations

import itertools
from collections import deque
from enum import Enum
from typing import Deque, List, Optional, Tuple

from loguru import logger

from .engine import MatchingEngine
from .io_types import Message, Reply, Role

WELCOME_TEXT = (
    "Hello! I'm your AI assistant for the Academic Credentials Platform – securing "
    "verifiable degrees on blockchain. Ask about signing up, issuing credentials, "
    "verification, SBTs, or troubleshooting. What's on your mind?"
)
HISTORY_SIZE = 5


class SessionState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"


class ConversationSession:
    """Message log and recent-utterance buffer for one conversation.

    ``submit`` records a user message and moves the session to ``pending``;
    ``resolve`` computes the answer and moves it back to ``idle``. While
    pending, further submissions are ignored, so each user message gets
    exactly one reply before the next one is accepted.
    """

    def __init__(self, engine: MatchingEngine, welcome: str = WELCOME_TEXT):
        self.engine = engine
        self.welcome = welcome
        self._messages: List[Message] = []
        self._recent: Deque[str] = deque(maxlen=HISTORY_SIZE)
        self._pending: Optional[Tuple[str, Tuple[str, ...]]] = None
        self.last_reply: Optional[Reply] = None
        # Ids keep counting across resets so they stay unique per session.
        self._ids = itertools.count(1)
        self.reset()

    # ------------------------------------------------------------------
    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def recent_user_utterances(self) -> Tuple[str, ...]:
        return tuple(self._recent)

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def state(self) -> SessionState:
        return SessionState.PENDING if self.pending else SessionState.IDLE

    # ------------------------------------------------------------------
    def _append(self, role: Role, content: str) -> Message:
        msg = Message(id=str(next(self._ids)), role=role, content=content)
        self._messages.append(msg)
        return msg

    def submit(self, content: str) -> Optional[Message]:
        """Record a user message; ignored when empty or while pending."""

        if self.pending or not content.strip():
            return None
        # The triggering utterance is the query, not part of its own history.
        history = tuple(self._recent)
        msg = self._append(Role.USER, content)
        self._recent.append(content)
        self._pending = (content, history)
        return msg

    def resolve(self) -> Optional[Message]:
        """Answer the pending user message and return to idle."""

        if self._pending is None:
            return None
        content, history = self._pending
        reply = self.engine.reply(content, history)
        msg = self._append(Role.ASSISTANT, reply.text)
        self.last_reply = reply
        self._pending = None
        logger.debug("Replied via {} ({} messages)", reply.source.value, len(self._messages))
        return msg

    def send(self, content: str) -> Optional[Message]:
        if self.submit(content) is None:
            return None
        return self.resolve()

    def reset(self) -> None:
        """Drop the conversation, leaving only a fresh welcome message."""

        self._messages = []
        self._recent.clear()
        self._pending = None
        self.last_reply = None
        self._append(Role.ASSISTANT, self.welcome)
