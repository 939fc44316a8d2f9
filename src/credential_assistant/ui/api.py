from __future__ import annotations

"""FastAPI application exposing chat sessions over HTTP."""

import threading
import uuid
from collections import OrderedDict
from datetime import datetime
from typing import Dict, List, Tuple

from fastapi import FastAPI, HTTPException
from loguru import logger
from pydantic import BaseModel

from credential_assistant import config
from credential_assistant.assistant import ConversationSession, Message, new_session
from credential_assistant.monitoring import ActivityRecord, get_activity_log

app = FastAPI(title="Credentials Assistant")

# Least recently used first; evicted past config.MAX_SESSIONS.
_sessions: OrderedDict[str, Tuple[ConversationSession, threading.Lock]] = OrderedDict()
_registry_lock = threading.Lock()
_activity = get_activity_log()


class MessageIn(BaseModel):
    """Request body for posting a user message."""

    content: str


class MessageOut(BaseModel):
    id: str
    role: str
    content: str
    timestamp: datetime

    @classmethod
    def from_message(cls, msg: Message) -> "MessageOut":
        return cls(id=msg.id, role=msg.role.value, content=msg.content, timestamp=msg.timestamp)


class SessionOut(BaseModel):
    session_id: str
    messages: List[MessageOut]


def _get(session_id: str) -> Tuple[ConversationSession, threading.Lock]:
    with _registry_lock:
        try:
            _sessions.move_to_end(session_id)
            return _sessions[session_id]
        except KeyError:
            raise HTTPException(status_code=404, detail="unknown session") from None


def _dump(session_id: str, session: ConversationSession) -> SessionOut:
    return SessionOut(
        session_id=session_id,
        messages=[MessageOut.from_message(m) for m in session.messages],
    )


@app.post("/sessions")
def create_session() -> SessionOut:
    """Start a conversation seeded with the welcome message."""

    session_id = uuid.uuid4().hex
    session = new_session()
    with _registry_lock:
        _sessions[session_id] = (session, threading.Lock())
        while len(_sessions) > max(config.MAX_SESSIONS, 1):
            evicted, _ = _sessions.popitem(last=False)
            logger.debug("Evicted idle session {}", evicted)
    return _dump(session_id, session)


@app.delete("/sessions/{session_id}")
def delete_session(session_id: str) -> Dict[str, str]:
    """Forget a conversation."""

    with _registry_lock:
        if _sessions.pop(session_id, None) is None:
            raise HTTPException(status_code=404, detail="unknown session")
    return {"session_id": session_id, "status": "deleted"}


@app.get("/sessions/{session_id}/messages")
def list_messages(session_id: str) -> SessionOut:
    session, lock = _get(session_id)
    with lock:
        return _dump(session_id, session)


@app.post("/sessions/{session_id}/messages")
def post_message(session_id: str, body: MessageIn) -> MessageOut:
    """Submit a user message and return the assistant's reply."""

    session, lock = _get(session_id)
    # One exchange at a time per session.
    with lock:
        reply = session.send(body.content)
        if reply is None:
            raise HTTPException(status_code=400, detail="empty message")
        source = session.last_reply.source.value if session.last_reply else None
    _activity.append(
        ActivityRecord(
            action="chat.message",
            actor=session_id,
            metadata={"source": source},
        )
    )
    return MessageOut.from_message(reply)


@app.post("/sessions/{session_id}/reset")
def reset_session(session_id: str) -> SessionOut:
    session, lock = _get(session_id)
    with lock:
        session.reset()
        out = _dump(session_id, session)
    _activity.append(ActivityRecord(action="chat.reset", actor=session_id))
    return out
