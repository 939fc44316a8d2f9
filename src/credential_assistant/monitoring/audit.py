from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Protocol

from loguru import logger


@dataclass(frozen=True)
class ActivityRecord:
    action: str
    actor: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data


class ActivityLog(Protocol):
    def append(self, record: ActivityRecord) -> None: ...


class JsonlActivityLog:
    """Append activity records to ``<base_dir>/activity.jsonl``.

    The chat front-ends record one ``chat.message`` per exchange and a
    ``chat.reset`` when a conversation is cleared. The matching engine never
    writes here.
    """

    def __init__(self, base_dir: str | Path = "reports/activity") -> None:
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.path = self.base_dir / "activity.jsonl"

    def append(self, record: ActivityRecord) -> None:
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record.to_dict(), ensure_ascii=False) + "\n")
        logger.debug("Logged {} to {}", record.action, self.path)

    def read(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        with self.path.open(encoding="utf-8") as fh:
            return [json.loads(line) for line in fh if line.strip()]


class NullActivityLog:
    """Activity log used when auditing is disabled."""

    def append(self, record: ActivityRecord) -> None:
        return None


def get_activity_log() -> ActivityLog:
    """Return the configured activity log (``ASSISTANT_AUDIT_DIR``)."""
    from .. import config

    if config.AUDIT_DIR:
        return JsonlActivityLog(config.AUDIT_DIR)
    return NullActivityLog()


__all__ = [
    "ActivityLog",
    "ActivityRecord",
    "JsonlActivityLog",
    "NullActivityLog",
    "get_activity_log",
]
