from .audit import (
    ActivityLog,
    ActivityRecord,
    JsonlActivityLog,
    NullActivityLog,
    get_activity_log,
)

__all__ = [
    "ActivityLog",
    "ActivityRecord",
    "JsonlActivityLog",
    "NullActivityLog",
    "get_activity_log",
]
