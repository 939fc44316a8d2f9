"""Top-level package for credential_assistant.

Subpackages are loaded lazily on first attribute access so that importing
:mod:`credential_assistant` stays cheap (the HTTP layer pulls in FastAPI).
"""
from importlib import import_module
from types import ModuleType
from typing import TYPE_CHECKING

__all__ = ["assistant", "config", "monitoring"]


def __getattr__(name: str) -> ModuleType:
    """Dynamically import one of the known subpackages."""
    if name in __all__:
        return import_module(f".{name}", __name__)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


if TYPE_CHECKING:  # pragma: no cover - for type checkers only
    from . import assistant, config, monitoring  # noqa: F401
