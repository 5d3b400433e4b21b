"""Client for the Codex agent runtime, driven through ``codex exec --json``."""

from .client import CodexClient, CodexThread, ThreadOptions, Turn
from .events import ThreadEvent, Usage, parse_event

__all__ = [
    "CodexClient",
    "CodexThread",
    "ThreadEvent",
    "ThreadOptions",
    "Turn",
    "Usage",
    "parse_event",
]
