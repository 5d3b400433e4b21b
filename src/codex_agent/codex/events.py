"""Event models for the ``codex exec --json`` stream."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from codex_agent.errors import CodexExecError


class Usage(BaseModel):
    model_config = ConfigDict(extra="allow")

    input_tokens: int = 0
    cached_input_tokens: int = 0
    output_tokens: int = 0


class ThreadError(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str


class ThreadEvent(BaseModel):
    """One line of the event stream.

    Known types: ``thread.started``, ``turn.started``, ``turn.completed``,
    ``turn.failed``, ``item.started``, ``item.updated``, ``item.completed``
    and ``error``. Items are kept as raw mappings; only ``type`` and ``text``
    of agent messages are read.
    """

    model_config = ConfigDict(extra="allow")

    type: str
    thread_id: str | None = None
    item: dict[str, Any] | None = None
    usage: Usage | None = None
    error: ThreadError | None = None
    message: str | None = None


def parse_event(line: str) -> ThreadEvent:
    """Parse one JSON line emitted by ``codex exec``."""

    try:
        return ThreadEvent.model_validate_json(line)
    except ValidationError as exc:
        raise CodexExecError(f"Failed to parse codex event: {line[:200]}") from exc
