"""Closed value sets shared by the parser, the runner and the Codex client."""

from __future__ import annotations

from enum import StrEnum


class SandboxMode(StrEnum):
    READ_ONLY = "read-only"
    WORKSPACE_WRITE = "workspace-write"
    DANGER_FULL_ACCESS = "danger-full-access"


class ReasoningEffort(StrEnum):
    MINIMAL = "minimal"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    XHIGH = "xhigh"


class ErrorCode(StrEnum):
    INVALID_ARGS = "INVALID_ARGS"
    SDK_ERROR = "SDK_ERROR"
    TIMEOUT = "TIMEOUT"


# CLI input is untyped text; it is checked against these before an enum is built.
SANDBOX_MODES: tuple[str, ...] = tuple(mode.value for mode in SandboxMode)
REASONING_EFFORTS: tuple[str, ...] = tuple(effort.value for effort in ReasoningEffort)

DEFAULT_SANDBOX = SandboxMode.READ_ONLY
DEFAULT_MODEL = "gpt-5.3-codex"
DEFAULT_REASONING = ReasoningEffort.MEDIUM
