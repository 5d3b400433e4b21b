"""Application-level exception types for codex-agent."""

from __future__ import annotations


class CodexAgentError(Exception):
    """Base exception for codex-agent."""


class CodexExecError(CodexAgentError):
    """Raised when the Codex runtime fails to start or reports a failed turn."""


class TurnTimeoutError(CodexAgentError):
    """Raised when the turn has not settled before the timer fires."""
