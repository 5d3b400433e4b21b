"""Run configuration, parse outcomes and normalized run results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

from codex_agent.types import ErrorCode, ReasoningEffort, SandboxMode


class RunConfig(BaseModel):
    """Validated intent for one Codex turn."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    sandbox: SandboxMode
    model: str
    reasoning: ReasoningEffort
    cwd: str | None = None
    timeout_ms: int = Field(gt=0)
    network: bool = False
    add_dirs: tuple[str, ...] = ()

    @field_validator("prompt")
    @classmethod
    def _prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must not be empty")
        return value


@dataclass(frozen=True)
class ParseOk:
    config: RunConfig


@dataclass(frozen=True)
class ParseHelp:
    pass


@dataclass(frozen=True)
class ParseInvalid:
    reason: str


ParseOutcome: TypeAlias = ParseOk | ParseHelp | ParseInvalid


class RunSuccess(BaseModel):
    """Turn settled before the timer."""

    model_config = ConfigDict(frozen=True)

    success: Literal[True] = True
    response: str
    items: list[Any] = Field(default_factory=list)


class RunFailure(BaseModel):
    """Validation, timeout or runtime failure."""

    model_config = ConfigDict(frozen=True)

    success: Literal[False] = False
    error: str
    code: ErrorCode


RunResult: TypeAlias = RunSuccess | RunFailure
