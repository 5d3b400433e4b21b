from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import pytest

from codex_agent import logging_utils
from codex_agent.codex import ThreadOptions
from codex_agent.models import RunConfig
from codex_agent.types import ReasoningEffort, SandboxMode


@pytest.fixture(autouse=True)
def _fresh_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    # loguru keeps the stderr object it was given; rebind it to the test's capture.
    monkeypatch.setattr(logging_utils, "_CONFIGURED_LEVEL", None)


class StubThread:
    def __init__(
        self,
        turn: Any = None,
        *,
        delay: float = 0.0,
        error: BaseException | None = None,
    ) -> None:
        self.turn = turn
        self.delay = delay
        self.error = error
        self.prompts: list[str] = []
        self.cancelled = False

    async def run(self, prompt: str) -> Any:
        self.prompts.append(prompt)
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.error is not None:
            raise self.error
        return self.turn


class StubClient:
    def __init__(self, thread: StubThread, *, open_error: BaseException | None = None) -> None:
        self.thread = thread
        self.open_error = open_error
        self.options: list[ThreadOptions | None] = []

    def start_thread(self, options: ThreadOptions | None = None) -> StubThread:
        self.options.append(options)
        if self.open_error is not None:
            raise self.open_error
        return self.thread


@pytest.fixture
def make_config() -> Callable[..., RunConfig]:
    def _make(**overrides: Any) -> RunConfig:
        values: dict[str, Any] = {
            "prompt": "Fix the tests",
            "sandbox": SandboxMode.READ_ONLY,
            "model": "gpt-5.3-codex",
            "reasoning": ReasoningEffort.MEDIUM,
            "timeout_ms": 5_000,
        }
        values.update(overrides)
        return RunConfig(**values)

    return _make
