"""Run one Codex turn against a timeout and normalize the outcome."""

from __future__ import annotations

import asyncio
from typing import Protocol, TypeVar

from loguru import logger

from codex_agent.codex import CodexClient, ThreadOptions, Turn
from codex_agent.errors import TurnTimeoutError
from codex_agent.models import RunConfig, RunFailure, RunResult, RunSuccess
from codex_agent.types import ErrorCode

NO_RESPONSE = "(no response)"

T = TypeVar("T")


class Thread(Protocol):
    async def run(self, prompt: str) -> Turn: ...


class Client(Protocol):
    def start_thread(self, options: ThreadOptions | None = None) -> Thread: ...


def thread_options(config: RunConfig) -> ThreadOptions:
    return ThreadOptions(
        model=config.model,
        sandbox_mode=config.sandbox,
        reasoning_effort=config.reasoning,
        working_directory=config.cwd,
        network_access_enabled=config.network,
        skip_git_repo_check=True,
        additional_directories=config.add_dirs,
    )


async def _run_turn(client: Client, config: RunConfig) -> Turn:
    thread = client.start_thread(thread_options(config))
    return await thread.run(config.prompt)


async def race_timeout(task: asyncio.Future[T], timeout_seconds: float) -> T:
    """Wait for ``task`` unless the timer fires first.

    The losing task is cancelled and never awaited again; a result it would
    have produced later is dropped.
    """

    timer = asyncio.ensure_future(asyncio.sleep(timeout_seconds))
    try:
        done, _ = await asyncio.wait({task, timer}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        task.cancel()
        raise
    finally:
        timer.cancel()
    if task in done:
        return task.result()
    task.cancel()
    raise TurnTimeoutError(timeout_seconds)


async def run(config: RunConfig, *, client: Client | None = None) -> RunResult:
    """Open one session, submit the prompt, and race it against the timeout."""

    timeout_seconds = config.timeout_ms / 1000
    logger.info(
        "codex.turn.start model={} sandbox={} reasoning={} timeout_ms={}",
        config.model,
        config.sandbox,
        config.reasoning,
        config.timeout_ms,
    )
    try:
        session = client if client is not None else CodexClient()
        turn = await race_timeout(asyncio.ensure_future(_run_turn(session, config)), timeout_seconds)
    except TurnTimeoutError:
        # Only the local codex process is stopped; the remote turn may keep running.
        logger.warning("codex.turn.timeout timeout_ms={}", config.timeout_ms)
        return RunFailure(error=f"Codex timed out after {_format_seconds(timeout_seconds)}s", code=ErrorCode.TIMEOUT)
    except Exception as exc:
        logger.warning("codex.turn.error error={}", exc)
        return RunFailure(error=_error_message(exc), code=ErrorCode.SDK_ERROR)

    items = list(turn.items or [])
    logger.info("codex.turn.done items={}", len(items))
    response = turn.final_response if turn.final_response is not None else NO_RESPONSE
    return RunSuccess(response=response, items=items)


def _error_message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def _format_seconds(seconds: float) -> str:
    return str(int(seconds)) if seconds.is_integer() else repr(seconds)
