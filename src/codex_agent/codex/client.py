"""Codex threads backed by the ``codex`` command-line runtime."""

from __future__ import annotations

import asyncio
import json
import shutil
from collections.abc import AsyncIterator, Sequence
from contextlib import aclosing
from dataclasses import dataclass, field
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict

from codex_agent.codex.events import ThreadEvent, Usage, parse_event
from codex_agent.errors import CodexExecError
from codex_agent.types import ReasoningEffort, SandboxMode

DEFAULT_EXECUTABLE = "codex"
STREAM_LIMIT_BYTES = 16 * 1024 * 1024
STDERR_TAIL_CHARS = 2_000
TERMINATE_GRACE_SECONDS = 2.0


class ThreadOptions(BaseModel):
    """Per-thread settings passed to ``codex exec``."""

    model_config = ConfigDict(frozen=True)

    model: str | None = None
    sandbox_mode: SandboxMode | None = None
    reasoning_effort: ReasoningEffort | None = None
    working_directory: str | None = None
    network_access_enabled: bool | None = None
    skip_git_repo_check: bool = False
    additional_directories: tuple[str, ...] = ()


@dataclass(frozen=True)
class Turn:
    """Result of one completed turn."""

    final_response: str | None
    items: list[dict[str, Any]] = field(default_factory=list)
    usage: Usage | None = None


def _toml_value(value: str | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return json.dumps(value)


class CodexExec:
    """Spawn ``codex exec`` and stream its JSON events."""

    def __init__(self, executable: str | None = None) -> None:
        self.executable = executable or shutil.which(DEFAULT_EXECUTABLE) or DEFAULT_EXECUTABLE

    async def events(self, args: Sequence[str], prompt: str) -> AsyncIterator[ThreadEvent]:
        logger.debug("codex.exec.spawn executable={} args={}", self.executable, list(args))
        try:
            process = await asyncio.create_subprocess_exec(
                self.executable,
                *args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                limit=STREAM_LIMIT_BYTES,
            )
        except OSError as exc:
            raise CodexExecError(f"Failed to start codex ({self.executable}): {exc}") from exc

        assert process.stdin is not None and process.stdout is not None and process.stderr is not None
        stderr_task = asyncio.ensure_future(process.stderr.read())
        try:
            try:
                process.stdin.write(prompt.encode("utf-8"))
                await process.stdin.drain()
                process.stdin.close()
            except (BrokenPipeError, ConnectionResetError):
                logger.debug("codex.exec.stdin_closed pid={}", process.pid)

            async for raw in process.stdout:
                line = raw.decode("utf-8", errors="replace").strip()
                if line:
                    yield parse_event(line)

            returncode = await process.wait()
            stderr_text = (await stderr_task).decode("utf-8", errors="replace").strip()
            if returncode != 0:
                detail = stderr_text[-STDERR_TAIL_CHARS:] or "(no stderr)"
                raise CodexExecError(f"Codex exec exited with code {returncode}: {detail}")
        finally:
            if process.returncode is None:
                await _terminate(process)
            stderr_task.cancel()


async def _terminate(process: asyncio.subprocess.Process) -> None:
    logger.debug("codex.exec.terminate pid={}", process.pid)
    try:
        process.terminate()
    except ProcessLookupError:
        return
    try:
        await asyncio.wait_for(process.wait(), timeout=TERMINATE_GRACE_SECONDS)
    except TimeoutError:
        try:
            process.kill()
        except ProcessLookupError:
            return
        await process.wait()


class CodexThread:
    """One conversation with the Codex runtime."""

    def __init__(self, exec_: CodexExec, options: ThreadOptions) -> None:
        self._exec = exec_
        self._options = options
        self._id: str | None = None

    @property
    def id(self) -> str | None:
        """Thread id reported by the runtime, known once a turn has started."""
        return self._id

    def build_args(self) -> list[str]:
        options = self._options
        args = ["exec", "--json"]
        if options.model:
            args.extend(["--model", options.model])
        if options.sandbox_mode is not None:
            args.extend(["--sandbox", str(options.sandbox_mode)])
        if options.working_directory:
            args.extend(["--cd", options.working_directory])
        for directory in options.additional_directories:
            args.extend(["--add-dir", directory])
        if options.skip_git_repo_check:
            args.append("--skip-git-repo-check")
        if options.reasoning_effort is not None:
            args.extend(["--config", f"model_reasoning_effort={_toml_value(str(options.reasoning_effort))}"])
        if options.network_access_enabled is not None:
            args.extend(
                [
                    "--config",
                    f"sandbox_workspace_write.network_access={_toml_value(options.network_access_enabled)}",
                ]
            )
        return args

    async def run(self, prompt: str) -> Turn:
        """Submit one prompt and wait for the turn to finish."""

        items: list[dict[str, Any]] = []
        final_response: str | None = None
        usage: Usage | None = None

        async with aclosing(self._exec.events(self.build_args(), prompt)) as events:
            async for event in events:
                if event.type == "thread.started":
                    self._id = event.thread_id
                    logger.info("codex.thread.started thread_id={}", self._id)
                elif event.type == "item.completed" and event.item is not None:
                    items.append(event.item)
                    if event.item.get("type") == "agent_message":
                        final_response = event.item.get("text")
                elif event.type == "turn.completed":
                    usage = event.usage
                elif event.type == "turn.failed":
                    raise CodexExecError(event.error.message if event.error else "Codex turn failed")
                elif event.type == "error":
                    raise CodexExecError(event.message or "Codex reported an error")

        return Turn(final_response=final_response, items=items, usage=usage)


class CodexClient:
    """Entry point to the Codex runtime."""

    def __init__(self, codex_path: str | None = None) -> None:
        self._exec = CodexExec(codex_path)

    def start_thread(self, options: ThreadOptions | None = None) -> CodexThread:
        return CodexThread(self._exec, options or ThreadOptions())
