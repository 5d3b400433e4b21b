"""Write the single result document to stdout and leave the process."""

from __future__ import annotations

from typing import NoReturn

import typer

from codex_agent.models import RunFailure, RunResult
from codex_agent.parser import HELP_TEXT
from codex_agent.types import ErrorCode


def exit_code(result: RunResult) -> int:
    return 0 if result.success else 1


def render(result: RunResult) -> str:
    return result.model_dump_json(indent=2)


def emit(result: RunResult) -> NoReturn:
    """Print ``result`` as pretty JSON and exit 0 on success, 1 otherwise."""

    typer.echo(render(result))
    raise SystemExit(exit_code(result))


def emit_invalid(reason: str) -> NoReturn:
    emit(RunFailure(error=f"{reason}\n\n{HELP_TEXT}", code=ErrorCode.INVALID_ARGS))


def emit_help() -> NoReturn:
    typer.echo(HELP_TEXT)
    raise SystemExit(0)
