"""Entry point: parse, run one turn, emit one JSON document."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence
from typing import NoReturn

from loguru import logger

from codex_agent.codex import CodexClient
from codex_agent.config import get_settings
from codex_agent.emitter import emit, emit_help, emit_invalid
from codex_agent.logging_utils import configure_logging
from codex_agent.models import ParseHelp, ParseInvalid, RunFailure, RunResult
from codex_agent.parser import parse
from codex_agent.runner import Client, run
from codex_agent.types import ErrorCode


def _execute(argv: Sequence[str], client: Client | None) -> RunResult:
    configure_logging()
    settings = get_settings()
    configure_logging(settings.log_level)

    outcome = parse(argv)
    if isinstance(outcome, ParseHelp):
        emit_help()
    if isinstance(outcome, ParseInvalid):
        emit_invalid(outcome.reason)

    session = client if client is not None else CodexClient(settings.codex_path)
    return asyncio.run(run(outcome.config, client=session))


def main(argv: Sequence[str] | None = None, *, client: Client | None = None) -> NoReturn:
    """Run the command line and exit with 0 on success or help, 1 otherwise."""

    args = list(sys.argv[1:] if argv is None else argv)
    try:
        result = _execute(args, client)
    except Exception as exc:
        logger.exception("codex_agent.unhandled")
        result = RunFailure(error=str(exc) or type(exc).__name__, code=ErrorCode.SDK_ERROR)
    emit(result)
