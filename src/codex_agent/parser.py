"""Command-line parsing into a validated run configuration."""

from __future__ import annotations

import re
from collections.abc import Sequence

import typer

from codex_agent.models import ParseHelp, ParseInvalid, ParseOk, ParseOutcome, RunConfig
from codex_agent.timeouts import default_timeout
from codex_agent.types import (
    DEFAULT_MODEL,
    DEFAULT_REASONING,
    DEFAULT_SANDBOX,
    REASONING_EFFORTS,
    SANDBOX_MODES,
    ReasoningEffort,
    SandboxMode,
)

PROG_NAME = "codex-agent"
HELP_FLAGS = ("-h", "--help")
_TIMEOUT_PATTERN = re.compile(r"\d+", re.ASCII)

PROMPT_REQUIRED = "A prompt is required."
TIMEOUT_INVALID = "--timeout must be a positive integer in milliseconds."

HELP_TEXT = f"""Usage: {PROG_NAME} [options] "prompt"

Options:
  -s, --sandbox <mode>     Sandbox mode: read-only (default), workspace-write, danger-full-access
  -m, --model <name>       Model string passed directly to Codex (default: {DEFAULT_MODEL})
  -r, --reasoning <level>  Reasoning effort: minimal, low, medium (default), high, xhigh
  -C, --cwd <dir>          Working directory for Codex
  -t, --timeout <ms>       Positive timeout in ms (default: 2min/2min/10min/20min/40min by reasoning)
  -d, --add-dir <path>     Additional writable directory (repeatable, workspace-write only)
  -n, --network            Enable network access (for package installs, web requests, etc.)
  -f, --full               Full access mode: danger-full-access sandbox + network enabled
  -h, --help               Show this help

Output: one JSON document on stdout
  {{"success": true, "response": "...", "items": [...]}}
  {{"success": false, "error": "...", "code": "INVALID_ARGS" | "SDK_ERROR" | "TIMEOUT"}}

Examples:
  {PROG_NAME} "What does this repo do?"
  {PROG_NAME} --sandbox workspace-write "Fix the failing tests"
  {PROG_NAME} --cwd /path/to/repo "Analyze architecture"
  {PROG_NAME} -m {DEFAULT_MODEL} -r high "Review for security issues"
  {PROG_NAME} -r xhigh "Deep analysis of edge cases"
  {PROG_NAME} --full "Install deps and implement feature"
  {PROG_NAME} --sandbox workspace-write --cwd /repo --add-dir /data "Cross-dir writes"
""".rstrip()

app = typer.Typer(name=PROG_NAME, add_completion=False)


# Help is an ordinary flag so that it reaches the callback as a value.
@app.command(context_settings={"help_option_names": []})
def options(
    prompt: list[str] | None = typer.Argument(None, help="Task for Codex"),  # noqa: B008
    sandbox: str | None = typer.Option(None, "--sandbox", "-s"),
    model: str | None = typer.Option(None, "--model", "-m"),
    reasoning: str | None = typer.Option(None, "--reasoning", "-r"),
    cwd: str | None = typer.Option(None, "--cwd", "-C"),
    timeout: str | None = typer.Option(None, "--timeout", "-t"),
    add_dir: list[str] | None = typer.Option(None, "--add-dir", "-d"),  # noqa: B008
    network: bool = typer.Option(False, "--network", "-n"),
    full: bool = typer.Option(False, "--full", "-f"),
    show_help: bool = typer.Option(False, "--help", "-h"),
) -> ParseOutcome:
    """Resolve raw option values into a parse outcome."""

    if show_help:
        return ParseHelp()

    text = " ".join(prompt or []).strip()
    if not text:
        return ParseInvalid(PROMPT_REQUIRED)

    sandbox_value = SandboxMode.DANGER_FULL_ACCESS.value if full else (sandbox or DEFAULT_SANDBOX.value)
    network_value = full or network
    model_value = model or DEFAULT_MODEL

    reasoning_value = reasoning or DEFAULT_REASONING.value
    if reasoning_value not in REASONING_EFFORTS:
        return ParseInvalid(f"Invalid reasoning effort: {reasoning_value}.")

    timeout_ms = default_timeout(reasoning_value)
    if timeout is not None:
        parsed_timeout = _parse_timeout(timeout.strip())
        if parsed_timeout is None:
            return ParseInvalid(TIMEOUT_INVALID)
        timeout_ms = parsed_timeout

    if sandbox_value not in SANDBOX_MODES:
        return ParseInvalid(f"Invalid sandbox mode: {sandbox_value}.")

    return ParseOk(
        RunConfig(
            prompt=text,
            sandbox=SandboxMode(sandbox_value),
            model=model_value,
            reasoning=ReasoningEffort(reasoning_value),
            cwd=cwd,
            timeout_ms=timeout_ms,
            network=network_value,
            add_dirs=tuple(add_dir or ()),
        )
    )


def _parse_timeout(text: str) -> int | None:
    if not _TIMEOUT_PATTERN.fullmatch(text):
        return None
    try:
        value = int(text)
        # The runner works in float seconds.
        float(value)
    except (ValueError, OverflowError):
        return None
    return value if value > 0 else None


def _requests_help(argv: Sequence[str]) -> bool:
    for token in argv:
        if token == "--":
            return False
        if token in HELP_FLAGS:
            return True
    return False


def parse(argv: Sequence[str]) -> ParseOutcome:
    """Parse command-line tokens (without the program name)."""

    command = typer.main.get_command(app)
    try:
        return command.main(args=list(argv), prog_name=PROG_NAME, standalone_mode=False)
    except typer.TyperException as exc:
        if _requests_help(argv):
            return ParseHelp()
        return ParseInvalid(str(exc))
