from __future__ import annotations

import pytest

from codex_agent.models import ParseHelp, ParseInvalid, ParseOk, RunConfig
from codex_agent.parser import PROMPT_REQUIRED, TIMEOUT_INVALID, parse
from codex_agent.types import ReasoningEffort, SandboxMode


def _config(argv: list[str]) -> RunConfig:
    outcome = parse(argv)
    assert isinstance(outcome, ParseOk), outcome
    return outcome.config


def test_defaults() -> None:
    config = _config(["What", "does", "this", "repo", "do?"])

    assert config.prompt == "What does this repo do?"
    assert config.sandbox is SandboxMode.READ_ONLY
    assert config.model == "gpt-5.3-codex"
    assert config.reasoning is ReasoningEffort.MEDIUM
    assert config.cwd is None
    assert config.timeout_ms == 600_000
    assert config.network is False
    assert config.add_dirs == ()


def test_long_options() -> None:
    config = _config(
        [
            "--sandbox",
            "workspace-write",
            "--model",
            "o4-mini",
            "--reasoning",
            "high",
            "--cwd",
            "/repo",
            "--timeout",
            "5000",
            "--network",
            "--add-dir",
            "/data",
            "--add-dir",
            "/cache",
            "Fix the tests",
        ]
    )

    assert config == RunConfig(
        prompt="Fix the tests",
        sandbox=SandboxMode.WORKSPACE_WRITE,
        model="o4-mini",
        reasoning=ReasoningEffort.HIGH,
        cwd="/repo",
        timeout_ms=5000,
        network=True,
        add_dirs=("/data", "/cache"),
    )


def test_short_options_and_interspersed_prompt() -> None:
    config = _config(
        ["Fix", "-s", "workspace-write", "the", "-m", "m1", "-r", "low", "-C", "/w", "tests", "-t", "42", "-n"]
    )

    assert config.prompt == "Fix the tests"
    assert config.sandbox is SandboxMode.WORKSPACE_WRITE
    assert config.model == "m1"
    assert config.reasoning is ReasoningEffort.LOW
    assert config.cwd == "/w"
    assert config.timeout_ms == 42
    assert config.network is True


def test_prompt_is_trimmed() -> None:
    assert _config(["  padded  ", "prompt "]).prompt == "padded   prompt"


@pytest.mark.parametrize(
    "argv",
    [
        [],
        [""],
        ["   ", "\t"],
        ["--sandbox", "bogus"],
        ["--reasoning", "bogus", "--timeout", "abc", " "],
        ["--full", "--network"],
    ],
)
def test_empty_prompt_is_reported_first(argv: list[str]) -> None:
    assert parse(argv) == ParseInvalid(PROMPT_REQUIRED)


@pytest.mark.parametrize(
    "extra",
    [
        [],
        ["--sandbox", "read-only"],
        ["--sandbox", "read-only", "--network"],
        ["-s", "workspace-write"],
    ],
)
def test_full_access_wins(extra: list[str]) -> None:
    config = _config(["--full", *extra, "Install deps"])

    assert config.sandbox is SandboxMode.DANGER_FULL_ACCESS
    assert config.network is True


def test_full_access_overrides_invalid_sandbox() -> None:
    assert _config(["-f", "-s", "bogus", "task"]).sandbox is SandboxMode.DANGER_FULL_ACCESS


@pytest.mark.parametrize(
    ("effort", "expected"),
    [
        ("minimal", 120_000),
        ("low", 120_000),
        ("medium", 600_000),
        ("high", 1_200_000),
        ("xhigh", 2_400_000),
    ],
)
def test_timeout_defaults_follow_reasoning(effort: str, expected: int) -> None:
    assert _config(["-r", effort, "task"]).timeout_ms == expected


def test_explicit_timeout_overrides_default() -> None:
    assert _config(["-r", "xhigh", "-t", "300000", "task"]).timeout_ms == 300_000
    assert _config(["--timeout= 7 ", "task"]).timeout_ms == 7


@pytest.mark.parametrize(
    "value",
    ["abc", "-5", "3.5", "0", "000", "", "1e3", "5s", "٣", "1" + "0" * 400, "9" * 5000],
)
def test_invalid_timeout(value: str) -> None:
    assert parse(["task", "--timeout", value]) == ParseInvalid(TIMEOUT_INVALID)


def test_invalid_sandbox_names_value() -> None:
    assert parse(["task", "--sandbox", "yolo"]) == ParseInvalid("Invalid sandbox mode: yolo.")


def test_invalid_reasoning_names_value() -> None:
    assert parse(["task", "-r", "extreme"]) == ParseInvalid("Invalid reasoning effort: extreme.")


@pytest.mark.parametrize(
    "argv",
    [
        ["--help"],
        ["-h"],
        ["task", "--help"],
        ["-h", "--sandbox", "bogus", "--timeout", "abc"],
        ["--help", "--no-such-flag"],
    ],
)
def test_help_short_circuits(argv: list[str]) -> None:
    assert parse(argv) == ParseHelp()


def test_help_after_double_dash_is_prompt_text() -> None:
    assert _config(["--", "explain", "-h"]).prompt == "explain -h"


def test_unknown_flag_is_invalid() -> None:
    outcome = parse(["task", "--bogus"])

    assert isinstance(outcome, ParseInvalid)
    assert "--bogus" in outcome.reason


def test_missing_option_value_is_invalid() -> None:
    outcome = parse(["task", "--model"])

    assert isinstance(outcome, ParseInvalid)
    assert "--model" in outcome.reason
