"""Codex agent CLI bootstrap."""

from __future__ import annotations

from codex_agent.cli import main

if __name__ == "__main__":
    main()
