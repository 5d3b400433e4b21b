"""Codex agent - forward one task to a Codex session, report JSON."""

from .parser import parse
from .runner import run

__version__ = "0.1.0"

__all__ = ["parse", "run"]
