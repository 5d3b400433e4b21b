"""Process-level settings for codex-agent.

These only cover plumbing around the run (which ``codex`` binary to spawn and
how loudly to log); the run itself is configured from the command line.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_prefix="CODEX_AGENT_", case_sensitive=False, extra="ignore")

    codex_path: str | None = Field(default=None, description="Explicit path to the codex executable")
    log_level: str = Field(default="WARNING", description="Log level for stderr diagnostics")


def get_settings() -> Settings:
    """Load settings from the environment."""

    return Settings()
