"""Default turn timeouts scaled by reasoning effort."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from codex_agent.types import ReasoningEffort

FALLBACK_TIMEOUT_MS = 120_000

TIMEOUT_BY_REASONING: Mapping[str, int] = MappingProxyType(
    {
        ReasoningEffort.MINIMAL: 120_000,  # 2 min
        ReasoningEffort.LOW: 120_000,  # 2 min
        ReasoningEffort.MEDIUM: 600_000,  # 10 min
        ReasoningEffort.HIGH: 1_200_000,  # 20 min
        ReasoningEffort.XHIGH: 2_400_000,  # 40 min
    }
)


def default_timeout(reasoning: str) -> int:
    """Return the default timeout in milliseconds for a reasoning effort."""

    return TIMEOUT_BY_REASONING.get(reasoning, FALLBACK_TIMEOUT_MS)
