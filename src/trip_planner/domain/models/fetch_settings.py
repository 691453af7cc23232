"""Fetch settings domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchSettings:
    """How the multi-window trip search talks to the journey planner."""

    batch_size: int = 3
    batch_pause_seconds: float = 0.1
    result_count: int = 150
    fallback_result_count: int = 300
