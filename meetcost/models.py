"""Data models for meetcost.

SessionState enum, CostResult and MeetingSession — the typed structures that
flow through pricing → timer → display.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class SessionState(str, Enum):
    """Live timer states."""

    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class CostResult:
    """Cost metrics for one meeting calculation.

    Produced fresh by every calculation call and never mutated.
    ``cost_per_person`` is what each attendee's time costs, not a share of
    ``total_cost``.
    """

    total_cost: float = 0.0
    duration_hours: float = 0.0
    cost_per_minute: float = 0.0
    cost_per_person: float = 0.0

    @classmethod
    def zero(cls) -> CostResult:
        return cls()

    @property
    def is_zero(self) -> bool:
        return (
            self.total_cost == 0
            and self.duration_hours == 0
            and self.cost_per_minute == 0
            and self.cost_per_person == 0
        )

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "total_cost": self.total_cost,
            "duration_hours": self.duration_hours,
            "cost_per_minute": self.cost_per_minute,
            "cost_per_person": self.cost_per_person,
        }


@dataclass
class MeetingSession:
    """Live-tracking state owned by the timer controller."""

    start_time: Optional[datetime] = None
    is_running: bool = False

    @property
    def state(self) -> SessionState:
        return SessionState.RUNNING if self.is_running else SessionState.IDLE
