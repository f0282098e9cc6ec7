# src/swap_agent/gate/models.py
"""Data models for the policy gate."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class GateDecision(str, Enum):
    PROCEED = "proceed"
    SKIP = "skip"


class SkipReason(str, Enum):
    """Why the gate refused to let a plan through."""

    HOLD = "hold"
    PAUSED = "paused"
    PAUSE_STATE_UNAVAILABLE = "pause_state_unavailable"


@dataclass
class GateResult:
    """Outcome of a gate check.

    Attributes:
        decision: PROCEED or SKIP.
        reason: Skip reason, None when proceeding.
        timestamp: When the check ran.
        data: Observed values used in the check.
    """

    decision: GateDecision
    reason: SkipReason | None = None
    timestamp: datetime = field(default_factory=datetime.now)
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def should_proceed(self) -> bool:
        return self.decision == GateDecision.PROCEED

    @classmethod
    def proceed(cls, data: dict[str, Any] | None = None) -> "GateResult":
        return cls(decision=GateDecision.PROCEED, data=data or {})

    @classmethod
    def skip(cls, reason: SkipReason, data: dict[str, Any] | None = None) -> "GateResult":
        return cls(decision=GateDecision.SKIP, reason=reason, data=data or {})
