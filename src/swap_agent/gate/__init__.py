"""Policy gate checked immediately before signing."""

from .models import GateDecision, GateResult, SkipReason
from .policy_gate import GateSettings, PolicyGate

__all__ = [
    "GateDecision",
    "GateResult",
    "GateSettings",
    "PolicyGate",
    "SkipReason",
]
