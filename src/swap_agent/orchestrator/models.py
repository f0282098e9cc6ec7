# src/swap_agent/orchestrator/models.py
"""Data models for the pipeline orchestrator."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from swap_agent.analyzers.sentiment_result import AggregateSentiment
from swap_agent.execution.models import SubmissionResult
from swap_agent.gate.models import SkipReason
from swap_agent.models.symbol import Symbol
from swap_agent.planning.models import TradePlan
from swap_agent.signing.models import Authorization


class PipelineState(Enum):
    """Stage of a single pipeline run."""

    PENDING = "pending"
    RESOLVING = "resolving"
    AGGREGATING = "aggregating"
    SYNTHESIZING = "synthesizing"
    GATING = "gating"
    SIGNING = "signing"
    SUBMITTING = "submitting"
    DONE = "done"
    SKIPPED = "skipped"
    ERRORED = "errored"

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineState.DONE, PipelineState.SKIPPED, PipelineState.ERRORED)


ALLOWED_TRANSITIONS: dict[PipelineState, frozenset[PipelineState]] = {
    PipelineState.PENDING: frozenset({PipelineState.RESOLVING}),
    PipelineState.RESOLVING: frozenset({PipelineState.AGGREGATING}),
    PipelineState.AGGREGATING: frozenset({PipelineState.SYNTHESIZING}),
    PipelineState.SYNTHESIZING: frozenset({PipelineState.GATING}),
    PipelineState.GATING: frozenset({PipelineState.SIGNING, PipelineState.SKIPPED, PipelineState.ERRORED}),
    PipelineState.SIGNING: frozenset({PipelineState.SUBMITTING, PipelineState.ERRORED}),
    PipelineState.SUBMITTING: frozenset({PipelineState.DONE, PipelineState.SKIPPED, PipelineState.ERRORED}),
    PipelineState.DONE: frozenset(),
    PipelineState.SKIPPED: frozenset(),
    PipelineState.ERRORED: frozenset(),
}


class PipelineOutcome(str, Enum):
    """Outcome reported to the host."""

    EXECUTED = "executed"
    SKIPPED = "skipped"
    REJECTED = "rejected"
    ERRORED = "errored"


@dataclass
class PipelineResult:
    """Result of processing one trading request.

    Attributes:
        outcome: What happened, from the host's point of view.
        state: Terminal pipeline state.
        message: Human-readable summary.
        symbol: Resolved symbol.
        sentiment: Aggregate sentiment, if aggregation ran.
        plan: Trade plan, if synthesis ran.
        skip_reason: Gate skip reason, if skipped at the gate.
        authorization: Signed fields, if signing completed.
        transaction_reference: Transaction hash, if executed.
        error_detail: Stage-level error or revert reason.
        error_stage: Stage that failed, if any.
        nonce_consumed: Whether a nonce was burned by this run.
        submission: Raw submission result, if submission ran.
        timestamp: When the run finished.
    """

    outcome: PipelineOutcome
    state: PipelineState
    message: str
    symbol: Symbol | None = None
    sentiment: AggregateSentiment | None = None
    plan: TradePlan | None = None
    skip_reason: SkipReason | None = None
    authorization: Authorization | None = None
    transaction_reference: str | None = None
    error_detail: str | None = None
    error_stage: str | None = None
    nonce_consumed: bool = False
    submission: SubmissionResult | None = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def success(self) -> bool:
        """True for executed trades and clean no-trade outcomes."""
        return self.outcome in (PipelineOutcome.EXECUTED, PipelineOutcome.SKIPPED)
