# src/swap_agent/execution/models.py
"""Data models for swap submission."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class SubmissionOutcome(str, Enum):
    """Terminal result of a submission."""

    EXECUTED = "executed"
    REJECTED = "rejected"  # contract reverted
    FAILED = "failed"  # transport/timeout, on-chain state unknown


@dataclass
class SubmissionResult:
    """Result of submitting a signed authorization.

    Attributes:
        outcome: EXECUTED, REJECTED or FAILED.
        nonce: Nonce of the submitted authorization.
        transaction_reference: Transaction hash, present iff executed.
        reverted_transaction: Hash of a transaction mined with a revert, if any.
        error_detail: Revert reason (rejected) or transport error (failed).
        timestamp: When the submission finished.
    """

    outcome: SubmissionOutcome
    nonce: int
    transaction_reference: str | None = None
    reverted_transaction: str | None = None
    error_detail: str | None = None
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if (self.outcome == SubmissionOutcome.EXECUTED) != (self.transaction_reference is not None):
            raise ValueError("transaction_reference must be set iff outcome is executed")

    @property
    def success(self) -> bool:
        return self.outcome == SubmissionOutcome.EXECUTED
