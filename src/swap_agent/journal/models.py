# src/swap_agent/journal/models.py
"""Data models for the authorization journal."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class AuthorizationStatus(str, Enum):
    """Lifecycle of a consumed nonce.

    Every nonce that was minted ends in exactly one terminal status. Nonces
    that never reach EXECUTED stay burned; they are not reissued or voided.
    """

    SIGNED = "signed"
    EXECUTED = "executed"
    REJECTED = "rejected"
    FAILED = "failed"
    SIGN_FAILED = "sign_failed"
    SPENT_UNSUBMITTED = "spent_unsubmitted"

    @property
    def is_terminal(self) -> bool:
        return self != AuthorizationStatus.SIGNED

    @property
    def needs_reconciliation(self) -> bool:
        """On-chain state unknown; an operator has to check manually."""
        return self in (
            AuthorizationStatus.SIGNED,
            AuthorizationStatus.FAILED,
            AuthorizationStatus.SPENT_UNSUBMITTED,
        )


@dataclass
class AuthorizationRecord:
    """One consumed nonce.

    Attributes:
        nonce: The consumed nonce.
        status: Current lifecycle status.
        signer: Signing address.
        created_at: When the nonce was recorded.
        updated_at: Last status change.
        plan: Trade plan snapshot.
        authorization: Signed TradeData fields, when signing completed.
        digest: Signed typed-data digest.
        transaction_reference: Transaction hash, when known.
        detail: Revert reason or error text.
    """

    nonce: int
    status: AuthorizationStatus
    signer: str
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    plan: dict[str, Any] = field(default_factory=dict)
    authorization: dict[str, Any] | None = None
    digest: str | None = None
    transaction_reference: str | None = None
    detail: str | None = None
