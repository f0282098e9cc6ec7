# src/swap_agent/errors.py
"""Exceptions raised by the signing and submission stages."""


class PipelineError(Exception):
    """Base class for pipeline stage failures."""

    stage: str = "pipeline"


class SigningError(PipelineError):
    """Authorization could not be signed.

    Attributes:
        nonce_consumed: True when the failure happened after a nonce was minted.
        nonce: The consumed nonce, if any.
    """

    stage = "signing"

    def __init__(self, message: str, nonce_consumed: bool = False, nonce: int | None = None):
        super().__init__(message)
        self.nonce_consumed = nonce_consumed
        self.nonce = nonce


class ContractRevert(PipelineError):
    """The delegated contract reverted the swap."""

    stage = "submitting"

    def __init__(self, reason: str, transaction_reference: str | None = None):
        super().__init__(reason)
        self.reason = reason
        self.transaction_reference = transaction_reference


class ChainTransportError(PipelineError):
    """RPC transport failed before an outcome was known."""

    stage = "submitting"
