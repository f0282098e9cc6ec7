# src/swap_agent/execution/execution_submitter.py
"""Sends signed authorizations to the agent contract."""
import asyncio
import logging

from pydantic import BaseModel, Field

from swap_agent.chain.base import ChainClient
from swap_agent.errors import ContractRevert
from swap_agent.execution.models import SubmissionOutcome, SubmissionResult
from swap_agent.signing.models import SignedAuthorization


logger = logging.getLogger(__name__)


class ExecutionSettings(BaseModel):
    """Settings for ExecutionSubmitter."""

    submit_timeout_seconds: float = Field(default=180.0, gt=0)


class ExecutionSubmitter:
    """Submits exactly once and classifies the outcome.

    There is no retry: a consumed nonce can only be reused by re-signing,
    which is a new request.
    """

    def __init__(self, chain_client: ChainClient, settings: ExecutionSettings | None = None):
        self._chain = chain_client
        self._settings = settings or ExecutionSettings()

    async def submit(self, signed: SignedAuthorization) -> SubmissionResult:
        """Submit a signed authorization.

        Args:
            signed: Authorization plus signature from the signer.

        Returns:
            SubmissionResult. Never raises for chain-side failures.
        """
        nonce = signed.nonce
        try:
            receipt = await asyncio.wait_for(
                self._chain.execute_swap(signed.authorization, signed.signature.signature),
                timeout=self._settings.submit_timeout_seconds,
            )
        except ContractRevert as e:
            logger.error(f"Swap nonce={nonce} rejected by contract: {e.reason}")
            return SubmissionResult(
                outcome=SubmissionOutcome.REJECTED,
                nonce=nonce,
                reverted_transaction=e.transaction_reference,
                error_detail=e.reason,
            )
        except asyncio.TimeoutError:
            detail = f"No confirmation within {self._settings.submit_timeout_seconds}s"
            logger.error(f"Swap nonce={nonce} outcome unknown: {detail}")
            return SubmissionResult(outcome=SubmissionOutcome.FAILED, nonce=nonce, error_detail=detail)
        except Exception as e:
            logger.error(f"Swap nonce={nonce} transport failure: {e!r}")
            return SubmissionResult(outcome=SubmissionOutcome.FAILED, nonce=nonce, error_detail=str(e) or repr(e))

        logger.info(f"Swap nonce={nonce} executed in {receipt.transaction_hash}")
        return SubmissionResult(
            outcome=SubmissionOutcome.EXECUTED,
            nonce=nonce,
            transaction_reference=receipt.transaction_hash,
        )
