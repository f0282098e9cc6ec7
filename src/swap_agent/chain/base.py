# src/swap_agent/chain/base.py
"""Interface to the delegated agent contract."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from swap_agent.signing.models import Authorization


@dataclass
class SwapReceipt:
    """Confirmed swap transaction.

    Attributes:
        transaction_hash: 0x-prefixed transaction hash.
        block_number: Block the transaction was mined in.
        gas_used: Gas consumed.
    """

    transaction_hash: str
    block_number: int | None = None
    gas_used: int | None = None


class ChainClient(ABC):
    """Calls the pipeline makes against the agent contract.

    Implementations raise ``ContractRevert`` when the contract rejects a call
    and ``ChainTransportError`` when the outcome is unknown.
    """

    @property
    @abstractmethod
    def verifying_contract(self) -> str:
        """Checksummed address of the agent contract."""

    @abstractmethod
    async def is_paused(self) -> bool:
        """Read the live pause flag."""

    @abstractmethod
    async def get_chain_id(self) -> int:
        """Chain id used in the typed-data domain."""

    @abstractmethod
    async def execute_swap(self, authorization: "Authorization", signature: str) -> SwapReceipt:
        """Send executeSwap and wait for confirmation."""

    async def get_onchain_nonce(self) -> int | None:
        """Highest nonce the contract has consumed, if it exposes one."""
        return None

    async def get_authorized_signer(self) -> str | None:
        """Address the contract accepts authorizations from, if readable."""
        return None

    async def get_user_funds(self) -> int | None:
        """Funding asset balance held by the contract, in smallest units."""
        return None
