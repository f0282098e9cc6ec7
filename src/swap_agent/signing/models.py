# src/swap_agent/signing/models.py
"""Data models for signed swap authorizations."""
from dataclasses import dataclass, field
from typing import Any

from swap_agent.planning.models import TradePlan


@dataclass(frozen=True)
class Authorization:
    """The TradeData struct the agent contract verifies.

    Attributes:
        token_out: Checksummed address of the asset received.
        amount_in: Input amount in the funding asset's smallest unit.
        min_amount_out: Minimum accepted output, always below amount_in.
        deadline: Unix timestamp after which the contract rejects the swap.
        nonce: Strictly increasing per-signer nonce.
    """

    token_out: str
    amount_in: int
    min_amount_out: int
    deadline: int
    nonce: int

    def to_message(self) -> dict[str, Any]:
        """Typed-data message, keys in wire order."""
        return {
            "tokenOut": self.token_out,
            "amountIn": self.amount_in,
            "minAmountOut": self.min_amount_out,
            "deadline": self.deadline,
            "nonce": self.nonce,
        }

    def to_tuple(self) -> tuple[str, int, int, int, int]:
        """ABI tuple for executeSwap."""
        return (self.token_out, self.amount_in, self.min_amount_out, self.deadline, self.nonce)


@dataclass(frozen=True)
class TypedDataSignature:
    """Output of a typed-data signer.

    Attributes:
        signature: 0x-prefixed 65-byte signature.
        digest: 0x-prefixed EIP-712 digest that was signed.
        signer: Address of the signing account.
    """

    signature: str
    digest: str
    signer: str


@dataclass(frozen=True)
class SignedAuthorization:
    """An authorization bound to the plan it came from and its signature."""

    plan: TradePlan
    authorization: Authorization
    signature: TypedDataSignature
    domain: dict[str, Any] = field(default_factory=dict)

    @property
    def nonce(self) -> int:
        return self.authorization.nonce


@dataclass(frozen=True)
class PreparedAuthorization:
    """Plan-derived fields resolved before a nonce is minted.

    Attributes:
        plan: Source trade plan.
        token_out: Checksummed output token address.
        amount_in: Input amount in smallest units.
        min_amount_out: Slippage-protected minimum output.
        chain_id: Chain id for the typed-data domain.
    """

    plan: TradePlan
    token_out: str
    amount_in: int
    min_amount_out: int
    chain_id: int
