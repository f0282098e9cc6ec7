# src/swap_agent/signing/typed_data.py
"""EIP-712 layout for agent swap authorizations.

The field order of TradeData is part of the signed digest. The verifying
contract hashes the same order, so it must not change.
"""
from typing import Any

from swap_agent.signing.models import Authorization


DOMAIN_NAME = "Agent"
DOMAIN_VERSION = "1"
PRIMARY_TYPE = "TradeData"

TRADE_DATA_FIELDS: tuple[dict[str, str], ...] = (
    {"name": "tokenOut", "type": "address"},
    {"name": "amountIn", "type": "uint256"},
    {"name": "minAmountOut", "type": "uint256"},
    {"name": "deadline", "type": "uint256"},
    {"name": "nonce", "type": "uint256"},
)


def build_domain(chain_id: int, verifying_contract: str) -> dict[str, Any]:
    return {
        "name": DOMAIN_NAME,
        "version": DOMAIN_VERSION,
        "chainId": chain_id,
        "verifyingContract": verifying_contract,
    }


def build_types() -> dict[str, list[dict[str, str]]]:
    """Message types, without the implicit EIP712Domain entry."""
    return {PRIMARY_TYPE: [dict(f) for f in TRADE_DATA_FIELDS]}


def build_typed_data(
    authorization: Authorization,
    chain_id: int,
    verifying_contract: str,
) -> tuple[dict[str, Any], dict[str, list[dict[str, str]]], dict[str, Any]]:
    """Return (domain, types, message) for an authorization."""
    return (
        build_domain(chain_id, verifying_contract),
        build_types(),
        authorization.to_message(),
    )
