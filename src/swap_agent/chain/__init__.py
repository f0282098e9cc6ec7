"""Delegated agent contract access."""

from .base import ChainClient, SwapReceipt
from .web3_client import Web3AgentClient

__all__ = ["ChainClient", "SwapReceipt", "Web3AgentClient"]
