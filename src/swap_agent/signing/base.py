# src/swap_agent/signing/base.py
from abc import ABC, abstractmethod
from typing import Any

from swap_agent.signing.models import TypedDataSignature


class TypedDataSigner(ABC):
    """Credential that produces EIP-712 signatures."""

    @property
    @abstractmethod
    def address(self) -> str:
        """Address of the signing account."""

    @abstractmethod
    async def sign_typed_data(
        self,
        domain: dict[str, Any],
        types: dict[str, list[dict[str, str]]],
        message: dict[str, Any],
    ) -> TypedDataSignature:
        """Sign a typed-data message.

        Must be deterministic for identical inputs and must not retry.
        """
