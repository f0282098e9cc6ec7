# src/swap_agent/signing/local_signer.py
"""Typed-data signer backed by a local private key."""
from typing import Any

from eth_account import Account
from eth_account.messages import encode_typed_data

from swap_agent.signing.base import TypedDataSigner
from swap_agent.signing.models import TypedDataSignature


class LocalAccountSigner(TypedDataSigner):
    """Signs with an in-process eth-account key."""

    def __init__(self, private_key: str):
        if not private_key:
            raise ValueError("private_key is required")
        self._account = Account.from_key(private_key)

    @property
    def address(self) -> str:
        return self._account.address

    async def sign_typed_data(
        self,
        domain: dict[str, Any],
        types: dict[str, list[dict[str, str]]],
        message: dict[str, Any],
    ) -> TypedDataSignature:
        signable = encode_typed_data(domain_data=domain, message_types=types, message_data=message)
        signed = self._account.sign_message(signable)
        return TypedDataSignature(
            signature="0x" + bytes(signed.signature).hex(),
            digest="0x" + bytes(signed.message_hash).hex(),
            signer=self._account.address,
        )

    @staticmethod
    def recover(
        domain: dict[str, Any],
        types: dict[str, list[dict[str, str]]],
        message: dict[str, Any],
        signature: str,
    ) -> str:
        """Recover the signing address from a typed-data signature."""
        signable = encode_typed_data(domain_data=domain, message_types=types, message_data=message)
        return Account.recover_message(signable, signature=signature)
