# tests/signing/test_local_signer.py
"""Tests for LocalAccountSigner."""

import pytest

from swap_agent.signing import Authorization, LocalAccountSigner
from swap_agent.signing.typed_data import build_typed_data

# Well-known development key; never holds real funds.
TEST_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
CONTRACT = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


def make_typed_data(nonce: int = 1, chain_id: int = 1):
    auth = Authorization(
        token_out="0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
        amount_in=10**17,
        min_amount_out=98 * 10**15,
        deadline=1_700_003_600,
        nonce=nonce,
    )
    return build_typed_data(auth, chain_id, CONTRACT)


class TestLocalAccountSigner:
    @pytest.fixture
    def signer(self) -> LocalAccountSigner:
        return LocalAccountSigner(TEST_KEY)

    def test_address(self, signer: LocalAccountSigner) -> None:
        assert signer.address == TEST_ADDRESS

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(ValueError):
            LocalAccountSigner("")

    @pytest.mark.asyncio
    async def test_signature_recovers_to_signer(self, signer: LocalAccountSigner) -> None:
        domain, types, message = make_typed_data()

        result = await signer.sign_typed_data(domain, types, message)

        assert result.signer == TEST_ADDRESS
        assert result.signature.startswith("0x")
        assert len(result.signature) == 2 + 65 * 2
        assert len(result.digest) == 2 + 32 * 2
        assert LocalAccountSigner.recover(domain, types, message, result.signature) == TEST_ADDRESS

    @pytest.mark.asyncio
    async def test_signing_is_deterministic(self, signer: LocalAccountSigner) -> None:
        domain, types, message = make_typed_data()

        first = await signer.sign_typed_data(domain, types, message)
        second = await signer.sign_typed_data(domain, types, message)

        assert first == second

    @pytest.mark.asyncio
    async def test_nonce_changes_digest(self, signer: LocalAccountSigner) -> None:
        first = await signer.sign_typed_data(*make_typed_data(nonce=1))
        second = await signer.sign_typed_data(*make_typed_data(nonce=2))

        assert first.digest != second.digest

    @pytest.mark.asyncio
    async def test_chain_id_changes_digest(self, signer: LocalAccountSigner) -> None:
        mainnet = await signer.sign_typed_data(*make_typed_data(chain_id=1))
        sepolia = await signer.sign_typed_data(*make_typed_data(chain_id=11155111))

        assert mainnet.digest != sepolia.digest
