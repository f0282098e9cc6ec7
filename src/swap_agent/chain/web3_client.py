# src/swap_agent/chain/web3_client.py
"""web3.py client for the delegated agent contract."""
import asyncio
import logging

from eth_account import Account
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import ContractLogicError, TimeExhausted

from swap_agent.chain.abi import AGENT_ABI
from swap_agent.chain.base import ChainClient, SwapReceipt
from swap_agent.errors import ChainTransportError, ContractRevert
from swap_agent.signing.models import Authorization


logger = logging.getLogger(__name__)


class Web3AgentClient(ChainClient):
    """Reads agent state and sends executeSwap transactions.

    The transaction sender is the same key that signs authorizations.
    Sender transaction nonces are allocated under a lock so concurrent
    submissions do not collide in the mempool.
    """

    def __init__(
        self,
        rpc_url: str,
        contract_address: str,
        private_key: str,
        receipt_timeout_seconds: float = 120.0,
        w3: AsyncWeb3 | None = None,
    ):
        self._w3 = w3 or AsyncWeb3(AsyncHTTPProvider(rpc_url))
        self._address = AsyncWeb3.to_checksum_address(contract_address)
        self._contract = self._w3.eth.contract(address=self._address, abi=AGENT_ABI)
        self._account = Account.from_key(private_key)
        self._receipt_timeout = receipt_timeout_seconds
        self._chain_id: int | None = None
        self._tx_lock = asyncio.Lock()

    @property
    def verifying_contract(self) -> str:
        return self._address

    @property
    def sender(self) -> str:
        return self._account.address

    async def is_paused(self) -> bool:
        return bool(await self._contract.functions.getPausedState().call())

    async def get_chain_id(self) -> int:
        if self._chain_id is None:
            self._chain_id = int(await self._w3.eth.chain_id)
        return self._chain_id

    async def get_user_funds(self) -> int:
        return int(await self._contract.functions.getUserFunds().call())

    async def get_authorized_signer(self) -> str:
        return AsyncWeb3.to_checksum_address(await self._contract.functions.getAuthorizedSigner().call())

    async def execute_swap(self, authorization: Authorization, signature: str) -> SwapReceipt:
        signature_bytes = bytes.fromhex(signature.removeprefix("0x"))
        chain_id = await self.get_chain_id()

        try:
            async with self._tx_lock:
                tx_nonce = await self._w3.eth.get_transaction_count(self._account.address, "pending")
                tx = await self._contract.functions.executeSwap(
                    authorization.to_tuple(), signature_bytes
                ).build_transaction(
                    {"from": self._account.address, "nonce": tx_nonce, "chainId": chain_id}
                )
                signed_tx = self._account.sign_transaction(tx)
                tx_hash = await self._w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        except ContractLogicError as e:
            raise ContractRevert(getattr(e, "message", None) or str(e)) from e
        except Exception as e:
            raise ChainTransportError(f"Failed to send executeSwap: {e!r}") from e

        tx_reference = "0x" + bytes(tx_hash).hex()
        logger.info(f"executeSwap sent: {tx_reference} (auth nonce {authorization.nonce})")

        try:
            receipt = await self._w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self._receipt_timeout)
        except TimeExhausted as e:
            raise ChainTransportError(f"Receipt for {tx_reference} not found: {e}") from e
        except Exception as e:
            raise ChainTransportError(f"Receipt polling for {tx_reference} failed: {e!r}") from e

        if receipt["status"] != 1:
            reason = await self._replay_revert_reason(tx, receipt.get("blockNumber"))
            raise ContractRevert(reason or f"Transaction {tx_reference} reverted", transaction_reference=tx_reference)

        return SwapReceipt(
            transaction_hash=tx_reference,
            block_number=receipt.get("blockNumber"),
            gas_used=receipt.get("gasUsed"),
        )

    async def _replay_revert_reason(self, tx: dict, block_number: int | None) -> str | None:
        """Re-run a reverted transaction as a call to recover its revert reason."""
        call = {
            "from": self._account.address,
            "to": tx["to"],
            "data": tx["data"],
            "value": tx.get("value", 0),
        }
        try:
            await self._w3.eth.call(call, block_identifier=block_number or "latest")
        except ContractLogicError as e:
            return getattr(e, "message", None) or str(e)
        except Exception as e:
            logger.warning(f"Could not replay reverted transaction: {e!r}")
        return None
