# src/swap_agent/signing/nonce_counter.py
"""Process-wide monotonic nonce counter."""
import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from swap_agent.chain.base import ChainClient
    from swap_agent.journal.nonce_store import NonceStore


logger = logging.getLogger(__name__)


class NonceCounter:
    """Lock-guarded counter with a single read-increment-assign operation.

    When a store is attached, the new high-water mark is persisted before
    the nonce is handed out, so a restart can never re-issue it.
    """

    def __init__(self, start: int = 0, store: "NonceStore | None" = None):
        if start < 0:
            raise ValueError(f"start must be >= 0, got {start}")
        self._value = start
        self._store = store
        self._lock = asyncio.Lock()

    @property
    def current(self) -> int:
        """Last nonce handed out (or the recovered start)."""
        return self._value

    async def next(self) -> int:
        """Mint the next nonce."""
        async with self._lock:
            candidate = self._value + 1
            if self._store is not None:
                await self._store.save(candidate)
            self._value = candidate
            return candidate

    @classmethod
    async def recover(
        cls,
        store: "NonceStore | None" = None,
        chain_client: "ChainClient | None" = None,
    ) -> "NonceCounter":
        """Start from the highest of the persisted and on-chain marks."""
        persisted = await store.load() if store is not None else 0
        onchain = None
        if chain_client is not None:
            onchain = await chain_client.get_onchain_nonce()

        start = max(persisted, onchain or 0)
        logger.info(f"Nonce counter recovered at {start} (persisted={persisted}, onchain={onchain})")
        return cls(start=start, store=store)
