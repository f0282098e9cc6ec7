# src/swap_agent/signing/token_registry.py
"""Symbol to on-chain token address table."""
import logging
from dataclasses import dataclass

from eth_utils import to_checksum_address

from swap_agent.models.symbol import Symbol


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenInfo:
    """On-chain token metadata.

    Attributes:
        symbol: Asset symbol.
        address: Checksummed token address (zero address for native ETH).
        decimals: Smallest-unit precision.
    """

    symbol: Symbol
    address: str
    decimals: int


DEFAULT_TOKENS: dict[Symbol, tuple[str, int]] = {
    Symbol.ETH: ("0x0000000000000000000000000000000000000000", 18),
    Symbol.WETH: ("0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2", 18),
    Symbol.USDC: ("0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48", 6),
    Symbol.DAI: ("0x6b175474e89094c44da98b954eedeac495271d0f", 18),
    Symbol.BTC: ("0x2260fac5e5542a773aa44fbcfedf7c193bc2c599", 8),
    Symbol.SOL: ("0xd31a59c85ae9d8edefec411d448f90841571b89c", 9),
}


class TokenRegistry:
    """Resolves token addresses and decimals.

    Symbols without an entry resolve to the fallback token. This is an
    explicit routing policy: unlisted assets are swapped into the fallback,
    and every such lookup is logged.
    """

    def __init__(
        self,
        tokens: dict[Symbol, tuple[str, int]] | None = None,
        fallback: Symbol = Symbol.USDC,
    ):
        table = DEFAULT_TOKENS if tokens is None else tokens
        self._tokens = {
            Symbol.parse(symbol): TokenInfo(
                symbol=Symbol.parse(symbol),
                address=to_checksum_address(address),
                decimals=decimals,
            )
            for symbol, (address, decimals) in table.items()
        }
        if fallback not in self._tokens:
            raise ValueError(f"Fallback token {fallback.value} has no address entry")
        self._fallback = fallback

    @property
    def fallback(self) -> TokenInfo:
        return self._tokens[self._fallback]

    def get(self, symbol: Symbol) -> TokenInfo:
        """Return token info, falling back to the default token."""
        info = self._tokens.get(symbol)
        if info is None:
            logger.warning(f"No token address for {symbol.value}, routing to {self._fallback.value}")
            return self.fallback
        return info

    def __contains__(self, symbol: Symbol) -> bool:
        return symbol in self._tokens
