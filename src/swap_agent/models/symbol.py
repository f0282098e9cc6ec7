# src/swap_agent/models/symbol.py
"""Canonical asset symbols."""

from enum import Enum


class Symbol(str, Enum):
    """Assets the agent knows how to reason about."""

    ETH = "ETH"
    BTC = "BTC"
    SOL = "SOL"
    USDC = "USDC"
    DAI = "DAI"
    WETH = "WETH"

    @classmethod
    def parse(cls, value: "str | Symbol") -> "Symbol":
        """Normalize a ticker string to a Symbol.

        Raises:
            ValueError: If the value is not a known symbol.
        """
        if isinstance(value, Symbol):
            return value
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown symbol: {value!r}") from None
