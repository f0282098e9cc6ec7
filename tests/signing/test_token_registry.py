# tests/signing/test_token_registry.py
"""Tests for TokenRegistry."""

import logging

import pytest

from swap_agent.models import Symbol
from swap_agent.signing import TokenRegistry


class TestTokenRegistry:
    def test_default_addresses_are_checksummed(self) -> None:
        registry = TokenRegistry()
        usdc = registry.get(Symbol.USDC)
        assert usdc.address == "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
        assert usdc.decimals == 6

    def test_native_eth(self) -> None:
        eth = TokenRegistry().get(Symbol.ETH)
        assert eth.address == "0x0000000000000000000000000000000000000000"
        assert eth.decimals == 18

    def test_unlisted_symbol_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = TokenRegistry(tokens={Symbol.USDC: ("0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48", 6)})

        with caplog.at_level(logging.WARNING):
            info = registry.get(Symbol.SOL)

        assert info.symbol == Symbol.USDC
        assert Symbol.SOL not in registry
        assert "routing to USDC" in caplog.text

    def test_fallback_must_be_listed(self) -> None:
        with pytest.raises(ValueError, match="Fallback"):
            TokenRegistry(tokens={Symbol.ETH: ("0x0000000000000000000000000000000000000000", 18)})

    def test_string_keys_accepted(self) -> None:
        registry = TokenRegistry(
            tokens={"usdc": ("0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48", 6)},
        )
        assert Symbol.USDC in registry
