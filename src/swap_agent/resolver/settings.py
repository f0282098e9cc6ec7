# src/swap_agent/resolver/settings.py
"""Configuration for the token resolver."""

from pydantic import BaseModel, Field, field_validator

from swap_agent.models.symbol import Symbol


def _default_aliases() -> list[tuple[str, Symbol]]:
    # Wrapped ether comes first since "weth" contains "eth". Within each asset
    # the full name comes before the ticker.
    return [
        ("wrapped ether", Symbol.WETH),
        ("weth", Symbol.WETH),
        ("ethereum", Symbol.ETH),
        ("eth", Symbol.ETH),
        ("bitcoin", Symbol.BTC),
        ("btc", Symbol.BTC),
        ("solana", Symbol.SOL),
        ("sol", Symbol.SOL),
        ("usd coin", Symbol.USDC),
        ("usdc", Symbol.USDC),
        ("dai", Symbol.DAI),
    ]


class ResolverSettings(BaseModel):
    """Settings for TokenResolver.

    Attributes:
        default_symbol: Returned when no alias matches.
        aliases: Priority-ordered (alias, symbol) pairs; first match wins.
    """

    default_symbol: Symbol = Symbol.ETH
    aliases: list[tuple[str, Symbol]] = Field(default_factory=_default_aliases)

    @field_validator("aliases")
    @classmethod
    def normalize_aliases(cls, v: list[tuple[str, Symbol]]) -> list[tuple[str, Symbol]]:
        """Lowercase aliases and drop empty ones."""
        normalized = []
        for alias, symbol in v:
            alias = alias.strip().lower()
            if not alias:
                raise ValueError("Alias must not be empty")
            normalized.append((alias, Symbol.parse(symbol)))
        return normalized
