# src/swap_agent/signing/settings.py
"""Configuration for authorization signing."""

from pydantic import BaseModel, Field

from swap_agent.models.symbol import Symbol


class SignerSettings(BaseModel):
    """Settings for AuthorizationSigner.

    Attributes:
        slippage_tolerance: Fraction of amount_in the output may fall short by.
        execution_window_seconds: Deadline offset from signing time.
        funding_symbol: Asset the agent contract holds and spends.
        fallback_token: Token used for symbols without an address entry.
        chain_read_timeout_seconds: Bound on the chain id read.
        sign_timeout_seconds: Bound on the signature call.
        token_addresses: Optional overrides of the address table, symbol -> (address, decimals).
    """

    slippage_tolerance: float = Field(default=0.02, gt=0.0, lt=1.0)
    execution_window_seconds: int = Field(default=3600, ge=60)
    funding_symbol: Symbol = Symbol.ETH
    fallback_token: Symbol = Symbol.USDC
    chain_read_timeout_seconds: float = Field(default=10.0, gt=0)
    sign_timeout_seconds: float = Field(default=10.0, gt=0)
    token_addresses: dict[Symbol, tuple[str, int]] | None = None
