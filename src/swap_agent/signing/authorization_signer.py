# src/swap_agent/signing/authorization_signer.py
"""Builds and signs replay-protected swap authorizations."""
import asyncio
import logging
import time
from collections.abc import Callable
from decimal import ROUND_DOWN, ROUND_FLOOR, Decimal

from swap_agent.chain.base import ChainClient
from swap_agent.errors import SigningError
from swap_agent.models.symbol import Symbol
from swap_agent.planning.models import TradeAction, TradePlan
from swap_agent.signing.base import TypedDataSigner
from swap_agent.signing.models import Authorization, PreparedAuthorization, SignedAuthorization
from swap_agent.signing.nonce_counter import NonceCounter
from swap_agent.signing.settings import SignerSettings
from swap_agent.signing.token_registry import TokenRegistry
from swap_agent.signing.typed_data import build_typed_data


logger = logging.getLogger(__name__)


class AuthorizationSigner:
    """Turns a trade plan into a signed TradeData authorization.

    Owns the nonce counter. Everything that can fail without side effects
    (plan checks, amount conversion, chain id read) happens before a nonce
    is minted; signing happens after.
    """

    def __init__(
        self,
        chain_client: ChainClient,
        typed_data_signer: TypedDataSigner,
        nonce_counter: NonceCounter,
        settings: SignerSettings | None = None,
        token_registry: TokenRegistry | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self._chain = chain_client
        self._signer = typed_data_signer
        self._nonces = nonce_counter
        self._settings = settings or SignerSettings()
        self._tokens = token_registry or TokenRegistry(
            tokens=self._settings.token_addresses,
            fallback=self._settings.fallback_token,
        )
        self._clock = clock

    @property
    def signer_address(self) -> str:
        return self._signer.address

    @property
    def current_nonce(self) -> int:
        return self._nonces.current

    def target_symbol(self, plan: TradePlan) -> Symbol:
        """Asset received by the swap: base on buy, quote on sell."""
        return plan.pair.quote if plan.action == TradeAction.SELL else plan.pair.base

    def to_amount_in(self, amount: Decimal) -> int:
        """Human amount to smallest unit of the funding asset, truncated."""
        decimals = self._tokens.get(self._settings.funding_symbol).decimals
        return int((amount * (Decimal(10) ** decimals)).to_integral_value(rounding=ROUND_DOWN))

    def to_min_amount_out(self, amount_in: int) -> int:
        """Apply slippage; floors so the result stays strictly below amount_in."""
        multiplier = Decimal(1) - Decimal(str(self._settings.slippage_tolerance))
        return int((Decimal(amount_in) * multiplier).to_integral_value(rounding=ROUND_FLOOR))

    def derive_fields(self, plan: TradePlan) -> tuple[str, int, int]:
        """Return (token_out, amount_in, min_amount_out) for a plan.

        Pure: identical plans and settings always give identical fields.
        """
        token_out = self._tokens.get(self.target_symbol(plan)).address
        amount_in = self.to_amount_in(plan.amount)
        return token_out, amount_in, self.to_min_amount_out(amount_in)

    async def sign(self, plan: TradePlan) -> SignedAuthorization:
        """Sign an authorization for an actionable plan.

        Raises:
            SigningError: On any failure. ``nonce_consumed`` tells whether a
                nonce was burned before the failure.
        """
        prepared = await self.prepare(plan)
        return await self.finalize(prepared)

    async def prepare(self, plan: TradePlan) -> PreparedAuthorization:
        """Everything up to, but excluding, nonce allocation.

        Safe to cancel: nothing is consumed here.
        """
        if not plan.is_actionable:
            raise SigningError("Refusing to sign a hold plan")

        token_out, amount_in, min_amount_out = self.derive_fields(plan)
        if amount_in <= 0:
            raise SigningError(f"Plan amount {plan.amount} converts to zero input")

        try:
            chain_id = await asyncio.wait_for(
                self._chain.get_chain_id(),
                timeout=self._settings.chain_read_timeout_seconds,
            )
        except Exception as e:
            raise SigningError(f"Chain id unavailable: {e!r}") from e

        return PreparedAuthorization(
            plan=plan,
            token_out=token_out,
            amount_in=amount_in,
            min_amount_out=min_amount_out,
            chain_id=chain_id,
        )

    async def finalize(
        self,
        prepared: PreparedAuthorization,
        on_nonce: Callable[[int], None] | None = None,
    ) -> SignedAuthorization:
        """Mint the nonce, set the deadline and sign.

        Args:
            prepared: Output of ``prepare``.
            on_nonce: Called with the nonce as soon as it is minted, so the
                caller can account for it even if signing is cancelled.
        """
        plan = prepared.plan
        try:
            nonce = await self._nonces.next()
        except Exception as e:
            raise SigningError(f"Nonce allocation failed: {e!r}") from e
        if on_nonce is not None:
            on_nonce(nonce)

        deadline = int(self._clock()) + self._settings.execution_window_seconds
        authorization = Authorization(
            token_out=prepared.token_out,
            amount_in=prepared.amount_in,
            min_amount_out=prepared.min_amount_out,
            deadline=deadline,
            nonce=nonce,
        )
        domain, types, message = build_typed_data(
            authorization, prepared.chain_id, self._chain.verifying_contract
        )

        try:
            signature = await asyncio.wait_for(
                self._signer.sign_typed_data(domain, types, message),
                timeout=self._settings.sign_timeout_seconds,
            )
        except asyncio.CancelledError:
            logger.warning(f"Signing cancelled after consuming nonce {nonce}; nonce is burned")
            raise
        except Exception as e:
            logger.error(f"Signing failed after consuming nonce {nonce}: {e!r}")
            raise SigningError(f"Signature failed: {e!r}", nonce_consumed=True, nonce=nonce) from e

        logger.info(
            f"Signed authorization nonce={nonce} token_out={authorization.token_out} "
            f"amount_in={authorization.amount_in} min_out={authorization.min_amount_out} deadline={deadline}"
        )
        return SignedAuthorization(
            plan=plan,
            authorization=authorization,
            signature=signature,
            domain=domain,
        )
