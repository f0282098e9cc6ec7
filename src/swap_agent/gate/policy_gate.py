# src/swap_agent/gate/policy_gate.py
"""Policy gate for trade execution."""

import asyncio
import logging

from pydantic import BaseModel, Field

from swap_agent.chain.base import ChainClient
from swap_agent.gate.models import GateResult, SkipReason
from swap_agent.planning.models import TradePlan


logger = logging.getLogger(__name__)


class GateSettings(BaseModel):
    """Configuration for PolicyGate."""

    pause_read_timeout_seconds: float = Field(default=10.0, gt=0)
    fail_safe_closed: bool = True


class PolicyGate:
    """Refuses hold plans and anything while the agent contract is paused.

    The pause flag is read live on every check; it is never cached.
    """

    def __init__(self, chain_client: ChainClient, settings: GateSettings | None = None):
        self._chain = chain_client
        self._settings = settings or GateSettings()

    async def check(self, plan: TradePlan) -> GateResult:
        """Decide whether a plan may be signed.

        Raises:
            Exception: The pause-read error, only when fail_safe_closed is False.
        """
        if not plan.is_actionable:
            return GateResult.skip(SkipReason.HOLD, data={"action": plan.action.value})

        try:
            paused = await asyncio.wait_for(
                self._chain.is_paused(),
                timeout=self._settings.pause_read_timeout_seconds,
            )
        except Exception as e:
            if self._settings.fail_safe_closed:
                logger.warning(f"Pause state unavailable, treating gate as closed: {e!r}")
                return GateResult.skip(SkipReason.PAUSE_STATE_UNAVAILABLE, data={"error": repr(e)})
            raise

        if paused:
            return GateResult.skip(SkipReason.PAUSED, data={"paused": True})

        return GateResult.proceed(data={"paused": False, "action": plan.action.value})
