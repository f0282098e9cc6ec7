# tests/gate/test_policy_gate.py
"""Tests for PolicyGate class."""

import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from swap_agent.gate import GateDecision, GateSettings, PolicyGate, SkipReason
from swap_agent.models import Symbol
from swap_agent.planning import RiskTier, TokenPair, TradeAction, TradePlan


def make_plan(action: TradeAction = TradeAction.BUY) -> TradePlan:
    return TradePlan(
        action=action,
        pair=TokenPair(base=Symbol.ETH, quote=Symbol.USDC),
        amount=Decimal("0.05"),
        target_price=Decimal("3100.00"),
        sentiment_score=0.7,
        confidence=0.8,
        risk_tier=RiskTier.MEDIUM,
    )


class TestPolicyGate:
    """Tests for the pre-signing gate."""

    @pytest.fixture
    def mock_chain(self) -> MagicMock:
        chain = MagicMock()
        chain.is_paused = AsyncMock(return_value=False)
        return chain

    @pytest.mark.asyncio
    async def test_hold_plan_skips_without_chain_read(self, mock_chain: MagicMock) -> None:
        gate = PolicyGate(mock_chain)

        result = await gate.check(make_plan(TradeAction.HOLD))

        assert result.decision == GateDecision.SKIP
        assert result.reason == SkipReason.HOLD
        mock_chain.is_paused.assert_not_called()

    @pytest.mark.asyncio
    async def test_paused_contract_skips(self, mock_chain: MagicMock) -> None:
        mock_chain.is_paused.return_value = True

        result = await PolicyGate(mock_chain).check(make_plan())

        assert result.should_proceed is False
        assert result.reason == SkipReason.PAUSED

    @pytest.mark.asyncio
    async def test_unpaused_buy_proceeds(self, mock_chain: MagicMock) -> None:
        result = await PolicyGate(mock_chain).check(make_plan())

        assert result.should_proceed is True
        assert result.reason is None
        assert result.data["paused"] is False

    @pytest.mark.asyncio
    async def test_sell_proceeds(self, mock_chain: MagicMock) -> None:
        result = await PolicyGate(mock_chain).check(make_plan(TradeAction.SELL))
        assert result.should_proceed is True

    @pytest.mark.asyncio
    async def test_pause_flag_read_on_every_check(self, mock_chain: MagicMock) -> None:
        gate = PolicyGate(mock_chain)

        first = await gate.check(make_plan())
        mock_chain.is_paused.return_value = True
        second = await gate.check(make_plan())

        assert first.should_proceed is True
        assert second.reason == SkipReason.PAUSED
        assert mock_chain.is_paused.await_count == 2

    @pytest.mark.asyncio
    async def test_read_failure_fails_closed(self, mock_chain: MagicMock) -> None:
        mock_chain.is_paused.side_effect = ConnectionError("rpc down")

        result = await PolicyGate(mock_chain).check(make_plan())

        assert result.reason == SkipReason.PAUSE_STATE_UNAVAILABLE
        assert "rpc down" in result.data["error"]

    @pytest.mark.asyncio
    async def test_read_timeout_fails_closed(self, mock_chain: MagicMock) -> None:
        async def slow() -> bool:
            await asyncio.sleep(5)
            return False

        mock_chain.is_paused = slow
        gate = PolicyGate(mock_chain, GateSettings(pause_read_timeout_seconds=0.01))

        result = await gate.check(make_plan())

        assert result.reason == SkipReason.PAUSE_STATE_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_read_failure_raises_when_fail_open(self, mock_chain: MagicMock) -> None:
        mock_chain.is_paused.side_effect = ConnectionError("rpc down")
        gate = PolicyGate(mock_chain, GateSettings(fail_safe_closed=False))

        with pytest.raises(ConnectionError):
            await gate.check(make_plan())
