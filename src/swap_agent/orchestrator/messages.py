# src/swap_agent/orchestrator/messages.py
"""Formats pipeline outcomes as user-facing text."""

from swap_agent.analyzers.sentiment_result import AggregateSentiment
from swap_agent.gate.models import SkipReason
from swap_agent.models.symbol import Symbol
from swap_agent.planning.models import TradePlan


_SKIP_REASONS = {
    SkipReason.HOLD: "hold recommendation",
    SkipReason.PAUSED: "agent contract is paused",
    SkipReason.PAUSE_STATE_UNAVAILABLE: "agent pause state could not be confirmed",
}


class MessageFormatter:
    """One summary line per terminal outcome; never includes stack-level detail."""

    def format_executed(self, plan: TradePlan, transaction_reference: str) -> str:
        return (
            f"Trade executed: {plan.action.value.upper()} {plan.amount} {plan.pair} "
            f"(risk {plan.risk_tier.value}). Transaction: {transaction_reference}"
        )

    def format_skipped(self, reason: SkipReason, plan: TradePlan, sentiment: AggregateSentiment) -> str:
        text = f"No trade for {plan.pair.base.value}: {_SKIP_REASONS[reason]}"
        if reason == SkipReason.HOLD:
            text += f" based on {sentiment.label.value} sentiment (score {sentiment.score:+.2f}, confidence {sentiment.confidence:.2f})"
        return text + "."

    def format_rejected(self, plan: TradePlan) -> str:
        return f"No trade for {plan.pair.base.value}: the agent contract rejected the swap."

    def format_submission_unknown(self, plan: TradePlan, nonce: int) -> str:
        return (
            f"Trade status unknown for {plan.pair}: submission of authorization #{nonce} "
            "did not confirm. Check the transaction before retrying."
        )

    def format_signing_failed(self, symbol: Symbol) -> str:
        return f"Could not authorize the {symbol.value} trade. No transaction was sent."

    def format_error(self, symbol: Symbol | None) -> str:
        target = f" for {symbol.value}" if symbol else ""
        return f"Failed to process trading request{target}."
