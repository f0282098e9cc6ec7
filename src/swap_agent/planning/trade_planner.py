# src/swap_agent/planning/trade_planner.py
"""Converts aggregate sentiment into a bounded trade plan."""
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal

from swap_agent.analyzers.sentiment_result import AggregateSentiment, SentimentLabel
from swap_agent.models.symbol import Symbol
from swap_agent.planning.models import RiskTier, TokenPair, TradeAction, TradePlan
from swap_agent.planning.settings import PlannerSettings, SizingMode


class TradePlanner:
    """Pure, deterministic trade plan synthesis.

    Execution is never decided here: hold plans still report amount and
    target price for audit, and the policy gate refuses to act on them.
    """

    def __init__(self, settings: PlannerSettings | None = None):
        self._settings = settings or PlannerSettings()

    @property
    def settings(self) -> PlannerSettings:
        return self._settings

    def synthesize(self, symbol: Symbol, sentiment: AggregateSentiment) -> TradePlan:
        """Build a trade plan.

        Args:
            symbol: Resolved base asset.
            sentiment: Aggregate sentiment for the asset.

        Returns:
            Immutable TradePlan.
        """
        score = Decimal(str(sentiment.score))
        confidence = Decimal(str(sentiment.confidence))

        return TradePlan(
            action=self._decide_action(sentiment),
            pair=TokenPair(base=symbol, quote=self._settings.quote_symbol),
            amount=self._compute_amount(score, confidence),
            target_price=self._compute_target_price(score),
            sentiment_score=sentiment.score,
            confidence=sentiment.confidence,
            risk_tier=self.classify_risk(sentiment.score, sentiment.confidence),
        )

    def _decide_action(self, sentiment: AggregateSentiment) -> TradeAction:
        threshold = self._settings.action_confidence_threshold
        if sentiment.label == SentimentLabel.BULLISH and sentiment.confidence > threshold:
            return TradeAction.BUY
        if sentiment.label == SentimentLabel.BEARISH and sentiment.confidence > threshold:
            return TradeAction.SELL
        return TradeAction.HOLD

    def _compute_amount(self, score: Decimal, confidence: Decimal) -> Decimal:
        if self._settings.sizing_mode == SizingMode.FIXED:
            amount = self._settings.base_amount
        else:
            amount = self._settings.base_amount * abs(score) * confidence
        # Truncate so the signed size never exceeds the ceiling
        return amount.quantize(Decimal(1).scaleb(-self._settings.amount_places), rounding=ROUND_DOWN)

    def _compute_target_price(self, score: Decimal) -> Decimal:
        price = self._settings.base_price * (1 + score * self._settings.price_sensitivity)
        return price.quantize(Decimal(1).scaleb(-self._settings.price_places), rounding=ROUND_HALF_UP)

    def classify_risk(self, score: float, confidence: float) -> RiskTier:
        """Classify risk; a low-confidence signal is never LOW."""
        strength = abs(score)
        s = self._settings
        if confidence > s.low_risk_confidence and strength > s.low_risk_score:
            return RiskTier.LOW
        if confidence > s.medium_risk_confidence and strength > s.medium_risk_score:
            return RiskTier.MEDIUM
        return RiskTier.HIGH
