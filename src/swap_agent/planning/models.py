# src/swap_agent/planning/models.py
"""Data models for trade planning."""
from dataclasses import asdict, dataclass
from decimal import Decimal
from enum import Enum

from swap_agent.models.symbol import Symbol


class TradeAction(str, Enum):
    """Proposed trade direction."""

    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"


class RiskTier(str, Enum):
    """Risk classification derived from signal strength and confidence."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class TokenPair:
    """Trading pair.

    Attributes:
        base: Asset the plan is about.
        quote: Asset prices are expressed in.
    """

    base: Symbol
    quote: Symbol

    def __str__(self) -> str:
        return f"{self.base.value}/{self.quote.value}"


@dataclass(frozen=True)
class TradePlan:
    """A bounded trade proposal.

    Produced once per pipeline run and never mutated. Every signed
    authorization is derived from exactly one plan.

    Attributes:
        action: BUY, SELL or HOLD.
        pair: Base/quote pair.
        amount: Position size in base-asset units (>= 0).
        target_price: Advisory target in quote units (> 0).
        sentiment_score: Aggregate score the plan was built from.
        confidence: Aggregate confidence the plan was built from.
        risk_tier: LOW, MEDIUM or HIGH.
    """

    action: TradeAction
    pair: TokenPair
    amount: Decimal
    target_price: Decimal
    sentiment_score: float
    confidence: float
    risk_tier: RiskTier

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"amount must be >= 0, got {self.amount}")
        if self.target_price <= 0:
            raise ValueError(f"target_price must be > 0, got {self.target_price}")

    @property
    def is_actionable(self) -> bool:
        return self.action != TradeAction.HOLD

    def to_dict(self) -> dict:
        """Serialize for journals and host responses."""
        data = asdict(self)
        data["action"] = self.action.value
        data["pair"] = str(self.pair)
        data["amount"] = str(self.amount)
        data["target_price"] = str(self.target_price)
        data["risk_tier"] = self.risk_tier.value
        return data
