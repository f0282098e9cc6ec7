# src/swap_agent/planning/settings.py
"""Configuration for the trade planner."""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

from swap_agent.models.symbol import Symbol


class SizingMode(str, Enum):
    """How the position amount is derived."""

    SCALED = "scaled"  # base_amount * |score| * confidence
    FIXED = "fixed"  # base_amount


class PlannerSettings(BaseModel):
    """Settings for TradePlanner.

    Attributes:
        action_confidence_threshold: Confidence a directional signal must exceed to trade.
        base_amount: Per-run position ceiling in base-asset units.
        base_price: Reference price for the advisory target.
        price_sensitivity: Fractional target move per unit of score.
        quote_symbol: Quote side of every pair.
        sizing_mode: SCALED or FIXED amount derivation.
        amount_places: Decimal places kept on the amount.
        price_places: Decimal places kept on the target price.
        low_risk_confidence / low_risk_score: Both must be exceeded for LOW.
        medium_risk_confidence / medium_risk_score: Both must be exceeded for MEDIUM.
    """

    action_confidence_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    base_amount: Decimal = Field(default=Decimal("0.1"), gt=0)
    base_price: Decimal = Field(default=Decimal("3000"), gt=0)
    price_sensitivity: Decimal = Field(default=Decimal("0.1"), ge=0, lt=1)
    quote_symbol: Symbol = Symbol.USDC
    sizing_mode: SizingMode = SizingMode.SCALED
    amount_places: int = Field(default=4, ge=0, le=18)
    price_places: int = Field(default=2, ge=0, le=8)

    low_risk_confidence: float = Field(default=0.8, ge=0.0, le=1.0)
    low_risk_score: float = Field(default=0.7, ge=0.0, le=1.0)
    medium_risk_confidence: float = Field(default=0.6, ge=0.0, le=1.0)
    medium_risk_score: float = Field(default=0.5, ge=0.0, le=1.0)

    @classmethod
    def from_profile(cls, name: str) -> "PlannerSettings":
        """Return one of the named policy profiles.

        ``automated`` sizes by signal strength and requires confidence.
        ``analysis`` trades on classification alone with a fixed size.
        """
        profiles = {
            "automated": {},
            "analysis": {
                "action_confidence_threshold": 0.0,
                "sizing_mode": SizingMode.FIXED,
            },
        }
        if name not in profiles:
            raise ValueError(f"Unknown planner profile: {name}. Must be one of {sorted(profiles)}")
        return cls(**profiles[name])
