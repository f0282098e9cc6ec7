"""Trade plan synthesis from aggregate sentiment."""

from .models import RiskTier, TokenPair, TradeAction, TradePlan
from .settings import PlannerSettings, SizingMode
from .trade_planner import TradePlanner

__all__ = [
    "PlannerSettings",
    "RiskTier",
    "SizingMode",
    "TokenPair",
    "TradeAction",
    "TradePlan",
    "TradePlanner",
]
