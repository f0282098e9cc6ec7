# src/swap_agent/analyzers/sentiment_result.py
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from swap_agent.models.symbol import Symbol


class SentimentLabel(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class SentimentSample(BaseModel):
    """Score for a single snippet."""

    model_config = ConfigDict(frozen=True)

    text: str
    score: float = Field(ge=-1.0, le=1.0, description="Signed sentiment, positive=bullish")
    confidence: float = Field(ge=0.0, le=1.0)
    keywords: tuple[str, ...] = ()


class AggregateSentiment(BaseModel):
    """Reduced sentiment for one symbol over one pipeline run."""

    model_config = ConfigDict(frozen=True)

    symbol: Symbol
    score: float = Field(ge=-1.0, le=1.0)
    confidence: float = Field(ge=0.0, le=1.0)
    label: SentimentLabel
    keywords: tuple[str, ...] = ()
    sample_count: int = Field(default=0, ge=0)

    @property
    def is_degraded(self) -> bool:
        """True when no samples backed this result."""
        return self.sample_count == 0

    @classmethod
    def empty(cls, symbol: Symbol) -> "AggregateSentiment":
        return cls(symbol=symbol, score=0.0, confidence=0.0, label=SentimentLabel.NEUTRAL)
