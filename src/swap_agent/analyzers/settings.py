# src/swap_agent/analyzers/settings.py
"""Configuration for lexical scoring and aggregation."""

from pydantic import BaseModel, Field


class CueClass(BaseModel):
    """A family of keyword cues with a fixed effect on the running score.

    Attributes:
        name: Class identifier.
        cues: Substrings that trigger the class (matched case-insensitively).
        delta: Signed amount added to the running score.
        multiplier: If set, the running score is scaled by it instead of adding delta.
        confidence_floor: Confidence is raised to at least this value on a match.
        keywords: Keywords reported when the class matches.
    """

    name: str
    cues: list[str]
    delta: float = Field(default=0.0, ge=-1.0, le=1.0)
    multiplier: float | None = Field(default=None, ge=0.0, le=1.0)
    confidence_floor: float | None = Field(default=None, ge=0.0, le=1.0)
    keywords: list[str] = Field(default_factory=list)

    @property
    def is_dampening(self) -> bool:
        return self.multiplier is not None


def _default_cue_classes() -> list[CueClass]:
    return [
        CueClass(
            name="bullish",
            cues=["bullish", "bull run", "🚀"],
            delta=0.8,
            confidence_floor=0.8,
            keywords=["bullish", "momentum"],
        ),
        CueClass(
            name="adoption",
            cues=["adoption", "institutional"],
            delta=0.7,
            confidence_floor=0.7,
            keywords=["adoption", "institutional"],
        ),
        CueClass(
            name="viral",
            cues=["viral", "exploding"],
            delta=0.9,
            confidence_floor=0.9,
            keywords=["viral", "growth"],
        ),
        CueClass(
            name="technical",
            cues=["breakout", "support"],
            delta=0.6,
            keywords=["technical", "breakout"],
        ),
        CueClass(
            name="bearish",
            cues=["bearish", "resistance"],
            delta=-0.8,
            confidence_floor=0.8,
            keywords=["bearish", "resistance"],
        ),
        CueClass(
            name="selling",
            cues=["selling", "decline"],
            delta=-0.6,
            keywords=["selling", "decline"],
        ),
        CueClass(
            name="consolidation",
            cues=["sideways", "consolidating"],
            multiplier=0.5,
            keywords=["sideways", "consolidation"],
        ),
    ]


class AggregatorSettings(BaseModel):
    """Settings for LexiconScorer and SentimentAggregator."""

    base_confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    cue_classes: list[CueClass] = Field(default_factory=_default_cue_classes)
    bullish_threshold: float = Field(default=0.3, ge=0.0, le=1.0)
    bearish_threshold: float = Field(default=-0.3, ge=-1.0, le=0.0)
    max_keywords: int = Field(default=5, ge=0)
    fetch_timeout_seconds: float = Field(default=10.0, gt=0)
