# src/swap_agent/models/snippet.py
"""Raw text unit delivered by a sentiment source."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from swap_agent.models.symbol import Symbol


class Snippet(BaseModel):
    """One piece of social text about an asset."""

    symbol: Symbol
    text: str
    source: str = "static"
    source_id: Optional[str] = None
    author: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    url: Optional[str] = None

    # Engagement counters, when the source exposes them
    like_count: Optional[int] = None
    retweet_count: Optional[int] = None

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()
