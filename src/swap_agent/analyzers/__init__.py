"""Sentiment scoring and aggregation."""

from .lexicon_scorer import LexiconScorer
from .sentiment_aggregator import SentimentAggregator
from .sentiment_result import AggregateSentiment, SentimentLabel, SentimentSample
from .settings import AggregatorSettings, CueClass

__all__ = [
    "AggregateSentiment",
    "AggregatorSettings",
    "CueClass",
    "LexiconScorer",
    "SentimentAggregator",
    "SentimentLabel",
    "SentimentSample",
]
