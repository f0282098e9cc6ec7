# src/swap_agent/analyzers/sentiment_aggregator.py
"""Collects snippets for a symbol and reduces them to one sentiment signal."""

import asyncio
import logging

from swap_agent.analyzers.lexicon_scorer import LexiconScorer
from swap_agent.analyzers.sentiment_result import AggregateSentiment, SentimentLabel, SentimentSample
from swap_agent.analyzers.settings import AggregatorSettings
from swap_agent.collectors.base import SnippetSource
from swap_agent.models.symbol import Symbol


logger = logging.getLogger(__name__)


class SentimentAggregator:
    """Fetches, scores and reduces snippets.

    A slow or failing source degrades to an empty sample set; the result is
    then neutral with zero confidence so downstream stages settle on hold.
    """

    def __init__(
        self,
        source: SnippetSource,
        scorer: LexiconScorer | None = None,
        settings: AggregatorSettings | None = None,
    ):
        self._source = source
        self._settings = settings or AggregatorSettings()
        self._scorer = scorer or LexiconScorer(self._settings)

    async def aggregate(self, symbol: Symbol) -> AggregateSentiment:
        """Build the aggregate sentiment for a symbol.

        Args:
            symbol: Resolved asset symbol.

        Returns:
            AggregateSentiment; neutral with zero confidence when no samples.
        """
        texts = await self._fetch_texts(symbol)
        samples = [self._scorer.score(text) for text in texts]
        return self.reduce(symbol, samples)

    async def _fetch_texts(self, symbol: Symbol) -> list[str]:
        try:
            snippets = await asyncio.wait_for(
                self._source.fetch_snippets(symbol),
                timeout=self._settings.fetch_timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Sentiment source '{self._source.name}' timed out after "
                f"{self._settings.fetch_timeout_seconds}s for {symbol.value}"
            )
            return []
        except Exception as e:
            logger.warning(f"Sentiment source '{self._source.name}' failed for {symbol.value}: {e}")
            return []

        return [s.text for s in snippets if s.text]

    def reduce(self, symbol: Symbol, samples: list[SentimentSample]) -> AggregateSentiment:
        """Reduce scored samples to one signal.

        Score and confidence are arithmetic means; keywords are the
        first-occurrence union truncated to ``max_keywords``.
        """
        if not samples:
            logger.warning(f"No sentiment samples for {symbol.value}, degrading to neutral")
            return AggregateSentiment.empty(symbol)

        score = sum(s.score for s in samples) / len(samples)
        confidence = sum(s.confidence for s in samples) / len(samples)

        keywords: list[str] = []
        for sample in samples:
            for keyword in sample.keywords:
                if keyword not in keywords:
                    keywords.append(keyword)

        # Guard against float drift past the model bounds
        score = max(-1.0, min(1.0, score))
        confidence = max(0.0, min(1.0, confidence))

        return AggregateSentiment(
            symbol=symbol,
            score=score,
            confidence=confidence,
            label=self.classify(score),
            keywords=tuple(keywords[: self._settings.max_keywords]),
            sample_count=len(samples),
        )

    def classify(self, score: float) -> SentimentLabel:
        if score > self._settings.bullish_threshold:
            return SentimentLabel.BULLISH
        if score < self._settings.bearish_threshold:
            return SentimentLabel.BEARISH
        return SentimentLabel.NEUTRAL
