# src/swap_agent/collectors/twitter_source.py
"""Snippet source for Twitter/X using twscrape."""

import logging
from datetime import timezone

from swap_agent.collectors.base import SnippetSource
from swap_agent.models.snippet import Snippet
from swap_agent.models.symbol import Symbol


logger = logging.getLogger(__name__)


class TwitterSnippetSource(SnippetSource):
    """Searches recent tweets by cashtag."""

    def __init__(self, limit: int = 20, query_suffix: str = "lang:en -is:retweet"):
        super().__init__(name="twitter")
        self._limit = limit
        self._query_suffix = query_suffix
        self._api = None

    @property
    def is_connected(self) -> bool:
        return self._api is not None

    async def connect(self) -> None:
        """Initialize twscrape API connection."""
        try:
            from twscrape import API
        except ImportError:
            raise RuntimeError("twscrape not installed. Run: pip install twscrape")
        self._api = API()

    async def disconnect(self) -> None:
        self._api = None

    def build_query(self, symbol: Symbol) -> str:
        return f"${symbol.value} {self._query_suffix}".strip()

    async def fetch_snippets(self, symbol: Symbol) -> list[Snippet]:
        if self._api is None:
            raise RuntimeError("Source not connected. Call connect() first.")

        snippets = []
        async for tweet in self._api.search(self.build_query(symbol), limit=self._limit):
            snippets.append(self._parse_tweet(symbol, tweet))

        logger.debug(f"Fetched {len(snippets)} tweets for {symbol.value}")
        return snippets

    def _parse_tweet(self, symbol: Symbol, tweet) -> Snippet:
        """Convert a twscrape Tweet to Snippet."""
        return Snippet(
            symbol=symbol,
            text=tweet.rawContent,
            source=self.name,
            source_id=str(tweet.id),
            author=tweet.user.username,
            timestamp=tweet.date if tweet.date.tzinfo else tweet.date.replace(tzinfo=timezone.utc),
            url=tweet.url,
            like_count=tweet.likeCount,
            retweet_count=tweet.retweetCount,
        )
