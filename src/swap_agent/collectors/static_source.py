# src/swap_agent/collectors/static_source.py
"""Fixed-text snippet source for demos, tests and offline runs."""

from collections.abc import Mapping, Sequence

from swap_agent.collectors.base import SnippetSource
from swap_agent.models.snippet import Snippet
from swap_agent.models.symbol import Symbol


DEFAULT_TEMPLATES = [
    "{token} looking bullish! Institutional adoption is growing rapidly. This is just the beginning of the bull run! 🚀",
    "{token} showing strong support. Volume spike indicates accumulation phase. Whales are buying!",
    "{token} ecosystem is exploding! New partnerships and adoption metrics are off the charts. This is viral growth!",
    "{token} adoption continues to grow. More merchants accepting {token}. This is the future of payments!",
    "{token} technical analysis shows breakout potential. RSI and MACD indicators are bullish!",
]


class StaticSnippetSource(SnippetSource):
    """Serves pre-configured texts.

    Texts are either given per symbol, or rendered from templates where
    ``{token}`` is replaced with the symbol ticker.
    """

    def __init__(
        self,
        texts: Mapping[Symbol, Sequence[str]] | None = None,
        templates: Sequence[str] | None = None,
        limit: int | None = None,
    ):
        super().__init__(name="static")
        self._texts = {Symbol.parse(k): list(v) for k, v in (texts or {}).items()}
        self._templates = list(DEFAULT_TEMPLATES if templates is None else templates)
        self._limit = limit

    async def fetch_snippets(self, symbol: Symbol) -> list[Snippet]:
        if symbol in self._texts:
            texts = self._texts[symbol]
        else:
            texts = [t.format(token=symbol.value) for t in self._templates]

        if self._limit is not None:
            texts = texts[: self._limit]

        return [
            Snippet(symbol=symbol, text=text, source=self.name, source_id=f"static_{i}")
            for i, text in enumerate(texts)
        ]
