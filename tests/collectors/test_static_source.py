# tests/collectors/test_static_source.py
import pytest

from swap_agent.collectors import StaticSnippetSource
from swap_agent.collectors.static_source import DEFAULT_TEMPLATES
from swap_agent.models import Symbol


class TestStaticSnippetSource:
    def test_name(self):
        assert StaticSnippetSource().name == "static"

    @pytest.mark.asyncio
    async def test_templates_render_symbol(self):
        snippets = await StaticSnippetSource().fetch_snippets(Symbol.SOL)

        assert len(snippets) == len(DEFAULT_TEMPLATES)
        assert all("SOL" in s.text for s in snippets)
        assert all(s.symbol == Symbol.SOL for s in snippets)
        assert snippets[0].source_id == "static_0"

    @pytest.mark.asyncio
    async def test_explicit_texts_take_precedence(self):
        source = StaticSnippetSource(texts={"BTC": ["bearish", "selling"]})

        btc = await source.fetch_snippets(Symbol.BTC)
        eth = await source.fetch_snippets(Symbol.ETH)

        assert [s.text for s in btc] == ["bearish", "selling"]
        assert len(eth) == len(DEFAULT_TEMPLATES)

    @pytest.mark.asyncio
    async def test_limit(self):
        snippets = await StaticSnippetSource(limit=2).fetch_snippets(Symbol.ETH)
        assert len(snippets) == 2

    @pytest.mark.asyncio
    async def test_empty_templates(self):
        assert await StaticSnippetSource(templates=[]).fetch_snippets(Symbol.ETH) == []
