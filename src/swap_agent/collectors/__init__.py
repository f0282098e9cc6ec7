"""Sentiment sources that supply raw snippets for a symbol."""

from .base import SnippetSource
from .static_source import StaticSnippetSource
from .twitter_source import TwitterSnippetSource

__all__ = ["SnippetSource", "StaticSnippetSource", "TwitterSnippetSource"]
