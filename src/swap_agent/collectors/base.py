# src/swap_agent/collectors/base.py
from abc import ABC, abstractmethod

from swap_agent.models.snippet import Snippet
from swap_agent.models.symbol import Symbol


class SnippetSource(ABC):
    """Abstract base class for all sentiment sources."""

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    async def fetch_snippets(self, symbol: Symbol) -> list[Snippet]:
        """Return recent snippets mentioning the symbol.

        May return an empty list; callers must not treat that as an error.
        """
        pass
