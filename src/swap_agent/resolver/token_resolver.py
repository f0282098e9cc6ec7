# src/swap_agent/resolver/token_resolver.py
"""Maps free-text trading intents to a canonical symbol."""

import logging

from swap_agent.models.symbol import Symbol
from swap_agent.resolver.settings import ResolverSettings


logger = logging.getLogger(__name__)


class TokenResolver:
    """Case-insensitive substring matcher over a priority-ordered alias table."""

    def __init__(self, settings: ResolverSettings | None = None):
        self._settings = settings or ResolverSettings()

    @property
    def default_symbol(self) -> Symbol:
        return self._settings.default_symbol

    def resolve(self, text: str) -> Symbol:
        """Return the first symbol whose alias appears in the text.

        Args:
            text: Raw user input.

        Returns:
            Matched symbol, or the configured default when nothing matches.
        """
        lowered = (text or "").lower()
        for alias, symbol in self._settings.aliases:
            if alias in lowered:
                return symbol

        logger.debug(f"No token alias in input, defaulting to {self._settings.default_symbol.value}")
        return self._settings.default_symbol
