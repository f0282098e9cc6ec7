"""Shared value types."""

from .snippet import Snippet
from .symbol import Symbol

__all__ = ["Snippet", "Symbol"]
