"""Free-text to asset symbol resolution."""

from .settings import ResolverSettings
from .token_resolver import TokenResolver

__all__ = ["ResolverSettings", "TokenResolver"]
