"""Application configuration."""

from .settings import ChainConfig, Settings, SourceConfig

__all__ = ["ChainConfig", "Settings", "SourceConfig"]
