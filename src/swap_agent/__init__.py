"""Sentiment-driven swap agent: decision and authorization pipeline."""

__version__ = "0.1.0"
