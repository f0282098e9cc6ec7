# src/swap_agent/orchestrator/settings.py
"""Configuration for the pipeline orchestrator."""

from pydantic import BaseModel


class OrchestratorSettings(BaseModel):
    """Settings for TradingPipeline."""

    enabled: bool = True
    journal_authorizations: bool = True
