"""Orchestrator module for sequencing the trading pipeline."""

from .messages import MessageFormatter
from .models import PipelineOutcome, PipelineResult, PipelineState
from .settings import OrchestratorSettings
from .trading_pipeline import PipelineRun, TradingPipeline

__all__ = [
    "MessageFormatter",
    "OrchestratorSettings",
    "PipelineOutcome",
    "PipelineResult",
    "PipelineRun",
    "PipelineState",
    "TradingPipeline",
]
