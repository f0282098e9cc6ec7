# src/swap_agent/config/settings.py
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from swap_agent.analyzers.settings import AggregatorSettings
from swap_agent.execution.execution_submitter import ExecutionSettings
from swap_agent.gate.policy_gate import GateSettings
from swap_agent.journal.settings import JournalSettings
from swap_agent.orchestrator.settings import OrchestratorSettings
from swap_agent.planning.settings import PlannerSettings
from swap_agent.resolver.settings import ResolverSettings
from swap_agent.signing.settings import SignerSettings


class SystemConfig(BaseModel):
    name: str = "Sentiment Swap Agent"
    version: str = "0.1.0"
    log_level: str = "INFO"


class SourceConfig(BaseModel):
    """Which sentiment source feeds the aggregator."""

    kind: Literal["static", "twitter"] = "static"
    twitter_limit: int = Field(default=20, ge=1, le=200)
    static_limit: int | None = Field(default=None, ge=0)


class ChainConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AGENT_")

    rpc_url: str = "http://localhost:8545"
    private_key: str = ""
    contract_address: str = ""
    receipt_timeout_seconds: float = 120.0


class Settings(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)
    aggregator: AggregatorSettings = Field(default_factory=AggregatorSettings)
    planner: PlannerSettings = Field(default_factory=PlannerSettings)
    gate: GateSettings = Field(default_factory=GateSettings)
    signer: SignerSettings = Field(default_factory=SignerSettings)
    execution: ExecutionSettings = Field(default_factory=ExecutionSettings)
    journal: JournalSettings = Field(default_factory=JournalSettings)
    orchestrator: OrchestratorSettings = Field(default_factory=OrchestratorSettings)
    chain: ChainConfig = Field(default_factory=ChainConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file with env var overrides.

        A ``planner.profile`` key selects a named planner profile; other
        planner keys override it.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        planner_data = data.pop("planner", None) or {}
        profile = planner_data.pop("profile", None)
        base = PlannerSettings.from_profile(profile).model_dump() if profile else {}
        planner = PlannerSettings(**{**base, **planner_data})

        data.pop("chain", None)
        return cls(**data, planner=planner, chain=ChainConfig())
