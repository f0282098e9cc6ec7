# tests/config/test_settings.py
"""Tests for application settings."""

from decimal import Decimal

import pytest
import yaml
from pydantic import ValidationError

from swap_agent.config import ChainConfig, Settings, SourceConfig
from swap_agent.models import Symbol
from swap_agent.planning import SizingMode


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.source.kind == "static"
        assert settings.resolver.default_symbol == Symbol.ETH
        assert settings.aggregator.base_confidence == 0.5
        assert settings.planner.action_confidence_threshold == 0.6
        assert settings.signer.slippage_tolerance == 0.02
        assert settings.signer.execution_window_seconds == 3600
        assert settings.gate.fail_safe_closed is True
        assert settings.orchestrator.enabled is True

    def test_invalid_source_kind(self) -> None:
        with pytest.raises(ValidationError):
            SourceConfig(kind="reddit")

    def test_invalid_slippage(self) -> None:
        with pytest.raises(ValidationError):
            Settings(signer={"slippage_tolerance": 1.0})


class TestChainConfig:
    def test_reads_prefixed_env(self, monkeypatch) -> None:
        monkeypatch.setenv("AGENT_RPC_URL", "https://rpc.example")
        monkeypatch.setenv("AGENT_CONTRACT_ADDRESS", "0x5FbDB2315678afecb367f032d93F642f64180aa3")
        monkeypatch.setenv("AGENT_RECEIPT_TIMEOUT_SECONDS", "30")

        config = ChainConfig()

        assert config.rpc_url == "https://rpc.example"
        assert config.contract_address == "0x5FbDB2315678afecb367f032d93F642f64180aa3"
        assert config.receipt_timeout_seconds == 30.0


class TestFromYaml:
    def test_loads_sections(self, tmp_path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(
            yaml.safe_dump(
                {
                    "system": {"log_level": "DEBUG"},
                    "source": {"kind": "twitter", "twitter_limit": 50},
                    "signer": {"slippage_tolerance": 0.05},
                    "journal": {"data_dir": "tmp/auth"},
                }
            )
        )

        settings = Settings.from_yaml(path)

        assert settings.system.log_level == "DEBUG"
        assert settings.source.kind == "twitter"
        assert settings.source.twitter_limit == 50
        assert settings.signer.slippage_tolerance == 0.05
        assert settings.journal.data_dir == "tmp/auth"

    def test_planner_profile_with_overrides(self, tmp_path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({"planner": {"profile": "analysis", "base_amount": "0.5"}}))

        settings = Settings.from_yaml(path)

        assert settings.planner.action_confidence_threshold == 0.0
        assert settings.planner.sizing_mode == SizingMode.FIXED
        assert settings.planner.base_amount == Decimal("0.5")

    def test_chain_section_comes_from_env(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("AGENT_RPC_URL", "https://env.example")
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({"chain": {"rpc_url": "https://yaml.example"}}))

        settings = Settings.from_yaml(path)

        assert settings.chain.rpc_url == "https://env.example"

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert Settings.from_yaml(path).planner == Settings().planner

    def test_unknown_profile(self, tmp_path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({"planner": {"profile": "yolo"}}))
        with pytest.raises(ValueError):
            Settings.from_yaml(path)
