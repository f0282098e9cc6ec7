# main.py
"""Command-line entry point for the sentiment swap agent."""
import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from swap_agent.analyzers import LexiconScorer, SentimentAggregator
from swap_agent.chain import Web3AgentClient
from swap_agent.collectors import SnippetSource, StaticSnippetSource, TwitterSnippetSource
from swap_agent.config.settings import Settings
from swap_agent.execution import ExecutionSubmitter
from swap_agent.gate import PolicyGate
from swap_agent.journal import AuthorizationJournal, NonceStore
from swap_agent.orchestrator import TradingPipeline
from swap_agent.planning import TradePlanner
from swap_agent.resolver import TokenResolver
from swap_agent.signing import AuthorizationSigner, LocalAccountSigner, NonceCounter


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/settings.yaml")


def validate_env_vars() -> None:
    """Validate required environment variables are set.

    Raises:
        SystemExit: If any required env var is missing.
    """
    required_vars = [
        "AGENT_RPC_URL",
        "AGENT_PRIVATE_KEY",
        "AGENT_CONTRACT_ADDRESS",
    ]

    missing = [var for var in required_vars if not os.getenv(var)]

    if missing:
        logger.error(f"Missing required environment variables: {', '.join(missing)}")
        logger.error("Please check your .env file")
        sys.exit(1)


def create_data_dirs(settings: Settings) -> None:
    """Create journal and nonce directories if they don't exist."""
    Path(settings.journal.data_dir).mkdir(parents=True, exist_ok=True)
    Path(settings.journal.nonce_file).parent.mkdir(parents=True, exist_ok=True)


def load_and_validate_config(config_path: Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load and validate configuration.

    Falls back to defaults when the YAML file does not exist.

    Raises:
        SystemExit: If env vars are missing or YAML parsing fails.
    """
    load_dotenv()
    validate_env_vars()

    if config_path.exists():
        try:
            settings = Settings.from_yaml(config_path)
            logger.info(f"✓ Settings loaded from {config_path}")
        except Exception as e:
            logger.error(f"Failed to parse {config_path}: {e}")
            sys.exit(1)
    else:
        settings = Settings()
        logger.info(f"{config_path} not found, using defaults")

    logging.getLogger().setLevel(settings.system.log_level.upper())
    create_data_dirs(settings)
    return settings


async def build_source(settings: Settings) -> SnippetSource:
    if settings.source.kind == "twitter":
        source = TwitterSnippetSource(limit=settings.source.twitter_limit)
        await source.connect()
        logger.info("✓ Twitter source connected")
        return source
    logger.info("✓ Static sentiment source")
    return StaticSnippetSource(limit=settings.source.static_limit)


async def build_pipeline(settings: Settings) -> TradingPipeline:
    """Wire collaborators and recover the nonce counter."""
    chain_client = Web3AgentClient(
        rpc_url=settings.chain.rpc_url,
        contract_address=settings.chain.contract_address,
        private_key=settings.chain.private_key,
        receipt_timeout_seconds=settings.chain.receipt_timeout_seconds,
    )
    typed_signer = LocalAccountSigner(settings.chain.private_key)

    nonce_store = NonceStore(settings.journal.nonce_file, signer=typed_signer.address)
    nonce_counter = await NonceCounter.recover(store=nonce_store, chain_client=chain_client)

    journal = AuthorizationJournal(settings.journal) if settings.journal.enabled else None
    if journal is not None:
        unsettled = await journal.get_unsettled()
        if unsettled:
            logger.warning(f"{len(unsettled)} authorizations need reconciliation: {[r.nonce for r in unsettled]}")

    source = await build_source(settings)
    return TradingPipeline(
        resolver=TokenResolver(settings.resolver),
        aggregator=SentimentAggregator(
            source=source,
            scorer=LexiconScorer(settings.aggregator),
            settings=settings.aggregator,
        ),
        planner=TradePlanner(settings.planner),
        gate=PolicyGate(chain_client, settings.gate),
        signer=AuthorizationSigner(
            chain_client=chain_client,
            typed_data_signer=typed_signer,
            nonce_counter=nonce_counter,
            settings=settings.signer,
        ),
        submitter=ExecutionSubmitter(chain_client, settings.execution),
        chain_client=chain_client,
        journal=journal,
        settings=settings.orchestrator,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sentiment-driven swap agent")
    parser.add_argument("text", nargs="*", help="Trading request, e.g. 'Analyze Ethereum and make a trade'")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--status", action="store_true", help="Print agent status and exit")
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = load_and_validate_config(args.config)

    logger.info("=" * 60)
    logger.info(f"Starting {settings.system.name} v{settings.system.version}")
    logger.info("=" * 60)

    pipeline = await build_pipeline(settings)

    if args.status:
        status = await pipeline.get_agent_status()
        for key, value in status.items():
            print(f"{key}: {value}")
        return 0

    text = " ".join(args.text) or "Analyze ETH and make a trade"
    result = await pipeline.process_trading_request(text)
    print(result.message)
    if result.error_detail:
        logger.info(f"Detail ({result.error_stage}): {result.error_detail}")
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
