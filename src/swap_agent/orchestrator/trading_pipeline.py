# src/swap_agent/orchestrator/trading_pipeline.py
"""Pipeline orchestrator that sequences resolution through submission."""

import asyncio
import logging
from typing import Any

from swap_agent.analyzers.sentiment_aggregator import SentimentAggregator
from swap_agent.analyzers.sentiment_result import AggregateSentiment
from swap_agent.chain.base import ChainClient
from swap_agent.errors import SigningError
from swap_agent.execution.execution_submitter import ExecutionSubmitter
from swap_agent.execution.models import SubmissionOutcome
from swap_agent.gate.policy_gate import PolicyGate
from swap_agent.journal.authorization_journal import AuthorizationJournal
from swap_agent.models.symbol import Symbol
from swap_agent.orchestrator.messages import MessageFormatter
from swap_agent.orchestrator.models import (
    ALLOWED_TRANSITIONS,
    PipelineOutcome,
    PipelineResult,
    PipelineState,
)
from swap_agent.orchestrator.settings import OrchestratorSettings
from swap_agent.planning.models import TradePlan
from swap_agent.planning.trade_planner import TradePlanner
from swap_agent.resolver.token_resolver import TokenResolver
from swap_agent.signing.authorization_signer import AuthorizationSigner
from swap_agent.signing.models import PreparedAuthorization


logger = logging.getLogger(__name__)


class PipelineRun:
    """Single-use state machine for one trading request.

    States only move forward. Once a nonce may be consumed, the rest of the
    run is shielded from cancellation so the signed authorization is still
    submitted and its outcome journaled.
    """

    def __init__(
        self,
        resolver: TokenResolver,
        aggregator: SentimentAggregator,
        planner: TradePlanner,
        gate: PolicyGate,
        signer: AuthorizationSigner,
        submitter: ExecutionSubmitter,
        formatter: MessageFormatter,
        journal: AuthorizationJournal | None = None,
    ):
        self._resolver = resolver
        self._aggregator = aggregator
        self._planner = planner
        self._gate = gate
        self._signer = signer
        self._submitter = submitter
        self._formatter = formatter
        self._journal = journal

        self._state = PipelineState.PENDING
        self._history: list[PipelineState] = [PipelineState.PENDING]
        self._symbol: Symbol | None = None
        self._sentiment: AggregateSentiment | None = None
        self._plan: TradePlan | None = None

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def history(self) -> list[PipelineState]:
        return list(self._history)

    def _transition(self, new_state: PipelineState) -> None:
        allowed = ALLOWED_TRANSITIONS[self._state]
        # Any non-terminal state may fail
        if new_state not in allowed and not (new_state == PipelineState.ERRORED and not self._state.is_terminal):
            raise RuntimeError(f"Illegal pipeline transition {self._state.value} -> {new_state.value}")
        logger.debug(f"Pipeline {self._state.value} -> {new_state.value}")
        self._state = new_state
        self._history.append(new_state)

    async def execute(self, text: str) -> PipelineResult:
        """Run the pipeline for one request.

        Raises:
            RuntimeError: If the run was already used.
        """
        if self._state != PipelineState.PENDING:
            raise RuntimeError("PipelineRun is single-use")

        try:
            return await self._execute(text)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error in {self._state.value} stage: {e!r}")
            return self._errored(stage=self._state.value, detail=str(e) or repr(e))

    async def _execute(self, text: str) -> PipelineResult:
        self._transition(PipelineState.RESOLVING)
        self._symbol = self._resolver.resolve(text)
        logger.info(f"Token identified: {self._symbol.value}")

        self._transition(PipelineState.AGGREGATING)
        self._sentiment = await self._aggregator.aggregate(self._symbol)
        logger.info(
            f"Sentiment for {self._symbol.value}: {self._sentiment.label.value} "
            f"(score={self._sentiment.score:+.3f}, confidence={self._sentiment.confidence:.3f}, "
            f"samples={self._sentiment.sample_count})"
        )

        self._transition(PipelineState.SYNTHESIZING)
        self._plan = self._planner.synthesize(self._symbol, self._sentiment)
        logger.info(
            f"Trade plan: {self._plan.action.value} {self._plan.amount} {self._plan.pair} "
            f"risk={self._plan.risk_tier.value}"
        )

        self._transition(PipelineState.GATING)
        try:
            gate_result = await self._gate.check(self._plan)
        except Exception as e:
            logger.error(f"Gate check failed: {e!r}")
            return self._errored(stage="gating", detail=str(e) or repr(e))

        if not gate_result.should_proceed:
            self._transition(PipelineState.SKIPPED)
            logger.info(f"Gate skip: {gate_result.reason.value}")
            return self._result(
                PipelineOutcome.SKIPPED,
                self._formatter.format_skipped(gate_result.reason, self._plan, self._sentiment),
                skip_reason=gate_result.reason,
            )

        self._transition(PipelineState.SIGNING)
        try:
            prepared = await self._signer.prepare(self._plan)
        except SigningError as e:
            logger.error(f"Signing preparation failed: {e}")
            return self._errored(
                stage="signing",
                detail=str(e),
                message=self._formatter.format_signing_failed(self._symbol),
            )

        task = asyncio.ensure_future(self._sign_and_submit(prepared))
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            if not task.done():
                logger.warning("Request cancelled after signing started; submission continues")
                task.add_done_callback(_log_detached_result)
            raise

    async def _sign_and_submit(self, prepared: PreparedAuthorization) -> PipelineResult:
        minted: list[int] = []
        try:
            signed = await self._signer.finalize(prepared, on_nonce=minted.append)
        except asyncio.CancelledError:
            if minted:
                await self._journal_call(
                    "record_unsigned_spend", minted[0], self._signer.signer_address, self._plan, "signing cancelled"
                )
            raise
        except SigningError as e:
            if e.nonce_consumed and e.nonce is not None:
                await self._journal_call(
                    "record_sign_failure", e.nonce, self._signer.signer_address, self._plan, str(e)
                )
            return self._errored(
                stage="signing",
                detail=str(e),
                nonce_consumed=e.nonce_consumed,
                message=self._formatter.format_signing_failed(self._symbol),
            )

        await self._journal_call("record_signed", signed)

        self._transition(PipelineState.SUBMITTING)
        try:
            submission = await self._submitter.submit(signed)
        except asyncio.CancelledError:
            await self._journal_call("mark_spent_unsubmitted", signed.nonce, "submission cancelled")
            raise

        await self._journal_call("record_outcome", submission)

        common: dict[str, Any] = {
            "authorization": signed.authorization,
            "nonce_consumed": True,
            "submission": submission,
        }
        if submission.outcome == SubmissionOutcome.EXECUTED:
            self._transition(PipelineState.DONE)
            return self._result(
                PipelineOutcome.EXECUTED,
                self._formatter.format_executed(self._plan, submission.transaction_reference),
                transaction_reference=submission.transaction_reference,
                **common,
            )

        if submission.outcome == SubmissionOutcome.REJECTED:
            self._transition(PipelineState.SKIPPED)
            return self._result(
                PipelineOutcome.REJECTED,
                self._formatter.format_rejected(self._plan),
                error_detail=submission.error_detail,
                error_stage="submitting",
                **common,
            )

        self._transition(PipelineState.ERRORED)
        return self._result(
            PipelineOutcome.ERRORED,
            self._formatter.format_submission_unknown(self._plan, signed.nonce),
            error_detail=submission.error_detail,
            error_stage="submitting",
            **common,
        )

    async def _journal_call(self, method: str, *args: Any) -> None:
        if self._journal is None:
            return
        try:
            await getattr(self._journal, method)(*args)
        except Exception as e:
            logger.error(f"Authorization journal {method} failed: {e!r}")

    def _errored(
        self,
        stage: str,
        detail: str,
        nonce_consumed: bool = False,
        message: str | None = None,
    ) -> PipelineResult:
        self._transition(PipelineState.ERRORED)
        return self._result(
            PipelineOutcome.ERRORED,
            message or self._formatter.format_error(self._symbol),
            error_detail=detail,
            error_stage=stage,
            nonce_consumed=nonce_consumed,
        )

    def _result(self, outcome: PipelineOutcome, message: str, **kwargs: Any) -> PipelineResult:
        return PipelineResult(
            outcome=outcome,
            state=self._state,
            message=message,
            symbol=self._symbol,
            sentiment=self._sentiment,
            plan=self._plan,
            **kwargs,
        )


def _log_detached_result(task: "asyncio.Future[PipelineResult]") -> None:
    if task.cancelled():
        logger.warning("Detached submission was cancelled")
        return
    exc = task.exception()
    if exc is not None:
        logger.error(f"Detached submission failed: {exc!r}")
        return
    result = task.result()
    logger.info(f"Detached submission finished: {result.outcome.value} {result.transaction_reference or ''}")


class TradingPipeline:
    """Entry point the host runtime calls with raw user text.

    Holds shared collaborators; every request gets a fresh PipelineRun.
    """

    def __init__(
        self,
        resolver: TokenResolver,
        aggregator: SentimentAggregator,
        planner: TradePlanner,
        gate: PolicyGate,
        signer: AuthorizationSigner,
        submitter: ExecutionSubmitter,
        chain_client: ChainClient,
        journal: AuthorizationJournal | None = None,
        formatter: MessageFormatter | None = None,
        settings: OrchestratorSettings | None = None,
    ):
        self._resolver = resolver
        self._aggregator = aggregator
        self._planner = planner
        self._gate = gate
        self._signer = signer
        self._submitter = submitter
        self._chain = chain_client
        self._settings = settings or OrchestratorSettings()
        self._journal = journal if self._settings.journal_authorizations else None
        self._formatter = formatter or MessageFormatter()

    def new_run(self) -> PipelineRun:
        return PipelineRun(
            resolver=self._resolver,
            aggregator=self._aggregator,
            planner=self._planner,
            gate=self._gate,
            signer=self._signer,
            submitter=self._submitter,
            formatter=self._formatter,
            journal=self._journal,
        )

    async def process_trading_request(self, text: str) -> PipelineResult:
        """Process one free-text trading intent end to end.

        Args:
            text: Raw user input, e.g. "Analyze Ethereum and make a trade".

        Returns:
            PipelineResult with outcome, human message and structured data.
        """
        if not self._settings.enabled:
            return PipelineResult(
                outcome=PipelineOutcome.SKIPPED,
                state=PipelineState.PENDING,
                message="Automated trading is disabled.",
            )

        logger.info("Starting automated trading request")
        result = await self.new_run().execute(text)
        logger.info(f"Trading request finished: {result.outcome.value} ({result.state.value})")
        return result

    async def get_agent_status(self) -> dict[str, Any]:
        """Read-only snapshot of the agent contract and signer.

        Authorized signer and funds are included only when the chain client
        can read them.
        """
        paused, chain_id, authorized_signer, user_funds = await asyncio.gather(
            self._chain.is_paused(),
            self._chain.get_chain_id(),
            self._chain.get_authorized_signer(),
            self._chain.get_user_funds(),
        )
        signer = self._signer.signer_address
        status: dict[str, Any] = {
            "paused": paused,
            "chain_id": chain_id,
            "contract": self._chain.verifying_contract,
            "signer": signer,
            "current_nonce": self._signer.current_nonce,
        }
        if authorized_signer is not None:
            status["authorized_signer"] = authorized_signer
            status["signer_authorized"] = authorized_signer.lower() == signer.lower()
            if not status["signer_authorized"]:
                logger.warning(f"Local signer {signer} is not the contract's authorized signer {authorized_signer}")
        if user_funds is not None:
            status["user_funds"] = user_funds
        if self._journal is not None:
            status["unsettled_nonces"] = [r.nonce for r in await self._journal.get_unsettled()]
        return status
