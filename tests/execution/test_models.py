# tests/execution/test_models.py
"""Tests for execution data models."""

import pytest

from swap_agent.execution import SubmissionOutcome, SubmissionResult


class TestSubmissionResult:
    def test_executed_requires_reference(self) -> None:
        with pytest.raises(ValueError):
            SubmissionResult(outcome=SubmissionOutcome.EXECUTED, nonce=1)

    def test_rejected_must_not_carry_reference(self) -> None:
        with pytest.raises(ValueError):
            SubmissionResult(outcome=SubmissionOutcome.REJECTED, nonce=1, transaction_reference="0xabc")

    def test_success(self) -> None:
        executed = SubmissionResult(outcome=SubmissionOutcome.EXECUTED, nonce=1, transaction_reference="0xabc")
        failed = SubmissionResult(outcome=SubmissionOutcome.FAILED, nonce=2, error_detail="timeout")
        assert executed.success is True
        assert failed.success is False
