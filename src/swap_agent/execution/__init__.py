"""Swap submission and result reconciliation."""

from .execution_submitter import ExecutionSettings, ExecutionSubmitter
from .models import SubmissionOutcome, SubmissionResult

__all__ = ["ExecutionSettings", "ExecutionSubmitter", "SubmissionOutcome", "SubmissionResult"]
