# src/swap_agent/journal/authorization_journal.py
"""Journal of consumed nonces, persisted to daily JSON files."""
import asyncio
import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any

import aiofiles

from swap_agent.execution.models import SubmissionOutcome, SubmissionResult
from swap_agent.journal.models import AuthorizationRecord, AuthorizationStatus
from swap_agent.journal.settings import JournalSettings
from swap_agent.planning.models import TradePlan
from swap_agent.signing.models import SignedAuthorization


logger = logging.getLogger(__name__)


_OUTCOME_STATUS = {
    SubmissionOutcome.EXECUTED: AuthorizationStatus.EXECUTED,
    SubmissionOutcome.REJECTED: AuthorizationStatus.REJECTED,
    SubmissionOutcome.FAILED: AuthorizationStatus.FAILED,
}


class AuthorizationJournal:
    """Keeps one record per consumed nonce.

    Stores records in daily JSON files: {data_dir}/{YYYY-MM-DD}.json, keyed
    by the day the nonce was consumed. Used by operators to reconcile nonces
    whose on-chain outcome is unknown.
    """

    def __init__(self, settings: JournalSettings) -> None:
        self._settings = settings
        self._data_dir = Path(settings.data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._lock = asyncio.Lock()
        self._nonce_days: dict[int, date] = {}

    def _get_file_path(self, day: date) -> Path:
        return self._data_dir / f"{day.isoformat()}.json"

    async def _read_entries(self, day: date) -> list[dict]:
        file_path = self._get_file_path(day)
        if not file_path.exists():
            return []

        async with aiofiles.open(file_path, "r") as f:
            content = await f.read()
            return json.loads(content)

    async def _write_entries(self, day: date, entries: list[dict]) -> None:
        file_path = self._get_file_path(day)
        async with aiofiles.open(file_path, "w") as f:
            await f.write(json.dumps(entries, indent=2, default=str))

    def _record_to_dict(self, record: AuthorizationRecord) -> dict:
        return {
            "nonce": record.nonce,
            "status": record.status.value,
            "signer": record.signer,
            "created_at": record.created_at.isoformat(),
            "updated_at": record.updated_at.isoformat(),
            "plan": record.plan,
            "authorization": record.authorization,
            "digest": record.digest,
            "transaction_reference": record.transaction_reference,
            "detail": record.detail,
        }

    def _dict_to_record(self, data: dict) -> AuthorizationRecord:
        return AuthorizationRecord(
            nonce=data["nonce"],
            status=AuthorizationStatus(data["status"]),
            signer=data["signer"],
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
            plan=data.get("plan") or {},
            authorization=data.get("authorization"),
            digest=data.get("digest"),
            transaction_reference=data.get("transaction_reference"),
            detail=data.get("detail"),
        )

    async def _append(self, record: AuthorizationRecord) -> AuthorizationRecord:
        day = record.created_at.date()
        async with self._lock:
            entries = await self._read_entries(day)
            entries.append(self._record_to_dict(record))
            await self._write_entries(day, entries)
            self._nonce_days[record.nonce] = day
        return record

    async def _find_day(self, nonce: int) -> date | None:
        if nonce in self._nonce_days:
            return self._nonce_days[nonce]
        for file_path in sorted(self._data_dir.glob("*.json"), reverse=True):
            day = date.fromisoformat(file_path.stem)
            if any(e["nonce"] == nonce for e in await self._read_entries(day)):
                return day
        return None

    async def update_status(
        self,
        nonce: int,
        status: AuthorizationStatus,
        transaction_reference: str | None = None,
        detail: str | None = None,
    ) -> AuthorizationRecord:
        """Move a record to a new status.

        Raises:
            KeyError: If no record exists for the nonce.
        """
        async with self._lock:
            day = await self._find_day(nonce)
            if day is None:
                raise KeyError(f"No journal record for nonce {nonce}")

            entries = await self._read_entries(day)
            for entry in entries:
                if entry["nonce"] == nonce:
                    entry["status"] = status.value
                    entry["updated_at"] = datetime.now().isoformat()
                    if transaction_reference is not None:
                        entry["transaction_reference"] = transaction_reference
                    if detail is not None:
                        entry["detail"] = detail
                    await self._write_entries(day, entries)
                    return self._dict_to_record(entry)

        raise KeyError(f"No journal record for nonce {nonce}")

    async def record_signed(self, signed: SignedAuthorization) -> AuthorizationRecord:
        """Record a freshly signed authorization."""
        auth = signed.authorization
        authorization: dict[str, Any] = {
            "token_out": auth.token_out,
            "amount_in": str(auth.amount_in),
            "min_amount_out": str(auth.min_amount_out),
            "deadline": auth.deadline,
            "nonce": auth.nonce,
            "chain_id": signed.domain.get("chainId"),
            "verifying_contract": signed.domain.get("verifyingContract"),
        }
        record = AuthorizationRecord(
            nonce=auth.nonce,
            status=AuthorizationStatus.SIGNED,
            signer=signed.signature.signer,
            plan=signed.plan.to_dict(),
            authorization=authorization,
            digest=signed.signature.digest,
        )
        return await self._append(record)

    async def record_sign_failure(
        self, nonce: int, signer: str, plan: TradePlan, detail: str
    ) -> AuthorizationRecord:
        """Record a nonce burned by a failed signature."""
        record = AuthorizationRecord(
            nonce=nonce,
            status=AuthorizationStatus.SIGN_FAILED,
            signer=signer,
            plan=plan.to_dict(),
            detail=detail,
        )
        return await self._append(record)

    async def record_unsigned_spend(
        self, nonce: int, signer: str, plan: TradePlan, detail: str
    ) -> AuthorizationRecord:
        """Record a nonce minted for a signature that never completed.

        Nothing reached the contract; the nonce stays burned.
        """
        record = AuthorizationRecord(
            nonce=nonce,
            status=AuthorizationStatus.SPENT_UNSUBMITTED,
            signer=signer,
            plan=plan.to_dict(),
            detail=detail,
        )
        return await self._append(record)

    async def record_outcome(self, result: SubmissionResult) -> AuthorizationRecord:
        """Apply a submission result to its nonce record."""
        return await self.update_status(
            result.nonce,
            _OUTCOME_STATUS[result.outcome],
            transaction_reference=result.transaction_reference or result.reverted_transaction,
            detail=result.error_detail,
        )

    async def mark_spent_unsubmitted(self, nonce: int, detail: str) -> AuthorizationRecord:
        return await self.update_status(nonce, AuthorizationStatus.SPENT_UNSUBMITTED, detail=detail)

    async def get_entries(self, day: date) -> list[AuthorizationRecord]:
        """Return all records consumed on a given day."""
        return [self._dict_to_record(e) for e in await self._read_entries(day)]

    async def get_record(self, nonce: int) -> AuthorizationRecord | None:
        day = await self._find_day(nonce)
        if day is None:
            return None
        for record in await self.get_entries(day):
            if record.nonce == nonce:
                return record
        return None

    async def get_unsettled(self) -> list[AuthorizationRecord]:
        """Records whose on-chain outcome must be reconciled by hand."""
        unsettled = []
        for file_path in sorted(self._data_dir.glob("*.json")):
            day = date.fromisoformat(file_path.stem)
            unsettled.extend(r for r in await self.get_entries(day) if r.status.needs_reconciliation)
        return sorted(unsettled, key=lambda r: r.nonce)
