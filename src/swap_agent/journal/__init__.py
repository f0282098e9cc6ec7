"""Audit journal for consumed nonces and persisted nonce high-water mark."""

from .authorization_journal import AuthorizationJournal
from .models import AuthorizationRecord, AuthorizationStatus
from .nonce_store import NonceStore
from .settings import JournalSettings

__all__ = [
    "AuthorizationJournal",
    "AuthorizationRecord",
    "AuthorizationStatus",
    "JournalSettings",
    "NonceStore",
]
