"""Nonce-scoped typed-data authorization signing."""

from .authorization_signer import AuthorizationSigner
from .base import TypedDataSigner
from .local_signer import LocalAccountSigner
from .models import Authorization, PreparedAuthorization, SignedAuthorization, TypedDataSignature
from .nonce_counter import NonceCounter
from .settings import SignerSettings
from .token_registry import TokenInfo, TokenRegistry

__all__ = [
    "Authorization",
    "AuthorizationSigner",
    "LocalAccountSigner",
    "NonceCounter",
    "PreparedAuthorization",
    "SignedAuthorization",
    "SignerSettings",
    "TokenInfo",
    "TokenRegistry",
    "TypedDataSignature",
    "TypedDataSigner",
]
