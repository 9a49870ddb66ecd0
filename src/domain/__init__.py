"""
Domain layer - Pure business logic with zero framework imports.

This package contains the credential resolution engine and the account
maintenance flows around it. It defines its own port interfaces for
infrastructure abstraction, ensuring true hexagonal architecture decoupling.
"""

from .accounts import AccountService
from .authentication import Credential, CredentialResolver
from .exceptions import (
    AuthenticationError,
    AuthenticationFailed,
    EmailAddressIncorrect,
    NotVerified,
    OperationPrevented,
    PasswordIncorrect,
    PasswordResetNotRequired,
    raise_for_outcome,
)
from .ports import AccountDirectory, AccountStore, AuthOutcome, SecretDigester, SecretVerifier

__all__ = [
    "AccountDirectory",
    "AccountService",
    "AccountStore",
    "AuthOutcome",
    "AuthenticationError",
    "AuthenticationFailed",
    "Credential",
    "CredentialResolver",
    "EmailAddressIncorrect",
    "NotVerified",
    "OperationPrevented",
    "PasswordIncorrect",
    "PasswordResetNotRequired",
    "SecretDigester",
    "SecretVerifier",
    "raise_for_outcome",
]
