"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from enum import Enum
from typing import Protocol


class AuthOutcome(str, Enum):
    """
    Result of a credential resolution attempt.

    Negative outcomes are ordinary return values, not errors. Infrastructure
    faults are reported separately via OperationPrevented.
    """

    SUCCESS = "success"
    INCORRECT_EMAIL_ADDRESS = "incorrect_email_address"
    EMAIL_NOT_VERIFIED = "email_not_verified"
    INCORRECT_PASSWORD = "incorrect_password"


class AccountDirectory(Protocol):
    """Port interface for the account lookups needed to authenticate."""

    def resolve_id_by_email(self, email: str) -> str | None:
        """
        Look up the canonical account id for an email address.

        Matching is case-insensitive on the email value.

        Returns:
            Canonical account id, or None if no account owns the email
        """
        ...

    def is_active_and_verified(self, account_id: str) -> bool:
        """
        Check that the account is active AND its primary email is verified.

        Args:
            account_id: Canonical account id
        """
        ...

    def get_stored_digest(self, account_id: str) -> str | None:
        """
        Fetch the stored secret digest for an account.

        Returns:
            Digest string, or None if no secret is set
        """
        ...


class AccountStore(Protocol):
    """Port interface for account maintenance (tokens, password resets)."""

    def get_email_by_id(self, account_id: str) -> str | None:
        """Return the primary email address for an account id."""
        ...

    def verify_token(self, email: str, token: str) -> bool:
        """Return True if the verification token is pending for the email."""
        ...

    def remove_token(self, email: str, token: str) -> int:
        """
        Consume a verification token and mark the email verified.

        Returns:
            Number of accounts updated (0 or 1)
        """
        ...

    def is_password_reset_required(self, account_id: str) -> bool:
        """Return True if the account is flagged for a password reset."""
        ...

    def update_password(self, account_id: str, digest: str) -> None:
        """Store a new secret digest and clear the reset flag."""
        ...


class SecretVerifier(Protocol):
    """Port interface for checking a plaintext secret against a digest."""

    def verify(self, plaintext: str, digest: str) -> bool:
        """
        Compare a plaintext secret against a stored digest.

        Raises:
            ValueError: If the digest is malformed
        """
        ...


class SecretDigester(Protocol):
    """Port interface for producing a digest from a plaintext secret."""

    def digest(self, plaintext: str) -> str:
        """Return a salted one-way digest of the plaintext."""
        ...
