"""
Credential resolution domain service.

Turns a submitted (username, secret) pair into an AuthOutcome. The username
may be a canonical account id or an email address; email addresses are
resolved to the canonical id before any further check.

Check Order
===========

    1. Identifier present (blank -> INCORRECT_EMAIL_ADDRESS, no lookups)
    2. Email resolves to an account id (else INCORRECT_EMAIL_ADDRESS)
    3. Account active and verified (else EMAIL_NOT_VERIFIED for emails,
       INCORRECT_EMAIL_ADDRESS for raw account ids)
    4. Digest on file (else INCORRECT_PASSWORD, verifier not called)
    5. Secret matches digest (else INCORRECT_PASSWORD)

The order is part of the contract: each outcome value depends on the
checks that ran before it.

Credential Mutation
===================

On SUCCESS the credential's username holds the canonical account id.
On every other result, including OperationPrevented, the username is put
back to what the caller supplied ("" if nothing was supplied), so the
canonical id never reaches a caller whose login failed.
"""

import logging
from dataclasses import dataclass

from .exceptions import OperationPrevented
from .ports import AccountDirectory, AuthOutcome, SecretVerifier

logger = logging.getLogger(__name__)


@dataclass
class Credential:
    """Username/secret pair submitted for a login attempt."""

    username: str | None = None
    secret: str | None = None


def is_empty_or_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_email_username(username: str) -> bool:
    """An '@' anywhere after the first character marks an email address."""
    return username.find("@") > 0


@dataclass
class CredentialResolver:
    """
    Domain service for credential resolution.

    Holds no state between calls; concurrent use is safe as long as the
    injected directory and verifier are.
    """

    directory: AccountDirectory
    verifier: SecretVerifier

    def resolve(self, credential: Credential) -> AuthOutcome:
        """
        Authenticate a credential.

        Args:
            credential: Submitted credential; its username is rewritten
                as described in the module docstring

        Returns:
            AuthOutcome for the attempt

        Raises:
            OperationPrevented: If a directory or verifier call fails
        """
        supplied = credential.username
        try:
            outcome = self._authenticate(credential)
        except OperationPrevented:
            self._restore_username(credential, supplied)
            raise

        if outcome is not AuthOutcome.SUCCESS:
            self._restore_username(credential, supplied)
        return outcome

    def _authenticate(self, credential: Credential) -> AuthOutcome:
        username = credential.username
        if is_empty_or_blank(username):
            logger.warning("Undefined username for credential")
            return AuthOutcome.INCORRECT_EMAIL_ADDRESS

        try:
            is_email = is_email_username(username)
            if is_email:
                account_id = self.directory.resolve_id_by_email(username)
                if is_empty_or_blank(account_id):
                    logger.info("Unable to find account id for email address %s", username)
                    return AuthOutcome.INCORRECT_EMAIL_ADDRESS
                username = account_id
                credential.username = account_id

            if not self.directory.is_active_and_verified(username):
                logger.info("User %s not active or not verified", username)
                if is_email:
                    return AuthOutcome.EMAIL_NOT_VERIFIED
                return AuthOutcome.INCORRECT_EMAIL_ADDRESS

            digest = self.directory.get_stored_digest(username)
            if is_empty_or_blank(digest):
                logger.warning("No password on file for user %s", username)
                return AuthOutcome.INCORRECT_PASSWORD

            if not self.verifier.verify(credential.secret or "", digest):
                logger.info("Submitted password does not match for user %s", username)
                return AuthOutcome.INCORRECT_PASSWORD
        except Exception as e:
            message = f"Problem authenticating user={username}"
            logger.error(message, exc_info=True)
            raise OperationPrevented(message) from e

        return AuthOutcome.SUCCESS

    def _restore_username(self, credential: Credential, supplied: str | None) -> None:
        credential.username = supplied if supplied is not None else ""
