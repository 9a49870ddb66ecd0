"""
Account maintenance domain service.

Covers the account flows that sit around login: consuming email
verification tokens and replacing a password that an administrator
flagged for reset.
"""

import logging
from dataclasses import dataclass

from .authentication import Credential, CredentialResolver
from .exceptions import PasswordResetNotRequired, raise_for_outcome
from .ports import AccountStore, SecretDigester

logger = logging.getLogger(__name__)


@dataclass
class AccountService:
    """
    Domain service for account maintenance.

    Store faults are not caught here; callers map them.
    """

    store: AccountStore
    digester: SecretDigester
    resolver: CredentialResolver

    def verify_email(self, email: str, token: str) -> bool:
        """
        Consume a pending verification token for an email address.

        Args:
            email: Email address the token was issued for
            token: Verification token

        Returns:
            True if the token matched and was consumed, False otherwise
        """
        email = email.strip()
        if not self.store.verify_token(email, token):
            logger.info("No pending verification token for %s", email)
            return False
        return self.store.remove_token(email, token) > 0

    def change_password(self, credential: Credential, new_secret: str) -> str:
        """
        Replace the password of an account flagged for reset.

        The current credential must authenticate first.

        Returns:
            Canonical account id whose password was replaced

        Raises:
            AuthenticationFailed: If the current credential is rejected
            PasswordResetNotRequired: If the account has no pending reset
            OperationPrevented: If authentication could not be decided
        """
        raise_for_outcome(self.resolver.resolve(credential))

        account_id = credential.username
        if not self.store.is_password_reset_required(account_id):
            raise PasswordResetNotRequired(account_id)

        self.store.update_password(account_id, self.digester.digest(new_secret))
        logger.info("Password replaced for user %s", account_id)
        return account_id

    def display_email(self, account_id: str) -> str | None:
        """Return the email address to show for an authenticated account."""
        return self.store.get_email_by_id(account_id)
