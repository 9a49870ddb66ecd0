"""
Domain exceptions - Semantic error types for authentication.

This module defines domain-specific exceptions that communicate
authentication failures without leaking infrastructure details.
"""

from .ports import AuthOutcome


class AuthenticationError(Exception):
    """Base class for authentication domain errors."""

    pass


class OperationPrevented(AuthenticationError):
    """A collaborator fault prevented an authentication decision."""

    pass


class AuthenticationFailed(AuthenticationError):
    """Credentials were checked and rejected."""

    outcome: AuthOutcome | None = None


class EmailAddressIncorrect(AuthenticationFailed):
    """Unknown identifier, or a raw account id that is not usable."""

    outcome = AuthOutcome.INCORRECT_EMAIL_ADDRESS


class NotVerified(AuthenticationFailed):
    """Email resolved, but the account is inactive or unverified."""

    outcome = AuthOutcome.EMAIL_NOT_VERIFIED


class PasswordIncorrect(AuthenticationFailed):
    """Secret missing on file or not matching."""

    outcome = AuthOutcome.INCORRECT_PASSWORD


class PasswordResetNotRequired(AuthenticationError):
    """Account has no pending password reset."""

    pass


_OUTCOME_ERRORS: dict[AuthOutcome, type[AuthenticationFailed]] = {
    AuthOutcome.INCORRECT_EMAIL_ADDRESS: EmailAddressIncorrect,
    AuthOutcome.EMAIL_NOT_VERIFIED: NotVerified,
    AuthOutcome.INCORRECT_PASSWORD: PasswordIncorrect,
}


def raise_for_outcome(outcome: AuthOutcome) -> None:
    """
    Translate a negative AuthOutcome into its exception.

    SUCCESS is a no-op, so boundary code can call this unconditionally.

    Raises:
        AuthenticationFailed: Subclass matching the outcome
    """
    if outcome is AuthOutcome.SUCCESS:
        return
    raise _OUTCOME_ERRORS.get(outcome, AuthenticationFailed)(outcome.value)
