"""
API v1 routes.

Defines REST endpoints for login, email verification and password reset.
"""

import logging

import psycopg
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from src.api.dependencies import (
    get_account_service,
    get_credential,
    get_credential_resolver,
)
from src.api.models import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    EnvironmentResponse,
    ErrorResponse,
    LoginFailureResponse,
    LoginResponse,
    VerifyEmailRequest,
    VerifyEmailResponse,
)
from src.config.settings import Settings, get_settings
from src.domain.accounts import AccountService
from src.domain.authentication import Credential, CredentialResolver
from src.domain.exceptions import (
    AuthenticationFailed,
    OperationPrevented,
    PasswordResetNotRequired,
)
from src.domain.ports import AuthOutcome

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])

FAILURE_MESSAGES = {
    AuthOutcome.INCORRECT_EMAIL_ADDRESS: "Email address not recognized",
    AuthOutcome.EMAIL_NOT_VERIFIED: "Email address not verified",
    AuthOutcome.INCORRECT_PASSWORD: "Incorrect password",
}

UNAVAILABLE_DETAIL = "Authentication temporarily unavailable"


def _login_failure(outcome: AuthOutcome, username: str | None) -> JSONResponse:
    body = LoginFailureResponse(
        detail=FAILURE_MESSAGES[outcome],
        reason=outcome.value,
        username=username or "",
    )
    return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content=body.model_dump())


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"model": LoginFailureResponse, "description": "Credentials rejected"},
        503: {"model": ErrorResponse, "description": "Authentication could not be decided"},
    },
    summary="Authenticate with email or account id",
    description="Submit username (email address or account id) and password "
    "via HTTP BASIC AUTH. On success the canonical account id is returned.",
)
async def login(
    credential: Credential = Depends(get_credential),
    resolver: CredentialResolver = Depends(get_credential_resolver),
    accounts: AccountService = Depends(get_account_service),
):
    """
    Authenticate a credential.

    Failures echo the submitted username, never the resolved account id.
    """
    try:
        outcome = resolver.resolve(credential)
    except OperationPrevented:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=UNAVAILABLE_DETAIL,
        ) from None

    if outcome is not AuthOutcome.SUCCESS:
        return _login_failure(outcome, credential.username)

    account_id = credential.username
    try:
        email = accounts.display_email(account_id)
    except psycopg.Error:
        # Display only; the login itself already succeeded
        logger.warning("Unable to look up email address for user %s", account_id, exc_info=True)
        email = None
    return LoginResponse(account_id=account_id, email=email)


@router.post(
    "/verify-email",
    response_model=VerifyEmailResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Unknown email or token"},
        503: {"model": ErrorResponse, "description": "Account store unavailable"},
        422: {"description": "Validation error"},
    },
    summary="Verify an email address",
)
async def verify_email(
    request_data: VerifyEmailRequest,
    accounts: AccountService = Depends(get_account_service),
) -> VerifyEmailResponse:
    """Consume the verification token sent to an email address."""
    try:
        verified = accounts.verify_email(request_data.email, request_data.token)
    except psycopg.Error:
        logger.error("Unable to verify email address %s", request_data.email, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=UNAVAILABLE_DETAIL,
        ) from None

    if not verified:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid verification token",
        )
    return VerifyEmailResponse(message="Email verified", email=request_data.email)


@router.post(
    "/password",
    response_model=ChangePasswordResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Credentials rejected"},
        409: {"model": ErrorResponse, "description": "No password reset pending"},
        503: {"model": ErrorResponse, "description": "Authentication could not be decided"},
        422: {"description": "Validation error"},
    },
    summary="Replace a password flagged for reset",
    description="Authenticate with the current credentials via HTTP BASIC AUTH "
    "and submit the new password.",
)
async def change_password(
    request_data: ChangePasswordRequest,
    credential: Credential = Depends(get_credential),
    accounts: AccountService = Depends(get_account_service),
) -> ChangePasswordResponse:
    """Replace the password of an account whose reset flag is set."""
    try:
        account_id = accounts.change_password(credential, request_data.new_password)
    except AuthenticationFailed as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=FAILURE_MESSAGES.get(e.outcome, "Authentication failed"),
        ) from None
    except PasswordResetNotRequired:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="No password reset pending",
        ) from None
    except psycopg.Error:
        logger.error("Unable to store new password", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=UNAVAILABLE_DETAIL,
        ) from None
    except OperationPrevented:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=UNAVAILABLE_DETAIL,
        ) from None
    return ChangePasswordResponse(message="Password updated", account_id=account_id)


@router.get(
    "/environment",
    response_model=EnvironmentResponse,
    summary="Login page environment",
)
async def environment(settings: Settings = Depends(get_settings)) -> EnvironmentResponse:
    """Return the registration link shown on the login page."""
    return EnvironmentResponse(registration_base_url=settings.registration_base_url)
