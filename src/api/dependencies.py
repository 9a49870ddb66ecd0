"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from psycopg_pool import ConnectionPool

from src.adapters.crypto.bcrypt_digest import BcryptPasswordDigest
from src.adapters.repository.postgres import PostgresAccountDirectory
from src.config.settings import Settings, get_settings
from src.domain.accounts import AccountService
from src.domain.authentication import Credential, CredentialResolver


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_account_directory(request: Request) -> PostgresAccountDirectory:
    """Create account directory with connection pool from app state."""
    return PostgresAccountDirectory(get_pool(request))


def get_password_digest(settings: Settings = Depends(get_settings)) -> BcryptPasswordDigest:
    """Create bcrypt digest adapter using the configured cost factor."""
    return BcryptPasswordDigest(cost=settings.bcrypt_cost)


def get_credential_resolver(
    directory: PostgresAccountDirectory = Depends(get_account_directory),
    digest: BcryptPasswordDigest = Depends(get_password_digest),
) -> CredentialResolver:
    """Wire the credential resolver to the directory and bcrypt verifier."""
    return CredentialResolver(directory=directory, verifier=digest)


def get_account_service(
    directory: PostgresAccountDirectory = Depends(get_account_directory),
    digest: BcryptPasswordDigest = Depends(get_password_digest),
    resolver: CredentialResolver = Depends(get_credential_resolver),
) -> AccountService:
    """Create account service sharing the resolver's directory."""
    return AccountService(store=directory, digester=digest, resolver=resolver)


# HTTP BASIC AUTH security scheme for OpenAPI documentation
http_basic = HTTPBasic()


def get_credential(
    credentials: HTTPBasicCredentials = Depends(http_basic),
) -> Credential:
    """
    Build a Credential from the HTTP BASIC AUTH header.

    The username is passed through untouched: it may be an account id,
    and it is echoed back to the client on failure.
    """
    return Credential(username=credentials.username, secret=credentials.password)
