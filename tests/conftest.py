"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A mocked account directory wired for the happy path
- A real bcrypt verifier and a digest of the known-good password
- A resolver built from both
"""

from unittest.mock import Mock

import pytest

from src.adapters.crypto.bcrypt_digest import BcryptPasswordDigest
from src.domain.authentication import CredentialResolver
from tests.known_accounts import CASID, GOOD_PASSWORD


@pytest.fixture(scope="session")
def password_digest() -> BcryptPasswordDigest:
    """bcrypt adapter at the minimum cost factor to keep tests fast."""
    return BcryptPasswordDigest(cost=4)


@pytest.fixture(scope="session")
def stored_digest(password_digest: BcryptPasswordDigest) -> str:
    """Digest of GOOD_PASSWORD as it would be stored for CASID."""
    return password_digest.digest(GOOD_PASSWORD)


@pytest.fixture
def directory(stored_digest: str) -> Mock:
    """Account directory mock: every email resolves to CASID, which is usable."""
    mock = Mock()
    mock.resolve_id_by_email.return_value = CASID
    mock.is_active_and_verified.side_effect = lambda account_id: account_id == CASID
    mock.get_stored_digest.side_effect = (
        lambda account_id: stored_digest if account_id == CASID else None
    )
    return mock


@pytest.fixture
def resolver(directory: Mock, password_digest: BcryptPasswordDigest) -> CredentialResolver:
    return CredentialResolver(directory=directory, verifier=password_digest)
