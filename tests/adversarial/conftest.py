"""
Shared fixtures for adversarial tests.

Provides an in-memory account directory so enumeration and
concurrency scenarios run without a database.
"""

from dataclasses import dataclass, field

import pytest

from src.adapters.crypto.bcrypt_digest import BcryptPasswordDigest
from src.domain.authentication import CredentialResolver


@dataclass
class InMemoryAccount:
    account_id: str
    email: str
    digest: str | None
    active: bool = True
    verified: bool = True


@dataclass
class InMemoryDirectory:
    """AccountDirectory backed by a dict; safe for concurrent reads."""

    accounts: dict[str, InMemoryAccount] = field(default_factory=dict)

    def add(self, account: InMemoryAccount) -> None:
        self.accounts[account.account_id] = account

    def resolve_id_by_email(self, email: str) -> str | None:
        for account in self.accounts.values():
            if account.email.lower() == email.lower():
                return account.account_id
        return None

    def is_active_and_verified(self, account_id: str) -> bool:
        account = self.accounts.get(account_id)
        return account is not None and account.active and account.verified

    def get_stored_digest(self, account_id: str) -> str | None:
        account = self.accounts.get(account_id)
        return account.digest if account is not None else None


@pytest.fixture(scope="module")
def hasher() -> BcryptPasswordDigest:
    return BcryptPasswordDigest(cost=4)


@pytest.fixture(scope="module")
def accounts(hasher: BcryptPasswordDigest) -> InMemoryDirectory:
    """Directory with one account per failure mode."""
    directory = InMemoryDirectory()
    directory.add(InMemoryAccount("id-good", "good@example.org", hasher.digest("right-password")))
    directory.add(
        InMemoryAccount("id-unverified", "unverified@example.org", hasher.digest("right-password"), verified=False)
    )
    directory.add(
        InMemoryAccount("id-inactive", "inactive@example.org", hasher.digest("right-password"), active=False)
    )
    directory.add(InMemoryAccount("id-nodigest", "nodigest@example.org", None))
    return directory


@pytest.fixture
def memory_resolver(accounts: InMemoryDirectory, hasher: BcryptPasswordDigest) -> CredentialResolver:
    return CredentialResolver(directory=accounts, verifier=hasher)
