"""
Shared fixtures for integration tests.

Requires PostgreSQL to be running (via docker-compose); the whole
directory is skipped when the configured database cannot be reached.
"""

from collections.abc import Generator

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresAccountDirectory, run_migrations
from src.config.settings import get_settings


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool and apply migrations."""
    settings = get_settings()
    try:
        psycopg.connect(settings.database_url, connect_timeout=2).close()
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available: {e}")

    pool = ConnectionPool(conninfo=settings.database_url, min_size=1, max_size=10, open=True)
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def directory(pool: ConnectionPool) -> PostgresAccountDirectory:
    """Create directory instance for each test."""
    return PostgresAccountDirectory(pool)


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean accounts and emails before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM accounts")
        conn.execute("DELETE FROM emails")
        conn.commit()
    yield


@pytest.fixture
def create_account(pool: ConnectionPool):
    """Factory fixture inserting an account and its primary email."""

    def create(
        auth_id: str,
        email: str,
        password: str | None = None,
        *,
        verified: bool = True,
        is_active: bool = True,
        password_reset: bool = False,
        token: str | None = None,
    ) -> None:
        with pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(
                "INSERT INTO emails (email_address, verified) VALUES (%s, %s) RETURNING id",
                (email, verified),
            )
            email_id = cursor.fetchone()[0]
            cursor.execute(
                """
                INSERT INTO accounts
                    (auth_id, email_id, password, is_active, password_reset, verification_token)
                VALUES (%s, %s, %s, %s, %s, %s)
                """,
                (auth_id, email_id, password, is_active, password_reset, token),
            )
            conn.commit()

    return create
