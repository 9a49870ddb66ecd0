"""
PostgreSQL directory adapter - Implements AccountDirectory and AccountStore.

This module provides the PostgreSQL implementation of the domain's
account ports using psycopg3 with raw SQL.

Fault Reporting:
----------------
Lookups never translate a database error into "not found". Any psycopg
error propagates to the caller so the domain can tell an unreachable
database apart from an unknown account. A missing row is the only thing
reported as None/False.

Email and account id matching is case-insensitive (LOWER() on both sides).
"""

import logging
from pathlib import Path

from psycopg_pool import ConnectionPool

logger = logging.getLogger(__name__)


class PostgresAccountDirectory:
    """
    Implements AccountDirectory and AccountStore protocols via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize directory with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def resolve_id_by_email(self, email: str) -> str | None:
        sql = """
            SELECT a.auth_id
            FROM accounts a
            JOIN emails e ON a.email_id = e.id
            WHERE LOWER(e.email_address) = LOWER(%s)
        """
        return self._fetch_value(sql, (email,))

    def is_active_and_verified(self, account_id: str) -> bool:
        sql = """
            SELECT COUNT(*)
            FROM accounts a
            JOIN emails e ON a.email_id = e.id
            WHERE a.auth_id = %s AND e.verified AND a.is_active
        """
        logger.debug("Checking whether user %s is verified and active", account_id)
        return (self._fetch_value(sql, (account_id,)) or 0) > 0

    def get_stored_digest(self, account_id: str) -> str | None:
        sql = "SELECT password FROM accounts WHERE LOWER(auth_id) = LOWER(%s)"
        return self._fetch_value(sql, (account_id,))

    def get_email_by_id(self, account_id: str) -> str | None:
        sql = """
            SELECT e.email_address
            FROM accounts a
            JOIN emails e ON a.email_id = e.id
            WHERE LOWER(a.auth_id) = LOWER(%s)
        """
        return self._fetch_value(sql, (account_id,))

    def verify_token(self, email: str, token: str) -> bool:
        sql = """
            SELECT COUNT(*)
            FROM accounts a
            JOIN emails e ON a.email_id = e.id
            WHERE LOWER(e.email_address) = LOWER(%s)
              AND LOWER(a.verification_token) = LOWER(%s)
        """
        logger.debug("Checking verification token for %s", email)
        return (self._fetch_value(sql, (email, token)) or 0) > 0

    def remove_token(self, email: str, token: str) -> int:
        """
        Consume a verification token and mark its email verified.

        Both updates run in one transaction.

        Returns:
            Number of accounts whose token was cleared
        """
        clear_sql = """
            UPDATE accounts a
            SET verification_token = NULL, last_modified = NOW()
            FROM emails e
            WHERE a.email_id = e.id
              AND LOWER(e.email_address) = LOWER(%s)
              AND LOWER(a.verification_token) = LOWER(%s)
            RETURNING e.id
        """
        verify_sql = "UPDATE emails SET verified = TRUE WHERE id = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(clear_sql, (email, token))
            email_ids = [row[0] for row in cursor.fetchall()]
            for email_id in email_ids:
                cursor.execute(verify_sql, (email_id,))
            conn.commit()
            return len(email_ids)

    def is_password_reset_required(self, account_id: str) -> bool:
        sql = "SELECT COUNT(*) FROM accounts WHERE auth_id = %s AND password_reset"
        return (self._fetch_value(sql, (account_id,)) or 0) > 0

    def update_password(self, account_id: str, digest: str) -> None:
        sql = """
            UPDATE accounts
            SET password = %s, password_reset = FALSE, last_modified = NOW()
            WHERE auth_id = %s
        """
        logger.debug("Updating password for user %s", account_id)
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (digest, account_id))
            conn.commit()

    def _fetch_value(self, sql: str, params: tuple):
        """Run a query and return the first column of the first row, or None."""
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, params)
            row = cursor.fetchone()
            return row[0] if row is not None else None


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            with pool.connection() as conn:
                conn.execute(sql_file.read_text())
            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
