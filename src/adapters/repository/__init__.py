"""Repository adapters - Database implementations."""

from .postgres import PostgresAccountDirectory, run_migrations

__all__ = ["PostgresAccountDirectory", "run_migrations"]
