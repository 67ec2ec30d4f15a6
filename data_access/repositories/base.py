"""
Base repository with connection management.

Provides a context manager for database connections that handles:
- Backend selection (PostgreSQL when configured, SQLite otherwise)
- Automatic connection cleanup
- Transaction commit on success
- Transaction rollback on failure
"""

from contextlib import contextmanager
from typing import Generator, Any

import database
import database_postgres


def get_connection():
    """Open a connection to whichever backend the environment selects."""
    if database_postgres.is_configured():
        return database_postgres.get_connection()
    return database.get_connection()


def get_placeholder() -> str:
    """DB-API parameter marker for the active backend."""
    return "%s" if database_postgres.is_configured() else "?"


class BaseRepository:
    """
    Base class for all repositories.

    Provides connection management via context manager pattern.
    Subclasses should use self.connection() to get database connections
    and self.placeholder when building parameterised SQL.
    """

    @property
    def placeholder(self) -> str:
        return get_placeholder()

    @contextmanager
    def connection(self, auto_commit: bool = True) -> Generator[Any, None, None]:
        """
        Context manager for database connections.

        Automatically handles:
        - Committing on successful exit (if auto_commit=True)
        - Rolling back on exception
        - Closing the connection in all cases

        Yields:
            A tuple of (connection, cursor) for database operations.

        Example:
            with self.connection() as (conn, cursor):
                cursor.execute("SELECT score FROM best_scores")
                results = cursor.fetchall()
        """
        conn = get_connection()
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if auto_commit:
                conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    @contextmanager
    def read_connection(self) -> Generator[Any, None, None]:
        """
        Same as connection() but never commits.

        Yields:
            A tuple of (connection, cursor) for database operations.
        """
        conn = get_connection()
        cursor = conn.cursor()
        try:
            yield conn, cursor
        finally:
            cursor.close()
            conn.close()
