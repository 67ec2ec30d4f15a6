"""
Tests for the data_access layer.

SQLite tests run against a temporary database file; the PostgreSQL path
is exercised by mocking the connection.
"""

import sqlite3
import sys
import os
from unittest.mock import Mock, patch, MagicMock

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data_access import BestScoreRepository, BestScoreStore, InMemoryBestScoreStore


@pytest.fixture
def sqlite_db(tmp_path, monkeypatch):
    """Point the SQLite backend at a fresh file and hide any Postgres config."""
    for var in ("DATABASE_URL", "PGHOST", "PGUSER", "PGPASSWORD", "PGDATABASE"):
        monkeypatch.delenv(var, raising=False)
    db_path = tmp_path / "scores" / "test.db"
    monkeypatch.setenv("SNAKE_DB_PATH", str(db_path))
    return db_path


class TestDatabase:
    """Tests for database.py."""

    def test_database_path_from_env(self, sqlite_db):
        from database import get_database_path
        assert get_database_path() == str(sqlite_db)
        assert sqlite_db.parent.exists()

    def test_init_database_creates_table(self, sqlite_db):
        from database import init_database
        init_database()
        init_database()  # idempotent

        conn = sqlite3.connect(str(sqlite_db))
        try:
            tables = [row[0] for row in conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table'"
            )]
        finally:
            conn.close()
        assert "best_scores" in tables


class TestBestScoreRepository:
    """Tests for BestScoreRepository against SQLite."""

    def test_missing_profile_returns_none(self, sqlite_db):
        repo = BestScoreRepository()
        repo.ensure_schema()
        assert repo.get_best_score("nobody") is None

    def test_upsert_and_read(self, sqlite_db):
        repo = BestScoreRepository()
        repo.ensure_schema()
        repo.upsert_best_score("default", 12)
        assert repo.get_best_score("default") == 12

    def test_upsert_never_lowers_record(self, sqlite_db):
        """A lower score arriving later does not overwrite a higher one."""
        repo = BestScoreRepository()
        repo.ensure_schema()
        repo.upsert_best_score("default", 12)
        repo.upsert_best_score("default", 5)
        assert repo.get_best_score("default") == 12
        repo.upsert_best_score("default", 20)
        assert repo.get_best_score("default") == 20

    def test_profiles_are_independent(self, sqlite_db):
        repo = BestScoreRepository()
        repo.ensure_schema()
        repo.upsert_best_score("alice", 3)
        repo.upsert_best_score("bob", 8)
        assert repo.get_best_score("alice") == 3
        assert repo.get_best_score("bob") == 8

    def test_delete(self, sqlite_db):
        repo = BestScoreRepository()
        repo.ensure_schema()
        repo.upsert_best_score("default", 4)
        repo.delete_best_score("default")
        assert repo.get_best_score("default") is None

    def test_negative_score_rejected(self, sqlite_db):
        repo = BestScoreRepository()
        with pytest.raises(ValueError):
            repo.upsert_best_score("default", -1)

    @patch('data_access.repositories.base.database_postgres.get_connection')
    @patch('data_access.repositories.base.database_postgres.is_configured', return_value=True)
    def test_postgres_backend_uses_format_placeholders(self, mock_configured, mock_get_conn):
        """With Postgres configured, queries use %s and go through psycopg2."""
        mock_cursor = MagicMock()
        mock_cursor.fetchone.return_value = {'score': 42}
        mock_conn = MagicMock()
        mock_conn.cursor.return_value = mock_cursor
        mock_get_conn.return_value = mock_conn

        result = BestScoreRepository().get_best_score("default")

        assert result == 42
        query = mock_cursor.execute.call_args[0][0]
        assert "%s" in query
        mock_conn.close.assert_called_once()

    @patch('data_access.repositories.base.database_postgres.get_connection')
    @patch('data_access.repositories.base.database_postgres.is_configured', return_value=True)
    def test_rollback_on_error(self, mock_configured, mock_get_conn):
        """A failing write rolls back, closes and re-raises."""
        mock_cursor = MagicMock()
        mock_cursor.execute.side_effect = RuntimeError("boom")
        mock_conn = MagicMock()
        mock_conn.cursor.return_value = mock_cursor
        mock_get_conn.return_value = mock_conn

        with pytest.raises(RuntimeError):
            BestScoreRepository().upsert_best_score("default", 3)

        mock_conn.rollback.assert_called_once()
        mock_conn.commit.assert_not_called()
        mock_conn.close.assert_called_once()


class TestBestScoreStore:
    """Tests for the BestScoreStore persistence collaborator."""

    def test_round_trip_through_sqlite(self, sqlite_db):
        store = BestScoreStore()
        assert store.load_best_score() == 0
        store.save_best_score(7)
        assert BestScoreStore().load_best_score() == 7

    def test_load_failure_defaults_to_zero(self):
        """Storage errors on load are logged and read as 0."""
        repo = Mock()
        repo.get_best_score.side_effect = sqlite3.OperationalError("disk I/O error")
        store = BestScoreStore(repository=repo)
        assert store.load_best_score() == 0

    def test_save_failure_is_swallowed(self):
        """Storage errors on save never reach the caller."""
        repo = Mock()
        repo.upsert_best_score.side_effect = sqlite3.OperationalError("database is locked")
        store = BestScoreStore(repository=repo)
        store.save_best_score(5)
        repo.upsert_best_score.assert_called_once_with("default", 5)

    def test_background_save_completes_on_close(self):
        """Fire-and-forget saves finish before close() returns."""
        repo = Mock()
        store = BestScoreStore(profile="p1", repository=repo, background=True)
        store.save_best_score(11)
        store.close()
        repo.upsert_best_score.assert_called_once_with("p1", 11)

    def test_schema_created_once(self):
        repo = Mock()
        repo.get_best_score.return_value = 3
        store = BestScoreStore(repository=repo)
        assert store.load_best_score() == 3
        store.save_best_score(4)
        repo.ensure_schema.assert_called_once()


class TestInMemoryBestScoreStore:
    """Tests for InMemoryBestScoreStore."""

    def test_keeps_maximum(self):
        store = InMemoryBestScoreStore(initial=5)
        store.save_best_score(3)
        store.save_best_score(9)
        assert store.load_best_score() == 9
        assert store.saves == [3, 9]
