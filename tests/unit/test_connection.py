"""Tests for database connection."""

import pytest

from hintdb.core.connection import DatabaseConnection, _normalize_postgresql_url
from hintdb.exceptions import ConnectionError


class TestDatabaseConnection:
    """Tests for DatabaseConnection class."""

    def test_sqlite_connection(self):
        """Can connect to SQLite."""
        conn = DatabaseConnection("sqlite:///:memory:")
        assert conn.test_connection() is True
        assert conn.dialect == "sqlite"
        conn.close()

    def test_engine_created_lazily(self):
        """Engine is not created until accessed."""
        conn = DatabaseConnection("sqlite:///:memory:")
        assert conn._engine is None
        _ = conn.engine
        assert conn._engine is not None
        conn.close()

    def test_context_manager(self):
        """Can use as context manager."""
        with DatabaseConnection("sqlite:///:memory:") as conn:
            assert conn.test_connection() is True

    def test_close_disposes_engine(self):
        """Closing disposes engine and connection."""
        conn = DatabaseConnection("sqlite:///:memory:")
        _ = conn.connection
        conn.close()
        assert conn._engine is None
        assert conn._connection is None

    def test_execute_autocommits(self, tmp_path):
        """Statements are committed without an explicit transaction."""
        url = f"sqlite:///{tmp_path / 'test.db'}"
        conn = DatabaseConnection(url)
        conn.execute("CREATE TABLE t (v TEXT)")
        conn.execute("INSERT INTO t VALUES ('a')")
        conn.close()

        conn = DatabaseConnection(url)
        assert conn.execute("SELECT v FROM t").scalar() == "a"
        conn.close()

    def test_sqlite_escape_string(self):
        """SQLite uses standard quote doubling."""
        with DatabaseConnection("sqlite:///:memory:") as conn:
            assert conn.escape_string("O'Brien") == "O''Brien"

    def test_invalid_url(self):
        """Invalid URL raises ConnectionError."""
        conn = DatabaseConnection("invalid://not-a-real-db")
        with pytest.raises(ConnectionError):
            conn.test_connection()

    def test_normalize_postgresql_url(self):
        assert _normalize_postgresql_url("postgresql://u@h/db") == "postgresql+psycopg://u@h/db"
        assert _normalize_postgresql_url("postgresql+psycopg2://u@h/db") == (
            "postgresql+psycopg2://u@h/db"
        )
        assert _normalize_postgresql_url("sqlite:///x.db") == "sqlite:///x.db"


class TestPostgreSQLConnection:
    """Tests that need a PostgreSQL server (skipped when unavailable)."""

    def test_postgresql_connection(self, postgresql_url: str):
        conn = DatabaseConnection(postgresql_url)
        assert conn.test_connection() is True
        assert conn.dialect == "postgresql"
        conn.close()

    def test_libpq_escape_string(self, postgresql_url: str):
        with DatabaseConnection(postgresql_url) as conn:
            assert conn.escape_string("O'Brien") == "O''Brien"
