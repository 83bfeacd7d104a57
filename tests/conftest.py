"""Shared test fixtures for HintDB."""

import os
from collections.abc import Generator

import pytest

from hintdb import Escaper, HintDB, Substitutor


def _psycopg_available() -> bool:
    """Check if psycopg is installed."""
    try:
        import psycopg  # noqa: F401

        return True
    except ImportError:
        return False


def _postgresql_connectable(url: str) -> bool:
    """Check if we can connect to PostgreSQL."""
    if not _psycopg_available():
        return False
    try:
        from hintdb.core.connection import DatabaseConnection

        conn = DatabaseConnection(url)
        result = conn.test_connection()
        conn.close()
        return result
    except Exception:
        return False


@pytest.fixture
def postgresql_url() -> str:
    """Get PostgreSQL URL from environment or use default.

    Tests using this fixture are skipped when psycopg or the server is missing.
    """
    url = os.environ.get("TEST_DATABASE_URL")
    if not url:
        url = "postgresql://localhost/hintdb_test"

    if not _psycopg_available():
        pytest.skip("psycopg not installed")

    if not _postgresql_connectable(url):
        pytest.skip(f"Cannot connect to PostgreSQL at {url}")

    return url


@pytest.fixture
def escaper() -> Escaper:
    """Escaper using standard quote doubling (no connection needed)."""
    return Escaper()


@pytest.fixture
def substitutor(escaper: Escaper) -> Substitutor:
    """Substitutor without a database."""
    return Substitutor(escaper)


@pytest.fixture
def memory_db() -> Generator[HintDB, None, None]:
    """Create a HintDB instance with SQLite in-memory and a users table."""
    database = HintDB("sqlite:///:memory:")
    database.query("CREATE TABLE ?n (id INTEGER PRIMARY KEY, name TEXT, city TEXT)", "users")
    database.query("INSERT INTO ?n ?v", "users", {"id": 1, "name": "Ann", "city": "Oslo"})
    database.query("INSERT INTO ?n ?v", "users", {"id": 2, "name": "O'Brien", "city": "Dublin"})
    database.query("INSERT INTO ?n ?v", "users", {"id": 3, "name": "Bo", "city": "Oslo"})
    yield database
    database.close()


@pytest.fixture
def pg_db(postgresql_url: str) -> Generator[HintDB, None, None]:
    """Create a HintDB instance with PostgreSQL.

    The postgresql_url fixture handles skipping when PostgreSQL isn't available.
    """
    database = HintDB(postgresql_url)
    database.query("DROP TABLE IF EXISTS ?n", "hintdb_users")
    database.query("CREATE TABLE ?n (id integer PRIMARY KEY, name text)", "hintdb_users")
    yield database
    database.query("DROP TABLE IF EXISTS ?n", "hintdb_users")
    database.close()
