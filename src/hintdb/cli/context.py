"""CLI context management for database connections and shared state."""

import os
from dataclasses import dataclass, field

from hintdb import HintDB


def get_database_url(url: str | None) -> str:
    """Resolve database URL from CLI arg, environment variable, or default.

    Priority:
    1. Explicit URL argument
    2. HINTDB_URL environment variable
    3. Default: sqlite:///./hintdb.db
    """
    if url:
        return url
    if env_url := os.getenv("HINTDB_URL"):
        return env_url
    return "sqlite:///./hintdb.db"


@dataclass
class CLIContext:
    """Shared context for CLI commands.

    Manages database connection lifecycle and output preferences.
    """

    database_url: str
    echo: bool
    json_output: bool
    _db: HintDB | None = field(default=None, init=False, repr=False)

    def get_db(self) -> HintDB:
        """Get or create database connection (lazy initialization)."""
        if self._db is None:
            self._db = HintDB(self.database_url, echo=self.echo)
        return self._db

    def close(self) -> None:
        """Close database connection if open."""
        if self._db is not None:
            self._db.close()
            self._db = None
