"""Core types and options for HintDB.

All models are JSON-serializable so statistics and options can be dumped by
the CLI.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field
from sqlalchemy.engine import URL


class PlaceholderKind(StrEnum):
    """Placeholder tags understood by the substitution engine."""

    IDENTIFIER = "n"  # table and field names
    STRING = "s"  # strings (also DATE, FLOAT and DECIMAL)
    INTEGER = "i"
    IN_LIST = "a"  # 'a','b','c' without parentheses
    SET_LIST = "u"  # field1='value1',field2='value2'
    INSERT_TUPLE = "v"  # (field1,field2) VALUES ('value1','value2')
    RAW = "p"  # already parsed fragment, inserted as is

    @property
    def tag(self) -> str:
        """Return the placeholder as written in a template, e.g. ``?s``."""
        return f"?{self.value}"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid placeholder letters."""
        return [k.value for k in cls]


class FetchMode(StrEnum):
    """Row shape returned by the fetch helpers."""

    ASSOC = "assoc"  # dict keyed by column name
    NUM = "num"  # tuple in column order

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid fetch mode values."""
        return [m.value for m in cls]


class ConnectionOptions(BaseModel):
    """Connection settings used when no URL or engine is given.

    Defaults mirror a local PostgreSQL server reached through psycopg 3.
    """

    drivername: str = Field(default="postgresql+psycopg", description="SQLAlchemy driver name")
    host: str | None = Field(default="localhost")
    user: str | None = Field(default="user")
    password: str | None = Field(default="pass")
    database: str | None = Field(default="db_name")
    port: int | None = Field(default=None)
    options: str | None = Field(
        default="--client_encoding=UTF8",
        description="libpq options passed through the connection string",
    )

    def to_url(self) -> URL:
        """Build the SQLAlchemy URL for these options."""
        query = {"options": self.options} if self.options else {}
        return URL.create(
            self.drivername,
            username=self.user or None,
            password=self.password or None,
            host=self.host or None,
            port=self.port,
            database=self.database or None,
            query=query,
        )


class QueryStat(BaseModel):
    """Timing record for one executed query."""

    query: str
    start: float = Field(..., description="Wall clock start time (epoch seconds)")
    timer: float = Field(..., description="Execution time in seconds")
    error: str | None = None
