"""Core components for HintDB."""

from hintdb.core.connection import DatabaseConnection
from hintdb.core.engine import HintDB
from hintdb.core.escaper import Escaper, standard_escape_string
from hintdb.core.stats import QueryLog
from hintdb.core.types import ConnectionOptions, FetchMode, PlaceholderKind, QueryStat

__all__ = [
    "DatabaseConnection",
    "HintDB",
    "Escaper",
    "standard_escape_string",
    "QueryLog",
    "ConnectionOptions",
    "FetchMode",
    "PlaceholderKind",
    "QueryStat",
]
