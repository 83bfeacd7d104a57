"""Executed query statistics."""

from __future__ import annotations

from collections import deque

from hintdb.core.types import QueryStat

MAX_ENTRIES = 100


class QueryLog:
    """Bounded log of executed queries with timings and errors.

    Only the last ``max_entries`` queries are kept so long running processes
    don't grow without limit.
    """

    def __init__(self, max_entries: int = MAX_ENTRIES) -> None:
        self._entries: deque[QueryStat] = deque(maxlen=max_entries)

    def record(
        self, query: str, start: float, timer: float, error: str | None = None
    ) -> QueryStat:
        """Append a query record and return it."""
        stat = QueryStat(query=query, start=start, timer=timer, error=error)
        self._entries.append(stat)
        return stat

    def last_query(self) -> str | None:
        """Get the last executed query, or None if there were none."""
        if not self._entries:
            return None
        return self._entries[-1].query

    def entries(self) -> list[QueryStat]:
        """Get all recorded queries, oldest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
