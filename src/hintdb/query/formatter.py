"""Composite placeholders (?a, ?u, ?v).

Expands a sequence or mapping into a multi-token SQL fragment, escaping every
element through the scalar ``Escaper``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from hintdb.core.escaper import SQL_NULL, Escaper
from hintdb.exceptions import EmptyCompositeError, PlaceholderTypeError


class CompositeFormatter:
    """Builds IN lists, SET clauses and INSERT column/value lists."""

    def __init__(self, escaper: Escaper) -> None:
        self._escaper = escaper

    def in_list(self, values: Any) -> str:
        """Format a sequence for ``IN (?a)``.

        An empty sequence becomes ``null`` so ``col IN (null)`` matches nothing
        instead of being a syntax error. Parentheses come from the template.

        Raises:
            PlaceholderTypeError: If the value is not a list-like sequence
        """
        if not isinstance(values, Sequence) or isinstance(values, str | bytes | bytearray):
            raise PlaceholderTypeError("IN (?a)", "sequence", values)
        if not values:
            return SQL_NULL
        return ",".join(self._escaper.string_literal(value) for value in values)

    def set_list(self, data: Any) -> str:
        """Format a mapping as ``field1='value1',field2='value2'``.

        Suitable for ``SET`` and ``ON DUPLICATE KEY UPDATE`` clauses. Keys keep
        the mapping's iteration order.

        Raises:
            PlaceholderTypeError: If the value is not a mapping
            EmptyCompositeError: If the mapping is empty
        """
        self._check_mapping("?u", "SET (?u)", data)
        return ",".join(
            f"{self._escaper.identifier(key)}={self._escaper.string_literal(value)}"
            for key, value in data.items()
        )

    def insert_tuple(self, data: Any) -> str:
        """Format a mapping as `` (field1,field2) VALUES ('value1','value2') ``.

        Raises:
            PlaceholderTypeError: If the value is not a mapping
            EmptyCompositeError: If the mapping is empty
        """
        self._check_mapping("?v", "INSERT (?v)", data)
        keys = ",".join(self._escaper.identifier(key) for key in data)
        values = ",".join(self._escaper.string_literal(value) for value in data.values())
        return f" ({keys}) VALUES ({values}) "

    @staticmethod
    def _check_mapping(tag: str, name: str, data: Any) -> None:
        if not isinstance(data, Mapping):
            raise PlaceholderTypeError(name, "mapping", data)
        if not data:
            raise EmptyCompositeError(tag)
