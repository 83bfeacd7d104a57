"""Value escaping for the scalar placeholders (?i, ?s, ?n).

String escaping itself is delegated to a driver primitive passed in by the
caller, so the escaper can be used without a live connection.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any
from uuid import UUID

from hintdb.exceptions import EmptyIdentifierError, PlaceholderTypeError

logger = logging.getLogger(__name__)

StringEscaper = Callable[[str], str]

# Strings accepted by ?i as they are, e.g. "42", "-3.5", "1e6"
NUMERIC_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

SQL_NULL = "null"


def standard_escape_string(value: str) -> str:
    """Escape a string for a single-quoted SQL literal.

    Doubles embedded single quotes, which is what PostgreSQL (with
    ``standard_conforming_strings``) and SQLite expect. Backslashes are
    ordinary characters under those rules.

    Args:
        value: Raw string

    Returns:
        Escaped string, without surrounding quotes
    """
    return value.replace("'", "''")


class Escaper:
    """Formats scalar values as SQL literals.

    Wraps the driver's string-escaping primitive and adds numeric validation
    and identifier sanitising.
    """

    def __init__(self, escape_string: StringEscaper = standard_escape_string) -> None:
        """Initialize escaper.

        Args:
            escape_string: Callable escaping a raw string for use inside a
                single-quoted literal (without adding the quotes)
        """
        self._escape_string = escape_string

    def integer(self, value: Any) -> str:
        """Format a value for the ?i placeholder.

        ``None`` becomes ``null``. Floats and decimals are truncated toward
        zero; use ?s when the fractional part matters.

        Raises:
            PlaceholderTypeError: If the value is not numeric
        """
        if value is None:
            return SQL_NULL
        if isinstance(value, bool):
            raise PlaceholderTypeError("Integer (?i)", "numeric value", value)
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float | Decimal):
            finite = value.is_finite() if isinstance(value, Decimal) else math.isfinite(value)
            if not finite:
                raise PlaceholderTypeError("Integer (?i)", "finite numeric value", value)
            truncated = int(value)
            if truncated != value:
                logger.warning(f"Integer (?i) placeholder truncated {value!r} to {truncated}")
            return str(truncated)
        if isinstance(value, str) and NUMERIC_PATTERN.match(value.strip()):
            return value.strip()
        raise PlaceholderTypeError("Integer (?i)", "numeric value", value)

    def string_literal(self, value: Any) -> str:
        """Format a value for the ?s placeholder.

        ``None`` and the empty string become ``null``; everything else is
        escaped through the driver primitive and single-quoted.

        Raises:
            PlaceholderTypeError: If the value has no scalar text form
        """
        if value is None or value == "":
            return SQL_NULL
        return "'" + self._escape_string(self._text(value)) + "'"

    def identifier(self, value: Any) -> str:
        """Sanitize a table or field name for the ?n placeholder.

        Backticks are removed and surrounding whitespace trimmed. The result is
        not quoted, so dotted names like ``schema.table`` pass through.

        Raises:
            EmptyIdentifierError: If the value is empty before or after sanitising
            PlaceholderTypeError: If the value is not a string or integer
        """
        if value is None or value == "":
            raise EmptyIdentifierError(value)
        if isinstance(value, bool) or not isinstance(value, str | int):
            raise PlaceholderTypeError("Identifier (?n)", "string", value)
        name = str(value).replace("`", "").strip()
        if not name:
            raise EmptyIdentifierError(value)
        return name

    @staticmethod
    def _text(value: Any) -> str:
        """Textual form of a scalar value."""
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, int | float | Decimal | UUID):
            return str(value)
        if isinstance(value, datetime | date | time):
            return value.isoformat()
        raise PlaceholderTypeError("String (?s)", "scalar value", value)
