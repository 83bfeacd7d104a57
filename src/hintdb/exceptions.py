"""Custom exceptions for HintDB.

Every failure goes through ``HintDBError``: the message is prefixed with the
component tag so errors are recognisable in logs, and the structured
``context`` carries the values needed to locate the defect (template text,
expected vs. actual counts, received type name).
"""

from __future__ import annotations

from typing import Any

COMPONENT_TAG = "HintDB"


class HintDBError(Exception):
    """Base exception for all HintDB errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        message = f"{COMPONENT_TAG}: {message}"
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Return error as JSON-serializable dict."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class ConnectionError(HintDBError):
    """Failed to connect to the database."""

    pass


class QueryError(HintDBError):
    """Query execution failed."""

    def __init__(self, error: str, query: str) -> None:
        super().__init__(f"{error}. Full query: [{query}]", {"query": query})
        self.query = query


# === Placeholder Errors ===


class PlaceholderError(HintDBError):
    """A template or its arguments cannot be substituted."""

    pass


class ArityMismatchError(PlaceholderError):
    """Number of arguments differs from the number of placeholders."""

    def __init__(self, template: str, placeholders: int, arguments: int) -> None:
        message = (
            f"Number of args ({arguments}) doesn't match number of placeholders "
            f"({placeholders}) in [{template}]"
        )
        super().__init__(
            message,
            {"template": template, "placeholders": placeholders, "arguments": arguments},
        )
        self.template = template
        self.placeholders = placeholders
        self.arguments = arguments


class PlaceholderTypeError(PlaceholderError, TypeError):
    """Argument shape does not match what the placeholder requires."""

    def __init__(self, placeholder: str, expected: str, value: Any) -> None:
        received = type(value).__name__
        message = f"{placeholder} placeholder expects {expected}, {received} given"
        super().__init__(
            message,
            {"placeholder": placeholder, "expected": expected, "received": received},
        )
        self.placeholder = placeholder
        self.expected = expected
        self.received = received


class EmptyIdentifierError(PlaceholderError):
    """Empty value supplied for an identifier (?n) placeholder."""

    def __init__(self, value: Any = None) -> None:
        super().__init__(
            "Empty value for identifier (?n) placeholder",
            {"placeholder": "?n", "value": repr(value)},
        )


class EmptyCompositeError(PlaceholderError):
    """Empty mapping supplied for a SET (?u) or INSERT (?v) placeholder."""

    def __init__(self, placeholder: str) -> None:
        names = {"?u": "SET", "?v": "INSERT"}
        super().__init__(
            f"Empty mapping for {names.get(placeholder, 'composite')} ({placeholder}) placeholder",
            {"placeholder": placeholder},
        )
        self.placeholder = placeholder


ArityError = ArityMismatchError
EmptyMapError = EmptyCompositeError
