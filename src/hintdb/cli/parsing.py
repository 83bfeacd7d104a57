"""Input parsing utilities for CLI commands."""

import json
from typing import Any


def parse_argument(raw: str) -> Any:
    """Parse one placeholder argument given on the command line.

    Values are read as JSON so lists and objects can feed ?a, ?u and ?v;
    anything that isn't valid JSON is taken as a plain string.

    Examples:
        "42" → 42
        "null" → None
        '["a", "b"]' → ["a", "b"]
        '{"name": "Ann"}' → {"name": "Ann"}
        "users" → "users"
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def parse_arguments(raw_args: list[str] | None) -> list[Any]:
    """Parse all placeholder arguments, keeping their order."""
    return [parse_argument(raw) for raw in raw_args or []]
