"""Whitelisting helpers.

Some user input can't be trusted even through a placeholder, SQL keywords and
column names for ORDER BY in particular. These helpers reduce such input to a
known set before it reaches ?p or ?u.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any


def white_list(value: Any, allowed: Sequence[Any], default: Any = None) -> Any:
    """Return the allowed entry equal to ``value``, or ``default``.

    Example:
        >>> order = white_list(request_order, ["name", "price"], "name")
        >>> direction = white_list(request_dir, ["ASC", "DESC"], "ASC")
        >>> db.get_all("SELECT * FROM goods ORDER BY ?p ?p", order, direction)
    """
    for candidate in allowed:
        if candidate == value:
            return candidate
    return default


def filter_array(data: Mapping[str, Any], allowed: Iterable[str]) -> dict[str, Any]:
    """Keep only the allowed keys of a mapping, preserving order.

    Use before passing request data to ?u or ?v so callers can't write to
    fields they have no access to.
    """
    allowed_keys = set(allowed)
    return {key: value for key, value in data.items() if key in allowed_keys}
