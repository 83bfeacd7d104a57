"""Placeholder substitution engine.

Turns a template with type-hinted placeholders plus an ordered argument list
into a single, fully literal SQL string:

    ?n ("name")    - identifiers (table and field names)
    ?s ("string")  - strings (also DATE, FLOAT and DECIMAL)
    ?i ("integer") - integers
    ?a ("array")   - IN() list: 'a','b','c' without parentheses
    ?u ("update")  - SET list: field1='value1',field2='value2'
    ?v ("insert")  - INSERT list: (field1,field2) VALUES ('value1','value2')
    ?p ("parsed")  - already parsed fragment, inserted without processing

Example:
    >>> substitute("SELECT * FROM ?n WHERE id IN (?a)", ["users", [1, 2]])
    "SELECT * FROM users WHERE id IN ('1','2')"
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from hintdb.core.escaper import Escaper
from hintdb.core.types import PlaceholderKind
from hintdb.exceptions import ArityMismatchError
from hintdb.query.formatter import CompositeFormatter
from hintdb.query.tokenizer import placeholder_kind, tokenize


class Raw(str):
    """SQL fragment that has already been substituted.

    Returned by ``HintDB.parse`` so conditional query parts can be passed to a
    ``?p`` placeholder without being escaped twice.
    """

    __slots__ = ()


class Substitutor:
    """Substitutes placeholder arguments into templates.

    Stateless apart from the escaper it was built with; one instance can be
    shared between threads as long as the escaper's primitive is reentrant.
    """

    def __init__(self, escaper: Escaper | None = None) -> None:
        """Initialize substitutor.

        Args:
            escaper: Scalar escaper (defaults to standard quote doubling)
        """
        self._escaper = escaper or Escaper()
        self._formatter = CompositeFormatter(self._escaper)

    @property
    def escaper(self) -> Escaper:
        """Get the scalar escaper."""
        return self._escaper

    def substitute(self, template: str, args: Sequence[Any]) -> str:
        """Substitute arguments into a template.

        Arguments are consumed strictly left to right, one per placeholder.

        Args:
            template: SQL template with placeholders
            args: One argument per placeholder, in template order

        Returns:
            SQL string with every placeholder replaced

        Raises:
            ArityMismatchError: If the argument count differs from the placeholder count
            PlaceholderTypeError: If an argument has the wrong shape for its placeholder
            EmptyIdentifierError: If ?n receives an empty value
            EmptyCompositeError: If ?u or ?v receives an empty mapping
        """
        segments = tokenize(template)
        placeholders = len(segments) // 2
        if placeholders != len(args):
            raise ArityMismatchError(template, placeholders, len(args))

        parts: list[str] = []
        values = iter(args)
        for i, segment in enumerate(segments):
            if i % 2 == 0:
                parts.append(segment)
            else:
                parts.append(self.format(placeholder_kind(segment), next(values)))
        return "".join(parts)

    def format(self, kind: PlaceholderKind, value: Any) -> str:
        """Format one argument according to its placeholder kind."""
        match kind:
            case PlaceholderKind.IDENTIFIER:
                return self._escaper.identifier(value)
            case PlaceholderKind.STRING:
                return self._escaper.string_literal(value)
            case PlaceholderKind.INTEGER:
                return self._escaper.integer(value)
            case PlaceholderKind.IN_LIST:
                return self._formatter.in_list(value)
            case PlaceholderKind.SET_LIST:
                return self._formatter.set_list(value)
            case PlaceholderKind.INSERT_TUPLE:
                return self._formatter.insert_tuple(value)
            case PlaceholderKind.RAW:
                return "" if value is None else str(value)


def substitute(template: str, args: Sequence[Any], escaper: Escaper | None = None) -> str:
    """Substitute arguments into a template (see ``Substitutor.substitute``)."""
    return Substitutor(escaper).substitute(template, args)
