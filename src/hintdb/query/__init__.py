"""Placeholder substitution for HintDB.

Architecture:
    1. Tokenizer - splits a template into literal text and placeholder tags
    2. Composite Formatter - expands sequences and mappings (?a, ?u, ?v)
    3. Substitutor - checks arity and dispatches each argument by placeholder kind

Example:
    sql = substitute("UPDATE ?n SET ?u WHERE id = ?i", ["users", {"name": "Ann"}, 7])
"""

from hintdb.query.engine import Raw, Substitutor, substitute
from hintdb.query.filters import filter_array, white_list
from hintdb.query.formatter import CompositeFormatter
from hintdb.query.tokenizer import count_placeholders, placeholder_kind, tokenize

__all__ = [
    "Raw",
    "Substitutor",
    "substitute",
    "CompositeFormatter",
    "tokenize",
    "count_placeholders",
    "placeholder_kind",
    "white_list",
    "filter_array",
]
