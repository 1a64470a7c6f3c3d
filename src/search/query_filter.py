# Case-insensitive substring filter over a fixed record set.
# Stateless and pure: no side effects, input order preserved.

from __future__ import annotations
import unicodedata
from typing import Iterable

import regex

from .types import Record, QueryResult

MIN_QUERY_LENGTH = 3

_GRAPHEME = regex.compile(r"\X")


def query_length(query: str) -> int:
    """User-perceived character count (extended grapheme clusters)."""
    return len(_GRAPHEME.findall(query))


def _fold(text: str) -> str:
    # composed and decomposed accents compare equal
    return unicodedata.normalize("NFC", text).lower()


def _matches(record: Record, needle: str) -> bool:
    return needle in _fold(record.name) or needle in _fold(record.contact)


def filter_records(
    query: str,
    records: Iterable[Record],
    min_length: int = MIN_QUERY_LENGTH,
) -> QueryResult:
    """
    Filter `records` by `query`.
    - Queries shorter than `min_length` return no matches and query_too_short=True.
    - Otherwise keep records whose name or contact contains the query,
      ignoring case, in their original order.
    """
    if query_length(query) < min_length:
        return QueryResult(query=query, query_too_short=True)

    needle = _fold(query)
    matches = tuple(r for r in records if _matches(r, needle))
    return QueryResult(query=query, query_too_short=False, matches=matches)
