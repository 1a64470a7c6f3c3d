# Data models for the search layer.
# A Record is one searchable entity; a QueryResult is what one filter call returns.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple, Dict, Any


@dataclass(frozen=True)
class Record:
    """A searchable entity from the directory."""
    id: int
    name: str
    contact: str


@dataclass(frozen=True)
class QueryResult:
    """Output of a single filter invocation."""
    query: str
    query_too_short: bool
    matches: Tuple[Record, ...] = field(default_factory=tuple)

    def to_context(self) -> Dict[str, Any]:
        """Template/JSON view using the renderer's field names."""
        return {
            "matches": list(self.matches),
            "query": self.query,
            "queryTooShort": self.query_too_short,
        }
