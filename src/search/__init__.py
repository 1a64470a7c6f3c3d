# Makes the folder importable as a package.
# Exports the filter, record sources and data types for convenience.

from .directory import RecordSource, StaticRecordSource, default_source, load_records
from .query_filter import MIN_QUERY_LENGTH, filter_records, query_length
from .types import QueryResult, Record

__all__ = [
    "MIN_QUERY_LENGTH",
    "QueryResult",
    "Record",
    "RecordSource",
    "StaticRecordSource",
    "default_source",
    "filter_records",
    "load_records",
    "query_length",
]
