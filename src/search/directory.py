# Read-only record sources for the search layer.
#  - RecordSource: the capability the filter reads from
#  - StaticRecordSource: immutable in-memory set
#  - load_records(path): YAML list of {id, name, contact}
#  - default_source(): reference directory, built once per process

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Iterable, List, Protocol, Sequence, Tuple

import yaml

from .types import Record

logger = logging.getLogger(__name__)

RECORDS_PATH = os.path.join(os.path.dirname(__file__), "records.yaml")


class RecordSource(Protocol):
    def list_all_records(self) -> Sequence[Record]:
        ...


class StaticRecordSource:
    def __init__(self, records: Iterable[Record]):
        self._records: Tuple[Record, ...] = tuple(records)

        seen = set()
        for r in self._records:
            if r.id in seen:
                raise ValueError(f"Duplicate record id: {r.id}")
            seen.add(r.id)

    def list_all_records(self) -> Sequence[Record]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)


def _parse_record(item, pos: int) -> Record:
    if not isinstance(item, dict):
        raise ValueError(f"Record #{pos} is not a mapping: {item!r}")
    missing = [k for k in ("id", "name", "contact") if k not in item]
    if missing:
        raise ValueError(f"Record #{pos} missing fields: {', '.join(missing)}")
    try:
        rid = int(item["id"])
    except (TypeError, ValueError) as e:
        raise ValueError(f"Record #{pos} has a non-integer id: {item['id']!r}") from e
    return Record(id=rid, name=str(item["name"]), contact=str(item["contact"]))


def load_records(path: str) -> List[Record]:
    """Load records from a YAML file holding a list of {id, name, contact}."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Records file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or []
    if not isinstance(data, list):
        raise ValueError(f"Records file must hold a list, got {type(data).__name__}")
    return [_parse_record(item, pos) for pos, item in enumerate(data, start=1)]


@lru_cache(maxsize=8)
def default_source(path: str = RECORDS_PATH) -> StaticRecordSource:
    source = StaticRecordSource(load_records(path))
    logger.info("Loaded %d records from %s", len(source), path)
    return source
