"""Content-based duplicate detection for normalized advocate records."""

from __future__ import annotations

import json
from collections.abc import Iterable

from app.processing.canonical import CANONICAL_FIELDS, AdvocateRecord


def canonical_key(record: AdvocateRecord) -> str:
    """
    Stable key over every field except ``id``.

    The same advocate can carry different ids in different sources, so
    ``id`` never takes part in the comparison.
    """
    payload = record.to_dict()
    values = [payload[name] for name in CANONICAL_FIELDS if name != "id"]
    return json.dumps(values, ensure_ascii=False, separators=(",", ":"))


def dedupe(records: Iterable[AdvocateRecord]) -> list[AdvocateRecord]:
    """Drop records whose content was already seen.  First occurrence wins."""
    seen: set[str] = set()
    unique: list[AdvocateRecord] = []
    for record in records:
        key = canonical_key(record)
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)
    return unique
