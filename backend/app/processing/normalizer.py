"""
Row normalizer — maps one raw advocate row to an AdvocateRecord.

Rows arrive from the store (snake_case columns) or from the fallback
dataset (camelCase keys), and the specialty field may be a list, a JSON
string, or a delimited string.  Normalization never raises: anything
missing or malformed degrades to an empty string or an empty list.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from app.processing.canonical import AdvocateRecord, collation_key

# Naming variants per field, highest priority first.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "id": ("id",),
    "first_name": ("firstName", "first_name"),
    "last_name": ("lastName", "last_name"),
    "city": ("city",),
    "degree": ("degree",),
    "years_of_experience": ("yearsOfExperience", "years_of_experience", "years"),
    "phone_number": ("phoneNumber", "phone_number", "phone"),
}

SPECIALTY_SPLIT_RE = re.compile(r"[,|;]+")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _coalesce(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    """First value that is present and not None.  ``0`` and ``""`` count."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_specialties(raw: Mapping[str, Any]) -> list[str]:
    """
    Extract the specialty list from whichever shape the row uses.

    Order of precedence:
        1. ``specialties`` as a list
        2. ``payload`` as a list
        3. ``specialties`` as a JSON string (list, or a single value)
        4. ``specialties`` as a string split on ``,`` ``|`` ``;``
    """
    value = raw.get("specialties")
    payload = raw.get("payload")

    if isinstance(value, (list, tuple)):
        items = [_to_text(item) for item in value]
    elif isinstance(payload, (list, tuple)):
        items = [_to_text(item) for item in payload]
    elif isinstance(value, str):
        try:
            parsed = json.loads(value, parse_constant=_reject_constant)
        except ValueError:
            items = SPECIALTY_SPLIT_RE.split(value)
        else:
            if isinstance(parsed, list):
                items = [_to_text(item) for item in parsed]
            else:
                items = [_to_text(parsed)]
    else:
        items = []

    # None elements became "" above and are dropped here, never kept as "null"
    cleaned = [item.strip() for item in items]
    return sorted((item for item in cleaned if item), key=collation_key)


def normalize_row(raw: Any) -> AdvocateRecord:
    """Map a raw row of any supported shape to an AdvocateRecord."""
    if not isinstance(raw, Mapping):
        return AdvocateRecord()

    raw_id = _coalesce(raw, FIELD_ALIASES["id"])

    return AdvocateRecord(
        id=None if raw_id is None else _to_text(raw_id),
        first_name=_to_text(_coalesce(raw, FIELD_ALIASES["first_name"])),
        last_name=_to_text(_coalesce(raw, FIELD_ALIASES["last_name"])),
        city=_to_text(_coalesce(raw, FIELD_ALIASES["city"])),
        degree=_to_text(_coalesce(raw, FIELD_ALIASES["degree"])),
        specialties=tuple(parse_specialties(raw)),
        years_of_experience=_to_text(_coalesce(raw, FIELD_ALIASES["years_of_experience"])),
        phone_number=_to_text(_coalesce(raw, FIELD_ALIASES["phone_number"])),
    )


def normalize_rows(rows: Any) -> list[AdvocateRecord]:
    """Normalize a batch.  A non-list input is treated as no rows."""
    if not isinstance(rows, (list, tuple)):
        return []
    return [normalize_row(row) for row in rows]
