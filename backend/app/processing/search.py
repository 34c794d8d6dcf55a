"""
Search, ranking and pagination over normalized advocate records.

Matching is plain case-insensitive substring containment.  The only
ranking signal is the numeric tier: for an all-digit query, records whose
years of experience equal the query sort ahead of records that merely
contain it somewhere.  Everything else is ordered by last name.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from app.core.config import settings
from app.core.constants import QueryKind
from app.processing.canonical import AdvocateRecord, collation_key

NUMERIC_QUERY_RE = re.compile(r"[0-9]+")
INTEGER_PARAM_RE = re.compile(r"-?[0-9]+")


# ─── Parameter clamping ───────────────────────────────

def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not INTEGER_PARAM_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # longer than the interpreter converts
        return None


def parse_limit(value: Any) -> int:
    """Clamp ``limit`` to [1, SEARCH_MAX_LIMIT]; unusable input gets the default."""
    limit = _as_int(value)
    if limit is None:
        limit = settings.SEARCH_DEFAULT_LIMIT
    return max(1, min(limit, settings.SEARCH_MAX_LIMIT))


def parse_offset(value: Any) -> int:
    """Clamp ``offset`` to >= 0; unusable input becomes 0."""
    offset = _as_int(value)
    if offset is None:
        return 0
    return max(0, offset)


# ─── Query classification / matching ──────────────────

def classify_query(query: str | None) -> QueryKind:
    term = (query or "").strip()
    if not term:
        return QueryKind.EMPTY
    if NUMERIC_QUERY_RE.fullmatch(term):
        return QueryKind.NUMERIC
    return QueryKind.TEXT


def is_exact_years_match(record: AdvocateRecord, query: str) -> bool:
    years = record.years_of_experience.strip()
    if not NUMERIC_QUERY_RE.fullmatch(years):
        return False
    # compared as digit strings; int() refuses very long inputs
    return (years.lstrip("0") or "0") == (query.lstrip("0") or "0")


def _contains(haystacks: Sequence[str], needle: str) -> bool:
    folded = needle.casefold()
    return any(folded in value.casefold() for value in haystacks)


def matches(record: AdvocateRecord, query: str, kind: QueryKind) -> bool:
    """True if ``record`` satisfies the (already trimmed) ``query``."""
    if kind is QueryKind.EMPTY:
        return True

    text_fields = [
        record.first_name,
        record.last_name,
        record.city,
        record.degree,
        record.joined_specialties,
    ]
    if kind is QueryKind.NUMERIC:
        return is_exact_years_match(record, query) or _contains(
            [*text_fields, record.years_of_experience],
            query,
        )

    return _contains(
        [*text_fields, record.years_of_experience, record.phone_number],
        query,
    )


def _last_name_key(record: AdvocateRecord) -> tuple[str, str]:
    return collation_key(record.last_name)


def rank(records: Sequence[AdvocateRecord], query: str, kind: QueryKind) -> list[AdvocateRecord]:
    """Order matches: exact-years tier first for numeric queries, then by last name."""
    ordered = sorted(records, key=_last_name_key)
    if kind is not QueryKind.NUMERIC:
        return ordered
    # sorted() is stable, so the last-name order survives inside each tier
    return sorted(ordered, key=lambda r: 0 if is_exact_years_match(r, query) else 1)


# ─── Entry point ──────────────────────────────────────

def search(
    records: Sequence[AdvocateRecord],
    query: str | None,
    limit: Any = None,
    offset: Any = None,
) -> tuple[list[AdvocateRecord], int]:
    """
    Filter, rank and page ``records``.

    Returns ``(page, total)`` where ``total`` counts every match before
    pagination and ``page`` is the ``[offset, offset + limit)`` slice.
    """
    term = (query or "").strip()
    kind = classify_query(term)
    start = parse_offset(offset)
    size = parse_limit(limit)

    matched = [record for record in records if matches(record, term, kind)]
    ordered = rank(matched, term, kind)
    return ordered[start:start + size], len(ordered)
