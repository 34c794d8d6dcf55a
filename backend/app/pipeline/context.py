"""
SearchContext — per-request state carried through every step.

Each step reads from and writes to the context.  Nothing in it outlives
the request: rows are fetched, normalized and ranked fresh every time.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.core.constants import RowSource
from app.processing.canonical import AdvocateRecord
from app.repositories.advocates import StoreError


# ═══════════════════════════════════════════════════════════
#  StepResult
# ═══════════════════════════════════════════════════════════

@dataclass
class StepResult:
    """Outcome of a single pipeline step execution."""

    step_name: str
    status: str                     # StepStatus value
    started_at: datetime | None = None
    completed_at: datetime | None = None
    duration_ms: int = 0
    error: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "step_name": self.step_name,
            "status": self.status,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "duration_ms": self.duration_ms,
            "error": self.error,
            "metadata": self.metadata,
        }


# ═══════════════════════════════════════════════════════════
#  SearchContext
# ═══════════════════════════════════════════════════════════

@dataclass
class SearchContext:
    """
    Carries all state between search steps.

    Populated progressively: the fetch step fills ``raw_rows``, the
    normalize/dedupe/id steps refine ``records``, and the search step
    fills ``page`` and ``total``.
    """

    # ─── Request (set at init) ─────────────────────────
    query: str = ""
    limit: int = 50
    offset: int = 0
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    # ─── Rows ──────────────────────────────────────────
    source: RowSource = RowSource.STORE
    store_error: StoreError | None = None
    raw_rows: list[Any] = field(default_factory=list)

    # ─── Records ───────────────────────────────────────
    records: list[AdvocateRecord] = field(default_factory=list)
    page: list[AdvocateRecord] = field(default_factory=list)
    total: int = 0

    # ─── Execution tracking ────────────────────────────
    step_results: list[StepResult] = field(default_factory=list)

    def to_summary_dict(self) -> dict[str, Any]:
        """Compact summary for logging."""
        return {
            "request_id": self.request_id,
            "query": self.query,
            "limit": self.limit,
            "offset": self.offset,
            "source": self.source,
            "store_error": self.store_error.message if self.store_error else None,
            "rows_fetched": len(self.raw_rows),
            "records": len(self.records),
            "page_size": len(self.page),
            "total": self.total,
        }
