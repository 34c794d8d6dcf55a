"""
SearchStep — abstract base class for all search pipeline steps.

The engine calls execute() and records timing, logging, and errors.
Steps only need to implement the business logic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

from app.core.constants import StepStatus
from app.pipeline.context import SearchContext, StepResult


class SearchStep(ABC):
    """
    Base class for every search step.

    Subclasses MUST implement:
        - name (str)          — unique identifier, e.g. "normalize_rows"
        - description (str)   — human-readable label for logs
        - execute(ctx)        — the actual logic

    Subclasses MAY implement:
        - should_skip(ctx)    — return True to skip this step conditionally
    """

    name: str = "unnamed_step"
    description: str = "No description"

    @abstractmethod
    async def execute(self, ctx: SearchContext) -> StepResult:
        """
        Run the step's logic.  Must return a StepResult.

        Read from and write to `ctx` to pass data between steps.
        Any exception raised here fails the step and stops the search.
        """
        ...

    async def should_skip(self, ctx: SearchContext) -> bool:
        """Return True to skip this step.  Default: never skip."""
        return False

    # ─── Helpers available to all steps ────────────────

    def _success(
        self,
        started_at: datetime,
        metadata: dict[str, Any] | None = None,
    ) -> StepResult:
        """Build a successful StepResult with timing."""
        now = datetime.now(timezone.utc)
        duration_ms = int((now - started_at).total_seconds() * 1000)
        return StepResult(
            step_name=self.name,
            status=StepStatus.COMPLETED,
            started_at=started_at,
            completed_at=now,
            duration_ms=duration_ms,
            metadata=metadata or {},
        )

    def _now(self) -> datetime:
        """UTC-aware now."""
        return datetime.now(timezone.utc)
