"""
SearchEngine — runs the search steps sequentially for one request.

Responsibilities:
    - Build the SearchContext from the clamped request parameters
    - Execute each step with timing, logging, and error handling
    - Stop at the first failed step and raise SearchPipelineError
    - Return a SearchResult carrying the page, total and trace
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import structlog

from app.core.constants import RowSource, StepStatus
from app.pipeline.context import SearchContext, StepResult
from app.pipeline.errors import SearchPipelineError
from app.pipeline.step import SearchStep
from app.processing.canonical import AdvocateRecord
from app.processing.search import parse_limit, parse_offset


@dataclass
class SearchResult:
    """Final outcome of a search pipeline run."""

    request_id: str
    page: list[AdvocateRecord] = field(default_factory=list)
    total: int = 0
    source: RowSource = RowSource.STORE
    total_duration_ms: int = 0
    step_results: list[dict[str, Any]] = field(default_factory=list)

    def to_response(self) -> dict[str, Any]:
        return {
            "data": [record.to_dict() for record in self.page],
            "total": self.total,
        }


class SearchEngine:
    """
    Runs a sequence of SearchStep objects against a SearchContext.

    Usage::

        engine = SearchEngine(steps=search_flow(row_fetcher))
        result = await engine.run(query="oncology", limit=20, offset=0)
        payload = result.to_response()
    """

    def __init__(self, steps: list[SearchStep]) -> None:
        self.steps = steps
        self.logger = structlog.get_logger("pipeline.engine")

    async def run(
        self,
        query: str | None = None,
        limit: Any = None,
        offset: Any = None,
    ) -> SearchResult:
        """
        Full search execution.

        Args:
            query: Free-text search term; None or blank means "everything".
            limit: Page size, clamped to [1, SEARCH_MAX_LIMIT].
            offset: Page start, clamped to >= 0.
        """
        ctx = SearchContext(
            query=(query or "").strip(),
            limit=parse_limit(limit),
            offset=parse_offset(offset),
        )
        return await self.run_steps(ctx, self.steps)

    async def run_steps(
        self,
        ctx: SearchContext,
        steps: list[SearchStep],
    ) -> SearchResult:
        """
        Execute an ordered list of steps against a context.

        Can be called directly with a pre-built context and step list.
        """
        started_at = datetime.now(timezone.utc)

        log = self.logger.bind(
            request_id=ctx.request_id,
            total_steps=len(steps),
        )
        log.debug("Search started", query=ctx.query, limit=ctx.limit, offset=ctx.offset)

        for index, step in enumerate(steps):
            step_log = log.bind(step_name=step.name, step_index=index + 1)

            if await step.should_skip(ctx):
                step_log.debug("Step skipped")
                ctx.step_results.append(StepResult(
                    step_name=step.name,
                    status=StepStatus.SKIPPED,
                    started_at=datetime.now(timezone.utc),
                    completed_at=datetime.now(timezone.utc),
                ))
                continue

            result = await self._execute(step, ctx, step_log)
            ctx.step_results.append(result)

            if result.status != StepStatus.COMPLETED:
                step_log.error("Step failed, search stopping", error=result.error)
                raise SearchPipelineError(
                    f"Step '{step.name}' failed: {result.error}",
                    request_id=ctx.request_id,
                    step_name=step.name,
                    details=result.metadata,
                )

            step_log.debug(
                "Step completed",
                duration_ms=result.duration_ms,
                metadata=result.metadata,
            )

        completed_at = datetime.now(timezone.utc)
        total_duration_ms = int((completed_at - started_at).total_seconds() * 1000)

        log.info(
            "Search finished",
            duration_ms=total_duration_ms,
            **ctx.to_summary_dict(),
        )

        return SearchResult(
            request_id=ctx.request_id,
            page=list(ctx.page),
            total=ctx.total,
            source=ctx.source,
            total_duration_ms=total_duration_ms,
            step_results=[sr.to_dict() for sr in ctx.step_results],
        )

    async def _execute(
        self,
        step: SearchStep,
        ctx: SearchContext,
        log: structlog.BoundLogger,
    ) -> StepResult:
        try:
            return await step.execute(ctx)

        except Exception as exc:
            log.exception("Step raised", error=str(exc))
            return StepResult(
                step_name=step.name,
                status=StepStatus.FAILED,
                started_at=datetime.now(timezone.utc),
                completed_at=datetime.now(timezone.utc),
                error=str(exc),
                metadata={"traceback": traceback.format_exc()},
            )
