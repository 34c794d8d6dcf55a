"""
Exception hierarchy for the search pipeline.

All pipeline exceptions inherit from SearchPipelineError so callers can
catch broadly or narrowly as needed.  Each exception carries structured
context (step name, request ID, etc.) for logging.

Store outages are NOT exceptions here: the row fetcher returns them as a
StoreError value and the fetch step switches to the fallback dataset.
"""

from __future__ import annotations


class SearchPipelineError(Exception):
    """Base exception for all search pipeline errors."""

    def __init__(
        self,
        message: str,
        *,
        request_id: str | None = None,
        step_name: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.request_id = request_id
        self.step_name = step_name
        self.details = details or {}
        super().__init__(message)

