"""
HTTP client for the advocate search API.

Consecutive searches supersede each other: issuing a new search cancels
the previous one's token, and a response that arrives for a cancelled
token is discarded instead of being returned.  DebouncedSearch adds the
input-side delay so rapid typing produces one request, not one per key.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

SEARCH_PATH = "/api/v1/advocates"
DEFAULT_TIMEOUT = 30


class AdvocateClientError(Exception):
    """A search failed for a reason other than being superseded."""


class CancellationToken:
    """Set once a newer request makes this one stale."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


@dataclass
class SearchPage:
    """One page of results as returned by the API."""

    data: list[dict[str, Any]] = field(default_factory=list)
    total: int = 0

    @classmethod
    def from_payload(cls, payload: Any) -> "SearchPage":
        if not isinstance(payload, dict):
            return cls()
        data = payload.get("data")
        total = payload.get("total")
        rows = data if isinstance(data, list) else []
        return cls(data=rows, total=total if isinstance(total, int) else len(rows))


class AdvocateSearchClient:
    """
    Async client for ``GET /api/v1/advocates``.

    Usage::

        async with AdvocateSearchClient("http://localhost:8000") as client:
            page = await client.search("oncology")
            if page is not None:      # None means a newer search replaced it
                render(page.data)
    """

    def __init__(
        self,
        base_url: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        self._current: CancellationToken | None = None

    async def __aenter__(self) -> "AdvocateSearchClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        self.cancel_pending()
        await self._http.aclose()

    def cancel_pending(self) -> None:
        """Mark the in-flight search (if any) as superseded."""
        if self._current is not None:
            self._current.cancel()

    async def search(
        self,
        q: str = "",
        limit: int | None = None,
        offset: int | None = None,
    ) -> SearchPage | None:
        """
        Run a search.  Returns None when a newer search superseded this one.

        Raises AdvocateClientError on HTTP or decoding failures.
        """
        self.cancel_pending()
        token = CancellationToken()
        self._current = token

        params: dict[str, Any] = {}
        if q:
            params["q"] = q
        if limit is not None:
            params["limit"] = limit
        if offset is not None:
            params["offset"] = offset

        try:
            response = await self._http.get(SEARCH_PATH, params=params)
            response.raise_for_status()
            payload = response.json()
        except asyncio.CancelledError:
            token.cancel()
            raise
        except (httpx.HTTPError, ValueError) as exc:
            if token.cancelled:
                return None
            logger.error("Failed to load advocates", query=q, error=str(exc))
            raise AdvocateClientError("Failed to load advocates") from exc

        if token.cancelled:
            logger.debug("Discarding superseded search response", query=q)
            return None

        return SearchPage.from_payload(payload)


class DebouncedSearch:
    """
    Debounces search input.

    ``submit(q)`` restarts the delay; only the last term submitted within
    the delay window is sent.  Pages reach ``on_results`` only if no newer
    search replaced them; failures reach ``on_error`` with a short message.
    """

    def __init__(
        self,
        client: AdvocateSearchClient,
        on_results: Callable[[SearchPage], Awaitable[None] | None],
        on_error: Callable[[str], Awaitable[None] | None] | None = None,
        delay: float | None = None,
    ) -> None:
        self.client = client
        self.on_results = on_results
        self.on_error = on_error
        self.delay = settings.CLIENT_DEBOUNCE_SECONDS if delay is None else delay
        self.term = ""
        self._pending: asyncio.Task | None = None

    def submit(self, q: str) -> asyncio.Task:
        """Record new input and (re)start the debounce timer."""
        self.term = q
        self._cancel_timer()
        self._pending = asyncio.create_task(self._dispatch(q, self.delay))
        return self._pending

    def reset(self) -> asyncio.Task:
        """Clear the term and search immediately."""
        self.term = ""
        self._cancel_timer()
        self._pending = asyncio.create_task(self._dispatch("", 0))
        return self._pending

    async def aclose(self) -> None:
        self._cancel_timer()
        self.client.cancel_pending()

    def _cancel_timer(self) -> None:
        # Cancelling after the delay also aborts the request the task sent.
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()

    async def _dispatch(self, q: str, delay: float) -> None:
        if delay:
            await asyncio.sleep(delay)
        try:
            page = await self.client.search(q)
        except AdvocateClientError as exc:
            await _maybe_await(self.on_error(str(exc)) if self.on_error else None)
            return
        if page is not None:
            await _maybe_await(self.on_results(page))


async def _maybe_await(value: Awaitable[None] | None) -> None:
    if value is not None and asyncio.iscoroutine(value):
        await value
