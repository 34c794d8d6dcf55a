import pytest

from app.repositories.advocates import RowFetchResult


@pytest.fixture
def failing_fetcher():
    calls: list[int] = []

    async def fetch():
        calls.append(1)
        return RowFetchResult.failure(ConnectionRefusedError("connection refused"))

    fetch.calls = calls
    return fetch


@pytest.fixture
def rows_fetcher():
    def make(rows):
        calls: list[int] = []

        async def fetch():
            calls.append(1)
            return RowFetchResult.success([dict(row) for row in rows])

        fetch.calls = calls
        return fetch

    return make
