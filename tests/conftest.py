from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from src.schemas.earlyAccessSchema import InsertError, InsertResult


class FakeStore:
    """In-memory stand-in for EarlyAccessStore."""

    def __init__(self, error: str = None, raises: Exception = None):
        self.error = error
        self.raises = raises
        self.calls: List[tuple] = []

    async def insert(self, table_name: str, records: List[Dict[str, Any]]) -> InsertResult:
        self.calls.append((table_name, records))
        if self.raises is not None:
            raise self.raises
        if self.error is not None:
            return InsertResult(error=InsertError(message=self.error))
        rows = [{**record, "id": f"row-{i}", "created_at": "2026-10-16T00:00:00+00:00"}
                for i, record in enumerate(records, start=1)]
        return InsertResult(data=rows)


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def app_client(fake_store):
    """TestClient wired to a fake store; the lifespan (and the real database) is never started."""
    from src.main import app
    from src.crud.subscriptionService import SubscriptionService
    from src.routes.subscribeRoute import get_subscription_service

    app.dependency_overrides[get_subscription_service] = lambda: SubscriptionService(fake_store)
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
