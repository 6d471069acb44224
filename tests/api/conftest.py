"""API test fixtures — FastAPI app over an in-process httpx client.

Invariants:
    - Dependency overrides cleared after every test
    - No lifespan run: the default evaluator is built lazily on first request
"""

import pytest
from httpx import ASGITransport, AsyncClient

from assignment_api.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
