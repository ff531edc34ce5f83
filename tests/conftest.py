from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from tests.routes import router
from txproxy.main import create_app


@pytest.fixture
def app() -> FastAPI:
    """Application with the error boundary plus routes that raise each failure variant."""
    app = create_app()
    app.include_router(router)
    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """HTTP client bound to the in-process app.

    The transport re-raises anything that escapes the app, so a failure the
    boundary misses fails the test instead of turning into a silent 500.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
