"""Integration/E2E test fixtures.

Builds the app around an injected in-memory repository, so HTTP tests run
without MongoDB. Unit tests in tests/unit/ have their own fixtures.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, AsyncIterator, cast

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env.test when present (overrides .env values)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

from app import create_app  # noqa: E402
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository  # noqa: E402


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Fresh in-memory store per test."""
    return InMemoryUserRepository()


@pytest_asyncio.fixture
async def client(user_repository: InMemoryUserRepository) -> AsyncIterator[AsyncClient]:
    """Client HTTP asincrono per test REST.

    Usa httpx.AsyncClient con ASGITransport esplicito e base_url fittizia
    per coerenza nelle richieste relative.
    """
    app = create_app(user_repository)
    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
