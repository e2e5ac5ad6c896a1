"""Shared fixtures: in-memory SQLite database and an ASGI test client."""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SEED_ON_STARTUP"] = "false"

import httpx
import pytest
from sqlalchemy.pool import StaticPool

from main import app
from talent.database import build_engine, build_session_factory, get_db, init_db, session_scope
from talent.services.random_user import RandomUserClient
from talent.services.seed import seed_database


@pytest.fixture
async def engine():
    # One shared connection so every session sees the same in-memory database
    engine = build_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def seeded(session_factory):
    """Load the demo companies, recruiters and jobs."""
    async with session_factory() as session:
        await seed_database(session)


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_scope(session_factory) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
    app.dependency_overrides.clear()


def random_user_payload(first="Jane", last="Doe", email="jane.doe@example.com"):
    return {
        "results": [
            {
                "gender": "female",
                "name": {"title": "Ms", "first": first, "last": last},
                "email": email,
                "location": {"city": "Haifa"},
            }
        ],
        "info": {"seed": "abc", "results": 1, "page": 1, "version": "1.4"},
    }


def mock_random_user_client(handler, timeout: float = 1.0) -> RandomUserClient:
    """RandomUserClient whose requests are answered by ``handler``."""
    return RandomUserClient(
        base_url="https://randomuser.test/api",
        timeout=timeout,
        transport=httpx.MockTransport(handler),
    )
