"""Dependency checks behind GET /health."""

import asyncio
import logging
import time
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Literal

import httpx
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

CHECK_TIMEOUT = 2.0


@dataclass
class ServiceHealth:
    """Health status for a service dependency."""

    status: Literal["connected", "unreachable", "error"]
    latency_ms: float | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "connected"


async def _check(name: str, check: Awaitable[None]) -> ServiceHealth:
    start = time.perf_counter()
    try:
        async with asyncio.timeout(CHECK_TIMEOUT):
            await check
    except TimeoutError:
        logger.warning(f"{name} health check timed out after {CHECK_TIMEOUT}s")
        return ServiceHealth(status="unreachable", error="timeout")
    except Exception as e:
        logger.warning(f"{name} health check failed: {e}")
        return ServiceHealth(status="error", error=str(e))
    latency = (time.perf_counter() - start) * 1000
    return ServiceHealth(status="connected", latency_ms=round(latency, 2))


async def check_database(engine: AsyncEngine) -> ServiceHealth:
    """Run ``SELECT 1`` on a pooled connection."""

    async def select_one() -> None:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    return await _check("database", select_one())


async def check_random_user_api(
    url: str, transport: httpx.AsyncBaseTransport | None = None
) -> ServiceHealth:
    """Ask the random user API for a single, minimal result."""

    async def fetch_one() -> None:
        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.get(url, params={"results": 1, "inc": "email"})
            if response.status_code != 200:
                raise RuntimeError(f"HTTP {response.status_code}")

    return await _check("random user API", fetch_one())


async def health_report(
    engine: AsyncEngine,
    random_user_url: str,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict:
    """Overall status plus one entry per dependency.

    Only the database decides between ``healthy`` and ``degraded``; the
    random user API is needed by POST /recruiters/randomUser alone.
    """
    database, random_user = await asyncio.gather(
        check_database(engine),
        check_random_user_api(random_user_url, transport),
    )
    return {
        "status": "healthy" if database.ok else "degraded",
        "dependencies": {
            "database": database.status,
            "random_user_api": random_user.status,
        },
    }
