"""Random user API client used to enrich recruiter creation.

Fetches one identity from randomuser.me and maps its nested name into a
flat (full name, email) pair.
"""

import asyncio
import logging

import httpx
from pydantic import ValidationError

from talent.config import settings
from talent.exceptions import RandomUserError, RandomUserTimeoutError
from talent.schemas.random_user import RandomIdentity, RandomUser, RandomUserResponse

logger = logging.getLogger(__name__)


class RandomUserClient:
    """Async client for the random user API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: API endpoint. Defaults to settings.random_user_api_url
            timeout: Overall deadline in seconds. Defaults to settings.random_user_timeout
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.base_url = base_url or settings.random_user_api_url
        self.timeout = timeout if timeout is not None else settings.random_user_timeout
        self.transport = transport

    async def _fetch_first_user(self) -> RandomUser:
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(self.base_url, timeout=self.timeout)
                response.raise_for_status()
                payload = RandomUserResponse.model_validate(response.json())
        except httpx.TimeoutException as e:
            raise RandomUserTimeoutError(
                f"Random user API timed out after {self.timeout}s"
            ) from e
        except httpx.HTTPStatusError as e:
            raise RandomUserError(
                f"Random user API returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise RandomUserError(f"Random user API request failed: {e}") from e
        except (ValueError, ValidationError) as e:
            raise RandomUserError(f"Random user API returned a malformed payload: {e}") from e

        if not payload.results:
            raise RandomUserError("Random user API returned no results")

        logger.info("Retrieved random user from %s", self.base_url)
        return payload.results[0]

    async def fetch_identity(self) -> RandomIdentity:
        """Fetch the first random user as a RandomIdentity.

        The request runs as its own task; the caller suspends until it
        finishes or the deadline passes, in which case the task is cancelled.

        Returns:
            RandomIdentity with "<first> <last>" and email

        Raises:
            RandomUserTimeoutError: On timeout
            RandomUserError: On network failure, non-2xx, malformed or empty result
        """
        task = asyncio.create_task(self._fetch_first_user())
        try:
            async with asyncio.timeout(self.timeout):
                user = await task
        except TimeoutError as e:
            raise RandomUserTimeoutError(
                f"Random user API timed out after {self.timeout}s"
            ) from e

        return RandomIdentity.from_random_user(user)


def get_random_user_client() -> RandomUserClient:
    """FastAPI dependency; overridden in tests."""
    return RandomUserClient()
