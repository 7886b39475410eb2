"""Abstract handler base classes with HTTP client management."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, ClassVar

import httpx
from pydantic import BaseModel

from socialid.core.exceptions import HandlerError
from socialid.core.types import HandlerKind


class HandlerConfig(BaseModel):
    """Transport settings shared by every HTTP handler."""

    base_url: str | None = None
    timeout: float = 30.0


class AbstractHandler(ABC):
    """
    Turns a non-zero social id into a display value.

    One concrete class exists per HandlerKind. Failures are raised as
    HandlerError; folding them into absence is the caller's job.
    """

    KIND: ClassVar[HandlerKind]

    @property
    def kind(self) -> HandlerKind:
        return self.KIND

    @abstractmethod
    async def execute(self, social_id: int) -> str:
        """
        Resolve a social id.

        Args:
            social_id: Non-zero numeric id read from chain

        Returns:
            The display value

        Raises:
            HandlerError: If the lookup fails at any step
        """
        ...

    async def close(self) -> None:
        """Release resources held by the handler."""

    async def __aenter__(self) -> AbstractHandler:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class AbstractHttpHandler(AbstractHandler):
    """
    Base class for handlers backed by a single HTTP GET.

    Provides:
    - HTTP client management with connection pooling
    - Transport errors mapped to HandlerError
    - Status and JSON checks shared by all providers
    """

    BASE_URL: ClassVar[str]

    def __init__(self, config: HandlerConfig | None = None) -> None:
        self.config = config or HandlerConfig()
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self.config.base_url or self.BASE_URL

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.config.timeout),
                headers=self._get_default_headers(),
            )

        try:
            yield self._client
        except httpx.HTTPError as e:
            raise HandlerError(
                message=f"HTTP error: {e}",
                handler=self.kind.value,
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests. Override to add auth."""
        return {
            "User-Agent": "socialid/0.1",
            "Accept": "application/json",
        }

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Issue exactly one GET request, no retries."""
        async with self._get_client() as client:
            return await client.get(url, **kwargs)

    def _require_status(self, response: httpx.Response, expected: int = 200) -> None:
        """Fail unless the response carries exactly the expected status."""
        if response.status_code != expected:
            raise HandlerError(
                message=f"{self.kind.value} returned non-OK status: {response.status_code}",
                handler=self.kind.value,
                status_code=response.status_code,
            )

    def _parse_json_object(self, response: httpx.Response) -> dict[str, Any]:
        """Parse the body as a JSON object."""
        try:
            data = response.json()
        except ValueError as e:
            raise HandlerError(
                message=f"Failed to parse JSON response: {e}",
                handler=self.kind.value,
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise HandlerError(
                message="JSON response is not an object",
                handler=self.kind.value,
                status_code=response.status_code,
            )
        return data

    def _extract_string(self, data: dict[str, Any], *path: str) -> str:
        """Walk nested keys and return the string found at the end."""
        value: Any = data
        for key in path:
            if not isinstance(value, dict) or key not in value:
                raise HandlerError(
                    message=f"Missing field in response: {'.'.join(path)}",
                    handler=self.kind.value,
                )
            value = value[key]

        if not isinstance(value, str):
            raise HandlerError(
                message=f"Field is not a string: {'.'.join(path)}",
                handler=self.kind.value,
            )
        return value
