"""
API Client Module

Async HTTP client that downloads a JSON array from a URL and decodes it
into typed records, reporting failures as a NetworkError instead of
raising them.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Generic, List, Optional, Type, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ..config import config
from .errors import FetchError, NetworkError
from .models import Post


logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a single fetch: either decoded items or an error kind."""
    value: Optional[List[T]] = None
    error: Optional[NetworkError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: List[T]) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: NetworkError) -> "FetchResult[T]":
        return cls(error=error)


@lru_cache(maxsize=32)
def _list_adapter(item_type: type) -> TypeAdapter:
    return TypeAdapter(List[item_type])


class APIClient:
    """
    HTTP client for JSON list endpoints.

    Features:
    - Single GET per fetch, no retry
    - Status check (2xx only)
    - All-or-nothing decoding into any pydantic-compatible type
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the API client.

        Args:
            client: Shared AsyncClient to reuse. When None a client is
                opened and closed around every fetch.
            transport: Transport for the per-fetch client (used by tests).
        """
        self.client = client
        self.transport = transport
        self.timeout = config.api.timeout_seconds
        logger.info(f"APIClient initialized (base_url: {config.api.base_url})")

    async def fetch(self, url: str, item_type: Type[T]) -> FetchResult[T]:
        """
        Download a JSON array and decode it.

        Args:
            url: Absolute http(s) URL of the endpoint.
            item_type: Record type of each array element.

        Returns:
            FetchResult holding either the decoded list or the error kind.
        """
        try:
            items = await self._download(url, item_type)

        except FetchError as e:
            logger.warning(e.kind.message)
            if e.detail:
                logger.debug(f"{e.kind.name}: {e.detail}")
            return FetchResult.failure(e.kind)

        except Exception as e:
            logger.warning(f"An error occurred downloading the data: {e}")
            return FetchResult.failure(NetworkError.BAD_RESPONSE)

        logger.info(f"Fetched {len(items)} item(s) from {url}")
        return FetchResult.success(items)

    async def download_data(
        self,
        url: str,
        item_type: Type[T]
    ) -> Optional[List[T]]:
        """Fetch and return the decoded list, or None on any failure."""
        result = await self.fetch(url, item_type)
        return result.value

    async def fetch_posts(self, url: Optional[str] = None) -> FetchResult[Post]:
        """Fetch posts from the configured posts endpoint."""
        return await self.fetch(url or config.api.posts_url, Post)

    async def _download(self, url: str, item_type: Type[T]) -> List[T]:
        request_url = self._parse_url(url)

        logger.debug(f"GET {request_url}")
        try:
            response = await self._get(request_url)
        except httpx.TransportError as e:
            raise FetchError(NetworkError.BAD_RESPONSE, str(e)) from e

        if not isinstance(response, httpx.Response):
            raise FetchError(NetworkError.BAD_RESPONSE, repr(response))

        if not 200 <= response.status_code < 300:
            raise FetchError(
                NetworkError.BAD_STATUS,
                f"status {response.status_code}"
            )

        try:
            return _list_adapter(item_type).validate_json(response.content)
        except ValidationError as e:
            raise FetchError(
                NetworkError.FAILED_TO_DECODE_RESPONSE,
                f"{e.error_count()} validation error(s)"
            ) from e

    async def _get(self, url: httpx.URL) -> httpx.Response:
        if self.client is not None:
            return await self.client.get(url, follow_redirects=True)

        kwargs = {"follow_redirects": True}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self.transport is not None:
            kwargs["transport"] = self.transport

        async with httpx.AsyncClient(**kwargs) as client:
            return await client.get(url)

    @staticmethod
    def _parse_url(url: str) -> httpx.URL:
        """Parse an absolute http(s) URL or raise a BAD_URL FetchError."""
        try:
            parsed = httpx.URL(url)
        except (httpx.InvalidURL, TypeError) as e:
            raise FetchError(NetworkError.BAD_URL, str(e)) from e

        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise FetchError(NetworkError.BAD_URL, repr(url))

        # httpx quotes these instead of rejecting them
        if any(ch.isspace() or ord(ch) < 32 or ord(ch) == 127 for ch in url):
            raise FetchError(NetworkError.BAD_URL, f"illegal character in {url!r}")

        if parsed.port is not None and not 0 <= parsed.port <= 65535:
            raise FetchError(NetworkError.BAD_URL, f"port out of range in {url!r}")

        return parsed
