"""Read-only JSON client for REST market data providers.

Provider adapters that talk HTTP (e.g. Polygon.io) inherit from HTTPClient.
It owns one lazily created httpx.Client, sends provider credentials as
default query parameters, and retries transient network failures with
exponential backoff. Everything else surfaces as HTTPClientError.
"""

import logging
from functools import cached_property
from typing import Any, Self

import httpx
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)

# Network failures worth another attempt; HTTP error statuses are not retried
TRANSIENT_ERRORS = (httpx.TimeoutException, httpx.ConnectError)


class HTTPClientError(Exception):
    """A provider request failed or returned something unusable."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429


class HTTPClient:
    """Base class for REST market data adapters.

    Example:
        class PolygonGateway(HTTPClient, MarketDataGateway):
            def __init__(self, api_key: str):
                super().__init__(
                    base_url="https://api.polygon.io",
                    default_params={"apiKey": api_key},
                )

            def get_price(self, symbol: str) -> Decimal | None:
                data = self.get_json(f"/v2/aggs/ticker/{symbol}/prev")
                ...
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        default_params: dict[str, str] | None = None,
        max_attempts: int = 3,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.headers = {"Accept": "application/json", **(headers or {})}
        self.default_params = default_params or {}
        self.max_attempts = max_attempts
        self.closed = False

    @cached_property
    def session(self) -> httpx.Client:
        """Connection pool, opened on first request."""
        return httpx.Client(base_url=self.base_url, timeout=self.timeout, headers=self.headers)

    def close(self) -> None:
        """Release pooled connections. Requests made after closing fail."""
        self.closed = True
        session = self.__dict__.pop("session", None)
        if session is not None:
            session.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _retrying(self) -> Retrying:
        return Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    def _send(self, path: str, query: dict[str, str]) -> httpx.Response:
        # Lookups abandoned by a timeout may still retry after the request ended
        if self.closed:
            raise HTTPClientError(f"Client closed before GET {path}")
        return self.session.get(path, params=query)

    def get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        """GET path and return the decoded JSON body.

        Args:
            path: URL path, joined with base_url
            params: Query parameters, merged over default_params

        Raises:
            HTTPClientError: On error statuses, exhausted retries, a closed client
                or a non-JSON body
        """
        query = {**self.default_params, **(params or {})}

        try:
            response = self._retrying()(self._send, path, query)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(f"HTTP {status_code} for GET {path}: {e.response.text[:200]}")
            raise HTTPClientError(
                f"HTTP {status_code}: {e.response.reason_phrase}",
                status_code=status_code,
                body=e.response.text,
            ) from e
        except TRANSIENT_ERRORS as e:
            logger.warning(f"GET {path} failed after {self.max_attempts} attempts: {e!r}")
            raise HTTPClientError(f"Provider unreachable: {path}") from e

        try:
            return response.json()
        except ValueError as e:
            raise HTTPClientError(f"Invalid JSON from {path}") from e
