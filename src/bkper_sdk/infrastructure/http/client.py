"""HTTP client for the Bkper REST API."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable

import httpx

from bkper_sdk.domain.ledger.exceptions import (
    RemoteAuthorizationError,
    RemoteFetchError,
)

if TYPE_CHECKING:
    from bkper_config import ApiConfig

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Awaitable[str | None]]

_AUTH_STATUS_CODES = frozenset({401, 403})


def _is_retryable_status(status_code: int) -> bool:
    return status_code < 200 or status_code == 429 or status_code >= 500


def _error_message(response: httpx.Response) -> str:
    """Message of the API error envelope, or the start of the raw body."""
    try:
        error = response.json().get("error") or {}
    except (ValueError, AttributeError):
        error = {}
    message = error.get("message") if isinstance(error, dict) else None
    if message:
        return str(message)
    return response.text[:200] if response.text else "no body"


class BkperApiClient:
    """HTTP client wrapper for the book-scoped endpoints of the API.

    Transport concerns live here: authentication, the API key parameter,
    retries with exponential backoff and translation of HTTP failures into
    ``RemoteFetchError``. A 404 is returned as ``None`` so callers can map
    it to an empty result.
    """

    def __init__(
        self,
        api_config: ApiConfig,
        book_id: str,
        token_provider: TokenProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = api_config
        self._book_id = book_id
        self._token_provider = token_provider
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def book_id(self) -> str:
        return self._book_id

    @property
    def page_size(self) -> int:
        return self._config.page_size

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url.rstrip("/"),
                timeout=self._config.timeout,
                headers={"Content-Type": "application/json; charset=UTF-8"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # -------------------------------------------------------------------------
    # Endpoints
    # -------------------------------------------------------------------------

    async def search_transactions(
        self,
        query: str,
        limit: int,
        cursor: str | None = None,
    ) -> dict[str, Any] | None:
        """One page of ``GET /v5/books/{id}/transactions``.

        The cursor travels in a request header, never as a parameter.
        """
        headers = {"cursor": cursor} if cursor else None
        return await self._get(
            f"/v5/books/{self._book_id}/transactions",
            params={"query": query or "", "limit": limit},
            headers=headers,
        )

    async def get_balances(self, query: str) -> dict[str, Any] | None:
        return await self._get(
            f"/v5/books/{self._book_id}/balances",
            params={"query": query or ""},
        )

    async def get_book(self) -> dict[str, Any] | None:
        return await self._get(f"/v5/books/{self._book_id}")

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    async def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any] | None:
        request_params = dict(params or {})
        if self._config.api_key is not None:
            request_params["key"] = self._config.api_key.get_secret_value()

        request_headers = dict(headers or {})
        token = await self._access_token()
        if token:
            request_headers["Authorization"] = f"Bearer {token}"

        client = await self._get_client()
        attempt = 0
        while True:
            try:
                response = await client.get(
                    path,
                    params=request_params,
                    headers=request_headers,
                )
            except (httpx.ConnectError, httpx.TimeoutException) as e:
                if attempt < self._config.max_retries:
                    attempt = await self._backoff(attempt, path, str(e))
                    continue
                logger.warning("Bkper API request %s failed: %s", path, e)
                msg = f"Request to {path} failed: {e}"
                raise RemoteFetchError(msg) from e

            if response.is_success:
                return response.json()

            status_code = response.status_code
            if status_code == 404:
                logger.debug("Bkper API returned 404 for %s", path)
                return None

            if _is_retryable_status(status_code) and (
                attempt < self._config.max_retries
            ):
                attempt = await self._backoff(attempt, path, f"HTTP {status_code}")
                continue

            message = _error_message(response)
            logger.warning(
                "Bkper API returned error %d for %s: %s",
                status_code,
                path,
                message,
            )
            if status_code in _AUTH_STATUS_CODES:
                raise RemoteAuthorizationError(message, status_code=status_code)
            raise RemoteFetchError(message, status_code=status_code)

    async def _backoff(self, attempt: int, path: str, reason: str) -> int:
        delay = self._config.retry_delay * (2**attempt)
        logger.info(
            "Bkper API request %s failed (%s) - retrying in %.1fs",
            path,
            reason,
            delay,
        )
        await asyncio.sleep(delay)
        return attempt + 1

    async def _access_token(self) -> str | None:
        token: str | None = None
        if self._token_provider is not None:
            token = await self._token_provider()
        if token is None and self._config.access_token is not None:
            token = self._config.access_token.get_secret_value()
        if token:
            token = token.removeprefix("Bearer ").removeprefix("bearer ")
        return token or None
