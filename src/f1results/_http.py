"""httpx transports shared by the HTTP result sources.

Every failure below the JSON layer leaves this module as a ``FetchError``
subclass, so sources never leak httpx exceptions to the pipeline.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import httpx

from f1results.exceptions import (
    FetchAPIError,
    FetchConnectionError,
    FetchError,
    FetchTimeoutError,
)

DEFAULT_TIMEOUT = 30.0
_HEADERS = {"Accept": "application/json"}


@contextmanager
def _fetch_errors(endpoint: str) -> Iterator[None]:
    """Re-raise httpx transport failures for *endpoint* as ``FetchError``."""
    try:
        yield
    except httpx.ConnectError as exc:
        raise FetchConnectionError(f"{endpoint}: {exc}") from exc
    except httpx.TimeoutException as exc:
        raise FetchTimeoutError(f"{endpoint}: {exc}") from exc
    except httpx.HTTPError as exc:
        # ReadError, RemoteProtocolError, ProxyError, ...
        raise FetchError(f"{endpoint}: {type(exc).__name__}: {exc}") from exc


def _decode(response: httpx.Response) -> Any:
    if response.is_error:
        raise FetchAPIError(status_code=response.status_code, message=response.text)
    try:
        return response.json()
    except ValueError as exc:
        raise FetchError(f"Malformed JSON from {response.request.url}: {exc}") from exc


class SyncTransport:
    """Blocking JSON GETs against one base URL."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout, headers=_HEADERS)

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        with _fetch_errors(endpoint):
            response = self._client.get(endpoint, params=params)
        return _decode(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """``SyncTransport`` over ``httpx.AsyncClient``."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=_HEADERS)

    async def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        with _fetch_errors(endpoint):
            response = await self._client.get(endpoint, params=params)
        return _decode(response)

    async def close(self) -> None:
        await self._client.aclose()
