"""
API Service - Generic JSON client for the explorer backend.

Thin wrapper over httpx: joins paths onto a base URL, sends query params or a
JSON body, and decodes the JSON reply. No retries, no caching, no auth.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..config import ApiConfig
from ..errors import ScExplorerError

logger = logging.getLogger(__name__)


class ApiError(ScExplorerError):
    """Raised for any failed request: HTTP status, network or decoding."""

    exit_code = 3

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.body = body


def join_url(base_url: str, path: str) -> str:
    """Join base URL and path with exactly one slash."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


class ApiService:
    """
    HTTP client exposing ``get(path, params)`` and ``post(path, body)``.

    Attributes:
        base_url: Backend root, e.g. ``https://explorer.example/api``
        timeout: Request timeout in seconds
        client: Optional pre-built httpx.Client (not closed by this object)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    @classmethod
    def from_config(cls, config: ApiConfig) -> "ApiService":
        return cls(base_url=config.api_url, timeout=config.timeout)

    def __enter__(self) -> "ApiService":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return self._request("GET", path, params=params or {})

    def post(self, path: str, body: Optional[dict[str, Any]] = None) -> Any:
        return self._request("POST", path, json=body if body is not None else {})

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Send one request and decode the JSON reply.

        Returns:
            Decoded JSON, or None for an empty body

        Raises:
            ApiError: On non-2xx status, network failure or bad JSON
        """
        url = join_url(self.base_url, path)
        logger.debug("%s %s", method, url)

        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("%s %s failed: HTTP %s", method, url, status)
            raise ApiError(
                f"API error: {status} - {exc.response.text}",
                status_code=status,
                url=url,
                body=exc.response.text,
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(f"Network error: {exc}", url=url) from exc

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("%s %s returned invalid JSON", method, url)
            raise ApiError(
                f"Invalid JSON response: {exc}",
                status_code=response.status_code,
                url=url,
                body=response.text,
            ) from exc
