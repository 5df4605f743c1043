"""
HTTP client for the contract node.

Thin wrapper over httpx: issues GET/POST requests with JSON bodies and maps
failures onto the ocs01 error taxonomy. No retry happens here; the
transaction submitter owns the retry policy.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from ..errors import ApiError, DecodeError, NetworkError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 100.0


class RpcClient:
    """
    Reusable node client.

    One instance is shared by every call of a run so the underlying
    connection pool is reused.

    Args:
        timeout: Per-request timeout in seconds
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``)
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def __enter__(self) -> "RpcClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def call(self, method: str, url: str, body: Optional[Any] = None) -> Any:
        """
        Send a request and decode its JSON response.

        Args:
            method: "GET" or "POST"; GET ignores ``body``
            url: Absolute request URL
            body: JSON-serializable request body for POST

        Returns:
            Decoded JSON value

        Raises:
            ApiError: If the node answers with status >= 400
            NetworkError: On DNS, connect, timeout, redirect or other transport failures
            DecodeError: If the response body cannot be decoded or is not valid JSON
        """
        method = method.upper()
        if method not in ("GET", "POST"):
            raise ValueError(f"Unsupported HTTP method: {method}")

        logger.debug("%s %s", method, url)
        try:
            if method == "GET":
                response = self._client.get(url)
            else:
                response = self._client.post(url, json=body)
        except httpx.DecodingError as exc:
            raise DecodeError(f"Undecodable response body from {url}: {exc}") from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"{method} {url} failed: {exc}") from exc

        if response.status_code >= 400:
            raise ApiError(response.status_code, response.text)

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"Invalid JSON from {url}: {exc}") from exc

    def get(self, url: str) -> Any:
        return self.call("GET", url)

    def post(self, url: str, body: Any) -> Any:
        return self.call("POST", url, body)


def join_url(base: str, path: str) -> str:
    """Join an RPC base URL and an endpoint path."""
    return f"{base.rstrip('/')}/{path.lstrip('/')}"
