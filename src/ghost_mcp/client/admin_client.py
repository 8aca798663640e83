"""HTTP client for the Ghost Admin API.

Reference: https://docs.ghost.org/admin-api/
"""

import re
from collections.abc import Mapping
from typing import Any

import httpx

from ..auth.token import create_authorization_header, parse_api_key
from .base import (
    DEFAULT_TIMEOUT_MS,
    GhostBaseClient,
    QueryParams,
    merge_query_params,
    strip_trailing_slashes,
)

ADMIN_API_PATH = "/ghost/api/admin"

_PARTIAL_ADMIN_SUFFIXES = (
    re.compile(r"/ghost/?$"),
    re.compile(r"/ghost/api/?$"),
)


def normalize_admin_url(url: str) -> str:
    """Return ``url`` rewritten to end in exactly one ``/ghost/api/admin``.

    Accepts a bare site URL or any prefix of the Admin API path, with or
    without trailing slashes.
    """
    normalized = strip_trailing_slashes(url)
    if not normalized.endswith(ADMIN_API_PATH):
        for pattern in _PARTIAL_ADMIN_SUFFIXES:
            normalized = pattern.sub("", normalized)
        normalized += ADMIN_API_PATH
    return normalized


class GhostAdminClient(GhostBaseClient):
    """Token-authenticated client for the Ghost Admin API.

    The key is parsed once at construction; a new token is signed for every
    request because Ghost rejects tokens older than five minutes.
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        *,
        version: str | None = None,
        verify_ssl: bool = True,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create a client.

        Raises:
            ValueError: If ``url`` or ``api_key`` is empty.
            GhostAuthError: If ``api_key`` is not a valid ``"id:secret"`` key.

        """
        if not url:
            msg = "Ghost API URL is required"
            raise ValueError(msg)
        if not api_key:
            msg = "Ghost API key is required"
            raise ValueError(msg)

        super().__init__(
            normalize_admin_url(url),
            version=version,
            verify_ssl=verify_ssl,
            timeout_ms=timeout_ms,
            transport=transport,
        )
        self._api_key = parse_api_key(api_key)

    def build_url(self, endpoint: str, params: QueryParams | None = None) -> str:
        """Build the absolute URL for ``endpoint`` with optional query parameters."""
        return str(merge_query_params(self._endpoint_url(endpoint), params))

    def build_headers(self, *, include_content_type: bool = False) -> dict[str, str]:
        """Build request headers, signing a new token each time."""
        headers = {
            "Authorization": create_authorization_header(self._api_key),
            "Accept-Version": self._version,
        }
        if include_content_type:
            headers["Content-Type"] = "application/json"
        return headers

    async def request(
        self,
        endpoint: str,
        *,
        method: str = "GET",
        body: Any = None,
        params: QueryParams | None = None,
        timeout_ms: int | None = None,
    ) -> Any:
        """Perform a request against the Admin API.

        Args:
            endpoint: API path such as ``/posts/``.
            method: HTTP method.
            body: JSON-serializable request body, if any.
            params: Query parameters; ``None`` values are dropped.
            timeout_ms: Overall request timeout in milliseconds; defaults to the client timeout.

        Returns:
            Parsed JSON response, or ``None`` for 204 responses.

        Raises:
            GhostApiError: On any API or transport failure.
            GhostAuthError: If a token cannot be signed.

        """
        url = self.build_url(endpoint, params)
        headers = self.build_headers(include_content_type=body is not None)
        return await self._send(method, url, headers, timeout_ms=timeout_ms, json_body=body)

    async def get(self, endpoint: str, *, params: QueryParams | None = None, timeout_ms: int | None = None) -> Any:
        """Perform a GET request."""
        return await self.request(endpoint, method="GET", params=params, timeout_ms=timeout_ms)

    async def post(
        self,
        endpoint: str,
        *,
        body: Any = None,
        params: QueryParams | None = None,
        timeout_ms: int | None = None,
    ) -> Any:
        """Perform a POST request."""
        return await self.request(endpoint, method="POST", body=body, params=params, timeout_ms=timeout_ms)

    async def put(
        self,
        endpoint: str,
        *,
        body: Any = None,
        params: QueryParams | None = None,
        timeout_ms: int | None = None,
    ) -> Any:
        """Perform a PUT request."""
        return await self.request(endpoint, method="PUT", body=body, params=params, timeout_ms=timeout_ms)

    async def delete(
        self,
        endpoint: str,
        *,
        params: QueryParams | None = None,
        timeout_ms: int | None = None,
    ) -> Any:
        """Perform a DELETE request. Ghost usually answers with 204, giving ``None``."""
        return await self.request(endpoint, method="DELETE", params=params, timeout_ms=timeout_ms)

    async def upload_multipart(
        self,
        endpoint: str,
        files: Mapping[str, Any],
        data: Mapping[str, str] | None = None,
        *,
        timeout_ms: int | None = None,
    ) -> Any:
        """POST a multipart/form-data payload, e.g. for image uploads.

        No ``Content-Type`` header is set here; httpx supplies it together
        with the multipart boundary.

        Args:
            endpoint: API path such as ``/images/upload/``.
            files: httpx ``files`` mapping, e.g. ``{"file": (name, content, mime)}``.
            data: Additional form fields.
            timeout_ms: Overall request timeout in milliseconds; defaults to the client timeout.

        """
        url = self.build_url(endpoint)
        headers = self.build_headers()
        return await self._send("POST", url, headers, timeout_ms=timeout_ms, files=files, data=data)


__all__ = ["ADMIN_API_PATH", "GhostAdminClient", "normalize_admin_url"]
