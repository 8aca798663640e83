"""HTTP client for the Ghost Content API.

Reference: https://ghost.org/docs/content-api/
"""

import re
from typing import Any

import httpx

from .base import (
    DEFAULT_TIMEOUT_MS,
    GhostBaseClient,
    QueryParams,
    merge_query_params,
    strip_trailing_slashes,
)

CONTENT_API_PATH = "/ghost/api/content"

_GHOST_PATH_SUFFIXES = (
    re.compile(r"/ghost/?$"),
    re.compile(r"/ghost/api/?$"),
    re.compile(r"/ghost/api/content/?$"),
    re.compile(r"/ghost/api/admin/?$"),
)


def normalize_content_url(url: str) -> str:
    """Return ``url`` rewritten to end in exactly one ``/ghost/api/content``.

    Any Ghost API path already present, including the Admin API path, is
    replaced.
    """
    normalized = strip_trailing_slashes(url)
    for pattern in _GHOST_PATH_SUFFIXES:
        normalized = pattern.sub("", normalized)
    return normalized + CONTENT_API_PATH


class GhostContentClient(GhostBaseClient):
    """Read-only client for the Ghost Content API, authenticated by ``?key=``."""

    def __init__(
        self,
        url: str,
        key: str,
        *,
        version: str | None = None,
        verify_ssl: bool = True,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create a client.

        Raises:
            ValueError: If ``url`` or ``key`` is empty.

        """
        if not url:
            msg = "Ghost site URL is required"
            raise ValueError(msg)
        if not key:
            msg = "Ghost Content API key is required"
            raise ValueError(msg)

        super().__init__(
            normalize_content_url(url),
            version=version,
            verify_ssl=verify_ssl,
            timeout_ms=timeout_ms,
            transport=transport,
        )
        self._key = key

    def build_url(self, endpoint: str, params: QueryParams | None = None) -> str:
        """Build the absolute URL for ``endpoint``; ``key`` is always set first."""
        url = self._endpoint_url(endpoint).copy_set_param("key", self._key)
        return str(merge_query_params(url, params))

    def build_headers(self) -> dict[str, str]:
        """Build request headers. The Content API takes no Authorization header."""
        return {"Accept-Version": self._version}

    async def get(self, endpoint: str, *, params: QueryParams | None = None, timeout_ms: int | None = None) -> Any:
        """Perform a GET request against the Content API.

        Raises:
            GhostApiError: On any API or transport failure.

        """
        url = self.build_url(endpoint, params)
        return await self._send("GET", url, self.build_headers(), timeout_ms=timeout_ms)


__all__ = ["CONTENT_API_PATH", "GhostContentClient", "normalize_content_url"]
