"""Shared request lifecycle for the Ghost Admin and Content API clients.

Subclasses supply the base URL, how query parameters are layered onto a URL,
and which headers a request carries. Sending, timeout enforcement, response
parsing and error triage live here so both clients behave identically.
"""

import asyncio
import logging
import re
from collections.abc import Mapping
from typing import Any, TypeAlias

import httpx
from pydantic import ValidationError

from .errors import HTTP_NO_CONTENT, ErrorDetail, ErrorEnvelope, GhostApiError

logger = logging.getLogger("ghost_mcp.client")

DEFAULT_TIMEOUT_MS = 30000
DEFAULT_API_VERSION = "v5.0"

QueryValue: TypeAlias = str | int | float | bool | None
QueryParams: TypeAlias = Mapping[str, QueryValue]

_TRAILING_SLASHES = re.compile(r"/+$")


def strip_trailing_slashes(url: str) -> str:
    """Remove every trailing ``/`` from a URL."""
    return _TRAILING_SLASHES.sub("", url)


def coerce_query_value(value: str | int | float | bool) -> str:
    """Convert a query parameter value to the string Ghost expects."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def merge_query_params(url: httpx.URL, params: QueryParams | None) -> httpx.URL:
    """Set each defined parameter on ``url``; ``None`` values are omitted."""
    for key, value in (params or {}).items():
        if value is not None:
            url = url.copy_set_param(key, coerce_query_value(value))
    return url


class GhostBaseClient:
    """Common state and request routine for Ghost API clients."""

    def __init__(
        self,
        base_url: str,
        *,
        version: str | None = None,
        verify_ssl: bool = True,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize shared client configuration.

        Args:
            base_url: Normalized API base URL.
            version: Value for the ``Accept-Version`` header.
            verify_ssl: Whether to verify TLS certificates.
            timeout_ms: Default overall request timeout in milliseconds.
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.

        """
        self._base_url = base_url
        self._version = version or DEFAULT_API_VERSION
        self._verify_ssl = verify_ssl
        self._timeout_ms = timeout_ms
        self._transport = transport

    @property
    def base_url(self) -> str:
        """Return the normalized API base URL."""
        return self._base_url

    @property
    def version(self) -> str:
        """Return the configured API version."""
        return self._version

    @property
    def timeout_ms(self) -> int:
        """Return the default request timeout in milliseconds."""
        return self._timeout_ms

    def _endpoint_url(self, endpoint: str) -> httpx.URL:
        """Join ``endpoint`` onto the base URL with exactly one leading slash."""
        path = endpoint if endpoint.startswith("/") else f"/{endpoint}"
        return httpx.URL(f"{self._base_url}{path}")

    async def _send(  # noqa: PLR0913 (request descriptor fields)
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        *,
        timeout_ms: int | None,
        json_body: Any = None,
        files: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send one request and return its parsed JSON body.

        Returns:
            Parsed JSON, or ``None`` for a 204 response.

        Raises:
            GhostApiError: For any non-success response or transport failure.

        """
        timeout_ms = timeout_ms or self._timeout_ms
        logger.debug("%s %s", method, httpx.URL(url).path)
        request_kwargs: dict[str, Any] = {"headers": headers}
        if json_body is not None:
            request_kwargs["json"] = json_body
        if files is not None:
            request_kwargs["files"] = files
        if data is not None:
            request_kwargs["data"] = data

        timeout = httpx.Timeout(timeout_ms / 1000)
        try:
            async with (
                asyncio.timeout(timeout_ms / 1000),
                httpx.AsyncClient(
                    verify=self._verify_ssl,
                    timeout=timeout,
                    transport=self._transport,
                    follow_redirects=True,
                ) as http_client,
            ):
                response = await http_client.request(method, url, **request_kwargs)

                if not response.is_success:
                    raise GhostApiError.from_response(response.status_code, self._parse_error_body(response))

                if response.status_code == HTTP_NO_CONTENT:
                    return None

                return response.json()
        except GhostApiError as exc:
            logger.warning("Ghost API %s %s failed with status %s: %s", method, httpx.URL(url).path, exc.status_code, exc)
            raise
        except (TimeoutError, httpx.TimeoutException) as exc:
            logger.warning("Ghost API %s %s timed out after %sms", method, httpx.URL(url).path, timeout_ms)
            raise GhostApiError.timeout_error(timeout_ms) from exc
        except (httpx.HTTPError, OSError, ValueError) as exc:
            logger.warning("Ghost API %s %s failed: %s", method, httpx.URL(url).path, exc)
            raise GhostApiError.network_error(exc) from exc
        except Exception as exc:
            logger.exception("Unexpected error during Ghost API %s %s", method, httpx.URL(url).path)
            raise GhostApiError.network_error(exc) from exc

    @staticmethod
    def _parse_error_body(response: httpx.Response) -> list[ErrorDetail]:
        """Extract error entries from a failed response.

        Falls back to a single entry built from the reason phrase when the body
        is not JSON. A JSON body without an ``errors`` array yields no entries.
        """
        fallback = [ErrorDetail(message=response.reason_phrase or f"HTTP {response.status_code}")]
        try:
            body = response.json()
        except ValueError:
            return fallback
        if not isinstance(body, dict):
            return []
        try:
            return ErrorEnvelope.model_validate(body).errors
        except ValidationError:
            return fallback


__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_TIMEOUT_MS",
    "GhostBaseClient",
    "QueryParams",
    "QueryValue",
    "coerce_query_value",
    "merge_query_params",
    "strip_trailing_slashes",
]
