"""Unit tests for GhostAdminClient.

Requests are served by ``httpx.MockTransport`` so no network access is needed.
"""

import asyncio
import json
from collections.abc import Callable
from unittest.mock import patch

import httpx
import pytest

from ghost_mcp.auth.token import GhostAuthError, create_authorization_header
from ghost_mcp.client.admin_client import GhostAdminClient, normalize_admin_url
from ghost_mcp.client.errors import GhostApiError

API_KEY = "6489a1b2c3d4e5f6a7b8c9d0:a1b2c3d4e5f6a7b8c9d0e1f2a3b4c5d6"
SITE = "https://example.site"
ADMIN_BASE = "https://example.site/ghost/api/admin"


def _client(handler: Callable[[httpx.Request], httpx.Response], **kwargs: object) -> GhostAdminClient:
    return GhostAdminClient(SITE, API_KEY, transport=httpx.MockTransport(handler), **kwargs)  # type: ignore[arg-type]


class TestNormalizeAdminUrl:
    """Tests for normalize_admin_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.site",
            "https://example.site/",
            "https://example.site//",
            "https://example.site/ghost",
            "https://example.site/ghost/",
            "https://example.site/ghost/api",
            "https://example.site/ghost/api/",
            "https://example.site/ghost/api/admin",
            "https://example.site/ghost/api/admin/",
            "https://example.site///",
            "https://example.site/ghost///",
            "https://example.site/ghost/api///",
            "https://example.site/ghost/api/admin///",
        ],
    )
    def test_variants_collapse_to_admin_base(self, url: str) -> None:
        """Every accepted form should end in exactly one admin path."""
        assert normalize_admin_url(url) == ADMIN_BASE

    def test_idempotent(self) -> None:
        """Normalizing an already normalized URL should not change it."""
        once = normalize_admin_url("https://example.site/blog/")
        assert once == "https://example.site/blog/ghost/api/admin"
        assert normalize_admin_url(once) == once


class TestConstruction:
    """Tests for client construction and request building."""

    def test_requires_url(self) -> None:
        """An empty URL should be rejected."""
        with pytest.raises(ValueError, match="URL is required"):
            GhostAdminClient("", API_KEY)

    def test_requires_key(self) -> None:
        """An empty key should be rejected."""
        with pytest.raises(ValueError, match="key is required"):
            GhostAdminClient(SITE, "")

    def test_malformed_key_fails_at_construction(self) -> None:
        """A malformed key should raise GhostAuthError before any request is made."""
        with pytest.raises(GhostAuthError):
            GhostAdminClient(SITE, "not-a-key")

    def test_odd_length_secret_fails_at_construction(self) -> None:
        """A secret that is not whole hex bytes should be rejected before any request is made."""
        with pytest.raises(GhostAuthError, match="must be hexadecimal"):
            GhostAdminClient(SITE, "abc:abc")

    def test_defaults(self) -> None:
        """Version and timeout should default when not supplied."""
        client = GhostAdminClient(SITE, API_KEY)
        assert client.base_url == ADMIN_BASE
        assert client.version == "v5.0"
        assert client.timeout_ms == 30000

    def test_build_url_omits_none_and_coerces(self) -> None:
        """None parameters should be dropped; booleans become lowercase strings."""
        client = GhostAdminClient(SITE, API_KEY)
        url = httpx.URL(client.build_url("posts/", {"limit": 5, "filter": None, "featured": True}))
        assert url.path == "/ghost/api/admin/posts/"
        assert url.params["limit"] == "5"
        assert url.params["featured"] == "true"
        assert "filter" not in url.params

    def test_build_headers(self) -> None:
        """Headers should carry a Ghost token and the configured version."""
        client = GhostAdminClient(SITE, API_KEY, version="v5.1")
        headers = client.build_headers()
        assert headers["Authorization"].startswith("Ghost ")
        assert headers["Accept-Version"] == "v5.1"
        assert "Content-Type" not in headers
        assert client.build_headers(include_content_type=True)["Content-Type"] == "application/json"


@pytest.mark.asyncio
class TestRequests:
    """Tests for the request lifecycle against a mock transport."""

    async def test_get_returns_parsed_json(self) -> None:
        """A successful GET should return the decoded body."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"posts": [{"id": "1"}]})

        result = await _client(handler).get("/posts/", params={"limit": 2})
        assert result == {"posts": [{"id": "1"}]}
        assert seen[0].url.path == "/ghost/api/admin/posts/"
        assert seen[0].url.params["limit"] == "2"
        assert seen[0].headers["Accept-Version"] == "v5.0"
        assert seen[0].headers["Authorization"].startswith("Ghost ")

    async def test_post_sends_json_body(self) -> None:
        """A POST with a body should send JSON with a JSON content type."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"posts": [{"id": "new"}]})

        body = {"posts": [{"title": "Hello"}]}
        result = await _client(handler).post("/posts/", body=body, params={"source": "html"})
        assert result == {"posts": [{"id": "new"}]}
        assert seen[0].method == "POST"
        assert seen[0].headers["Content-Type"] == "application/json"
        assert json.loads(seen[0].content) == body
        assert seen[0].url.params["source"] == "html"

    async def test_delete_no_content_returns_none(self) -> None:
        """A 204 response should yield None."""
        result = await _client(lambda _request: httpx.Response(204)).delete("/posts/abc/")
        assert result is None

    async def test_error_body_is_classified(self) -> None:
        """A Ghost error envelope should populate message, type and status."""
        body = {"errors": [{"message": "Unknown Admin API Key", "type": "UnauthorizedError", "code": "INVALID_JWT"}]}
        client = _client(lambda _request: httpx.Response(401, json=body))
        with pytest.raises(GhostApiError) as exc_info:
            await client.get("/site/")
        exc = exc_info.value
        assert exc.status_code == 401
        assert exc.message == "Unknown Admin API Key"
        assert exc.type == "UnauthorizedError"
        assert exc.code == "INVALID_JWT"
        assert exc.is_authentication_error()

    async def test_non_json_error_body_uses_reason_phrase(self) -> None:
        """A non-JSON error body should fall back to the HTTP reason phrase."""
        client = _client(lambda _request: httpx.Response(502, text="<html>bad gateway</html>"))
        with pytest.raises(GhostApiError) as exc_info:
            await client.get("/site/")
        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"
        assert exc_info.value.is_server_error()

    async def test_connect_error_is_network_error(self) -> None:
        """Transport failures should surface as network errors with status 0."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(GhostApiError) as exc_info:
            await _client(handler).get("/site/")
        assert exc_info.value.is_network_error()
        assert "connection refused" in exc_info.value.message

    async def test_slow_response_times_out(self) -> None:
        """A response slower than the timeout should raise a timeout error."""

        async def handler(_request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(1)
            return httpx.Response(200, json={})

        with pytest.raises(GhostApiError) as exc_info:
            await _client(handler).get("/site/", timeout_ms=50)
        assert exc_info.value.is_timeout_error()
        assert exc_info.value.message == "Request timed out after 50ms"

    async def test_client_timeout_applies_by_default(self) -> None:
        """The constructor timeout should be used when a call passes none."""

        async def handler(_request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(1)
            return httpx.Response(200, json={})

        client = _client(handler, timeout_ms=40)  # type: ignore[arg-type]
        with pytest.raises(GhostApiError, match="after 40ms"):
            await client.get("/site/")

    async def test_fresh_token_per_request(self) -> None:
        """Every request should sign its own token."""
        client = _client(lambda _request: httpx.Response(200, json={}))
        with patch(
            "ghost_mcp.client.admin_client.create_authorization_header",
            wraps=create_authorization_header,
        ) as mock_header:
            await client.get("/site/")
            await client.get("/site/")
        assert mock_header.call_count == 2

    async def test_upload_multipart(self) -> None:
        """Multipart uploads should let httpx set the boundary content type."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"images": [{"url": "https://example.site/content/images/a.png"}]})

        files = {"file": ("a.png", b"\x89PNG", "image/png")}
        result = await _client(handler).upload_multipart("/images/upload/", files, {"purpose": "image"})
        assert result["images"][0]["url"].endswith("a.png")
        content_type = seen[0].headers["Content-Type"]
        assert content_type.startswith("multipart/form-data; boundary=")
        assert "application/json" not in content_type
        assert b'name="purpose"' in seen[0].content
        assert b'filename="a.png"' in seen[0].content

    async def test_unexpected_transport_exception_is_network_error(self) -> None:
        """Any exception raised while sending should be classified as a network error carrying the cause."""

        def handler(_request: httpx.Request) -> httpx.Response:
            msg = "socket exploded"
            raise RuntimeError(msg)

        with pytest.raises(GhostApiError) as exc_info:
            await _client(handler).get("/site/")
        exc = exc_info.value
        assert exc.status_code == 0
        assert exc.type == "NetworkError"
        assert exc.is_network_error()
        assert exc.message == "Network error: socket exploded"

    async def test_non_json_success_body_is_network_error(self) -> None:
        """A 200 whose body is not JSON should surface as a network error."""
        client = _client(lambda _request: httpx.Response(200, text="<html>maintenance</html>"))
        with pytest.raises(GhostApiError) as exc_info:
            await client.get("/site/")
        assert exc_info.value.is_network_error()
        assert exc_info.value.message.startswith("Network error: ")

    async def test_error_entries_keep_non_string_fields(self) -> None:
        """Entries with non-string code or context should still be kept."""
        body = {
            "errors": [
                {"message": "Validation error", "type": "ValidationError", "code": 422, "context": {"field": "title"}},
            ]
        }
        client = _client(lambda _request: httpx.Response(422, json=body))
        with pytest.raises(GhostApiError) as exc_info:
            await client.post("/posts/", body={"posts": [{}]})
        exc = exc_info.value
        assert exc.message == "Validation error"
        assert exc.code == 422
        assert exc.errors[0].context == {"field": "title"}
        assert exc.is_validation_error()

    async def test_json_error_body_without_errors_array(self) -> None:
        """A JSON error body with no errors array should use the status fallback message."""
        client = _client(lambda _request: httpx.Response(500, json={"detail": "boom"}))
        with pytest.raises(GhostApiError) as exc_info:
            await client.get("/site/")
        assert exc_info.value.message == "Ghost API error (status 500)"
        assert exc_info.value.errors == []
