"""Unit tests for shared tool helpers in tools.common."""

from unittest.mock import AsyncMock

import pytest
from fastmcp import Context
from fastmcp.exceptions import ToolError

from ghost_mcp.auth.token import GhostAuthError
from ghost_mcp.client.errors import GhostApiError
from ghost_mcp.tools.common import clean_params, resource_path, run_ghost_call


def test_clean_params_drops_none() -> None:
    """None values should be removed; falsy values should be kept."""
    assert clean_params(limit=0, filter=None, include="tags", featured=False) == {
        "limit": 0,
        "include": "tags",
        "featured": False,
    }


class TestResourcePath:
    """Tests for resource_path."""

    def test_by_id(self) -> None:
        """An id should address /resource/{id}/."""
        assert resource_path("posts", resource_id="abc") == "/posts/abc/"

    def test_by_slug(self) -> None:
        """A slug should address /resource/slug/{slug}/."""
        assert resource_path("tags", slug="news") == "/tags/slug/news/"

    def test_neither(self) -> None:
        """Omitting both should be rejected."""
        with pytest.raises(ToolError, match="Either id or slug"):
            resource_path("posts")

    def test_both(self) -> None:
        """Passing both should be rejected."""
        with pytest.raises(ToolError, match="not both"):
            resource_path("posts", resource_id="abc", slug="news")


@pytest.mark.asyncio
class TestRunGhostCall:
    """Tests for run_ghost_call."""

    async def test_returns_result(self, mock_ctx: Context) -> None:
        """A successful operation should be returned unchanged after logging."""
        result = await run_ghost_call(mock_ctx, "Doing it.", AsyncMock(return_value={"ok": True}))
        assert result == {"ok": True}
        mock_ctx.info.assert_awaited_once_with("Doing it.")  # type: ignore[attr-defined]

    async def test_api_error_becomes_tool_error(self, mock_ctx: Context) -> None:
        """GhostApiError should surface as a ToolError with the Ghost message."""
        operation = AsyncMock(side_effect=GhostApiError("Resource not found", 404))
        with pytest.raises(ToolError, match="Ghost API Error: Resource not found"):
            await run_ghost_call(mock_ctx, "Reading.", operation)
        mock_ctx.error.assert_awaited_once()  # type: ignore[attr-defined]

    async def test_auth_error_becomes_tool_error(self, mock_ctx: Context) -> None:
        """GhostAuthError should surface as a ToolError."""
        operation = AsyncMock(side_effect=GhostAuthError("secret must be hexadecimal"))
        with pytest.raises(ToolError, match="Ghost authentication error: secret must be hexadecimal"):
            await run_ghost_call(mock_ctx, "Reading.", operation)
