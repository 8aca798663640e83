"""Common utilities for MCP tool registration.

Tools are thin pass-throughs: they build an endpoint and query parameters,
call one of the Ghost clients, and turn client failures into MCP tool errors.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Annotated, Any, Literal, TypeVar

from fastmcp import Context
from fastmcp.exceptions import ToolError
from pydantic import Field

from ..auth.token import GhostAuthError
from ..client.base import QueryValue
from ..client.errors import GhostApiError

logger = logging.getLogger("ghost_mcp.tools")

T = TypeVar("T")

GhostResponse = dict[str, Any]

# Query parameters shared by browse/read tools
Include = Annotated[str | None, Field(description="Related data to include, comma-separated (e.g. tags,authors)")]
Fields = Annotated[str | None, Field(description="Comma-separated list of fields to return")]
Formats = Annotated[str | None, Field(description="Content formats: html, plaintext (comma-separated)")]
Filter = Annotated[str | None, Field(description="NQL filter expression (e.g. tag:getting-started)")]
Limit = Annotated[
    int | Literal["all"] | None,
    Field(description='Number of items to return (default: 15, or "all")'),
]
Page = Annotated[int | None, Field(ge=1, description="Page number for pagination")]
Order = Annotated[str | None, Field(description="Sort order (e.g. published_at DESC)")]
ResourceId = Annotated[str | None, Field(description="Resource ID. Provide either id OR slug, not both.")]
Slug = Annotated[str | None, Field(description="Resource slug. Provide either id OR slug, not both.")]


def clean_params(**params: QueryValue) -> dict[str, QueryValue]:
    """Drop parameters whose value is ``None``."""
    return {key: value for key, value in params.items() if value is not None}


def resource_path(resource: str, *, resource_id: str | None = None, slug: str | None = None) -> str:
    """Build the endpoint for a single resource addressed by id or slug.

    Raises:
        ToolError: Unless exactly one of ``resource_id`` and ``slug`` is given.

    """
    if resource_id is None and slug is None:
        msg = "Either id or slug must be provided"
        raise ToolError(msg)
    if resource_id is not None and slug is not None:
        msg = "Only one of id or slug should be provided, not both"
        raise ToolError(msg)
    if resource_id is not None:
        return f"/{resource}/{resource_id}/"
    return f"/{resource}/slug/{slug}/"


async def run_ghost_call(
    ctx: Context,
    log_message: str,
    operation: Callable[[], Awaitable[T]],
) -> T:
    """Run one client call, reporting failures as ``ToolError``.

    Args:
        ctx: FastMCP context for client-visible logging.
        log_message: Progress message sent before the call.
        operation: Zero-argument callable performing the client call.

    Returns:
        Whatever ``operation`` returns.

    Raises:
        ToolError: If the call fails with a Ghost API or authentication error.

    """
    await ctx.info(log_message)
    try:
        return await operation()
    except GhostApiError as exc:
        await ctx.error(f"Ghost API request failed (status {exc.status_code}): {exc.message}")
        msg = f"Ghost API Error: {exc.message}"
        raise ToolError(msg) from exc
    except GhostAuthError as exc:
        logger.error("Ghost Admin API key rejected locally: %s", exc)
        msg = f"Ghost authentication error: {exc}"
        raise ToolError(msg) from exc


__all__ = [
    "Fields",
    "Filter",
    "Formats",
    "GhostResponse",
    "Include",
    "Limit",
    "Order",
    "Page",
    "ResourceId",
    "Slug",
    "clean_params",
    "resource_path",
    "run_ghost_call",
]
