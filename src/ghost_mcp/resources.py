"""MCP resources for Ghost site metadata.

Exposes site information and public settings as read-only resources.
"""

# pyright: reportUnusedFunction=false

from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any

from fastmcp import FastMCP

from .auth.token import GhostAuthError
from .client.errors import GhostApiError


async def fetch_resource_payload(
    section: str,
    fetch: Callable[[], Awaitable[Any]],
) -> dict[str, Any]:
    """Fetch one payload and downgrade Ghost failures to a structured error.

    Args:
        section: Name of the data section (e.g., "site", "settings").
        fetch: Zero-argument callable performing the client call.

    Returns:
        Response dictionary with timestamp and either the data or error details.

    """
    retrieved_at = datetime.now(UTC).isoformat()
    try:
        data = await fetch()
    except GhostApiError as exc:
        return {
            "retrieved_at": retrieved_at,
            "status": "error",
            "error": exc.message,
            "error_type": exc.type or exc.__class__.__name__,
            "status_code": exc.status_code,
        }
    except GhostAuthError as exc:
        return {
            "retrieved_at": retrieved_at,
            "status": "error",
            "error": str(exc),
            "error_type": exc.__class__.__name__,
        }
    return {"retrieved_at": retrieved_at, section: data}


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register resources on the provided app instance.

    Args:
        app: The FastMCP application instance to add resources to.
        deps: Dependencies namespace providing ``get_admin_client`` and
              ``get_content_client``.

    """

    @app.resource(
        uri="ghost://site",
        name="Ghost Site",
        description="Return site title, description, URL and Ghost version from the Admin API.",
        mime_type="application/json",
        tags={"site", "admin"},
    )
    async def get_site() -> dict[str, Any]:
        return await fetch_resource_payload("site", lambda: deps.get_admin_client().get("/site/"))

    @app.resource(
        uri="ghost://settings",
        name="Ghost Public Settings",
        description="Return the public site settings (branding, navigation, social links) from the Content API.",
        mime_type="application/json",
        tags={"settings", "content"},
    )
    async def get_settings() -> dict[str, Any]:
        return await fetch_resource_payload("settings", lambda: deps.get_content_client().get("/settings/"))


__all__ = ["fetch_resource_payload", "register"]
