"""Entry point for the Ghost MCP server.

This module wires together the FastMCP app, the lazily-built Ghost clients,
and the tool, resource and prompt modules under ``ghost_mcp/``.

Registered tools:
- ``content_*``: browse/read posts, pages, tags and authors (Content API)
- ``admin_*_post``: browse, read, create, update, delete and copy posts
- ``admin_*_tag``: browse, read, create, update and delete tags
- ``admin_upload_image``: upload a local image file
- ``admin_read_site`` / ``admin_read_settings``: site metadata and settings
"""

import logging
import os
import signal
import sys
from functools import cache
from types import SimpleNamespace

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from starlette.requests import Request
from starlette.responses import JSONResponse

from . import prompts, resources
from .client.admin_client import GhostAdminClient
from .client.content_client import GhostContentClient
from .config import GhostConfig, get_config
from .tools.admin_images import register as register_admin_images
from .tools.admin_posts import register as register_admin_posts
from .tools.admin_site import register as register_admin_site
from .tools.admin_tags import register as register_admin_tags
from .tools.content import register as register_content

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(name)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger("ghost_mcp.server")

DEFAULT_HTTP_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_HTTP_PORT = 3000

app = FastMCP(
    name="ghost-mcp",
    instructions=(
        "Expose tools that read and manage content on a Ghost site through the Ghost Admin and Content APIs."
    ),
)


def _load_config() -> GhostConfig:
    """Return the configuration, reporting load failures as tool errors."""
    try:
        return get_config()
    except RuntimeError as exc:
        raise ToolError(str(exc)) from exc


@cache
def get_admin_client() -> GhostAdminClient:
    """Return the shared Admin API client, building it on first use.

    Raises:
        ToolError: If the configuration is invalid or no Admin API key is set.

    """
    config = _load_config()
    if not config.has_admin_api or config.admin_api_key is None:
        msg = "Ghost Admin API is not configured: set GHOST_ADMIN_API_KEY"
        raise ToolError(msg)
    logger.info("Creating Ghost Admin API client for %s", config.url)
    try:
        return GhostAdminClient(
            config.url,
            config.admin_api_key,
            version=config.api_version,
            verify_ssl=config.verify_ssl,
            timeout_ms=config.timeout_ms,
        )
    except ValueError as exc:
        raise ToolError(str(exc)) from exc


@cache
def get_content_client() -> GhostContentClient:
    """Return the shared Content API client, building it on first use.

    Raises:
        ToolError: If the configuration is invalid or no Content API key is set.

    """
    config = _load_config()
    if not config.has_content_api or config.content_api_key is None:
        msg = "Ghost Content API is not configured: set GHOST_CONTENT_API_KEY"
        raise ToolError(msg)
    logger.info("Creating Ghost Content API client for %s", config.url)
    return GhostContentClient(
        config.url,
        config.content_api_key,
        version=config.api_version,
        verify_ssl=config.verify_ssl,
        timeout_ms=config.timeout_ms,
    )


def reset_clients() -> None:
    """Drop the cached clients so the next tool call rebuilds them."""
    get_admin_client.cache_clear()
    get_content_client.cache_clear()


@app.custom_route("/health", methods=["GET"])
async def health_check(request: Request) -> JSONResponse:  # noqa: ARG001
    """Report liveness for the HTTP transport."""
    return JSONResponse({"status": "ok"})


# Explicit re-exports for public API stability (and to satisfy linters)
__all__ = [
    "GhostConfig",
    "app",
    "get_admin_client",
    "get_content_client",
    "handle_interrupt",
    "health_check",
    "main",
    "main_http",
    "reset_clients",
]


def _register_capabilities() -> None:
    """Register tool, resource, and prompt modules with the app instance."""
    deps = SimpleNamespace(
        get_admin_client=get_admin_client,
        get_content_client=get_content_client,
    )
    register_content(app, deps=deps)
    register_admin_posts(app, deps=deps)
    register_admin_tags(app, deps=deps)
    register_admin_images(app, deps=deps)
    register_admin_site(app, deps=deps)
    resources.register(app, deps=deps)
    prompts.register(app)


# Register all capabilities with the app instance (after function is defined)
_register_capabilities()


def handle_interrupt(signum: int, frame: object) -> None:  # noqa: ARG001
    """Handle keyboard interrupt gracefully."""
    logger.info("Received interrupt signal, shutting down...")
    sys.exit(0)


def main() -> None:
    """Entry point for the ghost-mcp console script (stdio transport)."""
    signal.signal(signal.SIGINT, handle_interrupt)
    signal.signal(signal.SIGTERM, handle_interrupt)
    app.run()


def main_http() -> None:
    """Entry point for the ghost-mcp-http console script (streamable HTTP transport)."""
    host = os.getenv("HOST", DEFAULT_HTTP_HOST)
    port = int(os.getenv("PORT", str(DEFAULT_HTTP_PORT)))
    logger.info("Starting Ghost MCP server on http://%s:%s/mcp", host, port)
    signal.signal(signal.SIGINT, handle_interrupt)
    signal.signal(signal.SIGTERM, handle_interrupt)
    app.run(transport="http", host=host, port=port)


if __name__ == "__main__":
    main()
