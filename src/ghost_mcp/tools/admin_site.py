"""MCP tools: admin_read_site and admin_read_settings."""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace

from fastmcp import Context, FastMCP

from .common import GhostResponse, run_ghost_call


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register site and settings tools on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tools to.
        deps: Dependencies namespace providing ``get_admin_client``.

    """

    @app.tool(
        name="admin_read_site",
        description=(
            "Read site information from the Ghost Admin API: title, description, logo, icon, accent color, "
            "URL, and Ghost version."
        ),
        annotations={"title": "Read site info", "readOnlyHint": True},
    )
    async def admin_read_site(ctx: Context) -> GhostResponse:
        return await run_ghost_call(
            ctx,
            "Reading site information via the Ghost Admin API.",
            lambda: deps.get_admin_client().get("/site/"),
        )

    @app.tool(
        name="admin_read_settings",
        description=(
            "Read site settings from the Ghost Admin API, including branding, navigation, social links, "
            "SEO metadata, code injection, and member settings."
        ),
        annotations={"title": "Read site settings", "readOnlyHint": True},
    )
    async def admin_read_settings(ctx: Context) -> GhostResponse:
        return await run_ghost_call(
            ctx,
            "Reading site settings via the Ghost Admin API.",
            lambda: deps.get_admin_client().get("/settings/"),
        )


__all__ = ["register"]
