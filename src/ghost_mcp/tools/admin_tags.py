"""MCP tools for tags on the Ghost Admin API."""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Annotated

from fastmcp import Context, FastMCP
from pydantic import Field

from ..models.tags import TagCreate, TagUpdate
from .common import (
    Fields,
    Filter,
    GhostResponse,
    Include,
    Limit,
    Order,
    Page,
    ResourceId,
    Slug,
    clean_params,
    resource_path,
    run_ghost_call,
)

TagId = Annotated[str, Field(min_length=1, description="Tag ID")]


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register Admin API tag tools on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tools to.
        deps: Dependencies namespace providing ``get_admin_client``.

    """

    @app.tool(
        name="admin_browse_tags",
        description="Browse tags from the Ghost Admin API, including internal tags.",
        annotations={"title": "Browse all tags", "readOnlyHint": True},
    )
    async def admin_browse_tags(  # noqa: PLR0913
        ctx: Context,
        include: Include = None,
        fields: Fields = None,
        filter: Filter = None,  # noqa: A002
        limit: Limit = None,
        page: Page = None,
        order: Order = None,
    ) -> GhostResponse:
        params = clean_params(include=include, fields=fields, filter=filter, limit=limit, page=page, order=order)
        return await run_ghost_call(
            ctx,
            "Browsing tags via the Ghost Admin API.",
            lambda: deps.get_admin_client().get("/tags/", params=params),
        )

    @app.tool(
        name="admin_read_tag",
        description="Read a single tag from the Ghost Admin API by ID or slug.",
        annotations={"title": "Read tag", "readOnlyHint": True},
    )
    async def admin_read_tag(
        ctx: Context,
        id: ResourceId = None,  # noqa: A002
        slug: Slug = None,
        include: Include = None,
        fields: Fields = None,
    ) -> GhostResponse:
        endpoint = resource_path("tags", resource_id=id, slug=slug)
        params = clean_params(include=include, fields=fields)
        return await run_ghost_call(
            ctx,
            f"Reading {endpoint} via the Ghost Admin API.",
            lambda: deps.get_admin_client().get(endpoint, params=params),
        )

    @app.tool(
        name="admin_create_tag",
        description="Create a new tag via the Ghost Admin API. Requires at minimum a name. Returns the created tag.",
        annotations={"title": "Create tag"},
    )
    async def admin_create_tag(ctx: Context, tag: TagCreate) -> GhostResponse:
        return await run_ghost_call(
            ctx,
            f"Creating tag '{tag.name}' via the Ghost Admin API.",
            lambda: deps.get_admin_client().post("/tags/", body={"tags": [tag.to_payload()]}),
        )

    @app.tool(
        name="admin_update_tag",
        description="Update an existing tag via the Ghost Admin API. Only the fields provided are changed.",
        annotations={"title": "Update tag", "idempotentHint": True},
    )
    async def admin_update_tag(ctx: Context, id: TagId, tag: TagUpdate) -> GhostResponse:  # noqa: A002
        return await run_ghost_call(
            ctx,
            f"Updating tag {id} via the Ghost Admin API.",
            lambda: deps.get_admin_client().put(f"/tags/{id}/", body={"tags": [tag.to_payload()]}),
        )

    @app.tool(
        name="admin_delete_tag",
        description="Delete a tag via the Ghost Admin API. This action is permanent and cannot be undone.",
        annotations={"title": "Delete tag", "destructiveHint": True},
    )
    async def admin_delete_tag(ctx: Context, id: TagId) -> dict[str, bool]:  # noqa: A002
        await run_ghost_call(
            ctx,
            f"Deleting tag {id} via the Ghost Admin API.",
            lambda: deps.get_admin_client().delete(f"/tags/{id}/"),
        )
        return {"success": True}


__all__ = ["register"]
