"""MCP tools for posts on the Ghost Admin API.

Unlike the Content API tools, these see drafts and scheduled posts and can
write. Every tool delegates to ``GhostAdminClient``.
"""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from ..models.posts import PostCreate, PostUpdate
from .common import (
    Fields,
    Filter,
    Formats,
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

PostId = Annotated[str, Field(min_length=1, description="Post ID")]


def _write_params(payload: dict[str, Any]) -> dict[str, str]:
    """Ask Ghost to convert HTML content when the payload carries it."""
    return {"source": "html"} if payload.get("html") is not None else {}


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register Admin API post tools on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tools to.
        deps: Dependencies namespace providing ``get_admin_client``.

    """

    @app.tool(
        name="admin_browse_posts",
        description=(
            "Browse posts from the Ghost Admin API. Returns all posts including drafts with optional filtering, "
            "pagination, and related data."
        ),
        annotations={"title": "Browse all posts", "readOnlyHint": True},
    )
    async def admin_browse_posts(  # noqa: PLR0913
        ctx: Context,
        include: Include = None,
        fields: Fields = None,
        formats: Formats = None,
        filter: Filter = None,  # noqa: A002
        limit: Limit = None,
        page: Page = None,
        order: Order = None,
    ) -> GhostResponse:
        params = clean_params(
            include=include, fields=fields, formats=formats, filter=filter, limit=limit, page=page, order=order
        )
        return await run_ghost_call(
            ctx,
            "Browsing posts via the Ghost Admin API.",
            lambda: deps.get_admin_client().get("/posts/", params=params),
        )

    @app.tool(
        name="admin_read_post",
        description=(
            "Read a single post from the Ghost Admin API by ID or slug, including drafts. "
            "The returned updated_at is needed for admin_update_post."
        ),
        annotations={"title": "Read post", "readOnlyHint": True},
    )
    async def admin_read_post(
        ctx: Context,
        id: ResourceId = None,  # noqa: A002
        slug: Slug = None,
        include: Include = None,
        fields: Fields = None,
        formats: Formats = None,
    ) -> GhostResponse:
        endpoint = resource_path("posts", resource_id=id, slug=slug)
        params = clean_params(include=include, fields=fields, formats=formats)
        return await run_ghost_call(
            ctx,
            f"Reading {endpoint} via the Ghost Admin API.",
            lambda: deps.get_admin_client().get(endpoint, params=params),
        )

    @app.tool(
        name="admin_create_post",
        description="Create a new post via the Ghost Admin API. Requires at minimum a title. Returns the created post.",
        annotations={"title": "Create post"},
    )
    async def admin_create_post(ctx: Context, post: PostCreate) -> GhostResponse:
        payload = post.to_payload()
        return await run_ghost_call(
            ctx,
            f"Creating post '{post.title}' via the Ghost Admin API.",
            lambda: deps.get_admin_client().post(
                "/posts/",
                body={"posts": [payload]},
                params=_write_params(payload),
            ),
        )

    @app.tool(
        name="admin_update_post",
        description=(
            "Update an existing post via the Ghost Admin API. Requires the post ID and its current updated_at "
            "timestamp for conflict prevention. Only the fields provided are changed. Returns the updated post."
        ),
        annotations={"title": "Update post", "idempotentHint": True},
    )
    async def admin_update_post(ctx: Context, id: PostId, post: PostUpdate) -> GhostResponse:  # noqa: A002
        payload = post.to_payload()
        return await run_ghost_call(
            ctx,
            f"Updating post {id} via the Ghost Admin API.",
            lambda: deps.get_admin_client().put(
                f"/posts/{id}/",
                body={"posts": [payload]},
                params=_write_params(payload),
            ),
        )

    @app.tool(
        name="admin_delete_post",
        description="Delete a post via the Ghost Admin API. This action is permanent and cannot be undone.",
        annotations={"title": "Delete post", "destructiveHint": True},
    )
    async def admin_delete_post(ctx: Context, id: PostId) -> dict[str, bool]:  # noqa: A002
        await run_ghost_call(
            ctx,
            f"Deleting post {id} via the Ghost Admin API.",
            lambda: deps.get_admin_client().delete(f"/posts/{id}/"),
        )
        return {"success": True}

    @app.tool(
        name="admin_copy_post",
        description='Create a draft copy of an existing post via the Ghost Admin API, with "(Copy)" appended to the title.',
        annotations={"title": "Copy post"},
    )
    async def admin_copy_post(ctx: Context, id: PostId) -> GhostResponse:  # noqa: A002
        return await run_ghost_call(
            ctx,
            f"Copying post {id} via the Ghost Admin API.",
            lambda: deps.get_admin_client().post(f"/posts/{id}/copy/"),
        )


__all__ = ["register"]
