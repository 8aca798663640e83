"""MCP tools for the Ghost Content API.

Read-only browse/read tools for posts, pages, tags and authors. Every tool
delegates to ``GhostContentClient.get``.
"""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace

from fastmcp import Context, FastMCP

from ..client.base import QueryParams
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

READ_ONLY = {"readOnlyHint": True}


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:  # noqa: C901, PLR0915 (one nested definition per tool)
    """Register Content API tools on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tools to.
        deps: Dependencies namespace providing ``get_content_client``.

    """

    async def _browse(ctx: Context, resource: str, params: QueryParams) -> GhostResponse:
        return await run_ghost_call(
            ctx,
            f"Browsing {resource} via the Ghost Content API.",
            lambda: deps.get_content_client().get(f"/{resource}/", params=params),
        )

    async def _read(
        ctx: Context,
        resource: str,
        *,
        resource_id: str | None,
        slug: str | None,
        params: QueryParams,
    ) -> GhostResponse:
        endpoint = resource_path(resource, resource_id=resource_id, slug=slug)
        return await run_ghost_call(
            ctx,
            f"Reading {endpoint} via the Ghost Content API.",
            lambda: deps.get_content_client().get(endpoint, params=params),
        )

    @app.tool(
        name="content_browse_posts",
        description=(
            "Browse posts from the Ghost Content API. Returns published posts with optional filtering, "
            "pagination, and related data."
        ),
        annotations={"title": "Browse published posts", **READ_ONLY},
    )
    async def content_browse_posts(  # noqa: PLR0913
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
        return await _browse(ctx, "posts", params)

    @app.tool(
        name="content_read_post",
        description="Read a single published post from the Ghost Content API by ID or slug.",
        annotations={"title": "Read published post", **READ_ONLY},
    )
    async def content_read_post(
        ctx: Context,
        id: ResourceId = None,  # noqa: A002
        slug: Slug = None,
        include: Include = None,
        fields: Fields = None,
        formats: Formats = None,
    ) -> GhostResponse:
        params = clean_params(include=include, fields=fields, formats=formats)
        return await _read(ctx, "posts", resource_id=id, slug=slug, params=params)

    @app.tool(
        name="content_browse_pages",
        description="Browse published pages from the Ghost Content API with optional filtering and pagination.",
        annotations={"title": "Browse published pages", **READ_ONLY},
    )
    async def content_browse_pages(  # noqa: PLR0913
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
        return await _browse(ctx, "pages", params)

    @app.tool(
        name="content_read_page",
        description="Read a single published page from the Ghost Content API by ID or slug.",
        annotations={"title": "Read published page", **READ_ONLY},
    )
    async def content_read_page(
        ctx: Context,
        id: ResourceId = None,  # noqa: A002
        slug: Slug = None,
        include: Include = None,
        fields: Fields = None,
        formats: Formats = None,
    ) -> GhostResponse:
        params = clean_params(include=include, fields=fields, formats=formats)
        return await _read(ctx, "pages", resource_id=id, slug=slug, params=params)

    @app.tool(
        name="content_browse_tags",
        description="Browse public tags from the Ghost Content API. Use include=count.posts for post counts.",
        annotations={"title": "Browse tags", **READ_ONLY},
    )
    async def content_browse_tags(  # noqa: PLR0913
        ctx: Context,
        include: Include = None,
        fields: Fields = None,
        filter: Filter = None,  # noqa: A002
        limit: Limit = None,
        page: Page = None,
        order: Order = None,
    ) -> GhostResponse:
        params = clean_params(include=include, fields=fields, filter=filter, limit=limit, page=page, order=order)
        return await _browse(ctx, "tags", params)

    @app.tool(
        name="content_read_tag",
        description="Read a single tag from the Ghost Content API by ID or slug.",
        annotations={"title": "Read tag", **READ_ONLY},
    )
    async def content_read_tag(
        ctx: Context,
        id: ResourceId = None,  # noqa: A002
        slug: Slug = None,
        include: Include = None,
        fields: Fields = None,
    ) -> GhostResponse:
        params = clean_params(include=include, fields=fields)
        return await _read(ctx, "tags", resource_id=id, slug=slug, params=params)

    @app.tool(
        name="content_browse_authors",
        description="Browse authors from the Ghost Content API. Use include=count.posts for post counts.",
        annotations={"title": "Browse authors", **READ_ONLY},
    )
    async def content_browse_authors(  # noqa: PLR0913
        ctx: Context,
        include: Include = None,
        fields: Fields = None,
        filter: Filter = None,  # noqa: A002
        limit: Limit = None,
        page: Page = None,
        order: Order = None,
    ) -> GhostResponse:
        params = clean_params(include=include, fields=fields, filter=filter, limit=limit, page=page, order=order)
        return await _browse(ctx, "authors", params)

    @app.tool(
        name="content_read_author",
        description="Read a single author from the Ghost Content API by ID or slug.",
        annotations={"title": "Read author", **READ_ONLY},
    )
    async def content_read_author(
        ctx: Context,
        id: ResourceId = None,  # noqa: A002
        slug: Slug = None,
        include: Include = None,
        fields: Fields = None,
    ) -> GhostResponse:
        params = clean_params(include=include, fields=fields)
        return await _read(ctx, "authors", resource_id=id, slug=slug, params=params)


__all__ = ["register"]
