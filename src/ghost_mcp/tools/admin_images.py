"""MCP tool: admin_upload_image.

Uploads a local image file to Ghost through the Admin API's multipart
``/images/upload/`` endpoint.
"""

# pyright: reportUnusedFunction=false

from pathlib import Path
from types import SimpleNamespace
from typing import Annotated, Literal

from fastmcp import Context, FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from .common import GhostResponse, run_ghost_call

ImagePurpose = Literal["image", "profile_image", "icon"]

_IMAGE_TYPES: dict[str, str] = {
    ".webp": "image/webp",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".png": "image/png",
    ".svg": "image/svg+xml",
}

MIME_TYPES: dict[str, dict[str, str]] = {
    "image": _IMAGE_TYPES,
    "profile_image": _IMAGE_TYPES,
    "icon": {**_IMAGE_TYPES, ".ico": "image/x-icon"},
}


def get_mime_type(file_path: Path, purpose: str) -> str | None:
    """Return the MIME type Ghost accepts for ``file_path`` and ``purpose``, if any."""
    mime_types = MIME_TYPES.get(purpose, MIME_TYPES["image"])
    return mime_types.get(file_path.suffix.lower())


def build_upload_payload(
    file_path: str,
    purpose: str = "image",
    ref: str | None = None,
) -> tuple[dict[str, tuple[str, bytes, str]], dict[str, str]]:
    """Read and validate an image file and build the multipart files and fields.

    Raises:
        ToolError: If the path is missing, is not a file, or has an unsupported extension.

    """
    resolved = Path(file_path).expanduser().resolve()
    if not resolved.exists():
        msg = f"File not found: {resolved}"
        raise ToolError(msg)
    if not resolved.is_file():
        msg = f"Path is not a file: {resolved}"
        raise ToolError(msg)

    mime_type = get_mime_type(resolved, purpose)
    if mime_type is None:
        valid = ", ".join(MIME_TYPES.get(purpose, MIME_TYPES["image"]))
        msg = f'Unsupported file type "{resolved.suffix.lower()}" for purpose "{purpose}". Valid types: {valid}'
        raise ToolError(msg)

    files = {"file": (resolved.name, resolved.read_bytes(), mime_type)}
    data = {"purpose": purpose}
    if ref:
        data["ref"] = ref
    return files, data


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register the admin_upload_image tool on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tool to.
        deps: Dependencies namespace providing ``get_admin_client``.

    """

    @app.tool(
        name="admin_upload_image",
        description=(
            "Upload an image to Ghost from a local file path. Supported formats depend on purpose: "
            "'image' (default) and 'profile_image' accept WEBP, JPEG, GIF, PNG, SVG; 'icon' also accepts ICO. "
            "Profile images and icons must be square. Returns the uploaded image URL for use in posts, "
            "pages, or settings."
        ),
        annotations={"title": "Upload image"},
    )
    async def admin_upload_image(
        ctx: Context,
        file_path: Annotated[str, Field(min_length=1, description="Path to the local image file")],
        purpose: Annotated[ImagePurpose, Field(description="Intended use of the image")] = "image",
        ref: Annotated[str | None, Field(description="Optional reference returned unchanged in the response")] = None,
    ) -> GhostResponse:
        files, data = build_upload_payload(file_path, purpose, ref)
        return await run_ghost_call(
            ctx,
            f"Uploading {files['file'][0]} via the Ghost Admin API.",
            lambda: deps.get_admin_client().upload_multipart("/images/upload/", files, data),
        )


__all__ = ["MIME_TYPES", "build_upload_payload", "get_mime_type", "register"]
