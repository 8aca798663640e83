"""Client package for the Ghost MCP server.

Provides HTTP clients and error handling for the Ghost APIs:
- ``admin_client``: Token-authenticated Admin API client (read/write, uploads)
- ``content_client``: Key-authenticated, read-only Content API client
- ``base``: Shared request lifecycle, timeout handling and error triage
- ``errors``: ``GhostApiError`` and its classification helpers
"""

from .admin_client import GhostAdminClient
from .content_client import GhostContentClient
from .errors import ErrorDetail, GhostApiError

__all__ = ["ErrorDetail", "GhostAdminClient", "GhostApiError", "GhostContentClient"]
