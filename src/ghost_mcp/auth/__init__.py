"""Authentication helpers for the Ghost Admin API.

- ``token``: Admin API key parsing and short-lived HS256 token signing
"""

from .token import (
    AdminApiKey,
    GhostAuthError,
    create_authorization_header,
    decode_secret,
    generate_token,
    parse_api_key,
)

__all__ = [
    "AdminApiKey",
    "GhostAuthError",
    "create_authorization_header",
    "decode_secret",
    "generate_token",
    "parse_api_key",
]
