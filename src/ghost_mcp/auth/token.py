"""Token generation for the Ghost Admin API.

Ghost Admin API keys have the form ``"id:secret"``. The ``id`` becomes the
token's ``kid`` header and the hex-encoded ``secret`` is the HMAC-SHA256
signing key. Tokens are valid for at most five minutes, so a fresh one is
signed for every request.
"""

import base64
import hashlib
import hmac
import json
import re
import time
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

MAX_EXPIRATION_MINUTES = 5
DEFAULT_EXPIRATION_MINUTES = 5
GHOST_AUDIENCE = "/admin/"
AUTH_SCHEME = "Ghost"

_HEX_PATTERN = re.compile(r"[a-fA-F0-9]+")


class GhostAuthError(Exception):
    """Raised when an Admin API key is malformed or a token request is invalid."""


@dataclass(frozen=True, slots=True)
class AdminApiKey:
    """Parsed Admin API key."""

    id: str
    secret: str


class TokenHeader(BaseModel):
    """JOSE header for Admin API tokens."""

    model_config = ConfigDict(frozen=True)

    algorithm: Literal["HS256"] = Field(default="HS256", serialization_alias="alg")
    key_id: str = Field(serialization_alias="kid")
    type: Literal["JWT"] = Field(default="JWT", serialization_alias="typ")


class TokenClaims(BaseModel):
    """Claims carried by Admin API tokens."""

    model_config = ConfigDict(frozen=True)

    issued_at: int = Field(serialization_alias="iat")
    expires_at: int = Field(serialization_alias="exp")
    audience: Literal["/admin/"] = Field(default=GHOST_AUDIENCE, serialization_alias="aud")


def parse_api_key(api_key: str) -> AdminApiKey:
    """Split an ``"id:secret"`` key at the first colon and validate both halves.

    Raises:
        GhostAuthError: If the key is empty, has no colon, has an empty id or
            secret, or the secret is not hexadecimal.

    """
    if not api_key or not isinstance(api_key, str):
        msg = "API key must be a non-empty string"
        raise GhostAuthError(msg)

    key_id, sep, secret = api_key.partition(":")
    if not sep:
        msg = 'Invalid API key format: expected "id:secret" format'
        raise GhostAuthError(msg)
    if not key_id:
        msg = "Invalid API key format: id cannot be empty"
        raise GhostAuthError(msg)
    if not secret:
        msg = "Invalid API key format: secret cannot be empty"
        raise GhostAuthError(msg)
    # Whole bytes only: an odd digit count cannot be decoded
    if not _HEX_PATTERN.fullmatch(secret) or len(secret) % 2:
        msg = "Invalid API key format: secret must be hexadecimal"
        raise GhostAuthError(msg)

    return AdminApiKey(id=key_id, secret=secret)


def decode_secret(hex_secret: str) -> bytes:
    """Decode a hex-encoded secret into raw key bytes.

    Raises:
        GhostAuthError: If the secret is not an even-length hex string.

    """
    try:
        return bytes.fromhex(hex_secret)
    except ValueError as exc:
        msg = "Invalid API key format: secret must be hexadecimal"
        raise GhostAuthError(msg) from exc


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _encode_segment(payload: dict[str, Any]) -> str:
    return _b64url(json.dumps(payload, separators=(",", ":")).encode("utf-8"))


def generate_token(
    api_key: str | AdminApiKey,
    *,
    expires_in_minutes: float = DEFAULT_EXPIRATION_MINUTES,
) -> str:
    """Sign a compact HS256 token for the Admin API.

    Args:
        api_key: Raw ``"id:secret"`` key or an already parsed key.
        expires_in_minutes: Token lifetime; must be in ``(0, 5]``.

    Returns:
        The ``header.claims.signature`` token string.

    Raises:
        GhostAuthError: If the key is invalid or the lifetime is out of range.

    """
    key = parse_api_key(api_key) if isinstance(api_key, str) else api_key

    if expires_in_minutes <= 0:
        msg = "Expiration time must be positive"
        raise GhostAuthError(msg)
    if expires_in_minutes > MAX_EXPIRATION_MINUTES:
        msg = f"Expiration time cannot exceed {MAX_EXPIRATION_MINUTES} minutes per Ghost API requirements"
        raise GhostAuthError(msg)

    now = int(time.time())
    header = TokenHeader(key_id=key.id)
    claims = TokenClaims(issued_at=now, expires_at=now + int(expires_in_minutes * 60))

    signing_input = (
        f"{_encode_segment(header.model_dump(by_alias=True))}.{_encode_segment(claims.model_dump(by_alias=True))}"
    )
    signature = hmac.new(decode_secret(key.secret), signing_input.encode("ascii"), hashlib.sha256).digest()
    return f"{signing_input}.{_b64url(signature)}"


def create_authorization_header(
    api_key: str | AdminApiKey,
    *,
    expires_in_minutes: float = DEFAULT_EXPIRATION_MINUTES,
) -> str:
    """Return an ``Authorization`` header value of the form ``Ghost <token>``."""
    token = generate_token(api_key, expires_in_minutes=expires_in_minutes)
    return f"{AUTH_SCHEME} {token}"


__all__ = [
    "AUTH_SCHEME",
    "DEFAULT_EXPIRATION_MINUTES",
    "GHOST_AUDIENCE",
    "MAX_EXPIRATION_MINUTES",
    "AdminApiKey",
    "GhostAuthError",
    "TokenClaims",
    "TokenHeader",
    "create_authorization_header",
    "decode_secret",
    "generate_token",
    "parse_api_key",
]
