"""Configuration management for the Ghost MCP server.

This module defines the ``GhostConfig`` model and helpers to load it from
environment variables (optionally via a local ``.env`` file).
"""

import os
from functools import cache
from typing import Any, Self

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

from .client.base import DEFAULT_API_VERSION, DEFAULT_TIMEOUT_MS

# Load variables from a local .env file for development convenience
load_dotenv()


class GhostConfig(BaseModel):
    """Configuration values required to reach a Ghost site."""

    url: str = Field(min_length=1)
    admin_api_key: str | None = None
    content_api_key: str | None = None
    api_version: str = DEFAULT_API_VERSION
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, ge=1000, le=600000)
    verify_ssl: bool = True

    @model_validator(mode="after")
    def _validate_credentials(self) -> Self:
        if not self.admin_api_key and not self.content_api_key:
            msg = "Set GHOST_ADMIN_API_KEY, GHOST_CONTENT_API_KEY, or both."
            raise ValueError(msg)
        return self

    @property
    def has_admin_api(self) -> bool:
        """Return True when Admin API tools can be used."""
        return bool(self.admin_api_key)

    @property
    def has_content_api(self) -> bool:
        """Return True when Content API tools can be used."""
        return bool(self.content_api_key)

    @classmethod
    def from_env(cls) -> Self:
        """Build a configuration object from environment variables."""
        url = os.getenv("GHOST_URL")
        if not url:
            msg = "GHOST_URL is required to reach the Ghost API."
            raise RuntimeError(msg)
        raw_config: dict[str, Any] = {
            "url": url,
            "admin_api_key": os.getenv("GHOST_ADMIN_API_KEY") or None,
            "content_api_key": os.getenv("GHOST_CONTENT_API_KEY") or None,
            "api_version": os.getenv("GHOST_API_VERSION"),
            "timeout_ms": os.getenv("GHOST_TIMEOUT_MS"),
            "verify_ssl": os.getenv("GHOST_VERIFY_SSL"),
        }
        # Unset optional variables fall back to model defaults
        raw_config = {key: value for key, value in raw_config.items() if value is not None}
        try:
            return cls(**raw_config)
        except ValidationError as exc:
            messages = "; ".join(err["msg"] for err in exc.errors())
            msg = f"Invalid Ghost configuration: {messages}"
            raise RuntimeError(msg) from exc


@cache
def get_config() -> GhostConfig:
    """Return the process-wide configuration, loading it on first use."""
    return GhostConfig.from_env()


def clear_config_cache() -> None:
    """Forget the cached configuration so the next call reloads it."""
    get_config.cache_clear()


__all__ = ["GhostConfig", "clear_config_cache", "get_config"]
