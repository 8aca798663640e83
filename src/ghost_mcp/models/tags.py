"""Pydantic models for Ghost Admin API tag payloads."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class TagFields(BaseModel):
    """Writable tag fields shared by create and update."""

    model_config = ConfigDict(extra="forbid")

    slug: str | None = None
    description: str | None = None
    feature_image: str | None = None

    visibility: Literal["public", "internal"] | None = None
    """Internal tags are conventionally named with a leading ``#``."""

    accent_color: str | None = None
    canonical_url: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    og_image: str | None = None
    og_title: str | None = None
    og_description: str | None = None
    twitter_image: str | None = None
    twitter_title: str | None = None
    twitter_description: str | None = None
    codeinjection_head: str | None = None
    codeinjection_foot: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize only the fields that were explicitly set."""
        return self.model_dump(mode="json", exclude_unset=True)


class TagCreate(TagFields):
    """Input for creating a tag."""

    name: str = Field(min_length=1)


class TagUpdate(TagFields):
    """Input for updating a tag."""

    name: str | None = None
    updated_at: str | None = None


__all__ = ["TagCreate", "TagFields", "TagUpdate"]
