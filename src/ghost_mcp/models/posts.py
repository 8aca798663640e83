"""Pydantic models for Ghost Admin API post payloads.

Tool inputs for creating and updating posts. Only fields the caller actually
set are sent to Ghost, so an explicit ``None`` clears a field while an
omitted field is left untouched.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Relation References
# =============================================================================


class TagReference(BaseModel):
    """Reference to an existing or new tag. Ghost creates unknown tags by name."""

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    name: str | None = None
    slug: str | None = None


class AuthorReference(BaseModel):
    """Reference to a staff user acting as author."""

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    email: str | None = None
    slug: str | None = None


# =============================================================================
# Post Payloads
# =============================================================================


class PostFields(BaseModel):
    """Writable post fields shared by create and update."""

    model_config = ConfigDict(extra="forbid")

    slug: str | None = None
    """URL slug; generated from the title when omitted."""

    lexical: str | None = None
    """Post content as a Lexical JSON string."""

    mobiledoc: str | None = None
    """Post content as a Mobiledoc JSON string (legacy editor)."""

    html: str | None = None
    """Post content as HTML; converted by Ghost on write."""

    feature_image: str | None = None
    featured: bool | None = None
    status: Literal["published", "draft", "scheduled"] | None = None
    visibility: Literal["public", "members", "paid", "tiers"] | None = None
    tags: list[TagReference] | None = None
    authors: list[AuthorReference] | None = None
    custom_excerpt: str | None = None
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
    email_only: bool | None = None

    published_at: str | None = None
    """ISO 8601 publish time; required by Ghost when status is ``scheduled``."""

    def to_payload(self) -> dict[str, Any]:
        """Serialize only the fields that were explicitly set."""
        return self.model_dump(mode="json", exclude_unset=True)


class PostCreate(PostFields):
    """Input for creating a post."""

    title: str = Field(min_length=1)


class PostUpdate(PostFields):
    """Input for updating a post."""

    updated_at: str = Field(min_length=1)
    """The post's current ``updated_at``; Ghost rejects stale updates."""

    title: str | None = None


__all__ = ["AuthorReference", "PostCreate", "PostFields", "PostUpdate", "TagReference"]
