"""Pydantic models for Ghost Admin API write payloads.

These models validate tool input for the create/update tools before it is
wrapped in Ghost's ``{"posts": [...]}`` / ``{"tags": [...]}`` envelopes.
"""

from .posts import AuthorReference, PostCreate, PostUpdate, TagReference
from .tags import TagCreate, TagUpdate

__all__ = [
    "AuthorReference",
    "PostCreate",
    "PostUpdate",
    "TagCreate",
    "TagReference",
    "TagUpdate",
]
