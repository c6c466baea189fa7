import json
from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import Field, field_validator

from blogexpress.models.enums import PostStatus
from .base import CamelModel, reject_null


def _normalize_tags(v: Any) -> List[str]:
    """
    Normalize tag input into a list of unique, trimmed strings.
    - ["a", "b"]      -> ["a", "b"]
    - "a, b"          -> ["a", "b"]
    - '["a", "b"]'    -> ["a", "b"]
    """
    if v is None:
        return []

    if isinstance(v, str):
        s = v.strip()
        if s.startswith("[") and s.endswith("]"):
            try:
                parsed = json.loads(s)
            except ValueError:
                parsed = None
            if isinstance(parsed, list):
                v = parsed
        if isinstance(v, str):
            v = s.split(",")

    if not isinstance(v, (list, tuple, set)):
        raise ValueError("tags must be a list of strings")

    tags: List[str] = []
    for item in v:
        if not isinstance(item, str):
            raise ValueError("tags must be a list of strings")
        tag = item.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def _to_utc(v: Optional[datetime]) -> Optional[datetime]:
    # naive input is read as UTC; aware input is shifted to UTC
    if v is None:
        return None
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v.astimezone(timezone.utc)


class PostBase(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    category_id: int
    author_id: int
    status: PostStatus = PostStatus.draft
    tags: List[str] = []
    published_at: Optional[datetime] = None


class PostCreate(PostBase):
    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v):
        return _normalize_tags(v)

    @field_validator("published_at")
    @classmethod
    def published_at_utc(cls, v):
        return _to_utc(v)


class PostUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[str] = Field(default=None, min_length=1)
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    category_id: Optional[int] = None
    author_id: Optional[int] = None
    status: Optional[PostStatus] = None
    tags: Optional[List[str]] = None
    published_at: Optional[datetime] = None

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v):
        if v is None:
            return None
        return _normalize_tags(v)

    @field_validator("published_at")
    @classmethod
    def published_at_utc(cls, v):
        return _to_utc(v)

    @field_validator("title", "slug", "content", "category_id", "author_id", "status")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class PostOut(PostBase):
    id: int
    status: str
    tags: Optional[List[str]] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("tags", mode="before")
    @classmethod
    def tags_default(cls, v):
        return v or []
