from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .base import CamelModel, reject_null


class CommentBase(CamelModel):
    content: str = Field(min_length=1)
    post_id: int
    author_id: int
    parent_id: Optional[int] = None
    is_approved: bool = True


class CommentCreate(CommentBase):
    pass


# a comment stays attached to its post, author and parent once created
class CommentUpdate(CamelModel):
    content: Optional[str] = Field(default=None, min_length=1)
    is_approved: Optional[bool] = None

    @field_validator("content", "is_approved")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class CommentOut(CommentBase):
    id: int
    created_at: datetime
