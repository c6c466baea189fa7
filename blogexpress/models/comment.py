from __future__ import annotations
from datetime import datetime

from sqlalchemy import Integer, Text, Boolean, DateTime, ForeignKey, true
from sqlalchemy.orm import Mapped, mapped_column

from blogexpress.db import Base
from .base import utcnow


class Comment(Base):
    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    post_id: Mapped[int] = mapped_column(ForeignKey("posts.id"), nullable=False, index=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    # replies point at a top-level comment of the same post
    parent_id: Mapped[int | None] = mapped_column(ForeignKey("comments.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    is_approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())

    def __repr__(self) -> str:
        return f"<Comment id={self.id} post_id={self.post_id} parent_id={self.parent_id}>"
