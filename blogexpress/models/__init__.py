from blogexpress.db import Base  # same Base shared by every table

# importing registers the tables on Base.metadata
from .user import User
from .category import Category
from .post import Post
from .comment import Comment
from .enums import UserRole, PostStatus, CalendarView

__all__ = [
    "Base",
    "User", "Category", "Post", "Comment",
    "UserRole", "PostStatus", "CalendarView",
]
