from fastapi import Depends
from sqlalchemy.orm import Session

from blogexpress.db import get_db
from blogexpress.errors import NotFoundError
from blogexpress.models import Category, Comment, Post, User
from blogexpress.services.category_service import CategoryService
from blogexpress.services.comment_service import CommentService
from blogexpress.services.post_service import PostService
from blogexpress.services.user_service import UserService

# Path lookups resolved as dependencies, so a missing row answers 404
# before the request body is validated.

user_service = UserService()
category_service = CategoryService()
post_service = PostService()
comment_service = CommentService()


def get_user_or_404(user_id: int, db: Session = Depends(get_db)) -> User:
    user = user_service.get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def get_category_or_404(category_id: int, db: Session = Depends(get_db)) -> Category:
    category = category_service.get_category(db, category_id)
    if not category:
        raise NotFoundError("Category not found")
    return category


def get_post_or_404(post_id: int, db: Session = Depends(get_db)) -> Post:
    post = post_service.get_post(db, post_id)
    if not post:
        raise NotFoundError("Post not found")
    return post


def get_comment_or_404(comment_id: int, db: Session = Depends(get_db)) -> Comment:
    comment = comment_service.get_comment(db, comment_id)
    if not comment:
        raise NotFoundError("Comment not found")
    return comment
