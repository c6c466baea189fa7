from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from blogexpress.config import settings
from blogexpress.errors import NotFoundError
from blogexpress.models import Post
from blogexpress.schemas.base import DeleteResult
from blogexpress.schemas.post_schema import PostCreate, PostOut, PostUpdate
from blogexpress.db import get_db
from blogexpress.services.post_service import PostService
from ._events import emit, emit_deleted
from .deps import get_post_or_404

router = APIRouter()
post_service = PostService()


def _parse_limit(raw: str) -> int:
    try:
        limit = int(raw)
    except ValueError:
        return settings.RECENT_POSTS_DEFAULT
    return limit if limit > 0 else settings.RECENT_POSTS_DEFAULT


# POST list
@router.get("", response_model=List[PostOut])
def fetch_posts(db: Session = Depends(get_db)):
    return post_service.get_posts(db)


@router.get("/slug/{slug}", response_model=PostOut)
def fetch_post_by_slug(slug: str, db: Session = Depends(get_db)):
    post = post_service.get_post_by_slug(db, slug)
    if not post:
        raise NotFoundError("Post not found")
    return post


@router.get("/status/{post_status}", response_model=List[PostOut])
def fetch_posts_by_status(post_status: str, db: Session = Depends(get_db)):
    return post_service.get_posts_by_status(db, post_status)


@router.get("/author/{author_id}", response_model=List[PostOut])
def fetch_posts_by_author(author_id: int, db: Session = Depends(get_db)):
    return post_service.get_posts_by_author(db, author_id)


@router.get("/category/{category_id}", response_model=List[PostOut])
def fetch_posts_by_category(category_id: int, db: Session = Depends(get_db)):
    return post_service.get_posts_by_category(db, category_id)


@router.get("/tag/{tag}", response_model=List[PostOut])
def fetch_posts_by_tag(tag: str, db: Session = Depends(get_db)):
    return post_service.get_posts_by_tag(db, tag)


# limit is a raw string so "abc" and "0" fall back to the default
@router.get("/recent/{limit}", response_model=List[PostOut])
def fetch_recent_posts(limit: str, db: Session = Depends(get_db)):
    return post_service.get_recent_posts(db, _parse_limit(limit))


# POST by id
@router.get("/{post_id}", response_model=PostOut)
def fetch_post(post: Post = Depends(get_post_or_404)):
    return post


# POST create
@router.post("", response_model=PostOut, status_code=status.HTTP_201_CREATED)
def create_post(payload: PostCreate, db: Session = Depends(get_db)):
    post = post_service.create_post(db, payload)
    emit("post_created", post, PostOut)
    return post


# POST update
@router.put("/{post_id}", response_model=PostOut)
def update_post(
    payload: PostUpdate,
    post: Post = Depends(get_post_or_404),
    db: Session = Depends(get_db),
):
    post = post_service.update_post(db, post, payload)
    emit("post_updated", post, PostOut)
    return post


# POST delete (comments cascade)
@router.delete("/{post_id}", response_model=DeleteResult)
def delete_post(post: Post = Depends(get_post_or_404), db: Session = Depends(get_db)):
    post_id = post.id
    post_service.delete_post(db, post)
    emit_deleted("post_deleted", post_id)
    return DeleteResult(success=True)
