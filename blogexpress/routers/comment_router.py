from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from blogexpress.models import Comment
from blogexpress.schemas.base import DeleteResult
from blogexpress.schemas.comment_schema import CommentCreate, CommentOut, CommentUpdate
from blogexpress.services.comment_service import CommentService
from blogexpress.db import get_db
from ._events import emit, emit_deleted
from .deps import get_comment_or_404

router = APIRouter()
comment_service = CommentService()


# COMMENT list
@router.get("", response_model=List[CommentOut])
def fetch_comments(db: Session = Depends(get_db)):
    return comment_service.get_comments(db)


@router.get("/post/{post_id}", response_model=List[CommentOut])
def fetch_comments_by_post(post_id: int, db: Session = Depends(get_db)):
    return comment_service.get_comments_by_post(db, post_id)


@router.get("/author/{author_id}", response_model=List[CommentOut])
def fetch_comments_by_author(author_id: int, db: Session = Depends(get_db)):
    return comment_service.get_comments_by_author(db, author_id)


@router.get("/replies/{parent_id}", response_model=List[CommentOut])
def fetch_comment_replies(parent_id: int, db: Session = Depends(get_db)):
    return comment_service.get_comment_replies(db, parent_id)


# COMMENT by id
@router.get("/{comment_id}", response_model=CommentOut)
def fetch_comment(comment: Comment = Depends(get_comment_or_404)):
    return comment


# COMMENT create
@router.post("", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
def create_comment(payload: CommentCreate, db: Session = Depends(get_db)):
    comment = comment_service.create_comment(db, payload)
    emit("comment_created", comment, CommentOut)
    return comment


# COMMENT update
@router.put("/{comment_id}", response_model=CommentOut)
def update_comment(
    payload: CommentUpdate,
    comment: Comment = Depends(get_comment_or_404),
    db: Session = Depends(get_db),
):
    comment = comment_service.update_comment(db, comment, payload)
    emit("comment_updated", comment, CommentOut)
    return comment


# COMMENT delete (replies cascade)
@router.delete("/{comment_id}", response_model=DeleteResult)
def delete_comment(comment: Comment = Depends(get_comment_or_404), db: Session = Depends(get_db)):
    comment_id = comment.id
    comment_service.delete_comment(db, comment)
    emit_deleted("comment_deleted", comment_id)
    return DeleteResult(success=True)
