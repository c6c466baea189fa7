from typing import List, Optional

from loguru import logger
from sqlalchemy.orm import Session

from blogexpress.errors import InvalidRequestError
from blogexpress.models import Comment, Post, User
from blogexpress.schemas.comment_schema import CommentCreate, CommentUpdate


class CommentService:

    # COMMENT list
    def get_comments(self, db: Session) -> List[Comment]:
        logger.info("[CommentService] Method : get_comments")
        return db.query(Comment).order_by(Comment.created_at.desc(), Comment.id.desc()).all()

    # COMMENT by id
    def get_comment(self, db: Session, comment_id: int) -> Optional[Comment]:
        logger.info("[CommentService] Method : get_comment")
        return db.query(Comment).filter(Comment.id == comment_id).first()

    # thread order: oldest first
    def get_comments_by_post(self, db: Session, post_id: int) -> List[Comment]:
        logger.info("[CommentService] Method : get_comments_by_post")
        return (
            db.query(Comment)
            .filter(Comment.post_id == post_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
            .all()
        )

    def get_comments_by_author(self, db: Session, author_id: int) -> List[Comment]:
        logger.info("[CommentService] Method : get_comments_by_author")
        return (
            db.query(Comment)
            .filter(Comment.author_id == author_id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
            .all()
        )

    def get_comment_replies(self, db: Session, parent_id: int) -> List[Comment]:
        logger.info("[CommentService] Method : get_comment_replies")
        return (
            db.query(Comment)
            .filter(Comment.parent_id == parent_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
            .all()
        )

    # COMMENT create
    def create_comment(self, db: Session, payload: CommentCreate) -> Comment:
        logger.info("[CommentService] Method : create_comment")
        if not db.query(Post).filter(Post.id == payload.post_id).first():
            raise InvalidRequestError("Invalid post ID")
        if not db.query(User).filter(User.id == payload.author_id).first():
            raise InvalidRequestError("Invalid author ID")

        if payload.parent_id is not None:
            parent = self.get_comment(db, payload.parent_id)
            if not parent:
                raise InvalidRequestError("Invalid parent comment ID")
            if parent.post_id != payload.post_id:
                raise InvalidRequestError("Parent comment belongs to a different post")
            if parent.parent_id is not None:
                raise InvalidRequestError("Replies can only be one level deep")

        comment = Comment(**payload.model_dump())
        db.add(comment)
        db.commit()
        db.refresh(comment)
        return comment

    # COMMENT update (content / approval only)
    def update_comment(self, db: Session, comment: Comment, payload: CommentUpdate) -> Comment:
        logger.info("[CommentService] Method : update_comment")

        for key, value in payload.model_dump(exclude_unset=True).items():
            setattr(comment, key, value)
        db.commit()
        db.refresh(comment)
        return comment

    # COMMENT delete: replies first, then the comment itself
    def delete_comment(self, db: Session, comment: Comment) -> None:
        logger.info("[CommentService] Method : delete_comment")
        replies = self.get_comment_replies(db, comment.id)
        for reply in replies:
            db.delete(reply)
        db.flush()

        db.delete(comment)
        db.commit()
