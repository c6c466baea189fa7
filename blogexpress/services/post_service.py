from typing import List, Optional

from loguru import logger
from sqlalchemy.orm import Session

from blogexpress.errors import InvalidRequestError
from blogexpress.models import Post, Category, User, Comment, PostStatus
from blogexpress.models.base import utcnow
from blogexpress.schemas.post_schema import PostCreate, PostUpdate

PUBLISHED = PostStatus.published.value


class PostService:

    def _newest_first(self, query):
        return query.order_by(Post.created_at.desc(), Post.id.desc())

    # POST list
    def get_posts(self, db: Session) -> List[Post]:
        logger.info("[PostService] Method : get_posts")
        return self._newest_first(db.query(Post)).all()

    # POST by id
    def get_post(self, db: Session, post_id: int) -> Optional[Post]:
        logger.info("[PostService] Method : get_post")
        return db.query(Post).filter(Post.id == post_id).first()

    # POST by slug
    def get_post_by_slug(self, db: Session, slug: str) -> Optional[Post]:
        logger.info("[PostService] Method : get_post_by_slug")
        return db.query(Post).filter(Post.slug == slug).first()

    def get_posts_by_status(self, db: Session, status: str) -> List[Post]:
        logger.info("[PostService] Method : get_posts_by_status")
        return self._newest_first(db.query(Post).filter(Post.status == status)).all()

    def get_posts_by_author(self, db: Session, author_id: int) -> List[Post]:
        logger.info("[PostService] Method : get_posts_by_author")
        return self._newest_first(db.query(Post).filter(Post.author_id == author_id)).all()

    def get_posts_by_category(self, db: Session, category_id: int) -> List[Post]:
        logger.info("[PostService] Method : get_posts_by_category")
        return self._newest_first(db.query(Post).filter(Post.category_id == category_id)).all()

    # tags is a JSON list and containment operators differ per dialect, so match in Python
    def get_posts_by_tag(self, db: Session, tag: str) -> List[Post]:
        logger.info("[PostService] Method : get_posts_by_tag")
        return [p for p in self._newest_first(db.query(Post)).all() if tag in (p.tags or [])]

    # POST recent (published only)
    def get_recent_posts(self, db: Session, limit: int) -> List[Post]:
        logger.info("[PostService] Method : get_recent_posts")
        return (
            db.query(Post)
            .filter(Post.status == PUBLISHED)
            .order_by(Post.published_at.desc(), Post.id.desc())
            .limit(limit)
            .all()
        )

    def _check_references(self, db: Session, category_id: Optional[int], author_id: Optional[int]) -> None:
        if category_id is not None and not db.query(Category).filter(Category.id == category_id).first():
            raise InvalidRequestError("Invalid category")
        if author_id is not None and not db.query(User).filter(User.id == author_id).first():
            raise InvalidRequestError("Invalid author")

    # POST create
    def create_post(self, db: Session, payload: PostCreate) -> Post:
        logger.info("[PostService] Method : create_post")
        if self.get_post_by_slug(db, payload.slug):
            raise InvalidRequestError("Post slug already exists")
        self._check_references(db, payload.category_id, payload.author_id)

        data = payload.model_dump()
        data["status"] = payload.status.value
        now = utcnow()
        if data["status"] == PUBLISHED and not data.get("published_at"):
            data["published_at"] = now

        post = Post(**data, created_at=now, updated_at=now)
        db.add(post)
        db.commit()
        db.refresh(post)
        return post

    # POST update (partial, last write wins)
    def update_post(self, db: Session, post: Post, payload: PostUpdate) -> Post:
        logger.info("[PostService] Method : update_post")

        data = payload.model_dump(exclude_unset=True)
        if data.get("slug") and data["slug"] != post.slug:
            if self.get_post_by_slug(db, data["slug"]):
                raise InvalidRequestError("Post slug already exists")
        category_id = data.get("category_id")
        author_id = data.get("author_id")
        self._check_references(
            db,
            category_id if category_id != post.category_id else None,
            author_id if author_id != post.author_id else None,
        )

        if "status" in data:
            data["status"] = data["status"].value
            # publishedAt is stamped once, on the first move into published
            if (
                data["status"] == PUBLISHED
                and post.status != PUBLISHED
                and not post.published_at
                and not data.get("published_at")
            ):
                data["published_at"] = utcnow()

        for key, value in data.items():
            setattr(post, key, value)
        post.updated_at = utcnow()
        db.commit()
        db.refresh(post)
        return post

    # POST delete: comments first (replies before their parents), then the post.
    # Two separate commits; a failure in between leaves the post without comments.
    def delete_post(self, db: Session, post: Post) -> None:
        logger.info("[PostService] Method : delete_post")
        comments = db.query(Comment).filter(Comment.post_id == post.id).all()
        if comments:
            for comment in sorted(comments, key=lambda c: c.parent_id is None):
                db.delete(comment)
                db.flush()
            db.commit()
            logger.info(f"[PostService] deleted {len(comments)} comment(s) of post {post.id}")

        db.delete(post)
        db.commit()
