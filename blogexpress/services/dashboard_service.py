from loguru import logger
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from blogexpress.models import Post, Comment, Category, User, PostStatus
from blogexpress.schemas.dashboard_schema import DashboardStats, PostCounts


class DashboardService:

    def _count(self, db: Session, model, *criteria) -> int:
        stmt = select(func.count()).select_from(model)
        if criteria:
            stmt = stmt.where(*criteria)
        return db.scalar(stmt) or 0

    def get_stats(self, db: Session) -> DashboardStats:
        logger.info("[DashboardService] Method : get_stats")
        published = self._count(db, Post, Post.status == PostStatus.published.value)
        drafts = self._count(db, Post, Post.status == PostStatus.draft.value)
        return DashboardStats(
            posts=PostCounts(published=published, drafts=drafts, total=published + drafts),
            comments=self._count(db, Comment),
            categories=self._count(db, Category),
            users=self._count(db, User),
        )
