from __future__ import annotations
from typing import Any, Dict

from loguru import logger
from sqlalchemy.orm import Session

from blogexpress.models import Category, Post, User, PostStatus, UserRole
from blogexpress.schemas.category_schema import CategoryCreate
from blogexpress.schemas.post_schema import PostCreate
from blogexpress.schemas.user_schema import UserCreate
from blogexpress.services.category_service import CategoryService
from blogexpress.services.post_service import PostService
from blogexpress.services.user_service import UserService

DEMO_CATEGORIES = [
    ("Technology", "technology", "Software, gadgets and the web"),
    ("Lifestyle", "lifestyle", "Travel, food and everyday life"),
]


def seed_sample_data(db: Session) -> Dict[str, Any]:
    """Insert a demo admin, two categories and a welcome post into an empty database."""
    if db.query(User).count() or db.query(Category).count() or db.query(Post).count():
        logger.info("[seed] database not empty, skipping")
        return {"users": [], "categories": [], "posts": []}

    admin = UserService().create_user(db, UserCreate(
        username="admin",
        password="admin",
        name="Blog Admin",
        email="admin@blogexpress.dev",
        bio="Runs this blog.",
        role=UserRole.admin,
    ))

    category_service = CategoryService()
    categories = [
        category_service.create_category(db, CategoryCreate(name=name, slug=slug, description=desc))
        for name, slug, desc in DEMO_CATEGORIES
    ]

    welcome = PostService().create_post(db, PostCreate(
        title="Welcome to BlogExpress",
        slug="welcome-to-blogexpress",
        content="<p>Your first post. Edit or delete it, then start writing.</p>",
        excerpt="Your first post.",
        category_id=categories[0].id,
        author_id=admin.id,
        status=PostStatus.published,
        tags=["welcome", "announcement"],
    ))

    logger.info(f"[seed] created user={admin.id} categories={[c.id for c in categories]} post={welcome.id}")
    return {"users": [admin], "categories": categories, "posts": [welcome]}
