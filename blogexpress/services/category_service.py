from typing import List, Optional

from loguru import logger
from sqlalchemy.orm import Session

from blogexpress.errors import InvalidRequestError
from blogexpress.models import Category, Post
from blogexpress.schemas.category_schema import CategoryCreate, CategoryUpdate


class CategoryService:

    # CATEGORY list
    def get_categories(self, db: Session) -> List[Category]:
        logger.info("[CategoryService] Method : get_categories")
        return db.query(Category).order_by(Category.name.asc()).all()

    # CATEGORY by id
    def get_category(self, db: Session, category_id: int) -> Optional[Category]:
        logger.info("[CategoryService] Method : get_category")
        return db.query(Category).filter(Category.id == category_id).first()

    # CATEGORY by slug
    def get_category_by_slug(self, db: Session, slug: str) -> Optional[Category]:
        logger.info("[CategoryService] Method : get_category_by_slug")
        return db.query(Category).filter(Category.slug == slug).first()

    def get_category_by_name(self, db: Session, name: str) -> Optional[Category]:
        return db.query(Category).filter(Category.name == name).first()

    # CATEGORY create
    def create_category(self, db: Session, payload: CategoryCreate) -> Category:
        logger.info("[CategoryService] Method : create_category")
        if self.get_category_by_slug(db, payload.slug):
            raise InvalidRequestError("Category slug already exists")
        if self.get_category_by_name(db, payload.name):
            raise InvalidRequestError("Category name already exists")

        category = Category(**payload.model_dump())
        db.add(category)
        db.commit()
        db.refresh(category)
        return category

    # CATEGORY update (partial)
    def update_category(self, db: Session, category: Category, payload: CategoryUpdate) -> Category:
        logger.info("[CategoryService] Method : update_category")

        data = payload.model_dump(exclude_unset=True)
        if data.get("slug") and data["slug"] != category.slug:
            if self.get_category_by_slug(db, data["slug"]):
                raise InvalidRequestError("Category slug already exists")
        if data.get("name") and data["name"] != category.name:
            if self.get_category_by_name(db, data["name"]):
                raise InvalidRequestError("Category name already exists")

        for key, value in data.items():
            setattr(category, key, value)
        db.commit()
        db.refresh(category)
        return category

    # CATEGORY delete, refused while posts still reference it
    def delete_category(self, db: Session, category: Category) -> None:
        logger.info("[CategoryService] Method : delete_category")
        count = db.query(Post).filter(Post.category_id == category.id).count()
        if count > 0:
            raise InvalidRequestError("Cannot delete category with existing posts", count=count)

        db.delete(category)
        db.commit()
