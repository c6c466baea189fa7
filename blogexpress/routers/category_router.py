from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from blogexpress.errors import NotFoundError
from blogexpress.models import Category
from blogexpress.schemas.base import DeleteResult
from blogexpress.schemas.category_schema import CategoryCreate, CategoryOut, CategoryUpdate
from blogexpress.services.category_service import CategoryService
from blogexpress.db import get_db
from ._events import emit, emit_deleted
from .deps import get_category_or_404

router = APIRouter()
category_service = CategoryService()


# CATEGORY list
@router.get("", response_model=List[CategoryOut])
def fetch_categories(db: Session = Depends(get_db)):
    return category_service.get_categories(db)


# CATEGORY by slug (declared before /{category_id})
@router.get("/slug/{slug}", response_model=CategoryOut)
def fetch_category_by_slug(slug: str, db: Session = Depends(get_db)):
    category = category_service.get_category_by_slug(db, slug)
    if not category:
        raise NotFoundError("Category not found")
    return category


# CATEGORY by id
@router.get("/{category_id}", response_model=CategoryOut)
def fetch_category(category: Category = Depends(get_category_or_404)):
    return category


# CATEGORY create
@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    category = category_service.create_category(db, payload)
    emit("category_created", category, CategoryOut)
    return category


# CATEGORY update
@router.put("/{category_id}", response_model=CategoryOut)
def update_category(
    payload: CategoryUpdate,
    category: Category = Depends(get_category_or_404),
    db: Session = Depends(get_db),
):
    category = category_service.update_category(db, category, payload)
    emit("category_updated", category, CategoryOut)
    return category


# CATEGORY delete
@router.delete("/{category_id}", response_model=DeleteResult)
def delete_category(category: Category = Depends(get_category_or_404), db: Session = Depends(get_db)):
    category_id = category.id
    category_service.delete_category(db, category)
    emit_deleted("category_deleted", category_id)
    return DeleteResult(success=True)
