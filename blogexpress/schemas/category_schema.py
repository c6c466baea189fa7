from typing import Optional

from pydantic import Field, field_validator

from .base import CamelModel, reject_null


class CategoryBase(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None

    @field_validator("name", "slug")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class CategoryOut(CategoryBase):
    id: int
