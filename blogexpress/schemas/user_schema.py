from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from blogexpress.models.enums import UserRole
from .base import CamelModel, reject_null


class UserBase(CamelModel):
    username: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    bio: Optional[str] = None
    avatar: Optional[str] = None
    role: UserRole = UserRole.user


class UserCreate(UserBase):
    password: str = Field(min_length=1)


class UserUpdate(CamelModel):
    username: Optional[str] = Field(default=None, min_length=1, max_length=100)
    password: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    bio: Optional[str] = None
    avatar: Optional[str] = None
    role: Optional[UserRole] = None

    @field_validator("username", "password", "name", "email", "role")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


# password is write-only
class UserOut(UserBase):
    id: int
    email: str
    role: str
    created_at: datetime
