from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from blogexpress.models import User
from blogexpress.schemas.base import DeleteResult
from blogexpress.schemas.user_schema import UserCreate, UserOut, UserUpdate
from blogexpress.db import get_db
from blogexpress.services.user_service import UserService
from .deps import get_user_or_404

router = APIRouter()
user_service = UserService()


# USER list
@router.get("", response_model=List[UserOut])
def fetch_users(db: Session = Depends(get_db)):
    return user_service.get_users(db)


# USER by id
@router.get("/{user_id}", response_model=UserOut)
def fetch_user(user: User = Depends(get_user_or_404)):
    return user


# USER create
@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return user_service.create_user(db, payload)


# USER update
@router.put("/{user_id}", response_model=UserOut)
def update_user(
    payload: UserUpdate,
    user: User = Depends(get_user_or_404),
    db: Session = Depends(get_db),
):
    return user_service.update_user(db, user, payload)


# USER delete
@router.delete("/{user_id}", response_model=DeleteResult)
def delete_user(user: User = Depends(get_user_or_404), db: Session = Depends(get_db)):
    user_service.delete_user(db, user)
    return DeleteResult(success=True)
