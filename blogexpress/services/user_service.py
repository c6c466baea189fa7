from typing import List, Optional

from loguru import logger
from sqlalchemy.orm import Session

from blogexpress.errors import InvalidRequestError
from blogexpress.models import User, Post, Comment
from blogexpress.schemas.user_schema import UserCreate, UserUpdate


class UserService:

    # USER list
    def get_users(self, db: Session) -> List[User]:
        logger.info("[UserService] Method : get_users")
        return db.query(User).order_by(User.id.asc()).all()

    # USER by id
    def get_user(self, db: Session, user_id: int) -> Optional[User]:
        logger.info("[UserService] Method : get_user")
        return db.query(User).filter(User.id == user_id).first()

    def get_user_by_username(self, db: Session, username: str) -> Optional[User]:
        return db.query(User).filter(User.username == username).first()

    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    # USER create
    def create_user(self, db: Session, payload: UserCreate) -> User:
        logger.info("[UserService] Method : create_user")
        if self.get_user_by_username(db, payload.username):
            raise InvalidRequestError("Username already taken")
        if self.get_user_by_email(db, payload.email):
            raise InvalidRequestError("Email already registered")

        data = payload.model_dump()
        data["role"] = payload.role.value
        user = User(**data)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    # USER update (partial)
    def update_user(self, db: Session, user: User, payload: UserUpdate) -> User:
        logger.info("[UserService] Method : update_user")

        data = payload.model_dump(exclude_unset=True)
        if data.get("username") and data["username"] != user.username:
            if self.get_user_by_username(db, data["username"]):
                raise InvalidRequestError("Username already taken")
        if data.get("email") and data["email"] != user.email:
            if self.get_user_by_email(db, data["email"]):
                raise InvalidRequestError("Email already registered")
        if "role" in data:
            data["role"] = data["role"].value

        for key, value in data.items():
            setattr(user, key, value)
        db.commit()
        db.refresh(user)
        return user

    # USER delete, refused while the user still authors content
    def delete_user(self, db: Session, user: User) -> None:
        logger.info("[UserService] Method : delete_user")
        posts = db.query(Post).filter(Post.author_id == user.id).count()
        if posts:
            raise InvalidRequestError("Cannot delete user with existing posts", count=posts)
        comments = db.query(Comment).filter(Comment.author_id == user.id).count()
        if comments:
            raise InvalidRequestError("Cannot delete user with existing comments", count=comments)

        db.delete(user)
        db.commit()
