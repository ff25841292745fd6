"""User repository - Database operations for user accounts"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import User


class UserRepository:
    """Repository for user accounts (never deleted)"""

    @staticmethod
    def get_user(db: Session, user_id: int) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def get_user_by_username(db: Session, username: str) -> Optional[User]:
        """Case-insensitive lookup"""
        return db.query(User).filter(func.lower(User.username) == username.lower()).first()

    @staticmethod
    def create_user(db: Session, **user_data) -> User:
        user = User(**user_data)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def update_user(db: Session, user: User, **update_data) -> User:
        for key, value in update_data.items():
            setattr(user, key, value)
        db.commit()
        db.refresh(user)
        return user
