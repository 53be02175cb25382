"""Credential store: the only code that queries or writes the users table."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import or_
from sqlalchemy.orm import Session

from clubhouse.core.database import get_db
from clubhouse.models import User


class UserStore:
    """Account lookups and inserts over one SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_duplicate(self, email: str, username: str) -> User | None:
        """Return any account whose email or username matches, or None."""
        return (
            self.db.query(User)
            .filter(or_(User.email == email, User.username == username))
            .first()
        )

    def get_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def get_by_id(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def add(self, user: User) -> User:
        """
        Insert and commit user. On failure (including a unique-index violation)
        the session is rolled back and the error re-raised.
        """
        self.db.add(user)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    """Dependency: a UserStore bound to the request's DB session."""
    return UserStore(db)
