"""SQLAlchemy ORM models."""

from clubhouse.models.base import Base
from clubhouse.models.session import UserSession
from clubhouse.models.user import User

__all__ = ["Base", "User", "UserSession"]
