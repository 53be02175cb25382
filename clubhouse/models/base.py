"""SQLAlchemy declarative Base shared by the account models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; Base.metadata backs Alembic autogenerate and test schemas."""

    pass
