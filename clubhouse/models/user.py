"""ORM model for member accounts."""

from sqlalchemy import Column, Integer, String

from clubhouse.models.base import Base


class User(Base):
    """
    Member account created at sign-up and read at log-in.

    password holds the bcrypt hash, never the submitted plaintext. Rows are
    never updated or deleted by the application.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"
