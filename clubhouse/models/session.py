"""ORM model for server-held login sessions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from clubhouse.models.base import Base


class UserSession(Base):
    """
    One logged-in browser. token is the opaque value carried in the session
    cookie; deleting the row ends the session whatever the client still holds.

    Timestamps are naive UTC.
    """

    __tablename__ = "sessions"

    token = Column(String(64), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False)
    expires_at = Column(DateTime, nullable=False, index=True)
