"""Server-side session store: opaque cookie token -> account id, with expiry."""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from clubhouse.core.config import settings
from clubhouse.core.database import get_db
from clubhouse.models import UserSession


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SessionStore:
    """Create, look up and destroy rows of the sessions table."""

    def __init__(self, db: Session, max_age: int | None = None) -> None:
        self.db = db
        self.max_age = max_age if max_age is not None else settings.SESSION_MAX_AGE

    def create(self, user_id: int) -> str:
        """Persist a new session for user_id and return its token."""
        now = _utcnow()
        record = UserSession(
            token=secrets.token_urlsafe(32),
            user_id=user_id,
            created_at=now,
            expires_at=now + timedelta(seconds=self.max_age),
        )
        self.db.add(record)
        self.db.commit()
        return record.token

    def get_user_id(self, token: str) -> int | None:
        """Account id for a live session; expired rows are deleted and yield None."""
        record = self.db.query(UserSession).filter(UserSession.token == token).first()
        if record is None:
            return None
        if record.expires_at <= _utcnow():
            self.destroy(token)
            return None
        return record.user_id

    def destroy(self, token: str) -> None:
        self.db.query(UserSession).filter(UserSession.token == token).delete(
            synchronize_session=False
        )
        self.db.commit()


def get_session_store(db: Annotated[Session, Depends(get_db)]) -> SessionStore:
    """Dependency: a SessionStore bound to the request's DB session."""
    return SessionStore(db)
