"""Session manager: ties the session cookie's token to a server-held session and its account."""

import logging
from collections.abc import MutableMapping
from typing import Annotated, Any

from fastapi import Depends

from clubhouse.models import User
from clubhouse.services.session_store import SessionStore, get_session_store
from clubhouse.services.user_store import UserStore, get_user_store

logger = logging.getLogger(__name__)

SESSION_TOKEN_KEY = "session_token"


class SessionManager:
    """
    The cookie carries only an opaque token; the account id lives in the
    sessions table and the account is reloaded on each request.

    session is Starlette's request.session (the signed cookie payload).
    """

    def __init__(self, store: UserStore, session_store: SessionStore) -> None:
        self.store = store
        self.session_store = session_store

    def serialize(self, user: User) -> int:
        return user.id

    def deserialize(self, user_id: Any) -> User | None:
        """Return the account for a stored id, or None if it is malformed or gone."""
        try:
            ident = int(user_id)
        except (TypeError, ValueError):
            return None
        return self.store.get_by_id(ident)

    def log_in(self, session: MutableMapping[str, Any], user: User) -> None:
        # A fresh token on every login; any previous server session is destroyed.
        old_token = session.get(SESSION_TOKEN_KEY)
        if old_token:
            self.session_store.destroy(old_token)
        session.clear()
        session[SESSION_TOKEN_KEY] = self.session_store.create(self.serialize(user))
        logger.info("User id=%s logged in", user.id)

    def log_out(self, session: MutableMapping[str, Any]) -> None:
        token = session.get(SESSION_TOKEN_KEY)
        session.clear()
        if token:
            self.session_store.destroy(token)
            logger.info("Session destroyed on logout")

    def current_user(self, session: MutableMapping[str, Any]) -> User | None:
        """Principal for this request; unknown, expired or orphaned sessions leave it anonymous."""
        token = session.get(SESSION_TOKEN_KEY)
        if not token:
            return None
        user_id = self.session_store.get_user_id(token)
        user = self.deserialize(user_id) if user_id is not None else None
        if user is None:
            if user_id is not None:
                logger.info("Dropping session for missing user id=%s", user_id)
                self.session_store.destroy(token)
            session.pop(SESSION_TOKEN_KEY, None)
        return user


def get_session_manager(
    store: Annotated[UserStore, Depends(get_user_store)],
    session_store: Annotated[SessionStore, Depends(get_session_store)],
) -> SessionManager:
    """Dependency: a SessionManager over the request's credential and session stores."""
    return SessionManager(store, session_store)
