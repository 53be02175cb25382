"""Account registration: duplicate check, password hashing, insert."""

import logging

from clubhouse.core.security import hash_password
from clubhouse.models import User
from clubhouse.schemas.auth import SignUpData
from clubhouse.services.user_store import UserStore

logger = logging.getLogger(__name__)


class DuplicateAccountError(Exception):
    """Raised when the submitted email or username already belongs to an account."""

    def __init__(self, field: str) -> None:
        self.field = field
        self.message = f"{field} is already in use"
        super().__init__(self.message)


def register_user(store: UserStore, data: SignUpData, rounds: int | None = None) -> User:
    """
    Create an account from validated sign-up data.

    The duplicate lookup and the insert are separate statements; the unique
    indexes on users.email and users.username reject a concurrent duplicate,
    surfacing as an IntegrityError from store.add.
    Raises DuplicateAccountError; database errors propagate unchanged.
    """
    existing = store.find_duplicate(data.email, data.username)
    if existing is not None:
        field = "email" if existing.email == data.email else "username"
        logger.info("Registration rejected: duplicate %s", field)
        raise DuplicateAccountError(field)

    user = User(
        first_name=data.first_name,
        last_name=data.last_name,
        username=data.username,
        email=data.email,
        password=hash_password(data.password, rounds=rounds),
    )
    store.add(user)
    logger.info("Registered user id=%s username=%s", user.id, user.username)
    return user
