"""Local username/password strategy used by POST /log-in."""

from dataclasses import dataclass

from clubhouse.core.security import verify_password
from clubhouse.models import User
from clubhouse.services.user_store import UserStore
from clubhouse.services.validation import escape_html

MISSING_CREDENTIALS = "Missing credentials"
INCORRECT_CREDENTIALS = "Incorrect username or password"


@dataclass(frozen=True)
class AuthResult:
    """Either an authenticated user or the reason the attempt failed."""

    user: User | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.user is not None


class LocalStrategy:
    """
    Verify a username and password against the credential store.

    Unknown usernames and wrong passwords share one message so the result
    does not reveal which accounts exist.
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def authenticate(self, username: str, password: str) -> AuthResult:
        if not username or not password:
            return AuthResult(message=MISSING_CREDENTIALS)

        user = self.store.get_by_username(username)
        if user is None:
            return AuthResult(message=INCORRECT_CREDENTIALS)
        # Sign-up hashes the escaped password; only the escaping is repeated here.
        if not verify_password(escape_html(password), user.password):
            return AuthResult(message=INCORRECT_CREDENTIALS)
        return AuthResult(user=user)
