"""Settings, database session factory and password hashing."""

from clubhouse.core.config import Settings, get_settings, settings
from clubhouse.core.database import SessionLocal, get_db
from clubhouse.core.security import hash_password, verify_password

__all__ = [
    "SessionLocal",
    "Settings",
    "get_db",
    "get_settings",
    "hash_password",
    "settings",
    "verify_password",
]
