"""Shared fixtures: a fresh in-memory database and a TestClient wired to it."""

from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from clubhouse.core.database import build_engine, get_db
from clubhouse.main import app
from clubhouse.models import Base, User, UserSession

JANE = {
    "first_name": "Jane",
    "last_name": "Doe",
    "username": "janedoe",
    "email": "jane@example.com",
    "password": "Secret1!",
    "confirm-password": "Secret1!",
}


def make_database() -> tuple[Engine, sessionmaker]:
    """Create an empty in-memory SQLite database with the users table."""
    engine = build_engine("sqlite://")
    Base.metadata.create_all(engine)
    return engine, sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_client(session_factory: sessionmaker, **kwargs: object) -> TestClient:
    """TestClient whose get_db dependency yields sessions from session_factory."""

    def _get_test_db() -> Generator[Session, None, None]:
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    return TestClient(app, **kwargs)


def clear_overrides() -> None:
    app.dependency_overrides.clear()


def count_users(session_factory: sessionmaker) -> int:
    db = session_factory()
    try:
        return db.query(User).count()
    finally:
        db.close()


def count_sessions(session_factory: sessionmaker) -> int:
    db = session_factory()
    try:
        return db.query(UserSession).count()
    finally:
        db.close()
