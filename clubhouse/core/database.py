"""Engine and per-request session dependency for the users database."""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from clubhouse.core.config import settings


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for url.

    SQLite connections are shared across the FastAPI threadpool, so the
    same-thread check is disabled; in-memory SQLite keeps one connection
    (StaticPool) so every session sees the same tables.
    """
    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)
    return create_engine(url, pool_pre_ping=True, echo=echo)


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session for one request and closes it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

