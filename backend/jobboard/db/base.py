# path: backend/jobboard/db/base.py
# Purpose: SQLAlchemy engine, session factory, and declarative base. Single source of DB truth.
from datetime import datetime, timezone
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool
from jobboard.core.config import settings


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def engine_options(url: str) -> dict:
    if is_memory_sqlite(url):
        # One shared connection so the in-memory database survives across threads
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    if url.startswith("sqlite"):
        # File databases: default pool, one connection per session
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}  # proactively validate connections


engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    """Yield a database session; close it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables. Development convenience; production runs Alembic."""
    # Register models on Base.metadata before create_all
    import jobboard.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
