"""
Database configuration and session management.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import settings

logger = logging.getLogger("calorietracker.database")

# Create SQLAlchemy Base
Base = declarative_base()


def _engine_kwargs() -> dict:
    """Build engine options for the configured backend"""
    database_url = settings.database_url
    kwargs = {"echo": settings.db_echo, "future": True}
    if settings.is_sqlite():
        # TestClient and uvicorn's threadpool share the SQLite connection
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url.endswith("://"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return kwargs


# Create engine
engine = create_engine(settings.database_url, **_engine_kwargs())

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True, expire_on_commit=False)


def init_database():
    """Initialize database schema"""
    # Import models so they register on Base.metadata
    from domain.models import food_entry  # noqa: F401

    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Database tables created successfully")


def drop_database():
    """Drop all tables (used by tests and the init script's --reset flag)"""
    from domain.models import food_entry  # noqa: F401

    with engine.begin() as conn:
        Base.metadata.drop_all(bind=conn)
    logger.info("Database tables dropped")


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
