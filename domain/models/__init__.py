"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    drop_database,
    get_db_session,
)
from domain.models.food_entry import FoodEntry, utcnow

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "drop_database",
    "get_db_session",
    # Food log models
    "FoodEntry",
    "utcnow",
]
