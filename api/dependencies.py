"""
Request-scoped dependencies shared by the routers
"""

from typing import Generator
from sqlalchemy.orm import Session
from domain.models import get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    One SQLAlchemy session per request, closed when the response is sent.

    Usage:
        @router.get("/food-entries")
        def get_food_entries(db: Session = Depends(get_db)):
            return FoodEntryService.get_food_entries(db)
    """
    yield from get_db_session()
