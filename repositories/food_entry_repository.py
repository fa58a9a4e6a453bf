"""
Food Entry Repository - Data access layer for the food log
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import FoodEntry, utcnow

UPDATABLE_FIELDS = ("name", "calories", "consumed_at")


class FoodEntryRepository(BaseRepository[FoodEntry]):
    """Repository for food entry data access"""

    def __init__(self, db: Session):
        super().__init__(db, FoodEntry)

    def get_all(self) -> List[FoodEntry]:
        """Get all entries, most recently consumed first; ties keep insertion order"""
        return (
            self.db.query(FoodEntry)
            .order_by(FoodEntry.consumed_at.desc(), FoodEntry.id.asc())
            .all()
        )

    def get_by_consumed_range(self, start: datetime, end: datetime) -> List[FoodEntry]:
        """Get entries with start <= consumed_at <= end"""
        return (
            self.db.query(FoodEntry)
            .filter(FoodEntry.consumed_at >= start, FoodEntry.consumed_at <= end)
            .all()
        )

    def create_entry(
        self, name: str, calories: Decimal, consumed_at: datetime
    ) -> FoodEntry:
        """Insert a new entry; id and both audit timestamps are assigned here"""
        now = utcnow()
        entry = FoodEntry(
            name=name,
            calories=calories,
            consumed_at=consumed_at,
            created_at=now,
            updated_at=now,
        )
        return self.create(entry)

    def update_fields(self, entry: FoodEntry, changes: Dict[str, Any]) -> FoodEntry:
        """Apply the supplied subset of fields and refresh updated_at"""
        for field, value in changes.items():
            if field not in UPDATABLE_FIELDS:
                raise ValueError(f"Field {field!r} cannot be updated")
            setattr(entry, field, value)

        now = utcnow()
        # Keep updated_at moving forward even if the clock has not ticked
        if entry.updated_at is not None and now <= entry.updated_at:
            now = entry.updated_at + timedelta(microseconds=1)
        entry.updated_at = now
        return self.update(entry)

    def delete_entry(self, entry: FoodEntry) -> None:
        """Hard delete a loaded entry"""
        self.delete(entry)

    def get_calorie_totals(
        self, start: datetime, end: Optional[datetime]
    ) -> Tuple[Decimal, int]:
        """
        Sum and count of entries with start <= consumed_at < end, in one query.
        A None end leaves the window open above.
        """
        query = self.db.query(
            func.coalesce(func.sum(FoodEntry.calories), 0),
            func.count(FoodEntry.id),
        ).filter(FoodEntry.consumed_at >= start)
        if end is not None:
            query = query.filter(FoodEntry.consumed_at < end)
        total, count = query.one()
        return Decimal(str(total)), int(count)
