"""
Food entry model - the single table backing the calorie log.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    Integer,
    Text,
    Numeric,
    DateTime,
    CheckConstraint,
    Index,
)

from domain.models.database import Base


def utcnow() -> datetime:
    """Current time as naive UTC, the form every timestamp column stores"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class FoodEntry(Base):
    """A single logged food item"""

    __tablename__ = "food_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    calories = Column(Numeric(8, 2, asdecimal=True), nullable=False)
    consumed_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        CheckConstraint("calories > 0", name="ck_food_entries_calories_positive"),
        CheckConstraint("length(name) > 0", name="ck_food_entries_name_nonempty"),
        Index("ix_food_entries_consumed_at", "consumed_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<FoodEntry id={self.id} name={self.name!r} "
            f"calories={self.calories} consumed_at={self.consumed_at}>"
        )
