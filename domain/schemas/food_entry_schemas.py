"""
Request and response schemas for food entries.

Requests are validated here before any service or store access. Timestamps are
normalized to naive UTC on the way in and rendered as UTC on the way out;
calories are quantized to two decimal places and always leave as JSON numbers.
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from pydantic import BaseModel, Field, field_validator

CALORIE_PRECISION = Decimal("0.01")
# Largest value a NUMERIC(8, 2) column holds
MAX_CALORIES = Decimal("999999.99")
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are taken as UTC"""
    if value.tzinfo is not None:
        try:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError:
            raise ValueError("Datetime is out of range once converted to UTC")
    return value


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive timestamp read back from the store"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def quantize_calories(value: Decimal) -> Decimal:
    return value.quantize(CALORIE_PRECISION, rounding=ROUND_HALF_UP)


def _reject_non_numeric(value):
    # JSON numbers only; "95.5" or true are not calorie values
    if isinstance(value, (str, bool)):
        raise ValueError("Calories must be a number")
    return value


def _checked_calories(value: Decimal) -> Decimal:
    quantized = quantize_calories(value)
    if quantized <= 0:
        raise ValueError("Calories must be positive")
    return quantized


class FoodEntryCreate(BaseModel):
    """Schema for logging a new food entry"""

    name: str = Field(..., min_length=1, description="Food name", examples=["Apple"])
    calories: Decimal = Field(
        ..., gt=0, le=MAX_CALORIES, description="Calories, two decimal places kept"
    )
    consumed_at: datetime = Field(..., description="When the food was eaten")

    @field_validator("calories", mode="before")
    @classmethod
    def calories_must_be_numeric(cls, v):
        return _reject_non_numeric(v)

    @field_validator("calories")
    @classmethod
    def round_calories(cls, v: Decimal) -> Decimal:
        return _checked_calories(v)

    @field_validator("consumed_at")
    @classmethod
    def normalize_consumed_at(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class FoodEntryUpdate(BaseModel):
    """
    Schema for a partial update.

    Every field is optional; only fields present in the request body are
    applied (see ``changes()``). An explicit null is rejected because none of
    the columns are nullable.
    """

    name: Optional[str] = Field(None, min_length=1, description="New food name")
    calories: Optional[Decimal] = Field(
        None, gt=0, le=MAX_CALORIES, description="New calorie value"
    )
    consumed_at: Optional[datetime] = Field(None, description="New consumption time")

    @field_validator("name", "calories", "consumed_at", mode="before")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        if info.field_name == "calories":
            return _reject_non_numeric(v)
        return v

    @field_validator("calories")
    @classmethod
    def round_calories(cls, v: Decimal) -> Decimal:
        return _checked_calories(v)

    @field_validator("consumed_at")
    @classmethod
    def normalize_consumed_at(cls, v: datetime) -> datetime:
        return to_naive_utc(v)

    def changes(self) -> dict:
        """Fields explicitly supplied by the caller"""
        return {field: getattr(self, field) for field in self.model_fields_set}


class DateRangeQuery(BaseModel):
    """Inclusive consumption-time range"""

    start_date: datetime = Field(..., description="Inclusive lower bound")
    end_date: datetime = Field(..., description="Inclusive upper bound")

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_bounds(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class DailySummaryQuery(BaseModel):
    """Calendar day to summarize, as YYYY-MM-DD (UTC)"""

    date: str = Field(..., pattern=DATE_PATTERN, examples=["2024-01-15"])

    @field_validator("date")
    @classmethod
    def must_be_calendar_date(cls, v: str) -> str:
        try:
            date.fromisoformat(v)
        except ValueError:
            raise ValueError("Date must be a valid calendar date in YYYY-MM-DD format")
        return v

    @property
    def day(self):
        return date.fromisoformat(self.date)

    def window(self) -> tuple[datetime, Optional[datetime]]:
        """
        Half-open [midnight, next midnight) window for the day.

        The upper bound is None for the last representable date.
        """
        start = datetime(self.day.year, self.day.month, self.day.day)
        if self.day == date.max:
            return start, None
        return start, start + timedelta(days=1)


class FoodEntryResponse(BaseModel):
    """Schema for a food entry as returned to clients"""

    id: int
    name: str
    calories: float
    consumed_at: datetime
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("calories", mode="before")
    @classmethod
    def decimal_to_float(cls, v):
        if isinstance(v, Decimal):
            return float(v)
        return v

    @field_validator("consumed_at", "created_at", "updated_at")
    @classmethod
    def mark_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class DailySummaryResponse(BaseModel):
    """Aggregate calories and entry count for one day"""

    date: str
    total_calories: float
    entry_count: int

