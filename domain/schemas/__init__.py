"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.food_entry_schemas import (
    FoodEntryCreate,
    FoodEntryUpdate,
    DateRangeQuery,
    DailySummaryQuery,
    FoodEntryResponse,
    DailySummaryResponse,
)

__all__ = [
    # Requests
    "FoodEntryCreate",
    "FoodEntryUpdate",
    "DateRangeQuery",
    "DailySummaryQuery",
    # Responses
    "FoodEntryResponse",
    "DailySummaryResponse",
]
