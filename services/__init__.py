"""Services package - Business logic layer"""

from services.food_entry_service import FoodEntryService

__all__ = [
    "FoodEntryService",
]
