"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.food_entry_repository import FoodEntryRepository

__all__ = [
    "BaseRepository",
    "FoodEntryRepository",
]
