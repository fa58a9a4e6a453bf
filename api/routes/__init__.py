"""API routes package"""

from . import food_entries, summary, health

__all__ = ["food_entries", "summary", "health"]
