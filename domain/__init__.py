"""
Domain layer - ORM models and request/response schemas.
"""

from domain import models, schemas

__all__ = ["models", "schemas"]
