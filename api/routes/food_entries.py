"""Food entry logging routes"""

from typing import Annotated, List
import logging

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from domain.schemas.food_entry_schemas import (
    FoodEntryCreate,
    FoodEntryUpdate,
    DateRangeQuery,
    FoodEntryResponse,
)
from services import FoodEntryService

router = APIRouter(prefix="/food-entries", tags=["Food Entries"])
logger = logging.getLogger("calorietracker.api.food_entries")

EntryId = Annotated[int, Path(description="Food entry ID")]


@router.post("", response_model=FoodEntryResponse, status_code=status.HTTP_201_CREATED)
def create_food_entry(entry: FoodEntryCreate, db: Session = Depends(get_db)):
    """Log a new food entry"""
    return FoodEntryService.create_food_entry(db, entry)


@router.get("", response_model=List[FoodEntryResponse])
def get_food_entries(db: Session = Depends(get_db)):
    """All food entries, most recently consumed first"""
    return FoodEntryService.get_food_entries(db)


@router.get("/range", response_model=List[FoodEntryResponse])
def get_food_entries_by_date_range(
    date_range: Annotated[DateRangeQuery, Query()],
    db: Session = Depends(get_db),
):
    """
    Food entries consumed between start_date and end_date, both inclusive.

    The order of the returned entries is not guaranteed.
    """
    return FoodEntryService.get_food_entries_by_date_range(db, date_range)


@router.get("/{entry_id}", response_model=FoodEntryResponse)
def get_food_entry(entry_id: EntryId, db: Session = Depends(get_db)):
    """Get a single food entry"""
    return FoodEntryService.get_food_entry(db, entry_id)


@router.patch("/{entry_id}", response_model=FoodEntryResponse)
def update_food_entry(
    entry_id: EntryId,
    update: FoodEntryUpdate,
    db: Session = Depends(get_db),
):
    """
    Partially update a food entry.

    Only the fields present in the body are changed; updated_at is always
    refreshed. An empty body is valid and only bumps updated_at.
    """
    return FoodEntryService.update_food_entry(db, entry_id, update)


@router.delete("/{entry_id}", response_model=FoodEntryResponse)
def delete_food_entry(entry_id: EntryId, db: Session = Depends(get_db)):
    """Delete a food entry and return the removed record"""
    deleted = FoodEntryService.delete_food_entry(db, entry_id)
    logger.info(f"Food entry {entry_id} deleted")
    return deleted
