"""Daily calorie summary routes"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from api.dependencies import get_db
from domain.schemas.food_entry_schemas import DailySummaryQuery, DailySummaryResponse
from services import FoodEntryService

router = APIRouter(tags=["Daily Summary"])


@router.get("/daily-summary", response_model=DailySummaryResponse)
def get_daily_summary(
    query: Annotated[DailySummaryQuery, Query()],
    db: Session = Depends(get_db),
):
    """Total calories and entry count for a UTC calendar day (YYYY-MM-DD)"""
    return FoodEntryService.get_daily_summary(db, query)
