from typing import List
import logging

from sqlalchemy.orm import Session

from domain.schemas.food_entry_schemas import (
    FoodEntryCreate,
    FoodEntryUpdate,
    DateRangeQuery,
    DailySummaryQuery,
    FoodEntryResponse,
    DailySummaryResponse,
    quantize_calories,
)
from repositories import FoodEntryRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("calorietracker.food_entries")


class FoodEntryService:
    """
    Operations over the food log.

    Every method is a single unit of work on the caller's session. Store
    errors (sqlalchemy.exc.SQLAlchemyError) are not caught here; they reach
    the caller unchanged.
    """

    @staticmethod
    def create_food_entry(db: Session, entry_data: FoodEntryCreate) -> FoodEntryResponse:
        """
        Log a new food entry.

        Args:
            db: Database session
            entry_data: Validated name, calories and consumption time

        Returns:
            FoodEntryResponse with the assigned id and timestamps
        """
        entry = FoodEntryRepository(db).create_entry(
            name=entry_data.name,
            calories=entry_data.calories,
            consumed_at=entry_data.consumed_at,
        )
        logger.info(
            f"food_entry_created id={entry.id} name={entry.name!r} "
            f"calories={entry.calories} consumed_at={entry.consumed_at.isoformat()}"
        )
        return FoodEntryResponse.model_validate(entry)

    @staticmethod
    def get_food_entry(db: Session, entry_id: int) -> FoodEntryResponse:
        """Get a single entry by id, raising NotFoundError when absent"""
        entry = FoodEntryRepository(db).get_by_id(entry_id)
        if entry is None:
            logger.warning(f"get_food_entry failed: entry {entry_id} not found")
            raise NotFoundError(
                f"Food entry {entry_id} not found", details={"id": entry_id}
            )
        return FoodEntryResponse.model_validate(entry)

    @staticmethod
    def get_food_entries(db: Session) -> List[FoodEntryResponse]:
        """All entries ordered by consumed_at descending"""
        entries = FoodEntryRepository(db).get_all()
        return [FoodEntryResponse.model_validate(e) for e in entries]

    @staticmethod
    def get_food_entries_by_date_range(
        db: Session, date_range: DateRangeQuery
    ) -> List[FoodEntryResponse]:
        """
        Entries consumed within [start_date, end_date], both bounds inclusive.

        No ordering is guaranteed. A reversed range simply matches nothing.
        """
        entries = FoodEntryRepository(db).get_by_consumed_range(
            date_range.start_date, date_range.end_date
        )
        logger.debug(
            f"date_range start={date_range.start_date.isoformat()} "
            f"end={date_range.end_date.isoformat()} matched={len(entries)}"
        )
        return [FoodEntryResponse.model_validate(e) for e in entries]

    @staticmethod
    def update_food_entry(
        db: Session, entry_id: int, update_data: FoodEntryUpdate
    ) -> FoodEntryResponse:
        """
        Apply a partial update to an entry.

        Only fields present in the request change. updated_at is refreshed
        even when no content field was supplied.

        Args:
            db: Database session
            entry_id: Entry to update
            update_data: Fields to change

        Returns:
            FoodEntryResponse with the post-update record

        Raises:
            NotFoundError: If no entry has this id
        """
        repo = FoodEntryRepository(db)
        entry = repo.get_by_id(entry_id)
        if entry is None:
            logger.warning(f"update_food_entry failed: entry {entry_id} not found")
            raise NotFoundError(
                f"Food entry {entry_id} not found", details={"id": entry_id}
            )

        changes = update_data.changes()
        entry = repo.update_fields(entry, changes)
        logger.info(
            f"food_entry_updated id={entry.id} fields={sorted(changes) or '[]'}"
        )
        return FoodEntryResponse.model_validate(entry)

    @staticmethod
    def delete_food_entry(db: Session, entry_id: int) -> FoodEntryResponse:
        """
        Hard delete an entry.

        Returns:
            The record exactly as it was before removal

        Raises:
            NotFoundError: If no entry has this id
        """
        repo = FoodEntryRepository(db)
        entry = repo.get_by_id(entry_id)
        if entry is None:
            logger.warning(f"delete_food_entry failed: entry {entry_id} not found")
            raise NotFoundError(
                f"Food entry {entry_id} not found", details={"id": entry_id}
            )

        snapshot = FoodEntryResponse.model_validate(entry)
        repo.delete_entry(entry)
        logger.info(f"food_entry_deleted id={entry_id} name={snapshot.name!r}")
        return snapshot

    @staticmethod
    def get_daily_summary(db: Session, query: DailySummaryQuery) -> DailySummaryResponse:
        """
        Total calories and entry count for one UTC calendar day.

        The window is [date 00:00, date+1 00:00): an entry at 23:59:59 is
        counted, one at the next midnight is not. Computed as a single
        aggregate query.
        """
        start, end = query.window()
        total, count = FoodEntryRepository(db).get_calorie_totals(start, end)
        logger.debug(f"daily_summary date={query.date} total={total} count={count}")
        return DailySummaryResponse(
            date=query.date,
            total_calories=float(quantize_calories(total)),
            entry_count=count,
        )
