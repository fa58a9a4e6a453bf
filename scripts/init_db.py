#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the food_entries table and optionally seeds a sample day of entries
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")

SAMPLE_ENTRIES = [
    ("Breakfast", 400, datetime(2024, 1, 15, 8, 0, tzinfo=timezone.utc)),
    ("Lunch", 650, datetime(2024, 1, 15, 12, 30, tzinfo=timezone.utc)),
    ("Dinner", 800, datetime(2024, 1, 15, 19, 15, tzinfo=timezone.utc)),
]


def seed_sample_day():
    """Insert a sample day of entries through the service layer"""
    from domain.models import SessionLocal
    from domain.schemas import FoodEntryCreate
    from services import FoodEntryService

    db = SessionLocal()
    try:
        for name, calories, consumed_at in SAMPLE_ENTRIES:
            entry = FoodEntryService.create_food_entry(
                db,
                FoodEntryCreate(name=name, calories=calories, consumed_at=consumed_at),
            )
            logger.info(f"Seeded entry {entry.id}: {entry.name} ({entry.calories} kcal)")
    finally:
        db.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the CalorieTracker database")
    parser.add_argument(
        "--reset", action="store_true", help="Drop existing tables before creating them"
    )
    parser.add_argument(
        "--seed", action="store_true", help="Insert a sample day of food entries"
    )
    args = parser.parse_args(argv)

    from sqlalchemy import inspect
    from sqlalchemy.exc import SQLAlchemyError
    from domain.models import engine, init_database, drop_database

    try:
        if args.reset:
            drop_database()
        init_database()
        tables = inspect(engine).get_table_names()
        logger.info(f"Tables present: {', '.join(tables)}")
        if args.seed:
            seed_sample_day()
    except SQLAlchemyError as e:
        logger.error(f"Database initialization failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
