#!/usr/bin/env python3
"""
Create the todo table, optionally with sample rows.

Run from backend/ (or anywhere after `pip install -e .`):
    python -m scripts.init_db              # Create the table
    python -m scripts.init_db --seed       # ...and insert the sample todos
    python -m scripts.init_db --reset      # Drop and recreate (DESTRUCTIVE!)
"""
import argparse
import logging

from sqlalchemy import insert
from sqlmodel import SQLModel

from app.core.config import settings
from app.core.database import Storage, init_db, storage
from app.core.log import setup_logging
from app.models import Todo

logger = logging.getLogger("init_db")

SAMPLE_TODOS = [
    {"item": "Create todo table", "completed": 1},
    {"item": "Tell about it", "completed": 0},
]


def seed(handle: Storage) -> int:
    return handle.exec(insert(Todo).values(SAMPLE_TODOS))


def main(argv=None, handle: Storage = storage):
    parser = argparse.ArgumentParser(description="Initialize the todo database")
    parser.add_argument("--seed", action="store_true", help="Insert the sample todos")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop the todo table before creating it (DESTRUCTIVE!)",
    )
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)

    if args.reset:
        logger.warning("Dropping table %s", Todo.__tablename__)
        SQLModel.metadata.drop_all(handle.engine)

    init_db(handle)

    if args.seed:
        count = seed(handle)
        logger.info("Inserted %d sample todos", count)


if __name__ == "__main__":
    main()
