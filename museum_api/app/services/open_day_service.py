"""
Business logic for open days.

Open days are the calendar days on which the museum operates.  Loan
due dates always fall on an open day, which is why an open day that
still has approved loans due cannot be removed.
"""

import logging
import sqlite3
from datetime import date
from typing import List

from museum_api.app.core.db import transaction
from museum_api.app.core.exceptions import MuseumError, NotFoundError
from museum_api.app.repositories import LoanRepository, OpenDayRepository
from museum_api.app.schemas.open_day import OpenDayRead


def _to_read(row: sqlite3.Row) -> OpenDayRead:
    return OpenDayRead(id=row["id"], date=row["date"])


class OpenDayService:
    """Service for the museum calendar."""

    @classmethod
    async def create_open_day(cls, day: date) -> OpenDayRead:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            open_days = OpenDayRepository(conn)
            if open_days.find_open_day_by_date(day) is not None:
                raise MuseumError(f"{day.isoformat()} is already an open day.")
            open_day_id = open_days.save(day)
            logger.info("Open day %s added", day)
            return OpenDayRead(id=open_day_id, date=day)

    @classmethod
    async def retrieve_open_day(cls, day: date) -> OpenDayRead:
        with transaction() as conn:
            row = OpenDayRepository(conn).find_open_day_by_date(day)
            if row is None:
                raise NotFoundError(f"{day.isoformat()} is not an open day.")
            return _to_read(row)

    @classmethod
    async def get_all_open_days(cls) -> List[OpenDayRead]:
        with transaction() as conn:
            return [_to_read(row) for row in OpenDayRepository(conn).find_all()]

    @classmethod
    async def next_open_day_on_or_after(cls, day: date) -> OpenDayRead:
        """The earliest open day not before ``day``."""
        with transaction() as conn:
            row = OpenDayRepository(conn).find_first_on_or_after(day)
            if row is None:
                raise NotFoundError(f"No open day on or after {day.isoformat()}.")
            return _to_read(row)

    @classmethod
    async def delete_open_day(cls, day: date) -> None:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            open_days = OpenDayRepository(conn)
            if open_days.find_open_day_by_date(day) is None:
                raise NotFoundError(f"{day.isoformat()} is not an open day.")
            if LoanRepository(conn).count_approved_due_on(day):
                raise MuseumError("Cannot remove an open day on which loans are due.")
            open_days.delete_by_date(day)
            logger.info("Open day %s removed", day)
