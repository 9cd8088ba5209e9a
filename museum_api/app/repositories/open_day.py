"""Repository for the ``open_days`` table."""

import sqlite3
from datetime import date
from typing import List, Optional

from .base import CrudRepository


class OpenDayRepository(CrudRepository):
    table = "open_days"

    def find_all(self) -> List[sqlite3.Row]:
        return self.conn.execute("SELECT * FROM open_days ORDER BY date").fetchall()

    def find_open_day_by_date(self, day: date) -> Optional[sqlite3.Row]:
        return self.conn.execute(
            "SELECT * FROM open_days WHERE date = ?", (day.isoformat(),)
        ).fetchone()

    def find_first_on_or_after(self, day: date) -> Optional[sqlite3.Row]:
        return self.conn.execute(
            "SELECT * FROM open_days WHERE date >= ? ORDER BY date LIMIT 1", (day.isoformat(),)
        ).fetchone()

    def save(self, day: date) -> int:
        cursor = self.conn.execute(
            "INSERT INTO open_days (date) VALUES (?)", (day.isoformat(),)
        )
        return cursor.lastrowid

    def delete_by_date(self, day: date) -> None:
        self.conn.execute("DELETE FROM open_days WHERE date = ?", (day.isoformat(),))
