"""Repository for the ``loans`` table."""

import sqlite3
from datetime import date
from typing import List, Optional

from .base import CrudRepository


class LoanRepository(CrudRepository):
    table = "loans"

    def save(self, visitor: str, artefact_id: int, submitted_date: date, status: str) -> int:
        """Insert a loan and return its new identifier."""
        cursor = self.conn.execute(
            "INSERT INTO loans (visitor, artefact_id, submitted_date, status) VALUES (?, ?, ?, ?)",
            (visitor, artefact_id, submitted_date.isoformat(), status),
        )
        return cursor.lastrowid

    def update_status(self, loan_id: int, status: str, due_date: Optional[date] = None) -> None:
        self.conn.execute(
            "UPDATE loans SET status = ?, due_date = ? WHERE id = ?",
            (status, due_date.isoformat() if due_date else None, loan_id),
        )

    def find_by_status(self, status: str) -> List[sqlite3.Row]:
        return self.conn.execute(
            "SELECT * FROM loans WHERE status = ? ORDER BY id", (status,)
        ).fetchall()

    def find_by_due_date(self, due_date: date) -> List[sqlite3.Row]:
        return self.conn.execute(
            "SELECT * FROM loans WHERE due_date = ? ORDER BY id", (due_date.isoformat(),)
        ).fetchall()

    def find_by_submitted_date(self, submitted_date: date) -> List[sqlite3.Row]:
        return self.conn.execute(
            "SELECT * FROM loans WHERE submitted_date = ? ORDER BY id",
            (submitted_date.isoformat(),),
        ).fetchall()

    def find_by_visitor(self, username: str) -> List[sqlite3.Row]:
        return self.conn.execute(
            "SELECT * FROM loans WHERE visitor = ? ORDER BY id", (username,)
        ).fetchall()

    def find_approved_by_visitor(self, username: str) -> List[sqlite3.Row]:
        return self.conn.execute(
            "SELECT * FROM loans WHERE visitor = ? AND status = 'Approved' ORDER BY id",
            (username,),
        ).fetchall()

    def count_by_visitor(self, username: str) -> int:
        row = self.conn.execute(
            "SELECT COUNT(*) AS count FROM loans WHERE visitor = ?", (username,)
        ).fetchone()
        return row["count"]

    def count_approved_due_on(self, due_date: date) -> int:
        row = self.conn.execute(
            "SELECT COUNT(*) AS count FROM loans WHERE status = 'Approved' AND due_date = ?",
            (due_date.isoformat(),),
        ).fetchone()
        return row["count"]

    def find_overdue_by_visitor(self, username: str, today: date) -> List[sqlite3.Row]:
        """Approved loans of ``username`` whose due date is before ``today``."""
        return self.conn.execute(
            "SELECT * FROM loans WHERE visitor = ? AND status = 'Approved' AND due_date < ?",
            (username, today.isoformat()),
        ).fetchall()
