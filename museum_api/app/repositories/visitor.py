"""Repository for the ``visitors`` table."""

import sqlite3
from typing import List, Optional

from .base import CrudRepository


class VisitorRepository(CrudRepository):
    table = "visitors"
    primary_key = "username"

    def find_visitor_by_username(self, username: str) -> Optional[sqlite3.Row]:
        return self.find_by_id(username)

    def find_all_with_loan_count(self) -> List[sqlite3.Row]:
        return self.conn.execute(
            "SELECT v.*, COUNT(l.id) AS loan_count FROM visitors v "
            "LEFT JOIN loans l ON l.visitor = v.username "
            "GROUP BY v.username ORDER BY v.username"
        ).fetchall()

    def save(self, username: str, password_hash: str, name: Optional[str]) -> None:
        self.conn.execute(
            "INSERT INTO visitors (username, name, password, balance) VALUES (?, ?, ?, 0)",
            (username, name, password_hash),
        )

    def update_balance(self, username: str, balance: float) -> None:
        self.conn.execute(
            "UPDATE visitors SET balance = ? WHERE username = ?", (balance, username)
        )
