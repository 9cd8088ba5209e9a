"""Repository for the singleton ``manager`` record."""

import sqlite3
from typing import Optional

from .base import CrudRepository

MANAGER_ID = 1


class ManagerRepository(CrudRepository):
    table = "manager"

    def get(self) -> Optional[sqlite3.Row]:
        return self.find_by_id(MANAGER_ID)

    def update_password(self, password_hash: str) -> None:
        self.conn.execute(
            "UPDATE manager SET password = ? WHERE id = ?", (password_hash, MANAGER_ID)
        )
