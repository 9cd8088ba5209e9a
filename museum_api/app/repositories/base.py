"""Generic CRUD operations shared by the table repositories."""

import sqlite3
from typing import Any, List, Optional


class CrudRepository:
    """Find, count and delete rows of ``table`` keyed by ``primary_key``.

    Subclasses set both class attributes and add the inserts, updates
    and derived queries specific to their table.
    """

    table: str = ""
    primary_key: str = "id"

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def find_all(self) -> List[sqlite3.Row]:
        return self.conn.execute(
            f"SELECT * FROM {self.table} ORDER BY {self.primary_key}"
        ).fetchall()

    def find_by_id(self, key: Any) -> Optional[sqlite3.Row]:
        return self.conn.execute(
            f"SELECT * FROM {self.table} WHERE {self.primary_key} = ?", (key,)
        ).fetchone()

    def exists(self, key: Any) -> bool:
        return self.find_by_id(key) is not None

    def count(self) -> int:
        row = self.conn.execute(f"SELECT COUNT(*) AS count FROM {self.table}").fetchone()
        return row["count"]

    def delete_by_id(self, key: Any) -> None:
        self.conn.execute(
            f"DELETE FROM {self.table} WHERE {self.primary_key} = ?", (key,)
        )
