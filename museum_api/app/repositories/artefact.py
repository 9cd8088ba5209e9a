"""Repository for the ``artefacts`` table."""

import sqlite3
from typing import Any, Dict, List, Optional

from .base import CrudRepository

# Columns a caller may change through ``update``.  ``currently_on_loan``
# belongs to the loan workflow and has its own setter.
UPDATABLE_COLUMNS = ("name", "description", "can_loan", "insurance_fee", "loan_fee")


class ArtefactRepository(CrudRepository):
    table = "artefacts"

    def find_artefact_by_artefact_id(self, artefact_id: int) -> Optional[sqlite3.Row]:
        return self.find_by_id(artefact_id)

    def find_by_can_loan(self, can_loan: bool) -> List[sqlite3.Row]:
        return self.conn.execute(
            "SELECT * FROM artefacts WHERE can_loan = ? ORDER BY id", (int(can_loan),)
        ).fetchall()

    def save(
        self,
        name: str,
        description: Optional[str],
        can_loan: bool,
        insurance_fee: float,
        loan_fee: float,
    ) -> int:
        cursor = self.conn.execute(
            "INSERT INTO artefacts (name, description, can_loan, currently_on_loan, insurance_fee, loan_fee) "
            "VALUES (?, ?, ?, 0, ?, ?)",
            (name, description, int(can_loan), insurance_fee, loan_fee),
        )
        return cursor.lastrowid

    def update(self, artefact_id: int, changes: Dict[str, Any]) -> None:
        updates = []
        values: list = []
        for column in UPDATABLE_COLUMNS:
            if column in changes:
                value = changes[column]
                updates.append(f"{column} = ?")
                values.append(int(value) if isinstance(value, bool) else value)
        if not updates:
            return
        values.append(artefact_id)
        self.conn.execute(
            f"UPDATE artefacts SET {', '.join(updates)} WHERE id = ?", tuple(values)
        )

    def set_currently_on_loan(self, artefact_id: int, on_loan: bool) -> None:
        self.conn.execute(
            "UPDATE artefacts SET currently_on_loan = ? WHERE id = ?", (int(on_loan), artefact_id)
        )
