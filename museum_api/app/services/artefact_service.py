"""
Business logic for artefacts.

Artefacts are the items of the collection.  Only artefacts flagged
``can_loan`` may be requested by visitors; ``currently_on_loan`` is
set and cleared by ``LoanService`` when loans are approved and
returned, so it cannot be changed here.
"""

import logging
import sqlite3
from typing import List, Optional

from museum_api.app.core.db import transaction
from museum_api.app.core.exceptions import MuseumError, NotFoundError
from museum_api.app.repositories import ArtefactRepository
from museum_api.app.schemas.artefact import ArtefactCreate, ArtefactRead, ArtefactUpdate


def _to_read(row: sqlite3.Row) -> ArtefactRead:
    return ArtefactRead(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        can_loan=bool(row["can_loan"]),
        currently_on_loan=bool(row["currently_on_loan"]),
        insurance_fee=row["insurance_fee"],
        loan_fee=row["loan_fee"],
    )


class ArtefactService:
    """Service for managing the artefact collection."""

    @classmethod
    async def create_artefact(cls, data: ArtefactCreate) -> ArtefactRead:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            artefacts = ArtefactRepository(conn)
            artefact_id = artefacts.save(
                data.name, data.description, data.can_loan, data.insurance_fee, data.loan_fee
            )
            logger.info("Artefact %s (%s) created", artefact_id, data.name)
            return _to_read(artefacts.find_by_id(artefact_id))

    @classmethod
    async def retrieve_artefact(cls, artefact_id: int) -> ArtefactRead:
        with transaction() as conn:
            row = ArtefactRepository(conn).find_artefact_by_artefact_id(artefact_id)
            if row is None:
                raise NotFoundError("Artefact not found.")
            return _to_read(row)

    @classmethod
    async def get_all_artefacts(cls, can_loan: Optional[bool] = None) -> List[ArtefactRead]:
        """List artefacts, optionally only those with the given ``can_loan`` flag."""
        with transaction() as conn:
            artefacts = ArtefactRepository(conn)
            rows = artefacts.find_all() if can_loan is None else artefacts.find_by_can_loan(can_loan)
            return [_to_read(row) for row in rows]

    @classmethod
    async def update_artefact(cls, artefact_id: int, changes: ArtefactUpdate) -> ArtefactRead:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            artefacts = ArtefactRepository(conn)
            if not artefacts.exists(artefact_id):
                raise NotFoundError("Artefact not found.")
            artefacts.update(artefact_id, changes.model_dump(exclude_unset=True, exclude_none=True))
            logger.info("Artefact %s updated", artefact_id)
            return _to_read(artefacts.find_by_id(artefact_id))

    @classmethod
    async def delete_artefact(cls, artefact_id: int) -> None:
        """Remove an artefact and any pending loan requests for it."""
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            artefacts = ArtefactRepository(conn)
            row = artefacts.find_by_id(artefact_id)
            if row is None:
                raise NotFoundError("Artefact not found.")
            if row["currently_on_loan"]:
                raise MuseumError("Cannot delete an artefact that is currently on loan.")
            artefacts.delete_by_id(artefact_id)
            logger.info("Artefact %s deleted", artefact_id)
