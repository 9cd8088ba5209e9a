"""
Business logic for loans.

The ``LoanService`` validates loan requests from visitors, moves loans
through their ``Pending`` -> ``Approved`` / ``Declined`` lifecycle and
answers the filtered loan queries used by the manager.  Every public
method runs in its own database transaction, so a rejected request
leaves the database untouched.
"""

import logging
import sqlite3
from datetime import date, timedelta
from typing import List

from museum_api.app.core.config import settings
from museum_api.app.core.db import transaction
from museum_api.app.core.exceptions import MuseumError, NotFoundError
from museum_api.app.repositories import (
    ArtefactRepository,
    LoanRepository,
    OpenDayRepository,
    VisitorRepository,
)
from museum_api.app.schemas.loan import ExchangeStatus, LoanRead


def _to_read(row: sqlite3.Row) -> LoanRead:
    return LoanRead(
        id=row["id"],
        visitor=row["visitor"],
        artefact_id=row["artefact_id"],
        submitted_date=row["submitted_date"],
        due_date=row["due_date"],
        status=row["status"],
    )


class LoanService:
    """Service for requesting, approving and querying loans."""

    @classmethod
    async def retrieve_loan_by_id(cls, loan_id: int) -> LoanRead:
        """Return the loan with ``loan_id`` or raise ``NotFoundError``."""
        with transaction() as conn:
            row = LoanRepository(conn).find_by_id(loan_id)
            if row is None:
                raise NotFoundError("Loan not found.")
            return _to_read(row)

    @classmethod
    async def get_all_loans(cls) -> List[LoanRead]:
        with transaction() as conn:
            return [_to_read(row) for row in LoanRepository(conn).find_all()]

    @classmethod
    async def get_all_loans_by_status(cls, status: ExchangeStatus) -> List[LoanRead]:
        with transaction() as conn:
            return [_to_read(row) for row in LoanRepository(conn).find_by_status(status.value)]

    @classmethod
    async def get_all_loans_by_due_date(cls, due_date: date) -> List[LoanRead]:
        """Loans due on ``due_date``.

        Due dates always point at an open day, so a date that is not an
        open day has no loans due.
        """
        with transaction() as conn:
            open_day = OpenDayRepository(conn).find_open_day_by_date(due_date)
            if open_day is None:
                return []
            return [_to_read(row) for row in LoanRepository(conn).find_by_due_date(due_date)]

    @classmethod
    async def get_all_loans_by_submitted_date(cls, submitted_date: date) -> List[LoanRead]:
        with transaction() as conn:
            rows = LoanRepository(conn).find_by_submitted_date(submitted_date)
            return [_to_read(row) for row in rows]

    @classmethod
    async def get_all_loans_by_visitor(cls, username: str) -> List[LoanRead]:
        """Loans owned by ``username``; empty if the visitor is unknown."""
        with transaction() as conn:
            return [_to_read(row) for row in LoanRepository(conn).find_by_visitor(username)]

    @classmethod
    async def create_loan(cls, artefact_id: int, username: str) -> LoanRead:
        """Request a loan of an artefact for a visitor.

        The visitor must exist, owe nothing, hold fewer than
        ``settings.max_active_loans`` loans and have no overdue approved
        loan.  The artefact must exist, be loanable and not already be
        on loan.  All violated rules are reported together in a single
        ``MuseumError``.  On success a ``Pending`` loan submitted today
        is stored and returned.
        """
        logger = logging.getLogger(__name__)
        today = date.today()
        errors: List[str] = []
        with transaction() as conn:
            loans = LoanRepository(conn)
            visitor = VisitorRepository(conn).find_visitor_by_username(username)
            if visitor is None:
                errors.append("The visitor cannot be null.")
            else:
                if visitor["balance"] != 0:
                    errors.append("You cannot loan an item until your outstanding balances are paid.")
                if loans.count_by_visitor(username) >= settings.max_active_loans:
                    errors.append(
                        f"You cannot loan more than {settings.max_active_loans} items at a time."
                    )
                if loans.find_overdue_by_visitor(username, today):
                    errors.append("Please return outstanding loaned items before loaning a new one.")

            artefact = ArtefactRepository(conn).find_artefact_by_artefact_id(artefact_id)
            if artefact is None:
                errors.append("The artefact cannot be null.")
            elif not artefact["can_loan"] or artefact["currently_on_loan"]:
                errors.append("This item is unavailable for loan.")

            if errors:
                message = " ".join(errors)
                logger.warning("Loan request by %s for artefact %s rejected: %s", username, artefact_id, message)
                raise MuseumError(message)

            loan_id = loans.save(username, artefact_id, today, ExchangeStatus.PENDING.value)
            logger.info("Loan %s requested by %s for artefact %s", loan_id, username, artefact_id)
            return _to_read(loans.find_by_id(loan_id))

    @classmethod
    async def update_status(cls, loan_id: int, status: ExchangeStatus) -> LoanRead:
        """Approve or decline a pending loan.

        Declined loans are deleted; the returned loan is the removed
        record with status ``Declined``.  Approved loans receive a due
        date (the first open day on or after the loan period) and their
        artefact is marked as on loan.  ``Pending`` is not a valid
        target status.
        """
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            loans = LoanRepository(conn)
            row = loans.find_by_id(loan_id)
            if row is None:
                raise NotFoundError("Loan not found.")
            if status is ExchangeStatus.PENDING:
                raise MuseumError("Cannot set the loans status to pending.")

            if status is ExchangeStatus.DECLINED:
                declined = _to_read(row).model_copy(update={"status": ExchangeStatus.DECLINED})
                if row["status"] == ExchangeStatus.APPROVED.value:
                    ArtefactRepository(conn).set_currently_on_loan(row["artefact_id"], False)
                loans.delete_by_id(loan_id)
                logger.info("Loan %s declined and removed", loan_id)
                return declined

            if row["status"] == ExchangeStatus.APPROVED.value:
                raise MuseumError("Loan is already approved.")
            artefacts = ArtefactRepository(conn)
            artefact = artefacts.find_artefact_by_artefact_id(row["artefact_id"])
            if not artefact["can_loan"] or artefact["currently_on_loan"]:
                raise MuseumError("This item is unavailable for loan.")
            target = date.today() + timedelta(days=settings.loan_period_days)
            open_day = OpenDayRepository(conn).find_first_on_or_after(target)
            if open_day is None:
                raise MuseumError("No open day is available for the due date.")
            due_date = date.fromisoformat(open_day["date"])
            loans.update_status(loan_id, ExchangeStatus.APPROVED.value, due_date)
            artefacts.set_currently_on_loan(row["artefact_id"], True)
            logger.info("Loan %s approved, due %s", loan_id, due_date)
            return _to_read(loans.find_by_id(loan_id))

    @classmethod
    async def delete_loan(cls, loan_id: int) -> None:
        """Delete a loan, releasing its artefact if the loan was approved."""
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            loans = LoanRepository(conn)
            row = loans.find_by_id(loan_id)
            if row is None:
                raise NotFoundError("Loan not found.")
            if row["status"] == ExchangeStatus.APPROVED.value:
                ArtefactRepository(conn).set_currently_on_loan(row["artefact_id"], False)
            loans.delete_by_id(loan_id)
            logger.info("Loan %s deleted", loan_id)
