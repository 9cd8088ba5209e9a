"""
Business logic for visitors.

Visitors register with a username and password, accumulate a balance
(for example unpaid loan fees) and request loans.  The balance must be
settled before a new loan is accepted by ``LoanService``.
"""

import logging
import math
import sqlite3
from typing import List

from museum_api.app.core.db import transaction
from museum_api.app.core.exceptions import MuseumError, NotFoundError
from museum_api.app.core.security import hash_password
from museum_api.app.repositories import ArtefactRepository, LoanRepository, VisitorRepository
from museum_api.app.schemas.visitor import VisitorCreate, VisitorRead
from museum_api.app.services.manager_service import MIN_PASSWORD_LENGTH


def _to_read(row: sqlite3.Row, loan_count: int) -> VisitorRead:
    return VisitorRead(
        username=row["username"],
        name=row["name"],
        balance=row["balance"],
        loan_count=loan_count,
    )


class VisitorService:
    """Service for managing visitor accounts."""

    @classmethod
    async def create_visitor(cls, data: VisitorCreate) -> VisitorRead:
        logger = logging.getLogger(__name__)
        errors: List[str] = []
        username = data.username.strip()
        if not username:
            errors.append("The username cannot be empty.")
        if len(data.password) < MIN_PASSWORD_LENGTH:
            errors.append(f"The password must be at least {MIN_PASSWORD_LENGTH} characters long.")
        with transaction() as conn:
            visitors = VisitorRepository(conn)
            if username and visitors.exists(username):
                errors.append(f"The username {username} is already taken.")
            if errors:
                raise MuseumError(" ".join(errors))
            visitors.save(username, hash_password(data.password), data.name)
            logger.info("Visitor %s registered", username)
            return _to_read(visitors.find_visitor_by_username(username), 0)

    @classmethod
    async def retrieve_visitor(cls, username: str) -> VisitorRead:
        with transaction() as conn:
            row = VisitorRepository(conn).find_visitor_by_username(username)
            if row is None:
                raise NotFoundError(f"Visitor {username} not found.")
            return _to_read(row, LoanRepository(conn).count_by_visitor(username))

    @classmethod
    async def get_all_visitors(cls) -> List[VisitorRead]:
        with transaction() as conn:
            rows = VisitorRepository(conn).find_all_with_loan_count()
            return [_to_read(row, row["loan_count"]) for row in rows]

    @classmethod
    async def update_balance(cls, username: str, balance: float) -> VisitorRead:
        """Set the outstanding balance of a visitor.

        Paying off everything a visitor owes means setting the balance
        to zero.  Negative and non-finite balances are rejected.
        """
        logger = logging.getLogger(__name__)
        if not math.isfinite(balance):
            raise MuseumError("The balance must be a finite amount.")
        if balance < 0:
            raise MuseumError("The balance cannot be negative.")
        with transaction() as conn:
            visitors = VisitorRepository(conn)
            if not visitors.exists(username):
                raise NotFoundError(f"Visitor {username} not found.")
            visitors.update_balance(username, balance)
            logger.info("Balance of visitor %s set to %.2f", username, balance)
            return _to_read(
                visitors.find_visitor_by_username(username),
                LoanRepository(conn).count_by_visitor(username),
            )

    @classmethod
    async def delete_visitor(cls, username: str) -> None:
        """Remove a visitor together with their loans.

        Artefacts the visitor had on approved loan become available
        again; the loans themselves go with the visitor row.
        """
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            visitors = VisitorRepository(conn)
            if not visitors.exists(username):
                raise NotFoundError(f"Visitor {username} not found.")
            artefacts = ArtefactRepository(conn)
            for loan in LoanRepository(conn).find_approved_by_visitor(username):
                artefacts.set_currently_on_loan(loan["artefact_id"], False)
            visitors.delete_by_id(username)
            logger.info("Visitor %s deleted", username)
