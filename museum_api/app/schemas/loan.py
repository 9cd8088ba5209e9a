"""
Pydantic models for loans.

A loan records an artefact borrowed by a visitor.  It is created in
the ``Pending`` state, becomes ``Approved`` (and receives a due date)
when the manager accepts it, and is removed when it is ``Declined``
or returned.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field


class ExchangeStatus(str, Enum):
    """Lifecycle state of a loan."""

    PENDING = "Pending"
    APPROVED = "Approved"
    DECLINED = "Declined"


class LoanRead(BaseModel):
    id: int
    visitor: str = Field(..., description="Username of the borrowing visitor")
    artefact_id: int
    submitted_date: date
    # Only approved loans have a due date.
    due_date: date | None = None
    status: ExchangeStatus

    model_config = {
        "from_attributes": True,
    }
