"""
Loan endpoints for API v1.

These routes let visitors request loans and let the manager list,
approve, decline and close them.  Validation of a request (visitor
balance, number of loans, overdue loans, artefact availability) is
done by ``LoanService``; rejected requests are answered with HTTP 400
and a message listing every violated rule.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Query, status

from museum_api.app.core.exceptions import MuseumError, NotFoundError
from museum_api.app.schemas.loan import ExchangeStatus, LoanRead
from museum_api.app.services.loan_service import LoanService

router = APIRouter()


@router.get("/", response_model=List[LoanRead])
async def list_loans(
    username: Optional[str] = Query(None, description="Only loans of this visitor"),
    loan_status: Optional[ExchangeStatus] = Query(None, alias="status"),
    due_date: Optional[date] = Query(None, alias="dueDate"),
    submitted_date: Optional[date] = Query(None, alias="submittedDate"),
) -> List[LoanRead]:
    """List loans, optionally filtered.

    At most one filter may be given: ``username``, ``status``,
    ``dueDate`` or ``submittedDate``.  Without a filter every loan is
    returned.
    """
    filters = [f for f in (username, loan_status, due_date, submitted_date) if f is not None]
    if len(filters) > 1:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only one of username, status, dueDate and submittedDate may be given",
        )
    if username is not None:
        return await LoanService.get_all_loans_by_visitor(username)
    if loan_status is not None:
        return await LoanService.get_all_loans_by_status(loan_status)
    if due_date is not None:
        return await LoanService.get_all_loans_by_due_date(due_date)
    if submitted_date is not None:
        return await LoanService.get_all_loans_by_submitted_date(submitted_date)
    return await LoanService.get_all_loans()


@router.get("/{loan_id}", response_model=LoanRead)
async def get_loan(loan_id: int = Path(..., description="ID of the loan")) -> LoanRead:
    try:
        return await LoanService.retrieve_loan_by_id(loan_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/", response_model=LoanRead, status_code=status.HTTP_201_CREATED)
async def create_loan(
    artefact_id: int = Query(..., alias="artefactId"),
    username: str = Query(...),
) -> LoanRead:
    """Request a loan of an artefact for a visitor.

    The created loan is ``Pending`` until the manager approves it.
    """
    try:
        return await LoanService.create_loan(artefact_id, username)
    except MuseumError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{loan_id}", response_model=LoanRead)
async def update_loan_status(
    loan_id: int = Path(..., description="ID of the loan"),
    loan_status: ExchangeStatus = Query(..., alias="status"),
) -> LoanRead:
    """Approve or decline a loan.

    Declining removes the loan; the response then describes the removed
    loan with status ``Declined``.
    """
    try:
        return await LoanService.update_status(loan_id, loan_status)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except MuseumError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{loan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_loan(loan_id: int = Path(..., description="ID of the loan")) -> None:
    """Delete a loan, e.g. when the artefact has been returned."""
    try:
        await LoanService.delete_loan(loan_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
