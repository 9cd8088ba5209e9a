import asyncio
from datetime import date, timedelta

import pytest

from museum_api.app.core.exceptions import MuseumError, NotFoundError
from museum_api.app.schemas.artefact import ArtefactUpdate
from museum_api.app.schemas.loan import ExchangeStatus
from museum_api.app.services.artefact_service import ArtefactService
from museum_api.app.services.loan_service import LoanService


def test_create_loan_is_pending_and_submitted_today(visitor_factory, artefact_factory):
    visitor_factory("alice")
    artefact = artefact_factory()
    loan = asyncio.run(LoanService.create_loan(artefact.id, "alice"))
    assert loan.status is ExchangeStatus.PENDING
    assert loan.visitor == "alice"
    assert loan.artefact_id == artefact.id
    assert loan.submitted_date == date.today()
    assert loan.due_date is None


def test_create_loan_rejects_outstanding_balance(visitor_factory, artefact_factory):
    visitor_factory("debtor", balance=12.5)
    artefact = artefact_factory()
    with pytest.raises(MuseumError, match="outstanding balances"):
        asyncio.run(LoanService.create_loan(artefact.id, "debtor"))
    assert asyncio.run(LoanService.get_all_loans()) == []


def test_sixth_loan_is_rejected(visitor_factory, artefact_factory):
    visitor_factory("collector")
    for i in range(5):
        artefact = artefact_factory(f"Coin {i}")
        asyncio.run(LoanService.create_loan(artefact.id, "collector"))
    sixth = artefact_factory("Coin 5")
    with pytest.raises(MuseumError, match="more than 5 items"):
        asyncio.run(LoanService.create_loan(sixth.id, "collector"))
    assert len(asyncio.run(LoanService.get_all_loans_by_visitor("collector"))) == 5


def test_overdue_approved_loan_blocks_new_loans(overdue_loan, artefact_factory):
    artefact = artefact_factory("Vase")
    with pytest.raises(MuseumError, match="Please return outstanding loaned items"):
        asyncio.run(LoanService.create_loan(artefact.id, "late"))


def test_approved_loan_not_yet_due_does_not_block(visitor_factory, artefact_factory, open_day_factory):
    visitor_factory("bob")
    open_day_factory(7)
    first = asyncio.run(LoanService.create_loan(artefact_factory("Helmet").id, "bob"))
    asyncio.run(LoanService.update_status(first.id, ExchangeStatus.APPROVED))
    second = asyncio.run(LoanService.create_loan(artefact_factory("Shield").id, "bob"))
    assert second.status is ExchangeStatus.PENDING


def test_unavailable_artefact_is_rejected(visitor_factory, artefact_factory):
    visitor_factory("alice")
    artefact = artefact_factory("Crown", can_loan=False, on_loan=True)
    with pytest.raises(MuseumError, match="unavailable for loan"):
        asyncio.run(LoanService.create_loan(artefact.id, "alice"))


def test_non_loanable_artefact_is_rejected(visitor_factory, artefact_factory):
    visitor_factory("alice")
    artefact = artefact_factory("Mummy", can_loan=False)
    with pytest.raises(MuseumError, match="unavailable for loan"):
        asyncio.run(LoanService.create_loan(artefact.id, "alice"))


def test_all_violations_are_reported_together(visitor_factory, artefact_factory):
    visitor_factory("debtor", balance=3.0)
    artefact = artefact_factory("Crown", can_loan=False, on_loan=True)
    with pytest.raises(MuseumError) as excinfo:
        asyncio.run(LoanService.create_loan(artefact.id, "debtor"))
    message = str(excinfo.value)
    assert "outstanding balances" in message
    assert "unavailable for loan" in message


def test_missing_visitor_and_artefact_are_both_reported():
    with pytest.raises(MuseumError) as excinfo:
        asyncio.run(LoanService.create_loan(999, "nobody"))
    message = str(excinfo.value)
    assert "visitor cannot be null" in message
    assert "artefact cannot be null" in message


def test_decline_removes_loan(visitor_factory, artefact_factory):
    visitor_factory("alice")
    loan = asyncio.run(LoanService.create_loan(artefact_factory().id, "alice"))
    declined = asyncio.run(LoanService.update_status(loan.id, ExchangeStatus.DECLINED))
    assert declined.id == loan.id
    assert declined.status is ExchangeStatus.DECLINED
    with pytest.raises(NotFoundError):
        asyncio.run(LoanService.retrieve_loan_by_id(loan.id))
    assert asyncio.run(LoanService.get_all_loans()) == []


def test_approve_sets_due_date_and_marks_artefact(visitor_factory, artefact_factory, open_day_factory):
    visitor_factory("alice")
    artefact = artefact_factory()
    open_day_factory(5)
    due_day = open_day_factory(9)
    open_day_factory(12)
    loan = asyncio.run(LoanService.create_loan(artefact.id, "alice"))

    approved = asyncio.run(LoanService.update_status(loan.id, ExchangeStatus.APPROVED))

    assert approved.status is ExchangeStatus.APPROVED
    assert approved.due_date == due_day.date
    assert asyncio.run(ArtefactService.retrieve_artefact(artefact.id)).currently_on_loan
    by_status = asyncio.run(LoanService.get_all_loans_by_status(ExchangeStatus.APPROVED))
    assert [l.id for l in by_status] == [loan.id]
    by_due = asyncio.run(LoanService.get_all_loans_by_due_date(due_day.date))
    assert [l.id for l in by_due] == [loan.id]


def test_approve_without_open_day_fails_and_keeps_pending(visitor_factory, artefact_factory):
    visitor_factory("alice")
    loan = asyncio.run(LoanService.create_loan(artefact_factory().id, "alice"))
    with pytest.raises(MuseumError, match="No open day"):
        asyncio.run(LoanService.update_status(loan.id, ExchangeStatus.APPROVED))
    assert asyncio.run(LoanService.retrieve_loan_by_id(loan.id)).status is ExchangeStatus.PENDING


def test_pending_is_not_a_valid_target_status(visitor_factory, artefact_factory):
    visitor_factory("alice")
    loan = asyncio.run(LoanService.create_loan(artefact_factory().id, "alice"))
    with pytest.raises(MuseumError, match="pending"):
        asyncio.run(LoanService.update_status(loan.id, ExchangeStatus.PENDING))


def test_update_status_of_unknown_loan():
    with pytest.raises(NotFoundError, match="Loan not found"):
        asyncio.run(LoanService.update_status(42, ExchangeStatus.APPROVED))


def test_second_approval_of_same_artefact_fails(visitor_factory, artefact_factory, open_day_factory):
    visitor_factory("alice")
    visitor_factory("bob")
    open_day_factory(7)
    artefact = artefact_factory()
    first = asyncio.run(LoanService.create_loan(artefact.id, "alice"))
    second = asyncio.run(LoanService.create_loan(artefact.id, "bob"))
    asyncio.run(LoanService.update_status(first.id, ExchangeStatus.APPROVED))
    with pytest.raises(MuseumError, match="unavailable for loan"):
        asyncio.run(LoanService.update_status(second.id, ExchangeStatus.APPROVED))


def test_deleting_approved_loan_releases_artefact(visitor_factory, artefact_factory, open_day_factory):
    visitor_factory("alice")
    open_day_factory(7)
    artefact = artefact_factory()
    loan = asyncio.run(LoanService.create_loan(artefact.id, "alice"))
    asyncio.run(LoanService.update_status(loan.id, ExchangeStatus.APPROVED))
    asyncio.run(LoanService.delete_loan(loan.id))
    assert not asyncio.run(ArtefactService.retrieve_artefact(artefact.id)).currently_on_loan
    with pytest.raises(NotFoundError):
        asyncio.run(LoanService.delete_loan(loan.id))


def test_loans_by_visitor_only_returns_own_loans(visitor_factory, artefact_factory):
    visitor_factory("alice")
    visitor_factory("bob")
    alice_ids = {
        asyncio.run(LoanService.create_loan(artefact_factory(f"A{i}").id, "alice")).id for i in range(3)
    }
    asyncio.run(LoanService.create_loan(artefact_factory("B").id, "bob"))
    loans = asyncio.run(LoanService.get_all_loans_by_visitor("alice"))
    assert {l.id for l in loans} == alice_ids
    assert asyncio.run(LoanService.get_all_loans_by_visitor("nobody")) == []


def test_loans_by_submitted_date(visitor_factory, artefact_factory):
    visitor_factory("alice")
    loan = asyncio.run(LoanService.create_loan(artefact_factory().id, "alice"))
    today = asyncio.run(LoanService.get_all_loans_by_submitted_date(date.today()))
    assert [l.id for l in today] == [loan.id]
    yesterday = date.today() - timedelta(days=1)
    assert asyncio.run(LoanService.get_all_loans_by_submitted_date(yesterday)) == []


def test_loans_by_due_date_for_closed_day_is_empty():
    assert asyncio.run(LoanService.get_all_loans_by_due_date(date(2001, 1, 1))) == []


def test_approving_twice_fails_and_keeps_due_date(visitor_factory, artefact_factory, open_day_factory):
    visitor_factory("alice")
    due_day = open_day_factory(7)
    loan = asyncio.run(LoanService.create_loan(artefact_factory().id, "alice"))
    asyncio.run(LoanService.update_status(loan.id, ExchangeStatus.APPROVED))
    open_day_factory(8)

    with pytest.raises(MuseumError, match="already approved"):
        asyncio.run(LoanService.update_status(loan.id, ExchangeStatus.APPROVED))

    stored = asyncio.run(LoanService.retrieve_loan_by_id(loan.id))
    assert stored.status is ExchangeStatus.APPROVED
    assert stored.due_date == due_day.date


def test_artefact_made_non_loanable_cannot_be_approved(visitor_factory, artefact_factory, open_day_factory):
    visitor_factory("alice")
    open_day_factory(7)
    artefact = artefact_factory()
    loan = asyncio.run(LoanService.create_loan(artefact.id, "alice"))
    asyncio.run(ArtefactService.update_artefact(artefact.id, ArtefactUpdate(can_loan=False)))

    with pytest.raises(MuseumError, match="unavailable for loan"):
        asyncio.run(LoanService.update_status(loan.id, ExchangeStatus.APPROVED))
    assert asyncio.run(LoanService.retrieve_loan_by_id(loan.id)).status is ExchangeStatus.PENDING
    assert not asyncio.run(ArtefactService.retrieve_artefact(artefact.id)).currently_on_loan
