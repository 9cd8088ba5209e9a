import asyncio
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from museum_api.app.core.config import settings
from museum_api.app.core.db import init_db, transaction
from museum_api.app.main import app
from museum_api.app.repositories import ArtefactRepository, LoanRepository
from museum_api.app.schemas.artefact import ArtefactCreate
from museum_api.app.schemas.visitor import VisitorCreate
from museum_api.app.services.artefact_service import ArtefactService
from museum_api.app.services.open_day_service import OpenDayService
from museum_api.app.services.visitor_service import VisitorService


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point every test at its own freshly migrated SQLite file."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "museum.db"))
    init_db()
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def visitor_factory():
    def _create(username: str = "alice", password: str = "password123", balance: float = 0.0):
        visitor = asyncio.run(VisitorService.create_visitor(
            VisitorCreate(username=username, password=password, name=username.title())
        ))
        if balance:
            visitor = asyncio.run(VisitorService.update_balance(username, balance))
        return visitor
    return _create


@pytest.fixture
def artefact_factory():
    def _create(name: str = "Amphora", can_loan: bool = True, on_loan: bool = False):
        artefact = asyncio.run(ArtefactService.create_artefact(
            ArtefactCreate(name=name, description="test piece", can_loan=can_loan, loan_fee=5.0)
        ))
        if on_loan:
            with transaction() as conn:
                ArtefactRepository(conn).set_currently_on_loan(artefact.id, True)
            artefact = asyncio.run(ArtefactService.retrieve_artefact(artefact.id))
        return artefact
    return _create


@pytest.fixture
def open_day_factory():
    def _create(offset_days: int = 7):
        return asyncio.run(OpenDayService.create_open_day(date.today() + timedelta(days=offset_days)))
    return _create


@pytest.fixture
def overdue_loan(visitor_factory, artefact_factory, open_day_factory):
    """An approved loan of visitor ``late`` whose due date has passed."""
    visitor_factory("late")
    artefact = artefact_factory("Old map")
    past_day = open_day_factory(-3)
    with transaction() as conn:
        loans = LoanRepository(conn)
        loan_id = loans.save("late", artefact.id, date.today() - timedelta(days=10), "Approved")
        loans.update_status(loan_id, "Approved", past_day.date)
    return loan_id
