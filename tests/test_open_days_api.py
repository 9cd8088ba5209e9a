import asyncio
from datetime import date, timedelta

from museum_api.app.schemas.loan import ExchangeStatus
from museum_api.app.services.loan_service import LoanService


def test_create_list_and_get_open_days(client):
    later = (date.today() + timedelta(days=3)).isoformat()
    sooner = (date.today() + timedelta(days=1)).isoformat()
    assert client.post("/api/v1/open-days/", json={"date": later}).status_code == 201
    assert client.post("/api/v1/open-days/", json={"date": sooner}).status_code == 201
    days = [d["date"] for d in client.get("/api/v1/open-days/").json()]
    assert days == [sooner, later]
    assert client.get(f"/api/v1/open-days/{later}").json()["date"] == later


def test_duplicate_open_day_rejected(client, open_day_factory):
    day = open_day_factory(2)
    r = client.post("/api/v1/open-days/", json={"date": day.date.isoformat()})
    assert r.status_code == 400


def test_next_open_day(client, open_day_factory):
    open_day_factory(2)
    expected = open_day_factory(6)
    on_or_after = (date.today() + timedelta(days=3)).isoformat()
    r = client.get("/api/v1/open-days/next", params={"onOrAfter": on_or_after})
    assert r.status_code == 200
    assert r.json()["date"] == expected.date.isoformat()
    far = (date.today() + timedelta(days=30)).isoformat()
    assert client.get("/api/v1/open-days/next", params={"onOrAfter": far}).status_code == 404


def test_open_day_with_loans_due_cannot_be_deleted(client, visitor_factory, artefact_factory, open_day_factory):
    visitor_factory("alice")
    due_day = open_day_factory(7)
    spare = open_day_factory(20)
    loan = asyncio.run(LoanService.create_loan(artefact_factory().id, "alice"))
    asyncio.run(LoanService.update_status(loan.id, ExchangeStatus.APPROVED))

    assert client.delete(f"/api/v1/open-days/{due_day.date.isoformat()}").status_code == 400
    assert client.delete(f"/api/v1/open-days/{spare.date.isoformat()}").status_code == 204
    assert client.get(f"/api/v1/open-days/{spare.date.isoformat()}").status_code == 404


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
