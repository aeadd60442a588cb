import pytest

import finance_tracker.api.savings as savings_api
from finance_tracker.api.savings import get_savings_mode
from finance_tracker.main import app
from finance_tracker.schemas.savings import SavingsMode
from tests.conftest import add_income, add_payout


@pytest.fixture
def march_data(client, auth_headers, source_id, category_id):
    add_income(client, auth_headers, source_id, "2025-03-03", net=1000)
    add_income(client, auth_headers, source_id, "2025-03-05", net=500)
    add_income(client, auth_headers, source_id, "2025-03-10", net=2000)
    add_payout(client, auth_headers, category_id, "2025-03-15", 300)
    add_payout(client, auth_headers, category_id, "2025-03-28", 500)
    # Abril: egresos mayores al ingreso
    add_income(client, auth_headers, source_id, "2025-04-02", net=1000)
    add_payout(client, auth_headers, category_id, "2025-04-05", 1500)
    # Mayo solo tiene egresos
    add_payout(client, auth_headers, category_id, "2025-05-05", 75)


def test_yearly_savings_report(client, auth_headers, march_data):
    response = client.get("/savings?year=2025", headers=auth_headers)
    assert response.status_code == 200
    report = response.json()

    assert report["mode"] == "net_minus_payouts"
    assert report["rate"] is None
    assert [m["month_name"] for m in report["months"]] == ["March", "April"]

    march, april = report["months"]
    assert [(w["week"], w["net_amount"]) for w in march["weeks"]] == [(1, 1500), (2, 2000)]
    assert march["total_net_amount"] == 3500
    assert march["total_payouts"] == 800
    assert march["total_savings"] == 2700
    assert april["total_savings"] == 0
    assert april["remaining"] == 1000

    assert report["total_savings"] == 2700
    assert report["total_payouts"] == 2300
    assert report["months_with_income"] == 2


def test_year_without_income_is_empty(client, auth_headers, category_id):
    add_payout(client, auth_headers, category_id, "2025-05-05", 75)

    report = client.get("/savings?year=2025", headers=auth_headers).json()
    assert report["months"] == []
    assert report["total_net_amount"] == 0


def test_monthly_savings(client, auth_headers, march_data):
    response = client.get("/savings/2025/3", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["total_savings"] == 2700

    missing = client.get("/savings/2025/5", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["detail"] == "No income entries found for May 2025"

    assert client.get("/savings/2025/13", headers=auth_headers).status_code == 422


def test_rate_is_rejected_in_default_mode(client, auth_headers):
    response = client.get("/savings?year=2025&rate=0.4", headers=auth_headers)
    assert response.status_code == 400


def test_fixed_rate_mode(client, auth_headers, march_data):
    app.dependency_overrides[get_savings_mode] = lambda: SavingsMode.fixed_rate

    report = client.get("/savings?year=2025&rate=0.5", headers=auth_headers).json()
    assert report["mode"] == "fixed_rate"
    assert report["rate"] == 0.5
    assert [m["total_savings"] for m in report["months"]] == [1750, 500]

    default_rate = client.get("/savings?year=2025", headers=auth_headers).json()
    assert default_rate["rate"] == pytest.approx(0.4)

    assert client.get("/savings?year=2025&rate=2", headers=auth_headers).status_code == 422


def test_database_errors_become_503(client, auth_headers):
    from sqlalchemy.exc import OperationalError

    from finance_tracker.repositories.records import get_record_repository

    class BrokenRepository:
        def fetch_income(self, year, month=None):
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        def fetch_payouts(self, year, month=None):
            return []

    app.dependency_overrides[get_record_repository] = lambda: BrokenRepository()

    response = client.get("/savings?year=2025", headers=auth_headers)
    assert response.status_code == 503
    assert "Database unavailable" in response.json()["detail"]


def test_misconfigured_default_rate_is_a_clear_error(client, auth_headers, march_data, monkeypatch):
    monkeypatch.setattr(savings_api, "SAVINGS_RATE", 1.5)
    app.dependency_overrides[get_savings_mode] = lambda: SavingsMode.fixed_rate

    for url in ("/savings?year=2025", "/savings/2025/3"):
        response = client.get(url, headers=auth_headers)
        assert response.status_code == 503
        assert response.json()["detail"] == "Savings rate is misconfigured on the server."

    # Una tasa explícita válida sigue funcionando
    assert client.get("/savings?year=2025&rate=0.5", headers=auth_headers).status_code == 200


def test_fixed_rate_mode_splits_savings_per_week(client, auth_headers, march_data):
    app.dependency_overrides[get_savings_mode] = lambda: SavingsMode.fixed_rate

    march = client.get("/savings/2025/3?rate=0.4", headers=auth_headers).json()
    assert [(w["week"], w["savings"], w["remaining"]) for w in march["weeks"]] == [
        (1, pytest.approx(600), pytest.approx(900)),
        (2, pytest.approx(800), pytest.approx(1200)),
    ]

    app.dependency_overrides.pop(get_savings_mode)
    default = client.get("/savings/2025/3", headers=auth_headers).json()
    assert all(w["savings"] is None and w["remaining"] is None for w in default["weeks"])
