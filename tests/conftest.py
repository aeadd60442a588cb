"""Fixtures compartidos: base SQLite en memoria por test y cliente HTTP autenticado."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import finance_tracker.models  # noqa: F401
from finance_tracker.database import get_session
from finance_tracker.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_and_login(client, email="ana@example.com", password="s3cret-pass"):
    response = client.post("/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    token = client.post(
        "/auth/login", data={"username": email, "password": password}
    ).json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(client):
    return register_and_login(client)


@pytest.fixture
def source_id(client, auth_headers):
    response = client.post(
        "/income-sources",
        json={"name": "Day job", "type": "salary", "color": "#22AA44"},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


@pytest.fixture
def category_id(client, auth_headers):
    response = client.post(
        "/payout-categories",
        json={"name": "Rent", "type": "obligation", "color": "#AA2244", "target_amount": 1200},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


def add_income(client, headers, source_id, day, net, gross=None, week=None):
    payload = {
        "date": day,
        "source_id": source_id,
        "gross_amount": gross if gross is not None else net,
        "net_amount": net,
    }
    if week is not None:
        payload["week"] = week
    response = client.post("/income-entries", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def add_payout(client, headers, category_id, day, amount, status="pending"):
    response = client.post(
        "/payouts",
        json={"date": day, "category_id": category_id, "amount": amount, "status": status},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
