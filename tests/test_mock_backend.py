"""Tests for the stub backend's endpoints."""
import pytest
from fastapi.testclient import TestClient

from financefreedom.mock_backend import SUMMARY_SHAPE_FULL, create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def _auth_headers(client):
    response = client.post("/api/auth/register", json={"email": "a@example.com", "password": "password123"})
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


def test_register_returns_token_and_user(client):
    response = client.post("/api/auth/register", json={"email": "A@Example.com", "password": "password123"})
    assert response.status_code == 201
    data = response.json()
    assert data["token"]
    assert data["user"]["email"] == "a@example.com"


def test_short_password(client):
    response = client.post("/api/auth/register", json={"email": "a@example.com", "password": "short"})
    assert response.status_code == 400
    assert response.json() == {"error": "Password must be at least 8 characters"}


def test_unauthorized_envelope(client):
    response = client.get("/api/transactions")
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_invalid_body_envelope(client):
    headers = _auth_headers(client)
    response = client.post("/api/transactions", json={"title": "x"}, headers=headers)
    assert response.status_code == 422
    assert response.json() == {"error": "Invalid request body"}


def test_income_category_quirk(client):
    headers = _auth_headers(client)
    body = {"title": "Pay", "amount": 100, "type": "income", "category": "Salary", "date": "2024-05-01", "note": ""}

    response = client.post("/api/transactions", json=body, headers=headers)
    assert response.status_code == 422
    assert response.json() == {"error": "Invalid category"}

    body["category"] = "Other"
    response = client.post("/api/transactions", json=body, headers=headers)
    assert response.status_code == 201
    assert response.json()["note"] is None


def test_summary_shapes():
    for shape, keys in [(None, {"income", "expense"}), (SUMMARY_SHAPE_FULL, {"totalIncome", "totalExpense", "balance"})]:
        client = TestClient(create_app(summary_shape=shape) if shape else create_app())
        headers = _auth_headers(client)
        client.post(
            "/api/transactions",
            json={"title": "Lunch", "amount": 25000, "type": "expense", "category": "Food", "date": "2024-05-02"},
            headers=headers,
        )
        response = client.get("/api/transactions/summary", params={"month": "2024-05"}, headers=headers)
        assert response.status_code == 200
        assert set(response.json()) == keys


def test_summary_rejects_bad_month(client):
    headers = _auth_headers(client)
    response = client.get("/api/transactions/summary", params={"month": "2024-5"}, headers=headers)
    assert response.status_code == 400
