"""Tests for the HTTP client and bearer-token handling."""
import json
from decimal import Decimal

import httpx
import pytest

from financefreedom.api.client import FinanceApiClient
from financefreedom.models.transaction import TransactionCreate
from financefreedom.models.user import AuthRequest

BASE_URL = "http://testserver/api/"

TRANSACTION = {
    "id": "tx_1",
    "title": "Lunch",
    "amount": 25000,
    "type": "expense",
    "category": "Food",
    "date": "2024-05-02",
    "note": None,
}


def _client(session, handler, token_store=None):
    return FinanceApiClient(
        session,
        token_store=token_store,
        base_url=BASE_URL,
        transport=httpx.MockTransport(handler),
    )


class Recorder:
    """MockTransport handler that records requests and answers with a fixed response."""

    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.payload = payload
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.mark.asyncio
async def test_bearer_header_on_authenticated_requests(session):
    session.update("abc123")
    recorder = Recorder(payload=[TRANSACTION])
    async with _client(session, recorder) as client:
        transactions = await client.get_transactions()

    assert transactions[0].amount == Decimal("25000")
    request = recorder.requests[0]
    assert request.headers["Authorization"] == "Bearer abc123"
    assert request.url.path == "/api/transactions"


@pytest.mark.asyncio
async def test_no_header_without_token(session):
    recorder = Recorder(payload={"id": "u1", "email": "a@b.c"})
    async with _client(session, recorder) as client:
        await client.me()

    assert "Authorization" not in recorder.requests[0].headers


@pytest.mark.asyncio
async def test_login_is_sent_without_bearer_header(session):
    session.update("old-token")
    recorder = Recorder(payload={"token": "new-token"})
    async with _client(session, recorder) as client:
        response = await client.login(AuthRequest(email="a@b.c", password="password123"))

    assert response.token == "new-token"
    request = recorder.requests[0]
    assert "Authorization" not in request.headers
    assert request.url.path == "/api/auth/login"
    assert request.method == "POST"


@pytest.mark.asyncio
async def test_401_clears_session_and_stored_token(session, token_store):
    token_store.save_token("expired")
    session.update("expired")
    recorder = Recorder(status_code=401, payload={"error": "Token expired"})
    async with _client(session, recorder, token_store) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await client.get_transactions()

    assert not session.is_logged_in()
    assert token_store.get_token() is None


@pytest.mark.asyncio
async def test_other_errors_keep_session(session):
    session.update("abc123")
    recorder = Recorder(status_code=500, payload={"error": "Database down"})
    async with _client(session, recorder) as client:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await client.get_transactions()

    assert exc_info.value.response.status_code == 500
    assert session.is_logged_in()


@pytest.mark.asyncio
async def test_create_transaction_body(session):
    session.update("abc123")
    recorder = Recorder(payload=TRANSACTION)
    request = TransactionCreate(
        title="Lunch", amount=Decimal("25000"), type="expense", category="Food", date="2024-05-02"
    )
    async with _client(session, recorder) as client:
        created = await client.create_transaction(request)

    assert created.id == "tx_1"
    sent = json.loads(recorder.requests[0].content)
    assert sent == {
        "title": "Lunch",
        "amount": 25000.0,
        "type": "expense",
        "category": "Food",
        "date": "2024-05-02",
        "note": "",
    }


@pytest.mark.asyncio
async def test_summary_month_parameter(session):
    session.update("abc123")
    recorder = Recorder(payload={"income": 10, "expense": 4})
    async with _client(session, recorder) as client:
        payload = await client.get_summary("2024-05")

    assert recorder.requests[0].url.params["month"] == "2024-05"
    assert recorder.requests[0].url.path == "/api/transactions/summary"
    assert payload.to_summary().balance == Decimal(6)


@pytest.mark.asyncio
async def test_transactions_must_be_a_list(session):
    recorder = Recorder(payload={"items": []})
    async with _client(session, recorder) as client:
        with pytest.raises(ValueError):
            await client.get_transactions()
