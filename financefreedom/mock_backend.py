"""
In-memory stub of the Finance Freedom backend for local development and tests.

Reproduces the behaviour the client depends on, including the backend's
quirks: {"error": "..."} envelopes, 401 for bad credentials, income accepted
only with the "Other" category, and the income/expense summary shape.

Run it with:
  uvicorn financefreedom.mock_backend:app --reload --port 3000
"""
import logging
import secrets
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, FastAPI, Header, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from financefreedom.services.categories import EXPENSE_CATEGORIES, INCOME_CATEGORY_SENTINEL
from financefreedom.utils.dates import format_date, is_valid_month, parse_date

logger = logging.getLogger(__name__)

SUMMARY_SHAPE_SHORT = "short"  # {"income", "expense"}, no balance
SUMMARY_SHAPE_FULL = "full"  # {"totalIncome", "totalExpense", "balance"}


class BackendError(Exception):
    """Answered as {"error": message} with the given status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class CredentialsBody(BaseModel):
    email: str
    password: str


class TransactionBody(BaseModel):
    title: str
    amount: float
    type: str
    category: str
    date: str
    note: Optional[str] = ""


@dataclass
class BackendStore:
    """Users, issued tokens and transactions, all in memory."""

    users: Dict[str, dict] = field(default_factory=dict)
    tokens: Dict[str, str] = field(default_factory=dict)
    transactions: Dict[str, List[dict]] = field(default_factory=dict)

    def issue_token(self, email: str) -> str:
        token = secrets.token_hex(16)
        self.tokens[token] = email
        return token


def create_app(prefix: str = "/api", summary_shape: str = SUMMARY_SHAPE_SHORT) -> FastAPI:
    """Build a fresh stub backend with its own empty store."""
    app = FastAPI(title="Finance Freedom stub backend")
    store = BackendStore()
    app.state.store = store
    router = APIRouter(prefix=prefix)

    @app.exception_handler(BackendError)
    async def backend_error_handler(request: Request, exc: BackendError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=422, content={"error": "Invalid request body"})

    def current_user(authorization: Optional[str] = Header(None)) -> dict:
        scheme, _, token = (authorization or "").partition(" ")
        email = store.tokens.get(token) if scheme == "Bearer" else None
        if email is None:
            raise BackendError(401, "Unauthorized")
        return store.users[email]

    def auth_response(email: str) -> dict:
        user = store.users[email]
        return {
            "token": store.issue_token(email),
            "user": {"id": user["id"], "email": user["email"]},
        }

    @router.post("/auth/register", status_code=201)
    async def register(body: CredentialsBody):
        email = body.email.strip().lower()
        if not email or "@" not in email:
            raise BackendError(400, "Invalid email")
        if len(body.password) < 8:
            raise BackendError(400, "Password must be at least 8 characters")
        if email in store.users:
            raise BackendError(409, "Email already registered")
        store.users[email] = {"id": str(uuid.uuid4()), "email": email, "password": body.password}
        logger.info("Registered user %s", store.users[email]["id"])
        return auth_response(email)

    @router.post("/auth/login")
    async def login(body: CredentialsBody):
        email = body.email.strip().lower()
        user = store.users.get(email)
        if user is None or user["password"] != body.password:
            raise BackendError(401, "Invalid email or password")
        return auth_response(email)

    @router.get("/auth/me")
    async def me(user: dict = Depends(current_user)):
        return {"id": user["id"], "email": user["email"]}

    @router.get("/transactions")
    async def list_transactions(user: dict = Depends(current_user)):
        items = store.transactions.get(user["email"], [])
        return sorted(items, key=lambda tx: tx["date"], reverse=True)

    @router.post("/transactions", status_code=201)
    async def create_transaction(body: TransactionBody, user: dict = Depends(current_user)):
        if not body.title.strip():
            raise BackendError(422, "Title is required")
        if body.amount <= 0:
            raise BackendError(422, "Amount must be positive")
        if body.type not in ("income", "expense"):
            raise BackendError(422, "Invalid type")
        if body.type == "income" and body.category != INCOME_CATEGORY_SENTINEL:
            raise BackendError(422, "Invalid category")
        if body.type == "expense" and body.category not in EXPENSE_CATEGORIES:
            raise BackendError(422, "Invalid category")
        try:
            tx_date = parse_date(body.date)
        except ValueError:
            raise BackendError(422, "Invalid date")

        tx = {
            "id": str(uuid.uuid4()),
            "title": body.title.strip(),
            "amount": body.amount,
            "type": body.type,
            "category": body.category,
            "date": format_date(tx_date),
            "note": body.note or None,
        }
        store.transactions.setdefault(user["email"], []).append(tx)
        return tx

    @router.get("/transactions/summary")
    async def summary(month: str = Query(...), user: dict = Depends(current_user)):
        if not is_valid_month(month):
            raise BackendError(400, "Invalid month")
        items = [tx for tx in store.transactions.get(user["email"], []) if tx["date"].startswith(month)]
        income = sum(tx["amount"] for tx in items if tx["type"] == "income")
        expense = sum(tx["amount"] for tx in items if tx["type"] == "expense")
        if summary_shape == SUMMARY_SHAPE_FULL:
            return {"totalIncome": income, "totalExpense": expense, "balance": income - expense}
        return {"income": income, "expense": expense}

    app.include_router(router)
    return app


app = create_app()
