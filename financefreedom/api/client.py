"""Asynchronous client for the Finance Freedom REST API."""
import logging
from typing import List, Optional

import httpx

from financefreedom.api.auth import SessionAuth
from financefreedom.config import settings
from financefreedom.models.summary import SummaryPayload
from financefreedom.models.transaction import Transaction, TransactionCreate
from financefreedom.models.user import AuthRequest, AuthResponse, UserDto
from financefreedom.storage.session import SessionState
from financefreedom.storage.token_store import TokenStore
from financefreedom.utils.privacy import mask_email

logger = logging.getLogger(__name__)


class FinanceApiClient:
    """
    Thin wrapper over httpx.AsyncClient, one coroutine per endpoint.

    Authenticated endpoints carry the session's bearer token. Non-2xx
    responses raise httpx.HTTPStatusError; bodies that do not match the
    expected shape raise pydantic.ValidationError.
    """

    def __init__(
        self,
        session: SessionState,
        token_store: Optional[TokenStore] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.session = session
        self._anonymous_auth = SessionAuth(session, token_store, attach_token=False)
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
            auth=SessionAuth(session, token_store),
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "FinanceApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, authenticated: bool = True, **kwargs) -> httpx.Response:
        if not authenticated:
            kwargs["auth"] = self._anonymous_auth
        logger.debug("%s %s", method, path)
        response = await self._client.request(method, path, **kwargs)
        if response.is_error:
            logger.warning("%s %s failed: HTTP %s", method, path, response.status_code)
        response.raise_for_status()
        return response

    async def register(self, request: AuthRequest) -> AuthResponse:
        logger.info("Registering %s", mask_email(request.email))
        response = await self._request("POST", "/auth/register", authenticated=False, json=request.model_dump())
        return AuthResponse.model_validate(response.json())

    async def login(self, request: AuthRequest) -> AuthResponse:
        logger.info("Logging in %s", mask_email(request.email))
        response = await self._request("POST", "/auth/login", authenticated=False, json=request.model_dump())
        return AuthResponse.model_validate(response.json())

    async def me(self) -> UserDto:
        response = await self._request("GET", "/auth/me")
        return UserDto.model_validate(response.json())

    async def get_transactions(self) -> List[Transaction]:
        response = await self._request("GET", "/transactions")
        data = response.json()
        if not isinstance(data, list):
            raise ValueError("Expected a list of transactions")
        return [Transaction.model_validate(item) for item in data]

    async def create_transaction(self, request: TransactionCreate) -> Transaction:
        response = await self._request("POST", "/transactions", json=request.model_dump(mode="json"))
        return Transaction.model_validate(response.json())

    async def get_summary(self, month: str) -> SummaryPayload:
        response = await self._request("GET", "/transactions/summary", params={"month": month})
        return SummaryPayload.model_validate(response.json())
