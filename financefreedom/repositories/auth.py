"""Authentication repository."""
import logging

from financefreedom.api.client import FinanceApiClient
from financefreedom.exceptions import EmptyTokenError
from financefreedom.models.result import Result
from financefreedom.models.user import AuthRequest, AuthResponse, UserProfile
from financefreedom.repositories.base import run_catching
from financefreedom.storage.session import SessionState
from financefreedom.storage.token_store import TokenStore

logger = logging.getLogger(__name__)


class AuthRepository:
    """Registration, login, logout and the current user's profile."""

    def __init__(self, client: FinanceApiClient, token_store: TokenStore, session: SessionState):
        self.client = client
        self.token_store = token_store
        self.session = session

    async def register(self, email: str, password: str) -> Result[UserProfile]:
        return await run_catching(
            "register",
            self._authenticate(self.client.register, email, password),
        )

    async def login(self, email: str, password: str) -> Result[UserProfile]:
        return await run_catching(
            "login",
            self._authenticate(self.client.login, email, password),
        )

    async def me(self) -> Result[UserProfile]:
        return await run_catching("me", self._me())

    def is_logged_in(self) -> bool:
        return self.session.is_logged_in()

    def logout(self) -> None:
        """End the session: forget the stored token and the in-memory one."""
        self.token_store.clear_token()
        self.session.clear()
        logger.info("Logged out")

    async def _authenticate(self, endpoint, email: str, password: str) -> UserProfile:
        response: AuthResponse = await endpoint(AuthRequest(email=email, password=password))
        token = (response.token or "").strip()
        if not token:
            raise EmptyTokenError("Empty token from server.")

        self.token_store.save_token(token)
        self.session.update(token)

        user = response.user
        return UserProfile(
            id=user.id if user else None,
            email=(user.email if user and user.email else email),
        )

    async def _me(self) -> UserProfile:
        user = await self.client.me()
        return UserProfile(id=user.id, email=user.email or "")
