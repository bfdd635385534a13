"""Wiring of the client's collaborators."""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from financefreedom.api.client import FinanceApiClient
from financefreedom.config import Settings, settings as default_settings
from financefreedom.repositories.auth import AuthRepository
from financefreedom.repositories.transactions import TransactionRepository
from financefreedom.storage.session import SessionState
from financefreedom.storage.token_store import TokenStore
from financefreedom.utils.log import configure_logging

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Everything a UI needs, built once per process."""

    settings: Settings
    token_store: TokenStore
    session: SessionState
    client: FinanceApiClient
    auth_repository: AuthRepository
    transaction_repository: TransactionRepository

    @classmethod
    def create(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AppContainer":
        """
        Build the container, priming the session from the persisted token.

        Args:
            settings: Settings to use (default: the module-level settings)
            transport: httpx transport override, e.g. httpx.ASGITransport in tests
        """
        settings = settings or default_settings
        configure_logging(settings.debug)
        token_store = TokenStore(
            db_path=settings.token_store_path,
            prefs_name=settings.prefs_name,
            key=settings.token_key,
        )
        session = SessionState()
        session.update(token_store.get_token())
        logger.info("Session restored: logged_in=%s", session.is_logged_in())

        client = FinanceApiClient(
            session,
            token_store=token_store,
            base_url=settings.base_url,
            timeout=settings.request_timeout,
            transport=transport,
        )
        return cls(
            settings=settings,
            token_store=token_store,
            session=session,
            client=client,
            auth_repository=AuthRepository(client, token_store, session),
            transaction_repository=TransactionRepository(client),
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "AppContainer":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
