"""Bearer-token authentication for outgoing requests."""
import logging
from typing import Generator, Optional

import httpx

from financefreedom.storage.session import SessionState
from financefreedom.storage.token_store import TokenStore

logger = logging.getLogger(__name__)


class SessionAuth(httpx.Auth):
    """
    Adds the session's bearer token to each request and ends the session when
    the backend answers 401.

    With `attach_token=False` (registration and login) no header is sent, but a
    401 still ends the session.
    """

    def __init__(
        self,
        session: SessionState,
        token_store: Optional[TokenStore] = None,
        attach_token: bool = True,
    ):
        self.session = session
        self.token_store = token_store
        self.attach_token = attach_token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self.session.read() if self.attach_token else None
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

        response = yield request

        if response.status_code == 401:
            logger.warning("401 from %s %s, clearing session", request.method, request.url.path)
            if self.token_store is not None:
                self.token_store.clear_token()
            self.session.clear()
