"""In-memory authentication session."""
import logging
import threading
from typing import Callable, List, Optional, Tuple

from financefreedom.utils.privacy import mask_token

logger = logging.getLogger(__name__)

SessionListener = Callable[[bool], None]


class SessionState:
    """
    Holds the current access token and whether the user is logged in.

    The token and the derived flag are replaced together under a lock, so a
    reader on any thread sees either the old pair or the new one. Listeners
    are called synchronously, on the updating thread, with the new flag.

    The authentication flow is the only writer; everything else reads.
    """

    def __init__(self, token: Optional[str] = None):
        self._lock = threading.Lock()
        self._state: Tuple[Optional[str], bool] = (None, False)
        self._listeners: List[SessionListener] = []
        if _has_token(token):
            self._state = (token, True)

    def update(self, token: Optional[str]) -> None:
        """Set the token (None or blank means logged out) and notify listeners."""
        logged_in = _has_token(token)
        with self._lock:
            self._state = (token if logged_in else None, logged_in)
            listeners = list(self._listeners)
        logger.debug("Session updated: logged_in=%s token=%s", logged_in, mask_token(token))
        for listener in listeners:
            listener(logged_in)

    def clear(self) -> None:
        self.update(None)

    def read(self) -> Optional[str]:
        return self._state[0]

    def is_logged_in(self) -> bool:
        return self._state[1]

    def snapshot(self) -> Tuple[Optional[str], bool]:
        """Token and logged-in flag, read together."""
        return self._state

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a listener for logged-in changes.

        Returns:
            A function that removes the listener again
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe


def _has_token(token: Optional[str]) -> bool:
    return token is not None and bool(token.strip())
