from .session import SessionState
from .token_store import TokenStore

__all__ = ["SessionState", "TokenStore"]
