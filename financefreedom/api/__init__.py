from .auth import SessionAuth
from .client import FinanceApiClient

__all__ = ["SessionAuth", "FinanceApiClient"]
