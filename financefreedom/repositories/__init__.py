from .auth import AuthRepository
from .transactions import TransactionRepository

__all__ = ["AuthRepository", "TransactionRepository"]
