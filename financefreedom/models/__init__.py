from .transaction import Transaction, TransactionCreate, TransactionType
from .summary import MonthlySummary, SummaryPayload
from .user import AuthRequest, AuthResponse, UserDto, UserProfile
from .result import Result

__all__ = [
    "Transaction",
    "TransactionCreate",
    "TransactionType",
    "MonthlySummary",
    "SummaryPayload",
    "AuthRequest",
    "AuthResponse",
    "UserDto",
    "UserProfile",
    "Result",
]
