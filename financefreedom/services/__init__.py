from .amount import parse_amount, format_rupiah
from .categories import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    INCOME_CATEGORY_SENTINEL,
    categories_for,
    resolve_category,
    is_income,
)
from .error_messages import (
    SESSION_EXPIRED_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    extract_message,
    describe_exception,
)
from .forms import TransactionForm, validate_credentials
from .reports import filter_transactions, summarize_transactions, proportions

__all__ = [
    "parse_amount",
    "format_rupiah",
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
    "INCOME_CATEGORY_SENTINEL",
    "categories_for",
    "resolve_category",
    "is_income",
    "SESSION_EXPIRED_MESSAGE",
    "UNEXPECTED_ERROR_MESSAGE",
    "extract_message",
    "describe_exception",
    "TransactionForm",
    "validate_credentials",
    "filter_transactions",
    "summarize_transactions",
    "proportions",
]
