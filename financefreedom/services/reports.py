"""Client-side totals and filters for the history and report views."""
from decimal import Decimal
from typing import Iterable, List, Tuple

from financefreedom.models.summary import MonthlySummary
from financefreedom.models.transaction import Transaction

FILTER_ALL = "all"
FILTER_INCOME = "income"
FILTER_EXPENSE = "expense"
FILTERS = (FILTER_ALL, FILTER_INCOME, FILTER_EXPENSE)


def filter_transactions(transactions: Iterable[Transaction], kind: str = FILTER_ALL) -> List[Transaction]:
    """Keep all, only income, or only expense transactions."""
    if kind not in FILTERS:
        raise ValueError(f"Unknown filter: {kind}. Expected one of {', '.join(FILTERS)}")
    if kind == FILTER_INCOME:
        return [tx for tx in transactions if tx.is_income]
    if kind == FILTER_EXPENSE:
        return [tx for tx in transactions if not tx.is_income]
    return list(transactions)


def summarize_transactions(transactions: Iterable[Transaction]) -> MonthlySummary:
    """Total income and expense over a list of transactions."""
    total_income = Decimal(0)
    total_expense = Decimal(0)
    for tx in transactions:
        if tx.is_income:
            total_income += tx.amount
        else:
            total_expense += tx.amount
    return MonthlySummary(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
    )


def proportions(summary: MonthlySummary) -> Tuple[float, float]:
    """Income and expense as fractions of their sum; (0, 0) when both are zero."""
    total = summary.total
    if total <= 0:
        return 0.0, 0.0
    return float(summary.total_income / total), float(summary.total_expense / total)
