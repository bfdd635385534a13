"""Tests for client-side totals and filters."""
from decimal import Decimal

import pytest

from financefreedom.models.summary import MonthlySummary
from financefreedom.models.transaction import Transaction
from financefreedom.services.reports import filter_transactions, proportions, summarize_transactions


@pytest.fixture
def transactions():
    return [
        Transaction(id="1", title="Salary", amount=Decimal("5000000"), type="income", category="Other", date="2024-05-01"),
        Transaction(id="2", title="Rent", amount=Decimal("1500000"), type="expense", category="Bills", date="2024-05-02"),
        Transaction(id="3", title="Lunch", amount=Decimal("25000"), type="expense", category="Food", date="2024-05-02"),
        Transaction(id="4", title="Refund", amount=Decimal("75000"), type="credit", category="Other", date="2024-05-03"),
    ]


def test_filter(transactions):
    assert [tx.id for tx in filter_transactions(transactions)] == ["1", "2", "3", "4"]
    assert [tx.id for tx in filter_transactions(transactions, "income")] == ["1", "4"]
    assert [tx.id for tx in filter_transactions(transactions, "expense")] == ["2", "3"]


def test_unknown_filter(transactions):
    with pytest.raises(ValueError):
        filter_transactions(transactions, "transfers")


def test_summarize(transactions):
    summary = summarize_transactions(transactions)
    assert summary.total_income == Decimal("5075000")
    assert summary.total_expense == Decimal("1525000")
    assert summary.balance == Decimal("3550000")


def test_summarize_empty():
    assert summarize_transactions([]) == MonthlySummary()


def test_proportions():
    summary = MonthlySummary(total_income=Decimal(300), total_expense=Decimal(100), balance=Decimal(200))
    assert proportions(summary) == (0.75, 0.25)
    assert proportions(MonthlySummary()) == (0.0, 0.0)
