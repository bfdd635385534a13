"""Monthly summary models."""
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class SummaryPayload(BaseModel):
    """
    Raw body of GET /transactions/summary.

    The backend has been seen answering with either totalIncome/totalExpense
    or income/expense, with or without balance.
    """

    model_config = ConfigDict(extra="ignore")

    totalIncome: Optional[Decimal] = None
    totalExpense: Optional[Decimal] = None
    income: Optional[Decimal] = None
    expense: Optional[Decimal] = None
    balance: Optional[Decimal] = None

    def to_summary(self) -> "MonthlySummary":
        total_income = _first(self.totalIncome, self.income)
        total_expense = _first(self.totalExpense, self.expense)
        balance = self.balance if self.balance is not None else total_income - total_expense
        return MonthlySummary(
            total_income=total_income,
            total_expense=total_expense,
            balance=balance,
        )


class MonthlySummary(BaseModel):
    """Income, expense and balance for one month."""

    total_income: Decimal = Field(default=Decimal(0), ge=0)
    total_expense: Decimal = Field(default=Decimal(0), ge=0)
    balance: Decimal = Decimal(0)

    @property
    def total(self) -> Decimal:
        return self.total_income + self.total_expense


def _first(*values: Optional[Decimal]) -> Decimal:
    for v in values:
        if v is not None:
            return v
    return Decimal(0)
