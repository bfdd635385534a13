"""Transaction repository."""
from datetime import date
from typing import List, Optional

from financefreedom.api.client import FinanceApiClient
from financefreedom.models.result import Result
from financefreedom.models.summary import MonthlySummary
from financefreedom.models.transaction import Transaction, TransactionCreate
from financefreedom.repositories.base import run_catching
from financefreedom.utils.dates import current_month, is_valid_month


class TransactionRepository:
    """Transaction list, creation and the monthly summary."""

    def __init__(self, client: FinanceApiClient):
        self.client = client

    async def get_transactions(self) -> Result[List[Transaction]]:
        return await run_catching("get_transactions", self.client.get_transactions())

    async def create_transaction(self, request: TransactionCreate) -> Result[Transaction]:
        """Create a transaction; build `request` with TransactionForm.to_request()."""
        return await run_catching("create_transaction", self.client.create_transaction(request))

    async def get_monthly_summary(self, month: Optional[str] = None) -> Result[MonthlySummary]:
        """
        Income, expense and balance for `month` (YYYY-MM, default: current month).

        Missing totals count as zero; a missing balance is income minus expense.
        """
        month = month or self.current_month()
        if not is_valid_month(month):
            return Result.failure(f"Invalid month: {month}. Expected YYYY-MM")
        return await run_catching("get_monthly_summary", self._summary(month))

    async def _summary(self, month: str) -> MonthlySummary:
        payload = await self.client.get_summary(month)
        return payload.to_summary()

    @staticmethod
    def current_month(today: Optional[date] = None) -> str:
        return current_month(today)
