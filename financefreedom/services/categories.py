"""Transaction categories and the values the backend accepts for them."""
from typing import List, Union
from financefreedom.models.transaction import TransactionType

EXPENSE_CATEGORIES = [
    "Food", "Transport", "Shopping", "Entertainment",
    "Health", "Bills", "Education", "Other",
]
INCOME_CATEGORIES = [
    "Salary", "Bonus", "Investment", "Other",
]

# The backend rejects every income category except this one ("Invalid category").
# Users still pick from INCOME_CATEGORIES; the wire value is always the sentinel
# until the backend accepts more.
INCOME_CATEGORY_SENTINEL = "Other"


def categories_for(type: Union[TransactionType, str]) -> List[str]:
    """Category options offered for a transaction type."""
    if TransactionType.from_wire(type) is TransactionType.INCOME:
        return list(INCOME_CATEGORIES)
    return list(EXPENSE_CATEGORIES)


def resolve_category(label: str, type: Union[TransactionType, str]) -> str:
    """Map a displayed category label to the value sent to the backend."""
    if TransactionType.from_wire(type) is TransactionType.INCOME:
        return INCOME_CATEGORY_SENTINEL
    return label


def is_income(type: str) -> bool:
    """True for the income spellings the backend uses (income, pemasukan, kredit, credit)."""
    return TransactionType.from_wire(type) is TransactionType.INCOME
