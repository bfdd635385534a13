"""Tests for category resolution."""
import pytest

from financefreedom.models.transaction import TransactionType
from financefreedom.services.categories import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    INCOME_CATEGORY_SENTINEL,
    categories_for,
    is_income,
    resolve_category,
)


@pytest.mark.parametrize("label", INCOME_CATEGORIES)
def test_income_labels_resolve_to_sentinel(label):
    """Test every income label is sent as the sentinel."""
    assert resolve_category(label, TransactionType.INCOME) == INCOME_CATEGORY_SENTINEL


@pytest.mark.parametrize("label", EXPENSE_CATEGORIES)
def test_expense_labels_pass_through(label):
    """Test expense labels are sent unchanged."""
    assert resolve_category(label, TransactionType.EXPENSE) == label


def test_unknown_labels():
    """Test labels outside the lists are still accepted."""
    assert resolve_category("Gifts", TransactionType.EXPENSE) == "Gifts"
    assert resolve_category("Gifts", TransactionType.INCOME) == "Other"


def test_bonus_income_scenario():
    """Test Bonus income resolves to Other, also with a plain type string."""
    assert resolve_category("Bonus", "income") == "Other"


def test_categories_for_type():
    """Test each type gets its own option list, as a copy."""
    assert categories_for(TransactionType.INCOME) == ["Salary", "Bonus", "Investment", "Other"]
    assert categories_for("expense")[0] == "Food"
    options = categories_for(TransactionType.EXPENSE)
    options.append("Changed")
    assert "Changed" not in EXPENSE_CATEGORIES


@pytest.mark.parametrize("value,expected", [
    ("income", True),
    ("Pemasukan", True),
    ("KREDIT", True),
    ("credit", True),
    ("expense", False),
    ("debit", False),
    ("", False),
])
def test_is_income(value, expected):
    """Test the income spellings the backend uses."""
    assert is_income(value) is expected
