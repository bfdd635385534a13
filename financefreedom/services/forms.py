"""Client-side validation for the login, registration and add-transaction forms."""
from dataclasses import dataclass, field
from datetime import date as Date
from typing import Dict, Optional

from financefreedom.exceptions import FormValidationError
from financefreedom.models.transaction import TransactionCreate, TransactionType
from financefreedom.services.amount import parse_amount
from financefreedom.services.categories import categories_for, resolve_category

MIN_PASSWORD_LENGTH = 8


def validate_credentials(email: str, password: str, confirm_password: Optional[str] = None) -> Dict[str, str]:
    """
    Validate login/registration input.

    Returns a dict of field name -> message; empty when the input is valid.
    `confirm_password` is only checked when given (registration).
    """
    errors = {}
    if not email or not email.strip() or "@" not in email:
        errors["email"] = "Enter a valid email address"
    if len(password or "") < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    if confirm_password is not None and confirm_password != password:
        errors["confirm_password"] = "Passwords do not match"
    return errors


@dataclass
class TransactionForm:
    """State of the add-transaction form."""

    title: str = ""
    amount: str = ""
    type: TransactionType = TransactionType.EXPENSE
    category: str = ""
    date: Date = field(default_factory=Date.today)
    note: str = ""

    def switch_type(self, type: TransactionType) -> None:
        """Change the transaction type; a category chosen for the old type no longer applies."""
        if type is not self.type:
            self.type = type
            self.category = ""

    def errors(self) -> Dict[str, str]:
        errors = {}
        if not self.title.strip():
            errors["title"] = "Title is required"
        amount = parse_amount(self.amount)
        if amount is None:
            errors["amount"] = "Enter a valid amount"
        elif amount <= 0:
            errors["amount"] = "Amount must be greater than zero"
        if not self.category:
            errors["category"] = "Choose a category"
        elif self.category not in categories_for(self.type):
            errors["category"] = "Invalid category"
        return errors

    def is_valid(self) -> bool:
        return not self.errors()

    def to_request(self) -> TransactionCreate:
        """
        Build the POST /transactions body.

        Raises:
            FormValidationError: If the form is not valid
        """
        errors = self.errors()
        if errors:
            raise FormValidationError(errors)
        return TransactionCreate(
            title=self.title,
            amount=parse_amount(self.amount),
            type=self.type,
            category=resolve_category(self.category, self.type),
            date=self.date,
            note=self.note,
        )

    def reset(self) -> None:
        """Clear the fields after a successful submit, keeping type and date."""
        self.title = ""
        self.amount = ""
        self.category = ""
        self.note = ""
