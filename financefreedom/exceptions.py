"""Exceptions raised by the client."""
from typing import Dict


class FinanceFreedomError(Exception):
    """Base class for client errors."""


class EmptyTokenError(FinanceFreedomError):
    """The backend accepted credentials but returned no token."""


class FormValidationError(FinanceFreedomError):
    """A form failed client-side validation and was not submitted."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(errors.values()) or "Invalid form")
