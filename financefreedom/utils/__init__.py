from .dates import parse_date, format_date, current_month, is_valid_month
from .privacy import mask_token, mask_email
from .log import configure_logging

__all__ = [
    "parse_date",
    "format_date",
    "current_month",
    "is_valid_month",
    "mask_token",
    "mask_email",
    "configure_logging",
]
