"""Privacy utilities for masking credentials in logs."""
import re
from typing import Optional


def mask_token(token: Optional[str]) -> str:
    """
    Mask a bearer token for logging.
    Keeps the last four characters so two tokens can still be told apart.
    """
    if not token:
        return "<none>"
    if len(token) <= 8:
        return "****"
    return f"****{token[-4:]}"


def mask_email(email: Optional[str]) -> str:
    """
    Mask the local part of an e-mail address, preserving its first character
    and the domain.
    """
    if not email:
        return "<none>"
    local, sep, domain = email.partition("@")
    if not sep:
        return re.sub(r"[A-Za-z0-9]", "*", email)
    return f"{local[:1]}***@{domain}"
