"""Amount parsing and formatting for the Indonesian grouped-integer convention."""
import re
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Optional, Union

SEPARATOR = "."
# More fraction digits than this are rounded off, so str() of a result
# never switches to exponent notation.
MAX_FRACTION_DIGITS = 6
_FRACTION_QUANTUM = Decimal(1).scaleb(-MAX_FRACTION_DIGITS)
_AMOUNT_RE = re.compile(r"[0-9.]+")


def parse_amount(text: Optional[str]) -> Optional[Decimal]:
    """
    Parse a user-entered amount.

    Accepts plain decimals ("25000", "1.5") and dot-grouped integers
    ("500.000", "10.000.000"):

    - no separator: parsed as is
    - two or more separators: all are thousands marks and are removed
    - one separator followed by exactly three digits: thousands mark
    - one separator otherwise: decimal point, with at most
      MAX_FRACTION_DIGITS fraction digits kept (rounded half-even)

    Returns:
        The amount, or None when the text is blank, holds anything other than
        digits and separators, or does not form a number.
    """
    if text is None or not text.strip():
        return None

    t = text.strip()
    if not _AMOUNT_RE.fullmatch(t):
        return None

    dots = t.count(SEPARATOR)
    if dots == 0:
        cleaned = t
    elif dots >= 2:
        cleaned = t.replace(SEPARATOR, "")
    else:
        after = t.partition(SEPARATOR)[2]
        cleaned = t.replace(SEPARATOR, "") if len(after) == 3 else t

    if not cleaned or cleaned == SEPARATOR:
        return None
    try:
        amount = Decimal(cleaned)
        if amount.as_tuple().exponent < -MAX_FRACTION_DIGITS:
            amount = amount.quantize(_FRACTION_QUANTUM, rounding=ROUND_HALF_EVEN)
    except InvalidOperation:
        return None
    return Decimal(0) if amount.is_zero() else amount


def format_rupiah(amount: Union[Decimal, float, int]) -> str:
    """
    Format an amount for display, e.g. "Rp 1.500.000" or "Rp 12,5".

    Uses "." for grouping and "," for decimals, with at most three fraction
    digits and no trailing zeros.
    """
    q = Decimal(str(amount)).quantize(Decimal("0.001"), rounding=ROUND_HALF_EVEN)
    sign = "-" if q < 0 else ""
    integer, _, fraction = f"{abs(q):f}".partition(".")
    fraction = fraction.rstrip("0")
    grouped = f"{int(integer):,}".replace(",", ".")
    return f"Rp {sign}{grouped}" + (f",{fraction}" if fraction else "")
