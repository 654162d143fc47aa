"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

_CURRENCY_PREFIX = re.compile(r"^(Rp\.?|IDR|USD)\s*", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s")
_NON_NUMERIC = re.compile(r"[^0-9.]")


def normalize_amount(amount_str: str | None) -> Decimal:
    """Normalize a free-text currency string into a signed Decimal.

    Handles Indonesian and Western formats:
    - "1.500.000,00" (dot thousands, comma decimal)
    - "1,500,000.00" (comma thousands, dot decimal)
    - "Rp 50.000", "IDR 50000", "USD 1,250"
    - "-50.000", "(50.000)" (negative)

    A lone comma followed by exactly three characters is a thousands
    separator ("10,000" is ten thousand), otherwise a decimal point
    ("50,5"). A lone dot is always a thousands separator.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount, or 0 when nothing numeric can be recovered
    """
    if not amount_str:
        return Decimal("0")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = _CURRENCY_PREFIX.sub("", amount_str)
    amount_str = _WHITESPACE.sub("", amount_str)

    if amount_str.startswith("-"):
        is_negative = True
        amount_str = amount_str[1:]

    has_comma = "," in amount_str
    has_dot = "." in amount_str
    if has_comma and has_dot:
        if amount_str.rfind(",") > amount_str.rfind("."):
            amount_str = amount_str.replace(".", "").replace(",", ".", 1)
        else:
            amount_str = amount_str.replace(",", "")
    elif has_comma:
        if len(amount_str.split(",")[-1]) == 3:
            amount_str = amount_str.replace(",", "")
        else:
            amount_str = amount_str.replace(",", ".", 1)
    elif has_dot:
        amount_str = amount_str.replace(".", "")

    amount_str = _NON_NUMERIC.sub("", amount_str)

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        return Decimal("0")

    if is_negative:
        amount = -amount
    return amount


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount typed by a user.

    Same rules as normalize_amount, but input without any digit is rejected
    instead of silently becoming zero.

    Raises:
        ValueError: If amount string contains no digits
    """
    if not amount_str or not any(ch.isdigit() for ch in amount_str):
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return normalize_amount(amount_str)
