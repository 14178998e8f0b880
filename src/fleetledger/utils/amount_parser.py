"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

_CURRENCY = re.compile(r"^(AED|USD|EUR|GBP)\s*|\s*(AED|USD|EUR|GBP)$|[$€£]", re.IGNORECASE)


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles plain numbers, thousands separators and a leading or trailing
    currency marker ("1,250.00", "AED 300", "$45.10"). The sign is kept as
    given so that validation can reject non-positive amounts with a proper
    message.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = _CURRENCY.sub("", amount_str.strip())
    cleaned = cleaned.replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount
