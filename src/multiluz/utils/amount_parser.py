"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "R$123.45"
    - "-123.45"
    - "1,234.56"
    - "1.234,56" (comma as decimal separator)
    - "25.000" or "1.234.567" (dots grouping thousands, no decimals)
    - "5%" (returned as the fraction 0.05)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    is_percentage = amount_str.endswith("%")
    if is_percentage:
        amount_str = amount_str[:-1]

    # Remove currency symbols
    amount_str = re.sub(r"R\$|[$€£¥]", "", amount_str).strip()

    # A trailing ",dd" group means the comma is the decimal separator
    if re.search(r",\d{1,2}$", amount_str):
        amount_str = amount_str.replace(".", "").replace(",", ".")
    # Dot-grouped thousands with no decimals; "0.125" stays a fraction
    elif re.fullmatch(r"-?[1-9]\d{0,2}(\.\d{3})+", amount_str):
        amount_str = amount_str.replace(".", "")
    else:
        amount_str = amount_str.replace(",", "")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if is_percentage:
        amount = amount / 100
    return amount


def coerce_amount(amount_str: str | None) -> Decimal:
    """Parse an amount, treating missing or non-numeric input as zero."""
    if amount_str is None:
        return Decimal("0")
    try:
        return parse_amount(amount_str)
    except ValueError:
        return Decimal("0")
