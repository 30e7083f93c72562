"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re
from typing import Any

ZERO = Decimal("0")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "Rs 123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

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

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols and codes
    amount_str = re.sub(r"(?i)^(rs\.?|pkr)|[$€£¥₨]", "", amount_str.strip())
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return -amount if is_negative else amount


def lenient_amount(value: Any) -> Decimal:
    """Coerce a stored numeric value into a Decimal, defaulting to zero.

    Stored records may hold partially edited values, so every numeric read
    goes through this function instead of failing. The rules are:

    - ``Decimal``, ``int`` and ``float`` values are used as-is
    - strings are parsed after stripping whitespace ("" is zero)
    - ``None``, booleans, NaN, infinities and anything unparsable are zero

    Args:
        value: Raw value from a record

    Returns:
        Finite Decimal amount, ``0`` when the value is not a usable number
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        return Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(repr(value))
    elif isinstance(value, str):
        if not value.strip():
            return ZERO
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            return ZERO
    else:
        return ZERO

    return amount if amount.is_finite() else ZERO
