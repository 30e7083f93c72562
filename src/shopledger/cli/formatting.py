"""Text formatting helpers for CLI output."""

from decimal import Decimal


def format_money(value: Decimal, currency: str = "") -> str:
    """Format an amount with thousands separators and the company currency."""
    text = f"{value:,.2f}"
    return f"{text} {currency}" if currency else text


def truncate(text: str | None, width: int) -> str:
    """Cut text to a column width."""
    text = text or ""
    return text if len(text) <= width else text[: width - 1] + "…"
