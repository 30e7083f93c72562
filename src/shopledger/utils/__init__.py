"""Utility modules for shopledger."""

from shopledger.utils.amount_parser import parse_amount, lenient_amount
from shopledger.utils.date_parser import parse_date

__all__ = ["parse_amount", "lenient_amount", "parse_date"]
