"""Utility functions for multiluz."""

from multiluz.utils.date_parser import current_date, parse_date, parse_month
from multiluz.utils.amount_parser import coerce_amount, parse_amount

__all__ = ["current_date", "parse_date", "parse_month", "coerce_amount", "parse_amount"]
