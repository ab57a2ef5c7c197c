"""Utility functions for fintrack."""

from fintrack.utils.date_parser import parse_date
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.formatting import format_currency, transaction_sign

__all__ = ["parse_date", "parse_amount", "format_currency", "transaction_sign"]
