"""Display helpers for amounts."""

from decimal import Decimal

from fintrack.domain.entities import TransactionType


def format_currency(amount: Decimal) -> str:
    """Format an amount as dollars with two decimals, e.g. "$1,234.50"."""
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def transaction_sign(transaction_type: TransactionType) -> str:
    """Return "-" for expenses and "+" for income."""
    return "-" if TransactionType(transaction_type) == TransactionType.EXPENSE else "+"
