"""Statistics derived from a list of transactions.

All functions here are pure: they read the sequence they are given and never
touch the database, so callers recompute them after every change.
"""

from decimal import Decimal
from typing import Optional, Sequence

from fintrack.domain.category import resolve_category
from fintrack.domain.entities import (
    CategoryStat,
    MonthlyExpense,
    Transaction,
    TransactionStats,
    TransactionType,
)

ZERO = Decimal("0")


def get_transaction_stats(transactions: Sequence[Transaction]) -> TransactionStats:
    """Calculate income, expense and balance totals.

    Args:
        transactions: Transactions to analyze

    Returns:
        TransactionStats with balance equal to income minus expenses
    """
    total_income = sum(
        (t.amount for t in transactions if t.type == TransactionType.INCOME), ZERO
    )
    total_expenses = sum(
        (t.amount for t in transactions if t.type == TransactionType.EXPENSE), ZERO
    )
    return TransactionStats(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
    )


def get_monthly_expenses(transactions: Sequence[Transaction]) -> list[MonthlyExpense]:
    """Sum expenses per year-month.

    Months without expenses are omitted rather than reported as zero.

    Args:
        transactions: Transactions to analyze

    Returns:
        MonthlyExpense entries sorted by month (YYYY-MM) ascending
    """
    monthly: dict[str, Decimal] = {}
    for txn in transactions:
        if txn.type != TransactionType.EXPENSE:
            continue
        monthly[txn.month] = monthly.get(txn.month, ZERO) + txn.amount

    return [MonthlyExpense(month=month, total=monthly[month]) for month in sorted(monthly)]


def get_category_stats(
    transactions: Sequence[Transaction],
    transaction_type: Optional[TransactionType] = None,
) -> list[CategoryStat]:
    """Sum amounts per category and attach display metadata.

    Uncategorized transactions are skipped. Category IDs missing from the
    predefined table are reported with the placeholder name, icon and color.

    Args:
        transactions: Transactions to analyze
        transaction_type: If set, only count transactions of this type

    Returns:
        CategoryStat entries sorted by total descending. Equal totals keep
        the order in which their category first appeared.
    """
    category_totals: dict[str, Decimal] = {}
    for txn in transactions:
        if txn.category is None:
            continue
        if transaction_type is not None and txn.type != transaction_type:
            continue
        category_totals[txn.category] = category_totals.get(txn.category, ZERO) + txn.amount

    stats = []
    for category_id, total in category_totals.items():
        category = resolve_category(category_id)
        stats.append(
            CategoryStat(
                category_id=category_id,
                name=category.name,
                icon=category.icon,
                color=category.color,
                total=total,
            )
        )
    return sorted(stats, key=lambda stat: stat.total, reverse=True)


def filter_transactions_by_category(
    transactions: Sequence[Transaction], category: Optional[str]
) -> Sequence[Transaction]:
    """Keep only transactions tagged with a category.

    Args:
        transactions: Transactions to filter
        category: Category ID, or None/empty string for no filter

    Returns:
        The input itself when there is no filter, otherwise a list of the
        matching transactions in their original order
    """
    if not category:
        return transactions
    return [t for t in transactions if t.category == category]
