"""Tests for statistics over transaction lists."""

import pytest
from datetime import date, datetime, UTC
from decimal import Decimal

from fintrack.domain.entities import (
    CategoryStat,
    MonthlyExpense,
    Transaction,
    TransactionStats,
    TransactionType,
)
from fintrack.domain.stats import (
    filter_transactions_by_category,
    get_category_stats,
    get_monthly_expenses,
    get_transaction_stats,
)

_counter = iter(range(1, 10_000))


def make_txn(amount, txn_date, txn_type="expense", category=None, description="Test"):
    """Build a transaction entity without touching a database."""
    now = datetime.now(UTC)
    return Transaction(
        id=f"mem_{next(_counter)}",
        amount=Decimal(amount),
        date=date.fromisoformat(txn_date),
        description=description,
        type=TransactionType(txn_type),
        category=category,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def mixed_transactions():
    return [
        make_txn("3000.00", "2024-01-31", "income", "salary"),
        make_txn("120.50", "2024-01-05", "expense", "food-dining"),
        make_txn("45.00", "2024-01-20", "expense", "transportation"),
        make_txn("80.25", "2024-02-03", "expense", "food-dining"),
        make_txn("15.00", "2024-02-10", "expense"),
        make_txn("200.00", "2023-12-24", "income", "gift"),
    ]


class TestTransactionStats:
    """Tests for income/expense/balance totals."""

    def test_empty(self):
        stats = get_transaction_stats([])
        assert stats == TransactionStats(Decimal("0"), Decimal("0"), Decimal("0"))

    def test_totals(self, mixed_transactions):
        stats = get_transaction_stats(mixed_transactions)
        assert stats.total_income == Decimal("3200.00")
        assert stats.total_expenses == Decimal("260.75")
        assert stats.balance == Decimal("2939.25")

    def test_balance_is_exact_difference(self):
        """Decimal sums keep income minus expenses exact."""
        transactions = [make_txn("0.10", "2024-01-01", "income") for _ in range(3)]
        transactions.append(make_txn("0.30", "2024-01-02", "expense"))
        stats = get_transaction_stats(transactions)
        assert stats.total_income - stats.total_expenses == stats.balance
        assert stats.balance == Decimal("0")

    def test_only_expenses_gives_negative_balance(self):
        stats = get_transaction_stats([make_txn("10", "2024-01-01")])
        assert stats.total_income == Decimal("0")
        assert stats.balance == Decimal("-10")


class TestMonthlyExpenses:
    """Tests for the monthly expense series."""

    def test_empty(self):
        assert get_monthly_expenses([]) == []

    def test_groups_and_sorts_by_month(self, mixed_transactions):
        result = get_monthly_expenses(mixed_transactions)
        assert result == [
            MonthlyExpense(month="2024-01", total=Decimal("165.50")),
            MonthlyExpense(month="2024-02", total=Decimal("95.25")),
        ]

    def test_ignores_income(self):
        result = get_monthly_expenses([make_txn("500", "2024-03-01", "income")])
        assert result == []

    def test_no_gap_filling(self):
        transactions = [
            make_txn("10", "2024-05-01"),
            make_txn("20", "2024-01-15"),
            make_txn("5", "2023-11-30"),
        ]
        months = [entry.month for entry in get_monthly_expenses(transactions)]
        assert months == ["2023-11", "2024-01", "2024-05"]

    def test_output_sorted_non_decreasing(self, mixed_transactions):
        months = [entry.month for entry in get_monthly_expenses(mixed_transactions)]
        assert months == sorted(months)


class TestCategoryStats:
    """Tests for the per-category breakdown."""

    def test_empty(self):
        assert get_category_stats([]) == []

    def test_sorted_descending_with_metadata(self, mixed_transactions):
        result = get_category_stats(mixed_transactions)
        assert [stat.category_id for stat in result] == [
            "salary",
            "food-dining",
            "gift",
            "transportation",
        ]
        food = result[1]
        assert food == CategoryStat(
            category_id="food-dining",
            name="Food & Dining",
            icon="🍽️",
            color="#ef4444",
            total=Decimal("200.75"),
        )

    def test_excludes_uncategorized(self, mixed_transactions):
        result = get_category_stats(mixed_transactions)
        categorized_total = sum(
            (t.amount for t in mixed_transactions if t.category is not None), Decimal("0")
        )
        assert sum((stat.total for stat in result), Decimal("0")) == categorized_total

    def test_filter_by_type(self, mixed_transactions):
        result = get_category_stats(mixed_transactions, transaction_type=TransactionType.EXPENSE)
        assert [stat.category_id for stat in result] == ["food-dining", "transportation"]

    def test_unknown_category_uses_placeholder(self):
        result = get_category_stats([make_txn("12", "2024-01-01", category="pets")])
        assert len(result) == 1
        assert result[0].category_id == "pets"
        assert result[0].name == "Unknown"
        assert result[0].icon == "📝"
        assert result[0].color == "#6b7280"

    def test_ties_keep_first_appearance_order(self):
        transactions = [
            make_txn("10", "2024-01-01", category="travel"),
            make_txn("10", "2024-01-02", category="housing"),
        ]
        result = get_category_stats(transactions)
        assert [stat.category_id for stat in result] == ["travel", "housing"]


class TestCategoryFilter:
    """Tests for filtering transactions by category."""

    @pytest.mark.parametrize("empty_filter", [None, ""])
    def test_empty_filter_returns_input(self, mixed_transactions, empty_filter):
        assert filter_transactions_by_category(mixed_transactions, empty_filter) is mixed_transactions

    def test_filter_preserves_order(self, mixed_transactions):
        result = filter_transactions_by_category(mixed_transactions, "food-dining")
        assert [t.description for t in result] == ["Test", "Test"]
        assert [t.date for t in result] == [date(2024, 1, 5), date(2024, 2, 3)]

    def test_filter_is_idempotent(self, mixed_transactions):
        once = filter_transactions_by_category(mixed_transactions, "food-dining")
        twice = filter_transactions_by_category(once, "food-dining")
        assert list(twice) == list(once)

    def test_no_match(self, mixed_transactions):
        assert filter_transactions_by_category(mixed_transactions, "taxes") == []
