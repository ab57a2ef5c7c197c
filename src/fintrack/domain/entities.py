"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
database schema. Storage backends convert their own records into these types
so the services and statistics never see ORM objects.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional

# Stored as NUMERIC(12, 2): ten integer digits and cents
AMOUNT_PRECISION = 12
AMOUNT_SCALE = 2
MAX_AMOUNT = Decimal("9999999999.99")


class TransactionType(str, Enum):
    """Direction of money flow for a transaction."""

    EXPENSE = "expense"
    INCOME = "income"


class CategoryType(str, Enum):
    """Transaction types a category applies to."""

    EXPENSE = "expense"
    INCOME = "income"
    BOTH = "both"


@dataclass(frozen=True)
class Category:
    """Predefined category entity."""

    id: str
    name: str
    icon: str
    color: str
    type: CategoryType

    def applies_to(self, transaction_type: TransactionType) -> bool:
        """Return True if the category can tag transactions of this type."""
        return self.type == CategoryType.BOTH or self.type.value == transaction_type.value


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: str
    amount: Decimal
    date: date
    description: str
    type: TransactionType
    category: Optional[str]
    created_at: datetime
    updated_at: datetime

    @property
    def month(self) -> str:
        """Year-month key in YYYY-MM form."""
        return self.date.isoformat()[:7]


@dataclass(frozen=True)
class TransactionStats:
    """Income, expense and balance totals."""

    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal


@dataclass(frozen=True)
class MonthlyExpense:
    """Summed expenses for one calendar month."""

    month: str
    total: Decimal


@dataclass(frozen=True)
class CategoryStat:
    """Summed amount for one category, with its display metadata."""

    category_id: str
    name: str
    icon: str
    color: str
    total: Decimal
