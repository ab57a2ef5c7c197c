"""Predefined category table and lookups.

Categories are compiled in and read-only; they are never stored in the
database. Transactions reference them by ID.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from fintrack.domain.entities import Category, CategoryType, TransactionType


PREDEFINED_CATEGORIES: tuple[Category, ...] = (
    # Expense categories
    Category("food-dining", "Food & Dining", "🍽️", "#ef4444", CategoryType.EXPENSE),
    Category("transportation", "Transportation", "🚗", "#3b82f6", CategoryType.EXPENSE),
    Category("shopping", "Shopping", "🛍️", "#8b5cf6", CategoryType.EXPENSE),
    Category("entertainment", "Entertainment", "🎬", "#f59e0b", CategoryType.EXPENSE),
    Category("healthcare", "Healthcare", "🏥", "#10b981", CategoryType.EXPENSE),
    Category("utilities", "Utilities", "💡", "#6366f1", CategoryType.EXPENSE),
    Category("housing", "Housing", "🏠", "#f97316", CategoryType.EXPENSE),
    Category("education", "Education", "📚", "#06b6d4", CategoryType.EXPENSE),
    Category("travel", "Travel", "✈️", "#ec4899", CategoryType.EXPENSE),
    Category("insurance", "Insurance", "🛡️", "#84cc16", CategoryType.EXPENSE),
    Category("taxes", "Taxes", "💰", "#f43f5e", CategoryType.EXPENSE),
    Category("other-expense", "Other Expense", "📝", "#6b7280", CategoryType.EXPENSE),
    # Income categories
    Category("salary", "Salary", "💼", "#10b981", CategoryType.INCOME),
    Category("freelance", "Freelance", "💻", "#3b82f6", CategoryType.INCOME),
    Category("investment", "Investment", "📈", "#f59e0b", CategoryType.INCOME),
    Category("business", "Business", "🏢", "#8b5cf6", CategoryType.INCOME),
    Category("gift", "Gift", "🎁", "#ec4899", CategoryType.INCOME),
    Category("refund", "Refund", "↩️", "#06b6d4", CategoryType.INCOME),
    Category("other-income", "Other Income", "📝", "#6b7280", CategoryType.INCOME),
)

# Shown for category IDs that are not in the table
UNKNOWN_CATEGORY = Category("unknown", "Unknown", "📝", "#6b7280", CategoryType.BOTH)

CATEGORIES_BY_ID: Mapping[str, Category] = MappingProxyType(
    {category.id: category for category in PREDEFINED_CATEGORIES}
)


def get_category_by_id(category_id: str) -> Optional[Category]:
    """Get category by ID, or None if it is not predefined."""
    return CATEGORIES_BY_ID.get(category_id)


def get_category_by_name(name: str) -> Optional[Category]:
    """Get category by display name, or None if no category has that name."""
    for category in PREDEFINED_CATEGORIES:
        if category.name == name:
            return category
    return None


def get_categories_by_type(transaction_type: TransactionType) -> list[Category]:
    """List categories usable for the given transaction type.

    Args:
        transaction_type: Expense or income

    Returns:
        Categories of that type plus categories marked as applying to both,
        in table order
    """
    transaction_type = TransactionType(transaction_type)
    return [c for c in PREDEFINED_CATEGORIES if c.applies_to(transaction_type)]


def resolve_category(category_id: str) -> Category:
    """Get category by ID, falling back to the placeholder for unknown IDs."""
    return CATEGORIES_BY_ID.get(category_id, UNKNOWN_CATEGORY)
