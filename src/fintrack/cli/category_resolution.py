"""CLI helpers for category resolution and error handling."""

from __future__ import annotations

import click
from fintrack.domain.category import get_category_by_id, get_category_by_name
from fintrack.domain.entities import Category, TransactionType


def require_category_fits_or_exit(
    ctx: click.Context, category: Category, transaction_type: str
) -> None:
    """Exit with a CLI error if the category cannot tag this transaction type."""
    if not category.applies_to(TransactionType(transaction_type.lower())):
        click.echo(
            f"Error: Category '{category.name}' cannot be used for {transaction_type.lower()} transactions",
            err=True,
        )
        ctx.exit(1)


def resolve_category_or_exit(
    ctx: click.Context, category: str, transaction_type: str | None = None
) -> str:
    """Resolve a category ID or display name, or exit with a CLI error.

    Args:
        ctx: Click context
        category: Category ID (e.g., 'food-dining') or name (e.g., 'Food & Dining')
        transaction_type: If given, the category must apply to this type

    Returns:
        Category ID
    """
    found = get_category_by_id(category) or get_category_by_name(category)
    if found is None:
        click.echo(
            f"Error: Category '{category}' not found. Run 'fintrack category list' to see categories.",
            err=True,
        )
        ctx.exit(1)

    if transaction_type is not None:
        require_category_fits_or_exit(ctx, found, transaction_type)

    return found.id
