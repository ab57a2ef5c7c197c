"""Category listing commands."""

import click
from fintrack.domain.category import PREDEFINED_CATEGORIES, get_categories_by_type
from fintrack.domain.entities import TransactionType


@click.group()
def category_group():
    """Show predefined categories."""
    pass


@category_group.command("list")
@click.option(
    "--type",
    "txn_type",
    type=click.Choice(["expense", "income"], case_sensitive=False),
    help="Only show categories usable for this transaction type",
)
def list_categories(txn_type: str | None):
    """List predefined categories."""
    if txn_type is None:
        categories = list(PREDEFINED_CATEGORIES)
    else:
        categories = get_categories_by_type(TransactionType(txn_type.lower()))

    click.echo("\nCategories:")
    for cat in categories:
        click.echo(f"  {cat.icon} {cat.name:<16} {cat.id:<16} ({cat.type.value})")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
