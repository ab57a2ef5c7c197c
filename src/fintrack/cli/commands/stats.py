"""Statistics commands."""

import click
from fintrack.cli.error_handling import handle_storage_error
from fintrack.domain.entities import TransactionType
from fintrack.domain.errors import StorageError
from fintrack.domain.stats import (
    get_category_stats,
    get_monthly_expenses,
    get_transaction_stats,
)
from fintrack.domain.transaction import TransactionService
from fintrack.utils.formatting import format_currency


@click.command("stats")
@click.option("--category", help="Only include transactions with this category ID")
@click.option(
    "--breakdown-type",
    type=click.Choice(["all", "expense", "income"], case_sensitive=False),
    default="all",
    show_default=True,
    help="Transaction type counted in the category breakdown",
)
@click.pass_context
def show_stats(ctx, category: str | None, breakdown_type: str):
    """Show totals, monthly expenses and a category breakdown."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        transactions = service.list_transactions(category=category)
    except StorageError as e:
        handle_storage_error(ctx, e)

    if not transactions:
        click.echo("No transactions found.")
        return

    totals = get_transaction_stats(transactions)
    click.echo("\nTotals")
    click.echo("-" * 40)
    click.echo(f"{'Income':<20} {format_currency(totals.total_income):>18}")
    click.echo(f"{'Expenses':<20} {format_currency(totals.total_expenses):>18}")
    click.echo(f"{'Balance':<20} {format_currency(totals.balance):>18}")

    monthly = get_monthly_expenses(transactions)
    click.echo("\nMonthly Expenses")
    click.echo("-" * 40)
    if not monthly:
        click.echo("No expense data to display")
    for entry in monthly:
        click.echo(f"{entry.month:<20} {format_currency(entry.total):>18}")

    transaction_type = None
    if breakdown_type.lower() != "all":
        transaction_type = TransactionType(breakdown_type.lower())
    category_stats = get_category_stats(transactions, transaction_type=transaction_type)
    click.echo("\nBy Category")
    click.echo("-" * 40)
    if not category_stats:
        click.echo("No categorized transactions")
    for stat in category_stats:
        label = f"{stat.icon} {stat.name}"
        click.echo(f"{label:<20} {format_currency(stat.total):>18}")


def register_commands(cli):
    """Register stats command with main CLI."""
    cli.add_command(show_stats)
