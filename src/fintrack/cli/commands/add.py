"""Add transaction command."""

import click
from fintrack.cli.category_resolution import resolve_category_or_exit
from fintrack.cli.commands.transaction import TYPE_CHOICE, echo_transaction
from fintrack.cli.error_handling import handle_domain_error, handle_storage_error
from fintrack.domain.errors import DomainError, StorageError
from fintrack.domain.transaction import TransactionService


@click.command("add")
@click.option("--amount", required=True, help="Transaction amount, must be positive (e.g., 123.45)")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", required=True, help="Transaction description")
@click.option("--type", "txn_type", type=TYPE_CHOICE, default="expense", show_default=True, help="Transaction type")
@click.option("--category", help="Category ID or name (e.g., 'food-dining' or 'Food & Dining')")
@click.pass_context
def add_transaction(
    ctx,
    amount: str,
    date: str,
    description: str,
    txn_type: str,
    category: str | None,
):
    """Add a transaction.

    Examples:
        fintrack add --amount 50.00 --description "Grocery store" --category food-dining
        fintrack add --amount 1000.00 --date 2024-01-31 --description "Pay" --type income --category salary
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    category_id = None
    if category:
        category_id = resolve_category_or_exit(ctx, category, txn_type)

    try:
        txn = service.create_transaction(
            amount=amount,
            date=date,
            description=description,
            type=txn_type,
            category=category_id,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    click.echo(f"Created transaction {txn.id}")
    echo_transaction(txn)


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
