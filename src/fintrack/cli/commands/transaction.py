"""Transaction management commands."""

import click
from fintrack.cli.category_resolution import (
    require_category_fits_or_exit,
    resolve_category_or_exit,
)
from fintrack.cli.error_handling import handle_domain_error, handle_storage_error
from fintrack.domain.category import get_category_by_id, resolve_category
from fintrack.domain.entities import Transaction
from fintrack.domain.errors import DomainError, StorageError
from fintrack.domain.transaction import TransactionService
from fintrack.utils.formatting import format_currency, transaction_sign

TYPE_CHOICE = click.Choice(["expense", "income"], case_sensitive=False)


def echo_transaction(txn: Transaction) -> None:
    """Print all fields of a transaction."""
    click.echo(f"  ID: {txn.id}")
    click.echo(f"  Date: {txn.date.isoformat()}")
    click.echo(f"  Type: {txn.type.value}")
    click.echo(f"  Amount: {format_currency(txn.amount)}")
    click.echo(f"  Description: {txn.description}")
    if txn.category is not None:
        category = resolve_category(txn.category)
        click.echo(f"  Category: {category.icon} {category.name}")


def format_transaction_row(txn: Transaction) -> str:
    """Format a transaction as one table row."""
    amount = f"{transaction_sign(txn.type)}{format_currency(txn.amount)}"
    category = resolve_category(txn.category).name if txn.category is not None else ""
    return f"{txn.date.isoformat():<12} {amount:>14}  {category:<16} {txn.description}"


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--category", help="Category ID to filter by (e.g., 'food-dining')")
@click.option("--verbose", "-v", is_flag=True, help="Show IDs and timestamps")
@click.pass_context
def list_transactions(ctx, category: str | None, verbose: bool):
    """List transactions, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        transactions = service.list_transactions(category=category)
    except StorageError as e:
        handle_storage_error(ctx, e)

    if not transactions:
        click.echo("No transactions found.")
        return

    if verbose:
        for txn in transactions:
            echo_transaction(txn)
            click.echo(f"  Created: {txn.created_at.isoformat()}")
            click.echo(f"  Updated: {txn.updated_at.isoformat()}")
            click.echo()
    else:
        click.echo(f"{'Date':<12} {'Amount':>14}  {'Category':<16} Description")
        click.echo("-" * 70)
        for txn in transactions:
            click.echo(format_transaction_row(txn))

    click.echo(f"\nTotal: {len(transactions)} transaction{'s' if len(transactions) != 1 else ''}")


@transaction_group.command("show")
@click.argument("transaction_id")
@click.pass_context
def show_transaction(ctx, transaction_id: str):
    """Show one transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        txn = service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    click.echo(f"Transaction {txn.id}")
    echo_transaction(txn)
    click.echo(f"  Created: {txn.created_at.isoformat()}")
    click.echo(f"  Updated: {txn.updated_at.isoformat()}")


@transaction_group.command("update")
@click.argument("transaction_id")
@click.option("--amount", help="Transaction amount (e.g., 123.45)")
@click.option("--date", help="Transaction date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--description", help="Transaction description")
@click.option("--type", "txn_type", type=TYPE_CHOICE, help="Transaction type")
@click.option("--category", help="Category ID (e.g., 'food-dining') or empty string to clear")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: str,
    amount: str | None,
    date: str | None,
    description: str | None,
    txn_type: str | None,
    category: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided. Use --category "" to clear the category.

    Examples:
        fintrack transaction update 3f2a... --amount 75.00
        fintrack transaction update 3f2a... --category ""  # Clear category
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    if category:
        category = resolve_category_or_exit(ctx, category, txn_type)
    elif txn_type is not None and category is None:
        # Type changes without --category must still fit the stored category
        try:
            current = service.require_transaction(transaction_id)
        except DomainError as e:
            handle_domain_error(ctx, e)
        except StorageError as e:
            handle_storage_error(ctx, e)
        stored = get_category_by_id(current.category) if current.category else None
        if stored is not None:
            require_category_fits_or_exit(ctx, stored, txn_type)

    try:
        txn = service.update_transaction(
            transaction_id,
            amount=amount,
            date=date,
            description=description,
            type=txn_type,
            category=category,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    click.echo(f"Updated transaction {txn.id}")
    echo_transaction(txn)


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.pass_context
def delete_transaction(ctx, transaction_id: str):
    """Delete a transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        deleted_id = service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    click.echo(f"Deleted transaction {deleted_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
