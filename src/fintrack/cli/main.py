"""Main CLI entry point."""

import logging

import click
from fintrack.database.factories import create_database
from fintrack.domain.errors import StorageError

# Import and register all commands at module level
from fintrack.cli.commands import (
    add,
    transaction,
    category,
    stats,
)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging once for the CLI process."""
    if logging.root.handlers:
        logging.root.setLevel(level.upper())
        return
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides FINTRACK_DB_PATH environment variable)",
    envvar="FINTRACK_DB_PATH",
)
@click.option(
    "--db-url",
    help="SQLAlchemy database URL, or 'memory' for in-memory storage",
    envvar="FINTRACK_DATABASE_URL",
)
@click.option(
    "--memory-fallback",
    is_flag=True,
    help="Use in-memory storage if the database cannot be opened",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="FINTRACK_LOG_LEVEL",
    help="Logging level (default: WARNING)",
)
@click.pass_context
def cli(ctx, db_path: str | None, db_url: str | None, memory_fallback: bool, log_level: str):
    """Fintrack - Personal finance tracker.

    Record income and expense transactions, tag them with categories and
    view totals, monthly expenses and category breakdowns.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help), unless one was passed in
    if ctx.invoked_subcommand is not None and "db" not in ctx.obj:
        try:
            db = create_database(
                database_url=db_url,
                database_path=db_path,
                fallback_to_memory=memory_fallback,
            )
        except StorageError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
category.register_commands(cli)
stats.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
