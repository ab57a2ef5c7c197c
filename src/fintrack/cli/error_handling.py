"""CLI error handling helpers."""

import logging

import click

from fintrack.domain.errors import DomainError, StorageError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_storage_error(ctx: click.Context, error: StorageError) -> None:
    """Log a storage failure, show a generic message and exit with failure."""
    logger.error("Storage failure: %s", error, exc_info=error)
    click.echo("Error: Operation failed due to a storage error", err=True)
    ctx.exit(1)
