"""Mapper functions to convert SQLAlchemy models to domain entities.

This layer isolates the conversion logic, so the domain entities stay
unchanged when the table layout changes.
"""

from datetime import datetime, UTC
from decimal import Decimal

from fintrack.domain import entities as domain
from fintrack.database.models import Transaction as ORMTransaction

CENT = Decimal("0.01")


def _as_utc(value: datetime) -> datetime:
    """Attach UTC to timestamps read back without a timezone (SQLite)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        amount=Decimal(orm_transaction.amount).quantize(CENT),
        date=orm_transaction.date,
        description=orm_transaction.description,
        type=domain.TransactionType(orm_transaction.type),
        category=orm_transaction.category,
        created_at=_as_utc(orm_transaction.created_at),
        updated_at=_as_utc(orm_transaction.updated_at),
    )
