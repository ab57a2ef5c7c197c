"""In-memory database implementation.

Used when no SQL database is configured or reachable. Data lives only as long
as the instance.
"""

import itertools
from dataclasses import replace
from datetime import date, datetime, UTC
from decimal import Decimal
from typing import Optional

from fintrack.database.base import Database, MEMORY_ID_PREFIX
from fintrack.domain.entities import Transaction, TransactionType


class InMemoryDatabase(Database):
    """Database implementation backed by a dict of domain entities."""

    def __init__(self):
        """Initialize an empty in-memory store."""
        self._transactions: dict[str, Transaction] = {}
        self._ids = itertools.count(1)

    def connect(self) -> None:
        """Connect to the database."""
        # Nothing to connect to
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    def create_transaction(
        self,
        amount: Decimal,
        date: date,
        description: str,
        type: TransactionType,
        category: Optional[str] = None,
    ) -> str:
        """Create a transaction. Returns transaction ID."""
        transaction_id = f"{MEMORY_ID_PREFIX}{next(self._ids)}"
        now = datetime.now(UTC)
        self._transactions[transaction_id] = Transaction(
            id=transaction_id,
            amount=amount,
            date=date,
            description=description,
            type=type,
            category=category,
            created_at=now,
            updated_at=now,
        )
        return transaction_id

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID."""
        return self._transactions.get(transaction_id)

    def list_transactions(self) -> list[Transaction]:
        """List all transactions, newest date first."""
        return sorted(
            self._transactions.values(),
            key=lambda t: (t.date, t.created_at),
            reverse=True,
        )

    def update_transaction(
        self,
        transaction_id: str,
        amount: Optional[Decimal] = None,
        date: Optional[date] = None,
        description: Optional[str] = None,
        type: Optional[TransactionType] = None,
        category: Optional[str] = None,
        update_category: bool = False,
    ) -> int:
        """Update transaction fields. Returns number of matched records."""
        txn = self._transactions.get(transaction_id)
        if txn is None:
            return 0

        changes = {
            field: value
            for field, value in (
                ("amount", amount),
                ("date", date),
                ("description", description),
                ("type", type),
            )
            if value is not None
        }
        if category is not None or update_category:
            changes["category"] = category
        changes["updated_at"] = datetime.now(UTC)

        self._transactions[transaction_id] = replace(txn, **changes)
        return 1

    def delete_transaction(self, transaction_id: str) -> int:
        """Delete a transaction. Returns number of deleted records."""
        if self._transactions.pop(transaction_id, None) is None:
            return 0
        return 1
