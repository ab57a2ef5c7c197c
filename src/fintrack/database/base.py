"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from fintrack.domain.entities import Transaction, TransactionType

# IDs with this prefix are assigned by the in-memory backend
MEMORY_ID_PREFIX = "mem_"


def is_memory_id(transaction_id: str) -> bool:
    """Return True if the ID was assigned by the in-memory backend."""
    return transaction_id.startswith(MEMORY_ID_PREFIX)


class Database(ABC):
    """Abstract database interface for fintrack."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def create_transaction(
        self,
        amount: Decimal,
        date: date,
        description: str,
        type: TransactionType,
        category: Optional[str] = None,
    ) -> str:
        """Create a transaction. Returns the assigned transaction ID.

        The backend sets created_at and updated_at.
        """
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(self) -> list[Transaction]:
        """List all transactions, newest date first."""
        pass

    @abstractmethod
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
        """Update the given fields of a transaction and refresh updated_at.

        Fields passed as None are left unchanged, except category, which is
        written (possibly as None) whenever it is not None or update_category
        is True.

        Returns:
            Number of matched records (0 or 1)
        """
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: str) -> int:
        """Delete a transaction.

        Returns:
            Number of deleted records (0 or 1)
        """
        pass
