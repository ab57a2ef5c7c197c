"""Transaction domain service."""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional, Sequence

from fintrack.database.base import Database
from fintrack.domain.entities import MAX_AMOUNT, Transaction, TransactionType
from fintrack.domain.errors import (
    NotFoundError,
    ValidationError,
    amount_too_large,
    invalid_amount,
    invalid_transaction_type,
    missing_required_fields,
    transaction_id_required,
    transaction_not_found,
)
from fintrack.domain.stats import filter_transactions_by_category
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_date

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def coerce_amount(value: Any) -> Decimal:
    """Convert an amount to a positive Decimal with cent precision.

    Raises:
        ValidationError: If the amount is not numeric, not greater than zero
            or larger than MAX_AMOUNT
    """
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)) and not isinstance(value, bool):
        try:
            amount = parse_amount(str(value))
        except ValueError as e:
            raise ValidationError(invalid_amount(value)) from e
    else:
        raise ValidationError(invalid_amount(value))

    if not amount.is_finite():
        raise ValidationError(invalid_amount(value))
    if amount > MAX_AMOUNT:
        raise ValidationError(amount_too_large(value, MAX_AMOUNT))
    try:
        amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValidationError(invalid_amount(value)) from e
    if amount <= 0:
        raise ValidationError(invalid_amount(value))
    return amount


def coerce_date(value: Any) -> date:
    """Convert a date or date string to a date.

    Raises:
        ValidationError: If the value is not a date or cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_date(value)
        except ValueError as e:
            raise ValidationError(f"Invalid date: {e}") from e
    raise ValidationError(f"Invalid date: {value!r}")


def coerce_type(value: Any) -> TransactionType:
    """Convert a transaction type name to TransactionType.

    Raises:
        ValidationError: If the value is not 'expense' or 'income'
    """
    if isinstance(value, str):
        value = value.strip().lower()
    try:
        return TransactionType(value)
    except ValueError as e:
        raise ValidationError(invalid_transaction_type(value)) from e


def coerce_description(value: Any) -> str:
    """Return the stripped description.

    Raises:
        ValidationError: If the description is blank
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Description must not be empty")
    return value.strip()


def normalize_category(value: Optional[str]) -> Optional[str]:
    """Map blank category values to None, the only "no category" value."""
    if value is None or not value.strip():
        return None
    return value.strip()


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        amount: Any = None,
        date: Any = None,
        description: Optional[str] = None,
        type: Any = None,
        category: Optional[str] = None,
    ) -> Transaction:
        """Create a transaction.

        Args:
            amount: Positive amount (Decimal, number or numeric string)
            date: Transaction date (date or date string)
            description: Non-empty description
            type: 'expense' or 'income'
            category: Optional predefined category ID

        Returns:
            The stored transaction, including its assigned ID and timestamps

        Raises:
            ValidationError: If a required field is missing or invalid
        """
        missing = [
            name
            for name, value in (
                ("amount", amount),
                ("date", date),
                ("description", description),
                ("type", type),
            )
            if _is_missing(value)
        ]
        if missing:
            raise ValidationError(missing_required_fields(missing))

        transaction_id = self.db.create_transaction(
            amount=coerce_amount(amount),
            date=coerce_date(date),
            description=coerce_description(description),
            type=coerce_type(type),
            category=normalize_category(category),
        )
        logger.info("Created transaction %s", transaction_id)
        return self.require_transaction(transaction_id)

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: str) -> Transaction:
        """Get transaction by ID or raise if it does not exist."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def list_transactions(self, category: Optional[str] = None) -> Sequence[Transaction]:
        """List transactions, newest date first.

        Args:
            category: Optional category ID to filter by

        Returns:
            List of transaction entities
        """
        return filter_transactions_by_category(self.db.list_transactions(), category)

    def update_transaction(
        self,
        transaction_id: Optional[str],
        amount: Any = None,
        date: Any = None,
        description: Optional[str] = None,
        type: Any = None,
        category: Optional[str] = None,
        clear_category: bool = False,
    ) -> Transaction:
        """Update transaction fields.

        Only fields that are provided are changed. Provided fields are
        validated the same way as on create.

        Args:
            transaction_id: Transaction ID to update
            amount: Optional new amount
            date: Optional new date
            description: Optional new description
            type: Optional new type
            category: Optional new category ID; an empty string clears it
            clear_category: If True, clear the category (category must be None)

        Returns:
            The updated transaction

        Raises:
            ValidationError: If the ID is missing or a field is invalid
            NotFoundError: If no transaction has this ID
        """
        if _is_missing(transaction_id):
            raise ValidationError(transaction_id_required())

        if clear_category and category is not None:
            raise ValidationError("Cannot set both category and clear_category")

        new_category = None
        update_category = clear_category
        if category is not None:
            new_category = normalize_category(category)
            update_category = True

        matched = self.db.update_transaction(
            transaction_id=transaction_id,
            amount=coerce_amount(amount) if amount is not None else None,
            date=coerce_date(date) if date is not None else None,
            description=coerce_description(description) if description is not None else None,
            type=coerce_type(type) if type is not None else None,
            category=new_category,
            update_category=update_category,
        )
        if matched == 0:
            raise NotFoundError(transaction_not_found(transaction_id))

        logger.info("Updated transaction %s", transaction_id)
        return self.require_transaction(transaction_id)

    def delete_transaction(self, transaction_id: Optional[str]) -> str:
        """Delete a transaction.

        Args:
            transaction_id: Transaction ID to delete

        Returns:
            The deleted transaction ID

        Raises:
            ValidationError: If the ID is missing
            NotFoundError: If no transaction has this ID
        """
        if _is_missing(transaction_id):
            raise ValidationError(transaction_id_required())

        if self.db.delete_transaction(transaction_id) == 0:
            raise NotFoundError(transaction_not_found(transaction_id))

        logger.info("Deleted transaction %s", transaction_id)
        return transaction_id
