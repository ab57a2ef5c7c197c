"""Shared domain error messages and error types."""

from typing import Iterable


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested transaction does not exist."""


class StorageError(RuntimeError):
    """The storage backend failed to complete an operation."""


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def transaction_id_required() -> str:
    """Return message for a missing transaction ID."""
    return "Transaction ID is required"


def missing_required_fields(fields: Iterable[str]) -> str:
    """Return message listing missing required fields."""
    return f"Missing required fields: {', '.join(fields)}"


def invalid_amount(value: object) -> str:
    """Return message for a non-numeric or non-positive amount."""
    return f"Amount must be a positive number (got '{value}')"


def amount_too_large(value: object, maximum: object) -> str:
    """Return message for an amount above the storable maximum."""
    return f"Amount must not exceed {maximum} (got '{value}')"


def invalid_transaction_type(value: object) -> str:
    """Return message for an unknown transaction type."""
    return f"Transaction type must be 'expense' or 'income' (got '{value}')"
