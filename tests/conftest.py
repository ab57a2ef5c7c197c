"""Shared pytest fixtures for fintrack tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from fintrack.database.factories import create_sqlite_database
from fintrack.database.memory import InMemoryDatabase
from fintrack.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_db():
    """Create an empty in-memory database."""
    return InMemoryDatabase()


@pytest.fixture(params=["sqlite", "memory"])
def any_db(request):
    """Run a test against each storage backend."""
    if request.param == "memory":
        return request.getfixturevalue("memory_db")
    return request.getfixturevalue("temp_db")


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def sample_transactions(transaction_service):
    """Create a small mix of income and expenses across two months."""
    rows = [
        ("3000.00", date(2024, 1, 31), "January salary", "income", "salary"),
        ("120.50", date(2024, 1, 5), "Groceries", "expense", "food-dining"),
        ("45.00", date(2024, 1, 20), "Bus pass", "expense", "transportation"),
        ("80.25", date(2024, 2, 3), "Restaurant", "expense", "food-dining"),
        ("15.00", date(2024, 2, 10), "Cash withdrawal", "expense", None),
    ]
    return [
        transaction_service.create_transaction(
            amount=Decimal(amount),
            date=txn_date,
            description=description,
            type=txn_type,
            category=category,
        )
        for amount, txn_date, description, txn_type, category in rows
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
