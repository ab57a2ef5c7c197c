"""Tests for Database implementations returning domain models."""

import pytest
from datetime import date, datetime, timedelta
from decimal import Decimal

from fintrack.database.base import is_memory_id
from fintrack.domain import entities
from fintrack.domain.entities import TransactionType


def _create(db, amount="10.00", txn_date=date(2024, 1, 15), description="Test", category=None):
    return db.create_transaction(
        amount=Decimal(amount),
        date=txn_date,
        description=description,
        type=TransactionType.EXPENSE,
        category=category,
    )


class TestDatabaseInterface:
    """Tests to verify each backend honours the Database contract."""

    def test_create_returns_string_id(self, any_db):
        txn_id = _create(any_db)
        assert isinstance(txn_id, str)
        assert txn_id

    def test_get_transaction_returns_domain_model(self, any_db):
        txn_id = _create(any_db, amount="100.50", category="shopping")

        txn = any_db.get_transaction(txn_id)

        assert isinstance(txn, entities.Transaction)
        assert txn.id == txn_id
        assert txn.amount == Decimal("100.50")
        assert txn.date == date(2024, 1, 15)
        assert txn.type == TransactionType.EXPENSE
        assert txn.category == "shopping"
        assert isinstance(txn.created_at, datetime)
        assert txn.created_at == txn.updated_at

    def test_timestamps_are_utc_aware(self, any_db):
        txn = any_db.get_transaction(_create(any_db))

        assert txn.created_at.tzinfo is not None
        assert txn.created_at.utcoffset() == timedelta(0)
        assert txn.updated_at.utcoffset() == timedelta(0)

    def test_get_missing_transaction(self, any_db):
        assert any_db.get_transaction("missing") is None

    def test_list_sorted_by_date_descending(self, any_db):
        _create(any_db, txn_date=date(2024, 1, 1), description="old")
        _create(any_db, txn_date=date(2024, 3, 1), description="new")
        _create(any_db, txn_date=date(2024, 2, 1), description="mid")

        assert [t.description for t in any_db.list_transactions()] == ["new", "mid", "old"]

    def test_update_returns_matched_count(self, any_db):
        txn_id = _create(any_db)

        assert any_db.update_transaction(txn_id, description="Changed") == 1
        assert any_db.update_transaction("missing", description="Changed") == 0
        assert any_db.get_transaction(txn_id).description == "Changed"

    def test_update_leaves_category_unless_requested(self, any_db):
        txn_id = _create(any_db, category="travel")

        any_db.update_transaction(txn_id, amount=Decimal("5.00"))
        assert any_db.get_transaction(txn_id).category == "travel"

        any_db.update_transaction(txn_id, update_category=True)
        assert any_db.get_transaction(txn_id).category is None

    def test_update_refreshes_updated_at(self, any_db):
        txn_id = _create(any_db)
        before = any_db.get_transaction(txn_id)

        any_db.update_transaction(txn_id, amount=Decimal("20.00"))
        after = any_db.get_transaction(txn_id)

        assert after.created_at == before.created_at
        assert after.updated_at >= before.updated_at

    def test_delete_returns_deleted_count(self, any_db):
        txn_id = _create(any_db)

        assert any_db.delete_transaction(txn_id) == 1
        assert any_db.delete_transaction(txn_id) == 0
        assert any_db.list_transactions() == []


def test_memory_backend_ids(memory_db):
    first = _create(memory_db)
    second = _create(memory_db)
    assert (first, second) == ("mem_1", "mem_2")
    assert is_memory_id(first)


def test_sql_backend_ids_are_not_memory_ids(temp_db):
    assert not is_memory_id(_create(temp_db))


def test_sql_failure_raises_storage_error(temp_db):
    """Test that SQLAlchemy errors surface as StorageError and roll back."""
    from fintrack.database.models import Base
    from fintrack.domain.errors import StorageError

    _create(temp_db)
    temp_db.disconnect()
    Base.metadata.drop_all(temp_db.session_factory.kw["bind"])

    with pytest.raises(StorageError, match="read failed"):
        temp_db.list_transactions()
    with pytest.raises(StorageError, match="insert failed"):
        _create(temp_db)
