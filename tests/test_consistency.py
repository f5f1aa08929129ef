"""Tests for rename/delete propagation into the ledger."""

import logging

import pytest
from sqlalchemy import Delete, Update
from sqlalchemy.exc import OperationalError

from stockledger.domain.errors import CascadeFailure


def failing(*args, **kwargs):
    raise OperationalError("UPDATE transactions", {}, Exception("database is locked"))


class TestReferenceMaintenance:
    """Tests for the idempotent ledger operations."""

    def test_rename_references_exact_match_only(self, consistency, transaction_service):
        transaction_service.create_transaction(date="2024-01-01", item_name="Salt", quantity=1)
        transaction_service.create_transaction(date="2024-01-01", item_name="salt ", quantity=1)

        assert consistency.rename_references("Salt", "Sea Salt") == 1
        names = sorted(txn.item_name for txn in transaction_service.list_transactions())
        assert names == ["Sea Salt", "salt "]

    def test_rename_references_updates_matching_key(self, consistency, transaction_service):
        transaction_service.create_transaction(date="2024-01-01", item_name="Salt", quantity=1)

        consistency.rename_references("Salt", "Sea Salt")

        assert len(transaction_service.list_transactions(item_name="sea salt")) == 1
        assert transaction_service.list_transactions(item_name="salt") == []

    def test_rename_references_is_idempotent(self, consistency, transaction_service):
        transaction_service.create_transaction(date="2024-01-01", item_name="Salt", quantity=1)

        assert consistency.rename_references("Salt", "Sea Salt") == 1
        assert consistency.rename_references("Salt", "Sea Salt") == 0

    def test_rename_to_same_name_is_noop(self, consistency, transaction_service):
        transaction_service.create_transaction(date="2024-01-01", item_name="Salt", quantity=1)
        assert consistency.rename_references("Salt", "Salt") == 0

    def test_purge_references(self, consistency, transaction_service):
        transaction_service.create_transaction(date="2024-01-01", item_name="Sugar", quantity=1)
        transaction_service.create_transaction(date="2024-01-01", item_name="Brown Sugar", quantity=1)

        assert consistency.purge_references("Sugar") == 1
        assert consistency.purge_references("Sugar") == 0
        assert [txn.item_name for txn in transaction_service.list_transactions()] == ["Brown Sugar"]


class TestCascadeFailure:
    """A failed ledger step leaves the catalog change committed."""

    def test_rename_cascade_failure(self, item_service, transaction_service, temp_db, monkeypatch, caplog):
        salt = item_service.create_item(name="Salt", unit="kg", alert_qty=1).item
        transaction_service.create_transaction(date="2024-01-01", item_name="Salt", quantity=5)
        monkeypatch.setattr(temp_db, "rename_item_references", failing)

        with caplog.at_level(logging.ERROR, logger="stockledger.domain.consistency"):
            with pytest.raises(CascadeFailure) as excinfo:
                item_service.update_item(salt.id, name="Sea Salt")

        assert excinfo.value.item.name == "Sea Salt"
        assert isinstance(excinfo.value.cause, OperationalError)
        assert "ledger relink" in str(excinfo.value)
        assert "Rename cascade failed" in caplog.text
        # Catalog change is not rolled back, transactions are orphaned
        assert item_service.get_item(salt.id).name == "Sea Salt"
        assert item_service.get_item_stock(salt.id).quantity == 0

        monkeypatch.undo()
        assert item_service.consistency.rename_references("Salt", "Sea Salt") == 1
        assert item_service.get_item_stock(salt.id).quantity == 5

    def test_delete_cascade_failure(self, item_service, transaction_service, temp_db, monkeypatch):
        sugar = item_service.create_item(name="Sugar", unit="kg", alert_qty=1).item
        transaction_service.create_transaction(date="2024-01-01", item_name="Sugar", quantity=5)
        monkeypatch.setattr(temp_db, "delete_item_references", failing)

        with pytest.raises(CascadeFailure) as excinfo:
            item_service.delete_item(sugar.id)

        assert excinfo.value.item.id == sugar.id
        assert item_service.get_item(sugar.id) is None
        assert len(transaction_service.list_transactions(item_name="Sugar")) == 1

        monkeypatch.undo()
        assert item_service.consistency.purge_references("Sugar") == 1
        assert transaction_service.list_transactions() == []


def break_bulk_statements(monkeypatch, session):
    """Make bulk UPDATE/DELETE on ``session`` fail after its transaction began."""
    real_execute = session.execute

    def execute(statement, *args, **kwargs):
        if isinstance(statement, (Update, Delete)):
            session.connection()
            raise OperationalError(str(statement), {}, Exception("database is locked"))
        return real_execute(statement, *args, **kwargs)

    monkeypatch.setattr(session, "execute", execute)


class TestStatementFailure:
    """A failed ledger statement leaves the handle usable for the retry."""

    def test_failed_rename_is_rolled_back(self, item_service, transaction_service, temp_db, monkeypatch):
        salt = item_service.create_item(name="Salt", unit="kg", alert_qty=1).item
        transaction_service.create_transaction(date="2024-01-01", item_name="Salt", quantity=5)
        session = temp_db._get_session()
        break_bulk_statements(monkeypatch, session)

        with pytest.raises(CascadeFailure):
            item_service.update_item(salt.id, name="Sea Salt")

        assert not session.in_transaction()
        monkeypatch.undo()
        assert item_service.consistency.rename_references("Salt", "Sea Salt") == 1
        assert item_service.get_item_stock(salt.id).quantity == 5

    def test_failed_purge_is_rolled_back(self, consistency, transaction_service, temp_db, monkeypatch):
        transaction_service.create_transaction(date="2024-01-01", item_name="Sugar", quantity=5)
        session = temp_db._get_session()
        break_bulk_statements(monkeypatch, session)

        with pytest.raises(OperationalError):
            consistency.purge_references("Sugar")

        assert not session.in_transaction()
        monkeypatch.undo()
        assert consistency.purge_references("Sugar") == 1
        assert transaction_service.list_transactions() == []
