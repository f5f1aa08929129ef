"""Shared pytest fixtures for stockledger tests."""

import tempfile
import os
import pytest

from stockledger.database.factories import create_sqlite_database
from stockledger.domain.consistency import ConsistencyMaintainer
from stockledger.domain.item import ItemService
from stockledger.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def item_service(temp_db):
    """Create an ItemService with a temporary database."""
    return ItemService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def consistency(temp_db):
    """Create a ConsistencyMaintainer with a temporary database."""
    return ConsistencyMaintainer(temp_db)


@pytest.fixture
def oil(item_service):
    """Item with a numeric factor: 1 litre = 5 cans."""
    return item_service.create_item(
        name="Oil", unit="litre", alert_qty=2, alt_unit="can", factor="5"
    ).item


@pytest.fixture
def rice(item_service):
    """Item without an alternate unit."""
    return item_service.create_item(name="Rice", unit="kg", alert_qty=20, alt_unit="-", factor="-").item


@pytest.fixture
def tiles(item_service):
    """Item with an alternate unit but a manual factor."""
    return item_service.create_item(
        name="Tiles", unit="piece", alert_qty=0, alt_unit="box", factor="Manual"
    ).item


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
