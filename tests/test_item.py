"""Tests for item commands."""

import json

from stockledger.cli.main import cli


def run(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


def test_item_create(cli_runner, temp_db):
    """Test creating an item with conversion metadata."""
    result = run(
        cli_runner, temp_db, "item", "create", "Oil", "--unit", "litre", "--alert-qty", "2",
        "--alt-unit", "can", "--factor", "5",
    )

    assert result.exit_code == 0
    assert "Created item 'Oil'" in result.output
    assert "ID:" in result.output


def test_item_create_invalid_alert_qty(cli_runner, temp_db):
    """Test creating an item with a non-numeric alert quantity fails."""
    result = run(cli_runner, temp_db, "item", "create", "Oil", "--unit", "litre", "--alert-qty", "lots")

    assert result.exit_code == 1
    assert "must be a number" in result.output
    assert temp_db.list_items() == []


def test_item_list_empty(cli_runner, temp_db):
    """Test listing items when none exist."""
    result = run(cli_runner, temp_db, "item", "list")

    assert result.exit_code == 0
    assert "No items found" in result.output


def test_item_list_shows_stock(cli_runner, temp_db, oil, rice, transaction_service):
    """Test listing items with derived stock."""
    transaction_service.create_transaction(date="2024-01-01", item_name="Oil", quantity=10)
    transaction_service.create_transaction(date="2024-01-02", item_name="Oil", quantity=4, type="OUT")

    result = run(cli_runner, temp_db, "item", "list")

    assert result.exit_code == 0
    assert "Oil" in result.output
    assert "6 litre" in result.output
    assert "30 can" in result.output
    assert "Rice" in result.output


def test_item_list_json(cli_runner, temp_db, oil, transaction_service):
    """Test JSON output of the item listing."""
    transaction_service.create_transaction(date="2024-01-01", item_name="oil", quantity=10)

    result = run(cli_runner, temp_db, "item", "list", "--json")

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload == [
        {
            "id": oil.id,
            "name": "Oil",
            "unit": "litre",
            "altUnit": "can",
            "factor": "5",
            "alertQty": 2,
            "quantity": 10,
            "altQuantity": 50,
        }
    ]


def test_item_list_low_stock(cli_runner, temp_db, oil, rice, transaction_service):
    """Test filtering items at or below their alert quantity."""
    transaction_service.create_transaction(date="2024-01-01", item_name="Oil", quantity=10)

    result = run(cli_runner, temp_db, "item", "list", "--low-stock")

    assert result.exit_code == 0
    assert "Rice" in result.output
    assert "LOW" in result.output
    assert "Oil" not in result.output


def test_item_rename_by_name(cli_runner, temp_db, item_service, transaction_service):
    """Test renaming an item relinks its transactions."""
    item_service.create_item(name="Salt", unit="kg", alert_qty=1)
    transaction_service.create_transaction(date="2024-01-01", item_name="Salt", quantity=3)

    result = run(cli_runner, temp_db, "item", "update", "salt", "--name", "Sea Salt")

    assert result.exit_code == 0
    assert "Updated item 'Sea Salt'" in result.output

    listing = run(cli_runner, temp_db, "transaction", "list", "--json")
    assert [txn["itemName"] for txn in json.loads(listing.output)] == ["Sea Salt"]


def test_item_update_not_found(cli_runner, temp_db):
    """Test updating a missing item."""
    result = run(cli_runner, temp_db, "item", "update", "999", "--unit", "g")

    assert result.exit_code == 1
    assert "Item 999 not found" in result.output


def test_item_update_unknown_name(cli_runner, temp_db):
    """Test updating an item by a name no item has."""
    result = run(cli_runner, temp_db, "item", "update", "Ghost", "--unit", "g")

    assert result.exit_code == 1
    assert "Item 'Ghost' not found" in result.output


def test_item_update_ambiguous_name(cli_runner, temp_db, item_service):
    """Test that a name shared by several items must be addressed by ID."""
    item_service.create_item(name="Salt", unit="kg", alert_qty=1)
    item_service.create_item(name="SALT", unit="kg", alert_qty=1)

    result = run(cli_runner, temp_db, "item", "update", "Salt", "--unit", "g")

    assert result.exit_code == 1
    assert "ambiguous" in result.output


def test_item_delete(cli_runner, temp_db, item_service, transaction_service):
    """Test deleting an item removes its transactions."""
    item_service.create_item(name="Sugar", unit="kg", alert_qty=1)
    transaction_service.create_transaction(date="2024-01-01", item_name="Sugar", quantity=3)

    result = run(cli_runner, temp_db, "item", "delete", "Sugar", input="y\n")

    assert result.exit_code == 0
    assert "Deleted item 'Sugar'" in result.output
    assert transaction_service.list_transactions() == []


def test_item_delete_cancelled(cli_runner, temp_db, item_service):
    """Test declining the delete confirmation."""
    item_service.create_item(name="Sugar", unit="kg", alert_qty=1)

    result = run(cli_runner, temp_db, "item", "delete", "Sugar", input="n\n")

    assert result.exit_code == 0
    assert "Deletion cancelled" in result.output
    assert len(item_service.list_items()) == 1
