"""Tests for vehicle, employee and document commands."""

from datetime import date
from decimal import Decimal

from fleetledger.cli.main import cli


def _invoke(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


def test_vehicle_add(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "vehicle", "add", "DXB-1042", "--make", "Toyota", "--model", "Hiace")

    assert result.exit_code == 0
    assert "Created vehicle 'DXB-1042'" in result.output
    assert "ID:" in result.output


def test_vehicle_add_with_id(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "vehicle", "add", "DXB-2001", "--id", "van-2001")

    assert result.exit_code == 0
    assert "(ID: van-2001)" in result.output
    temp_db.disconnect()
    assert temp_db.vehicle_exists("van-2001")


def test_vehicle_add_duplicate(cli_runner, temp_db, sample_vehicle):
    result = _invoke(cli_runner, temp_db, "vehicle", "add", "DXB-1042")

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_vehicle_list_empty(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "vehicle", "list")

    assert result.exit_code == 0
    assert "No vehicles found" in result.output


def test_vehicle_list_with_data(cli_runner, temp_db, sample_vehicle, second_vehicle):
    result = _invoke(cli_runner, temp_db, "vehicle", "list")

    assert result.exit_code == 0
    assert "DXB-1042" in result.output
    assert "Toyota Hiace" in result.output
    assert result.output.index("DXB-1042") < result.output.index("DXB-2001")


def test_vehicle_delete_cascades(cli_runner, temp_db, sample_vehicle, transaction_service):
    transaction_service.create_transaction(
        vehicle_id=sample_vehicle.id,
        transaction_type="revenue",
        amount=Decimal("100"),
        date=date(2025, 6, 1),
    )

    result = _invoke(cli_runner, temp_db, "vehicle", "delete", "DXB-1042", "--yes")

    assert result.exit_code == 0
    assert "Deleted vehicle 'DXB-1042' and 1 transaction" in result.output
    temp_db.disconnect()
    assert not temp_db.vehicle_exists(sample_vehicle.id)
    assert temp_db.list_transactions() == []


def test_vehicle_delete_asks_for_confirmation(cli_runner, temp_db, sample_vehicle):
    result = _invoke(cli_runner, temp_db, "vehicle", "delete", "V1", input="n\n")

    assert result.exit_code == 0
    assert "Deletion cancelled" in result.output
    temp_db.disconnect()
    assert temp_db.vehicle_exists("V1")


def test_vehicle_delete_unknown(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "vehicle", "delete", "ghost", "--yes")

    assert result.exit_code == 1
    assert "Vehicle 'ghost' not found" in result.output


def test_employee_add_and_list(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "employee", "add", "Sara Haddad", "--id", "E7")
    assert result.exit_code == 0
    assert "Created employee 'Sara Haddad' (ID: E7)" in result.output

    result = _invoke(cli_runner, temp_db, "employee", "list")
    assert result.exit_code == 0
    assert "Sara Haddad" in result.output


def test_employee_list_empty(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "employee", "list")
    assert "No employees found" in result.output


def test_employee_blank_name(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "employee", "add", "  ")
    assert result.exit_code == 1
    assert "cannot be empty" in result.output


def test_documents(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "document", "invoice", "INV-1", "--customer", "Acme", "--id", "I1")
    assert result.exit_code == 0
    assert "Created invoice 'INV-1' (ID: I1)" in result.output

    result = _invoke(cli_runner, temp_db, "document", "purchase-order", "PO-1", "--id", "P1")
    assert result.exit_code == 0

    result = _invoke(cli_runner, temp_db, "document", "quote", "Q-1", "--id", "Q1")
    assert result.exit_code == 0

    temp_db.disconnect()
    assert temp_db.get_invoice("I1").customer_name == "Acme"
    assert temp_db.purchase_order_exists("P1")
    assert temp_db.quote_exists("Q1")


def test_duplicate_document_number_is_storage_error(cli_runner, temp_db):
    _invoke(cli_runner, temp_db, "document", "quote", "Q-1")
    result = _invoke(cli_runner, temp_db, "document", "quote", "Q-1")

    assert result.exit_code == 2
    assert "Error: Failed to create quote" in result.output


def test_db_path_from_environment(cli_runner, temp_db, monkeypatch):
    monkeypatch.setenv("FLEETLEDGER_DB_PATH", temp_db.database_path)

    result = cli_runner.invoke(cli, ["vehicle", "add", "ENV-1"])

    assert result.exit_code == 0
    temp_db.disconnect()
    assert temp_db.get_vehicle_by_number("ENV-1") is not None


def test_help_does_not_need_database(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "vehicle" in result.output
    assert "dashboard" in result.output
