"""Tests for the month-key normalization migration script."""

import importlib.util
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

MIGRATION_PATH = Path(__file__).parent.parent / "migrations" / "migrate_normalize_month_keys.py"


@pytest.fixture
def migration():
    """Load the migration script as a module."""
    module_spec = importlib.util.spec_from_file_location("migrate_normalize_month_keys", MIGRATION_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


def test_missing_schema_is_reported(migration, tmp_path):
    db_path = tmp_path / "empty.db"

    with pytest.raises(Exception, match="does not exist"):
        migration.migrate_database(str(db_path))


def test_rewrites_legacy_month_keys(migration, temp_db, capsys):
    temp_db.create_vehicle("DXB-1", vehicle_id="V1")
    legacy = temp_db.create_transaction(
        vehicle_id="V1",
        transaction_type="revenue",
        amount=Decimal("50.00"),
        date=date(2025, 2, 3),
        month="2025-2",
    )
    temp_db.disconnect()

    assert migration.migrate_database(temp_db.database_path) == 1
    assert "Rewrote month key of 1 transaction" in capsys.readouterr().out
    assert temp_db.get_transaction(legacy).month == "2025-02"

    assert migration.migrate_database(temp_db.database_path) == 0
