"""Shared pytest fixtures for fleetledger tests."""

import tempfile
import os
from datetime import date
import pytest

from fleetledger.database.factories import create_sqlite_database
from fleetledger.domain.dashboard import DashboardService
from fleetledger.domain.document import DocumentService
from fleetledger.domain.employee import EmployeeService
from fleetledger.domain.profitability import ProfitabilityService
from fleetledger.domain.transaction import TransactionService
from fleetledger.domain.validation import TransactionValidator
from fleetledger.domain.vehicle import VehicleService

# Fixed "today" for tests that need exact dates
TODAY = date(2025, 6, 15)


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
def today():
    """The fixed current date used by the validator fixture."""
    return TODAY


@pytest.fixture
def validator(temp_db, today):
    """Create a TransactionValidator whose clock is pinned to TODAY."""
    return TransactionValidator(temp_db, today=lambda: today)


@pytest.fixture
def vehicle_service(temp_db):
    """Create a VehicleService with a temporary database."""
    return VehicleService(temp_db)


@pytest.fixture
def employee_service(temp_db):
    """Create an EmployeeService with a temporary database."""
    return EmployeeService(temp_db)


@pytest.fixture
def document_service(temp_db):
    """Create a DocumentService with a temporary database."""
    return DocumentService(temp_db)


@pytest.fixture
def transaction_service(temp_db, validator):
    """Create a TransactionService with a temporary database and pinned clock."""
    return TransactionService(temp_db, validator=validator)


@pytest.fixture
def profitability_service(temp_db):
    """Create a ProfitabilityService with a temporary database."""
    return ProfitabilityService(temp_db)


@pytest.fixture
def dashboard_service(temp_db):
    """Create a DashboardService with a temporary database."""
    return DashboardService(temp_db)


@pytest.fixture
def sample_vehicle(vehicle_service):
    """Create a sample vehicle for testing."""
    vehicle_id = vehicle_service.create_vehicle(
        vehicle_number="DXB-1042", make="Toyota", model="Hiace", vehicle_id="V1"
    )
    return vehicle_service.get_vehicle(vehicle_id)


@pytest.fixture
def second_vehicle(vehicle_service):
    """Create a second vehicle for fleet tests."""
    vehicle_id = vehicle_service.create_vehicle(
        vehicle_number="DXB-2001", make="Nissan", model="Urvan", vehicle_id="V2"
    )
    return vehicle_service.get_vehicle(vehicle_id)


@pytest.fixture
def sample_employee(employee_service):
    """Create a sample employee for testing."""
    employee_id = employee_service.create_employee(name="Sara Haddad", employee_id="E1")
    return employee_id


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def make_transaction():
    """Factory for in-memory VehicleTransaction entities (no database)."""
    from datetime import datetime
    from decimal import Decimal

    from fleetledger.domain.entities import TransactionType, VehicleTransaction

    stamp = datetime(2025, 1, 1, 12, 0)

    def _make(
        txn_id,
        transaction_type,
        amount,
        txn_date,
        month=None,
        vehicle_id="V1",
        category=None,
        invoice_id=None,
    ):
        return VehicleTransaction(
            id=txn_id,
            vehicle_id=vehicle_id,
            transaction_type=TransactionType(transaction_type),
            amount=Decimal(amount),
            date=txn_date,
            month=month or txn_date.strftime("%Y-%m"),
            category=category,
            description=None,
            employee_id=None,
            invoice_id=invoice_id,
            purchase_order_id=None,
            quote_id=None,
            created_at=stamp,
            updated_at=stamp,
        )

    return _make
