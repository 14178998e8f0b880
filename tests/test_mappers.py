"""Tests for database mappers."""

from datetime import datetime, date, UTC
from decimal import Decimal

from fleetledger.database.models import (
    Vehicle as ORMVehicle,
    Invoice as ORMInvoice,
    VehicleTransaction as ORMVehicleTransaction,
)
from fleetledger.database.mappers import (
    vehicle_to_domain,
    invoice_to_domain,
    transaction_to_domain,
)
from fleetledger.domain.entities import TransactionType, Vehicle, VehicleTransaction


class TestVehicleMapper:
    """Tests for Vehicle mapper."""

    def test_vehicle_to_domain(self):
        orm_vehicle = ORMVehicle(
            id="V1",
            vehicle_number="DXB-1042",
            make="Toyota",
            model=None,
            status="active",
            created_at=datetime.now(UTC),
        )
        vehicle = vehicle_to_domain(orm_vehicle)

        assert isinstance(vehicle, Vehicle)
        assert vehicle.vehicle_number == "DXB-1042"
        assert vehicle.model is None
        assert vehicle.created_at == orm_vehicle.created_at


def test_invoice_to_domain():
    invoice = invoice_to_domain(
        ORMInvoice(id="I1", number="INV-1", customer_name="Acme", created_at=datetime.now(UTC))
    )
    assert invoice.customer_name == "Acme"


class TestTransactionMapper:
    """Tests for VehicleTransaction mapper."""

    def test_transaction_type_becomes_enum(self):
        now = datetime.now(UTC)
        orm_txn = ORMVehicleTransaction(
            id="T1",
            vehicle_id="V1",
            transaction_type="expense",
            amount=Decimal("42.10"),
            date=date(2025, 3, 9),
            month="2025-03",
            category="Tolls",
            created_at=now,
            updated_at=now,
        )
        txn = transaction_to_domain(orm_txn)

        assert isinstance(txn, VehicleTransaction)
        assert txn.transaction_type is TransactionType.EXPENSE
        assert txn.amount == Decimal("42.10")
        assert txn.month == "2025-03"
        assert txn.invoice_id is None
