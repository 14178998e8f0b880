"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic from the schema.
"""

from fleetledger.domain import entities as domain
from fleetledger.database.models import (
    Vehicle as ORMVehicle,
    Employee as ORMEmployee,
    Invoice as ORMInvoice,
    PurchaseOrder as ORMPurchaseOrder,
    Quote as ORMQuote,
    VehicleTransaction as ORMVehicleTransaction,
)


def vehicle_to_domain(orm_vehicle: ORMVehicle) -> domain.Vehicle:
    """Convert SQLAlchemy Vehicle model to domain Vehicle entity."""
    return domain.Vehicle(
        id=orm_vehicle.id,
        vehicle_number=orm_vehicle.vehicle_number,
        make=orm_vehicle.make,
        model=orm_vehicle.model,
        status=orm_vehicle.status,
        created_at=orm_vehicle.created_at,
    )


def employee_to_domain(orm_employee: ORMEmployee) -> domain.Employee:
    """Convert SQLAlchemy Employee model to domain Employee entity."""
    return domain.Employee(
        id=orm_employee.id,
        name=orm_employee.name,
        created_at=orm_employee.created_at,
    )


def invoice_to_domain(orm_invoice: ORMInvoice) -> domain.Invoice:
    return domain.Invoice(
        id=orm_invoice.id,
        number=orm_invoice.number,
        customer_name=orm_invoice.customer_name,
        created_at=orm_invoice.created_at,
    )


def purchase_order_to_domain(orm_order: ORMPurchaseOrder) -> domain.PurchaseOrder:
    return domain.PurchaseOrder(
        id=orm_order.id, number=orm_order.number, created_at=orm_order.created_at
    )


def quote_to_domain(orm_quote: ORMQuote) -> domain.Quote:
    return domain.Quote(
        id=orm_quote.id, number=orm_quote.number, created_at=orm_quote.created_at
    )


def transaction_to_domain(orm_transaction: ORMVehicleTransaction) -> domain.VehicleTransaction:
    """Convert SQLAlchemy VehicleTransaction model to domain entity."""
    return domain.VehicleTransaction(
        id=orm_transaction.id,
        vehicle_id=orm_transaction.vehicle_id,
        transaction_type=domain.TransactionType(orm_transaction.transaction_type),
        amount=orm_transaction.amount,
        date=orm_transaction.date,
        month=orm_transaction.month,
        category=orm_transaction.category,
        description=orm_transaction.description,
        employee_id=orm_transaction.employee_id,
        invoice_id=orm_transaction.invoice_id,
        purchase_order_id=orm_transaction.purchase_order_id,
        quote_id=orm_transaction.quote_id,
        created_at=orm_transaction.created_at,
        updated_at=orm_transaction.updated_at,
    )
