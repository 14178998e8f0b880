"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional
from datetime import date
from decimal import Decimal

from fleetledger.domain.entities import (
    Vehicle,
    Employee,
    Invoice,
    PurchaseOrder,
    Quote,
    VehicleTransaction,
)


class Database(ABC):
    """Abstract database interface for fleetledger.

    The ``*_exists`` methods are the reference resolver the transaction
    validator relies on. Transaction methods are plain storage: validation
    happens in the domain services before any of them is called.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Reference lookups
    @abstractmethod
    def vehicle_exists(self, vehicle_id: str) -> bool:
        """Check if a vehicle with the given ID exists."""
        pass

    @abstractmethod
    def employee_exists(self, employee_id: str) -> bool:
        """Check if an employee with the given ID exists."""
        pass

    @abstractmethod
    def invoice_exists(self, invoice_id: str) -> bool:
        """Check if an invoice with the given ID exists."""
        pass

    @abstractmethod
    def purchase_order_exists(self, purchase_order_id: str) -> bool:
        """Check if a purchase order with the given ID exists."""
        pass

    @abstractmethod
    def quote_exists(self, quote_id: str) -> bool:
        """Check if a quote with the given ID exists."""
        pass

    # Vehicle operations
    @abstractmethod
    def create_vehicle(
        self,
        vehicle_number: str,
        make: Optional[str] = None,
        model: Optional[str] = None,
        vehicle_id: Optional[str] = None,
    ) -> str:
        """Create a vehicle. Returns vehicle ID."""
        pass

    @abstractmethod
    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        """Get vehicle by ID."""
        pass

    @abstractmethod
    def get_vehicle_by_number(self, vehicle_number: str) -> Optional[Vehicle]:
        """Get vehicle by its vehicle number."""
        pass

    @abstractmethod
    def list_vehicles(self) -> list[Vehicle]:
        """List all vehicles ordered by vehicle number."""
        pass

    @abstractmethod
    def delete_vehicle(self, vehicle_id: str) -> int:
        """Delete a vehicle and all of its transactions in one commit.

        Returns the number of transactions removed with it.
        """
        pass

    # Employee and document references
    @abstractmethod
    def create_employee(self, name: str, employee_id: Optional[str] = None) -> str:
        """Create an employee. Returns employee ID."""
        pass

    @abstractmethod
    def list_employees(self) -> list[Employee]:
        """List all employees ordered by name."""
        pass

    @abstractmethod
    def create_invoice(
        self, number: str, customer_name: Optional[str] = None, invoice_id: Optional[str] = None
    ) -> str:
        """Create an invoice reference. Returns invoice ID."""
        pass

    @abstractmethod
    def get_invoice(self, invoice_id: str) -> Optional[Invoice]:
        """Get invoice by ID."""
        pass

    @abstractmethod
    def create_purchase_order(self, number: str, purchase_order_id: Optional[str] = None) -> str:
        """Create a purchase order reference. Returns purchase order ID."""
        pass

    @abstractmethod
    def get_purchase_order(self, purchase_order_id: str) -> Optional[PurchaseOrder]:
        """Get purchase order by ID."""
        pass

    @abstractmethod
    def create_quote(self, number: str, quote_id: Optional[str] = None) -> str:
        """Create a quote reference. Returns quote ID."""
        pass

    @abstractmethod
    def get_quote(self, quote_id: str) -> Optional[Quote]:
        """Get quote by ID."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        vehicle_id: str,
        transaction_type: str,
        amount: Decimal,
        date: date,
        month: str,
        category: Optional[str] = None,
        description: Optional[str] = None,
        employee_id: Optional[str] = None,
        invoice_id: Optional[str] = None,
        purchase_order_id: Optional[str] = None,
        quote_id: Optional[str] = None,
    ) -> str:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[VehicleTransaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(self, transaction_id: str, changes: dict[str, Any]) -> bool:
        """Apply already-validated field changes.

        Returns False when the transaction does not exist.
        """
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction. Returns False when nothing was deleted."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        vehicle_id: Optional[str] = None,
        month: Optional[str] = None,
    ) -> list[VehicleTransaction]:
        """List transactions, newest first.

        Args:
            vehicle_id: Optional vehicle filter
            month: Optional ``YYYY-MM`` bucket filter
        """
        pass

    @abstractmethod
    def normalize_month_keys(self) -> int:
        """Rewrite stored month keys to match their dates. Returns rows changed."""
        pass
