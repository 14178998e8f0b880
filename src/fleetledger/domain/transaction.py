"""Transaction ledger domain service."""

from typing import Any, Optional
from datetime import date
from decimal import Decimal

from fleetledger.database.base import Database
from fleetledger.domain import errors
from fleetledger.domain.entities import (
    TransactionInput,
    TransactionType,
    VehicleTransaction,
)
from fleetledger.domain.errors import NotFoundError, ValidationError
from fleetledger.domain.validation import TransactionValidator
from fleetledger.logging_setup import get_logger
from fleetledger.utils.months import normalize_month

logger = get_logger(__name__)


class TransactionService:
    """Service for recording and querying vehicle transactions.

    All writes are validated by a TransactionValidator before they reach
    the database.
    """

    def __init__(self, db: Database, validator: Optional[TransactionValidator] = None):
        """Initialize transaction service.

        Args:
            db: Database instance
            validator: Optional validator (e.g. one with a fixed clock)
        """
        self.db = db
        self.validator = validator or TransactionValidator(db)

    def create_transaction(
        self,
        vehicle_id: str,
        transaction_type: TransactionType | str,
        amount: Decimal,
        date: date,
        category: Optional[str] = None,
        description: Optional[str] = None,
        employee_id: Optional[str] = None,
        invoice_id: Optional[str] = None,
        purchase_order_id: Optional[str] = None,
        quote_id: Optional[str] = None,
    ) -> VehicleTransaction:
        """Validate and record a transaction.

        Args:
            vehicle_id: Vehicle the event belongs to
            transaction_type: ``revenue`` or ``expense``
            amount: Positive amount
            date: Date the event occurred
            category: Optional label such as "Fuel"
            description: Optional free text
            employee_id: Optional employee reference
            invoice_id: Optional invoice reference
            purchase_order_id: Optional purchase order reference
            quote_id: Optional quote reference

        Returns:
            The stored transaction, with ID, month and timestamps

        Raises:
            ValidationError: If any admission check fails (nothing is written)
            StorageError: If the database fails unexpectedly
        """
        candidate = TransactionInput(
            vehicle_id=vehicle_id,
            transaction_type=transaction_type,
            amount=amount,
            date=date,
            category=category,
            description=description,
            employee_id=employee_id,
            invoice_id=invoice_id,
            purchase_order_id=purchase_order_id,
            quote_id=quote_id,
        )
        try:
            valid = self.validator.validate_create(candidate)
        except ValidationError as exc:
            logger.info("Rejected transaction for vehicle %s: %s", vehicle_id, exc)
            raise

        transaction_id = self.db.create_transaction(
            vehicle_id=valid.vehicle_id,
            transaction_type=valid.transaction_type.value,
            amount=valid.amount,
            date=valid.date,
            month=valid.month,
            category=valid.category,
            description=valid.description,
            employee_id=valid.employee_id,
            invoice_id=valid.invoice_id,
            purchase_order_id=valid.purchase_order_id,
            quote_id=valid.quote_id,
        )
        logger.info(
            "Recorded %s of %s for vehicle %s in %s (transaction %s)",
            valid.transaction_type.value,
            valid.amount,
            valid.vehicle_id,
            valid.month,
            transaction_id,
        )
        return self.require_transaction(transaction_id)

    def get_transaction(self, transaction_id: str) -> Optional[VehicleTransaction]:
        """Get transaction by ID.

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: str) -> VehicleTransaction:
        """Get transaction by ID or raise NotFoundError."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(errors.transaction_not_found(transaction_id))
        return txn

    def list_transactions(
        self,
        vehicle_id: Optional[str] = None,
        month: Optional[str] = None,
    ) -> list[VehicleTransaction]:
        """List transactions, narrowing by vehicle and then by month.

        Both given returns one vehicle's bucket, vehicle only returns all of
        that vehicle's months, neither returns the whole ledger.

        Raises:
            ValidationError: If ``month`` is not a recognizable month
        """
        if month is not None:
            try:
                month = normalize_month(month)
            except ValueError as exc:
                raise ValidationError(str(exc)) from exc
        return self.db.list_transactions(vehicle_id=vehicle_id, month=month)

    def get_by_vehicle(self, vehicle_id: str) -> list[VehicleTransaction]:
        return self.list_transactions(vehicle_id=vehicle_id)

    def get_by_vehicle_and_month(self, vehicle_id: str, month: str) -> list[VehicleTransaction]:
        return self.list_transactions(vehicle_id=vehicle_id, month=month)

    def update_transaction(self, transaction_id: str, **changes: Any) -> VehicleTransaction:
        """Update the supplied fields of a transaction.

        Fields not passed keep their values; pass ``None`` explicitly to
        clear an optional field such as ``employee_id``.

        Returns:
            The updated transaction

        Raises:
            NotFoundError: If the transaction doesn't exist
            ValidationError: If a supplied field fails validation
        """
        existing = self.require_transaction(transaction_id)
        try:
            normalized = self.validator.validate_update(existing, changes)
        except ValidationError as exc:
            logger.info("Rejected update of transaction %s: %s", transaction_id, exc)
            raise

        if normalized:
            if not self.db.update_transaction(transaction_id, normalized):
                # Removed between the lookup and the write
                raise NotFoundError(errors.transaction_not_found(transaction_id))
            logger.info(
                "Updated transaction %s fields: %s", transaction_id, ", ".join(sorted(normalized))
            )
        return self.require_transaction(transaction_id)

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction. Deleting a missing ID is a no-op."""
        if self.db.delete_transaction(transaction_id):
            logger.info("Deleted transaction %s", transaction_id)
        else:
            logger.debug("Delete of unknown transaction %s ignored", transaction_id)
