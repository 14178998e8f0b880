"""Admission checks for vehicle transactions.

Every create and update passes through ``TransactionValidator`` before the
ledger touches storage, so an invalid record is never persisted. Checks run in
a fixed order and stop at the first failure:

1. the vehicle exists
2. the amount is greater than zero and fits the stored precision
3. the date is not in the future
4. the date is not more than 12 calendar months in the past
5. the employee exists (when given)
6. invoice, purchase order and quote exist (when given)
7. the transaction type is ``revenue`` or ``expense``
"""

import dataclasses
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Callable, Mapping, Optional

from dateutil.relativedelta import relativedelta

from fleetledger.database.base import Database
from fleetledger.domain import errors
from fleetledger.domain.entities import TransactionInput, TransactionType, VehicleTransaction
from fleetledger.domain.errors import RangeError, ReferentialError, ValidationError
from fleetledger.utils.months import month_key

STALENESS_MONTHS = 12
CENT = Decimal("0.01")
# Largest value the Numeric(12, 2) amount column holds exactly
MAX_AMOUNT = Decimal("9999999999.99")

UPDATABLE_FIELDS = frozenset(
    {
        "vehicle_id",
        "transaction_type",
        "category",
        "amount",
        "date",
        "description",
        "employee_id",
        "invoice_id",
        "purchase_order_id",
        "quote_id",
    }
)

# Optional references checked after the employee, in this order.
_DOCUMENT_REFERENCES = (
    ("invoice_id", "Invoice", "invoice_exists"),
    ("purchase_order_id", "Purchase order", "purchase_order_exists"),
    ("quote_id", "Quote", "quote_exists"),
)


class TransactionValidator:
    """Validate and normalize transactions against the reference stores."""

    def __init__(self, db: Database, today: Optional[Callable[[], date]] = None):
        """Initialize the validator.

        Args:
            db: Database used for reference lookups
            today: Callable returning the current date; defaults to ``date.today``
        """
        self.db = db
        self._today = today or date.today

    def today(self) -> date:
        return self._today()

    def validate_create(self, candidate: TransactionInput) -> TransactionInput:
        """Validate a new transaction.

        Returns:
            The candidate with ``amount`` as Decimal, ``transaction_type`` as
            TransactionType and ``month`` derived from ``date``

        Raises:
            ReferentialError: If a referenced record does not exist
            RangeError: If the amount or date is out of range
            ValidationError: If the transaction type is unknown
        """
        today = self.today()
        self._check_vehicle(candidate.vehicle_id)
        amount = self._check_amount(candidate.amount)
        txn_date = self._check_date(candidate.date, today)
        references = {"employee_id": self._check_employee(candidate.employee_id)}
        for field_name, label, lookup in _DOCUMENT_REFERENCES:
            references[field_name] = self._check_reference(
                getattr(candidate, field_name), label, lookup
            )
        transaction_type = self._check_type(candidate.transaction_type)

        return dataclasses.replace(
            candidate,
            transaction_type=transaction_type,
            amount=amount,
            date=txn_date,
            category=_blank_to_none(candidate.category),
            description=_blank_to_none(candidate.description),
            month=month_key(txn_date),
            **references,
        )

    def validate_update(
        self, existing: VehicleTransaction, changes: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Validate a partial update of an existing transaction.

        Only supplied fields are checked; omitted fields keep their stored
        values. A supplied ``date`` is held to the same window as on create,
        and ``month`` is re-derived only when the date actually changes.

        Returns:
            Normalized changes ready for storage (may include ``month``)

        Raises:
            ValidationError: For unknown fields, or any check failing as on create
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Cannot update transaction fields: {', '.join(sorted(unknown))}"
            )

        today = self.today()
        normalized: dict[str, Any] = {}

        if "vehicle_id" in changes:
            self._check_vehicle(changes["vehicle_id"])
            normalized["vehicle_id"] = changes["vehicle_id"]
        if "amount" in changes:
            normalized["amount"] = self._check_amount(changes["amount"])
        if "date" in changes:
            new_date = self._check_date(changes["date"], today)
            normalized["date"] = new_date
            if new_date != existing.date:
                normalized["month"] = month_key(new_date)
        if "employee_id" in changes:
            normalized["employee_id"] = self._check_employee(changes["employee_id"])
        for field_name, label, lookup in _DOCUMENT_REFERENCES:
            if field_name in changes:
                normalized[field_name] = self._check_reference(changes[field_name], label, lookup)
        if "transaction_type" in changes:
            normalized["transaction_type"] = self._check_type(changes["transaction_type"])
        for field_name in ("category", "description"):
            if field_name in changes:
                normalized[field_name] = _blank_to_none(changes[field_name])

        return normalized

    def _check_vehicle(self, vehicle_id: Optional[str]) -> None:
        if not vehicle_id or not self.db.vehicle_exists(vehicle_id):
            raise ReferentialError(errors.reference_missing("Vehicle", vehicle_id))

    def _check_amount(self, amount: Any) -> Decimal:
        try:
            value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        except (InvalidOperation, ValueError, TypeError):
            raise RangeError(errors.AMOUNT_NOT_POSITIVE)
        if not value.is_finite():
            raise RangeError(errors.AMOUNT_NOT_POSITIVE)
        # Stored with two decimal places; check what will actually be kept
        value = value.quantize(CENT, rounding=ROUND_HALF_UP)
        if value <= 0:
            raise RangeError(errors.AMOUNT_NOT_POSITIVE)
        if value > MAX_AMOUNT:
            raise RangeError(errors.AMOUNT_TOO_LARGE)
        return value

    def _check_date(self, txn_date: Any, today: date) -> date:
        if isinstance(txn_date, datetime):
            txn_date = txn_date.date()
        if not isinstance(txn_date, date):
            raise ValidationError(f"Transaction date must be a date, got {txn_date!r}")
        if txn_date > today:
            raise RangeError(errors.DATE_IN_FUTURE)
        if txn_date < today - relativedelta(months=STALENESS_MONTHS):
            raise RangeError(errors.DATE_TOO_OLD)
        return txn_date

    def _check_employee(self, employee_id: Optional[str]) -> Optional[str]:
        employee_id = _blank_to_none(employee_id)
        if employee_id and not self.db.employee_exists(employee_id):
            raise ReferentialError(errors.reference_missing("Employee", employee_id))
        return employee_id

    def _check_reference(self, reference_id: Optional[str], label: str, lookup: str) -> Optional[str]:
        reference_id = _blank_to_none(reference_id)
        if reference_id and not getattr(self.db, lookup)(reference_id):
            raise ReferentialError(errors.reference_missing(label, reference_id))
        return reference_id

    def _check_type(self, transaction_type: Any) -> TransactionType:
        try:
            return TransactionType(transaction_type)
        except ValueError:
            raise ValidationError(errors.INVALID_TRANSACTION_TYPE)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None
