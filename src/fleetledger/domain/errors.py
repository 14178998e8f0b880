"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling. ``status_code`` is the
    HTTP-style class a service boundary should report.
    """

    status_code = 400


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class ReferentialError(ValidationError):
    """A referenced vehicle, employee or document does not exist."""


class RangeError(ValidationError):
    """Amount not positive, or date outside the permitted window."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""

    status_code = 404


class StorageError(RuntimeError):
    """Unexpected failure from the underlying store.

    Not a client-input problem, so it does not derive from DomainError.
    """

    status_code = 500


def reference_missing(kind: str, reference_id: str) -> str:
    """Return message for a foreign reference that does not resolve."""
    return f'{kind} with ID "{reference_id}" does not exist'


def vehicle_not_found(vehicle_id: str) -> str:
    """Return message for missing vehicle."""
    return f"Vehicle '{vehicle_id}' not found"


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction '{transaction_id}' not found"


def duplicate_vehicle_number(vehicle_number: str) -> str:
    """Return message for a vehicle number already in use."""
    return f"Vehicle with number '{vehicle_number}' already exists"


AMOUNT_NOT_POSITIVE = "Transaction amount must be greater than 0"
AMOUNT_TOO_LARGE = "Transaction amount cannot exceed 9,999,999,999.99"
DATE_IN_FUTURE = "Transaction date cannot be in the future"
DATE_TOO_OLD = "Transaction date cannot be more than 12 months in the past"
INVALID_TRANSACTION_TYPE = "Transaction type must be 'revenue' or 'expense'"
