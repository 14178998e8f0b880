"""Per-vehicle profitability views: current month, all-time and rolling window."""

from datetime import date
from typing import Optional, Sequence

from fleetledger.database.base import Database
from fleetledger.domain import errors
from fleetledger.domain.entities import (
    ProfitabilitySummary,
    TransactionType,
    VehicleTransaction,
    ZERO,
)
from fleetledger.domain.errors import NotFoundError
from fleetledger.domain.monthly import aggregate, empty_month
from fleetledger.logging_setup import get_logger
from fleetledger.utils.months import month_key, normalize_month, rolling_months, shift_month

logger = get_logger(__name__)

WINDOW_MONTHS = 12


def summarize(
    vehicle_id: str,
    transactions: Sequence[VehicleTransaction],
    as_of: date,
) -> ProfitabilitySummary:
    """Build the profitability summary of one vehicle.

    Args:
        vehicle_id: Vehicle the transactions belong to
        transactions: All of the vehicle's transactions (any dates)
        as_of: Reference date; its month is the "current" month

    Returns:
        ProfitabilitySummary whose ``months`` always holds the 12 calendar
        months ending at ``as_of``'s month, oldest first, zero-filled where
        there was no activity. All-time figures cover every transaction,
        not just the window.
    """
    monthly = aggregate(transactions)

    current_key = month_key(as_of)
    last_key = shift_month(current_key, -1)

    all_time_revenue = ZERO
    all_time_expenses = ZERO
    for txn in transactions:
        if txn.transaction_type == TransactionType.REVENUE:
            all_time_revenue += txn.amount
        else:
            all_time_expenses += txn.amount

    months = tuple(
        monthly.get(normalize_month(key)) or empty_month(key)
        for key in rolling_months(as_of, WINDOW_MONTHS)
    )

    return ProfitabilitySummary(
        vehicle_id=vehicle_id,
        current_month=monthly.get(current_key),
        last_month=monthly.get(last_key),
        all_time_revenue=all_time_revenue,
        all_time_expenses=all_time_expenses,
        all_time_profit=all_time_revenue - all_time_expenses,
        months=months,
        transaction_count=len(transactions),
    )


class ProfitabilityService:
    """Service for per-vehicle profitability summaries."""

    def __init__(self, db: Database):
        """Initialize profitability service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_profitability(
        self, vehicle_id: str, as_of: Optional[date] = None
    ) -> ProfitabilitySummary:
        """Summarize a vehicle's ledger as of a date (default today).

        Raises:
            NotFoundError: If the vehicle doesn't exist
        """
        if not self.db.vehicle_exists(vehicle_id):
            raise NotFoundError(errors.vehicle_not_found(vehicle_id))

        as_of = as_of or date.today()
        transactions = self.db.list_transactions(vehicle_id=vehicle_id)
        logger.debug(
            "Summarizing %d transactions for vehicle %s as of %s",
            len(transactions),
            vehicle_id,
            as_of,
        )
        return summarize(vehicle_id, transactions, as_of)
