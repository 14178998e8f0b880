"""Group vehicle transactions into calendar-month summaries."""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable

from fleetledger.domain.entities import MonthlySummary, TransactionType, VehicleTransaction, ZERO
from fleetledger.utils.months import month_key, normalize_month


def bucket_key(txn: VehicleTransaction) -> str:
    """Month bucket of a transaction, falling back to its date for unreadable stored keys."""
    try:
        return normalize_month(txn.month)
    except ValueError:
        return month_key(txn.date)


def aggregate(transactions: Iterable[VehicleTransaction]) -> dict[str, MonthlySummary]:
    """Sum revenue and expenses per month.

    The result is sparse: months without transactions are absent. Keys are
    normalized ``YYYY-MM`` and the mapping is ordered oldest first. Sums are
    exact Decimal arithmetic.
    """
    buckets: dict[str, dict[str, Decimal | int]] = defaultdict(
        lambda: {"revenue": ZERO, "expenses": ZERO, "count": 0}
    )

    for txn in transactions:
        bucket = buckets[bucket_key(txn)]
        if txn.transaction_type == TransactionType.REVENUE:
            bucket["revenue"] += txn.amount
        else:
            bucket["expenses"] += txn.amount
        bucket["count"] += 1

    return {
        month: MonthlySummary(
            month=month,
            revenue=data["revenue"],
            expenses=data["expenses"],
            profit=data["revenue"] - data["expenses"],
            transaction_count=data["count"],
        )
        for month, data in sorted(buckets.items())
    }


def empty_month(month: str) -> MonthlySummary:
    """Zero-valued summary used to fill months without activity."""
    return MonthlySummary(month=normalize_month(month))


def combine(month: str, summaries: Iterable[MonthlySummary]) -> MonthlySummary:
    """Add several summaries of the same month together (e.g. across vehicles)."""
    revenue = ZERO
    expenses = ZERO
    count = 0
    for summary in summaries:
        revenue += summary.revenue
        expenses += summary.expenses
        count += summary.transaction_count
    return MonthlySummary(
        month=month,
        revenue=revenue,
        expenses=expenses,
        profit=revenue - expenses,
        transaction_count=count,
    )
