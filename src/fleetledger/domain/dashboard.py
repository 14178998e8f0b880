"""Fleet-wide dashboard built from every vehicle's profitability summary."""

from collections import defaultdict
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Iterable, Mapping, Optional, Sequence

from fleetledger.database.base import Database
from fleetledger.domain import errors
from fleetledger.domain.entities import (
    CategoryMetrics,
    CustomerMetrics,
    CustomerRanking,
    DashboardSnapshot,
    FleetTotals,
    GrowthRates,
    MonthlySummary,
    OperationalMetrics,
    ProfitabilitySummary,
    TimeBasedMetrics,
    TransactionType,
    Vehicle,
    VehicleMetrics,
    VehicleRanking,
    VehicleTransaction,
    YearToDate,
    ZERO,
)
from fleetledger.domain.errors import NotFoundError
from fleetledger.domain.monthly import aggregate, combine
from fleetledger.domain.profitability import WINDOW_MONTHS, summarize
from fleetledger.logging_setup import get_logger
from fleetledger.utils.months import month_key, rolling_months

logger = get_logger(__name__)

RANKING_SIZE = 5
DEFAULT_REVENUE_CATEGORY = "Rental Income"
DEFAULT_EXPENSE_CATEGORY = "Other"
HUNDRED = Decimal("100")
CENT = Decimal("0.01")


def _quantize(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _ratio(numerator: Decimal, denominator: Decimal | int) -> Decimal:
    """Division rounded to cents, 0 when the denominator is 0."""
    if not denominator:
        return ZERO
    return _quantize(Decimal(numerator) / Decimal(denominator))


def _percent(part: Decimal, whole: Decimal) -> Decimal:
    if not whole:
        return ZERO
    return _quantize(part * HUNDRED / whole)


def _rank(
    vehicles: Sequence[Vehicle],
    value_of: Callable[[str], Decimal | int],
    descending: bool = True,
) -> tuple[VehicleRanking, ...]:
    """Rank vehicles by a value, ties broken by vehicle number."""
    sign = -1 if descending else 1
    ordered = sorted(vehicles, key=lambda v: (sign * value_of(v.id), v.vehicle_number))
    return tuple(
        VehicleRanking(vehicle_id=v.id, vehicle_number=v.vehicle_number, value=Decimal(value_of(v.id)))
        for v in ordered[:RANKING_SIZE]
    )


def _time_based(
    summaries: Sequence[ProfitabilitySummary],
    transactions: Iterable[VehicleTransaction],
    as_of: date,
) -> TimeBasedMetrics:
    # Fleet trend is the element-wise sum of every vehicle's rolling window
    if summaries:
        window = [s.months for s in summaries]
        trend = tuple(
            combine(entries[0].month, entries) for entries in zip(*window)
        )
    else:
        trend = tuple(MonthlySummary(month=m) for m in rolling_months(as_of, WINDOW_MONTHS))

    current, last = trend[-1], trend[-2]
    growth = GrowthRates(
        revenue=_percent(current.revenue - last.revenue, last.revenue),
        expenses=_percent(current.expenses - last.expenses, last.expenses),
        profit=_percent(current.profit - last.profit, abs(last.profit)),
    )

    year_prefix = f"{as_of.year:04d}-"
    current_key = month_key(as_of)
    ytd_months = [
        summary
        for key, summary in aggregate(transactions).items()
        if key.startswith(year_prefix) and key <= current_key
    ]
    totals = combine(current_key, ytd_months)
    ytd = YearToDate(
        year=as_of.year,
        revenue=totals.revenue,
        expenses=totals.expenses,
        profit=totals.profit,
        transaction_count=totals.transaction_count,
    )

    return TimeBasedMetrics(
        current_month=current,
        last_month=last,
        mom_growth=growth,
        ytd=ytd,
        monthly_trend=trend,
    )


def _customer_based(
    transactions: Iterable[VehicleTransaction],
    customer_by_invoice: Mapping[str, Optional[str]],
) -> CustomerMetrics:
    revenue_by_customer: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for txn in transactions:
        if txn.transaction_type != TransactionType.REVENUE or not txn.invoice_id:
            continue
        customer = customer_by_invoice.get(txn.invoice_id)
        if customer:
            revenue_by_customer[customer] += txn.amount

    top = sorted(revenue_by_customer.items(), key=lambda item: (-item[1], item[0]))
    total = sum(revenue_by_customer.values(), ZERO)
    return CustomerMetrics(
        unique_customers=len(revenue_by_customer),
        top_by_revenue=tuple(
            CustomerRanking(customer_name=name, revenue=revenue)
            for name, revenue in top[:RANKING_SIZE]
        ),
        avg_revenue_per_customer=_ratio(total, len(revenue_by_customer)),
    )


def _category_based(transactions: Iterable[VehicleTransaction]) -> CategoryMetrics:
    revenue_by_category: dict[str, Decimal] = defaultdict(lambda: ZERO)
    expenses_by_category: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for txn in transactions:
        if txn.transaction_type == TransactionType.REVENUE:
            revenue_by_category[txn.category or DEFAULT_REVENUE_CATEGORY] += txn.amount
        else:
            expenses_by_category[txn.category or DEFAULT_EXPENSE_CATEGORY] += txn.amount

    top_expense = "N/A"
    if expenses_by_category:
        top_expense = min(expenses_by_category.items(), key=lambda item: (-item[1], item[0]))[0]

    return CategoryMetrics(
        revenue_by_category=dict(sorted(revenue_by_category.items())),
        expenses_by_category=dict(sorted(expenses_by_category.items())),
        top_expense_category=top_expense,
    )


def build_dashboard(
    vehicles: Sequence[Vehicle],
    transactions_by_vehicle: Mapping[str, Sequence[VehicleTransaction]],
    as_of: date,
    customer_by_invoice: Optional[Mapping[str, Optional[str]]] = None,
) -> DashboardSnapshot:
    """Fold every vehicle's profitability summary into one fleet snapshot.

    Vehicles without transactions get a zero-valued summary and are counted
    in averages and rankings like every other vehicle.

    Args:
        vehicles: Vehicles making up the fleet
        transactions_by_vehicle: Each vehicle's transactions, keyed by vehicle ID
        as_of: Reference date for current month, window and year-to-date
        customer_by_invoice: Customer name per invoice ID, for revenue attribution

    Returns:
        DashboardSnapshot
    """
    vehicles = sorted(vehicles, key=lambda v: v.vehicle_number)
    summaries = tuple(
        summarize(v.id, transactions_by_vehicle.get(v.id, ()), as_of) for v in vehicles
    )
    by_id = {s.vehicle_id: s for s in summaries}
    all_transactions = [
        txn for v in vehicles for txn in transactions_by_vehicle.get(v.id, ())
    ]

    revenue = sum((s.all_time_revenue for s in summaries), ZERO)
    expenses = sum((s.all_time_expenses for s in summaries), ZERO)
    profit = sum((s.all_time_profit for s in summaries), ZERO)
    transaction_count = sum(s.transaction_count for s in summaries)
    vehicle_count = len(vehicles)

    overall = FleetTotals(
        revenue=revenue,
        expenses=expenses,
        profit=profit,
        profit_margin=_percent(profit, revenue),
        avg_revenue_per_vehicle=_ratio(revenue, vehicle_count),
        avg_profit_per_vehicle=_ratio(profit, vehicle_count),
        transaction_count=transaction_count,
        avg_transaction_value=_ratio(revenue + expenses, transaction_count),
    )

    time_based = _time_based(summaries, all_transactions, as_of)

    active = sum(1 for s in summaries if s.transaction_count > 0)
    vehicle_based = VehicleMetrics(
        vehicle_count=vehicle_count,
        active=active,
        profitable=sum(1 for s in summaries if s.all_time_profit > 0),
        loss_making=sum(1 for s in summaries if s.all_time_profit < 0),
        no_data=vehicle_count - active,
        top_by_revenue=_rank(vehicles, lambda vid: by_id[vid].all_time_revenue),
        top_by_profit=_rank(vehicles, lambda vid: by_id[vid].all_time_profit),
        bottom_by_profit=_rank(
            vehicles, lambda vid: by_id[vid].all_time_profit, descending=False
        ),
    )

    window_revenue = sum((m.revenue for m in time_based.monthly_trend), ZERO)
    most_active = None
    if active:
        most_active = _rank(vehicles, lambda vid: by_id[vid].transaction_count)[0]
    operational = OperationalMetrics(
        revenue_per_vehicle_per_month=_ratio(window_revenue, vehicle_count * WINDOW_MONTHS),
        expense_ratio=_percent(expenses, revenue),
        most_active_vehicle=most_active,
        avg_transactions_per_vehicle=_ratio(Decimal(transaction_count), vehicle_count),
    )

    return DashboardSnapshot(
        as_of=as_of,
        vehicles=summaries,
        overall=overall,
        time_based=time_based,
        vehicle_based=vehicle_based,
        customer_based=_customer_based(all_transactions, customer_by_invoice or {}),
        category_based=_category_based(all_transactions),
        operational=operational,
    )


class DashboardService:
    """Service for the fleet-wide dashboard."""

    def __init__(self, db: Database):
        """Initialize dashboard service.

        Args:
            db: Database instance
        """
        self.db = db

    def _resolve_vehicles(self, vehicle_ids: Optional[Sequence[str]]) -> list[Vehicle]:
        if vehicle_ids is None:
            return self.db.list_vehicles()

        vehicles: list[Vehicle] = []
        seen: set[str] = set()
        for vehicle_id in vehicle_ids:
            if vehicle_id in seen:
                continue
            vehicle = self.db.get_vehicle(vehicle_id)
            if vehicle is None:
                # One unresolved vehicle fails the whole dashboard
                raise NotFoundError(errors.vehicle_not_found(vehicle_id))
            seen.add(vehicle_id)
            vehicles.append(vehicle)
        return vehicles

    def get_dashboard(
        self,
        vehicle_ids: Optional[Sequence[str]] = None,
        as_of: Optional[date] = None,
    ) -> DashboardSnapshot:
        """Build the dashboard for some or all vehicles.

        Args:
            vehicle_ids: Vehicles to include; None means the whole fleet
            as_of: Reference date (default today)

        Raises:
            NotFoundError: If any requested vehicle doesn't exist
        """
        as_of = as_of or date.today()
        vehicles = self._resolve_vehicles(vehicle_ids)
        transactions_by_vehicle = {
            v.id: self.db.list_transactions(vehicle_id=v.id) for v in vehicles
        }

        customer_by_invoice: dict[str, Optional[str]] = {}
        for txns in transactions_by_vehicle.values():
            for txn in txns:
                if txn.invoice_id and txn.invoice_id not in customer_by_invoice:
                    invoice = self.db.get_invoice(txn.invoice_id)
                    customer_by_invoice[txn.invoice_id] = invoice.customer_name if invoice else None

        logger.debug("Building dashboard for %d vehicles as of %s", len(vehicles), as_of)
        return build_dashboard(vehicles, transactions_by_vehicle, as_of, customer_by_invoice)
