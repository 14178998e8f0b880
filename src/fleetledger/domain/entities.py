"""Domain model entities for fleetledger.

These are pure data classes representing business concepts, independent of
database schema. Derived views (monthly, profitability and dashboard
summaries) live here too; they are never persisted.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional

ZERO = Decimal("0")


class TransactionType(str, Enum):
    """Direction of a vehicle financial event."""

    REVENUE = "revenue"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Vehicle:
    """Vehicle reference entity."""

    id: str
    vehicle_number: str
    make: Optional[str]
    model: Optional[str]
    status: str
    created_at: datetime


@dataclass(frozen=True)
class Employee:
    """Employee reference entity."""

    id: str
    name: str
    created_at: datetime


@dataclass(frozen=True)
class Invoice:
    """Invoice reference entity, used to attribute revenue to customers."""

    id: str
    number: str
    customer_name: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class PurchaseOrder:
    """Purchase order reference entity."""

    id: str
    number: str
    created_at: datetime


@dataclass(frozen=True)
class Quote:
    """Quote reference entity."""

    id: str
    number: str
    created_at: datetime


@dataclass(frozen=True)
class TransactionInput:
    """Candidate transaction as supplied by a caller, before persistence.

    ``month`` is filled in by the validator; callers never set it.
    """

    vehicle_id: str
    transaction_type: TransactionType | str
    amount: Decimal
    date: date
    category: Optional[str] = None
    description: Optional[str] = None
    employee_id: Optional[str] = None
    invoice_id: Optional[str] = None
    purchase_order_id: Optional[str] = None
    quote_id: Optional[str] = None
    month: Optional[str] = None


@dataclass(frozen=True)
class VehicleTransaction:
    """Vehicle financial event as stored in the ledger."""

    id: str
    vehicle_id: str
    transaction_type: TransactionType
    amount: Decimal
    date: date
    month: str
    category: Optional[str]
    description: Optional[str]
    employee_id: Optional[str]
    invoice_id: Optional[str]
    purchase_order_id: Optional[str]
    quote_id: Optional[str]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class MonthlySummary:
    """One vehicle (or the fleet) for one calendar month."""

    month: str
    revenue: Decimal = ZERO
    expenses: Decimal = ZERO
    profit: Decimal = ZERO
    transaction_count: int = 0


@dataclass(frozen=True)
class ProfitabilitySummary:
    """Current-month, all-time and rolling 12-month view of one vehicle."""

    vehicle_id: str
    current_month: Optional[MonthlySummary]
    last_month: Optional[MonthlySummary]
    all_time_revenue: Decimal
    all_time_expenses: Decimal
    all_time_profit: Decimal
    months: tuple[MonthlySummary, ...]
    transaction_count: int = 0


@dataclass(frozen=True)
class VehicleRanking:
    """A vehicle and the value it was ranked by."""

    vehicle_id: str
    vehicle_number: str
    value: Decimal


@dataclass(frozen=True)
class CustomerRanking:
    """A customer and the revenue attributed to them through invoices."""

    customer_name: str
    revenue: Decimal


@dataclass(frozen=True)
class GrowthRates:
    """Month-over-month change in percent."""

    revenue: Decimal = ZERO
    expenses: Decimal = ZERO
    profit: Decimal = ZERO


@dataclass(frozen=True)
class YearToDate:
    """Totals from January of ``year`` through the as-of month."""

    year: int
    revenue: Decimal = ZERO
    expenses: Decimal = ZERO
    profit: Decimal = ZERO
    transaction_count: int = 0


@dataclass(frozen=True)
class FleetTotals:
    revenue: Decimal
    expenses: Decimal
    profit: Decimal
    profit_margin: Decimal
    avg_revenue_per_vehicle: Decimal
    avg_profit_per_vehicle: Decimal
    transaction_count: int
    avg_transaction_value: Decimal


@dataclass(frozen=True)
class TimeBasedMetrics:
    current_month: MonthlySummary
    last_month: MonthlySummary
    mom_growth: GrowthRates
    ytd: YearToDate
    monthly_trend: tuple[MonthlySummary, ...]


@dataclass(frozen=True)
class VehicleMetrics:
    vehicle_count: int
    active: int
    profitable: int
    loss_making: int
    no_data: int
    top_by_revenue: tuple[VehicleRanking, ...]
    top_by_profit: tuple[VehicleRanking, ...]
    bottom_by_profit: tuple[VehicleRanking, ...]


@dataclass(frozen=True)
class CustomerMetrics:
    unique_customers: int
    top_by_revenue: tuple[CustomerRanking, ...]
    avg_revenue_per_customer: Decimal


@dataclass(frozen=True)
class CategoryMetrics:
    revenue_by_category: dict[str, Decimal]
    expenses_by_category: dict[str, Decimal]
    top_expense_category: str


@dataclass(frozen=True)
class OperationalMetrics:
    revenue_per_vehicle_per_month: Decimal
    expense_ratio: Decimal
    most_active_vehicle: Optional[VehicleRanking]
    avg_transactions_per_vehicle: Decimal


@dataclass(frozen=True)
class DashboardSnapshot:
    """Fleet-wide rollup of every vehicle's profitability summary."""

    as_of: date
    vehicles: tuple[ProfitabilitySummary, ...]
    overall: FleetTotals
    time_based: TimeBasedMetrics
    vehicle_based: VehicleMetrics
    customer_based: CustomerMetrics
    category_based: CategoryMetrics
    operational: OperationalMetrics


DASHBOARD_SECTIONS = (
    "overall",
    "time_based",
    "vehicle_based",
    "customer_based",
    "category_based",
    "operational",
)


@dataclass(frozen=True)
class DashboardDisplaySettings:
    """Which dashboard sections a presentation layer shows.

    Every flag defaults to shown; the aggregation itself ignores these.
    """

    show_overall: bool = True
    show_time_based: bool = True
    show_vehicle_based: bool = True
    show_customer_based: bool = True
    show_category_based: bool = True
    show_operational: bool = True

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> "DashboardDisplaySettings":
        """Build settings from a loose mapping, treating missing or null flags as shown."""
        flags = {}
        for key, value in (values or {}).items():
            # Unrelated admin settings share the mapping
            if key.startswith("show_") and key[5:] in DASHBOARD_SECTIONS:
                flags[key] = True if value is None else bool(value)
        return cls(**flags)

    def is_shown(self, section: str) -> bool:
        """Return whether a dashboard section should be rendered."""
        if section not in DASHBOARD_SECTIONS:
            raise ValueError(f"Unknown dashboard section '{section}'")
        return getattr(self, f"show_{section}")
