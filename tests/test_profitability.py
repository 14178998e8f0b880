"""Tests for per-vehicle profitability summaries."""

from datetime import date
from decimal import Decimal

import pytest

from fleetledger.domain.errors import NotFoundError
from fleetledger.domain.profitability import summarize


def test_vehicle_without_transactions():
    summary = summarize("V1", [], date(2025, 6, 15))

    assert summary.current_month is None
    assert summary.last_month is None
    assert summary.all_time_revenue == Decimal("0")
    assert summary.all_time_expenses == Decimal("0")
    assert summary.all_time_profit == Decimal("0")
    assert summary.transaction_count == 0
    assert len(summary.months) == 12
    assert all(m.revenue == m.expenses == m.profit == 0 for m in summary.months)


def test_sparse_months_are_gap_filled(make_transaction):
    transactions = [
        make_transaction("1", "revenue", "500", date(2025, 1, 10), vehicle_id="V2"),
        make_transaction("2", "expense", "200", date(2025, 3, 4), vehicle_id="V2"),
    ]

    summary = summarize("V2", transactions, date(2025, 3, 15))
    by_month = {m.month: m for m in summary.months}

    assert len(summary.months) == 12
    assert [m.month for m in summary.months][0] == "2024-04"
    assert [m.month for m in summary.months][-1] == "2025-03"
    assert by_month["2025-02"].revenue == by_month["2025-02"].expenses == by_month["2025-02"].profit == 0
    assert by_month["2025-01"].revenue == Decimal("500")
    assert by_month["2025-01"].profit == Decimal("500")
    assert by_month["2025-03"].expenses == Decimal("200")
    assert by_month["2025-03"].profit == Decimal("-200")


def test_current_and_last_month(make_transaction):
    transactions = [
        make_transaction("1", "revenue", "300", date(2025, 6, 2)),
        make_transaction("2", "expense", "100", date(2025, 6, 9)),
    ]
    summary = summarize("V1", transactions, date(2025, 6, 15))

    assert summary.current_month.profit == Decimal("200")
    assert summary.current_month.transaction_count == 2
    # Nothing recorded last month
    assert summary.last_month is None


def test_all_time_includes_transactions_outside_window(make_transaction):
    transactions = [
        make_transaction("1", "revenue", "1000", date(2023, 1, 1)),
        make_transaction("2", "revenue", "50", date(2025, 6, 1)),
        make_transaction("3", "expense", "20", date(2025, 6, 2)),
    ]
    summary = summarize("V1", transactions, date(2025, 6, 15))

    assert summary.all_time_revenue == Decimal("1050")
    assert summary.all_time_expenses == Decimal("20")
    assert summary.all_time_profit == Decimal("1030")
    assert sum(m.revenue for m in summary.months) == Decimal("50")


def test_legacy_month_keys_are_found(make_transaction):
    transactions = [make_transaction("1", "revenue", "75", date(2025, 1, 3), month="2025-1")]
    summary = summarize("V1", transactions, date(2025, 1, 20))

    assert summary.current_month.month == "2025-01"
    assert summary.current_month.revenue == Decimal("75")
    assert summary.months[-1].revenue == Decimal("75")


def test_window_crosses_year_boundary():
    summary = summarize("V1", [], date(2025, 2, 28))
    assert [m.month for m in summary.months][:3] == ["2024-03", "2024-04", "2024-05"]
    assert [m.month for m in summary.months][-2:] == ["2025-01", "2025-02"]


def test_service_reads_ledger(profitability_service, transaction_service, sample_vehicle):
    transaction_service.create_transaction(
        vehicle_id=sample_vehicle.id, transaction_type="revenue", amount=Decimal("900"), date=date(2025, 5, 30)
    )
    transaction_service.create_transaction(
        vehicle_id=sample_vehicle.id, transaction_type="expense", amount=Decimal("150"), date=date(2025, 6, 1)
    )

    summary = profitability_service.get_profitability(sample_vehicle.id, as_of=date(2025, 6, 15))

    assert summary.vehicle_id == "V1"
    assert summary.current_month.profit == Decimal("-150")
    assert summary.last_month.profit == Decimal("900")
    assert summary.all_time_profit == Decimal("750")
    assert summary.transaction_count == 2


def test_service_unknown_vehicle(profitability_service):
    with pytest.raises(NotFoundError, match="ghost"):
        profitability_service.get_profitability("ghost")


def test_service_defaults_to_today(profitability_service, sample_vehicle):
    summary = profitability_service.get_profitability(sample_vehicle.id)
    assert summary.months[-1].month == date.today().strftime("%Y-%m")
