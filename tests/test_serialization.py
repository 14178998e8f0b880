"""Tests for JSON conversion of domain entities."""

import json
from datetime import date, datetime
from decimal import Decimal

from fleetledger.domain.entities import MonthlySummary, TransactionType
from fleetledger.domain.profitability import summarize
from fleetledger.domain.serialization import to_jsonable


def test_scalars():
    assert to_jsonable(Decimal("12.50")) == 12.5
    assert to_jsonable(Decimal("12.00")) == 12
    assert isinstance(to_jsonable(Decimal("12.00")), int)
    assert to_jsonable(date(2025, 1, 2)) == "2025-01-02"
    assert to_jsonable(datetime(2025, 1, 2, 3, 4, 5)) == "2025-01-02T03:04:05"
    assert to_jsonable(TransactionType.EXPENSE) == "expense"
    assert to_jsonable(None) is None
    assert to_jsonable("x") == "x"


def test_dataclass_to_dict():
    summary = MonthlySummary("2025-01", Decimal("10.5"), Decimal("0"), Decimal("10.5"), 1)
    assert to_jsonable(summary) == {
        "month": "2025-01",
        "revenue": 10.5,
        "expenses": 0,
        "profit": 10.5,
        "transaction_count": 1,
    }


def test_profitability_summary_is_json_serializable(make_transaction):
    summary = summarize(
        "V1", [make_transaction("t1", "revenue", "99.99", date(2025, 6, 1))], date(2025, 6, 15)
    )

    data = json.loads(json.dumps(to_jsonable(summary)))
    assert data["vehicle_id"] == "V1"
    assert data["current_month"]["revenue"] == 99.99
    assert data["last_month"] is None
    assert len(data["months"]) == 12
    assert data["months"][-1]["month"] == "2025-06"
