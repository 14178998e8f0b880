"""Tests for domain entities and display settings."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from fleetledger.domain.entities import (
    DASHBOARD_SECTIONS,
    DashboardDisplaySettings,
    MonthlySummary,
    TransactionType,
)


def test_transaction_type_values():
    assert TransactionType("revenue") is TransactionType.REVENUE
    assert TransactionType.EXPENSE.value == "expense"
    assert TransactionType.REVENUE == "revenue"


def test_monthly_summary_defaults_to_zero():
    summary = MonthlySummary(month="2025-01")
    assert summary.revenue == summary.expenses == summary.profit == Decimal("0")
    assert summary.transaction_count == 0


def test_entities_are_frozen():
    summary = MonthlySummary(month="2025-01")
    with pytest.raises(FrozenInstanceError):
        summary.revenue = Decimal("1")


class TestDashboardDisplaySettings:
    """Section toggles default to shown."""

    def test_defaults(self):
        settings = DashboardDisplaySettings()
        assert all(settings.is_shown(section) for section in DASHBOARD_SECTIONS)

    def test_from_empty_mapping(self):
        assert DashboardDisplaySettings.from_mapping(None) == DashboardDisplaySettings()
        assert DashboardDisplaySettings.from_mapping({}) == DashboardDisplaySettings()

    def test_from_mapping_reads_flags(self):
        settings = DashboardDisplaySettings.from_mapping(
            {"show_customer_based": False, "show_operational": None, "show_overall": 1}
        )
        assert not settings.is_shown("customer_based")
        # Null means shown
        assert settings.is_shown("operational")
        assert settings.is_shown("overall")

    def test_from_mapping_ignores_unrelated_keys(self):
        settings = DashboardDisplaySettings.from_mapping(
            {"company_name": "Fleet Co", "show_unknown": False, "currency": "AED"}
        )
        assert settings == DashboardDisplaySettings()

    def test_unknown_section(self):
        with pytest.raises(ValueError, match="Unknown dashboard section"):
            DashboardDisplaySettings().is_shown("weather")
