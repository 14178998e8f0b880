"""Utility functions for fleetledger."""

from fleetledger.utils.date_parser import parse_date
from fleetledger.utils.amount_parser import parse_amount
from fleetledger.utils.months import month_key, normalize_month, rolling_months

__all__ = ["parse_date", "parse_amount", "month_key", "normalize_month", "rolling_months"]
