"""Calendar-month bucket keys in canonical ``YYYY-MM`` form."""

from datetime import date

from dateutil.relativedelta import relativedelta


def month_key(value: date) -> str:
    """Return the zero-padded ``YYYY-MM`` bucket key for a date."""
    return value.strftime("%Y-%m")


def normalize_month(key: str) -> str:
    """Normalize a month key to ``YYYY-MM``.

    Accepts legacy keys missing zero-padding (``2025-1``) and full ISO dates
    (``2025-01-15``), which are truncated to their month.

    Raises:
        ValueError: If the key is not a recognizable year and month
    """
    parts = key.strip().split("-")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid month '{key}': expected YYYY-MM")
    year, month = int(parts[0]), int(parts[1])
    if not 1 <= month <= 12 or len(parts[0]) != 4:
        raise ValueError(f"Invalid month '{key}': expected YYYY-MM")
    return f"{year:04d}-{month:02d}"


def month_start(key: str) -> date:
    """Return the first day of the month a key refers to."""
    year, month = normalize_month(key).split("-")
    return date(int(year), int(month), 1)


def shift_month(key: str, months: int) -> str:
    """Return the key ``months`` calendar months after (or before) ``key``."""
    return month_key(month_start(key) + relativedelta(months=months))


def rolling_months(as_of: date, count: int = 12) -> list[str]:
    """Return the ``count`` month keys ending at ``as_of``'s month, oldest first."""
    first = as_of.replace(day=1)
    return [month_key(first - relativedelta(months=offset)) for offset in range(count - 1, -1, -1)]
