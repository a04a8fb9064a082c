"""
utils/dates.py
Fixed date range used for the market-data request.
"""

from datetime import date, timedelta
from typing import Optional, Tuple

from config import MARKET_DATA_END_DAYS_AGO, MARKET_DATA_START_DAYS_AGO


def get_date_n_days_ago(n: int, today: Optional[date] = None) -> str:
    """Local calendar date `n` days before `today`, as YYYY-MM-DD."""
    base = today or date.today()
    return (base - timedelta(days=n)).isoformat()


def report_date_range(today: Optional[date] = None) -> Tuple[str, str]:
    return (
        get_date_n_days_ago(MARKET_DATA_START_DAYS_AGO, today),
        get_date_n_days_ago(MARKET_DATA_END_DAYS_AGO, today),
    )
