"""
data/market_data_source.py
Responsible for fetching raw daily aggregate bars for tickers from Polygon.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Tuple

import requests

from config import MARKET_DATA_TIMEOUT_SECONDS, POLYGON_API_KEY, POLYGON_BASE_URL
from utils.dates import report_date_range


class MarketDataError(RuntimeError):
    """Any failed market-data request (transport error or non-2xx status)."""


def build_aggregates_url(ticker: str, start_date: str, end_date: str) -> str:
    return f"{POLYGON_BASE_URL}/v2/aggs/ticker/{ticker}/range/1/day/{start_date}/{end_date}"


def fetch_price_history(ticker: str, date_range: Optional[Tuple[str, str]] = None) -> str:
    """
    Fetch daily bars for one ticker over the report date range.

    Returns:
        The raw response body text, untouched.
    Raises:
        MarketDataError if the request fails or the status is not 2xx.
    """
    start_date, end_date = date_range or report_date_range()
    url = build_aggregates_url(ticker, start_date, end_date)

    try:
        response = requests.get(
            url,
            params={"apiKey": POLYGON_API_KEY},
            timeout=MARKET_DATA_TIMEOUT_SECONDS,
        )
    except requests.RequestException as e:
        raise MarketDataError(f"{ticker}: request failed ({e})") from e

    if not response.ok:
        raise MarketDataError(f"{ticker}: API error (HTTP {response.status_code})")

    return response.text


def fetch_all_price_history(tickers: List[str]) -> List[str]:
    """
    Fetch every ticker in parallel, one worker per ticker.

    Results come back in the same order as `tickers`. The first failure
    aborts the batch: it is re-raised and nothing partial is returned.
    """
    if not tickers:
        return []

    date_range = report_date_range()
    results: List[Optional[str]] = [None] * len(tickers)

    pool = ThreadPoolExecutor(max_workers=len(tickers))
    try:
        futures = {
            pool.submit(fetch_price_history, ticker, date_range): idx
            for idx, ticker in enumerate(tickers)
        }
        for future in as_completed(futures):
            results[futures[future]] = future.result()
    finally:
        # Do not wait on requests still in flight after a failure
        pool.shutdown(wait=False, cancel_futures=True)

    return [r or "" for r in results]
