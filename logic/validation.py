"""
logic/validation.py
Pure logic: ticker rules for the page form and ticker extraction for the
report prompt. No API calls.
"""

from typing import List

MAX_TICKERS = 3
MIN_TICKER_LENGTH = 3


def can_add_ticker(value: str, tickers: List[str]) -> bool:
    """
    Add-ticker rule used by the page form.

    Rules:
    - strip the raw input
    - it must be longer than 2 characters
    - fewer than 3 tickers may already be present
    """
    cleaned = (value or "").strip()
    return len(cleaned) >= MIN_TICKER_LENGTH and len(tickers) < MAX_TICKERS


def clean_ticker(value: str) -> str:
    """
    Returns:
        the trimmed, uppercased ticker symbol.
    """
    return (value or "").strip().upper()


def extract_tickers(data: str) -> str:
    """
    Derive the ticker list from newline-delimited CSV-ish rows.

    The first field of every line is taken as-is, so
    "AAPL,100\\nMSFT,200" becomes "AAPL, MSFT".
    """
    return ", ".join(line.split(",")[0] for line in data.split("\n"))
