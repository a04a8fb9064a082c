"""
Centralized settings for TickerReport.

This file reads environment variables (optionally from a .env file)
and provides sane defaults so the app can boot locally.
"""

import os
from dataclasses import dataclass
from typing import Dict, Any
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from the .env file NEXT TO THIS FILE
ENV_PATH = Path(__file__).resolve().parent / ".env"
load_dotenv(ENV_PATH)


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_str(name: str, default: str = "") -> str:
    raw = os.getenv(name)
    return default if raw is None else raw


# ---------------------------
# External API Keys
# ---------------------------
# Server-side secret, never shown to the page
OPENAI_API_KEY: str = _get_str("OPENAI_API_KEY", "")
POLYGON_API_KEY: str = _get_str("POLYGON_API_KEY", "")

# ---------------------------
# Market Data Settings
# ---------------------------
POLYGON_BASE_URL: str = _get_str("POLYGON_BASE_URL", "https://api.polygon.io")
MARKET_DATA_START_DAYS_AGO: int = _get_int("MARKET_DATA_START_DAYS_AGO", 3)
MARKET_DATA_END_DAYS_AGO: int = _get_int("MARKET_DATA_END_DAYS_AGO", 1)
MARKET_DATA_TIMEOUT_SECONDS: float = _get_float("MARKET_DATA_TIMEOUT_SECONDS", 10.0)

# ---------------------------
# AI Settings
# ---------------------------
AI_MODEL: str = _get_str("AI_MODEL", "gpt-4o")

# ---------------------------
# Page -> API wiring
# ---------------------------
REPORT_API_URL: str = _get_str("REPORT_API_URL", "http://localhost:8000/api/report")
REPORT_API_TIMEOUT_SECONDS: float = _get_float("REPORT_API_TIMEOUT_SECONDS", 120.0)


@dataclass(frozen=True)
class Settings:
    OPENAI_API_KEY: str
    POLYGON_API_KEY: str
    POLYGON_BASE_URL: str
    MARKET_DATA_START_DAYS_AGO: int
    MARKET_DATA_END_DAYS_AGO: int
    MARKET_DATA_TIMEOUT_SECONDS: float
    AI_MODEL: str
    REPORT_API_URL: str
    REPORT_API_TIMEOUT_SECONDS: float


def get_settings() -> Dict[str, Any]:
    return {
        "OPENAI_API_KEY": OPENAI_API_KEY,
        "POLYGON_API_KEY": POLYGON_API_KEY,
        "POLYGON_BASE_URL": POLYGON_BASE_URL,
        "MARKET_DATA_START_DAYS_AGO": MARKET_DATA_START_DAYS_AGO,
        "MARKET_DATA_END_DAYS_AGO": MARKET_DATA_END_DAYS_AGO,
        "MARKET_DATA_TIMEOUT_SECONDS": MARKET_DATA_TIMEOUT_SECONDS,
        "AI_MODEL": AI_MODEL,
        "REPORT_API_URL": REPORT_API_URL,
        "REPORT_API_TIMEOUT_SECONDS": REPORT_API_TIMEOUT_SECONDS,
    }


def get_settings_obj() -> Settings:
    return Settings(**get_settings())
