# test/test_streamlit_app.py

"""
Tests for streamlit_app.py

Drives the page with Streamlit's AppTest harness: type into the ticker
field, press Add, and look at what the next run shows. No market data
is fetched here.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parent.parent / "streamlit_app.py")


@pytest.fixture
def at() -> AppTest:
    app = AppTest.from_file(APP_PATH, default_timeout=10)
    app.run()
    return app


def _add(at: AppTest, value: str) -> None:
    at.text_input(key="ticker_input").input(value)
    at.button[0].click().run()


def test_rejected_ticker_stays_in_the_field(at: AppTest):
    _add(at, "ge")

    page = at.session_state["page"]
    assert page.tickers == []
    assert page.label_error is True
    assert at.text_input(key="ticker_input").value == "ge"
    assert len(at.error) == 1


def test_accepted_ticker_clears_the_field(at: AppTest):
    _add(at, "msft")

    page = at.session_state["page"]
    assert page.tickers == ["MSFT"]
    assert page.label_error is False
    assert at.text_input(key="ticker_input").value == ""
    assert len(at.error) == 0


def test_fourth_ticker_is_rejected_and_kept(at: AppTest):
    for ticker in ("aapl", "msft", "tsla"):
        _add(at, ticker)

    _add(at, "nvda")

    assert at.session_state["page"].tickers == ["AAPL", "MSFT", "TSLA"]
    assert at.text_input(key="ticker_input").value == "nvda"
