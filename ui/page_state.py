# ui/page_state.py

"""
State and actions behind the report page.

ReportPage holds what the page shows (tickers, loading flag, report
text, label error flag) and the two user actions: add a ticker and
generate the report. The Streamlit page keeps one instance per browser
session in st.session_state; nothing here touches Streamlit, so the
rules can be tested on their own.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from data.market_data_source import fetch_all_price_history
from logic.validation import can_add_ticker, clean_ticker

FETCH_ERROR_MESSAGE = "Error fetching data."
REPORT_ERROR_MESSAGE = "Error generating report."
EMPTY_REPORT_MESSAGE = "The report came back empty. Try again in a moment."

PHASE_INPUT = "input"
PHASE_LOADING = "loading"
PHASE_RESULT = "result"


@dataclass
class ReportPage:
    tickers: List[str] = field(default_factory=list)
    loading: bool = False
    report: Optional[str] = None
    # True when `report` is model Markdown, False for raw API text
    report_is_markdown: bool = False
    label_error: bool = False

    @property
    def phase(self) -> str:
        if self.loading:
            return PHASE_LOADING
        if self.report:
            return PHASE_RESULT
        return PHASE_INPUT

    @property
    def can_generate(self) -> bool:
        return len(self.tickers) > 0

    def add_ticker(self, value: str) -> bool:
        """
        Append `value` (trimmed + uppercased) if it passes the form rules.

        On failure the ticker list is left alone and label_error is set;
        there is only one error state, whatever the reason. The caller
        clears its input field only when this returns True.
        """
        if can_add_ticker(value, self.tickers):
            self.tickers = self.tickers + [clean_ticker(value)]
            self.label_error = False
            return True

        self.label_error = True
        return False

    def generate(
        self,
        fetch: Callable[[List[str]], List[str]] = fetch_all_price_history,
        summarize: Optional[Callable[[str], str]] = None,
    ) -> str:
        """
        Fetch market data for every ticker and store it as the report.

        With `summarize`, the raw text is handed on (to the report API)
        and its answer is shown instead.
        """
        self.loading = True
        self.report_is_markdown = False
        try:
            try:
                raw = "\n".join(fetch(self.tickers))
            except Exception as e:
                print(f"[page] market data error: {e!r}")
                self.report = FETCH_ERROR_MESSAGE
                return self.report

            if summarize is None:
                self.report = raw
                return self.report

            try:
                report = summarize(raw)
            except Exception as e:
                print(f"[page] report error: {e!r}")
                self.report = REPORT_ERROR_MESSAGE
                return self.report

            if not report:
                print("[page] warning: report API returned an empty report")
                self.report = EMPTY_REPORT_MESSAGE
                return self.report

            self.report = report
            self.report_is_markdown = True
            return self.report
        finally:
            self.loading = False

    def reset(self) -> None:
        self.tickers = []
        self.loading = False
        self.report = None
        self.report_is_markdown = False
        self.label_error = False
