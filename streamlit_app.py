"""
TickerReport page.

Run with:  streamlit run streamlit_app.py
The report API (app.py) must be reachable at REPORT_API_URL for the
"Write AI report" option.
"""

import streamlit as st

from services.report_client import request_report
from ui.page_state import PHASE_INPUT, PHASE_RESULT, ReportPage

LABEL_TEXT = "Add up to 3 stock tickers below to get a super accurate stock predictions report👇"

st.set_page_config(page_title="TickerReport", page_icon="📈")

if "page" not in st.session_state:
    st.session_state.page = ReportPage()

page: ReportPage = st.session_state.page


def _on_add() -> None:
    # Runs before the rerun; a rejected ticker stays in the field
    if page.add_ticker(st.session_state.ticker_input):
        st.session_state.ticker_input = ""


st.title("📈 Dave's Stock Predictions")

if page.phase == PHASE_INPUT:
    if page.label_error:
        st.error(LABEL_TEXT)
    else:
        st.write(LABEL_TEXT)

    with st.form("ticker-form"):
        st.text_input("Ticker", placeholder="MSFT", key="ticker_input", label_visibility="collapsed")
        st.form_submit_button("➕ Add", on_click=_on_add)

    if page.tickers:
        st.markdown(" ".join(f"`{t}`" for t in page.tickers))

    use_ai = st.checkbox("Write AI report", value=False)

    if st.button("Generate Report", disabled=not page.can_generate):
        with st.spinner("Querying Stocks API..."):
            page.generate(summarize=request_report if use_ai else None)
        st.rerun()

    st.caption("Always correct 15% of the time!")

elif page.phase == PHASE_RESULT:
    st.subheader("Your Report 😜")
    if page.report_is_markdown:
        st.markdown(page.report)
    else:
        st.text(page.report)
    if st.button("Start over"):
        page.reset()
        st.rerun()

st.divider()
st.caption("© This is not real financial advice!")
