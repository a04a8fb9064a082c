# logic/report_prompt.py

"""
Prompt construction for the stock report.

build_report_messages(data) returns the two-message chat prompt
(system + user) that services/report_service.py sends to the model.
"""

from typing import Dict, List

from logic.validation import extract_tickers

SYSTEM_PROMPT = "You are a professional stock report generator."

REPORT_INSTRUCTIONS = """
### Instructions:
Generate a detailed stock report based on the provided data.
Include the following sections:

1. **Overview** – Brief summary of the stock's performance.
2. **Technical Analysis** – Key indicators and chart patterns.
3. **Fundamental Analysis** – Company financial, earnings, market position.
4. **Market Sentiment** – Analyst ratings and investor perception.
5. **Conclusion** – Final assessment and outlook.

- Use bullet points for clarity.
- Format using **Markdown**.
- Target audience: Investors and analysts.
- Highlight key trends or anomalies.
- Ensure the report is self-contained with no external context required.
""".strip()


def build_user_prompt(data: str, tickers: str) -> str:
    user_prompt = f"""
{data}

---

{REPORT_INSTRUCTIONS}

---

Stock Report for: **{tickers}**

Begin the report below:
"""
    return user_prompt.strip()


def build_report_messages(data: str) -> List[Dict[str, str]]:
    tickers = extract_tickers(data)
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(data, tickers)},
    ]
