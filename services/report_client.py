# services/report_client.py

import requests

from config import REPORT_API_TIMEOUT_SECONDS, REPORT_API_URL


def request_report(data: str, url: str = REPORT_API_URL) -> str:
    """
    POST raw market data to the report endpoint and return the report text.

    Raises requests.HTTPError on a non-2xx answer.
    """
    response = requests.post(url, json={"data": data}, timeout=REPORT_API_TIMEOUT_SECONDS)
    response.raise_for_status()
    return response.json().get("report", "")
