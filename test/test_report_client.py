# test/test_report_client.py

from typing import Any, Dict, List

import pytest
import requests

import services.report_client as report_client


class FakeResponse:
    def __init__(self, payload: Dict[str, Any], status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")

    def json(self) -> Dict[str, Any]:
        return self.payload


def test_request_report_posts_data_and_returns_report(monkeypatch: pytest.MonkeyPatch):
    calls: List[Dict[str, Any]] = []

    def fake_post(url: str, json: Dict[str, Any] = None, timeout: float = None) -> FakeResponse:
        calls.append({"url": url, "json": json})
        return FakeResponse({"report": "# Report"})

    monkeypatch.setattr(report_client.requests, "post", fake_post)

    assert report_client.request_report("AAPL,1", url="http://api/report") == "# Report"
    assert calls == [{"url": "http://api/report", "json": {"data": "AAPL,1"}}]


def test_request_report_raises_on_error_status(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(
        report_client.requests,
        "post",
        lambda url, **kw: FakeResponse({"error": "boom"}, 500),
    )

    with pytest.raises(requests.HTTPError):
        report_client.request_report("AAPL,1")
