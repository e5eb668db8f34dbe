"""Unit tests for fetcher.py — FRED lookup with requests stubbed out."""
from decimal import Decimal

import pytest
import requests

from car_loan import fetcher
from car_loan.fetcher import FetchError, fetch_auto_loan_apr


class _FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("FRED_API_KEY", "test-key")


def _stub_get(monkeypatch, response):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append((url, params, timeout))
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(fetcher.requests, "get", fake_get)
    return calls


def test_missing_api_key(monkeypatch):
    monkeypatch.delenv("FRED_API_KEY", raising=False)
    with pytest.raises(FetchError, match="FRED_API_KEY"):
        fetch_auto_loan_apr()


def test_returns_latest_rate_in_percent(monkeypatch, api_key):
    calls = _stub_get(monkeypatch, _FakeResponse({"observations": [{"value": "7.92"}]}))
    assert fetch_auto_loan_apr() == Decimal("7.92")
    url, params, timeout = calls[0]
    assert params["series_id"] == "TERMCBAUTO48NS"
    assert params["api_key"] == "test-key"
    assert timeout == 10


def test_network_error(monkeypatch, api_key):
    _stub_get(monkeypatch, requests.ConnectionError("boom"))
    with pytest.raises(FetchError, match="request failed"):
        fetch_auto_loan_apr()


def test_http_error(monkeypatch, api_key):
    _stub_get(monkeypatch, _FakeResponse({}, status_code=500))
    with pytest.raises(FetchError, match="request failed"):
        fetch_auto_loan_apr()


@pytest.mark.parametrize("payload,match", [
    ({"observations": []}, "no observations"),
    ({"observations": [{"value": "."}]}, "missing value"),
    ({"observations": [{"value": "0"}]}, "non-positive"),
    ({"unexpected": True}, "Failed to parse"),
    ({"observations": [{"value": "n/a"}]}, "Failed to parse"),
    (ValueError("not json"), "Failed to parse"),
])
def test_bad_payload(monkeypatch, api_key, payload, match):
    _stub_get(monkeypatch, _FakeResponse(payload))
    with pytest.raises(FetchError, match=match):
        fetch_auto_loan_apr()
