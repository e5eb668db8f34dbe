"""Online APR lookup from the FRED new-car loan rate.

Fetches the latest 48-month new-car finance rate at commercial banks.
All fetches are user-triggered (no background polling).
"""
from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation

import requests

from .config import FRED_API_KEY_ENV, FRED_AUTO_LOAN_SERIES, FRED_URL, HTTP_TIMEOUT_SECONDS


class FetchError(Exception):
    """Raised when an online rate fetch fails for any reason."""


def fetch_auto_loan_apr() -> Decimal:
    """Fetch the latest average new-car loan APR from FRED.

    Returns the rate in percent (e.g. Decimal("7.92")), matching the unit
    the calculator expects. Raises FetchError on any error (missing API key,
    network, parsing, missing data).
    """
    api_key = os.environ.get(FRED_API_KEY_ENV)
    if not api_key:
        raise FetchError(
            f"{FRED_API_KEY_ENV} environment variable is not set. "
            "Get a free key at https://fred.stlouisfed.org/docs/api/api_key.html"
        )
    params = {
        "series_id": FRED_AUTO_LOAN_SERIES,
        "api_key": api_key,
        "file_type": "json",
        "sort_order": "desc",
        "limit": 1,
    }
    try:
        resp = requests.get(FRED_URL, params=params, timeout=HTTP_TIMEOUT_SECONDS)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"FRED API request failed: {exc}") from exc

    try:
        data = resp.json()
        observations = data["observations"]
        if not observations:
            raise FetchError("FRED returned no observations.")
        value_str = observations[0]["value"]
        if value_str == ".":
            raise FetchError("FRED returned missing value ('.').")
        rate = Decimal(value_str)
    except (KeyError, IndexError, TypeError, ValueError, InvalidOperation) as exc:
        raise FetchError(f"Failed to parse FRED response: {exc}") from exc

    if rate <= 0:
        raise FetchError(f"FRED returned a non-positive rate ({rate}).")
    return rate
