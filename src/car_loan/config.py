"""Application-wide constants and configuration defaults.

All tuneable defaults live here so there is a single place to adjust them.
"""
from __future__ import annotations

from decimal import Decimal

# ── Form defaults ─────────────────────────────────────────────────────────────

DEFAULT_PURCHASE_PRICE: int = 25000
DEFAULT_DOWN_PAYMENT: int = 5000
DEFAULT_APR = Decimal("5.0")          # percent per year
DEFAULT_TERM_MONTHS: int = 48
DEFAULT_YEARLY_INCOME: int = 60000

# ── Affordability thresholds ──────────────────────────────────────────────────

GOOD_DOWN_PAYMENT_RATIO = Decimal("0.20")   # down payment >= 20% of price
GOOD_LOAN_DURATION_MONTHS: int = 4 * 12     # term <= 4 years
GOOD_PAYMENT_INCOME_RATIO = Decimal("0.10")  # payment <= 10% of gross monthly income

MONTHS_PER_YEAR: int = 12

# ── Display ───────────────────────────────────────────────────────────────────

CURRENCY_SYMBOL: str = "$"

# ── Online rate lookup ────────────────────────────────────────────────────────

HTTP_TIMEOUT_SECONDS: int = 10
FRED_URL: str = "https://api.stlouisfed.org/fred/series/observations"
# Finance rate on consumer installment loans at commercial banks, new autos, 48 months
FRED_AUTO_LOAN_SERIES: str = "TERMCBAUTO48NS"
FRED_API_KEY_ENV: str = "FRED_API_KEY"

# ── Numeric convenience ───────────────────────────────────────────────────────

ZERO = Decimal("0")
CENT = Decimal("0.01")
HUNDRED = Decimal("100")
