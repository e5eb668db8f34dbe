"""Core payment and affordability calculations.

All monetary values use decimal.Decimal. Results are kept at full
precision; rounding to cents is left to the presentation layer.

Callers must ensure ``term > 0``. A zero term is undefined behaviour here;
``car_loan.resolver`` rejects it before it reaches these functions.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .config import (
    GOOD_DOWN_PAYMENT_RATIO,
    GOOD_LOAN_DURATION_MONTHS,
    GOOD_PAYMENT_INCOME_RATIO,
    HUNDRED,
    MONTHS_PER_YEAR,
    ZERO,
)


@dataclass(frozen=True)
class LoanInput:
    purchase_price: int
    down_payment: int
    apr: Decimal          # percent per year, e.g. Decimal("5.0")
    term: int             # months
    yearly_income: int


@dataclass(frozen=True)
class LoanResult:
    loan_amount: Decimal
    monthly_payment: Decimal
    good_down_payment: bool
    good_loan_duration: bool
    good_monthly_payment: bool


def compute_monthly_payment(
    purchase_price: int | Decimal,
    down_payment: int | Decimal,
    apr: int | Decimal,
    term: int,
) -> Decimal:
    """Return the monthly payment of an amortizing loan.

    Uses the annuity formula:
        payment = L * r / (1 - (1 + r)^-n)

    with L = purchase_price - down_payment and r = apr / 100 / 12.
    Returns 0 when the down payment covers the price, and L / n at 0% APR.
    """
    loan_amount = Decimal(purchase_price) - Decimal(down_payment)
    if loan_amount <= ZERO:
        return ZERO

    r = Decimal(apr) / HUNDRED / MONTHS_PER_YEAR
    if r > ZERO:
        return loan_amount * r / (1 - (1 + r) ** -int(term))

    return loan_amount / Decimal(term)


def evaluate_affordability(loan: LoanInput) -> LoanResult:
    """Compute the monthly payment and the three affordability flags."""
    payment = compute_monthly_payment(
        loan.purchase_price, loan.down_payment, loan.apr, loan.term
    )
    monthly_income = Decimal(loan.yearly_income) / MONTHS_PER_YEAR

    return LoanResult(
        loan_amount=Decimal(loan.purchase_price) - Decimal(loan.down_payment),
        monthly_payment=payment,
        good_down_payment=loan.down_payment >= GOOD_DOWN_PAYMENT_RATIO * loan.purchase_price,
        good_loan_duration=loan.term <= GOOD_LOAN_DURATION_MONTHS,
        good_monthly_payment=payment <= GOOD_PAYMENT_INCOME_RATIO * monthly_income,
    )
