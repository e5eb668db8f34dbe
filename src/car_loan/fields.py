"""Static descriptors for the five calculator inputs.

Slider bounds are the ranges offered to the user when editing a field.
They are hints only; validation lives in the resolver and accepts any
positive value.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .config import (
    DEFAULT_APR,
    DEFAULT_DOWN_PAYMENT,
    DEFAULT_PURCHASE_PRICE,
    DEFAULT_TERM_MONTHS,
    DEFAULT_YEARLY_INCOME,
)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    description: str
    # Slider range
    min: Decimal
    max: Decimal
    step: Decimal
    integer: bool
    default: int | Decimal
    suffix: str = ""

    def in_slider_range(self, value: int | Decimal) -> bool:
        return self.min <= value <= self.max


_FIELDS: dict[str, FieldSpec] = {
    "purchase_price": FieldSpec(
        name="purchase_price",
        label="Purchase Price",
        description="The total price of the car before any down payment.",
        min=Decimal("0"),
        max=Decimal("100000"),
        step=Decimal("1000"),
        integer=True,
        default=DEFAULT_PURCHASE_PRICE,
    ),
    "down_payment": FieldSpec(
        name="down_payment",
        label="Down Payment",
        description="The amount of money you will pay upfront.",
        min=Decimal("0"),
        max=Decimal("20000"),
        step=Decimal("100"),
        integer=True,
        default=DEFAULT_DOWN_PAYMENT,
    ),
    "apr": FieldSpec(
        name="apr",
        label="APR",
        description="The annual percentage rate of the loan.",
        min=Decimal("0"),
        max=Decimal("10"),
        step=Decimal("0.1"),
        integer=False,
        default=DEFAULT_APR,
        suffix="%",
    ),
    "term": FieldSpec(
        name="term",
        label="Term",
        description="The length of the loan in months.",
        min=Decimal("36"),
        max=Decimal("96"),
        step=Decimal("12"),
        integer=True,
        default=DEFAULT_TERM_MONTHS,
    ),
    "yearly_income": FieldSpec(
        name="yearly_income",
        label="Yearly Income",
        description="Your yearly income before taxes.",
        min=Decimal("0"),
        max=Decimal("200000"),
        step=Decimal("1000"),
        integer=True,
        default=DEFAULT_YEARLY_INCOME,
    ),
}

# Form order
FIELD_ORDER: tuple[str, ...] = (
    "purchase_price",
    "down_payment",
    "apr",
    "term",
    "yearly_income",
)
SUPPORTED_FIELDS = frozenset(_FIELDS.keys())


def get_field(name: str) -> FieldSpec:
    """Return the descriptor for *name* (lower-cased).

    Raises ValueError for unknown field names.
    """
    key = name.lower()
    if key not in _FIELDS:
        raise ValueError(
            f"Unknown field '{key}'. "
            f"Supported fields: {', '.join(FIELD_ORDER)}"
        )
    return _FIELDS[key]
