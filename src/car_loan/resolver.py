"""Input resolution and validation.

Resolution order:
1. Each field falls back to its form default if not user-supplied.
2. Integer fields (price, down payment, term, income) must be integral.
3. Every field must be strictly positive.

The calculator assumes its input already passed through here.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from .calculator import LoanInput
from .config import ZERO
from .fields import FIELD_ORDER, get_field

Number = Union[int, Decimal]


class InvalidInputError(ValueError):
    """Raised when a field value violates its type or range constraint."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(f"{get_field(field_name).label}: {message}")
        self.field_name = field_name


@dataclass
class UserInputs:
    """Raw user-supplied values.  None means 'not provided, use the form default'."""
    purchase_price: Optional[Number] = None
    down_payment: Optional[Number] = None
    apr: Optional[Number] = None
    term: Optional[Number] = None
    yearly_income: Optional[Number] = None


@dataclass(frozen=True)
class ResolvedInput:
    loan: LoanInput
    # Provenance: 'user' or 'default' for each field
    sources: dict[str, str] = field(default_factory=dict)


def parse_value(name: str, raw: str) -> Number:
    """Parse user text for field *name*.

    Ignores spaces and '_'. A ',' is a thousands separator in integer
    fields and a decimal separator in the APR field.
    Returns int for integer fields, Decimal otherwise.
    """
    spec = get_field(name)
    cleaned = raw.strip().replace(" ", "").replace("_", "")
    cleaned = cleaned.replace(",", "" if spec.integer else ".")
    try:
        value = Decimal(cleaned)
    except InvalidOperation as exc:
        raise InvalidInputError(spec.name, f"invalid number '{raw.strip()}'") from exc
    if not value.is_finite():
        raise InvalidInputError(spec.name, f"invalid number '{raw.strip()}'")
    if spec.integer:
        return _to_int(spec.name, value)
    return value


def _to_decimal(name: str, value: object) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidInputError(name, f"must be a number (got {value!r})")
    if isinstance(value, float):
        value = Decimal(str(value))
    else:
        value = Decimal(value)
    if not value.is_finite():
        raise InvalidInputError(name, f"must be a finite number (got {value})")
    return value


def _to_int(name: str, value: Decimal) -> int:
    if value != value.to_integral_value():
        raise InvalidInputError(name, f"must be a whole number (got {value})")
    return int(value)


def validate_value(name: str, value: object) -> Number:
    """Check one field value and return it as int or Decimal.

    Raises InvalidInputError for non-numeric, non-finite, fractional
    (integer fields) or non-positive values.
    """
    spec = get_field(name)
    number = _to_decimal(spec.name, value)
    if number <= ZERO:
        raise InvalidInputError(spec.name, f"must be > 0 (got {number})")
    if spec.integer:
        return _to_int(spec.name, number)
    return number


def resolve(inputs: UserInputs) -> ResolvedInput:
    """Fill defaults, validate every field and return a ready-to-compute input."""
    sources: dict[str, str] = {}
    values: dict[str, Number] = {}

    for name in FIELD_ORDER:
        user_val = getattr(inputs, name)
        if user_val is not None:
            sources[name] = "user"
            raw = user_val
        else:
            sources[name] = "default"
            raw = get_field(name).default
        values[name] = validate_value(name, raw)

    return ResolvedInput(loan=LoanInput(**values), sources=sources)
