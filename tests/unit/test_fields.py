"""Unit tests for fields.py — static input descriptors."""
from decimal import Decimal

import pytest

from car_loan.fields import FIELD_ORDER, SUPPORTED_FIELDS, get_field


def test_field_order_covers_all_fields():
    assert set(FIELD_ORDER) == SUPPORTED_FIELDS
    assert len(FIELD_ORDER) == 5


def test_lookup_is_case_insensitive():
    assert get_field("APR").name == "apr"


def test_unknown_field():
    with pytest.raises(ValueError, match="Unknown field 'speed'"):
        get_field("speed")


@pytest.mark.parametrize("name", FIELD_ORDER)
def test_default_within_slider_range(name):
    spec = get_field(name)
    assert spec.in_slider_range(spec.default)


def test_only_apr_is_fractional():
    assert [n for n in FIELD_ORDER if not get_field(n).integer] == ["apr"]
    assert get_field("apr").step == Decimal("0.1")


def test_term_slider_range():
    term = get_field("term")
    assert (term.min, term.max, term.step) == (Decimal("36"), Decimal("96"), Decimal("12"))
    assert not term.in_slider_range(24)
