from datetime import date

import pytest

from crunchem.calculators.common import date_input, number, select, text
from crunchem.coerce import InputError, coerce_inputs
from crunchem.types import CalculationError

FIELDS = (
    number("amount", "Amount", min=0, max=100),
    number("people", "People", default=1),
    number("tip", "Tip", required=False),
    select("mode", "Mode", (("a", "A"), ("b", "B"))),
    text("note", "Note", required=False),
    date_input("when", "When", required=False),
)


def _raw(**kw):
    base = {"amount": "10", "mode": "a"}
    base.update(kw)
    return base


def test_numbers_are_parsed():
    out = coerce_inputs(FIELDS, _raw(amount=" 12.5 "))
    assert out["amount"] == 12.5
    assert coerce_inputs(FIELDS, _raw(amount=7))["amount"] == 7.0


def test_thousands_separators_are_accepted():
    fields = (number("n", "N"),)
    assert coerce_inputs(fields, {"n": "1,234.5"})["n"] == 1234.5


def test_blank_uses_default_then_none():
    out = coerce_inputs(FIELDS, _raw(people="", tip="   "))
    assert out["people"] == 1.0
    assert out["tip"] is None
    assert out["note"] is None
    assert out["when"] is None


def test_required_blank_raises():
    with pytest.raises(InputError, match="Amount is required"):
        coerce_inputs(FIELDS, _raw(amount=""))
    with pytest.raises(InputError, match="Mode is required"):
        coerce_inputs(FIELDS, {"amount": "1"})


def test_bounds_are_inclusive():
    assert coerce_inputs(FIELDS, _raw(amount="0"))["amount"] == 0.0
    assert coerce_inputs(FIELDS, _raw(amount="100"))["amount"] == 100.0
    with pytest.raises(InputError, match="at least 0"):
        coerce_inputs(FIELDS, _raw(amount="-1"))
    with pytest.raises(InputError, match="at most 100"):
        coerce_inputs(FIELDS, _raw(amount="100.5"))


def test_bad_numbers():
    for bad in ("abc", "nan", "inf", True):
        with pytest.raises(InputError):
            coerce_inputs(FIELDS, _raw(amount=bad))


def test_select_membership():
    assert coerce_inputs(FIELDS, _raw(mode="b"))["mode"] == "b"
    with pytest.raises(InputError, match="has no option 'c'"):
        coerce_inputs(FIELDS, _raw(mode="c"))


def test_dates():
    assert coerce_inputs(FIELDS, _raw(when="2024-02-29"))["when"] == date(2024, 2, 29)
    assert coerce_inputs(FIELDS, _raw(when=date(2020, 1, 1)))["when"] == date(2020, 1, 1)
    with pytest.raises(InputError, match="YYYY-MM-DD"):
        coerce_inputs(FIELDS, _raw(when="29/02/2024"))


def test_unknown_keys_ignored_and_input_not_mutated():
    raw = _raw(extra="x")
    snapshot = dict(raw)
    out = coerce_inputs(FIELDS, raw)
    assert raw == snapshot
    assert set(out) == {f.id for f in FIELDS}


def test_input_error_is_calculation_error():
    assert issubclass(InputError, CalculationError)
