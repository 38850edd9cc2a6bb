from crunchem.catalog import Catalog
from crunchem.calculators.common import number
from crunchem.runner import run_calculator
from crunchem.tracer import Tracer
from crunchem.types import Calculator, CalculationResult


def _kinds(res):
    return [t["kind"] for t in res.trace]


def _broken(values):
    raise ZeroDivisionError("boom")


def test_successful_run():
    res = run_calculator("basic-calculator", {"num1": "2", "operation": "add", "num2": "3"})
    assert res.ok
    assert res.error is None and res.error_kind is None
    assert res.results[0]["value"] == 5
    assert _kinds(res) == ["lookup", "coerce", "compute"]


def test_unknown_calculator():
    res = run_calculator("nope", {})
    assert not res.ok
    assert res.error_kind == "not_found"
    assert res.results == []
    assert _kinds(res) == ["lookup"]


def test_input_error_is_user_input():
    res = run_calculator("basic-calculator", {"num1": "", "operation": "add", "num2": "3"})
    assert not res.ok
    assert res.error_kind == "user_input"
    assert "is required" in res.error
    assert res.trace[-1]["detail"]["stage"] == "coerce"


def test_compute_error_is_user_input():
    res = run_calculator("basic-calculator", {"num1": "1", "operation": "divide", "num2": "0"})
    assert not res.ok
    assert res.error_kind == "user_input"
    assert res.error == "Division by zero is undefined"
    assert res.trace[-1]["detail"]["stage"] == "compute"
    assert res.results == []


def test_unexpected_error_is_internal():
    calc = Calculator(id="broken", title="Broken", description="Always fails.", category="Mathematics",
                      inputs=(number("x", "X"),), formula="x / 0", compute=_broken)
    res = run_calculator("broken", {"x": 1}, Catalog.from_modules([[calc]]))
    assert not res.ok
    assert res.error_kind == "internal"
    assert "boom" not in res.error


def test_failure_does_not_leak_into_next_run():
    run_calculator("basic-calculator", {"num1": "1", "operation": "divide", "num2": "0"})
    res = run_calculator("basic-calculator", {"num1": "6", "operation": "divide", "num2": "3"})
    assert res.ok and res.results[0]["value"] == 2


def test_error_trace_records_kind_and_stage():
    res = run_calculator("basic-calculator", {"num1": "1", "operation": "divide", "num2": "0"})
    last = res.trace[-1]
    assert last["kind"] == "error"
    assert last["detail"] == {"error_kind": "user_input", "stage": "compute",
                              "message": "Division by zero is undefined"}


def test_internal_error_trace():
    calc = Calculator(id="broken", title="Broken", description="Always fails.", category="Mathematics",
                      inputs=(number("x", "X"),), formula="x / 0", compute=_broken)
    res = run_calculator("broken", {"x": 1}, Catalog.from_modules([[calc]]))
    assert _kinds(res) == ["lookup", "coerce", "error"]
    assert res.trace[-1]["detail"]["error_kind"] == "internal"


def test_overflow_is_user_input():
    res = run_calculator("kinetic-energy", {"mass": "1e308", "velocity": "1e308"})
    assert not res.ok
    assert res.error_kind == "user_input"
    assert res.error == "Result is too large to compute"
    assert res.results == []


def test_dates_are_traced_as_strings():
    res = run_calculator("date-calculator", {"calculation_type": "add", "start_date": "2024-01-31",
                                             "days_to_add": "1"})
    assert res.ok
    assert res.trace[1]["detail"]["values"]["start_date"] == "2024-01-31"


def test_to_dict_shape():
    d = run_calculator("nope", {}).to_dict()
    assert set(d) == {"ok", "calculator_id", "results", "explanation", "steps", "trace",
                      "error", "error_kind"}


def test_tracer_collects_in_order():
    t = Tracer()
    t.add("lookup", calculator_id="x")
    t.add("compute", results=1)
    assert t.kinds() == ["lookup", "compute"]
    assert t.steps()[0] == {"kind": "lookup", "detail": {"calculator_id": "x"}}


def test_calculate_result_is_fresh_each_time():
    calc = Calculator(id="echo", title="Echo", description="Echo.", category="Mathematics",
                      inputs=(number("x", "X"),), formula="x",
                      compute=lambda v: CalculationResult(steps=[str(v["x"])]))
    a = calc.calculate({"x": 1})
    a.steps.append("mutated")
    assert calc.calculate({"x": 1}).steps == ["1.0"]
