import pytest

from crunchem.catalog import get_catalog
from crunchem.types import CalculationError


def _run(calc_id, **inputs):
    return get_catalog().get(calc_id).calculate(inputs)


def _values(res):
    return {r.label: r.value for r in res.results}


def test_basic_operations():
    assert _values(_run("basic-calculator", num1="2", operation="add", num2="3"))["Result"] == 5
    assert _values(_run("basic-calculator", num1="7", operation="subtract", num2="10"))["Result"] == -3
    assert _values(_run("basic-calculator", num1="6", operation="divide", num2="4"))["Result"] == 1.5
    res = _run("basic-calculator", num1="2", operation="multiply", num2="3")
    assert res.steps == ["2 × 3 = 6"]


def test_division_by_zero():
    with pytest.raises(CalculationError, match="Division by zero is undefined"):
        _run("basic-calculator", num1="1", operation="divide", num2="0")


def test_overflowing_result_is_rejected():
    with pytest.raises(CalculationError, match="Result is too large to compute"):
        _run("basic-calculator", num1="1e308", operation="multiply", num2="10")


def test_scientific_functions():
    assert _values(_run("scientific-calculator", number="100", operation="log"))["Result"] == pytest.approx(2)
    assert _values(_run("scientific-calculator", number="30", operation="sin"))["Result"] == pytest.approx(0.5)
    assert _values(_run("scientific-calculator", number="3", operation="cube"))["Result"] == 27


def test_scientific_domain_errors():
    with pytest.raises(CalculationError, match="non-positive"):
        _run("scientific-calculator", number="0", operation="log")
    with pytest.raises(CalculationError, match="negative"):
        _run("scientific-calculator", number="-4", operation="sqrt")
    with pytest.raises(CalculationError, match="Tangent is undefined"):
        _run("scientific-calculator", number="90", operation="tan")
    with pytest.raises(CalculationError, match="too large"):
        _run("scientific-calculator", number="1000", operation="exp")


def test_matrix_determinant():
    out = _values(_run("matrix-calculator", matrix="1, 2; 3, 4", operation="determinant"))
    assert out["Determinant"] == -2
    assert out["Exact Value"] == "-2"


def test_matrix_transpose_and_inverse():
    t = _values(_run("matrix-calculator", matrix="1, 2; 3, 4", operation="transpose"))
    assert t["Transpose"] == "1, 3; 2, 4"
    inv = _values(_run("matrix-calculator", matrix="1 2\n3 4", operation="inverse"))
    assert inv["Inverse"] == "-2, 1; 3/2, -1/2"


def test_matrix_errors():
    with pytest.raises(CalculationError, match="singular"):
        _run("matrix-calculator", matrix="1, 2; 2, 4", operation="inverse")
    with pytest.raises(CalculationError, match="square"):
        _run("matrix-calculator", matrix="1, 2, 3; 4, 5, 6", operation="determinant")
    with pytest.raises(CalculationError, match="same number of entries"):
        _run("matrix-calculator", matrix="1, 2; 3", operation="transpose")


def test_linear_equation():
    out = _values(_run("equation-solver", type="linear", a="2", b="-8"))
    assert out["x"] == 4


def test_quadratic_two_roots():
    out = _values(_run("equation-solver", type="quadratic", a="1", b="-3", c="2"))
    assert out["x₁"] == 2
    assert out["x₂"] == 1


def test_quadratic_double_and_complex_roots():
    assert _values(_run("equation-solver", type="quadratic", a="1", b="2", c="1"))["x (double root)"] == -1
    out = _values(_run("equation-solver", type="quadratic", a="3", b="4", c="5"))
    assert out["Result"] == "No real solutions"
    assert out["x₁ (complex)"].endswith("i")


def test_equation_requires_nonzero_a():
    with pytest.raises(CalculationError, match="cannot be zero"):
        _run("equation-solver", type="quadratic", a="0", b="1", c="1")


def test_complex_arithmetic():
    args = dict(real1="1", imag1="2", real2="3", imag2="4")
    assert _values(_run("complex-number-calculator", operation="multiply", **args))["Result"] == "-5 + 10i"
    assert _values(_run("complex-number-calculator", operation="add", **args))["Result"] == "4 + 6i"
    out = _values(_run("complex-number-calculator", operation="subtract", **args))
    assert out["Result"] == "-2 - 2i"
    assert out["Magnitude |z|"] == pytest.approx(8 ** 0.5)


def test_complex_division_by_zero():
    with pytest.raises(CalculationError, match="Division by zero"):
        _run("complex-number-calculator", real1="1", imag1="1", real2="0", imag2="0", operation="divide")
