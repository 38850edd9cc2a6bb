# -----------------------------------------------------------------------------
# Mathematics calculators
# Arithmetic, scientific functions, matrices (sympy), linear/quadratic
# equations and complex-number arithmetic.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
import re
from enum import Enum
from typing import Any, Dict, List

from sympy import Matrix, Rational, roots as sp_roots, symbols

from ..types import CalculationError, CalculationResult, Calculator, Complexity, ResultFormat
from ..units import lookup_table, select_options
from .common import fixed, num, number, result, select, text

CATEGORY = "Mathematics"


# ---- basic-calculator --------------------------------------------------------

class Operation(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

OPERATION_SYMBOLS = lookup_table(Operation, {
    Operation.ADD: "+", Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "×", Operation.DIVIDE: "÷",
})

OPERATION_OPTIONS = select_options(Operation, {
    Operation.ADD: "Addition (+)", Operation.SUBTRACT: "Subtraction (-)",
    Operation.MULTIPLY: "Multiplication (×)", Operation.DIVIDE: "Division (÷)",
})


def basic_calculate(v: Dict[str, Any]) -> CalculationResult:
    a, b = v["num1"], v["num2"]
    op = Operation(v["operation"])
    if op is Operation.ADD:
        r = a + b
    elif op is Operation.SUBTRACT:
        r = a - b
    elif op is Operation.MULTIPLY:
        r = a * b
    else:
        if b == 0:
            raise CalculationError("Division by zero is undefined")
        r = a / b
    return CalculationResult(
        results=[result(r, "Result", format=ResultFormat.DECIMAL)],
        explanation=[f"Performing {op.value} operation on {num(a)} and {num(b)}"],
        steps=[f"{num(a)} {OPERATION_SYMBOLS[op]} {num(b)} = {num(r)}"],
    )


# ---- scientific-calculator ---------------------------------------------------

class ScientificOp(str, Enum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    LOG = "log"
    LN = "ln"
    SQRT = "sqrt"
    SQUARE = "square"
    CUBE = "cube"
    EXP = "exp"

SCIENTIFIC_OPTIONS = select_options(ScientificOp, {
    ScientificOp.SIN: "Sine (sin)", ScientificOp.COS: "Cosine (cos)",
    ScientificOp.TAN: "Tangent (tan)", ScientificOp.LOG: "Logarithm (log)",
    ScientificOp.LN: "Natural Log (ln)", ScientificOp.SQRT: "Square Root (√)",
    ScientificOp.SQUARE: "Square (x²)", ScientificOp.CUBE: "Cube (x³)",
    ScientificOp.EXP: "Exponential (e^x)",
})


def scientific_calculate(v: Dict[str, Any]) -> CalculationResult:
    x = v["number"]
    op = ScientificOp(v["operation"])
    if op in (ScientificOp.SIN, ScientificOp.COS, ScientificOp.TAN):
        rad = math.radians(x)
        if op is ScientificOp.TAN and math.isclose(math.cos(rad), 0.0, abs_tol=1e-12):
            raise CalculationError(f"Tangent is undefined at {num(x)}°")
        r = {"sin": math.sin, "cos": math.cos, "tan": math.tan}[op.value](rad)
        line = f"{op.value}({num(x)}°) = {fixed(r, 6)}"
    elif op is ScientificOp.LOG:
        if x <= 0:
            raise CalculationError("Logarithm undefined for non-positive numbers")
        r = math.log10(x)
        line = f"log₁₀({num(x)}) = {fixed(r, 6)}"
    elif op is ScientificOp.LN:
        if x <= 0:
            raise CalculationError("Natural logarithm undefined for non-positive numbers")
        r = math.log(x)
        line = f"ln({num(x)}) = {fixed(r, 6)}"
    elif op is ScientificOp.SQRT:
        if x < 0:
            raise CalculationError("Square root undefined for negative numbers")
        r = math.sqrt(x)
        line = f"√{num(x)} = {fixed(r, 6)}"
    elif op is ScientificOp.SQUARE:
        r = x * x
        line = f"{num(x)}² = {num(r)}"
    elif op is ScientificOp.CUBE:
        r = x * x * x
        line = f"{num(x)}³ = {num(r)}"
    else:
        try:
            r = math.exp(x)
        except OverflowError:
            raise CalculationError(f"e^{num(x)} is too large to compute") from None
        line = f"e^{num(x)} = {fixed(r, 6)}"
    return CalculationResult(
        results=[result(r, "Result", format=ResultFormat.DECIMAL)],
        explanation=[line],
        steps=[line],
    )


# ---- matrix-calculator -------------------------------------------------------

class MatrixOp(str, Enum):
    DETERMINANT = "determinant"
    TRANSPOSE = "transpose"
    INVERSE = "inverse"

MATRIX_OPTIONS = select_options(MatrixOp, {
    MatrixOp.DETERMINANT: "Determinant",
    MatrixOp.TRANSPOSE: "Transpose",
    MatrixOp.INVERSE: "Inverse",
})

MAX_MATRIX_SIZE = 6


def parse_matrix(raw: str) -> Matrix:
    """
    Rows separated by ';' or newlines, entries by commas or spaces.
    Entries are kept exact (Rational) so inverses come out as fractions.
    """
    rows = [r for r in re.split(r"[;\n]+", raw.strip()) if r.strip()]
    parsed: List[List[Rational]] = []
    for r in rows:
        cells = [c for c in re.split(r"[,\s]+", r.strip()) if c]
        try:
            parsed.append([Rational(c) for c in cells])
        except (TypeError, ValueError):
            raise CalculationError(f"Could not read matrix row '{r.strip()}'; use numbers only") from None
    if not parsed:
        raise CalculationError("Please enter at least one matrix row")
    width = len(parsed[0])
    if any(len(r) != width for r in parsed):
        raise CalculationError("Every matrix row must have the same number of entries")
    if len(parsed) > MAX_MATRIX_SIZE or width > MAX_MATRIX_SIZE:
        raise CalculationError(f"Matrices are limited to {MAX_MATRIX_SIZE}×{MAX_MATRIX_SIZE}")
    return Matrix(parsed)


def format_matrix(m: Matrix) -> str:
    return "; ".join(", ".join(str(m[i, j]) for j in range(m.cols)) for i in range(m.rows))


def matrix_calculate(v: Dict[str, Any]) -> CalculationResult:
    m = parse_matrix(v["matrix"])
    op = MatrixOp(v["operation"])
    shape = f"{m.rows}×{m.cols}"
    if op is MatrixOp.TRANSPOSE:
        t = m.T
        return CalculationResult(
            results=[result(format_matrix(t), "Transpose"), result(f"{t.rows}×{t.cols}", "Dimensions")],
            explanation=[f"Transpose of a {shape} matrix"],
            steps=[f"Swap rows and columns: [{format_matrix(m)}] → [{format_matrix(t)}]"],
        )
    if not m.is_square:
        raise CalculationError(f"The {op.value} is only defined for square matrices (got {shape})")
    det = m.det()
    if op is MatrixOp.DETERMINANT:
        steps = [f"Matrix: [{format_matrix(m)}]"]
        if m.rows == 2:
            a, b, c, d = m[0, 0], m[0, 1], m[1, 0], m[1, 1]
            steps.append(f"det = ({a})×({d}) - ({b})×({c}) = {det}")
        else:
            steps.append(f"Cofactor expansion along the first row = {det}")
        return CalculationResult(
            results=[result(float(det), "Determinant", format=ResultFormat.DECIMAL),
                     result(str(det), "Exact Value")],
            explanation=[f"Determinant of a {shape} matrix"],
            steps=steps,
        )
    if det == 0:
        raise CalculationError("Matrix is singular (determinant is 0) and has no inverse")
    inv = m.inv()
    return CalculationResult(
        results=[result(format_matrix(inv), "Inverse"), result(float(det), "Determinant", format=ResultFormat.DECIMAL)],
        explanation=[f"Inverse of a {shape} matrix", f"Determinant = {det} ≠ 0, so the inverse exists"],
        steps=[f"det = {det}", "A⁻¹ = adj(A) / det(A)", f"A⁻¹ = [{format_matrix(inv)}]"],
    )


# ---- equation-solver ---------------------------------------------------------

class EquationType(str, Enum):
    LINEAR = "linear"
    QUADRATIC = "quadratic"

EQUATION_OPTIONS = select_options(EquationType, {
    EquationType.LINEAR: "Linear (ax + b = 0)",
    EquationType.QUADRATIC: "Quadratic (ax² + bx + c = 0)",
})


def _complex_str(z: complex, places: int = 4) -> str:
    sign = "-" if z.imag < 0 else "+"
    return f"{fixed(z.real, places)} {sign} {fixed(abs(z.imag), places)}i"


def equation_calculate(v: Dict[str, Any]) -> CalculationResult:
    a, b = v["a"], v["b"]
    c = v["c"] if v["c"] is not None else 0.0
    kind = EquationType(v["type"])
    if a == 0:
        raise CalculationError(f"Coefficient a cannot be zero for {kind.value} equation")

    if kind is EquationType.LINEAR:
        x = -b / a
        return CalculationResult(
            results=[result(x, "x", format=ResultFormat.DECIMAL)],
            explanation=[f"Solving linear equation: {num(a)}x + {num(b)} = 0"],
            steps=[f"{num(a)}x + {num(b)} = 0", f"{num(a)}x = {num(-b)}", f"x = {num(-b)}/{num(a)} = {num(x)}"],
        )

    disc = b * b - 4 * a * c
    head = f"Discriminant = b² - 4ac = {num(b)}² - 4({num(a)})({num(c)}) = {num(disc)}"
    if disc < 0:
        x = symbols("x")
        found = sorted((complex(r) for r in sp_roots(a * x**2 + b * x + c, x)),
                       key=lambda z: -z.imag)
        return CalculationResult(
            results=[result("No real solutions", "Result"),
                     result(_complex_str(found[0]), "x₁ (complex)"),
                     result(_complex_str(found[1]), "x₂ (complex)")],
            explanation=[f"Discriminant = {num(disc)} < 0, so no real solutions exist",
                         "The two complex conjugate roots are shown instead"],
            steps=[head, f"√Δ = {fixed(math.sqrt(-disc), 4)}i",
                   f"x = (-{num(b)} ± {fixed(math.sqrt(-disc), 4)}i) / {num(2 * a)}"],
        )
    if disc == 0:
        x = -b / (2 * a)
        return CalculationResult(
            results=[result(x, "x (double root)", format=ResultFormat.DECIMAL)],
            explanation=[f"One solution (double root): x = {num(x)}"],
            steps=[head, f"x = -b/(2a) = {num(-b)}/(2×{num(a)}) = {num(x)}"],
        )
    root = math.sqrt(disc)
    x1 = (-b + root) / (2 * a)
    x2 = (-b - root) / (2 * a)
    return CalculationResult(
        results=[result(x1, "x₁", format=ResultFormat.DECIMAL), result(x2, "x₂", format=ResultFormat.DECIMAL)],
        explanation=[f"Two solutions: x₁ = {fixed(x1, 4)}, x₂ = {fixed(x2, 4)}"],
        steps=[head, f"x = (-b ± √{num(disc)}) / (2×{num(a)})",
               f"x₁ = ({num(-b)} + √{num(disc)}) / {num(2 * a)} = {fixed(x1, 4)}",
               f"x₂ = ({num(-b)} - √{num(disc)}) / {num(2 * a)} = {fixed(x2, 4)}"],
    )


# ---- complex-number-calculator -----------------------------------------------

def _cx(z: complex) -> str:
    sign = "-" if z.imag < 0 else "+"
    return f"{num(round(z.real, 10))} {sign} {num(round(abs(z.imag), 10))}i"


def complex_calculate(v: Dict[str, Any]) -> CalculationResult:
    a1, b1, a2, b2 = v["real1"], v["imag1"], v["real2"], v["imag2"]
    z1, z2 = complex(a1, b1), complex(a2, b2)
    op = Operation(v["operation"])
    if op is Operation.ADD:
        z = z1 + z2
        steps = [f"Real parts: {num(a1)} + {num(a2)} = {num(z.real)}",
                 f"Imaginary parts: {num(b1)} + {num(b2)} = {num(z.imag)}"]
    elif op is Operation.SUBTRACT:
        z = z1 - z2
        steps = [f"Real parts: {num(a1)} - {num(a2)} = {num(z.real)}",
                 f"Imaginary parts: {num(b1)} - {num(b2)} = {num(z.imag)}"]
    elif op is Operation.MULTIPLY:
        z = z1 * z2
        steps = [f"Real part: {num(a1)}×{num(a2)} - {num(b1)}×{num(b2)} = {num(z.real)}",
                 f"Imaginary part: {num(a1)}×{num(b2)} + {num(b1)}×{num(a2)} = {num(z.imag)}"]
    else:
        if z2 == 0:
            raise CalculationError("Division by zero is undefined")
        z = z1 / z2
        denom = a2 * a2 + b2 * b2
        steps = [f"Multiply by the conjugate ({num(a2)} - {num(b2)}i)",
                 f"Denominator: {num(a2)}² + {num(b2)}² = {num(denom)}",
                 f"Real part: ({num(a1)}×{num(a2)} + {num(b1)}×{num(b2)}) / {num(denom)} = {num(z.real)}",
                 f"Imaginary part: ({num(b1)}×{num(a2)} - {num(a1)}×{num(b2)}) / {num(denom)} = {num(z.imag)}"]
    text_result = _cx(z)
    steps.append(f"Result: {text_result}")
    return CalculationResult(
        results=[result(text_result, "Result"),
                 result(abs(z), "Magnitude |z|", format=ResultFormat.DECIMAL)],
        explanation=[f"({_cx(z1)}) {OPERATION_SYMBOLS[op]} ({_cx(z2)}) = {text_result}"],
        steps=steps,
    )


MATHEMATICS: List[Calculator] = [
    Calculator(
        id="basic-calculator",
        title="Basic Calculator",
        description="Perform basic arithmetic operations including addition, subtraction, multiplication, and division.",
        category=CATEGORY,
        inputs=(
            number("num1", "First Number", placeholder="Enter first number"),
            select("operation", "Operation", OPERATION_OPTIONS),
            number("num2", "Second Number", placeholder="Enter second number"),
        ),
        formula="Basic arithmetic operations",
        compute=basic_calculate,
        tags=("basic", "arithmetic"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="scientific-calculator",
        title="Scientific Calculator",
        description="Advanced mathematical operations including trigonometry, logarithms, and exponentials.",
        category=CATEGORY,
        inputs=(
            number("number", "Number", placeholder="Enter number"),
            select("operation", "Operation", SCIENTIFIC_OPTIONS),
        ),
        formula="Various scientific functions (angles in degrees)",
        compute=scientific_calculate,
        tags=("scientific", "advanced", "trigonometry"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="matrix-calculator",
        title="Matrix Calculator",
        description="Compute the determinant, transpose, or inverse of a matrix.",
        category=CATEGORY,
        inputs=(
            text("matrix", "Matrix", placeholder="Rows separated by ';', e.g. 1, 2; 3, 4"),
            select("operation", "Operation", MATRIX_OPTIONS),
        ),
        formula="det(A), Aᵀ, A⁻¹ = adj(A) / det(A)",
        compute=matrix_calculate,
        tags=("matrix", "linear-algebra"),
        complexity=Complexity.ADVANCED,
    ),
    Calculator(
        id="equation-solver",
        title="Equation Solver",
        description="Solve linear and quadratic equations step by step.",
        category=CATEGORY,
        inputs=(
            select("type", "Equation Type", EQUATION_OPTIONS),
            number("a", "Coefficient a", placeholder="Enter coefficient a"),
            number("b", "Coefficient b", placeholder="Enter coefficient b"),
            number("c", "Coefficient c", required=False, placeholder="Enter coefficient c (for quadratic)"),
        ),
        formula="Linear: x = -b/a, Quadratic: x = (-b ± √(b²-4ac)) / 2a",
        compute=equation_calculate,
        tags=("equations", "algebra", "quadratic"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="complex-number-calculator",
        title="Complex Number Calculator",
        description="Perform operations on complex numbers including addition, subtraction, multiplication, and division.",
        category=CATEGORY,
        inputs=(
            number("real1", "Real Part 1", placeholder="Real part of first number"),
            number("imag1", "Imaginary Part 1", placeholder="Imaginary part of first number"),
            number("real2", "Real Part 2", placeholder="Real part of second number"),
            number("imag2", "Imaginary Part 2", placeholder="Imaginary part of second number"),
            select("operation", "Operation", OPERATION_OPTIONS),
        ),
        formula="(a + bi) ± (c + di), (a + bi)(c + di) = (ac - bd) + (ad + bc)i",
        compute=complex_calculate,
        tags=("complex", "imaginary", "arithmetic"),
        complexity=Complexity.INTERMEDIATE,
    ),
]
