# -----------------------------------------------------------------------------
# Types module: Shared dataclasses for the calculator registry
# Purpose:
#   Define the uniform record shape every calculator satisfies (metadata,
#   input schema, compute function) plus the structured result it returns.
#   Used by the category modules, catalog, selector, runner and API.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Tuple, Union


class CalculationError(Exception):
    """User-facing, recoverable error raised while computing a result."""


RESULT_TOO_LARGE = "Result is too large to compute"


class FieldType(str, Enum):
    NUMBER = "number"
    TEXT = "text"
    SELECT = "select"
    DATE = "date"


class Complexity(str, Enum):
    # Display label doubles as the wire value
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class ResultFormat(str, Enum):
    # Rendering hint only; never changes the value
    DECIMAL = "decimal"
    INTEGER = "integer"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    TEXT = "text"


@dataclass(frozen=True)
class InputOption:
    value: str
    label: str


@dataclass(frozen=True)
class InputField:
    """
    Schema for one form field.
    - id: key used in the calculate() input mapping
    - type: number | text | select | date
    - min/max/step: numeric constraints (number fields only)
    - default_value: used when the field is left blank
    - options: ordered (value, label) pairs for select fields
    """
    id: str
    label: str
    type: FieldType
    required: bool = True
    min: float | None = None
    max: float | None = None
    step: float | None = None
    placeholder: str = ""
    default_value: Any = None
    options: Tuple[InputOption, ...] = ()

    def option_values(self) -> List[str]:
        return [o.value for o in self.options]

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "id": self.id, "label": self.label, "type": self.type.value,
            "required": self.required, "placeholder": self.placeholder,
        }
        for key in ("min", "max", "step"):
            if getattr(self, key) is not None:
                d[key] = getattr(self, key)
        if self.default_value is not None:
            d["default_value"] = self.default_value
        if self.options:
            d["options"] = [{"value": o.value, "label": o.label} for o in self.options]
        return d


@dataclass
class ResultValue:
    value: Union[float, int, str]
    label: str
    unit: str = ""
    format: ResultFormat | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value, "label": self.label, "unit": self.unit,
            "format": self.format.value if self.format else None,
        }


@dataclass
class CalculationResult:
    """Output of one calculate() call. Built fresh each time and owned by the caller."""
    results: List[ResultValue] = field(default_factory=list)
    explanation: List[str] = field(default_factory=list)
    steps: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results": [r.to_dict() for r in self.results],
            "explanation": list(self.explanation),
            "steps": list(self.steps),
        }


ComputeFn = Callable[[Dict[str, Any]], CalculationResult]


@dataclass(frozen=True)
class Calculator:
    """
    One calculation tool: metadata + input schema + pure compute function.
    Example:
        id: "basic-calculator"
        category: "Mathematics"
        inputs: (num1, operation, num2)
    `compute` receives values already coerced by the field schema;
    `calculate` is the entry point for raw form values.
    """
    id: str
    title: str
    description: str
    category: str
    inputs: Tuple[InputField, ...]
    formula: str
    compute: ComputeFn
    tags: Tuple[str, ...] = ()
    complexity: Complexity = Complexity.BASIC

    def calculate(self, inputs: Mapping[str, Any]) -> CalculationResult:
        from .coerce import coerce_inputs
        return self.evaluate(coerce_inputs(self.inputs, inputs))

    def evaluate(self, values: Dict[str, Any]) -> CalculationResult:
        # Finite inputs can still overflow; surface that as a user error
        try:
            out = self.compute(values)
        except OverflowError:
            raise CalculationError(RESULT_TOO_LARGE) from None
        if any(isinstance(r.value, float) and not math.isfinite(r.value) for r in out.results):
            raise CalculationError(RESULT_TOO_LARGE)
        return out

    def summary(self) -> Dict[str, Any]:
        return {
            "id": self.id, "title": self.title, "description": self.description,
            "category": self.category, "tags": list(self.tags),
            "complexity": self.complexity.value, "input_count": len(self.inputs),
        }

    def to_dict(self) -> Dict[str, Any]:
        d = self.summary()
        d["formula"] = self.formula
        d["inputs"] = [f.to_dict() for f in self.inputs]
        return d
