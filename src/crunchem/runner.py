# -----------------------------------------------------------------------------
# Runner: one calculator invocation for a consumer (API / UI)
# Purpose:
#   Look up a calculator, coerce raw inputs, compute, and fold every failure
#   into a typed RunResult instead of an exception. A failing run never
#   returns partial results and never affects other calculators.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .catalog import Catalog, get_catalog
from .coerce import InputError, coerce_inputs
from .tracer import Tracer
from .types import CalculationError

logger = logging.getLogger(__name__)

@dataclass
class RunResult:
    # Structured response used by the API layer
    ok: bool
    calculator_id: str
    results: List[Dict[str, Any]] = field(default_factory=list)
    explanation: List[str] = field(default_factory=list)
    steps: List[str] = field(default_factory=list)
    trace: List[Dict[str, Any]] = field(default_factory=list)
    error: str | None = None
    error_kind: str | None = None  # "not_found" | "user_input" | "internal"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok, "calculator_id": self.calculator_id,
            "results": self.results, "explanation": self.explanation,
            "steps": self.steps, "trace": self.trace,
            "error": self.error, "error_kind": self.error_kind,
        }


def _jsonable(values: Mapping[str, Any]) -> Dict[str, Any]:
    # dates and other non-JSON scalars are traced as strings
    return {k: v if isinstance(v, (int, float, str, type(None))) else str(v)
            for k, v in values.items()}


def run_calculator(calculator_id: str, raw_inputs: Mapping[str, Any] | None,
                   catalog: Catalog | None = None) -> RunResult:
    """
    Run one calculator end to end.
      - unknown id          -> ok=False, error_kind="not_found"
      - CalculationError    -> ok=False, error_kind="user_input" (message kept)
      - anything else       -> ok=False, error_kind="internal" (logged)
    """
    catalog = catalog or get_catalog()
    trace = Tracer()
    calc = catalog.get(calculator_id)
    trace.add("lookup", calculator_id=calculator_id, found=calc is not None)
    if calc is None:
        return RunResult(ok=False, calculator_id=calculator_id, trace=trace.steps(),
                         error=f"Unknown calculator: {calculator_id}", error_kind="not_found")

    try:
        values = coerce_inputs(calc.inputs, raw_inputs)
        trace.add("coerce", values=_jsonable(values))
        out = calc.evaluate(values)
        trace.add("compute", results=len(out.results), steps=len(out.steps))
        logger.debug("Ran %s: %d results", calculator_id, len(out.results))
        payload = out.to_dict()
        return RunResult(ok=True, calculator_id=calculator_id,
                         results=payload["results"], explanation=payload["explanation"],
                         steps=payload["steps"], trace=trace.steps())
    except CalculationError as e:
        stage = "coerce" if isinstance(e, InputError) else "compute"
        trace.add("error", error_kind="user_input", stage=stage, message=str(e))
        logger.info("Rejected input for %s: %s", calculator_id, e)
        return RunResult(ok=False, calculator_id=calculator_id, trace=trace.steps(),
                         error=str(e), error_kind="user_input")
    except Exception as e:
        trace.add("error", error_kind="internal", message=str(e))
        logger.exception("Calculator %s failed unexpectedly", calculator_id)
        return RunResult(ok=False, calculator_id=calculator_id, trace=trace.steps(),
                         error="This calculator failed unexpectedly. Please check your inputs.",
                         error_kind="internal")
