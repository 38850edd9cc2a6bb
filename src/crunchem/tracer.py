# -----------------------------------------------------------------------------
# Tracing utility
# Purpose:
#   Append-only collector for the events of one calculator run (lookup,
#   coercion, compute, error). Exported as plain dicts for API responses.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Dict, Any

@dataclass
class TraceStep:
    kind: str
    detail: Dict[str, Any]

class Tracer:
    def __init__(self): self._steps: List[TraceStep] = []
    def add(self, kind: str, **detail: Any): self._steps.append(TraceStep(kind, detail))
    def kinds(self) -> List[str]: return [s.kind for s in self._steps]
    def steps(self) -> List[Dict[str, Any]]:
        return [{"kind": s.kind, "detail": s.detail} for s in self._steps]
