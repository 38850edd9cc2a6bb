# -----------------------------------------------------------------------------
# Input coercion
# Purpose:
#   Turn raw form values (strings from the UI, JSON scalars from the API) into
#   typed values, one rule per field type, before a compute function runs.
#   Calculators can then assume numbers are floats, selects are one of their
#   option values and dates are datetime.date.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from datetime import date, datetime
from typing import Any, Dict, Iterable, Mapping

from .types import CalculationError, FieldType, InputField


class InputError(CalculationError):
    """Raised when a raw value does not satisfy its field schema."""


def _is_blank(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and raw.strip() == "")


def _fmt_bound(x: float) -> str:
    return f"{x:g}"


def _to_number(f: InputField, raw: Any) -> float:
    if isinstance(raw, bool):
        raise InputError(f"{f.label} must be a number")
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        try:
            value = float(str(raw).strip().replace(",", ""))
        except ValueError:
            raise InputError(f"{f.label} must be a number") from None
    if not math.isfinite(value):
        raise InputError(f"{f.label} must be a finite number")
    if f.min is not None and value < f.min:
        raise InputError(f"{f.label} must be at least {_fmt_bound(f.min)}")
    if f.max is not None and value > f.max:
        raise InputError(f"{f.label} must be at most {_fmt_bound(f.max)}")
    return value


def _to_select(f: InputField, raw: Any) -> str:
    value = str(raw).strip()
    if value not in f.option_values():
        raise InputError(f"{f.label} has no option '{value}'")
    return value


def _to_date(f: InputField, raw: Any) -> date:
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    try:
        return date.fromisoformat(str(raw).strip())
    except ValueError:
        raise InputError(f"{f.label} must be a date in YYYY-MM-DD format") from None


def coerce_value(f: InputField, raw: Any) -> Any:
    """Coerce one raw value. Blank values fall back to the default, then to None."""
    if _is_blank(raw):
        if f.default_value is not None:
            raw = f.default_value
        elif f.required:
            raise InputError(f"{f.label} is required")
        else:
            return None
    if f.type == FieldType.NUMBER:
        return _to_number(f, raw)
    if f.type == FieldType.SELECT:
        return _to_select(f, raw)
    if f.type == FieldType.DATE:
        return _to_date(f, raw)
    return str(raw)


def coerce_inputs(fields: Iterable[InputField], raw: Mapping[str, Any] | None) -> Dict[str, Any]:
    """
    Build a fresh {field_id: typed value} dict for every declared field.
    Keys in `raw` that no field declares are ignored; `raw` itself is never modified.
    """
    raw = raw or {}
    return {f.id: coerce_value(f, raw.get(f.id)) for f in fields}
