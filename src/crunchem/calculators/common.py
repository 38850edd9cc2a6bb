# -----------------------------------------------------------------------------
# Shared builders and formatters for the category modules
# Purpose: keep calculator declarations short and consistent (field
# constructors, number formatting for explanation/step strings).
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Any, Iterable, Sequence, Tuple

from ..types import FieldType, InputField, InputOption, ResultFormat, ResultValue


def number(id: str, label: str, *, required: bool = True, min: float | None = None,
           max: float | None = None, step: float | None = None, placeholder: str = "",
           default: float | None = None) -> InputField:
    return InputField(id=id, label=label, type=FieldType.NUMBER, required=required,
                      min=min, max=max, step=step, placeholder=placeholder,
                      default_value=default)


def text(id: str, label: str, *, required: bool = True, placeholder: str = "",
         default: str | None = None) -> InputField:
    return InputField(id=id, label=label, type=FieldType.TEXT, required=required,
                      placeholder=placeholder, default_value=default)


def date_input(id: str, label: str, *, required: bool = True, placeholder: str = "YYYY-MM-DD") -> InputField:
    return InputField(id=id, label=label, type=FieldType.DATE, required=required,
                      placeholder=placeholder)


def select(id: str, label: str, options: Iterable[Tuple[str, str]] | Sequence[InputOption], *,
           required: bool = True, default: str | None = None) -> InputField:
    opts = tuple(o if isinstance(o, InputOption) else InputOption(value=o[0], label=o[1])
                 for o in options)
    return InputField(id=id, label=label, type=FieldType.SELECT, required=required,
                      options=opts, default_value=default)


def result(value: Any, label: str, unit: str = "", format: ResultFormat | None = None) -> ResultValue:
    return ResultValue(value=value, label=label, unit=unit, format=format)


def num(x: float) -> str:
    """Render a number the way a person would type it: 2.0 -> '2', 2.5 -> '2.5'."""
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)


def fixed(x: float, places: int = 2) -> str:
    return f"{x:.{places}f}"


def money(x: float) -> str:
    return f"${x:,.2f}"


def hours_minutes(hours: float) -> str:
    h = int(hours)
    m = round((hours - h) * 60)
    if m == 60:
        h, m = h + 1, 0
    return f"{h}h {m}m" if h > 0 else f"{m}m"


def plural(n: float, word: str) -> str:
    return f"{num(n)} {word}" + ("" if n == 1 else "s")
