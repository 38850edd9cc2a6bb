# -----------------------------------------------------------------------------
# Units & lookup tables
# Purpose:
#   Closed sets of option identifiers (Enum) with exhaustive mappings, and
#   pint-backed conversion between the physical units calculators offer.
# Scope:
#   - lookup_table() refuses incomplete or over-complete tables at import, so
#     an unsupported key can never reach a compute function.
#   - select_options() derives form options from the same enum.
#   - Conversions use one shared pint UnitRegistry.
# Safety:
#   - Raises UnitError on incomplete tables, unknown units or dimension mismatch.
# -----------------------------------------------------------------------------

from __future__ import annotations
from enum import Enum
from typing import Dict, Mapping, Tuple, Type, TypeVar

import pint
from pint import UnitRegistry

from .types import InputOption

class UnitError(Exception): pass

E = TypeVar("E", bound=Enum)
V = TypeVar("V")

_UR = UnitRegistry(autoconvert_offset_to_baseunit=True)
_Q_ = _UR.Quantity


def lookup_table(enum_cls: Type[E], mapping: Mapping[E, V], name: str | None = None) -> Dict[E, V]:
    """
    Validate that `mapping` covers every member of `enum_cls` and nothing else.
    Returns a plain dict keyed by enum members.
    """
    label = name or enum_cls.__name__
    missing = [m.value for m in enum_cls if m not in mapping]
    extra = [k for k in mapping if not isinstance(k, enum_cls)]
    if missing:
        raise UnitError(f"{label} table is missing entries for: {', '.join(map(str, missing))}")
    if extra:
        raise UnitError(f"{label} table has keys outside {enum_cls.__name__}: {extra}")
    return dict(mapping)


def select_options(enum_cls: Type[E], labels: Mapping[E, str]) -> Tuple[InputOption, ...]:
    """Form options in enum declaration order, one per member."""
    table = lookup_table(enum_cls, labels, f"{enum_cls.__name__} labels")
    return tuple(InputOption(value=str(m.value), label=table[m]) for m in enum_cls)


# ---- Unit enumerations ------------------------------------------------------
# Each member's value is the option id shown to the form; the table maps it
# to a pint unit expression.

class LengthUnit(str, Enum):
    MM = "mm"
    CM = "cm"
    M = "m"
    KM = "km"
    IN = "in"
    FT = "ft"
    YD = "yd"
    MI = "mi"


class MassUnit(str, Enum):
    MG = "mg"
    G = "g"
    KG = "kg"
    OZ = "oz"
    LB = "lb"
    TON = "ton"


class VolumeUnit(str, Enum):
    ML = "ml"
    L = "l"
    TSP = "tsp"
    TBSP = "tbsp"
    CUP = "cup"
    FL_OZ = "fl_oz"
    PT = "pt"
    QT = "qt"
    GAL = "gal"


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"


class SpeedUnit(str, Enum):
    MPS = "m/s"
    KPH = "km/h"
    MPH = "mph"
    FPS = "ft/s"


PINT_UNITS: Dict[Enum, str] = {}
PINT_UNITS.update(lookup_table(LengthUnit, {
    LengthUnit.MM: "millimeter", LengthUnit.CM: "centimeter", LengthUnit.M: "meter",
    LengthUnit.KM: "kilometer", LengthUnit.IN: "inch", LengthUnit.FT: "foot",
    LengthUnit.YD: "yard", LengthUnit.MI: "mile",
}))
PINT_UNITS.update(lookup_table(MassUnit, {
    MassUnit.MG: "milligram", MassUnit.G: "gram", MassUnit.KG: "kilogram",
    MassUnit.OZ: "ounce", MassUnit.LB: "pound", MassUnit.TON: "metric_ton",
}))
PINT_UNITS.update(lookup_table(VolumeUnit, {
    VolumeUnit.ML: "milliliter", VolumeUnit.L: "liter", VolumeUnit.TSP: "teaspoon",
    VolumeUnit.TBSP: "tablespoon", VolumeUnit.CUP: "cup", VolumeUnit.FL_OZ: "fluid_ounce",
    VolumeUnit.PT: "pint", VolumeUnit.QT: "quart", VolumeUnit.GAL: "gallon",
}))
PINT_UNITS.update(lookup_table(TemperatureUnit, {
    TemperatureUnit.CELSIUS: "degC", TemperatureUnit.FAHRENHEIT: "degF",
    TemperatureUnit.KELVIN: "kelvin",
}))
PINT_UNITS.update(lookup_table(SpeedUnit, {
    SpeedUnit.MPS: "meter / second", SpeedUnit.KPH: "kilometer / hour",
    SpeedUnit.MPH: "mile / hour", SpeedUnit.FPS: "foot / second",
}))

UNIT_SYMBOLS: Dict[Enum, str] = {
    TemperatureUnit.CELSIUS: "°C", TemperatureUnit.FAHRENHEIT: "°F", TemperatureUnit.KELVIN: "K",
}


def symbol(unit: Enum) -> str:
    return UNIT_SYMBOLS.get(unit, str(unit.value))


def pint_unit(unit: Enum | str) -> str:
    if isinstance(unit, Enum):
        if unit not in PINT_UNITS:
            raise UnitError(f"No pint mapping for {unit!r}")
        return PINT_UNITS[unit]
    return unit


def quantity(value: float, unit: Enum | str):
    return _Q_(value, pint_unit(unit))


def convert_scalar(value: float, from_unit: Enum | str, to_unit: Enum | str) -> float:
    """Convert a bare number between two units (enum members or pint expressions)."""
    try:
        return float(quantity(value, from_unit).to(pint_unit(to_unit)).magnitude)
    except pint.DimensionalityError as e:
        raise UnitError(f"Cannot convert {_name(from_unit)} to {_name(to_unit)}") from e
    except pint.UndefinedUnitError as e:
        raise UnitError(f"Unknown unit: {e}") from e


def _name(unit: Enum | str) -> str:
    return str(unit.value) if isinstance(unit, Enum) else unit


def standard_gravity(imperial: bool = False) -> float:
    g = _Q_(1, "standard_gravity")
    return float(g.to("ft/s**2").magnitude if imperial else g.to("m/s**2").magnitude)
