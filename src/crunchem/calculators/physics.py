# -----------------------------------------------------------------------------
# Physics calculators
# Projectile motion, Newton's second law, kinetic energy, Ohm's law and the
# ideal gas law.
# Notes:
#   - Unit-bearing inputs are converted to SI with pint before any formula
#     runs; results are reported in SI (and imperial where it reads better).
#   - g is pint's standard_gravity, 9.80665 m/s².
# -----------------------------------------------------------------------------

from __future__ import annotations
from enum import Enum
from math import sqrt
from typing import Any, Dict, List

from ..types import CalculationError, CalculationResult, Calculator, Complexity, ResultFormat
from ..units import (LengthUnit, MassUnit, SpeedUnit, TemperatureUnit, convert_scalar, lookup_table,
                     select_options, standard_gravity, symbol)
from .common import fixed, num, number, result, select

CATEGORY = "Physics"

D = ResultFormat.DECIMAL


class System(str, Enum):
    SI = "si"
    IMPERIAL = "imperial"

SYSTEM_OPTIONS = select_options(System, {System.SI: "Metric (m, m/s)", System.IMPERIAL: "Imperial (ft, ft/s)"})
SYSTEM_LENGTH = lookup_table(System, {System.SI: LengthUnit.M, System.IMPERIAL: LengthUnit.FT})
SYSTEM_SPEED = lookup_table(System, {System.SI: SpeedUnit.MPS, System.IMPERIAL: SpeedUnit.FPS})

HEIGHT_UNITS = (LengthUnit.M, LengthUnit.FT)
HEIGHT_OPTIONS = tuple((u.value, label) for u, label in zip(HEIGHT_UNITS, ("Meters (m)", "Feet (ft)")))

SPEED_OPTIONS = select_options(SpeedUnit, {
    SpeedUnit.MPS: "Meters per second (m/s)", SpeedUnit.KPH: "Kilometers per hour (km/h)",
    SpeedUnit.MPH: "Miles per hour (mph)", SpeedUnit.FPS: "Feet per second (ft/s)",
})

MASS_UNITS = (MassUnit.KG, MassUnit.G, MassUnit.LB)
MASS_OPTIONS = tuple((u.value, label) for u, label in zip(MASS_UNITS, ("Kilograms (kg)", "Grams (g)", "Pounds (lb)")))


def _need(v: Dict[str, Any], target: str, *ids: str) -> None:
    missing = [fid.replace("_", " ") for fid in ids if v[fid] is None]
    if missing:
        verb = "is" if len(missing) == 1 else "are"
        raise CalculationError(f"{' and '.join(missing).capitalize()} {verb} required to solve for {target}")


# ---- projectile motion -------------------------------------------------------

def projectile_horizontal_calculate(v: Dict[str, Any]) -> CalculationResult:
    height, speed = v["height"], v["launch_speed"]
    h_unit, s_unit = LengthUnit(v["height_unit"]), SpeedUnit(v["speed_unit"])
    system = System(v["output_system"])
    if height < 0 or speed < 0:
        raise CalculationError("Height and speed cannot be negative")
    g = standard_gravity()
    h_m = convert_scalar(height, h_unit, LengthUnit.M)
    vx = convert_scalar(speed, s_unit, SpeedUnit.MPS)
    t = sqrt(2 * h_m / g)
    reach = vx * t
    vy = g * t
    impact = sqrt(vx ** 2 + vy ** 2)

    out_len, out_speed = SYSTEM_LENGTH[system], SYSTEM_SPEED[system]
    reach_out = convert_scalar(reach, LengthUnit.M, out_len)
    impact_out = convert_scalar(impact, SpeedUnit.MPS, out_speed)
    return CalculationResult(
        results=[result(round(t, 4), "Time of Flight", "s", D),
                 result(round(reach_out, 4), "Horizontal Range", symbol(out_len), D),
                 result(round(impact_out, 4), "Impact Speed", symbol(out_speed), D)],
        explanation=[f"Launched horizontally at {num(speed)} {symbol(s_unit)} from {num(height)} {symbol(h_unit)}",
                     "Horizontal speed stays constant while gravity accelerates the fall"],
        steps=[f"Convert: h = {fixed(h_m, 4)} m, vₓ = {fixed(vx, 4)} m/s",
               f"Time to fall: t = √(2h/g) = √(2 × {fixed(h_m, 4)} / {g}) = {fixed(t, 4)} s",
               f"Range: x = vₓ × t = {fixed(vx, 4)} × {fixed(t, 4)} = {fixed(reach, 4)} m",
               f"Impact speed: √(vₓ² + (g·t)²) = {fixed(impact, 4)} m/s"],
    )


def projectile_vertical_calculate(v: Dict[str, Any]) -> CalculationResult:
    speed, s_unit = v["initial_speed"], SpeedUnit(v["speed_unit"])
    h0, h_unit = v["initial_height"] or 0.0, LengthUnit(v["height_unit"])
    system = System(v["output_system"])
    if speed < 0 or h0 < 0:
        raise CalculationError("Speed and height cannot be negative")
    g = standard_gravity()
    v0 = convert_scalar(speed, s_unit, SpeedUnit.MPS)
    y0 = convert_scalar(h0, h_unit, LengthUnit.M)
    rise = v0 ** 2 / (2 * g)
    peak = y0 + rise
    t_up = v0 / g
    t_total = (v0 + sqrt(v0 ** 2 + 2 * g * y0)) / g

    out_len = SYSTEM_LENGTH[system]
    peak_out = convert_scalar(peak, LengthUnit.M, out_len)
    return CalculationResult(
        results=[result(round(peak_out, 4), "Maximum Height", symbol(out_len), D),
                 result(round(t_up, 4), "Time to Peak", "s", D),
                 result(round(t_total, 4), "Total Flight Time", "s", D)],
        explanation=[f"Thrown straight up at {num(speed)} {symbol(s_unit)} from {num(h0)} {symbol(h_unit)}",
                     f"Reaches {fixed(peak_out)} {symbol(out_len)} before falling back to the ground"],
        steps=[f"Convert: v₀ = {fixed(v0, 4)} m/s, h₀ = {fixed(y0, 4)} m",
               f"Rise: v₀²/2g = {fixed(v0, 4)}² / (2 × {g}) = {fixed(rise, 4)} m",
               f"Maximum height: h₀ + rise = {fixed(peak, 4)} m",
               f"Time to peak: v₀/g = {fixed(t_up, 4)} s",
               f"Flight time: (v₀ + √(v₀² + 2g·h₀)) / g = {fixed(t_total, 4)} s"],
    )


# ---- dynamics ----------------------------------------------------------------

class NewtonTarget(str, Enum):
    FORCE = "force"
    MASS = "mass"
    ACCELERATION = "acceleration"

NEWTON_OPTIONS = select_options(NewtonTarget, {
    NewtonTarget.FORCE: "Force (F = m × a)", NewtonTarget.MASS: "Mass (m = F ÷ a)",
    NewtonTarget.ACCELERATION: "Acceleration (a = F ÷ m)",
})


def newton_calculate(v: Dict[str, Any]) -> CalculationResult:
    target = NewtonTarget(v["solve_for"])
    unit = MassUnit(v["mass_unit"])
    if target is NewtonTarget.FORCE:
        _need(v, "force", "mass", "acceleration")
        m = convert_scalar(v["mass"], unit, MassUnit.KG)
        a = v["acceleration"]
        f = m * a
        step = f"F = m × a = {fixed(m, 4)} kg × {num(a)} m/s² = {fixed(f, 4)} N"
    elif target is NewtonTarget.MASS:
        _need(v, "mass", "force", "acceleration")
        f, a = v["force"], v["acceleration"]
        if a == 0:
            raise CalculationError("Acceleration cannot be zero when solving for mass")
        m = f / a
        if m < 0:
            raise CalculationError("Force and acceleration must point the same way")
        step = f"m = F ÷ a = {num(f)} N ÷ {num(a)} m/s² = {fixed(m, 4)} kg"
    else:
        _need(v, "acceleration", "force", "mass")
        m = convert_scalar(v["mass"], unit, MassUnit.KG)
        if m <= 0:
            raise CalculationError("Mass must be greater than zero")
        f = v["force"]
        a = f / m
        step = f"a = F ÷ m = {num(f)} N ÷ {fixed(m, 4)} kg = {fixed(a, 4)} m/s²"

    pounds_force = convert_scalar(f, "newton", "force_pound")
    return CalculationResult(
        results=[result(round(f, 4), "Force", "N", D),
                 result(round(pounds_force, 4), "Force (imperial)", "lbf", D),
                 result(round(m, 4), "Mass", "kg", D),
                 result(round(a, 4), "Acceleration", "m/s²", D)],
        explanation=[f"Solving Newton's second law for {target.value}",
                     "Force equals mass times acceleration"],
        steps=["Formula: F = m × a", step, f"In pounds-force: {fixed(pounds_force, 4)} lbf"],
    )


def kinetic_energy_calculate(v: Dict[str, Any]) -> CalculationResult:
    mass, m_unit = v["mass"], MassUnit(v["mass_unit"])
    speed, s_unit = v["velocity"], SpeedUnit(v["speed_unit"])
    if mass < 0:
        raise CalculationError("Mass cannot be negative")
    m = convert_scalar(mass, m_unit, MassUnit.KG)
    vel = convert_scalar(speed, s_unit, SpeedUnit.MPS)
    ke = 0.5 * m * vel ** 2
    p = m * vel
    return CalculationResult(
        results=[result(round(ke, 4), "Kinetic Energy", "J", D),
                 result(round(ke / 1000, 6), "Kinetic Energy (kJ)", "kJ", D),
                 result(round(convert_scalar(ke, "joule", "kilocalorie"), 6), "Energy in Food Calories", "kcal", D),
                 result(round(p, 4), "Momentum", "kg·m/s", D)],
        explanation=[f"{num(mass)} {symbol(m_unit)} moving at {num(speed)} {symbol(s_unit)}",
                     "Doubling the speed quadruples the kinetic energy"],
        steps=[f"Convert: m = {fixed(m, 4)} kg, v = {fixed(vel, 4)} m/s",
               f"KE = ½ × m × v² = 0.5 × {fixed(m, 4)} × {fixed(vel, 4)}² = {fixed(ke, 4)} J",
               f"Momentum: p = m × v = {fixed(p, 4)} kg·m/s"],
    )


# ---- electricity & gases -----------------------------------------------------

class OhmTarget(str, Enum):
    VOLTAGE = "voltage"
    CURRENT = "current"
    RESISTANCE = "resistance"

OHM_OPTIONS = select_options(OhmTarget, {
    OhmTarget.VOLTAGE: "Voltage (V = I × R)", OhmTarget.CURRENT: "Current (I = V ÷ R)",
    OhmTarget.RESISTANCE: "Resistance (R = V ÷ I)",
})


def ohms_law_calculate(v: Dict[str, Any]) -> CalculationResult:
    target = OhmTarget(v["solve_for"])
    if target is OhmTarget.VOLTAGE:
        _need(v, "voltage", "current", "resistance")
        i, r = v["current"], v["resistance"]
        volts = i * r
        step = f"V = I × R = {num(i)} A × {num(r)} Ω = {fixed(volts, 4)} V"
    elif target is OhmTarget.CURRENT:
        _need(v, "current", "voltage", "resistance")
        volts, r = v["voltage"], v["resistance"]
        if r == 0:
            raise CalculationError("Resistance cannot be zero")
        i = volts / r
        step = f"I = V ÷ R = {num(volts)} V ÷ {num(r)} Ω = {fixed(i, 4)} A"
    else:
        _need(v, "resistance", "voltage", "current")
        volts, i = v["voltage"], v["current"]
        if i == 0:
            raise CalculationError("Current cannot be zero")
        r = volts / i
        step = f"R = V ÷ I = {num(volts)} V ÷ {num(i)} A = {fixed(r, 4)} Ω"
    power = volts * i
    return CalculationResult(
        results=[result(round(volts, 4), "Voltage", "V", D),
                 result(round(i, 4), "Current", "A", D),
                 result(round(r, 4), "Resistance", "Ω", D),
                 result(round(power, 4), "Power", "W", D)],
        explanation=[f"Solving Ohm's law for {target.value}", f"The circuit dissipates {fixed(power)} W"],
        steps=["Formula: V = I × R", step, f"Power: P = V × I = {fixed(power, 4)} W"],
    )


# kPa·L/(mol·K)
GAS_CONSTANT = 8.314462618


class GasTarget(str, Enum):
    PRESSURE = "pressure"
    VOLUME = "volume"
    MOLES = "moles"
    TEMPERATURE = "temperature"

GAS_OPTIONS = select_options(GasTarget, {
    GasTarget.PRESSURE: "Pressure (P = nRT ÷ V)", GasTarget.VOLUME: "Volume (V = nRT ÷ P)",
    GasTarget.MOLES: "Amount (n = PV ÷ RT)", GasTarget.TEMPERATURE: "Temperature (T = PV ÷ nR)",
})

TEMPERATURE_OPTIONS = select_options(TemperatureUnit, {
    TemperatureUnit.CELSIUS: "Celsius (°C)", TemperatureUnit.FAHRENHEIT: "Fahrenheit (°F)",
    TemperatureUnit.KELVIN: "Kelvin (K)",
})


def _positive(value: float, label: str) -> float:
    if value <= 0:
        raise CalculationError(f"{label} must be greater than zero")
    return value


def ideal_gas_calculate(v: Dict[str, Any]) -> CalculationResult:
    target = GasTarget(v["solve_for"])
    t_unit = TemperatureUnit(v["temperature_unit"])
    given = {
        GasTarget.PRESSURE: ("pressure", "volume", "moles", "temperature"),
        GasTarget.VOLUME: ("volume", "pressure", "moles", "temperature"),
        GasTarget.MOLES: ("moles", "pressure", "volume", "temperature"),
        GasTarget.TEMPERATURE: ("temperature", "pressure", "volume", "moles"),
    }[target]
    _need(v, given[0], *given[1:])

    if target is not GasTarget.TEMPERATURE:
        t = _positive(convert_scalar(v["temperature"], t_unit, TemperatureUnit.KELVIN), "Absolute temperature")
    if target is not GasTarget.PRESSURE:
        p = _positive(v["pressure"], "Pressure")
    if target is not GasTarget.VOLUME:
        vol = _positive(v["volume"], "Volume")
    if target is not GasTarget.MOLES:
        n = _positive(v["moles"], "Amount of gas")

    r = GAS_CONSTANT
    if target is GasTarget.PRESSURE:
        p = n * r * t / vol
        step = f"P = nRT ÷ V = {num(n)} × {r} × {fixed(t)} ÷ {num(vol)} = {fixed(p, 4)} kPa"
    elif target is GasTarget.VOLUME:
        vol = n * r * t / p
        step = f"V = nRT ÷ P = {num(n)} × {r} × {fixed(t)} ÷ {num(p)} = {fixed(vol, 4)} L"
    elif target is GasTarget.MOLES:
        n = p * vol / (r * t)
        step = f"n = PV ÷ RT = {num(p)} × {num(vol)} ÷ ({r} × {fixed(t)}) = {fixed(n, 4)} mol"
    else:
        t = p * vol / (n * r)
        step = f"T = PV ÷ nR = {num(p)} × {num(vol)} ÷ ({num(n)} × {r}) = {fixed(t, 4)} K"

    shown_t = convert_scalar(t, TemperatureUnit.KELVIN, t_unit)
    return CalculationResult(
        results=[result(round(p, 4), "Pressure", "kPa", D),
                 result(round(vol, 4), "Volume", "L", D),
                 result(round(n, 4), "Amount of Gas", "mol", D),
                 result(round(t, 2), "Temperature", "K", D),
                 result(round(shown_t, 2), f"Temperature ({symbol(t_unit)})", symbol(t_unit), D)],
        explanation=[f"Solving the ideal gas law for {target.value}",
                     f"R = {r} kPa·L/(mol·K); temperature is absolute (kelvin) inside the formula"],
        steps=["Formula: PV = nRT", f"Temperature: {fixed(t)} K", step],
    )


PHYSICS: List[Calculator] = [
    Calculator(
        id="projectile-horizontal",
        title="Horizontal Projectile Calculator",
        description="Find flight time, range and impact speed of an object launched horizontally from a height.",
        category=CATEGORY,
        inputs=(
            number("height", "Launch Height", min=0, step=0.1, placeholder="Height above ground"),
            select("height_unit", "Height Unit", HEIGHT_OPTIONS, default=LengthUnit.M.value),
            number("launch_speed", "Launch Speed", min=0, step=0.1, placeholder="Horizontal speed"),
            select("speed_unit", "Speed Unit", SPEED_OPTIONS, default=SpeedUnit.MPS.value),
            select("output_system", "Report Results In", SYSTEM_OPTIONS, default=System.SI.value),
        ),
        formula="t = √(2h ÷ g), Range = v × t",
        compute=projectile_horizontal_calculate,
        tags=("projectile", "kinematics", "gravity", "range", "motion"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="projectile-vertical",
        title="Vertical Launch Calculator",
        description="Find the maximum height and flight time of an object thrown straight up.",
        category=CATEGORY,
        inputs=(
            number("initial_speed", "Initial Speed", min=0, step=0.1, placeholder="Upward speed"),
            select("speed_unit", "Speed Unit", SPEED_OPTIONS, default=SpeedUnit.MPS.value),
            number("initial_height", "Initial Height", required=False, min=0, step=0.1, default=0,
                   placeholder="Height above ground"),
            select("height_unit", "Height Unit", HEIGHT_OPTIONS, default=LengthUnit.M.value),
            select("output_system", "Report Results In", SYSTEM_OPTIONS, default=System.SI.value),
        ),
        formula="h_max = h₀ + v² ÷ 2g",
        compute=projectile_vertical_calculate,
        tags=("projectile", "kinematics", "gravity", "height", "motion"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="newtons-second-law",
        title="Newton's Second Law Calculator",
        description="Solve F = m × a for force, mass or acceleration.",
        category=CATEGORY,
        inputs=(
            select("solve_for", "Solve For", NEWTON_OPTIONS),
            number("force", "Force (N)", required=False, step=0.01, placeholder="Net force"),
            number("mass", "Mass", required=False, min=0, step=0.01, placeholder="Object mass"),
            select("mass_unit", "Mass Unit", MASS_OPTIONS, default=MassUnit.KG.value),
            number("acceleration", "Acceleration (m/s²)", required=False, step=0.01, placeholder="Acceleration"),
        ),
        formula="F = m × a",
        compute=newton_calculate,
        tags=("force", "mass", "acceleration", "newton", "dynamics"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="kinetic-energy",
        title="Kinetic Energy Calculator",
        description="Calculate the kinetic energy and momentum of a moving object.",
        category=CATEGORY,
        inputs=(
            number("mass", "Mass", min=0, step=0.01, placeholder="Object mass"),
            select("mass_unit", "Mass Unit", MASS_OPTIONS, default=MassUnit.KG.value),
            number("velocity", "Velocity", step=0.01, placeholder="Object speed"),
            select("speed_unit", "Speed Unit", SPEED_OPTIONS, default=SpeedUnit.MPS.value),
        ),
        formula="KE = ½ × m × v²",
        compute=kinetic_energy_calculate,
        tags=("energy", "kinetic", "momentum", "mass", "velocity"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="ohms-law",
        title="Ohm's Law Calculator",
        description="Solve for voltage, current or resistance and the power dissipated.",
        category=CATEGORY,
        inputs=(
            select("solve_for", "Solve For", OHM_OPTIONS),
            number("voltage", "Voltage (V)", required=False, step=0.01, placeholder="Volts"),
            number("current", "Current (A)", required=False, step=0.001, placeholder="Amperes"),
            number("resistance", "Resistance (Ω)", required=False, min=0, step=0.01, placeholder="Ohms"),
        ),
        formula="V = I × R, P = V × I",
        compute=ohms_law_calculate,
        tags=("electricity", "voltage", "current", "resistance", "circuit", "power"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="ideal-gas-law",
        title="Ideal Gas Law Calculator",
        description="Solve PV = nRT for pressure, volume, amount of gas or temperature.",
        category=CATEGORY,
        inputs=(
            select("solve_for", "Solve For", GAS_OPTIONS),
            number("pressure", "Pressure (kPa)", required=False, min=0, step=0.01, placeholder="e.g., 101.325"),
            number("volume", "Volume (L)", required=False, min=0, step=0.01, placeholder="e.g., 22.4"),
            number("moles", "Amount of Gas (mol)", required=False, min=0, step=0.001, placeholder="e.g., 1"),
            number("temperature", "Temperature", required=False, step=0.01, placeholder="e.g., 25"),
            select("temperature_unit", "Temperature Unit", TEMPERATURE_OPTIONS,
                   default=TemperatureUnit.CELSIUS.value),
        ),
        formula="PV = nRT, R = 8.314 kPa·L/(mol·K)",
        compute=ideal_gas_calculate,
        tags=("gas", "pressure", "volume", "temperature", "chemistry", "thermodynamics"),
        complexity=Complexity.ADVANCED,
    ),
]
