import pytest

from crunchem.catalog import get_catalog
from crunchem.types import CalculationError


def _run(calc_id, **inputs):
    return get_catalog().get(calc_id).calculate(inputs)


def _values(res):
    return {r.label: r.value for r in res.results}


def test_horizontal_projectile_si():
    out = _values(_run("projectile-horizontal", height="19.6133", launch_speed="10"))
    assert out["Time of Flight"] == pytest.approx(2.0)
    assert out["Horizontal Range"] == pytest.approx(20.0)
    assert out["Impact Speed"] == pytest.approx((10 ** 2 + 19.6133 ** 2) ** 0.5, rel=1e-4)


def test_horizontal_projectile_imperial_output():
    res = _run("projectile-horizontal", height="19.6133", launch_speed="10", output_system="imperial")
    out = _values(res)
    assert out["Horizontal Range"] == pytest.approx(65.6168, rel=1e-4)
    assert res.results[1].unit == "ft"


def test_horizontal_projectile_unit_inputs():
    # 36 km/h is 10 m/s
    out = _values(_run("projectile-horizontal", height="19.6133", launch_speed="36", speed_unit="km/h"))
    assert out["Horizontal Range"] == pytest.approx(20.0)


def test_vertical_launch():
    out = _values(_run("projectile-vertical", initial_speed="9.80665"))
    assert out["Maximum Height"] == pytest.approx(4.903325, rel=1e-4)
    assert out["Time to Peak"] == pytest.approx(1.0)
    assert out["Total Flight Time"] == pytest.approx(2.0)


def test_vertical_launch_from_height():
    out = _values(_run("projectile-vertical", initial_speed="0", initial_height="4.903325"))
    assert out["Maximum Height"] == pytest.approx(4.903325, rel=1e-4)
    assert out["Total Flight Time"] == pytest.approx(1.0, rel=1e-4)


def test_newton_force():
    out = _values(_run("newtons-second-law", solve_for="force", mass="2", acceleration="3"))
    assert out["Force"] == 6
    assert out["Force (imperial)"] == pytest.approx(1.3489, rel=1e-3)


def test_newton_mass_and_acceleration():
    assert _values(_run("newtons-second-law", solve_for="mass", force="10", acceleration="2"))["Mass"] == 5
    out = _values(_run("newtons-second-law", solve_for="acceleration", force="10", mass="500", mass_unit="g"))
    assert out["Acceleration"] == 20


def test_newton_missing_and_invalid_inputs():
    with pytest.raises(CalculationError, match="Mass is required to solve for force"):
        _run("newtons-second-law", solve_for="force", acceleration="3")
    with pytest.raises(CalculationError, match="Force and acceleration are required"):
        _run("newtons-second-law", solve_for="mass")
    with pytest.raises(CalculationError, match="Acceleration cannot be zero"):
        _run("newtons-second-law", solve_for="mass", force="10", acceleration="0")
    with pytest.raises(CalculationError, match="Mass must be greater than zero"):
        _run("newtons-second-law", solve_for="acceleration", force="10", mass="0")


def test_kinetic_energy():
    out = _values(_run("kinetic-energy", mass="2", velocity="3"))
    assert out["Kinetic Energy"] == 9
    assert out["Momentum"] == 6
    assert out["Energy in Food Calories"] == pytest.approx(9 / 4184, rel=1e-3)


def test_kinetic_energy_units():
    out = _values(_run("kinetic-energy", mass="1000", mass_unit="g", velocity="36", speed_unit="km/h"))
    assert out["Kinetic Energy"] == pytest.approx(50)


def test_ohms_law():
    out = _values(_run("ohms-law", solve_for="current", voltage="12", resistance="4"))
    assert out["Current"] == 3
    assert out["Power"] == 36
    assert _values(_run("ohms-law", solve_for="voltage", current="2", resistance="5"))["Voltage"] == 10
    assert _values(_run("ohms-law", solve_for="resistance", voltage="9", current="3"))["Resistance"] == 3


def test_ohms_law_zero_guards():
    with pytest.raises(CalculationError, match="Resistance cannot be zero"):
        _run("ohms-law", solve_for="current", voltage="12", resistance="0")
    with pytest.raises(CalculationError, match="Current cannot be zero"):
        _run("ohms-law", solve_for="resistance", voltage="12", current="0")


def test_ideal_gas_pressure():
    out = _values(_run("ideal-gas-law", solve_for="pressure", volume="22.4", moles="1", temperature="273.15",
                       temperature_unit="kelvin"))
    assert out["Pressure"] == pytest.approx(101.39, rel=1e-3)
    assert out["Temperature"] == pytest.approx(273.15)


def test_ideal_gas_temperature():
    out = _values(_run("ideal-gas-law", solve_for="temperature", pressure="101.325", volume="22.4", moles="1"))
    assert out["Temperature"] == pytest.approx(273.0, abs=0.1)
    assert out["Temperature (°C)"] == pytest.approx(-0.17, abs=0.1)


def test_ideal_gas_rejects_non_physical_values():
    with pytest.raises(CalculationError, match="Absolute temperature must be greater than zero"):
        _run("ideal-gas-law", solve_for="pressure", volume="1", moles="1", temperature="-300")
    with pytest.raises(CalculationError, match="Volume must be greater than zero"):
        _run("ideal-gas-law", solve_for="pressure", volume="0", moles="1", temperature="25")
    with pytest.raises(CalculationError, match="required to solve for volume"):
        _run("ideal-gas-law", solve_for="volume", moles="1", temperature="25")


def test_overflowing_energy_is_rejected():
    with pytest.raises(CalculationError, match="Result is too large to compute"):
        _run("kinetic-energy", mass="1e308", velocity="1e308")
