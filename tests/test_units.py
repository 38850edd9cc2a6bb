from enum import Enum

import pytest

from crunchem.units import (LengthUnit, MassUnit, SpeedUnit, TemperatureUnit, UnitError,
                            convert_scalar, lookup_table, select_options, standard_gravity, symbol)


class Shade(str, Enum):
    LIGHT = "light"
    DARK = "dark"


def test_lookup_table_requires_every_member():
    table = lookup_table(Shade, {Shade.LIGHT: 1, Shade.DARK: 2})
    assert table[Shade.DARK] == 2
    with pytest.raises(UnitError, match="missing entries for: dark"):
        lookup_table(Shade, {Shade.LIGHT: 1})


def test_lookup_table_rejects_foreign_keys():
    with pytest.raises(UnitError, match="outside Shade"):
        lookup_table(Shade, {Shade.LIGHT: 1, Shade.DARK: 2, "grey": 3})


def test_select_options_follow_declaration_order():
    opts = select_options(Shade, {Shade.DARK: "Dark", Shade.LIGHT: "Light"})
    assert [(o.value, o.label) for o in opts] == [("light", "Light"), ("dark", "Dark")]


def test_length_and_mass_conversions():
    assert convert_scalar(1, LengthUnit.MI, LengthUnit.FT) == pytest.approx(5280)
    assert convert_scalar(1, MassUnit.KG, MassUnit.LB) == pytest.approx(2.20462, rel=1e-5)


def test_temperature_offsets():
    assert convert_scalar(100, TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT) == pytest.approx(212)
    assert convert_scalar(0, TemperatureUnit.CELSIUS, TemperatureUnit.KELVIN) == pytest.approx(273.15)


def test_speed_conversion():
    assert convert_scalar(36, SpeedUnit.KPH, SpeedUnit.MPS) == pytest.approx(10)


def test_dimension_mismatch():
    with pytest.raises(UnitError, match="Cannot convert"):
        convert_scalar(1, LengthUnit.M, MassUnit.KG)


def test_symbols_and_gravity():
    assert symbol(TemperatureUnit.CELSIUS) == "°C"
    assert symbol(LengthUnit.FT) == "ft"
    assert standard_gravity() == pytest.approx(9.80665)
    assert standard_gravity(imperial=True) == pytest.approx(32.174, rel=1e-4)
