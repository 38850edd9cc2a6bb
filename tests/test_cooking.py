import pytest

from crunchem.catalog import get_catalog
from crunchem.calculators.cooking import gas_mark
from crunchem.types import CalculationError


def _run(calc_id, **inputs):
    return get_catalog().get(calc_id).calculate(inputs)


def _values(res):
    return {r.label: r.value for r in res.results}


def test_recipe_scaling():
    res = _run("recipe-scaling", original_servings="4", desired_servings="8", ingredient_amount="2.5",
               ingredient_unit="cups")
    out = _values(res)
    assert out["Scaled Amount"] == 5.0
    assert out["Scaling Factor"] == 2.0
    assert res.results[0].unit == "cups"


def test_recipe_scaling_rejects_zero_servings():
    with pytest.raises(CalculationError, match="at least 1"):
        _run("recipe-scaling", original_servings="0", desired_servings="8", ingredient_amount="1",
             ingredient_unit="cups")


def test_cooking_time_convection():
    out = _values(_run("cooking-time-converter", original_time="60", original_temp="350", new_temp="350",
                       oven_type="convection", altitude="sea_level"))
    assert out["Adjusted Cooking Time"] == 48


def test_cooking_time_hotter_oven_is_shorter():
    out = _values(_run("cooking-time-converter", original_time="60", original_temp="350", new_temp="400",
                       oven_type="conventional", altitude="sea_level"))
    assert out["Adjusted Cooking Time"] < 60


def test_substitution_ratios():
    out = _values(_run("ingredient-substitution", original_ingredient="butter", amount="1", unit="cups",
                       substitute="applesauce"))
    assert out["Substitute Amount"] == 0.5
    res = _run("ingredient-substitution", original_ingredient="milk", amount="2", unit="cups",
               substitute="agave")
    assert _values(res)["Conversion Ratio"] == 1


def test_substitution_note():
    res = _run("ingredient-substitution", original_ingredient="baking_powder", amount="4", unit="teaspoons",
               substitute="baking_soda")
    assert _values(res)["Substitute Amount"] == 1
    assert "acid" in res.explanation[1]


def test_nutrition_scales_by_quantity():
    out = _values(_run("nutritional-calculator", food_item="chicken_breast", quantity="2"))
    assert out["Total Calories"] == 330
    assert out["Protein"] == 62
    assert _values(_run("nutritional-calculator", food_item="banana", quantity=""))["Total Calories"] == 105


def test_serving_size():
    res = _run("serving-size-calculator", people_count="10", meal_type="main_course", food_category="meat",
               appetite="moderate")
    assert res.results[0].value == 6
    assert [(r.value, r.unit) for r in res.results[1:]] == [(60, "oz"), (3.75, "lbs"), (1701, "g")]


def test_gas_mark_lookup():
    assert gas_mark(350) == 4
    assert gas_mark(356) == 5
    assert gas_mark(600) == 10


def test_temperature_from_celsius():
    out = _values(_run("temperature-conversion", temperature="180", from_unit="celsius",
                       cooking_method="baking"))
    assert out == {"Fahrenheit": 356, "Celsius": 180, "Gas Mark": 5}


def test_temperature_from_gas_mark():
    out = _values(_run("temperature-conversion", temperature="4", from_unit="gas_mark",
                       cooking_method="baking"))
    assert out["Fahrenheit"] == 350
    assert out["Celsius"] == 177


def test_frying_advice():
    res = _run("temperature-conversion", temperature="360", from_unit="fahrenheit", cooking_method="frying")
    assert res.explanation[1] == "Perfect frying temperature"


def test_measurement_volume_to_volume():
    out = _values(_run("measurement-converter", amount="1", from_unit="cups", to_unit="tablespoons"))
    assert out["Converted Amount"] == pytest.approx(16)


def test_measurement_uses_density():
    water = _values(_run("measurement-converter", amount="1", from_unit="cups", to_unit="grams"))
    flour = _values(_run("measurement-converter", amount="1", from_unit="cups", to_unit="grams",
                         ingredient_type="flour"))
    assert water["Converted Amount"] == pytest.approx(236.6)
    assert flour["Converted Amount"] == pytest.approx(134.9)


def test_measurement_rejects_negative():
    with pytest.raises(CalculationError, match="non-negative"):
        _run("measurement-converter", amount="-1", from_unit="cups", to_unit="liters")


def test_baking_conversion():
    out = _values(_run("baking-conversion", recipe_type="cakes", ingredient="flour", amount="1", unit="cups",
                       altitude="sea_level"))
    assert out["Grams"] == 120
    assert out["Cups"] == 1
    assert "Altitude Adjusted" not in out


def test_baking_altitude_adjustment():
    out = _values(_run("baking-conversion", recipe_type="bread", ingredient="flour", amount="1", unit="cups",
                       altitude="high"))
    assert out["Altitude Adjusted"] == 125
    sugar = _values(_run("baking-conversion", recipe_type="cakes", ingredient="sugar", amount="200",
                         unit="grams", altitude="very_high"))
    assert sugar["Altitude Adjusted"] == 188
