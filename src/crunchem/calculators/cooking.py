# -----------------------------------------------------------------------------
# Cooking calculators
# Recipe scaling, oven/altitude time adjustments, substitutions, nutrition,
# portions and kitchen unit conversions (volume/weight via pint + densities).
# -----------------------------------------------------------------------------

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, List, NamedTuple

from ..types import CalculationError, CalculationResult, Calculator, Complexity, ResultFormat
from ..units import MassUnit, TemperatureUnit, VolumeUnit, convert_scalar, lookup_table, select_options
from .common import fixed, num, number, result, select

CATEGORY = "Cooking"

D = ResultFormat.DECIMAL
INT = ResultFormat.INTEGER


def spaced(value: str) -> str:
    return value.replace("_", " ")


class Altitude(str, Enum):
    SEA_LEVEL = "sea_level"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"

ALTITUDE_OPTIONS = select_options(Altitude, {
    Altitude.SEA_LEVEL: "Sea Level (0-1000 ft)",
    Altitude.MODERATE: "Moderate (1000-3000 ft)",
    Altitude.HIGH: "High (3000-5000 ft)",
    Altitude.VERY_HIGH: "Very High (5000+ ft)",
})


# ---- recipe-scaling ----------------------------------------------------------

class RecipeUnit(str, Enum):
    CUPS = "cups"
    TABLESPOONS = "tablespoons"
    TEASPOONS = "teaspoons"
    OUNCES = "ounces"
    POUNDS = "pounds"
    GRAMS = "grams"
    KILOGRAMS = "kilograms"
    MILLILITERS = "milliliters"
    LITERS = "liters"

RECIPE_UNIT_OPTIONS = select_options(RecipeUnit, {u: spaced(u.value).title() for u in RecipeUnit})


def recipe_scaling_calculate(v: Dict[str, Any]) -> CalculationResult:
    original, desired = v["original_servings"], v["desired_servings"]
    amount, unit = v["ingredient_amount"], v["ingredient_unit"]
    factor = desired / original
    scaled = amount * factor
    return CalculationResult(
        results=[result(round(scaled, 2), "Scaled Amount", unit, D),
                 result(round(factor, 3), "Scaling Factor", "×", D)],
        explanation=[f"Scaling recipe from {num(original)} to {num(desired)} servings",
                     f"Each ingredient should be multiplied by {fixed(factor, 3)}"],
        steps=[f"Scaling Factor = {num(desired)} ÷ {num(original)} = {fixed(factor, 3)}",
               f"Scaled Amount = {num(amount)} × {fixed(factor, 3)} = {fixed(scaled)} {unit}"],
    )


# ---- cooking-time-converter --------------------------------------------------

class Oven(str, Enum):
    CONVENTIONAL = "conventional"
    CONVECTION = "convection"
    TOASTER_OVEN = "toaster_oven"

OVEN_OPTIONS = select_options(Oven, {
    Oven.CONVENTIONAL: "Conventional Oven",
    Oven.CONVECTION: "Convection Oven",
    Oven.TOASTER_OVEN: "Toaster Oven",
})

OVEN_FACTORS = lookup_table(Oven, {Oven.CONVENTIONAL: 1.0, Oven.CONVECTION: 0.8, Oven.TOASTER_OVEN: 0.9})

TIME_ALTITUDE_FACTORS = lookup_table(Altitude, {
    Altitude.SEA_LEVEL: 1.0, Altitude.MODERATE: 0.95, Altitude.HIGH: 0.9, Altitude.VERY_HIGH: 0.85,
})


def cooking_time_calculate(v: Dict[str, Any]) -> CalculationResult:
    minutes, old_temp, new_temp = v["original_time"], v["original_temp"], v["new_temp"]
    oven, altitude = Oven(v["oven_type"]), Altitude(v["altitude"])
    temp_factor = (old_temp / new_temp) ** 1.2
    oven_factor, alt_factor = OVEN_FACTORS[oven], TIME_ALTITUDE_FACTORS[altitude]
    adjusted = minutes * temp_factor * oven_factor * alt_factor
    change = round((1 - adjusted / minutes) * 100)
    return CalculationResult(
        results=[result(round(adjusted), "Adjusted Cooking Time", "minutes", INT),
                 result(new_temp, "New Temperature", "°F")],
        explanation=[f"Adjusted for {spaced(oven.value)} oven at {num(new_temp)}°F and {spaced(altitude.value)} altitude",
                     f"Time reduced by {change}% due to adjustments" if change >= 0
                     else f"Time increased by {-change}% due to adjustments"],
        steps=[f"Temperature factor: ({num(old_temp)}°F ÷ {num(new_temp)}°F)^1.2 = {fixed(temp_factor, 3)}",
               f"Oven factor: {num(oven_factor)}",
               f"Altitude factor: {num(alt_factor)}",
               f"Adjusted time: {num(minutes)} × {fixed(temp_factor, 3)} × {num(oven_factor)} × "
               f"{num(alt_factor)} = {fixed(adjusted, 1)} minutes"],
    )


# ---- ingredient-substitution -------------------------------------------------

class Ingredient(str, Enum):
    BUTTER = "butter"
    SUGAR = "sugar"
    BROWN_SUGAR = "brown_sugar"
    EGGS = "eggs"
    MILK = "milk"
    FLOUR = "flour"
    BAKING_POWDER = "baking_powder"
    VANILLA = "vanilla"
    HONEY = "honey"
    OIL = "oil"

INGREDIENT_OPTIONS = select_options(Ingredient, {
    Ingredient.BUTTER: "Butter", Ingredient.SUGAR: "White Sugar",
    Ingredient.BROWN_SUGAR: "Brown Sugar", Ingredient.EGGS: "Eggs",
    Ingredient.MILK: "Milk", Ingredient.FLOUR: "All-Purpose Flour",
    Ingredient.BAKING_POWDER: "Baking Powder", Ingredient.VANILLA: "Vanilla Extract",
    Ingredient.HONEY: "Honey", Ingredient.OIL: "Vegetable Oil",
})


class Substitute(str, Enum):
    APPLESAUCE = "applesauce"
    COCONUT_OIL = "coconut_oil"
    MAPLE_SYRUP = "maple_syrup"
    BANANA = "banana"
    ALMOND_MILK = "almond_milk"
    COCONUT_FLOUR = "coconut_flour"
    BAKING_SODA = "baking_soda"
    ALMOND_EXTRACT = "almond_extract"
    AGAVE = "agave"

SUBSTITUTE_OPTIONS = select_options(Substitute, {
    Substitute.APPLESAUCE: "Applesauce (for butter/oil)",
    Substitute.COCONUT_OIL: "Coconut Oil (for butter)",
    Substitute.MAPLE_SYRUP: "Maple Syrup (for sugar)",
    Substitute.BANANA: "Mashed Banana (for eggs/butter)",
    Substitute.ALMOND_MILK: "Almond Milk (for milk)",
    Substitute.COCONUT_FLOUR: "Coconut Flour (for flour)",
    Substitute.BAKING_SODA: "Baking Soda + Acid (for baking powder)",
    Substitute.ALMOND_EXTRACT: "Almond Extract (for vanilla)",
    Substitute.AGAVE: "Agave (for honey)",
})


class SubstitutionUnit(str, Enum):
    CUPS = "cups"
    TABLESPOONS = "tablespoons"
    TEASPOONS = "teaspoons"
    PIECES = "pieces"

SUBSTITUTION_UNIT_OPTIONS = select_options(SubstitutionUnit, {
    SubstitutionUnit.CUPS: "Cups", SubstitutionUnit.TABLESPOONS: "Tablespoons",
    SubstitutionUnit.TEASPOONS: "Teaspoons", SubstitutionUnit.PIECES: "Pieces/Items",
})

# Substitute amount per unit of original; pairs not listed swap 1:1
SUBSTITUTION_RATIOS: Dict[Ingredient, Dict[Substitute, float]] = {
    Ingredient.BUTTER: {Substitute.APPLESAUCE: 0.5, Substitute.COCONUT_OIL: 1, Substitute.BANANA: 0.5},
    Ingredient.SUGAR: {Substitute.MAPLE_SYRUP: 0.75, Substitute.AGAVE: 0.75},
    Ingredient.EGGS: {Substitute.BANANA: 0.25, Substitute.APPLESAUCE: 0.25},
    Ingredient.MILK: {Substitute.ALMOND_MILK: 1},
    Ingredient.FLOUR: {Substitute.COCONUT_FLOUR: 0.25},
    Ingredient.BAKING_POWDER: {Substitute.BAKING_SODA: 0.25},
    Ingredient.VANILLA: {Substitute.ALMOND_EXTRACT: 0.5},
    Ingredient.HONEY: {Substitute.AGAVE: 1, Substitute.MAPLE_SYRUP: 1},
    Ingredient.OIL: {Substitute.APPLESAUCE: 0.5, Substitute.BANANA: 0.5},
}

SUBSTITUTION_NOTES = {
    Substitute.BAKING_SODA: "Also add 1/2 tsp acid (lemon juice or vinegar) per 1 tsp baking powder replaced",
    Substitute.COCONUT_FLOUR: "Increase liquid ingredients by 15-25% when using coconut flour",
}


def substitution_calculate(v: Dict[str, Any]) -> CalculationResult:
    original, substitute = Ingredient(v["original_ingredient"]), Substitute(v["substitute"])
    amount, unit = v["amount"], v["unit"]
    ratio = SUBSTITUTION_RATIOS.get(original, {}).get(substitute, 1)
    sub_amount = amount * ratio
    note = SUBSTITUTION_NOTES.get(substitute, "Direct substitution - no additional adjustments needed")
    o, s = spaced(original.value), spaced(substitute.value)
    return CalculationResult(
        results=[result(round(sub_amount, 2), "Substitute Amount", unit, D),
                 result(ratio, "Conversion Ratio", ":1", D)],
        explanation=[f"Substituting {num(amount)} {unit} of {o} with {s}", note],
        steps=[f"Substitution ratio: 1 {unit} {o} = {num(ratio)} {unit} {s}",
               f"Required amount: {num(amount)} × {num(ratio)} = {fixed(sub_amount)} {unit}"],
    )


# ---- nutritional-calculator --------------------------------------------------

class Food(str, Enum):
    CHICKEN_BREAST = "chicken_breast"
    SALMON = "salmon"
    RICE = "rice"
    BROCCOLI = "broccoli"
    AVOCADO = "avocado"
    EGGS = "eggs"
    OLIVE_OIL = "olive_oil"
    BANANA = "banana"
    ALMONDS = "almonds"
    BREAD = "bread"


class Nutrition(NamedTuple):
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float

# Per serving, USDA reference values
NUTRITION = lookup_table(Food, {
    Food.CHICKEN_BREAST: Nutrition("Chicken Breast (100g)", 165, 31, 0, 3.6, 0),
    Food.SALMON: Nutrition("Salmon (100g)", 208, 22, 0, 12, 0),
    Food.RICE: Nutrition("White Rice (100g cooked)", 130, 2.7, 28, 0.3, 0.4),
    Food.BROCCOLI: Nutrition("Broccoli (100g)", 34, 2.8, 7, 0.4, 2.6),
    Food.AVOCADO: Nutrition("Avocado (100g)", 160, 2, 9, 15, 7),
    Food.EGGS: Nutrition("Eggs (1 large)", 68, 6, 0.6, 4.8, 0),
    Food.OLIVE_OIL: Nutrition("Olive Oil (1 tbsp)", 119, 0, 0, 13.5, 0),
    Food.BANANA: Nutrition("Banana (1 medium)", 105, 1.3, 27, 0.4, 3.1),
    Food.ALMONDS: Nutrition("Almonds (30g)", 173, 6.4, 6.1, 15, 3.4),
    Food.BREAD: Nutrition("Whole Wheat Bread (1 slice)", 81, 4, 14, 1.1, 2),
})

FOOD_OPTIONS = select_options(Food, {f: NUTRITION[f].name for f in Food})


def nutrition_calculate(v: Dict[str, Any]) -> CalculationResult:
    data = NUTRITION[Food(v["food_item"])]
    qty = v["quantity"]
    calories = data.calories * qty
    protein, carbs, fat, fiber = (x * qty for x in (data.protein, data.carbs, data.fat, data.fiber))
    if calories > 0:
        split = f"{protein * 4 / calories * 100:.0f}% protein, {carbs * 4 / calories * 100:.0f}% carbs, " \
                f"{fat * 9 / calories * 100:.0f}% fat"
    else:
        split = "0% protein, 0% carbs, 0% fat"
    return CalculationResult(
        results=[result(round(calories), "Total Calories", "cal", INT),
                 result(round(protein, 1), "Protein", "g", D),
                 result(round(carbs, 1), "Carbohydrates", "g", D),
                 result(round(fat, 1), "Fat", "g", D),
                 result(round(fiber, 1), "Fiber", "g", D)],
        explanation=[f"Nutritional breakdown for {num(qty)}× {data.name}",
                     f"Macronutrient distribution: {split}"],
        steps=[f"Base values per serving: {num(data.calories)} cal, {num(data.protein)}g protein, "
               f"{num(data.carbs)}g carbs, {num(data.fat)}g fat",
               f"Multiplied by quantity: {num(qty)}",
               f"Total calories: {num(data.calories)} × {num(qty)} = {calories:.0f} calories"],
    )


# ---- serving-size-calculator -------------------------------------------------

class Meal(str, Enum):
    APPETIZER = "appetizer"
    MAIN_COURSE = "main_course"
    SIDE_DISH = "side_dish"
    DESSERT = "dessert"
    BUFFET = "buffet"
    PARTY = "party"

MEAL_OPTIONS = select_options(Meal, {
    Meal.APPETIZER: "Appetizer/Snack", Meal.MAIN_COURSE: "Main Course",
    Meal.SIDE_DISH: "Side Dish", Meal.DESSERT: "Dessert",
    Meal.BUFFET: "Buffet Style", Meal.PARTY: "Party/Event",
})

MEAL_FACTORS = lookup_table(Meal, {
    Meal.APPETIZER: 0.5, Meal.MAIN_COURSE: 1, Meal.SIDE_DISH: 0.75,
    Meal.DESSERT: 0.6, Meal.BUFFET: 1.2, Meal.PARTY: 0.8,
})


class FoodGroup(str, Enum):
    MEAT = "meat"
    FISH = "fish"
    PASTA = "pasta"
    RICE = "rice"
    VEGETABLES = "vegetables"
    SALAD = "salad"
    BREAD = "bread"
    CHEESE = "cheese"

FOOD_GROUP_OPTIONS = select_options(FoodGroup, {
    FoodGroup.MEAT: "Meat/Poultry", FoodGroup.FISH: "Fish/Seafood", FoodGroup.PASTA: "Pasta",
    FoodGroup.RICE: "Rice/Grains", FoodGroup.VEGETABLES: "Vegetables", FoodGroup.SALAD: "Salad",
    FoodGroup.BREAD: "Bread/Rolls", FoodGroup.CHEESE: "Cheese",
})

# Ounces per person for a main course (pasta and rice are dry weight)
BASE_PORTIONS = lookup_table(FoodGroup, {
    FoodGroup.MEAT: 6, FoodGroup.FISH: 6, FoodGroup.PASTA: 4, FoodGroup.RICE: 2,
    FoodGroup.VEGETABLES: 4, FoodGroup.SALAD: 2, FoodGroup.BREAD: 1, FoodGroup.CHEESE: 2,
})


class Appetite(str, Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    HEARTY = "hearty"

APPETITE_OPTIONS = select_options(Appetite, {
    Appetite.LIGHT: "Light Eaters", Appetite.MODERATE: "Moderate Eaters", Appetite.HEARTY: "Hearty Eaters",
})

APPETITE_FACTORS = lookup_table(Appetite, {Appetite.LIGHT: 0.8, Appetite.MODERATE: 1, Appetite.HEARTY: 1.3})


def serving_size_calculate(v: Dict[str, Any]) -> CalculationResult:
    people = int(v["people_count"])
    meal, group, appetite = Meal(v["meal_type"]), FoodGroup(v["food_category"]), Appetite(v["appetite"])
    base, meal_f, app_f = BASE_PORTIONS[group], MEAL_FACTORS[meal], APPETITE_FACTORS[appetite]
    per_person = base * meal_f * app_f
    total_oz = per_person * people
    pounds = convert_scalar(total_oz, MassUnit.OZ, MassUnit.LB)
    grams = convert_scalar(total_oz, MassUnit.OZ, MassUnit.G)
    return CalculationResult(
        results=[result(round(per_person, 1), "Per Person", "oz", D),
                 result(round(total_oz, 1), "Total Amount", "oz", D),
                 result(round(pounds, 2), "Total Amount", "lbs", D),
                 result(round(grams), "Total Amount", "g", INT)],
        explanation=[f"Serving {people} {appetite.value} eaters for {spaced(meal.value)}",
                     f"Each person needs {fixed(per_person, 1)} oz of {group.value}"],
        steps=[f"Base serving: {num(base)} oz per person for {group.value}",
               f"Meal type factor: ×{num(meal_f)} ({spaced(meal.value)})",
               f"Appetite factor: ×{num(app_f)} ({appetite.value} eaters)",
               f"Per person: {num(base)} × {num(meal_f)} × {num(app_f)} = {fixed(per_person, 1)} oz",
               f"Total: {fixed(per_person, 1)} × {people} = {fixed(total_oz, 1)} oz"],
    )


# ---- temperature-conversion --------------------------------------------------

class OvenScale(str, Enum):
    FAHRENHEIT = "fahrenheit"
    CELSIUS = "celsius"
    GAS_MARK = "gas_mark"

OVEN_SCALE_OPTIONS = select_options(OvenScale, {
    OvenScale.FAHRENHEIT: "Fahrenheit (°F)", OvenScale.CELSIUS: "Celsius (°C)", OvenScale.GAS_MARK: "Gas Mark",
})


class Method(str, Enum):
    BAKING = "baking"
    BROILING = "broiling"
    SLOW_COOKING = "slow_cooking"
    FRYING = "frying"
    CANDY_MAKING = "candy_making"

METHOD_OPTIONS = select_options(Method, {
    Method.BAKING: "Baking/Roasting", Method.BROILING: "Broiling", Method.SLOW_COOKING: "Slow Cooking",
    Method.FRYING: "Deep Frying", Method.CANDY_MAKING: "Candy Making",
})

# Gas mark n -> °F
GAS_MARKS = {1: 275, 2: 300, 3: 325, 4: 350, 5: 375, 6: 400, 7: 425, 8: 450, 9: 475, 10: 500}


def gas_mark(fahrenheit: float) -> int:
    """Smallest gas mark whose temperature is at least the given °F (capped at 10)."""
    return next((mark for mark, f in GAS_MARKS.items() if fahrenheit <= f), 10)


def _method_advice(method: Method, f: float) -> str:
    if method is Method.BAKING:
        if f < 300:
            return "Low temperature - good for meringues, slow baking"
        if f <= 375:
            return "Medium temperature - ideal for most baking"
        return "High temperature - good for quick breads, pizza"
    if method is Method.FRYING:
        if 350 <= f <= 375:
            return "Perfect frying temperature"
        if f < 350:
            return "Too low - food will absorb oil"
        return "Too high - food may burn outside before cooking inside"
    return ""


def temperature_calculate(v: Dict[str, Any]) -> CalculationResult:
    temp = v["temperature"]
    scale, method = OvenScale(v["from_unit"]), Method(v["cooking_method"])
    if scale is OvenScale.FAHRENHEIT:
        f = temp
    elif scale is OvenScale.CELSIUS:
        f = convert_scalar(temp, TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT)
    else:
        f = GAS_MARKS.get(round(temp), temp * 25 + 250)
    c = convert_scalar(f, TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS)
    mark = gas_mark(f)
    if scale is OvenScale.CELSIUS:
        first = f"°F = ({num(temp)}°C × 9/5) + 32 = {round(f)}°F"
    elif scale is OvenScale.FAHRENHEIT:
        first = f"°C = ({num(temp)}°F - 32) × 5/9 = {round(c)}°C"
    else:
        first = f"Gas Mark {num(temp)} ≈ {round(f)}°F"
    return CalculationResult(
        results=[result(round(f), "Fahrenheit", "°F", INT),
                 result(round(c), "Celsius", "°C", INT),
                 result(mark, "Gas Mark", format=INT)],
        explanation=[f"Temperature conversion for {spaced(method.value)}",
                     _method_advice(method, f) or f"Converted temperature: {round(f)}°F / {round(c)}°C"],
        steps=[first, f"Gas Mark approximation: {mark}",
               f"All conversions: {round(f)}°F = {round(c)}°C = Gas Mark {mark}"],
    )


# ---- measurement-converter ---------------------------------------------------

class KitchenUnit(str, Enum):
    CUPS = "cups"
    TABLESPOONS = "tablespoons"
    TEASPOONS = "teaspoons"
    FLUID_OUNCES = "fluid_ounces"
    MILLILITERS = "milliliters"
    LITERS = "liters"
    OUNCES = "ounces"
    POUNDS = "pounds"
    GRAMS = "grams"
    KILOGRAMS = "kilograms"

KITCHEN_UNIT_OPTIONS = select_options(KitchenUnit, {
    KitchenUnit.CUPS: "Cups", KitchenUnit.TABLESPOONS: "Tablespoons", KitchenUnit.TEASPOONS: "Teaspoons",
    KitchenUnit.FLUID_OUNCES: "Fluid Ounces", KitchenUnit.MILLILITERS: "Milliliters",
    KitchenUnit.LITERS: "Liters", KitchenUnit.OUNCES: "Ounces (weight)", KitchenUnit.POUNDS: "Pounds",
    KitchenUnit.GRAMS: "Grams", KitchenUnit.KILOGRAMS: "Kilograms",
})

# Each kitchen unit is either a volume or a mass unit
KITCHEN_UNITS = lookup_table(KitchenUnit, {
    KitchenUnit.CUPS: VolumeUnit.CUP, KitchenUnit.TABLESPOONS: VolumeUnit.TBSP,
    KitchenUnit.TEASPOONS: VolumeUnit.TSP, KitchenUnit.FLUID_OUNCES: VolumeUnit.FL_OZ,
    KitchenUnit.MILLILITERS: VolumeUnit.ML, KitchenUnit.LITERS: VolumeUnit.L,
    KitchenUnit.OUNCES: MassUnit.OZ, KitchenUnit.POUNDS: MassUnit.LB,
    KitchenUnit.GRAMS: MassUnit.G, KitchenUnit.KILOGRAMS: MassUnit.KG,
})


class Density(str, Enum):
    WATER = "water"
    FLOUR = "flour"
    SUGAR = "sugar"
    BUTTER = "butter"
    OIL = "oil"
    HONEY = "honey"
    MILK = "milk"

DENSITY_OPTIONS = select_options(Density, {
    Density.WATER: "Water/Liquid", Density.FLOUR: "All-Purpose Flour", Density.SUGAR: "Granulated Sugar",
    Density.BUTTER: "Butter", Density.OIL: "Oil", Density.HONEY: "Honey", Density.MILK: "Milk",
})

# grams per milliliter
DENSITIES = lookup_table(Density, {
    Density.WATER: 1, Density.FLOUR: 0.57, Density.SUGAR: 0.85, Density.BUTTER: 0.91,
    Density.OIL: 0.92, Density.HONEY: 1.42, Density.MILK: 1.03,
})


def _display(x: float) -> float:
    if x >= 1000:
        return round(x)
    if x >= 10:
        return round(x, 1)
    return round(x, 2)


def measurement_calculate(v: Dict[str, Any]) -> CalculationResult:
    amount = v["amount"]
    src, dst = KitchenUnit(v["from_unit"]), KitchenUnit(v["to_unit"])
    ingredient = Density(v["ingredient_type"] or Density.WATER.value)
    if amount < 0:
        raise CalculationError("Amount must be non-negative")
    a, b = KITCHEN_UNITS[src], KITCHEN_UNITS[dst]
    density = DENSITIES[ingredient]
    a_volume, b_volume = isinstance(a, VolumeUnit), isinstance(b, VolumeUnit)

    if a_volume == b_volume:
        out = convert_scalar(amount, a, b)
        kind = "volume" if a_volume else "weight"
        base_unit = VolumeUnit.ML if a_volume else MassUnit.G
        base = convert_scalar(amount, a, base_unit)
        first = f"{num(amount)} {spaced(src.value)} = {fixed(base)} {'ml' if a_volume else 'g'}"
        note = "Direct measurement conversion"
    elif a_volume:
        grams = convert_scalar(amount, a, VolumeUnit.ML) * density
        out = convert_scalar(grams, MassUnit.G, b)
        kind = "volume-to-weight"
        first = f"{num(amount)} {spaced(src.value)} × {num(density)} g/ml ({ingredient.value}) = {fixed(grams)} g"
        note = f"Using {ingredient.value} density for volume/weight conversion"
    else:
        ml = convert_scalar(amount, a, MassUnit.G) / density
        out = convert_scalar(ml, VolumeUnit.ML, b)
        kind = "weight-to-volume"
        first = f"{num(amount)} {spaced(src.value)} ÷ {num(density)} g/ml ({ingredient.value}) = {fixed(ml)} ml"
        note = f"Using {ingredient.value} density for volume/weight conversion"

    shown = _display(out)
    results = [result(shown, "Converted Amount", spaced(dst.value), D)]
    if out > 0:
        results.append(result(round(amount / out, 4), "Conversion Factor",
                              f"{spaced(src.value)} per {spaced(dst.value)}", D))
    return CalculationResult(
        results=results,
        explanation=[f"Converting {num(amount)} {spaced(src.value)} to {spaced(dst.value)} ({kind})", note],
        steps=[first, f"Final result: {num(shown)} {spaced(dst.value)}"],
    )


# ---- baking-conversion -------------------------------------------------------

class Recipe(str, Enum):
    BREAD = "bread"
    CAKES = "cakes"
    COOKIES = "cookies"
    PASTRY = "pastry"
    MUFFINS = "muffins"

RECIPE_OPTIONS = select_options(Recipe, {
    Recipe.BREAD: "Bread/Yeast Recipes", Recipe.CAKES: "Cakes & Cupcakes",
    Recipe.COOKIES: "Cookies & Biscuits", Recipe.PASTRY: "Pastry & Pie Dough",
    Recipe.MUFFINS: "Muffins & Quick Breads",
})


class BakingIngredient(str, Enum):
    FLOUR = "flour"
    CAKE_FLOUR = "cake_flour"
    BREAD_FLOUR = "bread_flour"
    SUGAR = "sugar"
    BROWN_SUGAR = "brown_sugar"
    POWDERED_SUGAR = "powdered_sugar"
    BUTTER = "butter"
    COCOA = "cocoa"

BAKING_INGREDIENT_OPTIONS = select_options(BakingIngredient, {
    BakingIngredient.FLOUR: "All-Purpose Flour", BakingIngredient.CAKE_FLOUR: "Cake Flour",
    BakingIngredient.BREAD_FLOUR: "Bread Flour", BakingIngredient.SUGAR: "Granulated Sugar",
    BakingIngredient.BROWN_SUGAR: "Brown Sugar (packed)", BakingIngredient.POWDERED_SUGAR: "Powdered Sugar",
    BakingIngredient.BUTTER: "Butter", BakingIngredient.COCOA: "Cocoa Powder",
})

GRAMS_PER_CUP = lookup_table(BakingIngredient, {
    BakingIngredient.FLOUR: 120, BakingIngredient.CAKE_FLOUR: 115, BakingIngredient.BREAD_FLOUR: 125,
    BakingIngredient.SUGAR: 200, BakingIngredient.BROWN_SUGAR: 213, BakingIngredient.POWDERED_SUGAR: 120,
    BakingIngredient.BUTTER: 226, BakingIngredient.COCOA: 85,
})

FLOURS = (BakingIngredient.FLOUR, BakingIngredient.CAKE_FLOUR, BakingIngredient.BREAD_FLOUR)

FLOUR_ALTITUDE = lookup_table(Altitude, {
    Altitude.SEA_LEVEL: 1.0, Altitude.MODERATE: 1.02, Altitude.HIGH: 1.04, Altitude.VERY_HIGH: 1.06,
})
SUGAR_ALTITUDE = lookup_table(Altitude, {
    Altitude.SEA_LEVEL: 1.0, Altitude.MODERATE: 0.98, Altitude.HIGH: 0.96, Altitude.VERY_HIGH: 0.94,
})


class BakingUnit(str, Enum):
    CUPS = "cups"
    OUNCES = "ounces"
    GRAMS = "grams"

BAKING_UNIT_OPTIONS = select_options(BakingUnit, {
    BakingUnit.CUPS: "Cups", BakingUnit.OUNCES: "Ounces", BakingUnit.GRAMS: "Grams",
})

BAKING_TIPS = {
    (Recipe.CAKES, BakingIngredient.CAKE_FLOUR): "Cake flour creates lighter, more tender cakes",
    (Recipe.COOKIES, BakingIngredient.BROWN_SUGAR): "Brown sugar adds moisture and chewiness to cookies",
}


def baking_calculate(v: Dict[str, Any]) -> CalculationResult:
    recipe, ingredient = Recipe(v["recipe_type"]), BakingIngredient(v["ingredient"])
    amount, unit, altitude = v["amount"], BakingUnit(v["unit"]), Altitude(v["altitude"])
    per_cup = GRAMS_PER_CUP[ingredient]
    if unit is BakingUnit.CUPS:
        grams = amount * per_cup
        first = f"{num(amount)} cups × {per_cup}g per cup = {round(grams)}g"
    elif unit is BakingUnit.OUNCES:
        grams = convert_scalar(amount, MassUnit.OZ, MassUnit.G)
        first = f"{num(amount)} oz × 28.35g per oz = {round(grams)}g"
    else:
        grams = amount
        first = f"{num(amount)}g (already in grams)"
    cups = grams / per_cup
    ounces = convert_scalar(grams, MassUnit.G, MassUnit.OZ)

    adjustment = ""
    adjusted = grams
    if altitude is not Altitude.SEA_LEVEL:
        if ingredient in FLOURS:
            adjusted = grams * FLOUR_ALTITUDE[altitude]
            adjustment = f"Increase flour by {(FLOUR_ALTITUDE[altitude] - 1) * 100:.0f}% for altitude"
        elif ingredient is BakingIngredient.SUGAR:
            adjusted = grams * SUGAR_ALTITUDE[altitude]
            adjustment = f"Decrease sugar by {(1 - SUGAR_ALTITUDE[altitude]) * 100:.0f}% for altitude"

    if recipe is Recipe.BREAD and ingredient in FLOURS:
        tip = "For bread, measure flour by weight for best consistency"
    else:
        tip = BAKING_TIPS.get((recipe, ingredient), "")

    results = [result(round(cups, 2), "Cups", "cups", D),
               result(round(ounces, 1), "Ounces", "oz", D),
               result(round(grams), "Grams", "g", INT)]
    if altitude is not Altitude.SEA_LEVEL:
        results.append(result(round(adjusted), "Altitude Adjusted", "g", INT))
    return CalculationResult(
        results=results,
        explanation=[f"Baking conversions for {num(amount)} {unit.value} of {spaced(ingredient.value)} in {recipe.value}",
                     adjustment or tip or "Standard conversions with no altitude adjustments needed"],
        steps=[first,
               f"Cups: {round(grams)}g ÷ {per_cup}g per cup = {fixed(cups)} cups",
               f"Ounces: {round(grams)}g ÷ 28.35g per oz = {fixed(ounces, 1)} oz"],
    )


COOKING: List[Calculator] = [
    Calculator(
        id="recipe-scaling",
        title="Recipe Scaling Calculator",
        description="Scale recipes up or down for different serving sizes with precise measurements.",
        category=CATEGORY,
        inputs=(
            number("original_servings", "Original Servings", min=1, placeholder="e.g., 4"),
            number("desired_servings", "Desired Servings", min=1, placeholder="e.g., 8"),
            number("ingredient_amount", "Original Ingredient Amount", step=0.01, placeholder="e.g., 2.5"),
            select("ingredient_unit", "Unit", RECIPE_UNIT_OPTIONS),
        ),
        formula="Scaled Amount = Original Amount × (Desired Servings ÷ Original Servings)",
        compute=recipe_scaling_calculate,
        tags=("recipe", "scaling", "servings", "measurements"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="cooking-time-converter",
        title="Cooking Time Converter",
        description="Convert cooking times for different oven types, temperatures, and altitudes.",
        category=CATEGORY,
        inputs=(
            number("original_time", "Original Cooking Time (minutes)", min=1, placeholder="e.g., 45"),
            number("original_temp", "Original Temperature (°F)", min=200, max=500, placeholder="e.g., 350"),
            number("new_temp", "New Temperature (°F)", min=200, max=500, placeholder="e.g., 375"),
            select("oven_type", "Oven Type", OVEN_OPTIONS),
            select("altitude", "Altitude", ALTITUDE_OPTIONS),
        ),
        formula="Adjusted Time = Original Time × (Original Temp ÷ New Temp)^1.2 × Oven Factor × Altitude Factor",
        compute=cooking_time_calculate,
        tags=("cooking", "time", "temperature", "oven", "altitude"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="ingredient-substitution",
        title="Ingredient Substitution Calculator",
        description="Find equivalent amounts for ingredient substitutions in your recipes.",
        category=CATEGORY,
        inputs=(
            select("original_ingredient", "Original Ingredient", INGREDIENT_OPTIONS),
            number("amount", "Amount", step=0.01, placeholder="e.g., 1"),
            select("unit", "Unit", SUBSTITUTION_UNIT_OPTIONS),
            select("substitute", "Substitute With", SUBSTITUTE_OPTIONS),
        ),
        formula="Substitution ratios based on ingredient properties and cooking science",
        compute=substitution_calculate,
        tags=("substitution", "ingredients", "dietary", "alternatives"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="nutritional-calculator",
        title="Nutritional Calculator",
        description="Calculate calories, macronutrients, and nutritional values for recipes and ingredients.",
        category=CATEGORY,
        inputs=(
            select("food_item", "Food Item", FOOD_OPTIONS),
            number("quantity", "Quantity", min=0.1, step=0.1, placeholder="e.g., 1.5", default=1),
        ),
        formula="Nutritional values calculated per 100g or per serving based on USDA data",
        compute=nutrition_calculate,
        tags=("nutrition", "calories", "macros", "diet", "health"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="serving-size-calculator",
        title="Serving Size Calculator",
        description="Calculate perfect portion sizes for different group sizes and meal types.",
        category=CATEGORY,
        inputs=(
            number("people_count", "Number of People", min=1, step=1, placeholder="e.g., 12"),
            select("meal_type", "Meal Type", MEAL_OPTIONS),
            select("food_category", "Food Category", FOOD_GROUP_OPTIONS),
            select("appetite", "Appetite Level", APPETITE_OPTIONS),
        ),
        formula="Serving Size = Base Portion × People Count × Meal Type Factor × Appetite Factor",
        compute=serving_size_calculate,
        tags=("serving", "portions", "party planning", "catering"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="temperature-conversion",
        title="Temperature Conversion",
        description="Convert between Fahrenheit, Celsius, and gas mark temperatures for cooking.",
        category=CATEGORY,
        inputs=(
            number("temperature", "Temperature", placeholder="e.g., 350"),
            select("from_unit", "Convert From", OVEN_SCALE_OPTIONS),
            select("cooking_method", "Cooking Method", METHOD_OPTIONS),
        ),
        formula="°F = (°C × 9/5) + 32, °C = (°F - 32) × 5/9, Gas Mark approximations",
        compute=temperature_calculate,
        tags=("temperature", "conversion", "baking", "cooking"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="measurement-converter",
        title="Measurement Converter",
        description="Convert between different cooking measurements including cups, ounces, grams, and more.",
        category=CATEGORY,
        inputs=(
            number("amount", "Amount", step=0.01, placeholder="e.g., 2.5"),
            select("from_unit", "Convert From", KITCHEN_UNIT_OPTIONS),
            select("to_unit", "Convert To", KITCHEN_UNIT_OPTIONS),
            select("ingredient_type", "Ingredient Type (for weight conversions)", DENSITY_OPTIONS,
                   required=False),
        ),
        formula="Conversion factors based on standard cooking measurements and ingredient densities",
        compute=measurement_calculate,
        tags=("measurements", "conversion", "units", "volume", "weight"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="baking-conversion",
        title="Baking Conversion Calculator",
        description="Convert between different baking measurements and adjust for ingredient substitutions in baking.",
        category=CATEGORY,
        inputs=(
            select("recipe_type", "Recipe Type", RECIPE_OPTIONS),
            select("ingredient", "Ingredient to Convert", BAKING_INGREDIENT_OPTIONS),
            number("amount", "Amount", step=0.01, placeholder="e.g., 2.5"),
            select("unit", "Unit", BAKING_UNIT_OPTIONS),
            select("altitude", "Altitude Adjustment", ALTITUDE_OPTIONS),
        ),
        formula="Weight conversions based on ingredient density + altitude adjustments for leavening",
        compute=baking_calculate,
        tags=("baking", "conversion", "altitude", "measurements", "ingredients"),
        complexity=Complexity.INTERMEDIATE,
    ),
]
