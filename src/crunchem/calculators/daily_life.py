# -----------------------------------------------------------------------------
# Daily Life calculators
# Money (tips, discounts, tax, bill splitting), time and dates, travel,
# health, school, technology and household helpers.
# Notes:
#   - random-number-generator draws from the module-level `_rng`; swap it for
#     a seeded random.Random to make runs reproducible.
#   - age-calculator falls back to `_today()` when no as-of date is given.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
import random
import re
from datetime import date, timedelta
from enum import Enum
from typing import Any, Dict, List, Tuple

from ..types import CalculationError, CalculationResult, Calculator, Complexity, ResultFormat
from ..units import (LengthUnit, MassUnit, TemperatureUnit, UnitError, VolumeUnit, convert_scalar,
                     lookup_table, select_options, symbol)
from .common import date_input, fixed, hours_minutes, money, num, number, plural, result, select, text

CATEGORY = "Daily Life"

CUR = ResultFormat.CURRENCY
D = ResultFormat.DECIMAL
INT = ResultFormat.INTEGER

_rng = random.Random()


def _today() -> date:
    return date.today()


def cents(x: float) -> float:
    return round(x, 2)


# ---- money ------------------------------------------------------------------

def tip_calculate(v: Dict[str, Any]) -> CalculationResult:
    bill, pct, people = v["bill_amount"], v["tip_percentage"], int(v["number_of_people"])
    if bill <= 0 or pct < 0 or people <= 0:
        raise CalculationError("Please enter valid positive values")
    tip = bill * pct / 100
    total = bill + tip
    per_person = total / people
    return CalculationResult(
        results=[result(cents(tip), "Tip Amount", "$", CUR),
                 result(cents(total), "Total Amount", "$", CUR),
                 result(cents(per_person), "Per Person (Total)", "$", CUR),
                 result(cents(tip / people), "Per Person (Tip)", "$", CUR)],
        explanation=[f"{num(pct)}% tip on {money(bill)} bill",
                     f"Split {people} way{'s' if people > 1 else ''}"],
        steps=[f"Bill: {money(bill)}",
               f"Tip ({num(pct)}%): {money(bill)} × {num(pct)}% = {money(tip)}",
               f"Total: {money(bill)} + {money(tip)} = {money(total)}",
               f"Per person: {money(total)} ÷ {people} = {money(per_person)}"],
    )


class DiscountType(str, Enum):
    PERCENTAGE = "percentage"
    AMOUNT = "amount"

DISCOUNT_OPTIONS = select_options(DiscountType, {
    DiscountType.PERCENTAGE: "Percentage Off", DiscountType.AMOUNT: "Dollar Amount Off",
})


def discount_calculate(v: Dict[str, Any]) -> CalculationResult:
    price, kind, value = v["original_price"], DiscountType(v["discount_type"]), v["discount_value"]
    if price <= 0 or value < 0:
        raise CalculationError("Please enter valid positive values")
    if kind is DiscountType.PERCENTAGE:
        if value > 100:
            raise CalculationError("Discount percentage cannot exceed 100%")
        off, pct = price * value / 100, value
    else:
        if value > price:
            raise CalculationError("Discount amount cannot exceed original price")
        off, pct = value, value / price * 100
    sale = price - off
    return CalculationResult(
        results=[result(cents(sale), "Sale Price", "$", CUR),
                 result(cents(off), "You Save", "$", CUR),
                 result(round(pct, 2), "Discount Percentage", "%", D)],
        explanation=[f"{fixed(pct, 1)}% off original price of {money(price)}",
                     f"Total savings: {money(off)}"],
        steps=[f"Original Price: {money(price)}",
               f"Discount: {fixed(pct, 1)}% = {money(off)}",
               f"Sale Price: {money(price)} - {money(off)} = {money(sale)}"],
    )


def tax_calculate(v: Dict[str, Any]) -> CalculationResult:
    price, rate = v["price_before_tax"], v["tax_rate"]
    if price < 0 or rate < 0:
        raise CalculationError("Please enter valid positive values")
    tax = price * rate / 100
    total = price + tax
    return CalculationResult(
        results=[result(cents(total), "Total Price (with tax)", "$", CUR),
                 result(cents(tax), "Tax Amount", "$", CUR),
                 result(cents(price), "Price Before Tax", "$", CUR)],
        explanation=[f"{num(rate)}% sales tax applied to {money(price)}",
                     f"Total including tax: {money(total)}"],
        steps=[f"Price before tax: {money(price)}",
               f"Tax ({num(rate)}%): {money(price)} × {num(rate)}% = {money(tax)}",
               f"Total price: {money(price)} + {money(tax)} = {money(total)}"],
    )


class SplitType(str, Enum):
    EQUAL = "equal"
    CUSTOM = "custom"

SPLIT_OPTIONS = select_options(SplitType, {SplitType.EQUAL: "Split Equally", SplitType.CUSTOM: "Custom Amounts"})


def split_bill_calculate(v: Dict[str, Any]) -> CalculationResult:
    bill, people = v["total_bill"], int(v["number_of_people"])
    pct = v["tip_percentage"] or 0
    if bill < 0 or people <= 0 or pct < 0:
        raise CalculationError("Please enter valid positive values")
    tip = bill * pct / 100
    total = bill + tip
    per_person = total / people
    return CalculationResult(
        results=[result(cents(per_person), "Each Person Pays", "$", CUR),
                 result(cents(total), "Total Amount", "$", CUR),
                 result(cents(bill / people), "Bill Per Person", "$", CUR),
                 result(cents(tip / people), "Tip Per Person", "$", CUR)],
        explanation=[f"{money(bill)} bill + {num(pct)}% tip ({money(tip)})",
                     f"Split {people} ways equally"],
        steps=[f"Original bill: {money(bill)}", f"Tip ({num(pct)}%): {money(tip)}",
               f"Total with tip: {money(total)}",
               f"Per person: {money(total)} ÷ {people} = {money(per_person)}"],
    )


SUBSCRIPTION_SLOTS = 5


def subscription_calculate(v: Dict[str, Any]) -> CalculationResult:
    active = [c for c in (v[f"subscription_{i}"] for i in range(1, SUBSCRIPTION_SLOTS + 1)) if c]
    monthly = sum(active)
    yearly = monthly * 12
    average = monthly / len(active) if active else 0.0
    listed = " + ".join(money(c) for c in active) or "none"
    return CalculationResult(
        results=[result(cents(monthly), "Total Monthly Cost", "$", CUR),
                 result(cents(yearly), "Total Yearly Cost", "$", CUR),
                 result(len(active), "Active Subscriptions", format=INT),
                 result(cents(average), "Average Per Subscription", "$", CUR)],
        explanation=[f"{len(active)} active subscriptions costing {money(monthly)} per month",
                     f"Annual cost: {money(yearly)}"],
        steps=[f"Subscription costs: {listed}", f"Total monthly: {money(monthly)}",
               f"Total yearly: {money(monthly)} × 12 = {money(yearly)}"],
    )


def commute_calculate(v: Dict[str, Any]) -> CalculationResult:
    distance, gas, mpg = v["distance_miles"], v["gas_price"], v["mpg"]
    parking, transit, days = v["parking_cost"] or 0, v["transit_cost"] or 0, int(v["work_days"])
    if distance < 0 or gas < 0 or mpg <= 0 or days <= 0:
        raise CalculationError("Please enter valid positive values")
    round_trip = distance * 2
    daily_gas = round_trip / mpg * gas
    daily = daily_gas + parking
    monthly = daily * days
    monthly_transit = transit * days
    savings = monthly - monthly_transit
    return CalculationResult(
        results=[result(cents(daily), "Daily Driving Cost", "$", CUR),
                 result(cents(monthly), "Monthly Driving Cost", "$", CUR),
                 result(cents(monthly_transit), "Monthly Transit Cost", "$", CUR),
                 result(cents(abs(savings)),
                        "Monthly Savings (Transit)" if savings > 0 else "Monthly Extra (Driving)", "$", CUR)],
        explanation=[f"{num(round_trip)} mile round trip, {days} days per month",
                     "Public transit saves money" if savings > 0 else "Driving is more economical"],
        steps=[f"Round trip: {num(distance)} × 2 = {num(round_trip)} miles",
               f"Daily gas: {num(round_trip)} ÷ {num(mpg)} × {money(gas)} = {money(daily_gas)}",
               f"Daily total (with parking): {money(daily)}",
               f"Monthly driving: {money(daily)} × {days} = {money(monthly)}"],
    )


class PhoneSplit(str, Enum):
    EQUAL = "equal"
    USAGE = "usage"

PHONE_SPLIT_OPTIONS = select_options(PhoneSplit, {PhoneSplit.EQUAL: "Split Equally", PhoneSplit.USAGE: "Based on Usage"})


def phone_bill_calculate(v: Dict[str, Any]) -> CalculationResult:
    total, base, lines = v["total_bill"], v["base_cost"], int(v["number_of_lines"])
    overage = v["data_overage"] or 0
    if total < 0 or base < 0 or lines <= 0:
        raise CalculationError("Please enter valid positive values")
    if base > total:
        raise CalculationError("Base cost cannot exceed total bill")
    variable = total - base
    base_line, var_line, over_line = base / lines, variable / lines, overage / lines
    per_line = base_line + var_line
    final = per_line + over_line
    return CalculationResult(
        results=[result(cents(final), "Cost Per Line", "$", CUR),
                 result(cents(base_line), "Base Cost Per Line", "$", CUR),
                 result(cents(var_line), "Variable Cost Per Line", "$", CUR),
                 result(cents(over_line), "Overage Per Line", "$", CUR)],
        explanation=[f"{money(total)} total bill split among {lines} lines",
                     f"Each line pays {money(final)} per month"],
        steps=[f"Base cost per line: {money(base)} ÷ {lines} = {money(base_line)}",
               f"Variable costs per line: {money(variable)} ÷ {lines} = {money(var_line)}",
               f"Total per line: {money(base_line)} + {money(var_line)} = {money(per_line)}",
               f"With overage: {money(per_line)} + {money(over_line)} = {money(final)}"],
    )


# ---- time & dates -----------------------------------------------------------

def _exact_age(born: date, on: date) -> Tuple[int, int, int]:
    years = on.year - born.year
    months = on.month - born.month
    days = on.day - born.day
    if days < 0:
        # count from last month's anniversary, clamped to that month's end
        months -= 1
        prev_end = on.replace(day=1) - timedelta(days=1)
        days = (on - prev_end.replace(day=min(born.day, prev_end.day))).days
    if months < 0:
        years -= 1
        months += 12
    return years, months, days


def age_calculate(v: Dict[str, Any]) -> CalculationResult:
    born = v["birth_date"]
    on = v["calculation_date"] or _today()
    if born > on:
        raise CalculationError("Birth date cannot be in the future")
    total_days = (on - born).days
    years, months, days = _exact_age(born, on)
    exact = f"{years} years, {months} months, {days} days"
    return CalculationResult(
        results=[result(exact, "Exact Age"),
                 result(total_days, "Total Days Lived", "days", INT),
                 result(total_days // 7, "Total Weeks Lived", "weeks", INT),
                 result(math.floor(total_days / 30.44), "Approximate Months", "months", INT)],
        explanation=[f"Age calculated from {born.isoformat()} to {on.isoformat()}",
                     f"You have lived {total_days:,} days!"],
        steps=[f"Birth date: {born.isoformat()}", f"Current date: {on.isoformat()}",
               f"Exact age: {exact}", f"Total days: {total_days:,}"],
    )


TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})\s*(AM|PM)?", re.IGNORECASE)


def parse_clock(raw: str, message: str) -> Tuple[int, int]:
    """Parse 'H:MM', 'HH:MM' or 'H:MM AM/PM' into 24-hour (hours, minutes)."""
    match = TIME_PATTERN.search(raw)
    if not match:
        raise CalculationError(message)
    hours, minutes = int(match.group(1)), int(match.group(2))
    meridiem = (match.group(3) or "").upper()
    if meridiem and not 1 <= hours <= 12:
        raise CalculationError("Please enter a valid time")
    if meridiem == "PM" and hours != 12:
        hours += 12
    elif meridiem == "AM" and hours == 12:
        hours = 0
    if hours >= 24 or minutes >= 60:
        raise CalculationError("Please enter a valid time")
    return hours, minutes


def twelve_hour(hours: int, minutes: int) -> str:
    h12 = 12 if hours % 12 == 0 else hours % 12
    return f"{h12}:{minutes:02d} {'PM' if hours >= 12 else 'AM'}"


class TimeZone(str, Enum):
    EST = "EST"
    CST = "CST"
    MST = "MST"
    PST = "PST"
    UTC = "UTC"
    BST = "BST"
    CET = "CET"
    JST = "JST"
    AEST = "AEST"

TIME_ZONE_OPTIONS = select_options(TimeZone, {
    TimeZone.EST: "Eastern (EST/EDT)", TimeZone.CST: "Central (CST/CDT)",
    TimeZone.MST: "Mountain (MST/MDT)", TimeZone.PST: "Pacific (PST/PDT)",
    TimeZone.UTC: "UTC/GMT", TimeZone.BST: "British (BST/GMT)",
    TimeZone.CET: "Central European (CET/CEST)", TimeZone.JST: "Japan (JST)",
    TimeZone.AEST: "Australian Eastern (AEST/AEDT)",
})

# Fixed hours from UTC; daylight saving is not modelled
UTC_OFFSETS = lookup_table(TimeZone, {
    TimeZone.EST: -5, TimeZone.CST: -6, TimeZone.MST: -7, TimeZone.PST: -8, TimeZone.UTC: 0,
    TimeZone.BST: 1, TimeZone.CET: 1, TimeZone.JST: 9, TimeZone.AEST: 10,
})


def _day_shift(days: int) -> str:
    if days == 0:
        return ""
    unit = "day" if abs(days) == 1 else "days"
    return f"({days:+d} {unit})"


def time_zone_calculate(v: Dict[str, Any]) -> CalculationResult:
    raw = v["source_time"].strip()
    src, dst = TimeZone(v["source_timezone"]), TimeZone(v["target_timezone"])
    hours, minutes = parse_clock(raw, "Please enter time in format HH:MM or HH:MM AM/PM")
    diff = UTC_OFFSETS[dst] - UTC_OFFSETS[src]
    day, target = divmod(hours + diff, 24)
    shift = _day_shift(day)
    t12 = twelve_hour(target, minutes)
    t24 = f"{target:02d}:{minutes:02d}"
    return CalculationResult(
        results=[result(f"{t12} {shift}".strip(), "Target Time (12-hour)"),
                 result(f"{t24} {shift}".strip(), "Target Time (24-hour)"),
                 result(f"{diff:+d}" if diff else "0", "Time Difference", "hours")],
        explanation=[f"Converting {raw} {src.value} to {dst.value}",
                     f"Time difference: {plural(abs(diff), 'hour')} {'ahead' if diff > 0 else 'behind'}"],
        steps=[f"Source: {raw} {src.value}", f"Time zone difference: {diff} hours",
               f"Target time: {t12} {dst.value} {shift}".strip()],
    )


class DateMode(str, Enum):
    BETWEEN = "between"
    ADD = "add"
    SUBTRACT = "subtract"

DATE_MODE_OPTIONS = select_options(DateMode, {
    DateMode.BETWEEN: "Days Between Dates", DateMode.ADD: "Add Days to Date",
    DateMode.SUBTRACT: "Subtract Days from Date",
})


def date_calculate(v: Dict[str, Any]) -> CalculationResult:
    mode, start, end = DateMode(v["calculation_type"]), v["start_date"], v["end_date"]
    if mode is DateMode.BETWEEN:
        if end is None:
            raise CalculationError("End date is required for days between calculation")
        days = abs((end - start).days)
        return CalculationResult(
            results=[result(days, "Days Between", "days", INT),
                     result(days // 7, "Weeks Between", "weeks", INT),
                     result(math.floor(days / 30.44), "Approximate Months", "months", INT),
                     result(math.floor(days / 365.25), "Approximate Years", "years", INT)],
            explanation=[f"Time period from {start.isoformat()} to {end.isoformat()}",
                         f"Total of {days} days"],
            steps=[f"Start: {start.isoformat()}", f"End: {end.isoformat()}",
                   f"Difference: {days} days",
                   f"Equivalent to: {days // 7} weeks and {days % 7} days"],
        )

    if v["days_to_add"] is None:
        raise CalculationError("Number of days is required for add/subtract calculation")
    count = int(v["days_to_add"])
    adding = mode is DateMode.ADD
    try:
        landed = start + timedelta(days=count if adding else -count)
    except OverflowError:
        raise CalculationError("Resulting date is out of range") from None
    weekday = landed.strftime("%A")
    verb = "Add" if adding else "Subtract"
    return CalculationResult(
        results=[result(landed.isoformat(), "Result Date"),
                 result(weekday, "Day of Week"),
                 result(abs(count), f"Days {'Added' if adding else 'Subtracted'}", "days", INT)],
        explanation=[f"{verb}ing {abs(count)} days {'to' if adding else 'from'} {start.isoformat()}",
                     f"Result falls on a {weekday}"],
        steps=[f"Start date: {start.isoformat()}", f"{verb} {abs(count)} days",
               f"Result: {landed.isoformat()} ({weekday})"],
    )


SLEEP_CYCLE_MINUTES = 90


class SleepCycles(str, Enum):
    FOUR = "4"
    FIVE = "5"
    SIX = "6"

SLEEP_CYCLE_OPTIONS = select_options(SleepCycles, {
    SleepCycles.FOUR: "4 cycles (6 hours)", SleepCycles.FIVE: "5 cycles (7.5 hours)",
    SleepCycles.SIX: "6 cycles (9 hours)",
})


def sleep_calculate(v: Dict[str, Any]) -> CalculationResult:
    raw = v["wake_time"].strip()
    cycles = int(SleepCycles(v["sleep_cycles"]).value)
    settle = int(v["fall_asleep_time"])
    hours, minutes = parse_clock(raw, "Please enter wake time in format HH:MM AM/PM")
    sleep_minutes = cycles * SLEEP_CYCLE_MINUTES
    needed = sleep_minutes + settle
    bed = (hours * 60 + minutes - needed) % (24 * 60)
    bedtime = twelve_hour(bed // 60, bed % 60)
    duration = f"{sleep_minutes // 60}h {sleep_minutes % 60}m"
    return CalculationResult(
        results=[result(bedtime, "Optimal Bedtime"),
                 result(duration, "Sleep Duration"),
                 result(cycles, "Sleep Cycles", "cycles", INT),
                 result(settle, "Time to Fall Asleep", "minutes", INT)],
        explanation=[f"{cycles} complete sleep cycles ({duration}) plus {settle} minutes to fall asleep",
                     f"Go to bed at {bedtime} to wake up refreshed at {raw}"],
        steps=[f"Wake time: {raw}",
               f"Sleep needed: {cycles} cycles × {SLEEP_CYCLE_MINUTES} min = {sleep_minutes} minutes",
               f"Plus fall asleep time: {settle} minutes",
               f"Total time needed: {needed // 60}h {needed % 60}m",
               f"Optimal bedtime: {bedtime}"],
    )


# ---- travel & movement -------------------------------------------------------

class TripType(str, Enum):
    ONE_WAY = "one-way"
    ROUND_TRIP = "round-trip"

TRIP_OPTIONS = select_options(TripType, {TripType.ONE_WAY: "One Way", TripType.ROUND_TRIP: "Round Trip"})


def fuel_cost_calculate(v: Dict[str, Any]) -> CalculationResult:
    distance, mpg, gas = v["distance"], v["mpg"], v["gas_price"]
    trip = TripType(v["trip_type"])
    if distance <= 0 or mpg <= 0 or gas < 0:
        raise CalculationError("Please enter valid positive values")
    total_distance = distance * 2 if trip is TripType.ROUND_TRIP else distance
    gallons = total_distance / mpg
    cost = gallons * gas
    first = f"Total distance: {num(distance)} miles"
    if trip is TripType.ROUND_TRIP:
        first += f" × 2 = {num(total_distance)} miles"
    return CalculationResult(
        results=[result(cents(cost), "Total Fuel Cost", "$", CUR),
                 result(round(gallons, 2), "Gallons Needed", "gallons", D),
                 result(total_distance, "Total Distance", "miles"),
                 result(cents(cost / total_distance), "Cost Per Mile", "$/mile", CUR)],
        explanation=[f"{'Round trip' if trip is TripType.ROUND_TRIP else 'One way'} of {num(distance)} miles "
                     f"at {num(mpg)} MPG",
                     f"Gas at {money(gas)}/gallon costs {money(cost)} total"],
        steps=[first, f"Gallons needed: {num(total_distance)} ÷ {num(mpg)} = {fixed(gallons)} gallons",
               f"Total cost: {fixed(gallons)} × {money(gas)} = {money(cost)}"],
    )


class TravelUnit(str, Enum):
    MILES = "miles"
    KILOMETERS = "kilometers"
    METERS = "meters"
    FEET = "feet"

TRAVEL_UNIT_OPTIONS = select_options(TravelUnit, {
    TravelUnit.MILES: "Miles", TravelUnit.KILOMETERS: "Kilometers",
    TravelUnit.METERS: "Meters", TravelUnit.FEET: "Feet",
})

TRAVEL_LENGTH_UNITS = lookup_table(TravelUnit, {
    TravelUnit.MILES: LengthUnit.MI, TravelUnit.KILOMETERS: LengthUnit.KM,
    TravelUnit.METERS: LengthUnit.M, TravelUnit.FEET: LengthUnit.FT,
})


class Activity(str, Enum):
    SLOW_WALK = "slow-walk"
    NORMAL_WALK = "normal-walk"
    BRISK_WALK = "brisk-walk"
    LIGHT_JOG = "light-jog"
    MODERATE_RUN = "moderate-run"
    FAST_RUN = "fast-run"
    CUSTOM = "custom"

ACTIVITY_OPTIONS = select_options(Activity, {
    Activity.SLOW_WALK: "Slow Walk (2 mph)", Activity.NORMAL_WALK: "Normal Walk (3 mph)",
    Activity.BRISK_WALK: "Brisk Walk (4 mph)", Activity.LIGHT_JOG: "Light Jog (5 mph)",
    Activity.MODERATE_RUN: "Moderate Run (6 mph)", Activity.FAST_RUN: "Fast Run (8 mph)",
    Activity.CUSTOM: "Custom Pace",
})

# mph; custom pace comes from the form
ACTIVITY_SPEEDS = lookup_table(Activity, {
    Activity.SLOW_WALK: 2, Activity.NORMAL_WALK: 3, Activity.BRISK_WALK: 4,
    Activity.LIGHT_JOG: 5, Activity.MODERATE_RUN: 6, Activity.FAST_RUN: 8, Activity.CUSTOM: None,
})


def walking_time_calculate(v: Dict[str, Any]) -> CalculationResult:
    distance, unit, activity = v["distance"], TravelUnit(v["distance_unit"]), Activity(v["activity_type"])
    if distance <= 0:
        raise CalculationError("Distance must be positive")
    if activity is Activity.CUSTOM:
        speed = v["custom_pace"]
        if not speed or speed <= 0:
            raise CalculationError("Please enter a valid custom pace")
    else:
        speed = ACTIVITY_SPEEDS[activity]
    miles = convert_scalar(distance, TRAVEL_LENGTH_UNITS[unit], LengthUnit.MI)
    hours = miles / speed
    minutes = hours * 60
    per_mile = 100 if speed >= 6 else 80 if speed >= 4 else 60
    calories = round(miles * per_mile)
    return CalculationResult(
        results=[result(hours_minutes(hours), "Estimated Time"),
                 result(round(minutes, 1), "Total Minutes", "minutes", D),
                 result(speed, "Pace", "mph"),
                 result(calories, "Calories Burned (est.)", "calories", INT)],
        explanation=[f"{num(distance)} {unit.value} at {num(speed)} mph ({activity.value.replace('-', ' ')})",
                     f"Estimated {minutes:.0f} minutes to complete"],
        steps=[f"Distance: {num(distance)} {unit.value} = {fixed(miles)} miles", f"Speed: {num(speed)} mph",
               f"Time: {fixed(miles)} ÷ {num(speed)} = {fixed(hours)} hours",
               f"Time: {hours_minutes(hours)}"],
    )


# ---- health & events --------------------------------------------------------

class BodyWeightUnit(str, Enum):
    LBS = "lbs"
    KG = "kg"

BODY_WEIGHT_OPTIONS = select_options(BodyWeightUnit, {
    BodyWeightUnit.LBS: "Pounds (lbs)", BodyWeightUnit.KG: "Kilograms (kg)",
})
BODY_WEIGHT_UNITS = lookup_table(BodyWeightUnit, {BodyWeightUnit.LBS: MassUnit.LB, BodyWeightUnit.KG: MassUnit.KG})


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    HIGH = "high"
    EXTREME = "extreme"

ACTIVITY_LEVEL_OPTIONS = select_options(ActivityLevel, {
    ActivityLevel.SEDENTARY: "Sedentary (little to no exercise)",
    ActivityLevel.LIGHT: "Light Activity (1-3 days/week)",
    ActivityLevel.MODERATE: "Moderate Activity (3-5 days/week)",
    ActivityLevel.HIGH: "High Activity (6-7 days/week)",
    ActivityLevel.EXTREME: "Extreme Activity (2x/day or intense)",
})
ACTIVITY_WATER_FACTORS = lookup_table(ActivityLevel, {
    ActivityLevel.SEDENTARY: 1.0, ActivityLevel.LIGHT: 1.1, ActivityLevel.MODERATE: 1.2,
    ActivityLevel.HIGH: 1.3, ActivityLevel.EXTREME: 1.5,
})


class Climate(str, Enum):
    COOL = "cool"
    MODERATE = "moderate"
    HOT = "hot"

CLIMATE_OPTIONS = select_options(Climate, {
    Climate.COOL: "Cool/Cold Climate", Climate.MODERATE: "Moderate Climate", Climate.HOT: "Hot/Humid Climate",
})
CLIMATE_FACTORS = lookup_table(Climate, {Climate.COOL: 0.9, Climate.MODERATE: 1.0, Climate.HOT: 1.2})

OZ_PER_POUND = 0.67
OZ_PER_GLASS = 8


def water_intake_calculate(v: Dict[str, Any]) -> CalculationResult:
    weight, unit = v["weight"], BodyWeightUnit(v["weight_unit"])
    level, climate = ActivityLevel(v["activity_level"]), Climate(v["climate"])
    if weight <= 0:
        raise CalculationError("Please enter a valid weight")
    pounds = convert_scalar(weight, BODY_WEIGHT_UNITS[unit], MassUnit.LB)
    base = pounds * OZ_PER_POUND
    a, c = ACTIVITY_WATER_FACTORS[level], CLIMATE_FACTORS[climate]
    total = base * a * c
    liters = convert_scalar(total, VolumeUnit.FL_OZ, VolumeUnit.L)
    glasses = math.ceil(total / OZ_PER_GLASS)
    return CalculationResult(
        results=[result(round(total), "Daily Water Intake", "fl oz", INT),
                 result(round(total / OZ_PER_GLASS, 1), "Cups of Water", "cups", D),
                 result(round(liters, 1), "Liters of Water", "liters", D),
                 result(glasses, "Glasses (8 oz each)", "glasses", INT)],
        explanation=[f"Based on {num(weight)} {unit.value} body weight with {level.value} activity "
                     f"in {climate.value} climate",
                     f"Aim for {glasses} glasses of water throughout the day"],
        steps=[f"Base water need: {pounds:.0f} lbs × {OZ_PER_POUND} oz = {base:.0f} oz",
               f"Activity adjustment: ×{num(a)} for {level.value} activity",
               f"Climate adjustment: ×{num(c)} for {climate.value} climate",
               f"Total: {base:.0f} × {num(a)} × {num(c)} = {total:.0f} oz"],
    )


class EventType(str, Enum):
    APPETIZERS = "appetizers"
    LUNCH = "lunch"
    DINNER = "dinner"
    BUFFET = "buffet"
    BARBECUE = "barbecue"

EVENT_OPTIONS = select_options(EventType, {
    EventType.APPETIZERS: "Appetizers/Cocktail Party", EventType.LUNCH: "Lunch Event",
    EventType.DINNER: "Dinner Event", EventType.BUFFET: "Buffet Style", EventType.BARBECUE: "Barbecue/Outdoor",
})

# (main, sides, appetizers) servings per guest for a three-hour event
EVENT_PORTIONS = lookup_table(EventType, {
    EventType.APPETIZERS: (0, 0, 6), EventType.LUNCH: (1, 2, 2), EventType.DINNER: (1.5, 3, 3),
    EventType.BUFFET: (1.25, 2.5, 4), EventType.BARBECUE: (1.5, 3, 2),
})


class Bar(str, Enum):
    NONE = "none"
    BEER_WINE = "beer-wine"
    FULL_BAR = "full-bar"

BAR_OPTIONS = select_options(Bar, {Bar.NONE: "No Alcohol", Bar.BEER_WINE: "Beer and Wine", Bar.FULL_BAR: "Full Bar"})


def event_food_calculate(v: Dict[str, Any]) -> CalculationResult:
    guests, hours = int(v["guest_count"]), v["event_duration"]
    event, bar = EventType(v["meal_type"]), Bar(v["alcohol_served"])
    if guests <= 0 or hours <= 0:
        raise CalculationError("Please enter valid positive values")
    main, sides, apps = EVENT_PORTIONS[event]
    factor = min(hours / 3, 1.5)
    mains = math.ceil(guests * main * factor)
    results = [result(mains, "Main Dishes (servings)", "servings", INT),
               result(math.ceil(guests * sides * factor), "Side Dishes (servings)", "servings", INT),
               result(math.ceil(guests * apps * factor), "Appetizers (pieces)", "pieces", INT),
               result(math.ceil(guests * 2 * factor), "Water Bottles", "bottles", INT),
               result(math.ceil(guests * 1.5 * factor), "Soft Drinks", "cans", INT),
               result(math.ceil(guests * 0.5), "Coffee", "cups", INT)]
    if bar is not Bar.NONE:
        results.append(result(math.ceil(guests * 2 * factor), "Beer", "bottles", INT))
        results.append(result(math.ceil(guests * 0.5), "Wine", "bottles", INT))
    if bar is Bar.FULL_BAR:
        results.append(result(math.ceil(guests * 0.25), "Spirits", "bottles", INT))
    return CalculationResult(
        results=results,
        explanation=[f"Food and drink planning for {guests} guests for {num(hours)} hours",
                     f"{event.value} style event {'with' if bar is not Bar.NONE else 'without'} alcohol"],
        steps=[f"Base portions for {event.value}: {num(main)} main, {num(sides)} sides, "
               f"{num(apps)} appetizers per person",
               f"Duration factor: {fixed(factor, 1)}x for {num(hours)} hour event",
               f"Example: Main dishes = {guests} guests × {num(main)} × {fixed(factor, 1)} = {mains} servings"],
    )


# ---- school -----------------------------------------------------------------

class GradeMode(str, Enum):
    COURSE_GRADE = "course-grade"
    GPA = "gpa"

GRADE_MODE_OPTIONS = select_options(GradeMode, {
    GradeMode.COURSE_GRADE: "Calculate Course Grade", GradeMode.GPA: "Calculate GPA",
})


class LetterGrade(str, Enum):
    A = "4.0"
    A_MINUS = "3.7"
    B_PLUS = "3.3"
    B = "3.0"
    B_MINUS = "2.7"
    C_PLUS = "2.3"
    C = "2.0"
    C_MINUS = "1.7"
    D_PLUS = "1.3"
    D = "1.0"
    F = "0.0"

LETTER_GRADE_OPTIONS = select_options(LetterGrade, {
    LetterGrade.A: "A (4.0)", LetterGrade.A_MINUS: "A- (3.7)", LetterGrade.B_PLUS: "B+ (3.3)",
    LetterGrade.B: "B (3.0)", LetterGrade.B_MINUS: "B- (2.7)", LetterGrade.C_PLUS: "C+ (2.3)",
    LetterGrade.C: "C (2.0)", LetterGrade.C_MINUS: "C- (1.7)", LetterGrade.D_PLUS: "D+ (1.3)",
    LetterGrade.D: "D (1.0)", LetterGrade.F: "F (0.0)",
})

# (minimum percentage, letter), best first
LETTER_CUTOFFS = ((97, "A+"), (93, "A"), (90, "A-"), (87, "B+"), (83, "B"), (80, "B-"),
                  (77, "C+"), (73, "C"), (70, "C-"), (67, "D+"), (65, "D"))

ASSIGNMENT_SLOTS = 3
COURSE_SLOTS = 3


def letter_for(percentage: float) -> str:
    return next((letter for floor, letter in LETTER_CUTOFFS if percentage >= floor), "F")


def grade_calculate(v: Dict[str, Any]) -> CalculationResult:
    if GradeMode(v["calculation_type"]) is GradeMode.COURSE_GRADE:
        graded = [(v[f"assignment_{i}_points"] or 0, v[f"assignment_{i}_total"])
                  for i in range(1, ASSIGNMENT_SLOTS + 1) if v[f"assignment_{i}_total"]]
        if not graded:
            raise CalculationError("Please enter at least one assignment with points")
        earned = sum(e for e, _ in graded)
        possible = sum(t for _, t in graded)
        pct = earned / possible * 100
        letter = letter_for(pct)
        return CalculationResult(
            results=[result(round(pct, 1), "Course Grade", "%", D),
                     result(letter, "Letter Grade"),
                     result(earned, "Total Points Earned", "points"),
                     result(possible, "Total Points Possible", "points")],
            explanation=[f"Based on {plural(len(graded), 'assignment')}",
                         f"{num(earned)} out of {num(possible)} points = {fixed(pct, 1)}% ({letter})"],
            steps=[f"Points earned: {' + '.join(num(e) for e, _ in graded)} = {num(earned)}",
                   f"Points possible: {' + '.join(num(t) for _, t in graded)} = {num(possible)}",
                   f"Percentage: {num(earned)} ÷ {num(possible)} × 100 = {fixed(pct, 1)}%",
                   f"Letter grade: {letter}"],
        )

    courses = [(float(v[f"course_{i}_grade"]), v[f"course_{i}_credits"])
               for i in range(1, COURSE_SLOTS + 1)
               if v[f"course_{i}_grade"] is not None and v[f"course_{i}_credits"]]
    if not courses:
        raise CalculationError("Please enter at least one course with grade and credits")
    points = sum(g * c for g, c in courses)
    credits = sum(c for _, c in courses)
    gpa = points / credits
    return CalculationResult(
        results=[result(round(gpa, 3), "Cumulative GPA", format=D),
                 result(credits, "Total Credits", "credits"),
                 result(round(points, 1), "Total Grade Points", "points", D)],
        explanation=[f"GPA based on {plural(len(courses), 'course')} and {num(credits)} credit hours",
                     f"{fixed(gpa, 3)} GPA on 4.0 scale"],
        steps=[f"Grade points: {' + '.join(f'{num(g)} × {num(c)}' for g, c in courses)} = {fixed(points, 1)}",
               f"Total credits: {num(credits)}",
               f"GPA: {fixed(points, 1)} ÷ {num(credits)} = {fixed(gpa, 3)}"],
    )


class PercentMode(str, Enum):
    WHAT_PERCENT = "what-percent"
    PERCENT_OF = "percent-of"
    PERCENT_CHANGE = "percent-change"

PERCENT_MODE_OPTIONS = select_options(PercentMode, {
    PercentMode.WHAT_PERCENT: "What % is X of Y?", PercentMode.PERCENT_OF: "What is X% of Y?",
    PercentMode.PERCENT_CHANGE: "Percentage Change",
})


def percentage_calculate(v: Dict[str, Any]) -> CalculationResult:
    mode, x, y = PercentMode(v["calculation_type"]), v["number_1"], v["number_2"]
    if mode is PercentMode.WHAT_PERCENT:
        if y == 0:
            raise CalculationError("Cannot divide by zero")
        pct = x / y * 100
        return CalculationResult(
            results=[result(round(pct, 2), "Percentage", "%", D),
                     result(x, "Part"), result(y, "Whole")],
            explanation=[f"{num(x)} is {fixed(pct)}% of {num(y)}",
                         f"Fraction: {num(x)}/{num(y)} = {fixed(x / y, 4)}"],
            steps=["Formula: (Part ÷ Whole) × 100", f"Calculation: ({num(x)} ÷ {num(y)}) × 100",
                   f"Result: {fixed(x / y, 4)} × 100 = {fixed(pct)}%"],
        )
    if mode is PercentMode.PERCENT_OF:
        out = x / 100 * y
        return CalculationResult(
            results=[result(round(out, 2), "Result", format=D),
                     result(x, "Percentage", "%"), result(y, "Original Number")],
            explanation=[f"{num(x)}% of {num(y)} is {fixed(out)}",
                         f"Converting percentage to decimal: {num(x)}% = {fixed(x / 100, 3)}"],
            steps=["Formula: (Percentage ÷ 100) × Number", f"Calculation: ({num(x)} ÷ 100) × {num(y)}",
                   f"Result: {fixed(x / 100, 3)} × {num(y)} = {fixed(out)}"],
        )
    if x == 0:
        raise CalculationError("Original value cannot be zero for percentage change")
    change = y - x
    pct = change / x * 100
    up = change > 0
    word = "Increase" if up else "Decrease"
    return CalculationResult(
        results=[result(round(abs(pct), 2), f"Percentage {word}", "%", D),
                 result(round(change, 2), f"{word} Amount", format=D),
                 result(x, "Original Value"), result(y, "New Value")],
        explanation=[f"{word} from {num(x)} to {num(y)}", f"{fixed(abs(pct))}% {word.lower()}"],
        steps=[f"Change: {num(y)} - {num(x)} = {fixed(change)}", "Formula: (Change ÷ Original) × 100",
               f"Calculation: ({fixed(change)} ÷ {num(x)}) × 100",
               f"Result: {fixed(change / x, 4)} × 100 = {fixed(pct)}%"],
    )


# ---- technology -------------------------------------------------------------

SYMBOLS = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
REPEATS = re.compile(r"(.)\1{2,}")
COMMON_WORDS = re.compile(r"password|123456|qwerty|admin|letmein", re.IGNORECASE)

# (minimum score, level), strongest first
STRENGTH_LEVELS = ((80, "Very Strong"), (60, "Strong"), (40, "Moderate"), (20, "Weak"))


def length_points(length: int) -> int:
    if length >= 12:
        return 25
    if length >= 8:
        return 15
    if length >= 6:
        return 10
    return 5


def password_calculate(v: Dict[str, Any]) -> CalculationResult:
    password = v["password"]
    if not password:
        raise CalculationError("Please enter a password to analyze")
    feedback: List[str] = []
    score = length_points(len(password))
    if len(password) < 8:
        feedback.append("Use at least 8 characters")
    if len(password) < 12:
        feedback.append("Consider using 12+ characters for better security")

    classes = (
        (re.search(r"[a-z]", password), 10, "Add lowercase letters"),
        (re.search(r"[A-Z]", password), 10, "Add uppercase letters"),
        (re.search(r"\d", password), 10, "Add numbers"),
        (SYMBOLS.search(password), 15, "Add special characters (!@#$%^&*)"),
    )
    variety = variety_points = 0
    for found, points, advice in classes:
        if found:
            variety_points += points
            variety += 1
        else:
            feedback.append(advice)
    score += variety_points

    repeats = bool(REPEATS.search(password))
    common = bool(COMMON_WORDS.search(password))
    pattern_points = (0 if repeats else 10) + (0 if common else 10)
    if repeats:
        feedback.append("Avoid repeating characters")
    if common:
        feedback.append("Avoid common words and patterns")
    score += pattern_points

    level = next((name for floor, name in STRENGTH_LEVELS if score >= floor), "Very Weak")
    return CalculationResult(
        results=[result(f"{level} ({score}/100)", "Password Strength"),
                 result(len(password), "Password Length", "characters", INT),
                 result(variety, "Character Types Used", "/4", INT),
                 result(", ".join(feedback) or "None", "Suggestions")],
        explanation=[f"Password strength: {level} ({score}/100 points)",
                     "Excellent password!" if not feedback
                     else f"{len(feedback)} improvement{'s' if len(feedback) > 1 else ''} suggested"],
        steps=[f"Length ({len(password)} chars): {length_points(len(password))} points",
               f"Character types ({variety}/4): {variety_points} points",
               f"Pattern bonus: {pattern_points} points",
               f"Total score: {score}/100 points"],
    )


def data_usage_calculate(v: Dict[str, Any]) -> CalculationResult:
    plan, used = v["data_plan"], v["data_used"]
    days, cycle = int(v["days_into_cycle"]), int(v["cycle_length"])
    rate = v["overage_cost"] if v["overage_cost"] is not None else 10
    if plan <= 0 or used < 0 or days <= 0 or cycle <= 0:
        raise CalculationError("Please enter valid positive values")
    if days > cycle:
        raise CalculationError("Days into cycle cannot exceed cycle length")
    daily = used / days
    projected = daily * cycle
    remaining = max(0.0, plan - used)
    left_days = cycle - days
    overage = max(0.0, projected - plan)
    cost = overage * rate
    advised = remaining / left_days if left_days > 0 else 0.0
    return CalculationResult(
        results=[result(round(projected, 2), "Projected Monthly Usage", "GB", D),
                 result(round(remaining, 2), "Data Remaining", "GB", D),
                 result(round(overage, 2), "Projected Overage", "GB", D),
                 result(cents(cost), "Estimated Overage Cost", "$", CUR),
                 result(round(advised, 3), "Recommended Daily Usage", "GB/day", D)],
        explanation=[f"{fixed(used / plan * 100, 1)}% of data used in {fixed(days / cycle * 100, 1)}% of billing cycle",
                     f"On track to exceed limit by {fixed(overage)} GB" if overage > 0
                     else "Staying within data limit"],
        steps=[f"Daily usage: {num(used)} GB ÷ {days} days = {fixed(daily, 3)} GB/day",
               f"Projected total: {fixed(daily, 3)} GB/day × {cycle} days = {fixed(projected)} GB",
               f"Overage: {fixed(projected)} - {num(plan)} = {fixed(overage)} GB",
               f"Overage cost: {fixed(overage)} GB × {money(rate)}/GB = {money(cost)}"],
    )


class SpeedScale(str, Enum):
    MBPS = "mbps"
    GBPS = "gbps"
    KBPS = "kbps"

SPEED_SCALE_OPTIONS = select_options(SpeedScale, {
    SpeedScale.MBPS: "Mbps (Megabits per second)", SpeedScale.GBPS: "Gbps (Gigabits per second)",
    SpeedScale.KBPS: "Kbps (Kilobits per second)",
})
TO_MBPS = lookup_table(SpeedScale, {SpeedScale.MBPS: 1, SpeedScale.GBPS: 1000, SpeedScale.KBPS: 0.001})


class FileScale(str, Enum):
    MB = "mb"
    GB = "gb"
    KB = "kb"

FILE_SCALE_OPTIONS = select_options(FileScale, {
    FileScale.MB: "MB (Megabytes)", FileScale.GB: "GB (Gigabytes)", FileScale.KB: "KB (Kilobytes)",
})
TO_MEGABYTES = lookup_table(FileScale, {FileScale.MB: 1, FileScale.GB: 1024, FileScale.KB: 1 / 1024})

DOWNLOAD_OVERHEAD = 1.2


def download_time(seconds: float) -> str:
    if seconds < 60:
        return f"{round(seconds)} seconds"
    if seconds < 3600:
        return f"{int(seconds // 60)}m {round(seconds % 60)}s"
    return f"{int(seconds // 3600)}h {int(seconds % 3600 // 60)}m"


def wifi_calculate(v: Dict[str, Any]) -> CalculationResult:
    speed, scale = v["internet_speed"], SpeedScale(v["speed_unit"])
    if speed <= 0:
        raise CalculationError("Please enter a valid internet speed")
    mbps = speed * TO_MBPS[scale]
    mb_per_s = mbps / 8
    results = [result(round(mbps, 2), "Speed in Mbps", "Mbps", D),
               result(round(mb_per_s, 2), "Speed in MB/s", "MB/s", D),
               result(round(mbps * 1000), "Speed in Kbps", "Kbps", INT),
               result(round(mbps / 1000, 3), "Speed in Gbps", "Gbps", D)]
    explanation = [f"Internet speed: {num(speed)} {scale.value.upper()}",
                   f"Theoretical maximum download rate: {fixed(mb_per_s)} MB/s"]
    steps = [f"Original speed: {num(speed)} {scale.value.upper()}",
             f"Converted to Mbps: {fixed(mbps)} Mbps",
             f"Download rate: {fixed(mbps)} Mbps ÷ 8 = {fixed(mb_per_s)} MB/s"]

    size, file_unit = v["file_size"], v["file_unit"]
    if size and file_unit:
        scale_f = FileScale(file_unit)
        megabytes = size * TO_MEGABYTES[scale_f]
        seconds = megabytes / mb_per_s * DOWNLOAD_OVERHEAD
        shown = download_time(seconds)
        results.append(result(shown, "Estimated Download Time"))
        explanation.append(f"{num(size)} {scale_f.value.upper()} file download: approximately {shown}")
        steps.append(f"Download time: {fixed(megabytes, 1)} MB ÷ {fixed(mb_per_s)} MB/s × "
                     f"{DOWNLOAD_OVERHEAD} = {fixed(seconds, 1)} seconds")
    return CalculationResult(results=results, explanation=explanation, steps=steps)


class Device(str, Enum):
    SMARTPHONE = "smartphone"
    TABLET = "tablet"
    LAPTOP = "laptop"
    SMARTWATCH = "smartwatch"
    EARBUDS = "earbuds"

DEVICE_OPTIONS = select_options(Device, {
    Device.SMARTPHONE: "Smartphone", Device.TABLET: "Tablet", Device.LAPTOP: "Laptop",
    Device.SMARTWATCH: "Smartwatch", Device.EARBUDS: "Wireless Earbuds",
})
# Hours on a full charge with moderate use
BASE_BATTERY_HOURS = lookup_table(Device, {
    Device.SMARTPHONE: 24, Device.TABLET: 10, Device.LAPTOP: 8, Device.SMARTWATCH: 18, Device.EARBUDS: 6,
})


class Usage(str, Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"
    EXTREME = "extreme"

USAGE_OPTIONS = select_options(Usage, {
    Usage.LIGHT: "Light (basic tasks, standby)", Usage.MODERATE: "Moderate (normal usage)",
    Usage.HEAVY: "Heavy (gaming, video, GPS)", Usage.EXTREME: "Extreme (intensive apps, max brightness)",
})
USAGE_FACTORS = lookup_table(Usage, {Usage.LIGHT: 1.5, Usage.MODERATE: 1.0, Usage.HEAVY: 0.6, Usage.EXTREME: 0.4})


class Brightness(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    MAX = "max"

BRIGHTNESS_OPTIONS = select_options(Brightness, {
    Brightness.LOW: "Low (25%)", Brightness.MEDIUM: "Medium (50%)",
    Brightness.HIGH: "High (75%)", Brightness.MAX: "Maximum (100%)",
})
BRIGHTNESS_FACTORS = lookup_table(Brightness, {
    Brightness.LOW: 1.2, Brightness.MEDIUM: 1.0, Brightness.HIGH: 0.8, Brightness.MAX: 0.6,
})


def battery_calculate(v: Dict[str, Any]) -> CalculationResult:
    level, device, usage = v["current_battery"], Device(v["device_type"]), Usage(v["usage_intensity"])
    brightness = Brightness(v["screen_brightness"] or Brightness.MEDIUM.value)
    if not 0 < level <= 100:
        raise CalculationError("Battery level must be between 1-100%")
    base, u = BASE_BATTERY_HOURS[device], USAGE_FACTORS[usage]
    b = 1.0 if device is Device.EARBUDS else BRIGHTNESS_FACTORS[brightness]
    share = level / 100
    hours = base * u * b * share
    per_percent = hours / level
    left = hours_minutes(hours)

    def until(target: int) -> str:
        if level <= target:
            return f"Already below {target}%"
        return hours_minutes((level - target) * per_percent)

    return CalculationResult(
        results=[result(left, "Estimated Battery Life"),
                 result(round(hours, 1), "Total Hours", "hours", D),
                 result(until(50), "Time to 50%"),
                 result(until(20), "Time to 20%")],
        explanation=[f"{device.value} at {num(level)}% with {usage.value} usage",
                     f"Estimated {left} remaining"
                     + ("" if device is Device.EARBUDS else f" at {brightness.value} brightness")],
        steps=[f"Base {device.value} life: {base} hours", f"Usage factor ({usage.value}): ×{num(u)}",
               "No brightness factor (earbuds)" if device is Device.EARBUDS
               else f"Brightness factor ({brightness.value}): ×{num(b)}",
               f"Battery level: {num(level)}% = ×{num(share)}",
               f"Total: {base} × {num(u)} × {num(b)} × {num(share)} = {fixed(hours, 1)} hours"],
    )


# ---- home & practical -------------------------------------------------------

class Quantity(str, Enum):
    TEMPERATURE = "temperature"
    LENGTH = "length"
    WEIGHT = "weight"
    VOLUME = "volume"

QUANTITY_OPTIONS = select_options(Quantity, {
    Quantity.TEMPERATURE: "Temperature", Quantity.LENGTH: "Length/Distance",
    Quantity.WEIGHT: "Weight/Mass", Quantity.VOLUME: "Volume",
})
QUANTITY_UNITS = lookup_table(Quantity, {
    Quantity.TEMPERATURE: TemperatureUnit, Quantity.LENGTH: LengthUnit,
    Quantity.WEIGHT: MassUnit, Quantity.VOLUME: VolumeUnit,
})

UNIT_LABELS = {
    TemperatureUnit.CELSIUS: "Celsius (°C)", TemperatureUnit.FAHRENHEIT: "Fahrenheit (°F)",
    TemperatureUnit.KELVIN: "Kelvin (K)",
    LengthUnit.MM: "Millimeters", LengthUnit.CM: "Centimeters", LengthUnit.M: "Meters",
    LengthUnit.KM: "Kilometers", LengthUnit.IN: "Inches", LengthUnit.FT: "Feet",
    LengthUnit.YD: "Yards", LengthUnit.MI: "Miles",
    MassUnit.MG: "Milligrams", MassUnit.G: "Grams", MassUnit.KG: "Kilograms",
    MassUnit.OZ: "Ounces", MassUnit.LB: "Pounds", MassUnit.TON: "Metric Tons",
    VolumeUnit.ML: "Milliliters", VolumeUnit.L: "Liters", VolumeUnit.TSP: "Teaspoons",
    VolumeUnit.TBSP: "Tablespoons", VolumeUnit.CUP: "Cups", VolumeUnit.FL_OZ: "Fluid Ounces",
    VolumeUnit.PT: "Pints", VolumeUnit.QT: "Quarts", VolumeUnit.GAL: "Gallons",
}

# One flat option list; the chosen conversion type decides which units are valid
CONVERTIBLE_UNITS = tuple(u for q in Quantity for u in QUANTITY_UNITS[q])
UNIT_OPTIONS = tuple((u.value, UNIT_LABELS[u]) for u in CONVERTIBLE_UNITS)


def _unit_of(quantity: Quantity, raw: str):
    enum_cls = QUANTITY_UNITS[quantity]
    try:
        return enum_cls(raw)
    except ValueError:
        raise CalculationError(f"'{raw}' is not a {quantity.value} unit") from None


def unit_convert_calculate(v: Dict[str, Any]) -> CalculationResult:
    quantity, value = Quantity(v["conversion_type"]), v["from_value"]
    src, dst = _unit_of(quantity, v["from_unit"]), _unit_of(quantity, v["to_unit"])
    try:
        out = convert_scalar(value, src, dst)
    except UnitError as e:
        raise CalculationError(str(e)) from e
    a, b = symbol(src), symbol(dst)
    return CalculationResult(
        results=[result(round(out, 4), f"Result in {b}", b, D),
                 result(value, "Original Value", a)],
        explanation=[f"Converting {num(value)} {a} to {b}", f"Result: {fixed(out, 4)} {b}"],
        steps=[f"Formula: convert {quantity.value} from {a} to {b}",
               f"{num(value)} {a} = {fixed(out, 6)} {b}"],
    )


SQFT_PER_GALLON = 350
PAINT_COST_PER_GALLON = 45
DOOR_SQFT = 20
WINDOW_SQFT = 15


class Coats(str, Enum):
    ONE = "1"
    TWO = "2"
    THREE = "3"

COAT_OPTIONS = select_options(Coats, {
    Coats.ONE: "1 Coat", Coats.TWO: "2 Coats (recommended)", Coats.THREE: "3 Coats (dark colors)",
})


def paint_calculate(v: Dict[str, Any]) -> CalculationResult:
    length, width, height = v["room_length"], v["room_width"], v["ceiling_height"]
    doors, windows = int(v["doors"]), int(v["windows"])
    coats = int(Coats(v["paint_coats"]).value)
    if length <= 0 or width <= 0 or height <= 0:
        raise CalculationError("Please enter valid positive dimensions")
    perimeter = 2 * (length + width)
    wall = perimeter * height
    openings = doors * DOOR_SQFT + windows * WINDOW_SQFT
    net = wall - openings
    if net <= 0:
        raise CalculationError("Doors and windows cover the entire wall area")
    area = net * coats
    gallons = area / SQFT_PER_GALLON
    whole = math.ceil(gallons)
    ceiling = length * width
    return CalculationResult(
        results=[result(whole, "Gallons Needed (walls)", "gallons", INT),
                 result(math.ceil(gallons * 4), "Quarts Needed (walls)", "quarts", INT),
                 result(round(net), "Wall Area to Paint", "sq ft", INT),
                 result(round(ceiling), "Ceiling Area", "sq ft", INT),
                 result(math.ceil(ceiling / SQFT_PER_GALLON), "Extra for Ceiling", "gallons", INT),
                 result(whole * PAINT_COST_PER_GALLON, "Estimated Cost (walls)", "$", CUR)],
        explanation=[f"Room: {num(length)}' × {num(width)}' with {num(height)}' ceilings",
                     f"{plural(coats, 'coat')} needed for {net:.0f} sq ft of wall area"],
        steps=[f"Wall perimeter: 2 × ({num(length)} + {num(width)}) = {num(perimeter)} feet",
               f"Wall area: {num(perimeter)} × {num(height)} = {num(wall)} sq ft",
               f"Minus doors/windows: {num(wall)} - {openings} = {num(net)} sq ft",
               f"Total area ({coats} coats): {num(net)} × {coats} = {num(area)} sq ft",
               f"Paint needed: {num(area)} ÷ {SQFT_PER_GALLON} = {fixed(gallons)} gallons"],
    )


class Generator(str, Enum):
    NUMBER = "number"
    DICE = "dice"
    COIN = "coin"
    LIST = "list"

GENERATOR_OPTIONS = select_options(Generator, {
    Generator.NUMBER: "Random Number", Generator.DICE: "Dice Roll",
    Generator.COIN: "Coin Flip", Generator.LIST: "Pick from List",
})


class Die(str, Enum):
    D6 = "6"
    D4 = "4"
    D8 = "8"
    D10 = "10"
    D12 = "12"
    D20 = "20"

DIE_OPTIONS = select_options(Die, {
    Die.D6: "Standard (6-sided)", Die.D4: "4-sided (D4)", Die.D8: "8-sided (D8)",
    Die.D10: "10-sided (D10)", Die.D12: "12-sided (D12)", Die.D20: "20-sided (D20)",
})


def random_calculate(v: Dict[str, Any]) -> CalculationResult:
    kind = Generator(v["generator_type"])
    rng = _rng
    if kind is Generator.NUMBER:
        low, high = int(v["min_number"]), int(v["max_number"])
        if low >= high:
            raise CalculationError("Maximum number must be greater than minimum number")
        picked = rng.randint(low, high)
        return CalculationResult(
            results=[result(picked, "Random Number", format=INT), result(f"{low} - {high}", "Range")],
            explanation=[f"Random number generated between {low} and {high}", f"Result: {picked}"],
            steps=[f"Range: {low} to {high}", f"Uniform pick among {high - low + 1} integers",
                   f"Result: {picked}"],
        )
    if kind is Generator.DICE:
        sides = int(Die(v["dice_type"] or Die.D6.value).value)
        count = int(v["dice_count"])
        rolls = [rng.randint(1, sides) for _ in range(count)]
        total = sum(rolls)
        listed = ", ".join(map(str, rolls))
        return CalculationResult(
            results=[result(total, "Total", format=INT), result(listed, "Individual Rolls"),
                     result(round(total / count, 1), "Average Roll", format=D),
                     result(f"{count}d{sides}", "Dice Notation")],
            explanation=[f"Rolled {count} {sides}-sided dice", f"Total: {total}, Individual: [{listed}]"],
            steps=[f"Rolling {count}d{sides}", f"Individual rolls: {listed}",
                   f"Total: {' + '.join(map(str, rolls))} = {total}"],
        )
    if kind is Generator.COIN:
        side = "Heads" if rng.random() < 0.5 else "Tails"
        return CalculationResult(
            results=[result(side, "Coin Flip Result"), result("50%", "Probability")],
            explanation=[f"Coin flip result: {side}", "Each flip has a 50% chance of heads or tails"],
            steps=["Generating random number 0-1", f"Random < 0.5 = {side}", f"Result: {side}"],
        )

    raw = (v["custom_list"] or "").strip()
    if not raw:
        raise CalculationError("Please enter a comma-separated list of items")
    items = [item.strip() for item in raw.split(",") if item.strip()]
    if len(items) < 2:
        raise CalculationError("Please enter at least 2 items in the list")
    index = rng.randrange(len(items))
    chosen = items[index]
    return CalculationResult(
        results=[result(chosen, "Selected Item"), result(len(items), "Total Items", "items", INT),
                 result(f"{100 / len(items):.1f}%", "Selection Probability")],
        explanation=[f"Randomly selected from {len(items)} items", f'Selected: "{chosen}"'],
        steps=[f"Items: [{', '.join(items)}]", f"Random index: {index} (0-{len(items) - 1})",
               f'Selected item: "{chosen}"'],
    )


def _optional_money(fid: str, label: str, placeholder: str) -> Any:
    return number(fid, label, required=False, min=0, step=0.01, placeholder=placeholder)


DAILY_LIFE: List[Calculator] = [
    Calculator(
        id="tip-calculator",
        title="Tip Calculator",
        description="Calculate tips and split bills at restaurants quickly and accurately.",
        category=CATEGORY,
        inputs=(
            number("bill_amount", "Bill Amount ($)", min=0, step=0.01, placeholder="Enter total bill"),
            number("tip_percentage", "Tip Percentage (%)", min=0, max=100, default=18,
                   placeholder="Standard is 15-20%"),
            number("number_of_people", "Number of People", min=1, step=1, default=1, placeholder="How many people?"),
        ),
        formula="Tip = Bill Amount × (Tip % ÷ 100), Total per Person = (Bill + Tip) ÷ Number of People",
        compute=tip_calculate,
        tags=("tip", "restaurant", "bill", "split", "dining"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="discount-calculator",
        title="Discount Calculator",
        description="Find sale prices and calculate percentage savings on purchases.",
        category=CATEGORY,
        inputs=(
            number("original_price", "Original Price ($)", min=0, step=0.01, placeholder="Enter original price"),
            select("discount_type", "Discount Type", DISCOUNT_OPTIONS),
            number("discount_value", "Discount Value", min=0, step=0.01, placeholder="Enter discount"),
        ),
        formula="Sale Price = Original Price - Discount Amount",
        compute=discount_calculate,
        tags=("discount", "sale", "savings", "shopping", "percentage"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="tax-calculator",
        title="Sales Tax Calculator",
        description="Add sales tax to purchases and calculate total cost.",
        category=CATEGORY,
        inputs=(
            number("price_before_tax", "Price Before Tax ($)", min=0, step=0.01, placeholder="Enter price"),
            number("tax_rate", "Sales Tax Rate (%)", min=0, max=50, step=0.01, default=8.25,
                   placeholder="Enter tax rate"),
        ),
        formula="Tax Amount = Price × (Tax Rate ÷ 100), Total = Price + Tax",
        compute=tax_calculate,
        tags=("tax", "sales-tax", "shopping", "total-cost"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="split-bill-calculator",
        title="Split Bill Calculator",
        description="Divide costs among friends or group members with custom amounts.",
        category=CATEGORY,
        inputs=(
            number("total_bill", "Total Bill ($)", min=0, step=0.01, placeholder="Enter total amount"),
            number("number_of_people", "Number of People", min=1, max=20, step=1, default=2,
                   placeholder="How many people?"),
            number("tip_percentage", "Tip Percentage (%)", required=False, min=0, max=100, default=18,
                   placeholder="Optional tip"),
            select("split_type", "Split Type", SPLIT_OPTIONS),
        ),
        formula="Total = Bill + Tip, Per Person = Total ÷ Number of People",
        compute=split_bill_calculate,
        tags=("split", "bill", "group", "friends", "dining"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="subscription-cost-tracker",
        title="Subscription Cost Tracker",
        description="Calculate total monthly and yearly subscription costs.",
        category=CATEGORY,
        inputs=(
            _optional_money("subscription_1", "Subscription 1 ($/month)", "Netflix, Spotify, etc."),
            _optional_money("subscription_2", "Subscription 2 ($/month)", "Gym, software, etc."),
            _optional_money("subscription_3", "Subscription 3 ($/month)", "Cloud storage, etc."),
            _optional_money("subscription_4", "Subscription 4 ($/month)", "Optional"),
            _optional_money("subscription_5", "Subscription 5 ($/month)", "Optional"),
        ),
        formula="Total Monthly = Sum of all subscriptions, Total Yearly = Monthly × 12",
        compute=subscription_calculate,
        tags=("subscription", "monthly", "budget", "recurring", "cost"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="commute-cost-calculator",
        title="Commute Cost Calculator",
        description="Compare daily and monthly costs of driving vs public transit.",
        category=CATEGORY,
        inputs=(
            number("distance_miles", "One-way Distance (miles)", min=0, step=0.1, placeholder="Distance to work"),
            number("gas_price", "Gas Price ($/gallon)", min=0, step=0.01, default=3.50,
                   placeholder="Current gas price"),
            number("mpg", "Car MPG", min=1, step=0.1, default=25, placeholder="Miles per gallon"),
            _optional_money("parking_cost", "Daily Parking ($)", "Optional parking fee"),
            _optional_money("transit_cost", "Transit Cost ($/day)", "Bus/train daily cost"),
            number("work_days", "Work Days per Month", min=1, max=31, step=1, default=22,
                   placeholder="Usually 20-22"),
        ),
        formula="Driving Cost = (Distance × 2 × Gas Price ÷ MPG) + Parking, Monthly = Daily × Work Days",
        compute=commute_calculate,
        tags=("commute", "gas", "transit", "driving", "cost-comparison"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="phone-bill-splitter",
        title="Phone Bill Splitter",
        description="Split family phone plan costs fairly among family members.",
        category=CATEGORY,
        inputs=(
            number("total_bill", "Total Monthly Bill ($)", min=0, step=0.01, placeholder="Family plan cost"),
            number("base_cost", "Base Plan Cost ($)", min=0, step=0.01, placeholder="Fixed monthly cost"),
            number("number_of_lines", "Number of Lines", min=1, max=10, step=1, default=4, placeholder="Total lines"),
            _optional_money("data_overage", "Data Overage Charges ($)", "Extra data charges"),
            select("split_method", "Split Method", PHONE_SPLIT_OPTIONS),
        ),
        formula="Per Line = (Total Bill - Base Cost) ÷ Number of Lines + (Base Cost ÷ Number of Lines)",
        compute=phone_bill_calculate,
        tags=("phone", "family-plan", "split", "monthly", "cell-phone"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="age-calculator",
        title="Age Calculator",
        description="Calculate exact age in years, months, days, or total days lived.",
        category=CATEGORY,
        inputs=(
            date_input("birth_date", "Birth Date", placeholder="Select birth date"),
            date_input("calculation_date", "Calculate As Of", required=False, placeholder="Leave blank for today"),
        ),
        formula="Age = Current Date - Birth Date",
        compute=age_calculate,
        tags=("age", "birthday", "date", "time", "days-lived"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="time-zone-converter",
        title="Time Zone Converter",
        description="Convert time between different time zones worldwide.",
        category=CATEGORY,
        inputs=(
            text("source_time", "Time", placeholder="e.g., 2:30 PM or 14:30"),
            select("source_timezone", "From Time Zone", TIME_ZONE_OPTIONS),
            select("target_timezone", "To Time Zone", TIME_ZONE_OPTIONS),
        ),
        formula="Target Time = Source Time + Time Zone Offset Difference",
        compute=time_zone_calculate,
        tags=("time-zone", "time", "conversion", "world-time", "travel"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="date-calculator",
        title="Date Calculator",
        description="Calculate days between dates or add/subtract days from a date.",
        category=CATEGORY,
        inputs=(
            select("calculation_type", "Calculation Type", DATE_MODE_OPTIONS),
            date_input("start_date", "Start Date", placeholder="First date"),
            date_input("end_date", "End Date", required=False, placeholder="Second date (for between calculation)"),
            number("days_to_add", "Days to Add/Subtract", required=False, step=1, placeholder="Number of days"),
        ),
        formula="Days Between = |End Date - Start Date|, New Date = Start Date ± Days",
        compute=date_calculate,
        tags=("date", "days", "calendar", "time", "duration"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="sleep-calculator",
        title="Sleep Calculator",
        description="Find optimal bedtime based on wake time and sleep cycles.",
        category=CATEGORY,
        inputs=(
            text("wake_time", "Wake Up Time", placeholder="e.g., 7:00 AM"),
            select("sleep_cycles", "Desired Sleep Cycles", SLEEP_CYCLE_OPTIONS),
            number("fall_asleep_time", "Time to Fall Asleep (minutes)", min=0, max=60, step=1, default=15,
                   placeholder="Usually 10-20 minutes"),
        ),
        formula="Bedtime = Wake Time - (Sleep Cycles × 90 minutes) - Fall Asleep Time",
        compute=sleep_calculate,
        tags=("sleep", "bedtime", "sleep-cycles", "wake-time", "health"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="fuel-cost-calculator",
        title="Fuel Cost Calculator",
        description="Calculate trip cost based on distance, gas prices, and vehicle efficiency.",
        category=CATEGORY,
        inputs=(
            number("distance", "Distance (miles)", min=0, step=0.1, placeholder="Trip distance"),
            number("mpg", "Vehicle MPG", min=1, step=0.1, placeholder="Miles per gallon"),
            number("gas_price", "Gas Price ($/gallon)", min=0, step=0.01, placeholder="Current gas price"),
            select("trip_type", "Trip Type", TRIP_OPTIONS),
        ),
        formula="Fuel Cost = (Distance ÷ MPG) × Gas Price",
        compute=fuel_cost_calculate,
        tags=("fuel", "gas", "trip", "cost", "travel", "mpg"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="walking-running-time",
        title="Walking/Running Time Calculator",
        description="Estimate time to walk or run a given distance at different paces.",
        category=CATEGORY,
        inputs=(
            number("distance", "Distance", min=0, step=0.1, placeholder="Distance to travel"),
            select("distance_unit", "Distance Unit", TRAVEL_UNIT_OPTIONS),
            select("activity_type", "Activity", ACTIVITY_OPTIONS),
            number("custom_pace", "Custom Pace (mph)", required=False, min=0.1, step=0.1,
                   placeholder="If custom selected"),
        ),
        formula="Time = Distance ÷ Speed",
        compute=walking_time_calculate,
        tags=("walking", "running", "time", "pace", "exercise", "fitness"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="water-intake-calculator",
        title="Water Intake Calculator",
        description="Calculate daily water needs based on weight, activity, and climate.",
        category=CATEGORY,
        inputs=(
            number("weight", "Body Weight", min=50, max=500, placeholder="Your weight"),
            select("weight_unit", "Weight Unit", BODY_WEIGHT_OPTIONS),
            select("activity_level", "Activity Level", ACTIVITY_LEVEL_OPTIONS),
            select("climate", "Climate", CLIMATE_OPTIONS),
        ),
        formula="Base Water = Weight × 0.5-1 oz/lb, Adjusted for Activity and Climate",
        compute=water_intake_calculate,
        tags=("water", "hydration", "health", "daily-intake", "wellness"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="event-food-calculator",
        title="Event Food Calculator",
        description="Calculate how much food and drinks needed for party or event size.",
        category=CATEGORY,
        inputs=(
            number("guest_count", "Number of Guests", min=1, max=1000, step=1, placeholder="Total attendees"),
            number("event_duration", "Event Duration (hours)", min=1, max=24, placeholder="Length of event"),
            select("meal_type", "Event Type", EVENT_OPTIONS),
            select("alcohol_served", "Alcohol Served", BAR_OPTIONS),
        ),
        formula="Food/Drink Quantities = Guests × Per-Person Portions × Event Duration Factor",
        compute=event_food_calculate,
        tags=("party", "event", "food", "catering", "planning", "guests"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="grade-gpa-calculator",
        title="Grade/GPA Calculator",
        description="Calculate course grades and cumulative GPA with credit hours.",
        category=CATEGORY,
        inputs=(select("calculation_type", "Calculation Type", GRADE_MODE_OPTIONS),)
        + tuple(f for i in range(1, ASSIGNMENT_SLOTS + 1) for f in (
            number(f"assignment_{i}_points", f"Assignment {i} Points", required=False, min=0,
                   placeholder="Points earned"),
            number(f"assignment_{i}_total", f"Assignment {i} Total", required=False, min=1,
                   placeholder="Points possible"),
        ))
        + tuple(f for i in range(1, COURSE_SLOTS + 1) for f in (
            select(f"course_{i}_grade", f"Course {i} Grade", LETTER_GRADE_OPTIONS, required=False),
            number(f"course_{i}_credits", f"Course {i} Credits", required=False, min=1, max=6,
                   placeholder="Credit hours"),
        )),
        formula="Course Grade = Total Points Earned ÷ Total Points Possible × 100, "
                "GPA = Σ(Grade Points × Credits) ÷ Total Credits",
        compute=grade_calculate,
        tags=("grade", "gpa", "school", "academic", "percentage", "education"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="percentage-calculator",
        title="Percentage Calculator",
        description="Calculate percentages, percentage increase/decrease, and find what percent "
                    "one number is of another.",
        category=CATEGORY,
        inputs=(
            select("calculation_type", "Calculation Type", PERCENT_MODE_OPTIONS),
            number("number_1", "First Number", step=0.01, placeholder="Enter first number"),
            number("number_2", "Second Number", step=0.01, placeholder="Enter second number"),
        ),
        formula="Varies by calculation type: % = (X/Y) × 100, X% of Y = (X/100) × Y, "
                "% Change = ((New-Old)/Old) × 100",
        compute=percentage_calculate,
        tags=("percentage", "percent", "math", "calculation", "ratio"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="password-strength-checker",
        title="Password Strength Checker",
        description="Analyze password security and get suggestions for improvement.",
        category=CATEGORY,
        inputs=(text("password", "Password to Check", placeholder="Enter password to analyze"),),
        formula="Strength = Length + Character Variety + Pattern Analysis",
        compute=password_calculate,
        tags=("password", "security", "strength", "cyber-security", "digital"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="data-usage-calculator",
        title="Data Usage Calculator",
        description="Track mobile data consumption and calculate overage costs.",
        category=CATEGORY,
        inputs=(
            number("data_plan", "Monthly Data Plan (GB)", min=0.1, step=0.1, placeholder="e.g., 10"),
            number("data_used", "Data Used So Far (GB)", min=0, step=0.01, placeholder="Current usage"),
            number("days_into_cycle", "Days into Billing Cycle", min=1, max=31, step=1, placeholder="e.g., 15"),
            number("cycle_length", "Billing Cycle Length (days)", min=28, max=31, step=1, default=30,
                   placeholder="Usually 30"),
            number("overage_cost", "Overage Cost ($/GB)", required=False, min=0, step=0.01, default=10,
                   placeholder="Cost per GB over limit"),
        ),
        formula="Projected Usage = (Data Used ÷ Days) × Cycle Length, Overage = (Usage - Plan) × Cost",
        compute=data_usage_calculate,
        tags=("data", "mobile", "usage", "overage", "cell-phone", "billing"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="wifi-speed-converter",
        title="WiFi Speed Converter",
        description="Convert internet speeds and calculate real download times.",
        category=CATEGORY,
        inputs=(
            number("internet_speed", "Internet Speed", min=0.1, step=0.1, placeholder="Your internet speed"),
            select("speed_unit", "Speed Unit", SPEED_SCALE_OPTIONS),
            number("file_size", "File Size to Download", required=False, min=0.1, step=0.1,
                   placeholder="Optional file size"),
            select("file_unit", "File Size Unit", FILE_SCALE_OPTIONS, required=False),
        ),
        formula="Download Time = File Size (MB) ÷ (Speed in Mbps ÷ 8), 1 Byte = 8 bits",
        compute=wifi_calculate,
        tags=("wifi", "internet", "speed", "download", "mbps", "bandwidth"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="battery-life-estimator",
        title="Battery Life Estimator",
        description="Estimate how long device battery will last based on usage.",
        category=CATEGORY,
        inputs=(
            number("current_battery", "Current Battery Level (%)", min=1, max=100, placeholder="Current charge %"),
            select("device_type", "Device Type", DEVICE_OPTIONS),
            select("usage_intensity", "Usage Intensity", USAGE_OPTIONS),
            select("screen_brightness", "Screen Brightness", BRIGHTNESS_OPTIONS, required=False),
        ),
        formula="Battery Life = (Current % ÷ 100) × Base Life × Usage Factor × Brightness Factor",
        compute=battery_calculate,
        tags=("battery", "device", "smartphone", "laptop", "power", "charge"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="unit-converter",
        title="Unit Converter",
        description="Quick conversions between common units (temperature, length, weight).",
        category=CATEGORY,
        inputs=(
            select("conversion_type", "Conversion Type", QUANTITY_OPTIONS),
            number("from_value", "Value to Convert", step=0.01, placeholder="Enter value"),
            select("from_unit", "From Unit", UNIT_OPTIONS),
            select("to_unit", "To Unit", UNIT_OPTIONS),
        ),
        formula="Varies by conversion type and units selected",
        compute=unit_convert_calculate,
        tags=("conversion", "units", "temperature", "length", "weight", "volume"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="paint-coverage-calculator",
        title="Paint Coverage Calculator",
        description="Calculate how much paint needed for room square footage.",
        category=CATEGORY,
        inputs=(
            number("room_length", "Room Length (feet)", min=1, step=0.1, placeholder="Length of room"),
            number("room_width", "Room Width (feet)", min=1, step=0.1, placeholder="Width of room"),
            number("ceiling_height", "Ceiling Height (feet)", min=6, max=20, default=8, placeholder="Height of walls"),
            number("doors", "Number of Doors", min=0, max=10, step=1, default=2, placeholder="Standard doors"),
            number("windows", "Number of Windows", min=0, max=20, step=1, default=4, placeholder="Standard windows"),
            select("paint_coats", "Number of Coats", COAT_OPTIONS),
        ),
        formula="Wall Area = (2 × Length + 2 × Width) × Height - Door/Window Area, "
                "Paint = Area ÷ Coverage per Gallon",
        compute=paint_calculate,
        tags=("paint", "home", "renovation", "coverage", "room", "diy"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="random-number-generator",
        title="Random Number/Dice Generator",
        description="Generate random numbers, dice rolls, or pick random items from lists.",
        category=CATEGORY,
        inputs=(
            select("generator_type", "Generator Type", GENERATOR_OPTIONS),
            number("min_number", "Minimum Number", required=False, step=1, default=1, placeholder="Minimum value"),
            number("max_number", "Maximum Number", required=False, step=1, default=100, placeholder="Maximum value"),
            select("dice_type", "Dice Type", DIE_OPTIONS, required=False),
            number("dice_count", "Number of Dice", required=False, min=1, max=10, step=1, default=1,
                   placeholder="How many dice?"),
            text("custom_list", "Custom List (comma separated)", required=False, placeholder="item1, item2, item3..."),
        ),
        formula="Uniform random generation with the specified parameters",
        compute=random_calculate,
        tags=("random", "dice", "number", "generator", "coin-flip", "games"),
        complexity=Complexity.BASIC,
    ),
]
