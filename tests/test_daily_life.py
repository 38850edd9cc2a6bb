from datetime import date

import pytest

from crunchem.catalog import get_catalog
from crunchem.calculators import daily_life
from crunchem.calculators.daily_life import download_time, letter_for, parse_clock, twelve_hour
from crunchem.types import CalculationError


def _run(calc_id, **inputs):
    return get_catalog().get(calc_id).calculate(inputs)


def _values(res):
    return {r.label: r.value for r in res.results}


class _Picker:
    """Deterministic stand-in for random.Random: always the top of the range."""

    def randint(self, low, high):
        return high

    def random(self):
        return 0.1

    def randrange(self, n):
        return n - 1


# ---- money ------------------------------------------------------------------

def test_tip_split_two_ways():
    out = _values(_run("tip-calculator", bill_amount="100", tip_percentage="18", number_of_people="2"))
    assert out == {"Tip Amount": 18, "Total Amount": 118, "Per Person (Total)": 59, "Per Person (Tip)": 9}


def test_tip_uses_defaults():
    out = _values(_run("tip-calculator", bill_amount="50"))
    assert out["Tip Amount"] == 9
    assert out["Per Person (Total)"] == 59


def test_tip_rejects_zero_bill():
    with pytest.raises(CalculationError, match="valid positive values"):
        _run("tip-calculator", bill_amount="0")


def test_discount_percentage_and_amount():
    out = _values(_run("discount-calculator", original_price="80", discount_type="percentage", discount_value="25"))
    assert out["Sale Price"] == 60 and out["You Save"] == 20
    out = _values(_run("discount-calculator", original_price="200", discount_type="amount", discount_value="50"))
    assert out["Discount Percentage"] == 25


def test_discount_limits():
    with pytest.raises(CalculationError, match="cannot exceed 100%"):
        _run("discount-calculator", original_price="80", discount_type="percentage", discount_value="150")
    with pytest.raises(CalculationError, match="cannot exceed original price"):
        _run("discount-calculator", original_price="100", discount_type="amount", discount_value="120")


def test_tax_default_rate():
    out = _values(_run("tax-calculator", price_before_tax="100"))
    assert out["Total Price (with tax)"] == 108.25
    assert out["Tax Amount"] == 8.25


def test_split_bill():
    out = _values(_run("split-bill-calculator", total_bill="120", number_of_people="3", split_type="equal"))
    assert out["Total Amount"] == pytest.approx(141.6)
    assert out["Each Person Pays"] == pytest.approx(47.2)
    assert out["Bill Per Person"] == 40


def test_split_bill_zero_tip():
    out = _values(_run("split-bill-calculator", total_bill="90", number_of_people="3", tip_percentage="0",
                       split_type="equal"))
    assert out["Each Person Pays"] == 30
    assert out["Tip Per Person"] == 0


def test_subscriptions_skip_blanks():
    out = _values(_run("subscription-cost-tracker", subscription_1="15.99", subscription_3="9.99"))
    assert out["Total Monthly Cost"] == pytest.approx(25.98)
    assert out["Total Yearly Cost"] == pytest.approx(311.76)
    assert out["Active Subscriptions"] == 2


def test_subscriptions_empty():
    out = _values(_run("subscription-cost-tracker"))
    assert out["Total Monthly Cost"] == 0
    assert out["Average Per Subscription"] == 0


def test_commute_transit_saves():
    out = _values(_run("commute-cost-calculator", distance_miles="10", gas_price="3.5", mpg="25",
                       parking_cost="5", transit_cost="4", work_days="20"))
    assert out["Daily Driving Cost"] == pytest.approx(7.8)
    assert out["Monthly Driving Cost"] == pytest.approx(156)
    assert out["Monthly Transit Cost"] == 80
    assert out["Monthly Savings (Transit)"] == pytest.approx(76)


def test_commute_driving_cheaper():
    out = _values(_run("commute-cost-calculator", distance_miles="5", gas_price="3", mpg="30",
                       transit_cost="10", work_days="20"))
    assert "Monthly Extra (Driving)" in out


def test_phone_bill():
    out = _values(_run("phone-bill-splitter", total_bill="200", base_cost="100", number_of_lines="4",
                       data_overage="20", split_method="equal"))
    assert out == {"Cost Per Line": 55, "Base Cost Per Line": 25, "Variable Cost Per Line": 25,
                   "Overage Per Line": 5}


def test_phone_bill_base_over_total():
    with pytest.raises(CalculationError, match="Base cost cannot exceed total bill"):
        _run("phone-bill-splitter", total_bill="50", base_cost="80", split_method="equal")


# ---- time & dates -----------------------------------------------------------

def test_age_with_explicit_date():
    out = _values(_run("age-calculator", birth_date="2000-01-15", calculation_date="2024-03-10"))
    assert out["Exact Age"] == "24 years, 1 months, 24 days"
    assert out["Total Days Lived"] == (date(2024, 3, 10) - date(2000, 1, 15)).days


def test_age_defaults_to_today(monkeypatch):
    monkeypatch.setattr(daily_life, "_today", lambda: date(2020, 6, 1))
    out = _values(_run("age-calculator", birth_date="1990-06-01"))
    assert out["Exact Age"] == "30 years, 0 months, 0 days"


def test_age_rejects_future_birth():
    with pytest.raises(CalculationError, match="cannot be in the future"):
        _run("age-calculator", birth_date="2030-01-01", calculation_date="2024-01-01")


def test_age_borrows_from_short_month():
    out = _values(_run("age-calculator", birth_date="2024-01-31", calculation_date="2024-03-01"))
    assert out["Exact Age"] == "0 years, 1 months, 1 days"
    out = _values(_run("age-calculator", birth_date="2022-01-31", calculation_date="2023-03-01"))
    assert out["Exact Age"] == "1 years, 1 months, 1 days"


def test_parse_clock():
    assert parse_clock("2:30 PM", "bad") == (14, 30)
    assert parse_clock("12:05 am", "bad") == (0, 5)
    assert parse_clock("23:59", "bad") == (23, 59)
    with pytest.raises(CalculationError, match="bad"):
        parse_clock("noon", "bad")
    with pytest.raises(CalculationError, match="valid time"):
        parse_clock("13:00 PM", "bad")


def test_twelve_hour():
    assert twelve_hour(0, 0) == "12:00 AM"
    assert twelve_hour(12, 30) == "12:30 PM"
    assert twelve_hour(23, 15) == "11:15 PM"


def test_time_zone_same_day():
    out = _values(_run("time-zone-converter", source_time="2:30 PM", source_timezone="EST", target_timezone="PST"))
    assert out == {"Target Time (12-hour)": "11:30 AM", "Target Time (24-hour)": "11:30", "Time Difference": "-3"}


def test_time_zone_next_day():
    out = _values(_run("time-zone-converter", source_time="11:00 PM", source_timezone="EST", target_timezone="UTC"))
    assert out["Target Time (12-hour)"] == "4:00 AM (+1 day)"
    assert out["Time Difference"] == "+5"


def test_time_zone_errors():
    with pytest.raises(CalculationError, match="HH:MM"):
        _run("time-zone-converter", source_time="noon", source_timezone="EST", target_timezone="PST")
    with pytest.raises(CalculationError, match="valid time"):
        _run("time-zone-converter", source_time="25:00", source_timezone="EST", target_timezone="PST")


def test_days_between():
    out = _values(_run("date-calculator", calculation_type="between", start_date="2024-01-01",
                       end_date="2024-03-01"))
    assert out["Days Between"] == 60
    assert out["Weeks Between"] == 8


def test_days_between_needs_end():
    with pytest.raises(CalculationError, match="End date is required"):
        _run("date-calculator", calculation_type="between", start_date="2024-01-01")


def test_add_and_subtract_days():
    out = _values(_run("date-calculator", calculation_type="add", start_date="2024-01-31", days_to_add="1"))
    assert out["Result Date"] == "2024-02-01"
    assert out["Day of Week"] == "Thursday"
    out = _values(_run("date-calculator", calculation_type="subtract", start_date="2024-03-01", days_to_add="1"))
    assert out["Result Date"] == "2024-02-29"
    assert out["Days Subtracted"] == 1


def test_add_needs_days():
    with pytest.raises(CalculationError, match="Number of days is required"):
        _run("date-calculator", calculation_type="add", start_date="2024-01-01")


def test_sleep_bedtime():
    out = _values(_run("sleep-calculator", wake_time="7:00 AM", sleep_cycles="5"))
    assert out["Optimal Bedtime"] == "11:15 PM"
    assert out["Sleep Duration"] == "7h 30m"


# ---- travel & health --------------------------------------------------------

def test_fuel_cost_round_trip():
    out = _values(_run("fuel-cost-calculator", distance="100", mpg="25", gas_price="4", trip_type="round-trip"))
    assert out == {"Total Fuel Cost": 32, "Gallons Needed": 8, "Total Distance": 200, "Cost Per Mile": 0.16}


def test_walking_time():
    out = _values(_run("walking-running-time", distance="3", distance_unit="miles", activity_type="normal-walk"))
    assert out["Estimated Time"] == "1h 0m"
    assert out["Total Minutes"] == pytest.approx(60)
    assert out["Calories Burned (est.)"] == 180


def test_walking_custom_pace_required():
    with pytest.raises(CalculationError, match="valid custom pace"):
        _run("walking-running-time", distance="3", distance_unit="miles", activity_type="custom")
    out = _values(_run("walking-running-time", distance="6", distance_unit="miles", activity_type="custom",
                       custom_pace="6"))
    assert out["Calories Burned (est.)"] == 600


def test_walking_rejects_zero_distance():
    with pytest.raises(CalculationError, match="Distance must be positive"):
        _run("walking-running-time", distance="0", distance_unit="miles", activity_type="normal-walk")


def test_water_intake():
    out = _values(_run("water-intake-calculator", weight="200", weight_unit="lbs", activity_level="sedentary",
                       climate="moderate"))
    assert out["Daily Water Intake"] == 134
    assert out["Glasses (8 oz each)"] == 17


def test_water_intake_weight_bounds():
    with pytest.raises(CalculationError, match="at least 50"):
        _run("water-intake-calculator", weight="20", weight_unit="kg", activity_level="light", climate="hot")


def test_event_food_without_bar():
    out = _values(_run("event-food-calculator", guest_count="10", event_duration="3", meal_type="dinner",
                       alcohol_served="none"))
    assert [out[k] for k in ("Main Dishes (servings)", "Side Dishes (servings)", "Appetizers (pieces)",
                             "Water Bottles", "Soft Drinks", "Coffee")] == [15, 30, 30, 20, 15, 5]
    assert "Beer" not in out and "Spirits" not in out


def test_event_food_full_bar():
    out = _values(_run("event-food-calculator", guest_count="10", event_duration="3", meal_type="dinner",
                       alcohol_served="full-bar"))
    assert out["Beer"] == 20 and out["Wine"] == 5 and out["Spirits"] == 3


# ---- school -----------------------------------------------------------------

def test_letter_cutoffs():
    assert letter_for(97) == "A+"
    assert letter_for(85) == "B"
    assert letter_for(64.9) == "F"


def test_course_grade():
    out = _values(_run("grade-gpa-calculator", calculation_type="course-grade", assignment_1_points="45",
                       assignment_1_total="50", assignment_2_points="40", assignment_2_total="50"))
    assert out["Course Grade"] == 85
    assert out["Letter Grade"] == "B"


def test_gpa():
    out = _values(_run("grade-gpa-calculator", calculation_type="gpa", course_1_grade="4.0", course_1_credits="3",
                       course_2_grade="3.0", course_2_credits="3"))
    assert out["Cumulative GPA"] == 3.5
    assert out["Total Credits"] == 6


def test_grade_needs_entries():
    with pytest.raises(CalculationError, match="at least one assignment"):
        _run("grade-gpa-calculator", calculation_type="course-grade")
    with pytest.raises(CalculationError, match="at least one course"):
        _run("grade-gpa-calculator", calculation_type="gpa", course_1_grade="4.0")


def test_percentage_modes():
    assert _values(_run("percentage-calculator", calculation_type="what-percent", number_1="25",
                        number_2="200"))["Percentage"] == 12.5
    assert _values(_run("percentage-calculator", calculation_type="percent-of", number_1="15",
                        number_2="80"))["Result"] == 12
    out = _values(_run("percentage-calculator", calculation_type="percent-change", number_1="50", number_2="40"))
    assert out["Percentage Decrease"] == 20
    assert out["Decrease Amount"] == -10


def test_percentage_zero_guards():
    with pytest.raises(CalculationError, match="Cannot divide by zero"):
        _run("percentage-calculator", calculation_type="what-percent", number_1="5", number_2="0")
    with pytest.raises(CalculationError, match="Original value cannot be zero"):
        _run("percentage-calculator", calculation_type="percent-change", number_1="0", number_2="5")


# ---- technology -------------------------------------------------------------

def test_weak_password():
    out = _values(_run("password-strength-checker", password="password"))
    assert out["Password Strength"] == "Weak (35/100)"
    assert "Avoid common words and patterns" in out["Suggestions"]


def test_strong_password():
    out = _values(_run("password-strength-checker", password="Tr0ub4dor&3xyz!"))
    assert out["Password Strength"] == "Very Strong (90/100)"
    assert out["Character Types Used"] == 4
    assert out["Suggestions"] == "None"


def test_data_usage_projection():
    out = _values(_run("data-usage-calculator", data_plan="10", data_used="6", days_into_cycle="15"))
    assert out["Projected Monthly Usage"] == 12
    assert out["Projected Overage"] == 2
    assert out["Estimated Overage Cost"] == 20
    assert out["Data Remaining"] == 4


def test_data_usage_zero_overage_rate_is_kept():
    out = _values(_run("data-usage-calculator", data_plan="10", data_used="6", days_into_cycle="15",
                       overage_cost="0"))
    assert out["Estimated Overage Cost"] == 0


def test_data_usage_cycle_guard():
    with pytest.raises(CalculationError, match="cannot exceed cycle length"):
        _run("data-usage-calculator", data_plan="10", data_used="6", days_into_cycle="31", cycle_length="30")


def test_wifi_speed_and_download():
    out = _values(_run("wifi-speed-converter", internet_speed="100", speed_unit="mbps", file_size="1",
                       file_unit="gb"))
    assert out["Speed in MB/s"] == 12.5
    assert out["Speed in Kbps"] == 100000
    assert out["Speed in Gbps"] == 0.1
    assert out["Estimated Download Time"] == "1m 38s"


def test_wifi_without_file():
    out = _values(_run("wifi-speed-converter", internet_speed="1", speed_unit="gbps"))
    assert out["Speed in Mbps"] == 1000
    assert "Estimated Download Time" not in out


def test_download_time_format():
    assert download_time(12.4) == "12 seconds"
    assert download_time(3725) == "1h 2m"


def test_battery_estimate():
    out = _values(_run("battery-life-estimator", current_battery="80", device_type="smartphone",
                       usage_intensity="moderate", screen_brightness="medium"))
    assert out == {"Estimated Battery Life": "19h 12m", "Total Hours": 19.2, "Time to 50%": "7h 12m",
                   "Time to 20%": "14h 24m"}


def test_battery_already_low():
    out = _values(_run("battery-life-estimator", current_battery="40", device_type="smartphone",
                       usage_intensity="moderate"))
    assert out["Time to 50%"] == "Already below 50%"
    assert out["Time to 20%"] != "Already below 20%"


# ---- home & practical -------------------------------------------------------

def test_unit_converter():
    out = _values(_run("unit-converter", conversion_type="length", from_value="1", from_unit="mi", to_unit="ft"))
    assert out["Result in ft"] == pytest.approx(5280)
    out = _values(_run("unit-converter", conversion_type="temperature", from_value="100", from_unit="celsius",
                       to_unit="fahrenheit"))
    assert out["Result in °F"] == pytest.approx(212)


def test_unit_converter_rejects_wrong_kind():
    with pytest.raises(CalculationError, match="'kg' is not a length unit"):
        _run("unit-converter", conversion_type="length", from_value="1", from_unit="kg", to_unit="m")


def test_paint_coverage():
    out = _values(_run("paint-coverage-calculator", room_length="12", room_width="10", doors="1", windows="2",
                       paint_coats="2"))
    assert out["Gallons Needed (walls)"] == 2
    assert out["Quarts Needed (walls)"] == 7
    assert out["Wall Area to Paint"] == 302
    assert out["Ceiling Area"] == 120
    assert out["Estimated Cost (walls)"] == 90


def test_paint_openings_cover_wall():
    with pytest.raises(CalculationError, match="cover the entire wall"):
        _run("paint-coverage-calculator", room_length="1", room_width="1", ceiling_height="6", doors="10",
             windows="20", paint_coats="1")


def test_random_number(monkeypatch):
    monkeypatch.setattr(daily_life, "_rng", _Picker())
    assert _values(_run("random-number-generator", generator_type="number"))["Random Number"] == 100
    with pytest.raises(CalculationError, match="greater than minimum"):
        _run("random-number-generator", generator_type="number", min_number="5", max_number="5")


def test_random_dice_and_coin(monkeypatch):
    monkeypatch.setattr(daily_life, "_rng", _Picker())
    out = _values(_run("random-number-generator", generator_type="dice", dice_type="20", dice_count="3"))
    assert out["Total"] == 60
    assert out["Individual Rolls"] == "20, 20, 20"
    assert out["Dice Notation"] == "3d20"
    assert _values(_run("random-number-generator", generator_type="coin"))["Coin Flip Result"] == "Heads"


def test_random_list(monkeypatch):
    monkeypatch.setattr(daily_life, "_rng", _Picker())
    out = _values(_run("random-number-generator", generator_type="list", custom_list="tea, coffee, , juice"))
    assert out["Selected Item"] == "juice"
    assert out["Total Items"] == 3
    with pytest.raises(CalculationError, match="comma-separated list"):
        _run("random-number-generator", generator_type="list")
    with pytest.raises(CalculationError, match="at least 2 items"):
        _run("random-number-generator", generator_type="list", custom_list="only")


def test_random_number_stays_in_range():
    for _ in range(50):
        n = _values(_run("random-number-generator", generator_type="number", min_number="1",
                         max_number="6"))["Random Number"]
        assert 1 <= n <= 6
