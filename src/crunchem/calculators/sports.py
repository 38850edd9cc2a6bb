# -----------------------------------------------------------------------------
# Sports calculators
# Fantasy scoring, betting odds, player/team statistics, running and swimming
# paces, tournament planning and progress tracking.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from enum import Enum
from fractions import Fraction
from typing import Any, Dict, List

from ..types import CalculationError, CalculationResult, Calculator, Complexity, ResultFormat
from ..units import LengthUnit, convert_scalar, lookup_table, select_options
from .common import fixed, hours_minutes, num, number, result, select, text

CATEGORY = "Sports"

D = ResultFormat.DECIMAL
INT = ResultFormat.INTEGER


def clock(total_seconds: float, with_hours: bool = False) -> str:
    """Format seconds as m:ss (or h:mm:ss)."""
    total = int(total_seconds)
    h, rem = divmod(total, 3600)
    m, s = divmod(rem, 60)
    if with_hours or h:
        return f"{h}:{m:02d}:{s:02d}"
    return f"{m}:{s:02d}"


# ---- fantasy-sports-points ---------------------------------------------------

class Sport(str, Enum):
    FOOTBALL = "football"
    BASKETBALL = "basketball"
    BASEBALL = "baseball"

SPORT_OPTIONS = select_options(Sport, {
    Sport.FOOTBALL: "Fantasy Football",
    Sport.BASKETBALL: "Fantasy Basketball",
    Sport.BASEBALL: "Fantasy Baseball",
})

# (input id, label, points per unit); PPR football, standard categories otherwise
FANTASY_SCORING = lookup_table(Sport, {
    Sport.FOOTBALL: (
        ("passing_yards", "Passing Yards", 0.04), ("passing_tds", "Passing TDs", 4.0),
        ("interceptions", "Interceptions", -2.0), ("rushing_yards", "Rushing Yards", 0.1),
        ("rushing_tds", "Rushing TDs", 6.0), ("receptions", "Receptions", 1.0),
        ("receiving_yards", "Receiving Yards", 0.1), ("receiving_tds", "Receiving TDs", 6.0),
    ),
    Sport.BASKETBALL: (
        ("points_scored", "Points Scored (Basketball)", 1.0), ("rebounds", "Rebounds (Basketball)", 1.2),
        ("assists", "Assists (Basketball)", 1.5), ("steals", "Steals (Basketball)", 3.0),
        ("blocks", "Blocks (Basketball)", 3.0), ("turnovers", "Turnovers (Basketball)", -1.0),
    ),
    Sport.BASEBALL: (
        ("singles", "Singles (Baseball)", 1.0), ("doubles", "Doubles (Baseball)", 2.0),
        ("triples", "Triples (Baseball)", 3.0), ("home_runs", "Home Runs (Baseball)", 4.0),
        ("runs", "Runs (Baseball)", 1.0), ("rbis", "RBIs (Baseball)", 1.0),
        ("walks", "Walks (Baseball)", 1.0), ("stolen_bases", "Stolen Bases (Baseball)", 2.0),
    ),
})

FOOTBALL_GROUPS = (
    ("Passing", ("passing_yards", "passing_tds", "interceptions")),
    ("Rushing", ("rushing_yards", "rushing_tds")),
    ("Receiving", ("receptions", "receiving_yards", "receiving_tds")),
)


def fantasy_calculate(v: Dict[str, Any]) -> CalculationResult:
    sport = Sport(v["sport"])
    scoring = FANTASY_SCORING[sport]
    points = {fid: v[fid] * weight for fid, _, weight in scoring}
    total = sum(points.values())
    if sport is Sport.FOOTBALL:
        steps = [f"{name}: {fixed(sum(points[f] for f in fids), 1)} pts" for name, fids in FOOTBALL_GROUPS]
    else:
        steps = [f"{label.split(' (')[0]}: {num(v[fid])} × {num(w)} = {fixed(points[fid], 1)} pts"
                 for fid, label, w in scoring if v[fid]]
    steps.append(f"Total: {fixed(total, 2)} pts")
    return CalculationResult(
        results=[result(round(total, 2), "Fantasy Points", format=D),
                 result(sport.value.capitalize(), "Sport")],
        explanation=[f"Total Fantasy Points: {fixed(total, 2)}"],
        steps=steps,
    )


# ---- sports-betting-odds -----------------------------------------------------

class OddsFormat(str, Enum):
    AMERICAN = "american"
    DECIMAL = "decimal"
    FRACTIONAL = "fractional"

ODDS_OPTIONS = select_options(OddsFormat, {
    OddsFormat.AMERICAN: "American (+/-100)",
    OddsFormat.DECIMAL: "Decimal (2.00)",
    OddsFormat.FRACTIONAL: "Fractional (1/1)",
})


def _parse_odds(fmt: OddsFormat, raw: str) -> float:
    """Return decimal odds (> 1) for any accepted input format."""
    bad = CalculationError("Invalid odds format. Please check your input.")
    try:
        if fmt is OddsFormat.AMERICAN:
            american = float(raw.replace("+", ""))
            if abs(american) < 100:
                raise CalculationError("American odds must be +100 or more, or -100 or less")
            return american / 100 + 1 if american > 0 else 100 / abs(american) + 1
        if fmt is OddsFormat.DECIMAL:
            decimal = float(raw)
            if decimal <= 1:
                raise CalculationError("Decimal odds must be greater than 1.00")
            return decimal
        parts = raw.split("/")
        if len(parts) != 2:
            raise CalculationError("Invalid fractional format; use e.g. 5/2")
        numerator, denominator = float(parts[0]), float(parts[1])
    except ValueError:
        raise bad from None
    if numerator <= 0 or denominator <= 0:
        raise CalculationError("Fractional odds must have positive parts")
    return numerator / denominator + 1


def odds_calculate(v: Dict[str, Any]) -> CalculationResult:
    fmt = OddsFormat(v["input_format"])
    raw = v["odds_value"].strip()
    decimal = _parse_odds(fmt, raw)
    american = (decimal - 1) * 100 if decimal >= 2 else -100 / (decimal - 1)
    frac = Fraction(decimal - 1).limit_denominator(100)
    fractional = f"{frac.numerator}/{frac.denominator}"
    implied = 1 / decimal * 100
    american_text = f"+{american:.0f}" if american > 0 else f"{american:.0f}"
    return CalculationResult(
        results=[result(american_text, "American"),
                 result(round(decimal, 2), "Decimal", format=D),
                 result(fractional, "Fractional"),
                 result(round(implied, 2), "Implied Probability", "%", ResultFormat.PERCENTAGE)],
        explanation=[f"Odds converted from {fmt.value} format"],
        steps=[f"Input: {raw} ({fmt.value})", f"American: {american_text}",
               f"Decimal: {fixed(decimal)}", f"Fractional: {fractional}",
               f"Implied Probability: 1 ÷ {fixed(decimal)} = {fixed(implied)}%"],
    )


# ---- player-statistics -------------------------------------------------------

def _pct(made: float, attempted: float) -> float:
    return made / attempted * 100 if attempted > 0 else 0.0


def player_stats_calculate(v: Dict[str, Any]) -> CalculationResult:
    games = v["games_played"]
    if games <= 0:
        raise CalculationError("Games played must be greater than 0")
    points, rebounds, assists, minutes = v["points"], v["rebounds"], v["assists"], v["minutes"]
    for made, att, label in (("field_goals_made", "field_goals_attempted", "field goals"),
                             ("three_pointers_made", "three_pointers_attempted", "3-pointers"),
                             ("free_throws_made", "free_throws_attempted", "free throws")):
        if v[made] > v[att] > 0:
            raise CalculationError(f"Made {label} cannot exceed attempted {label}")
    ppg, rpg, apg, mpg = points / games, rebounds / games, assists / games, minutes / games
    fg = _pct(v["field_goals_made"], v["field_goals_attempted"])
    tp = _pct(v["three_pointers_made"], v["three_pointers_attempted"])
    ft = _pct(v["free_throws_made"], v["free_throws_attempted"])
    # simplified efficiency: production per minute scaled by games
    per = (points + rebounds + assists) * games / minutes if minutes > 0 else 0.0
    return CalculationResult(
        results=[result(round(ppg, 2), "Points Per Game", format=D),
                 result(round(rpg, 2), "Rebounds Per Game", format=D),
                 result(round(apg, 2), "Assists Per Game", format=D),
                 result(round(mpg, 2), "Minutes Per Game", format=D),
                 result(round(fg, 2), "Field Goal %", "%", D),
                 result(round(tp, 2), "3-Point %", "%", D),
                 result(round(ft, 2), "Free Throw %", "%", D),
                 result(round(per, 2), "Player Efficiency Rating", format=D)],
        explanation=[f"Player averages over {num(games)} games"],
        steps=[f"PPG: {num(points)} ÷ {num(games)} = {fixed(ppg, 1)}",
               f"RPG: {num(rebounds)} ÷ {num(games)} = {fixed(rpg, 1)}",
               f"APG: {num(assists)} ÷ {num(games)} = {fixed(apg, 1)}",
               f"FG%: {num(v['field_goals_made'])}/{num(v['field_goals_attempted'])} = {fixed(fg, 1)}%"],
    )


# ---- team-performance-metrics ------------------------------------------------

def team_calculate(v: Dict[str, Any]) -> CalculationResult:
    wins, losses = v["wins"], v["losses"]
    pf, pa = v["points_for"], v["points_against"]
    games = wins + losses
    win_pct = _pct(wins, games)
    diff = pf - pa
    avg_for = pf / games if games > 0 else 0.0
    avg_against = pa / games if games > 0 else 0.0
    home_pct = _pct(v["home_wins"], v["home_wins"] + v["home_losses"])
    away_pct = _pct(v["away_wins"], v["away_wins"] + v["away_losses"])
    rating = avg_for / avg_against if avg_against > 0 else 1.0
    return CalculationResult(
        results=[result(f"{num(wins)}-{num(losses)}", "Record"),
                 result(round(win_pct, 2), "Win Percentage", "%", D),
                 result(diff, "Point Differential", format=INT),
                 result(round(avg_for, 2), "Avg Points For", format=D),
                 result(round(avg_against, 2), "Avg Points Against", format=D),
                 result(round(home_pct, 2), "Home Win %", "%", D),
                 result(round(away_pct, 2), "Away Win %", "%", D),
                 result(round(rating, 3), "Offensive Rating", format=D)],
        explanation=[f"Team performance over {num(games)} games"],
        steps=[f"Win %: {num(wins)}/{num(games)} = {fixed(win_pct, 1)}%",
               f"Point Differential: {num(pf)} - {num(pa)} = {'+' if diff > 0 else ''}{num(diff)}",
               f"Average Points For: {num(pf)}/{num(games)} = {fixed(avg_for, 1)}",
               f"Average Points Against: {num(pa)}/{num(games)} = {fixed(avg_against, 1)}"],
    )


# ---- running-pace-calculator -------------------------------------------------

class PaceMode(str, Enum):
    PACE_FROM_TIME = "pace_from_time"
    TIME_FROM_PACE = "time_from_pace"
    SPLIT_TIMES = "split_times"

PACE_MODE_OPTIONS = select_options(PaceMode, {
    PaceMode.PACE_FROM_TIME: "Calculate Pace from Time & Distance",
    PaceMode.TIME_FROM_PACE: "Calculate Time from Pace & Distance",
    PaceMode.SPLIT_TIMES: "Calculate Split Times",
})


class RaceUnit(str, Enum):
    MILES = "miles"
    KILOMETERS = "kilometers"
    METERS = "meters"

RACE_UNIT_OPTIONS = select_options(RaceUnit, {
    RaceUnit.MILES: "Miles", RaceUnit.KILOMETERS: "Kilometers", RaceUnit.METERS: "Meters",
})

RACE_LENGTH_UNITS = lookup_table(RaceUnit, {
    RaceUnit.MILES: LengthUnit.MI, RaceUnit.KILOMETERS: LengthUnit.KM, RaceUnit.METERS: LengthUnit.M,
})

MAX_SPLITS = 50


def running_pace_calculate(v: Dict[str, Any]) -> CalculationResult:
    mode = PaceMode(v["calculation_type"])
    distance = v["distance"]
    unit = RaceUnit(v["distance_unit"])
    if distance <= 0:
        raise CalculationError("Distance must be greater than 0")
    miles = convert_scalar(distance, RACE_LENGTH_UNITS[unit], LengthUnit.MI)
    km = convert_scalar(distance, RACE_LENGTH_UNITS[unit], LengthUnit.KM)

    if mode is PaceMode.TIME_FROM_PACE:
        pace = v["pace_minutes"] * 60 + v["pace_seconds"]
        if pace <= 0:
            raise CalculationError("Pace must be greater than 0")
        total = pace * miles
        return CalculationResult(
            results=[result(clock(total, with_hours=True), "Predicted Time"),
                     result(clock(pace), "Pace per Mile"),
                     result(distance, "Distance", unit.value)],
            explanation=[f"Time predicted for {num(distance)} {unit.value} at {clock(pace)} pace"],
            steps=[f"Pace: {num(pace)} seconds per mile", f"Distance: {fixed(miles)} miles",
                   f"Time: {num(pace)}s × {fixed(miles)} = {total:.0f}s",
                   f"Time: {clock(total, with_hours=True)}"],
        )

    total = v["time_hours"] * 3600 + v["time_minutes"] * 60 + v["time_seconds"]
    if total <= 0:
        raise CalculationError("Total time must be greater than 0")
    per_mile = total / miles
    per_km = total / km
    elapsed = clock(total, with_hours=True)

    if mode is PaceMode.PACE_FROM_TIME:
        return CalculationResult(
            results=[result(clock(per_mile), "Pace per Mile"),
                     result(clock(per_km), "Pace per Kilometer"),
                     result(elapsed, "Total Time"),
                     result(distance, "Distance", unit.value)],
            explanation=[f"Pace calculated from {num(distance)} {unit.value} in {elapsed}"],
            steps=[f"Total time: {num(total)} seconds", f"Distance: {fixed(miles)} miles",
                   f"Pace: {num(total)}s ÷ {fixed(miles)} = {per_mile:.0f}s per mile",
                   f"Pace: {clock(per_mile)} per mile"],
        )

    # Even splits in the race's own unit (kilometers when entered in meters)
    split_unit, split_len, per_split = ("mile", miles, per_mile) if unit is RaceUnit.MILES else ("km", km, per_km)
    count = min(int(split_len), MAX_SPLITS)
    splits = [f"{split_unit} {i}: {clock(per_split * i, with_hours=True)}" for i in range(1, count + 1)]
    if split_len > count and count < MAX_SPLITS:
        splits.append(f"finish ({fixed(split_len)} {split_unit}): {elapsed}")
    return CalculationResult(
        results=[result(clock(per_split), f"Even Split per {split_unit}"),
                 result(count, "Full Splits", format=INT),
                 result(elapsed, "Total Time")],
        explanation=[f"Even {split_unit} splits for {num(distance)} {unit.value} in {elapsed}"],
        steps=[f"Split pace: {num(total)}s ÷ {fixed(split_len)} = {per_split:.0f}s per {split_unit}"] + splits,
    )


# ---- swimming-time-calculator ------------------------------------------------

class Stroke(str, Enum):
    FREESTYLE = "freestyle"
    BACKSTROKE = "backstroke"
    BREASTSTROKE = "breaststroke"
    BUTTERFLY = "butterfly"
    INDIVIDUAL_MEDLEY = "individual_medley"

STROKE_OPTIONS = select_options(Stroke, {
    Stroke.FREESTYLE: "Freestyle", Stroke.BACKSTROKE: "Backstroke",
    Stroke.BREASTSTROKE: "Breaststroke", Stroke.BUTTERFLY: "Butterfly",
    Stroke.INDIVIDUAL_MEDLEY: "Individual Medley",
})

# Relative difficulty versus freestyle
STROKE_FACTORS = lookup_table(Stroke, {
    Stroke.FREESTYLE: 1.0, Stroke.BACKSTROKE: 1.1, Stroke.BREASTSTROKE: 1.4,
    Stroke.BUTTERFLY: 1.2, Stroke.INDIVIDUAL_MEDLEY: 1.15,
})


class Pool(str, Enum):
    YARDS_25 = "25_yards"
    METERS_25 = "25_meters"
    METERS_50 = "50_meters"
    OPEN_WATER = "open_water"

POOL_OPTIONS = select_options(Pool, {
    Pool.YARDS_25: "25 Yards", Pool.METERS_25: "25 Meters",
    Pool.METERS_50: "50 Meters", Pool.OPEN_WATER: "Open Water",
})

# Pool length in meters (None: no laps)
POOL_LENGTHS = lookup_table(Pool, {
    Pool.YARDS_25: 22.86, Pool.METERS_25: 25.0, Pool.METERS_50: 50.0, Pool.OPEN_WATER: None,
})


class SwimUnit(str, Enum):
    YARDS = "yards"
    METERS = "meters"
    MILES = "miles"
    KILOMETERS = "kilometers"

SWIM_UNIT_OPTIONS = select_options(SwimUnit, {
    SwimUnit.YARDS: "Yards", SwimUnit.METERS: "Meters",
    SwimUnit.MILES: "Miles", SwimUnit.KILOMETERS: "Kilometers",
})

SWIM_LENGTH_UNITS = lookup_table(SwimUnit, {
    SwimUnit.YARDS: LengthUnit.YD, SwimUnit.METERS: LengthUnit.M,
    SwimUnit.MILES: LengthUnit.MI, SwimUnit.KILOMETERS: LengthUnit.KM,
})


def swimming_calculate(v: Dict[str, Any]) -> CalculationResult:
    stroke = Stroke(v["stroke"])
    pool = Pool(v["pool_length"])
    distance = v["distance"]
    unit = SwimUnit(v["distance_unit"])
    if distance <= 0:
        raise CalculationError("Distance must be greater than 0")
    total = v["time_minutes"] * 60 + v["time_seconds"]
    if total <= 0:
        raise CalculationError("Total time must be greater than 0")
    meters = convert_scalar(distance, SWIM_LENGTH_UNITS[unit], LengthUnit.M)
    pace100 = total / meters * 100
    mps = meters / total
    kmh = mps * 3.6
    efficiency = 100 / (pace100 * STROKE_FACTORS[stroke]) * 10
    results = [result(clock(total), "Total Time"),
               result(clock(pace100), "Pace per 100m"),
               result(round(mps, 3), "Speed", "m/s", D),
               result(round(kmh, 2), "Speed", "km/h", D),
               result(round(efficiency, 2), "Efficiency Rating", format=D),
               result(stroke.value.replace("_", " ").capitalize(), "Stroke")]
    steps = [f"Distance: {meters:.0f} meters", f"Time: {num(total)} seconds",
             f"Pace per 100m: {fixed(pace100, 1)}s", f"Average Speed: {fixed(mps)} m/s"]
    lap = POOL_LENGTHS[pool]
    if lap is not None:
        laps = meters / lap
        results.append(result(round(laps, 1), "Pool Lengths", format=D))
        steps.append(f"Lengths: {meters:.0f} ÷ {num(lap)} = {fixed(laps, 1)}")
    return CalculationResult(
        results=results,
        explanation=[f"Swimming performance for {num(distance)} {unit.value} {stroke.value.replace('_', ' ')}"],
        steps=steps,
    )


# ---- sports-tournament-organizer ---------------------------------------------

class TournamentType(str, Enum):
    SINGLE_ELIMINATION = "single_elimination"
    DOUBLE_ELIMINATION = "double_elimination"
    ROUND_ROBIN = "round_robin"
    SWISS = "swiss"

TOURNAMENT_OPTIONS = select_options(TournamentType, {
    TournamentType.SINGLE_ELIMINATION: "Single Elimination",
    TournamentType.DOUBLE_ELIMINATION: "Double Elimination",
    TournamentType.ROUND_ROBIN: "Round Robin",
    TournamentType.SWISS: "Swiss System",
})


def tournament_calculate(v: Dict[str, Any]) -> CalculationResult:
    kind = TournamentType(v["tournament_type"])
    teams = int(v["num_teams"])
    courts = int(v["courts_available"])
    slot = v["match_duration"] + v["break_between_matches"]
    bracket_rounds = math.ceil(math.log2(teams))

    if kind is TournamentType.SINGLE_ELIMINATION:
        matches = teams - 1
        rounds = bracket_rounds
        per_round = math.ceil(matches / rounds)
        minutes = rounds * math.ceil(per_round / courts) * slot
    elif kind is TournamentType.DOUBLE_ELIMINATION:
        matches = (teams - 1) * 2  # worst case, includes the bracket reset
        rounds = bracket_rounds * 2
        minutes = rounds * math.ceil(2 / courts) * slot
    elif kind is TournamentType.ROUND_ROBIN:
        matches = teams * (teams - 1) // 2
        rounds = teams - 1 if teams % 2 == 0 else teams
        minutes = rounds * math.ceil((teams // 2) / courts) * slot
    else:
        rounds = bracket_rounds
        matches = rounds * (teams // 2)
        minutes = rounds * math.ceil((teams // 2) / courts) * slot

    byes = 2 ** bracket_rounds - teams
    duration = hours_minutes(minutes / 60) if minutes >= 60 else f"0h {minutes:.0f}m"
    label = kind.value.replace("_", " ")
    return CalculationResult(
        results=[result(label.upper(), "Tournament Type"),
                 result(teams, "Teams", format=INT),
                 result(matches, "Total Matches", format=INT),
                 result(rounds, "Rounds", format=INT),
                 result(byes, "Byes Needed", format=INT),
                 result(duration, "Estimated Duration"),
                 result(courts, "Courts Used", format=INT)],
        explanation=[f"{label} tournament with {teams} teams"],
        steps=[f"Tournament Type: {label}", f"Teams: {teams}", f"Total Matches: {matches}",
               f"Rounds: {rounds}", f"Byes: {2 ** bracket_rounds} - {teams} = {byes}",
               f"Estimated Time: {duration}"],
    )


# ---- athletic-performance-tracker --------------------------------------------

class ActivityType(str, Enum):
    RUNNING = "running"
    SWIMMING = "swimming"
    CYCLING = "cycling"
    WEIGHTLIFTING = "weightlifting"
    GENERAL = "general"

ACTIVITY_OPTIONS = select_options(ActivityType, {
    ActivityType.RUNNING: "Running", ActivityType.SWIMMING: "Swimming",
    ActivityType.CYCLING: "Cycling", ActivityType.WEIGHTLIFTING: "Weightlifting",
    ActivityType.GENERAL: "General Athletics",
})


class PerformanceUnit(str, Enum):
    TIME_SECONDS = "time_seconds"
    DISTANCE_METERS = "distance_meters"
    WEIGHT_LBS = "weight_lbs"
    WEIGHT_KG = "weight_kg"
    SPEED_MPH = "speed_mph"
    SPEED_KPH = "speed_kph"
    REPETITIONS = "repetitions"
    POINTS = "points"

PERFORMANCE_UNIT_OPTIONS = select_options(PerformanceUnit, {
    PerformanceUnit.TIME_SECONDS: "Time (seconds)", PerformanceUnit.DISTANCE_METERS: "Distance (meters)",
    PerformanceUnit.WEIGHT_LBS: "Weight (lbs)", PerformanceUnit.WEIGHT_KG: "Weight (kg)",
    PerformanceUnit.SPEED_MPH: "Speed (mph)", PerformanceUnit.SPEED_KPH: "Speed (km/h)",
    PerformanceUnit.REPETITIONS: "Repetitions", PerformanceUnit.POINTS: "Points/Score",
})

LOWER_IS_BETTER = lookup_table(PerformanceUnit, {u: u is PerformanceUnit.TIME_SECONDS for u in PerformanceUnit})

# (minimum |improvement %|, rating), best first
RATINGS = ((20, "Excellent"), (10, "Very Good"), (5, "Good"), (1, "Fair"))


def performance_calculate(v: Dict[str, Any]) -> CalculationResult:
    sport = ActivityType(v["sport_type"])
    unit = PerformanceUnit(v["performance_unit"])
    baseline, current = v["baseline_performance"], v["current_performance"]
    days = int(v["training_days"])
    sessions = v["training_sessions"]
    goal = v["goal_performance"]
    if baseline == 0:
        raise CalculationError("Baseline performance must be non-zero")

    lower_better = LOWER_IS_BETTER[unit]
    improvement = baseline - current if lower_better else current - baseline
    pct = improvement / baseline * 100
    daily = improvement / days
    sessions_per_day = sessions / days if sessions > 0 else 1.0

    goal_progress: Any = "N/A"
    days_to_goal = "N/A"
    if goal is not None and goal != baseline:
        remaining = current - goal if lower_better else goal - current
        if remaining <= 0:
            days_to_goal = "Goal achieved"
        elif daily > 0:
            days_to_goal = f"{math.ceil(remaining / daily)} days"
        span = baseline - goal if lower_better else goal - baseline
        goal_progress = round(improvement / span * 100, 1)

    rating = next((name for floor, name in RATINGS if abs(pct) >= floor), "Needs Improvement")
    unit_label = unit.value.replace("_", " ")
    return CalculationResult(
        results=[result(baseline, "Baseline Performance", format=D),
                 result(current, "Current Performance", format=D),
                 result(round(improvement, 4), "Total Improvement", format=D),
                 result(round(pct, 2), "Improvement %", "%", D),
                 result(round(daily, 4), "Daily Improvement Rate", format=D),
                 result(round(sessions_per_day, 2), "Sessions per Day", format=D),
                 result(goal_progress, "Goal Progress", "%" if goal_progress != "N/A" else "",
                        D if goal_progress != "N/A" else None),
                 result(days_to_goal, "Days to Goal"),
                 result(rating, "Performance Rating")],
        explanation=[f"Athletic performance tracking for {sport.value} over {days} days"],
        steps=[f"Baseline: {num(baseline)} {unit_label}", f"Current: {num(current)} {unit_label}",
               f"Improvement: {'+' if improvement > 0 else ''}{fixed(improvement)}"
               + (" (lower is better)" if lower_better else ""),
               f"Percentage: {'+' if pct > 0 else ''}{fixed(pct, 1)}%",
               f"Daily Rate: {fixed(daily, 4)} per day"],
    )


def _stat(fid: str, label: str, required: bool = False) -> Any:
    if required:
        return number(fid, label, min=0)
    return number(fid, label, required=False, min=0, placeholder="0", default=0)


SPORTS: List[Calculator] = [
    Calculator(
        id="fantasy-sports-points",
        title="Fantasy Sports Points Calculator",
        description="Calculate fantasy football, basketball, and baseball points based on player stats.",
        category=CATEGORY,
        inputs=(select("sport", "Sport", SPORT_OPTIONS),)
        + tuple(number(fid, label, required=False, placeholder="0", default=0)
                for s in Sport for fid, label, _ in FANTASY_SCORING[s]),
        formula="Fantasy Points = Σ (stat × point value); PPR football, standard basketball and baseball",
        compute=fantasy_calculate,
        tags=("fantasy", "football", "basketball", "baseball"),
        complexity=Complexity.BASIC,
    ),
    Calculator(
        id="sports-betting-odds",
        title="Sports Betting Odds Calculator",
        description="Convert between American, Decimal, and Fractional odds formats.",
        category=CATEGORY,
        inputs=(
            select("input_format", "Input Format", ODDS_OPTIONS),
            text("odds_value", "Odds Value", placeholder="Enter odds, e.g. +150, 2.50 or 3/2"),
        ),
        formula="Decimal = American/100 + 1 (positive) or 100/|American| + 1 (negative); Implied % = 1/Decimal",
        compute=odds_calculate,
        tags=("betting", "odds", "probability"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="player-statistics",
        title="Player Statistics Calculator",
        description="Advanced sports analytics and performance metrics for player evaluation.",
        category=CATEGORY,
        inputs=(
            number("games_played", "Games Played", min=0, placeholder="Number of games"),
            number("points", "Total Points", min=0, placeholder="Total points scored"),
            _stat("field_goals_made", "Field Goals Made"),
            _stat("field_goals_attempted", "Field Goals Attempted"),
            _stat("three_pointers_made", "3-Pointers Made"),
            _stat("three_pointers_attempted", "3-Pointers Attempted"),
            _stat("free_throws_made", "Free Throws Made"),
            _stat("free_throws_attempted", "Free Throws Attempted"),
            _stat("rebounds", "Total Rebounds"),
            _stat("assists", "Total Assists"),
            _stat("minutes", "Total Minutes"),
        ),
        formula="Per-game averages, shooting percentages, efficiency = (PTS + REB + AST) × G / MIN",
        compute=player_stats_calculate,
        tags=("basketball", "player", "statistics", "efficiency"),
        complexity=Complexity.ADVANCED,
    ),
    Calculator(
        id="team-performance-metrics",
        title="Team Performance Metrics",
        description="Team comparison and analysis tools for evaluating team effectiveness.",
        category=CATEGORY,
        inputs=(
            _stat("wins", "Wins", required=True),
            _stat("losses", "Losses", required=True),
            _stat("points_for", "Points For", required=True),
            _stat("points_against", "Points Against", required=True),
            _stat("home_wins", "Home Wins"),
            _stat("home_losses", "Home Losses"),
            _stat("away_wins", "Away Wins"),
            _stat("away_losses", "Away Losses"),
        ),
        formula="Win %, Point Differential, Strength metrics",
        compute=team_calculate,
        tags=("team", "performance", "analysis", "metrics"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="running-pace-calculator",
        title="Running Pace Calculator",
        description="Calculate running paces, split times, and race predictions for various distances.",
        category=CATEGORY,
        inputs=(
            select("calculation_type", "Calculation Type", PACE_MODE_OPTIONS),
            number("distance", "Distance", step=0.1, placeholder="Distance"),
            select("distance_unit", "Distance Unit", RACE_UNIT_OPTIONS),
            number("time_hours", "Hours", required=False, min=0, placeholder="0", default=0),
            number("time_minutes", "Minutes", required=False, min=0, max=59, placeholder="0", default=0),
            number("time_seconds", "Seconds", required=False, min=0, max=59, placeholder="0", default=0),
            number("pace_minutes", "Pace Minutes", required=False, min=0, placeholder="0", default=0),
            number("pace_seconds", "Pace Seconds", required=False, min=0, max=59, placeholder="0", default=0),
        ),
        formula="Pace = Time / Distance, Time = Pace × Distance",
        compute=running_pace_calculate,
        tags=("running", "pace", "marathon", "training"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="swimming-time-calculator",
        title="Swimming Time Calculator",
        description="Calculate swimming times, paces, and performance metrics for pool and open water.",
        category=CATEGORY,
        inputs=(
            select("stroke", "Swimming Stroke", STROKE_OPTIONS),
            select("pool_length", "Pool Length", POOL_OPTIONS),
            number("distance", "Distance", placeholder="Swimming distance"),
            select("distance_unit", "Distance Unit", SWIM_UNIT_OPTIONS),
            number("time_minutes", "Time Minutes", min=0, placeholder="Minutes"),
            number("time_seconds", "Time Seconds", min=0, max=59, placeholder="Seconds"),
        ),
        formula="Pace per 100m = Time / Distance × 100, Efficiency = 1000 / (Pace × Stroke Factor)",
        compute=swimming_calculate,
        tags=("swimming", "pace", "pool", "open water"),
        complexity=Complexity.INTERMEDIATE,
    ),
    Calculator(
        id="sports-tournament-organizer",
        title="Sports Tournament Organizer",
        description="Create and manage sports tournament brackets and scheduling.",
        category=CATEGORY,
        inputs=(
            select("tournament_type", "Tournament Type", TOURNAMENT_OPTIONS),
            number("num_teams", "Number of Teams", min=2, max=64, step=1, placeholder="Total teams"),
            number("match_duration", "Match Duration (minutes)", required=False, min=1, placeholder="60", default=60),
            number("break_between_matches", "Break Between Matches (minutes)", required=False, min=0,
                   placeholder="15", default=15),
            number("courts_available", "Courts/Fields Available", required=False, min=1, step=1,
                   placeholder="1", default=1),
        ),
        formula="Single elimination: n - 1 matches; round robin: n(n - 1)/2; byes = next power of 2 - n",
        compute=tournament_calculate,
        tags=("tournament", "bracket", "scheduling", "organization"),
        complexity=Complexity.ADVANCED,
    ),
    Calculator(
        id="athletic-performance-tracker",
        title="Athletic Performance Tracker",
        description="Track and analyze athletic progress over time with performance metrics.",
        category=CATEGORY,
        inputs=(
            select("sport_type", "Sport Type", ACTIVITY_OPTIONS),
            number("baseline_performance", "Baseline Performance", placeholder="Initial performance value"),
            number("current_performance", "Current Performance", placeholder="Current performance value"),
            select("performance_unit", "Performance Unit", PERFORMANCE_UNIT_OPTIONS),
            number("training_days", "Training Days", min=1, step=1, placeholder="Days of training"),
            number("training_sessions", "Training Sessions", required=False, min=0,
                   placeholder="Total sessions", default=0),
            number("goal_performance", "Goal Performance", required=False, placeholder="Target performance"),
        ),
        formula="Improvement % = (Current - Baseline) / Baseline × 100 (reversed for times)",
        compute=performance_calculate,
        tags=("athletics", "performance", "tracking", "progress"),
        complexity=Complexity.ADVANCED,
    ),
]
