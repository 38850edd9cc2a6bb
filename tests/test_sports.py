import pytest

from crunchem.catalog import get_catalog
from crunchem.calculators.sports import clock
from crunchem.types import CalculationError


def _run(calc_id, **inputs):
    return get_catalog().get(calc_id).calculate(inputs)


def _values(res):
    return {r.label: r.value for r in res.results}


def test_clock_format():
    assert clock(480) == "8:00"
    assert clock(65) == "1:05"
    assert clock(3725) == "1:02:05"
    assert clock(2400, with_hours=True) == "0:40:00"


def test_fantasy_football_ppr():
    out = _values(_run("fantasy-sports-points", sport="football", passing_yards="300",
                       passing_tds="2", interceptions="1"))
    assert out["Fantasy Points"] == pytest.approx(18)
    assert out["Sport"] == "Football"


def test_fantasy_basketball_and_baseball():
    out = _values(_run("fantasy-sports-points", sport="basketball", points_scored="20",
                       rebounds="10", assists="5"))
    assert out["Fantasy Points"] == pytest.approx(39.5)
    out = _values(_run("fantasy-sports-points", sport="baseball", singles="2", home_runs="1", rbis="3"))
    assert out["Fantasy Points"] == pytest.approx(9)


def test_odds_american_positive():
    out = _values(_run("sports-betting-odds", input_format="american", odds_value="+150"))
    assert out == {"American": "+150", "Decimal": 2.5, "Fractional": "3/2", "Implied Probability": 40.0}


def test_odds_other_formats():
    assert _values(_run("sports-betting-odds", input_format="decimal", odds_value="1.5"))["American"] == "-200"
    assert _values(_run("sports-betting-odds", input_format="fractional", odds_value="3/2"))["Decimal"] == 2.5


def test_odds_validation():
    with pytest.raises(CalculationError, match="Invalid odds format"):
        _run("sports-betting-odds", input_format="american", odds_value="abc")
    with pytest.raises(CalculationError, match="American odds"):
        _run("sports-betting-odds", input_format="american", odds_value="50")
    with pytest.raises(CalculationError, match="greater than 1.00"):
        _run("sports-betting-odds", input_format="decimal", odds_value="1")
    with pytest.raises(CalculationError, match="fractional format"):
        _run("sports-betting-odds", input_format="fractional", odds_value="3-2")


def test_player_statistics():
    out = _values(_run("player-statistics", games_played="10", points="250", field_goals_made="100",
                       field_goals_attempted="200", rebounds="50", assists="30", minutes="300"))
    assert out["Points Per Game"] == 25
    assert out["Field Goal %"] == 50
    assert out["3-Point %"] == 0
    assert out["Player Efficiency Rating"] == pytest.approx(11)


def test_player_statistics_validation():
    with pytest.raises(CalculationError, match="greater than 0"):
        _run("player-statistics", games_played="0", points="10")
    with pytest.raises(CalculationError, match="cannot exceed"):
        _run("player-statistics", games_played="1", points="10", field_goals_made="5",
             field_goals_attempted="3")


def test_team_metrics():
    out = _values(_run("team-performance-metrics", wins="10", losses="5", points_for="1500",
                       points_against="1400"))
    assert out["Record"] == "10-5"
    assert out["Win Percentage"] == pytest.approx(66.67)
    assert out["Point Differential"] == 100
    assert out["Avg Points For"] == 100


def test_pace_from_time():
    out = _values(_run("running-pace-calculator", calculation_type="pace_from_time", distance="5",
                       distance_unit="miles", time_minutes="40"))
    assert out["Pace per Mile"] == "8:00"
    assert out["Total Time"] == "0:40:00"


def test_time_from_pace():
    out = _values(_run("running-pace-calculator", calculation_type="time_from_pace", distance="10",
                       distance_unit="kilometers", pace_minutes="8"))
    assert out["Predicted Time"] == "0:49:42"


def test_split_times():
    res = _run("running-pace-calculator", calculation_type="split_times", distance="10",
               distance_unit="kilometers", time_minutes="50")
    out = _values(res)
    assert out["Even Split per km"] == "5:00"
    assert out["Full Splits"] == 10
    assert "km 10: 0:50:00" in res.steps


def test_pace_requires_time():
    with pytest.raises(CalculationError, match="Total time"):
        _run("running-pace-calculator", calculation_type="pace_from_time", distance="5",
             distance_unit="miles")


def test_swimming():
    out = _values(_run("swimming-time-calculator", stroke="freestyle", pool_length="25_meters",
                       distance="100", distance_unit="meters", time_minutes="1", time_seconds="40"))
    assert out["Pace per 100m"] == "1:40"
    assert out["Pool Lengths"] == 4
    out = _values(_run("swimming-time-calculator", stroke="butterfly", pool_length="open_water",
                       distance="1", distance_unit="kilometers", time_minutes="20", time_seconds="0"))
    assert "Pool Lengths" not in out


def test_tournament_round_robin():
    even = _values(_run("sports-tournament-organizer", tournament_type="round_robin", num_teams="8"))
    assert even["Total Matches"] == 28 and even["Rounds"] == 7
    odd = _values(_run("sports-tournament-organizer", tournament_type="round_robin", num_teams="5"))
    assert odd["Total Matches"] == 10 and odd["Rounds"] == 5


def test_tournament_single_elimination():
    out = _values(_run("sports-tournament-organizer", tournament_type="single_elimination", num_teams="6"))
    assert out["Total Matches"] == 5
    assert out["Rounds"] == 3
    assert out["Byes Needed"] == 2


def test_tournament_team_bounds():
    with pytest.raises(CalculationError, match="at most 64"):
        _run("sports-tournament-organizer", tournament_type="swiss", num_teams="65")


def test_performance_tracker_lower_is_better():
    out = _values(_run("athletic-performance-tracker", sport_type="running", baseline_performance="300",
                       current_performance="270", performance_unit="time_seconds", training_days="30",
                       goal_performance="240"))
    assert out["Total Improvement"] == 30
    assert out["Improvement %"] == 10
    assert out["Performance Rating"] == "Very Good"
    assert out["Days to Goal"] == "30 days"
    assert out["Goal Progress"] == 50


def test_performance_tracker_zero_baseline():
    with pytest.raises(CalculationError, match="non-zero"):
        _run("athletic-performance-tracker", sport_type="general", baseline_performance="0",
             current_performance="5", performance_unit="points", training_days="10")
