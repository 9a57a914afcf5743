"""Tests for the ROI simulation engine: arithmetic, coercion, and the favorability floor."""
import pytest

from invoice_roi.models.simulation import SimulationInput
from invoice_roi.simulation.assumptions import AutomationAssumptions, DEFAULT_ASSUMPTIONS
from invoice_roi.simulation.engine import normalize_inputs, simulate

_EXAMPLE = {
    "scenario_name": "Q3 pilot",
    "monthly_invoice_volume": 1000,
    "num_ap_staff": 2,
    "avg_hours_per_invoice": 0.17,
    "hourly_wage": 25,
    "error_rate_manual": 0.5,
    "error_cost": 100,
    "time_horizon_months": 12,
    "one_time_implementation_cost": 5000,
}


def _inputs(**overrides) -> dict:
    data = dict(_EXAMPLE)
    data.update(overrides)
    return data


# --- Worked example ---


def test_example_breakdown():
    result = simulate(_EXAMPLE)
    assert result.breakdown.labor_cost_manual == pytest.approx(8500)
    assert result.breakdown.auto_cost == pytest.approx(200)
    assert result.breakdown.error_savings == pytest.approx(400)


def test_example_results():
    r = simulate(_EXAMPLE).results
    assert r.monthly_savings == pytest.approx(9680)
    assert r.cumulative_savings == pytest.approx(116160)
    assert r.net_savings == pytest.approx(111160)
    assert r.payback_months == pytest.approx(5000 / 9680)
    assert round(r.payback_months, 2) == 0.52
    assert r.roi_percentage == pytest.approx(2223.2)


def test_example_echoes_normalized_inputs():
    result = simulate(_EXAMPLE)
    assert result.scenario_name == "Q3 pilot"
    assert result.inputs.error_rate_manual == 0.5  # still a percentage
    assert result.inputs.time_horizon_months == 12
    assert result.inputs.one_time_implementation_cost == 5000


def test_accepts_validated_model():
    from_model = simulate(SimulationInput(**_EXAMPLE))
    from_mapping = simulate(_EXAMPLE)
    assert from_model == from_mapping


# --- Coercion ---


@pytest.mark.parametrize("bad", ["abc", None, "nan", "inf", "-inf", [1, 2], {"x": 1}])
def test_malformed_numeric_falls_back_to_default(bad):
    result = simulate(_inputs(hourly_wage=bad, time_horizon_months=bad))
    assert result.inputs.hourly_wage == 0
    assert result.inputs.time_horizon_months == 1


def test_numeric_strings_are_parsed():
    result = simulate(_inputs(monthly_invoice_volume=" 1000 ", hourly_wage="25"))
    assert result.inputs.monthly_invoice_volume == 1000
    assert result.results.monthly_savings == pytest.approx(9680)


def test_missing_fields_use_defaults():
    result = simulate({})
    assert result.scenario_name == ""
    assert result.inputs.monthly_invoice_volume == 0
    assert result.inputs.time_horizon_months == 1
    assert result.inputs.one_time_implementation_cost == 0


def test_scenario_name_is_trimmed():
    assert simulate({"scenario_name": "  Pilot  "}).scenario_name == "Pilot"
    assert simulate({"scenario_name": None}).scenario_name == ""


def test_unknown_fields_ignored():
    result = simulate(_inputs(currency="EUR"))
    assert result.results.monthly_savings == pytest.approx(9680)


# --- Zero volume ---


@pytest.mark.parametrize("staff, wage", [(2, 25), (1e308, 1e308), (1e200, 1e200)])
def test_zero_volume_has_no_labor_or_automation_cost(staff, wage):
    result = simulate(_inputs(
        monthly_invoice_volume=0, num_ap_staff=staff, hourly_wage=wage,
        avg_hours_per_invoice=1, error_cost=1e308,
    ))
    assert result.breakdown.labor_cost_manual == 0
    assert result.breakdown.auto_cost == 0
    assert result.breakdown.error_savings == 0
    assert result.results.monthly_savings == 1


# --- Clamping ---


@pytest.mark.parametrize("horizon", [0, -5, 0.5])
def test_time_horizon_clamped_to_one(horizon):
    result = simulate(_inputs(time_horizon_months=horizon))
    assert result.inputs.time_horizon_months == 1
    assert result.results.cumulative_savings == result.results.monthly_savings


def test_negative_implementation_cost_clamped_to_zero():
    result = simulate(_inputs(one_time_implementation_cost=-2500))
    assert result.inputs.one_time_implementation_cost == 0
    assert result.results.payback_months == 0
    assert result.results.roi_percentage == 0


def test_normalize_inputs_leaves_other_fields_untouched():
    norm = normalize_inputs(SimulationInput(**_inputs(time_horizon_months=-1)))
    assert norm.monthly_invoice_volume == 1000
    assert norm.hourly_wage == 25
    assert norm.time_horizon_months == 1


# --- Favorability floor ---


def test_floor_applies_when_savings_non_positive():
    # Automation cost exceeds manual cost: raw savings are negative
    result = simulate(_inputs(num_ap_staff=0, error_rate_manual=0))
    assert result.breakdown.error_savings < 0
    assert result.results.monthly_savings == DEFAULT_ASSUMPTIONS.min_monthly_savings
    assert result.results.cumulative_savings == 12


def test_floor_applies_when_savings_non_finite():
    result = simulate(_inputs(num_ap_staff=1e308, hourly_wage=1e308))
    assert result.results.monthly_savings == 1


def test_floor_payback_and_roi():
    result = simulate(_inputs(monthly_invoice_volume=0, one_time_implementation_cost=100))
    r = result.results
    assert r.monthly_savings == 1
    assert r.payback_months == pytest.approx(100)
    assert r.net_savings == pytest.approx(12 - 100)
    assert r.roi_percentage == pytest.approx((12 - 100) / 100 * 100)


def test_custom_assumptions():
    assumptions = AutomationAssumptions(
        automated_cost_per_invoice=1.0,
        automated_error_rate=0.0,
        savings_adjustment_factor=1.0,
        min_monthly_savings=5.0,
    )
    result = simulate(_EXAMPLE, assumptions)
    assert result.breakdown.auto_cost == pytest.approx(1000)
    assert result.breakdown.error_savings == pytest.approx(500)
    assert result.results.monthly_savings == pytest.approx(8500 + 500 - 1000)

    floored = simulate({"monthly_invoice_volume": 10}, assumptions)
    assert floored.results.monthly_savings == 5.0


def test_result_is_json_serializable():
    data = simulate(_EXAMPLE).model_dump(mode="json")
    assert set(data) == {"scenario_name", "inputs", "breakdown", "results"}
    assert set(data["results"]) == {
        "monthly_savings", "cumulative_savings", "net_savings", "payback_months", "roi_percentage",
    }
