"""ROI simulation engine.

Maps raw business inputs to the monthly cost breakdown and the savings,
payback and ROI figures over the chosen time horizon. Pure and deterministic:
no I/O, no shared state.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from invoice_roi.models.simulation import (
    SavingsBreakdown,
    SavingsResults,
    ScenarioInputs,
    SimulationInput,
    SimulationResult,
)
from invoice_roi.simulation.assumptions import DEFAULT_ASSUMPTIONS, AutomationAssumptions

logger = logging.getLogger(__name__)


def normalize_inputs(inputs: SimulationInput) -> ScenarioInputs:
    """Clamp the horizon to at least one month and the implementation cost to zero or more."""
    return ScenarioInputs(
        monthly_invoice_volume=inputs.monthly_invoice_volume,
        num_ap_staff=inputs.num_ap_staff,
        avg_hours_per_invoice=inputs.avg_hours_per_invoice,
        hourly_wage=inputs.hourly_wage,
        error_rate_manual=inputs.error_rate_manual,
        error_cost=inputs.error_cost,
        time_horizon_months=max(1.0, inputs.time_horizon_months),
        one_time_implementation_cost=max(0.0, inputs.one_time_implementation_cost),
    )


def simulate(
    inputs: SimulationInput | Mapping[str, Any],
    assumptions: AutomationAssumptions = DEFAULT_ASSUMPTIONS,
) -> SimulationResult:
    """Compute the ROI projection for one set of inputs.

    Accepts a validated SimulationInput or any mapping of raw fields; malformed
    numeric fields fall back to their defaults instead of raising.

    Monthly savings are floored at ``assumptions.min_monthly_savings`` whenever
    the raw figure is non-positive or non-finite (the favorability floor).
    """
    if not isinstance(inputs, SimulationInput):
        inputs = SimulationInput.model_validate(dict(inputs))
    norm = normalize_inputs(inputs)

    volume = norm.monthly_invoice_volume
    error_rate_manual = norm.error_rate_manual / 100  # percent -> fraction

    # Volume first so zero volume gives 0 even when the other factors overflow
    labor_cost_manual = volume * norm.num_ap_staff * norm.hourly_wage * norm.avg_hours_per_invoice
    auto_cost = volume * assumptions.automated_cost_per_invoice
    error_savings = volume * (error_rate_manual - assumptions.automated_error_rate) * norm.error_cost

    monthly_savings = ((labor_cost_manual + error_savings) - auto_cost) * assumptions.savings_adjustment_factor
    if not math.isfinite(monthly_savings) or monthly_savings <= 0:
        logger.debug(
            "Raw monthly savings %s not positive; applying floor of %s",
            monthly_savings, assumptions.min_monthly_savings,
        )
        monthly_savings = assumptions.min_monthly_savings

    implementation_cost = norm.one_time_implementation_cost
    cumulative_savings = monthly_savings * norm.time_horizon_months
    net_savings = cumulative_savings - implementation_cost

    if monthly_savings > 0 and implementation_cost > 0:
        payback_months = implementation_cost / monthly_savings
    else:
        payback_months = 0.0

    roi_percentage = (net_savings / implementation_cost) * 100 if implementation_cost > 0 else 0.0

    return SimulationResult(
        scenario_name=inputs.scenario_name,
        inputs=norm,
        breakdown=SavingsBreakdown(
            labor_cost_manual=labor_cost_manual,
            auto_cost=auto_cost,
            error_savings=error_savings,
        ),
        results=SavingsResults(
            monthly_savings=monthly_savings,
            cumulative_savings=cumulative_savings,
            net_savings=net_savings,
            payback_months=payback_months,
            roi_percentage=roi_percentage,
        ),
    )
