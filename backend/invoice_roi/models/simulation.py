import math
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

NUMERIC_INPUT_FIELDS = (
    "monthly_invoice_volume",
    "num_ap_staff",
    "avg_hours_per_invoice",
    "hourly_wage",
    "error_rate_manual",
    "error_cost",
    "time_horizon_months",
    "one_time_implementation_cost",
)


def to_number(value: Any, default: float) -> float:
    """Parse a finite float from a JSON-ish value, or return ``default``."""
    if isinstance(value, str):
        value = value.strip()
        if not value:
            # An empty form field counts as zero, the way a JSON client sends it
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return number if math.isfinite(number) else default


class SimulationInput(BaseModel):
    """Raw caller-supplied simulation inputs.

    Numeric fields never fail validation: anything that does not parse to a
    finite number falls back to the field default.
    """
    model_config = ConfigDict(extra="ignore")

    scenario_name: str = ""
    monthly_invoice_volume: float = 0.0
    num_ap_staff: float = 0.0
    avg_hours_per_invoice: float = 0.0
    hourly_wage: float = 0.0
    error_rate_manual: float = 0.0  # percent, 0-100
    error_cost: float = 0.0
    time_horizon_months: float = 1.0
    one_time_implementation_cost: float = 0.0

    @field_validator("scenario_name", mode="before")
    @classmethod
    def _trim_name(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator(*NUMERIC_INPUT_FIELDS, mode="before")
    @classmethod
    def _parse_or_default(cls, value: Any, info: ValidationInfo) -> float:
        return to_number(value, cls.model_fields[info.field_name].default)


class ScenarioInputs(BaseModel):
    """Normalized numeric inputs echoed back with every result."""
    monthly_invoice_volume: float
    num_ap_staff: float
    avg_hours_per_invoice: float
    hourly_wage: float
    error_rate_manual: float
    error_cost: float
    time_horizon_months: float
    one_time_implementation_cost: float


class SavingsBreakdown(BaseModel):
    labor_cost_manual: float
    auto_cost: float
    error_savings: float


class SavingsResults(BaseModel):
    monthly_savings: float
    cumulative_savings: float
    net_savings: float
    payback_months: float
    roi_percentage: float


class SimulationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    scenario_name: str
    inputs: ScenarioInputs
    breakdown: SavingsBreakdown
    results: SavingsResults
