from typing import Optional

from pydantic import BaseModel, field_validator

from invoice_roi.models.simulation import SavingsResults, ScenarioInputs, SimulationInput


class ScenarioSummary(BaseModel):
    id: str
    scenario_name: str = ""
    created_at: Optional[str] = None


class Scenario(BaseModel):
    """A persisted, immutable snapshot of normalized inputs and results."""
    id: str
    scenario_name: str = ""
    inputs: ScenarioInputs
    results: SavingsResults
    created_at: str


class ScenarioCreateRequest(BaseModel):
    scenario_name: str
    inputs: Optional[SimulationInput] = None

    @field_validator("scenario_name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("scenario_name is required")
        return value
