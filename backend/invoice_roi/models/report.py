from typing import Optional

from pydantic import BaseModel, field_validator

from invoice_roi.models.simulation import SimulationInput


class ReportRequest(BaseModel):
    """Request body for a PDF ROI report."""
    email: str
    inputs: Optional[SimulationInput] = None

    @field_validator("email")
    @classmethod
    def _require_email(cls, value: str) -> str:
        value = value.strip()
        if "@" not in value:
            raise ValueError("Valid email is required")
        return value
