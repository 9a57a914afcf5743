from fastapi import APIRouter

from invoice_roi.models.simulation import SimulationInput, SimulationResult
from invoice_roi.simulation.engine import simulate

router = APIRouter(tags=["simulation"])


@router.post("/simulate", response_model=SimulationResult)
def simulate_endpoint(inputs: SimulationInput):
    """Compute the ROI projection for the submitted inputs.

    Malformed numeric fields fall back to their defaults, so any JSON object
    yields a result.
    """
    return simulate(inputs)
