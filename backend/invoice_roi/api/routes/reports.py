from fastapi import APIRouter, Response

from invoice_roi.config import settings
from invoice_roi.models.report import ReportRequest
from invoice_roi.models.simulation import SimulationInput
from invoice_roi.services.report_service import render_roi_report
from invoice_roi.simulation.engine import simulate

router = APIRouter(tags=["reports"])


@router.post("/report/generate")
def generate_report(request: ReportRequest):
    """Simulate the submitted inputs and return the projection as a PDF download."""
    result = simulate(request.inputs or SimulationInput())
    pdf = render_roi_report(result, requested_by=request.email)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{settings.REPORT_FILENAME}"'},
    )
