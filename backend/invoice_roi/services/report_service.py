"""PDF report rendering for a single ROI projection."""
from __future__ import annotations

import io
import logging

from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen.canvas import Canvas

from invoice_roi.models.simulation import SimulationResult

logger = logging.getLogger(__name__)

_MARGIN = 50
_FONT = "Helvetica"
_FONT_BOLD = "Helvetica-Bold"


class _PageWriter:
    """Top-down line writer that starts a new page when the current one fills."""

    def __init__(self, canvas: Canvas):
        self._canvas = canvas
        self._width, self._height = LETTER
        self._y = self._height - _MARGIN

    def line(self, text: str, size: int = 10, bold: bool = False, gap: float = 4) -> None:
        if self._y - size < _MARGIN:
            self._canvas.showPage()
            self._y = self._height - _MARGIN
        self._y -= size
        self._canvas.setFont(_FONT_BOLD if bold else _FONT, size)
        self._canvas.drawString(_MARGIN, self._y, text)
        self._y -= gap

    def space(self, amount: float = 12) -> None:
        self._y -= amount


def _format_number(value: float, digits: int | None = None) -> str:
    if digits is not None:
        value = round(value, digits)
    return str(int(value)) if value.is_integer() else str(value)


def render_roi_report(result: SimulationResult, requested_by: str) -> bytes:
    """Render ``result`` as a PDF and return the document bytes."""
    buf = io.BytesIO()
    canvas = Canvas(buf, pagesize=LETTER)
    canvas.setTitle("Invoicing ROI Report")
    writer = _PageWriter(canvas)

    writer.line("Invoicing ROI Report", size=20, bold=True)
    writer.space()
    writer.line(f"Requested by: {requested_by}", size=12)
    if result.scenario_name:
        writer.line(f"Scenario: {result.scenario_name}", size=12)
    writer.space()

    writer.line("Inputs", size=14, bold=True)
    for key, value in result.inputs.model_dump().items():
        writer.line(f"{key}: {_format_number(value)}")
    writer.space()

    writer.line("Results", size=14, bold=True)
    for key, value in result.results.model_dump().items():
        writer.line(f"{key}: {_format_number(value, 2)}")

    canvas.showPage()
    canvas.save()
    logger.info("Rendered ROI report for %s", requested_by)
    return buf.getvalue()
