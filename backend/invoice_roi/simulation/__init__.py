"""Simulation engine: automation assumptions and the ROI projection."""
from invoice_roi.simulation.assumptions import AutomationAssumptions, DEFAULT_ASSUMPTIONS
from invoice_roi.simulation.engine import normalize_inputs, simulate

__all__ = [
    "AutomationAssumptions",
    "DEFAULT_ASSUMPTIONS",
    "normalize_inputs",
    "simulate",
]
