"""Scenario service.

Runs the simulation for a save request and hands the normalized inputs and
results to the store, so persisted scenarios always carry server-computed
figures.
"""
from __future__ import annotations

from typing import Optional

from invoice_roi.db.scenario_store import ScenarioStore
from invoice_roi.models.scenario import Scenario
from invoice_roi.models.simulation import SimulationInput
from invoice_roi.simulation.engine import simulate


async def save_scenario(
    store: ScenarioStore,
    scenario_name: str,
    inputs: Optional[SimulationInput] = None,
) -> Scenario:
    result = simulate(inputs or SimulationInput())
    return await store.create(scenario_name, result.inputs, result.results)
