from fastapi import APIRouter, Depends, HTTPException, Response

from invoice_roi.api.deps import get_store
from invoice_roi.db.scenario_store import ScenarioStore
from invoice_roi.models.scenario import Scenario, ScenarioCreateRequest, ScenarioSummary
from invoice_roi.services.scenario_service import save_scenario

router = APIRouter(tags=["scenarios"])


@router.post("/scenarios", response_model=Scenario, status_code=201)
async def create_scenario(request: ScenarioCreateRequest, store: ScenarioStore = Depends(get_store)):
    """Simulate the submitted inputs and persist them as a named scenario."""
    try:
        return await save_scenario(store, request.scenario_name, request.inputs)
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Failed to save scenario: {e}")


@router.get("/scenarios", response_model=list[ScenarioSummary])
async def list_scenarios(store: ScenarioStore = Depends(get_store)):
    try:
        return await store.list()
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Failed to list scenarios: {e}")


@router.get("/scenarios/{scenario_id}", response_model=Scenario)
async def get_scenario(scenario_id: str, store: ScenarioStore = Depends(get_store)):
    try:
        scenario = await store.get(scenario_id)
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Failed to get scenario: {e}")
    if scenario is None:
        raise HTTPException(status_code=404, detail=f"Scenario {scenario_id} not found")
    return scenario


@router.delete("/scenarios/{scenario_id}", status_code=204)
async def delete_scenario(scenario_id: str, store: ScenarioStore = Depends(get_store)):
    try:
        deleted = await store.delete(scenario_id)
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Failed to delete scenario: {e}")
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Scenario {scenario_id} not found")
    return Response(status_code=204)
