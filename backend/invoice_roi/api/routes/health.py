from fastapi import APIRouter, Depends

from invoice_roi.api.deps import get_store
from invoice_roi.db.scenario_store import ScenarioStore

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(store: ScenarioStore = Depends(get_store)):
    return {
        "status": "ok",
        "storage": store.status(),
    }
