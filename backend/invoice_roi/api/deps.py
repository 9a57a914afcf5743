from fastapi import Request

from invoice_roi.db.scenario_store import ScenarioStore


def get_store(request: Request) -> ScenarioStore:
    """FastAPI dependency returning the store created at application startup."""
    return request.app.state.scenario_store
