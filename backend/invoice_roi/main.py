import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invoice_roi.config import settings
from invoice_roi.db.scenario_store import ScenarioStore
from invoice_roi.api.routes import health, simulate, scenarios, reports


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: configure package logging and open the scenario store
    logging.getLogger("invoice_roi").setLevel(settings.LOG_LEVEL.upper())
    store = ScenarioStore(settings.DATA_DIR, settings.SCENARIOS_FILENAME)
    await store.initialize()
    app.state.scenario_store = store
    yield


app = FastAPI(title="Invoice ROI Simulator", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(simulate.router, prefix="/api")
app.include_router(scenarios.router, prefix="/api")
app.include_router(reports.router, prefix="/api")
