import pytest
from fastapi.testclient import TestClient

from invoice_roi.config import settings
from invoice_roi.db.scenario_store import ScenarioStore
from invoice_roi.main import app


@pytest.fixture
def store(tmp_path):
    return ScenarioStore(tmp_path / "data")


@pytest.fixture
def client(tmp_path, monkeypatch):
    """TestClient whose scenario store lives in a temporary directory."""
    monkeypatch.setattr(settings, "DATA_DIR", str(tmp_path / "api-data"))
    with TestClient(app) as c:
        yield c
