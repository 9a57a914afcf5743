"""File-backed scenario store.

All scenarios live in a single pretty-printed JSON document::

    {"scenarios": [{"id", "scenario_name", "inputs", "results", "created_at"}, ...]}

Commits rewrite the whole document to a temporary file in the same directory
and atomically replace the canonical file, so readers never see a partial
write. Each store owns a lock that serializes the read-modify-write cycle of
every commit. A document that cannot be read or parsed is treated as empty.
"""
from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from invoice_roi.models.scenario import Scenario, ScenarioSummary
from invoice_roi.models.simulation import SavingsResults, ScenarioInputs

logger = logging.getLogger(__name__)


def _empty_document() -> dict[str, Any]:
    return {"scenarios": []}


def _utc_timestamp() -> str:
    """ISO-8601 UTC with milliseconds and a Z suffix, e.g. 2024-05-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _records(document: dict[str, Any]) -> list[dict[str, Any]]:
    return [s for s in document["scenarios"] if isinstance(s, dict)]


class ScenarioStore:
    """Durable collection of named scenarios backed by one JSON file."""

    def __init__(self, data_dir: str | os.PathLike, filename: str = "scenarios.json"):
        self._data_dir = Path(data_dir)
        self._path = self._data_dir / filename
        self._write_lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def initialize(self) -> None:
        async with self._write_lock:
            await asyncio.to_thread(self._ensure_document)
        logger.info("Scenario store initialized at %s", self._path)

    def status(self) -> dict[str, Any]:
        return {"path": str(self._path), "exists": self._path.exists()}

    # -- operations --------------------------------------------------------

    async def create(
        self,
        scenario_name: str,
        inputs: ScenarioInputs,
        results: SavingsResults,
        scenario_id: Optional[str] = None,
    ) -> Scenario:
        """Append a new scenario and commit it; returns the stored record."""
        async with self._write_lock:
            document = await self._read()
            scenario = Scenario(
                id=scenario_id or str(uuid.uuid4()),
                scenario_name=scenario_name,
                inputs=inputs,
                results=results,
                created_at=_utc_timestamp(),
            )
            document["scenarios"].append(scenario.model_dump(mode="json"))
            await self._commit(document)
        logger.info("Saved scenario %s (%r)", scenario.id, scenario.scenario_name)
        return scenario

    async def list(self) -> list[ScenarioSummary]:
        """Scenario summaries, newest first."""
        document = await self._read()
        summaries = []
        for record in _records(document):
            if not isinstance(record.get("id"), str):
                logger.warning("Skipping scenario record without an id")
                continue
            try:
                summaries.append(ScenarioSummary(
                    id=record["id"],
                    scenario_name=record.get("scenario_name") or "",
                    created_at=record.get("created_at"),
                ))
            except ValidationError as e:
                logger.warning("Skipping malformed scenario record %s: %s", record["id"], e)
        # Stable sort: records sharing a timestamp keep their file order
        summaries.sort(key=lambda s: s.created_at or "", reverse=True)
        return summaries

    async def get(self, scenario_id: str) -> Optional[Scenario]:
        """Return the full scenario, or None when no record has this id."""
        document = await self._read()
        for record in _records(document):
            if record.get("id") == scenario_id:
                try:
                    return Scenario.model_validate(record)
                except ValidationError as e:
                    logger.warning("Skipping malformed scenario record %s: %s", scenario_id, e)
                    return None
        return None

    async def delete(self, scenario_id: str) -> bool:
        """Remove a scenario; True if it existed. Commits only on change."""
        async with self._write_lock:
            document = await self._read()
            before = len(document["scenarios"])
            document["scenarios"] = [
                s for s in document["scenarios"]
                if not (isinstance(s, dict) and s.get("id") == scenario_id)
            ]
            changed = len(document["scenarios"]) != before
            if changed:
                await self._commit(document)
        if changed:
            logger.info("Deleted scenario %s", scenario_id)
        return changed

    # -- file handling -----------------------------------------------------

    async def _read(self) -> dict[str, Any]:
        return await asyncio.to_thread(self._load_document)

    async def _commit(self, document: dict[str, Any]) -> None:
        await asyncio.to_thread(self._write_document, document)

    def _ensure_document(self) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)
        if not self._path.exists():
            self._write_document(_empty_document())

    def _load_document(self) -> dict[str, Any]:
        # Reads never write; a missing file is created by initialize() or the next commit
        if not self._path.exists():
            return _empty_document()
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Scenario document %s unreadable, treating as empty: %s", self._path, e)
            return _empty_document()
        if not isinstance(document, dict) or not isinstance(document.get("scenarios"), list):
            logger.warning("Scenario document %s has no scenarios list, treating as empty", self._path)
            return _empty_document()
        return document

    def _write_document(self, document: dict[str, Any]) -> None:
        """Write to a sibling temp file, fsync, then atomically replace the canonical file."""
        self._data_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._data_dir, prefix=f".{self._path.stem}.", suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
        except Exception:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
