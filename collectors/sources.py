"""Input loaders: guard records, hardware topology and log-store snapshots.

Every file is validated against a pydantic model before it is turned
into the runtime types.  A malformed file raises ``SourceError``; the
report never starts from half-loaded input.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, Field, ValidationError

from collectors.logging_client import StaticLogStore
from collectors.properties import Properties
from collectors.topology import HardwareTarget, build_tree
from schemas.guard import GuardErrorType, GuardRecord


class SourceError(Exception):
    """Raised when an input file cannot be read or fails validation."""
    pass


# ── File schemas ──────────────────────────────────────────────────

class GuardRecordModel(BaseModel):
    record_id: int
    elog_id: int = Field(ge=0)
    target_id: List[Tuple[str, int]]
    err_type: int = GuardErrorType.GARD_NULL

    def to_record(self) -> GuardRecord:
        return GuardRecord(
            record_id=self.record_id,
            elog_id=self.elog_id,
            target_id=tuple((t, i) for t, i in self.target_id),
            err_type=self.err_type,
        )


class TopologyNodeModel(BaseModel):
    name: str
    attributes: Dict[str, Any] = Field(default_factory=dict)
    children: List["TopologyNodeModel"] = Field(default_factory=list)


class LogEntryModel(BaseModel):
    pel_id: int
    entry_id: int
    interfaces: Dict[str, Dict[str, Any]] = Field(default_factory=dict)


class LogStoreSnapshotModel(BaseModel):
    entries: List[LogEntryModel] = Field(default_factory=list)


TopologyNodeModel.model_rebuild()


# ── Loaders ───────────────────────────────────────────────────────

def _load_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (OSError, json.JSONDecodeError) as e:
        raise SourceError(f"Cannot read {path}: {e}") from e


def parse_guard_records(data: Any) -> list[GuardRecord]:
    if not isinstance(data, list):
        raise SourceError("Guard records must be a JSON array")
    try:
        return [GuardRecordModel.model_validate(item).to_record() for item in data]
    except ValidationError as e:
        raise SourceError(f"Invalid guard record: {e}") from e


def parse_topology(data: Any) -> HardwareTarget:
    try:
        node = TopologyNodeModel.model_validate(data)
    except ValidationError as e:
        raise SourceError(f"Invalid topology: {e}") from e
    return build_tree(node.model_dump())


def parse_log_store(data: Any) -> StaticLogStore:
    try:
        snapshot = LogStoreSnapshotModel.model_validate(data)
    except ValidationError as e:
        raise SourceError(f"Invalid log store snapshot: {e}") from e
    store = StaticLogStore()
    for entry in snapshot.entries:
        interfaces: Dict[str, Properties] = {k: dict(v) for k, v in entry.interfaces.items()}
        store.add_entry(entry.pel_id, entry.entry_id, interfaces)
    return store


def load_guard_records(path: str | Path) -> list[GuardRecord]:
    return parse_guard_records(_load_json(Path(path)))


def load_topology(path: str | Path) -> HardwareTarget:
    return parse_topology(_load_json(Path(path)))


def load_log_store(path: str | Path) -> StaticLogStore:
    return parse_log_store(_load_json(Path(path)))
