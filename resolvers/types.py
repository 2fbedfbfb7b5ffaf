"""Core types for the resolver layer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from collectors.topology import HardwareTarget, HwasState
from schemas.guard import HardwareState


class LookupStatus(str, Enum):
    OK = "OK"
    NOT_FOUND = "NotFound"
    ERROR = "Error"


@dataclass
class ErrorLogResult:
    """Outcome of resolving one guard record's originating error log."""
    elog_id: int
    status: LookupStatus
    plid: int = 0
    callout_text: str = ""
    reference_code: str = ""
    timestamp: int = 0
    error_msg: str = ""
    duration_ms: int = 0

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.OK


@dataclass
class TargetResult:
    """Outcome of resolving one guard record's hardware target.

    ``target`` is a reference into the topology, valid while the record
    is being processed.  ``hwas`` is None when the state attribute could
    not be read.
    """
    status: LookupStatus
    physical_path: Optional[str] = None
    target: Optional[HardwareTarget] = None
    state: HardwareState = HardwareState.DECONFIGURED
    hwas: Optional[HwasState] = None
    error_msg: str = ""
    duration_ms: int = 0

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.OK
