"""Guard domain types: the contracts shared by resolvers, engine and reporting.

GuardRecord is the input shape (one persisted guard entry).  The report
TypedDicts are the canonical output shapes; their keys are consumed by
field-service tooling and must not change.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, List, Literal, Sequence, Tuple, TypedDict, Union


# ── Guard input ───────────────────────────────────────────────────

# One entity path element: (entity type, instance), e.g. ("proc", 1)
EntityPathElement = Tuple[str, int]
EntityPath = Tuple[EntityPathElement, ...]

MANUAL_GUARD_ELOG_ID = 0


class GuardErrorType(IntEnum):
    """Error type recorded with a guard entry."""
    GARD_NULL = 0x00
    GARD_User_Manual = 0xD2
    GARD_Unrecoverable = 0xE2
    GARD_Fatal = 0xE3
    GARD_Predictive = 0xE6
    GARD_Power = 0xE9
    GARD_PHYP = 0xEA
    GARD_Reconfig = 0xEB
    GARD_Sticky_deconfig = 0xEC


@dataclass(frozen=True)
class GuardRecord:
    record_id: int
    elog_id: int
    target_id: EntityPath
    err_type: int = GuardErrorType.GARD_NULL


GuardRecords = Sequence[GuardRecord]


def is_reportable(record: GuardRecord) -> bool:
    """Manual guards carry no originating error log and are never reported."""
    return record.elog_id != MANUAL_GUARD_ELOG_ID


# ── Hardware state ────────────────────────────────────────────────

class HardwareState(str, Enum):
    CONFIGURED = "CONFIGURED"
    DECONFIGURED = "DECONFIGURED"


# ── Report output ─────────────────────────────────────────────────

PLACEHOLDER_DATE_TIME = "00/00/0000 00:00:00"
PLACEHOLDER_SRC = 0

CalloutSection = Dict[str, Any]


ErrorLogSection = TypedDict("ErrorLogSection", {
    "PLID": str,
    "Callout Section": CalloutSection,
    "SRC": Union[str, int],
    "DATE_TIME": str,
})


class ResourceActions(TypedDict):
    TYPE: str
    CURRENT_STATE: Literal["CONFIGURED", "DECONFIGURED"]
    REASON_DESCRIPTION: str
    GARD_RECORD: bool


class ResourceActionsSection(TypedDict):
    RESOURCE_ACTIONS: ResourceActions


class CecErrorLog(TypedDict):
    CEC_ERROR_LOG: List[Dict[str, Any]]


class ReportEntry(TypedDict):
    SERVICABLE_EVENT: CecErrorLog


Report = List[ReportEntry]

ERROR_LOG_KEYS = ("PLID", "Callout Section", "SRC", "DATE_TIME")
RESOURCE_ACTION_KEYS = ("TYPE", "CURRENT_STATE", "REASON_DESCRIPTION", "GARD_RECORD")
