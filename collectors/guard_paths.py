"""Guard target paths and guard reasons.

A guard record names its target by entity path, e.g.
``(("sys", 0), ("node", 0), ("proc", 1))``.  The topology is keyed by the
rendered form ``physical:sys-0/node-0/proc-1``, which is the join key
between a guard record and its hardware node.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from schemas.guard import GuardErrorType, GuardRecords

PHYSICAL_PREFIX = "physical:"
UNKNOWN_REASON = "unknown"

PathLookup = Callable[[Any], Optional[str]]

_REASON_TEXT: dict[int, str] = {
    GuardErrorType.GARD_NULL: "none",
    GuardErrorType.GARD_User_Manual: "manual",
    GuardErrorType.GARD_Unrecoverable: "unrecoverable",
    GuardErrorType.GARD_Fatal: "fatal",
    GuardErrorType.GARD_Predictive: "predictive",
    GuardErrorType.GARD_Power: "power",
    GuardErrorType.GARD_PHYP: "phyp",
    GuardErrorType.GARD_Reconfig: "reconfig",
    GuardErrorType.GARD_Sticky_deconfig: "sticky_deconfig",
}


def physical_path_of(target_id: Any) -> Optional[str]:
    """Render an entity path as a physical path; None if it can't be rendered."""
    if not target_id or isinstance(target_id, (str, bytes)):
        return None
    parts: list[str] = []
    for element in target_id:
        try:
            entity_type, instance = element
        except (TypeError, ValueError):
            return None
        if not isinstance(entity_type, str) or not entity_type:
            return None
        if isinstance(instance, bool) or not isinstance(instance, int) or instance < 0:
            return None
        parts.append(f"{entity_type}-{instance}")
    return PHYSICAL_PREFIX + "/".join(parts)


def guard_reason_to_str(err_type: int) -> str:
    return _REASON_TEXT.get(err_type, UNKNOWN_REASON)


def reason_for(
    records: GuardRecords,
    physical_path: str,
    path_lookup: PathLookup = physical_path_of,
) -> str:
    """Reason of the first guard record whose target resolves to *physical_path*."""
    for record in records:
        if path_lookup(record.target_id) == physical_path:
            return guard_reason_to_str(record.err_type)
    return UNKNOWN_REASON
