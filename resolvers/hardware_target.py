"""Hardware target resolver: guard record target id → topology node + state."""
from __future__ import annotations

import time
from typing import Any, Optional

from collectors.guard_paths import PathLookup
from collectors.topology import (
    HardwareTarget,
    HwasState,
    find_by_physical_path,
    read_hwas_state,
)
from resolvers.types import LookupStatus, TargetResult
from schemas.guard import HardwareState


def state_from_hwas(hwas: Optional[HwasState]) -> HardwareState:
    """Unreadable state counts as deconfigured."""
    if hwas is not None and hwas.functional:
        return HardwareState.CONFIGURED
    return HardwareState.DECONFIGURED


def resolve_hardware_target(
    path_lookup: PathLookup,
    topology: Optional[HardwareTarget],
    target_id: Any,
) -> TargetResult:
    start = time.perf_counter_ns()

    physical_path = path_lookup(target_id)
    if not physical_path:
        return TargetResult(
            status=LookupStatus.NOT_FOUND,
            error_msg="Failed to get physical path",
            duration_ms=(time.perf_counter_ns() - start) // 1_000_000,
        )

    target = find_by_physical_path(topology, physical_path)
    if target is None:
        return TargetResult(
            status=LookupStatus.NOT_FOUND,
            physical_path=physical_path,
            error_msg="Failed to find the hardware target for the guarded path",
            duration_ms=(time.perf_counter_ns() - start) // 1_000_000,
        )

    # Read once; deconfigured_by_eid is only needed if the error log is gone
    hwas = read_hwas_state(target)
    return TargetResult(
        status=LookupStatus.OK,
        physical_path=physical_path,
        target=target,
        state=state_from_hwas(hwas),
        hwas=hwas,
        duration_ms=(time.perf_counter_ns() - start) // 1_000_000,
    )
