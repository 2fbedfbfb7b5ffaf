"""Error-log resolver: guard record elog id → originating log entry details.

Two steps against the log store: translate the platform log id into the
store's entry id, then read the entry's properties on two interfaces.
Absence is a typed outcome, never an exception:

  * translate fails (entry deleted, or the store unreachable)
      → NOT_FOUND, no further calls
  * property read fails after a successful translate
      → ERROR, the caller decides whether to keep the record
"""
from __future__ import annotations

import logging
import time

from collectors.logging_client import EntryNotFound, LogStore
from collectors.properties import (
    LOGGING_ENTRY_INTERFACE,
    PEL_ENTRY_INTERFACE,
    try_get_str,
    try_get_uint32,
    try_get_uint64,
)
from resolvers.types import ErrorLogResult, LookupStatus

_log = logging.getLogger(__name__)


def _elapsed_ms(start: int) -> int:
    return (time.perf_counter_ns() - start) // 1_000_000


def reference_code_of(event_id: str) -> str:
    """First whitespace-delimited token of an EventId; the rest is qualifier text."""
    tokens = event_id.split()
    return tokens[0] if tokens else ""


def resolve_error_log(log_store: LogStore, elog_id: int) -> ErrorLogResult:
    start = time.perf_counter_ns()

    try:
        entry_id = log_store.translate(elog_id)
    except EntryNotFound:
        _log.info("PEL might be deleted but guard entry is around %s", elog_id,
                  extra={"elog_id": elog_id})
        return ErrorLogResult(
            elog_id=elog_id,
            status=LookupStatus.NOT_FOUND,
            error_msg="log entry not found",
            duration_ms=_elapsed_ms(start),
        )
    except Exception as e:
        _log.info("Log entry lookup failed for %s, treating as deleted: %s", elog_id, e,
                  extra={"elog_id": elog_id})
        return ErrorLogResult(
            elog_id=elog_id,
            status=LookupStatus.NOT_FOUND,
            error_msg=str(e),
            duration_ms=_elapsed_ms(start),
        )

    try:
        entry_props = log_store.get_all_properties(entry_id, LOGGING_ENTRY_INTERFACE)
        pel_props = log_store.get_all_properties(entry_id, PEL_ENTRY_INTERFACE)
    except Exception as e:
        return ErrorLogResult(
            elog_id=elog_id,
            status=LookupStatus.ERROR,
            error_msg=str(e),
            duration_ms=_elapsed_ms(start),
        )

    event_id = try_get_str(entry_props, "EventId")
    return ErrorLogResult(
        elog_id=elog_id,
        status=LookupStatus.OK,
        plid=try_get_uint32(pel_props, "PlatformLogID") or 0,
        callout_text=try_get_str(entry_props, "Resolution") or "",
        reference_code=reference_code_of(event_id) if event_id else "",
        timestamp=try_get_uint64(pel_props, "Timestamp") or 0,
        duration_ms=_elapsed_ms(start),
    )
