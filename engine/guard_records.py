"""Guard records report: one servicable event per error-logged guard.

For each guard record, in input order:

  1. manual guards (elog id 0) are skipped
  2. the hardware target is resolved; if it can't be, the record is dropped
  3. the originating error log is resolved; if it was deleted, the entry
     is still emitted with content derived from the hardware node
  4. error-log and resource-action sections are merged into one entry

A failure inside one record is logged and never stops the others.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from collectors.guard_paths import PathLookup, physical_path_of, reason_for
from collectors.logging_client import LogStore
from collectors.topology import HardwareTarget, read_location_code
from reporting.callouts import location_only_callout, parse_callouts
from reporting.timestamps import format_epoch
from resolvers.error_log import resolve_error_log
from resolvers.hardware_target import resolve_hardware_target
from resolvers.types import ErrorLogResult, LookupStatus, TargetResult
from schemas.guard import (
    PLACEHOLDER_DATE_TIME,
    PLACEHOLDER_SRC,
    ErrorLogSection,
    GuardRecord,
    GuardRecords,
    Report,
    ReportEntry,
    ResourceActions,
    is_reportable,
)

_log = logging.getLogger(__name__)

ReasonLookup = Callable[[GuardRecords, str], str]


class ErrorLogUnavailable(Exception):
    """The error log was found but its properties could not be read."""
    pass


@dataclass
class AssemblyContext:
    """Collaborators the report is assembled from.

    ``reason_lookup`` defaults to a lookup that resolves each record's
    target with the same ``path_lookup`` used for the hardware target.
    """
    log_store: LogStore
    topology: Optional[HardwareTarget]
    path_lookup: PathLookup = physical_path_of
    reason_lookup: Optional[ReasonLookup] = None
    callout_parser: Callable[[str], Any] = parse_callouts
    timestamp_formatter: Callable[[int], str] = format_epoch

    def reason_for(self, records: GuardRecords, physical_path: str) -> str:
        if self.reason_lookup is not None:
            return self.reason_lookup(records, physical_path)
        return reason_for(records, physical_path, self.path_lookup)


# ── Counting ──────────────────────────────────────────────────────

def count_reportable(records: GuardRecords) -> int:
    """Number of guard records that carry an originating error log."""
    return sum(1 for r in records if is_reportable(r))


# ── Section builders ──────────────────────────────────────────────

def _error_log_section(
    elog: ErrorLogResult,
    hw: TargetResult,
    ctx: AssemblyContext,
) -> ErrorLogSection:
    if elog.found:
        return {
            "PLID": f"0x{elog.plid:x}",
            "Callout Section": ctx.callout_parser(elog.callout_text),
            "SRC": elog.reference_code,
            "DATE_TIME": ctx.timestamp_formatter(elog.timestamp),
        }

    # Error log deleted: fall back to what the hardware node recorded
    assert hw.target is not None
    deconfigured_by = hw.hwas.deconfigured_by_eid if hw.hwas is not None else 0
    return {
        "PLID": str(deconfigured_by),
        "Callout Section": location_only_callout(read_location_code(hw.target)),
        "SRC": PLACEHOLDER_SRC,
        "DATE_TIME": PLACEHOLDER_DATE_TIME,
    }


def _resource_actions(
    hw: TargetResult,
    records: GuardRecords,
    ctx: AssemblyContext,
) -> ResourceActions:
    assert hw.target is not None and hw.physical_path is not None
    return {
        "TYPE": hw.target.name,
        "CURRENT_STATE": hw.state.value,
        "REASON_DESCRIPTION": ctx.reason_for(records, hw.physical_path),
        "GARD_RECORD": True,
    }


def build_entry(
    record: GuardRecord,
    records: GuardRecords,
    ctx: AssemblyContext,
) -> Optional[ReportEntry]:
    """Report entry for one reportable record, or None if its hardware is unresolvable."""
    hw = resolve_hardware_target(ctx.path_lookup, ctx.topology, record.target_id)
    if hw.status != LookupStatus.OK:
        _log.error("%s for record %s", hw.error_msg, record.record_id,
                   extra={"record_id": record.record_id})
        return None

    elog = resolve_error_log(ctx.log_store, record.elog_id)
    if elog.status == LookupStatus.ERROR:
        raise ErrorLogUnavailable(elog.error_msg)

    return {
        "SERVICABLE_EVENT": {
            "CEC_ERROR_LOG": [
                dict(_error_log_section(elog, hw, ctx)),
                {"RESOURCE_ACTIONS": _resource_actions(hw, records, ctx)},
            ]
        }
    }


# ── Public API ────────────────────────────────────────────────────

def populate(
    records: GuardRecords,
    ctx: AssemblyContext,
    report: Optional[Report] = None,
) -> Report:
    """Append one entry per resolvable, error-logged guard record to *report*."""
    if report is None:
        report = []

    for record in records:
        if not is_reportable(record):
            continue
        try:
            entry = build_entry(record, records, ctx)
        except Exception as e:
            _log.info("Failed to add guard record %s, %s", record.elog_id, e,
                      extra={"elog_id": record.elog_id})
            continue
        if entry is not None:
            report.append(entry)

    return report


def assemble_report(records: GuardRecords, ctx: AssemblyContext) -> Report:
    return populate(records, ctx, [])
