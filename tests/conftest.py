"""Shared builders for guard-report tests (no log store or hardware needed)."""
from __future__ import annotations

import pytest

from collectors.logging_client import StaticLogStore
from collectors.properties import LOGGING_ENTRY_INTERFACE, PEL_ENTRY_INTERFACE
from collectors.topology import (
    ATTR_HWAS_STATE,
    ATTR_LOCATION_CODE,
    ATTR_PHYS_DEV_PATH,
    HardwareTarget,
)
from schemas.guard import GuardErrorType, GuardRecord

PROC0 = (("sys", 0), ("node", 0), ("proc", 0))
CORE0 = PROC0 + (("core", 0),)
CORE1 = PROC0 + (("core", 1),)


def hw_node(name, path=None, functional=None, eid=0, location=None, children=()):
    attrs = {}
    if path is not None:
        attrs[ATTR_PHYS_DEV_PATH] = path
    if functional is not None:
        attrs[ATTR_HWAS_STATE] = {"functional": functional, "deconfiguredByEid": eid}
    if location is not None:
        attrs[ATTR_LOCATION_CODE] = location
    return HardwareTarget(name=name, attributes=attrs, children=list(children))


def log_entry(store, pel_id, entry_id, *, resolution="", event_id="", plid=0, timestamp=0):
    store.add_entry(pel_id, entry_id, {
        LOGGING_ENTRY_INTERFACE: {"Resolution": resolution, "EventId": event_id},
        PEL_ENTRY_INTERFACE: {"PlatformLogID": plid, "Timestamp": timestamp},
    })


def guard(record_id, elog_id, target_id=CORE0, err_type=GuardErrorType.GARD_Predictive):
    return GuardRecord(record_id=record_id, elog_id=elog_id, target_id=target_id, err_type=err_type)


@pytest.fixture
def topology():
    return hw_node("sys", "physical:sys-0", True, children=[
        hw_node("node", "physical:sys-0/node-0", True, children=[
            hw_node("proc", "physical:sys-0/node-0/proc-0", True, children=[
                hw_node("core0", "physical:sys-0/node-0/proc-0/core-0", True,
                        location="U78DA.ND0.WZS004K-P0-C15"),
                hw_node("core1", "physical:sys-0/node-0/proc-0/core-1", False, eid=0x50000123,
                        location="U78DA.ND0.WZS004K-P0-C16"),
            ]),
        ]),
    ])


@pytest.fixture
def log_store():
    return StaticLogStore()
