"""Callout text parser.

The log entry's ``Resolution`` property lists callouts one per line:

    1. Location Code: U78DA.ND0.WZS004K-P0-C15, Priority: H, PN: 02WG676, SN: YF30UF8A900F, CCIN: 2E3A
    2. Priority: M, Procedure: BMC0001

Each line becomes one callout object.  Short keys are spelled out
(``PN`` → ``Part Number``); anything else is kept as written.
"""
from __future__ import annotations

import re
from typing import Any

_KEY_NAMES = {
    "PN": "Part Number",
    "SN": "Serial Number",
    "FN": "FRU Number",
    "CCIN": "CCIN",
    "Loc Code": "Location Code",
}

# "<n>. " leading ordinal
_ORDINAL = re.compile(r"^\s*\d+\.\s*")


def _parse_line(line: str) -> dict[str, str]:
    callout: dict[str, str] = {}
    body = _ORDINAL.sub("", line, count=1)
    for field in body.split(","):
        key, sep, value = field.partition(":")
        if not sep:
            continue
        key = key.strip()
        if not key:
            continue
        callout[_KEY_NAMES.get(key, key)] = value.strip()
    return callout


def parse_callouts(raw: str) -> dict[str, Any]:
    callouts = []
    for line in (raw or "").splitlines():
        if not line.strip():
            continue
        callout = _parse_line(line)
        if callout:
            callouts.append(callout)
    return {"Callout Count": len(callouts), "Callouts": callouts}


def location_only_callout(location_code: str | None) -> dict[str, Any]:
    """Callout section for a guard whose error log is gone."""
    callout: dict[str, str] = {}
    if location_code is not None:
        callout["Location Code"] = location_code
    return {"Callout Count": 1, "Callouts": callout}
