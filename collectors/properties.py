"""Log-entry property values and typed accessors.

The log store hands back a flat ``{name: value}`` map per interface.
Values are one of a fixed set of kinds (text, boolean, fixed-width
integers, double).  Readers never assume a kind: ``try_get`` returns the
value only when it is present AND of the requested kind, else ``None``.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Union

PropertyValue = Union[str, bool, int, float]
Properties = Dict[str, PropertyValue]

LOGGING_ENTRY_INTERFACE = "xyz.openbmc_project.Logging.Entry"
PEL_ENTRY_INTERFACE = "org.open_power.Logging.PEL.Entry"


class PropertyKind(Enum):
    STRING = "s"
    BOOLEAN = "b"
    BYTE = "y"
    INT16 = "n"
    UINT16 = "q"
    INT32 = "i"
    UINT32 = "u"
    INT64 = "x"
    UINT64 = "t"
    DOUBLE = "d"


# (min, max) inclusive for each integer kind
_INT_RANGES: dict[PropertyKind, tuple[int, int]] = {
    PropertyKind.BYTE:   (0, 2**8 - 1),
    PropertyKind.INT16:  (-(2**15), 2**15 - 1),
    PropertyKind.UINT16: (0, 2**16 - 1),
    PropertyKind.INT32:  (-(2**31), 2**31 - 1),
    PropertyKind.UINT32: (0, 2**32 - 1),
    PropertyKind.INT64:  (-(2**63), 2**63 - 1),
    PropertyKind.UINT64: (0, 2**64 - 1),
}


def matches_kind(value: Any, kind: PropertyKind) -> bool:
    """True when *value* can be held by a property of *kind*."""
    if kind is PropertyKind.STRING:
        return isinstance(value, str)
    if kind is PropertyKind.BOOLEAN:
        return isinstance(value, bool)
    if kind is PropertyKind.DOUBLE:
        return isinstance(value, float)
    # bool is an int subclass; a flag is never a number here
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    low, high = _INT_RANGES[kind]
    return low <= value <= high


def try_get(props: Properties, name: str, kind: PropertyKind) -> Optional[PropertyValue]:
    value = props.get(name)
    if value is None or not matches_kind(value, kind):
        return None
    return value


def try_get_str(props: Properties, name: str) -> Optional[str]:
    return try_get(props, name, PropertyKind.STRING)  # type: ignore[return-value]


def try_get_uint32(props: Properties, name: str) -> Optional[int]:
    return try_get(props, name, PropertyKind.UINT32)  # type: ignore[return-value]


def try_get_uint64(props: Properties, name: str) -> Optional[int]:
    return try_get(props, name, PropertyKind.UINT64)  # type: ignore[return-value]
