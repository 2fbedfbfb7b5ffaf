# collectors/topology.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional

ATTR_PHYS_DEV_PATH = "ATTR_PHYS_DEV_PATH"
ATTR_HWAS_STATE = "ATTR_HWAS_STATE"
ATTR_LOCATION_CODE = "ATTR_LOCATION_CODE"


@dataclass(frozen=True)
class HwasState:
    functional: bool
    deconfigured_by_eid: int


@dataclass
class HardwareTarget:
    """One node of the in-memory hardware topology.  Read-only to the report."""
    name: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    children: List["HardwareTarget"] = field(default_factory=list)


def build_tree(node_json: Dict[str, Any]) -> HardwareTarget:
    children = node_json.get("children", []) or []
    return HardwareTarget(
        name=str(node_json.get("name", "")),
        attributes=dict(node_json.get("attributes", {}) or {}),
        children=[build_tree(c) for c in children],
    )


def walk(root: Optional[HardwareTarget]) -> Iterator[HardwareTarget]:
    """Depth-first pre-order: a node, then each child subtree left to right."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def search(
    root: Optional[HardwareTarget],
    predicate: Callable[[HardwareTarget], bool],
) -> Optional[HardwareTarget]:
    """Return the first node in ``walk`` order matching *predicate*."""
    for node in walk(root):
        if predicate(node):
            return node
    return None


# ── Attribute readers (None when absent or malformed) ─────────────

def read_physical_path(target: HardwareTarget) -> Optional[str]:
    value = target.attributes.get(ATTR_PHYS_DEV_PATH)
    return value if isinstance(value, str) else None


def read_location_code(target: HardwareTarget) -> Optional[str]:
    value = target.attributes.get(ATTR_LOCATION_CODE)
    return value if isinstance(value, str) else None


def read_hwas_state(target: HardwareTarget) -> Optional[HwasState]:
    raw = target.attributes.get(ATTR_HWAS_STATE)
    if isinstance(raw, HwasState):
        return raw
    if not isinstance(raw, dict):
        return None
    functional = raw.get("functional")
    eid = raw.get("deconfiguredByEid", 0)
    if not isinstance(functional, bool):
        return None
    if isinstance(eid, bool) or not isinstance(eid, int):
        return None
    return HwasState(functional=functional, deconfigured_by_eid=eid)


def find_by_physical_path(root: Optional[HardwareTarget], path: str) -> Optional[HardwareTarget]:
    # Physical paths are assumed unique; on duplicates the first visited wins
    return search(root, lambda node: read_physical_path(node) == path)
