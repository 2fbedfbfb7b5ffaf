# collectors/logging_client.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

import requests

from collectors.properties import Properties

DEFAULT_TIMEOUT = 10.0


class LogStoreError(Exception):
    """Raised when the log store cannot answer a request."""
    pass


class EntryNotFound(LogStoreError):
    """Raised when a platform log id is unknown to the log store."""
    pass


class LogStore(Protocol):
    def translate(self, pel_id: int) -> int:
        """Map a platform error log id to the store's internal entry id."""
        ...

    def get_all_properties(self, entry_id: int, interface: str) -> Properties:
        """Return every property of *interface* on the entry."""
        ...


@dataclass
class HttpLogStore:
    """Log store reached over its REST facade.

    One request per call.  No retry: a failed call is reported to the
    caller, which decides what a missing entry means.
    """
    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    session: requests.Session = field(default_factory=requests.Session)

    def _get(self, path: str) -> requests.Response:
        url = f"{self.base_url.rstrip('/')}{path}"
        try:
            return self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise LogStoreError(f"GET {url} failed: {e}") from e

    def _json(self, r: requests.Response) -> Any:
        try:
            return r.json()
        except ValueError as e:
            raise LogStoreError(f"Invalid JSON from {r.url}: {e}") from e

    def translate(self, pel_id: int) -> int:
        r = self._get(f"/logging/pel/{pel_id}")
        if r.status_code == 404:
            raise EntryNotFound(f"No log entry for PEL id {pel_id}")
        if not r.ok:
            raise LogStoreError(f"PEL id lookup returned HTTP {r.status_code}")
        data = self._json(r)
        entry_id = data.get("EntryId") if isinstance(data, dict) else None
        if not isinstance(entry_id, int) or isinstance(entry_id, bool):
            raise LogStoreError(f"PEL id lookup returned no EntryId: {data!r}")
        return entry_id

    def get_all_properties(self, entry_id: int, interface: str) -> Properties:
        r = self._get(f"/logging/entry/{entry_id}/{interface}")
        if not r.ok:
            raise LogStoreError(
                f"Properties of entry {entry_id} ({interface}) returned HTTP {r.status_code}"
            )
        data = self._json(r)
        if not isinstance(data, dict):
            raise LogStoreError(f"Properties of entry {entry_id} are not an object")
        return data


@dataclass
class StaticLogStore:
    """In-memory log store built from a snapshot (offline runs and tests)."""
    pel_to_entry: Dict[int, int] = field(default_factory=dict)
    entries: Dict[int, Dict[str, Properties]] = field(default_factory=dict)

    def add_entry(
        self,
        pel_id: int,
        entry_id: int,
        interfaces: Optional[Dict[str, Properties]] = None,
    ) -> None:
        self.pel_to_entry[pel_id] = entry_id
        self.entries[entry_id] = dict(interfaces or {})

    def translate(self, pel_id: int) -> int:
        try:
            return self.pel_to_entry[pel_id]
        except KeyError:
            raise EntryNotFound(f"No log entry for PEL id {pel_id}") from None

    def get_all_properties(self, entry_id: int, interface: str) -> Properties:
        entry = self.entries.get(entry_id)
        if entry is None:
            raise LogStoreError(f"Log entry {entry_id} no longer exists")
        return dict(entry.get(interface, {}))


def build_log_store(base_url: str, timeout: float = DEFAULT_TIMEOUT) -> HttpLogStore:
    return HttpLogStore(base_url=base_url, timeout=timeout)
