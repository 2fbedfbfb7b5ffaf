"""HttpLogStore against a mocked requests session: one call, typed failures."""
from __future__ import annotations

from unittest import mock

import pytest
import requests

from collectors.logging_client import (
    EntryNotFound,
    HttpLogStore,
    LogStoreError,
    StaticLogStore,
    build_log_store,
)
from collectors.properties import PEL_ENTRY_INTERFACE


def _response(status: int, payload=None, url="http://bmc/x"):
    r = mock.Mock(spec=requests.Response)
    r.status_code = status
    r.ok = status < 400
    r.url = url
    if isinstance(payload, Exception):
        r.json.side_effect = payload
    else:
        r.json.return_value = payload
    return r


def _store(*responses):
    session = mock.Mock(spec=requests.Session)
    session.get.side_effect = list(responses)
    return HttpLogStore(base_url="http://bmc/", timeout=3.0, session=session), session


class TestHttpLogStore:

    def test_translate(self):
        store, session = _store(_response(200, {"EntryId": 7}))
        assert store.translate(50) == 7
        session.get.assert_called_once_with("http://bmc/logging/pel/50", timeout=3.0)

    def test_translate_unknown_id(self):
        store, _ = _store(_response(404))
        with pytest.raises(EntryNotFound):
            store.translate(50)

    def test_translate_server_error_is_not_not_found(self):
        store, _ = _store(_response(500))
        with pytest.raises(LogStoreError) as exc:
            store.translate(50)
        assert not isinstance(exc.value, EntryNotFound)

    def test_translate_bad_payload(self):
        store, _ = _store(_response(200, {"Id": 7}))
        with pytest.raises(LogStoreError):
            store.translate(50)

    def test_transport_failure_is_wrapped(self):
        session = mock.Mock(spec=requests.Session)
        session.get.side_effect = requests.ConnectionError("refused")
        store = HttpLogStore(base_url="http://bmc", session=session)
        with pytest.raises(LogStoreError):
            store.translate(50)
        assert session.get.call_count == 1

    def test_get_all_properties(self):
        props = {"PlatformLogID": 4096, "Timestamp": 1000}
        store, session = _store(_response(200, props))
        assert store.get_all_properties(7, PEL_ENTRY_INTERFACE) == props
        session.get.assert_called_once_with(
            f"http://bmc/logging/entry/7/{PEL_ENTRY_INTERFACE}", timeout=3.0
        )

    def test_get_all_properties_vanished_entry(self):
        store, _ = _store(_response(404))
        with pytest.raises(LogStoreError):
            store.get_all_properties(7, PEL_ENTRY_INTERFACE)

    def test_get_all_properties_invalid_json(self):
        store, _ = _store(_response(200, ValueError("not json")))
        with pytest.raises(LogStoreError):
            store.get_all_properties(7, PEL_ENTRY_INTERFACE)

    def test_build_log_store(self):
        store = build_log_store("http://bmc:8080", timeout=2.5)
        assert store.base_url == "http://bmc:8080"
        assert store.timeout == 2.5


class TestStaticLogStore:

    def test_unknown_pel(self):
        with pytest.raises(EntryNotFound):
            StaticLogStore().translate(1)

    def test_missing_interface_is_empty(self):
        store = StaticLogStore()
        store.add_entry(1, 2)
        assert store.translate(1) == 2
        assert store.get_all_properties(2, PEL_ENTRY_INTERFACE) == {}
