from __future__ import annotations

import json

from src.nexus_office.nexus_office.database.backends import JsonFileBackend, MemoryBackend
from src.nexus_office.nexus_office.database.notifier import LocalChangeChannel, NullChangeSource, RevisionCounter
from src.nexus_office.nexus_office.database.store import LocalStore


def test_read_missing_key_persists_default_without_notifying(store, backend):
    calls = []
    store.subscribe(lambda: calls.append(1))

    value = store.read("tasks", [{"id": "t1"}])

    assert value == [{"id": "t1"}]
    assert json.loads(backend.get_item("nexus_tasks")) == [{"id": "t1"}]
    assert calls == []


def test_read_returns_copy_of_default(store):
    default = [{"id": "t1"}]
    value = store.read("tasks", default)
    value.append({"id": "t2"})

    assert default == [{"id": "t1"}]


def test_write_then_read_round_trip(store):
    rows = [{"id": "x", "nested": {"a": [1, 2]}, "flag": None}]
    store.write("attendance", rows)

    assert store.read("attendance", []) == rows


def test_users_key_merges_missing_defaults_by_id(store, backend):
    store.write("users", [{"id": "u1", "name": "Renamed Admin"}, {"id": "local", "name": "Local"}])

    merged = store.read("users", [{"id": "u1", "name": "Admin"}, {"id": "u9", "name": "New Seed"}])

    assert merged == [
        {"id": "u1", "name": "Renamed Admin"},
        {"id": "local", "name": "Local"},
        {"id": "u9", "name": "New Seed"},
    ]
    assert json.loads(backend.get_item("nexus_users")) == merged


def test_other_keys_do_not_merge(store):
    store.write("tasks", [{"id": "t1"}])

    assert store.read("tasks", [{"id": "t1"}, {"id": "t2"}]) == [{"id": "t1"}]


def test_every_write_notifies_each_subscriber_once_in_order(store):
    calls = []
    store.subscribe(lambda: calls.append("a"))
    store.subscribe(lambda: calls.append("b"))

    store.write("tasks", [])
    store.write("tasks", [])

    assert calls == ["a", "b", "a", "b"]


def test_unsubscribe_stops_notifications(store):
    calls = []
    unsubscribe = store.subscribe(lambda: calls.append(1))

    unsubscribe()
    unsubscribe()
    store.write("tasks", [])

    assert calls == []


def test_external_change_outside_namespace_is_ignored(backend):
    channel = LocalChangeChannel()
    tab_a = LocalStore(backend)
    tab_b = LocalStore(backend)
    tab_a.attach_external_source(channel.endpoint())
    endpoint_b = channel.endpoint()
    tab_b.attach_external_source(endpoint_b)

    seen = []
    tab_a.subscribe(lambda: seen.append(1))

    endpoint_b.announce("other_app_key")
    assert seen == []

    endpoint_b.announce("nexus_tasks")
    assert seen == [1]


def test_write_in_one_tab_notifies_the_other_tab_only_once(backend):
    channel = LocalChangeChannel()
    tab_a = LocalStore(backend)
    tab_b = LocalStore(backend)
    tab_a.attach_external_source(channel.endpoint())
    tab_b.attach_external_source(channel.endpoint())

    seen_a, seen_b = [], []
    tab_a.subscribe(lambda: seen_a.append(1))
    tab_b.subscribe(lambda: seen_b.append(1))

    tab_a.write("leaves", [{"id": "l1"}])

    assert seen_a == [1]
    assert seen_b == [1]
    assert tab_b.read("leaves", []) == [{"id": "l1"}]


def test_detached_source_no_longer_notifies(backend):
    channel = LocalChangeChannel()
    tab_a = LocalStore(backend)
    tab_b = LocalStore(backend)
    detach = tab_a.attach_external_source(channel.endpoint())
    tab_b.attach_external_source(channel.endpoint())

    seen = []
    tab_a.subscribe(lambda: seen.append(1))
    detach()
    tab_b.write("tasks", [])

    assert seen == []


def test_null_source_is_harmless(store):
    store.attach_external_source(NullChangeSource())
    store.write("tasks", [])


def test_reset_removes_only_namespaced_keys(backend):
    backend.set_item("someone_else", "1")
    store = LocalStore(backend)
    store.write("tasks", [])
    store.write("leaves", [])
    counter = RevisionCounter()
    store.subscribe(counter)

    removed = store.reset()

    assert removed == 2
    assert set(backend.keys()) == {"someone_else"}
    assert counter.revision == 1


def test_json_file_backend_is_shared_between_stores(tmp_path):
    path = tmp_path / "store.json"
    first = LocalStore(JsonFileBackend(path))
    second = LocalStore(JsonFileBackend(path))

    first.write("tasks", [{"id": "t1"}])

    assert second.read("tasks", []) == [{"id": "t1"}]
    assert "nexus_tasks" in json.loads(path.read_text(encoding="utf-8"))


def test_custom_namespace_prefixes_backend_keys():
    backend = MemoryBackend()
    store = LocalStore(backend, namespace="acme_")
    store.write("tasks", [])

    assert list(backend.keys()) == ["acme_tasks"]


def test_file_writes_from_another_process_do_not_notify_without_a_source(tmp_path):
    path = tmp_path / "store.json"
    server = LocalStore(JsonFileBackend(path))
    revision = RevisionCounter()
    server.subscribe(revision)

    LocalStore(JsonFileBackend(path)).write("attendance", [{"id": "x"}])

    assert revision.revision == 0
    assert server.read("attendance", []) == [{"id": "x"}]
