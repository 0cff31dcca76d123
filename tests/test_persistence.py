from talentscope.persistence import (
    MemoryKeyValueStore,
    SqliteKeyValueStore,
    get_json,
    set_json,
    sharing_key,
    talent_flag_key,
)


def test_sqlite_store_persists_across_instances(tmp_path):
    db_path = tmp_path / "nested" / "kv.sqlite"
    store = SqliteKeyValueStore(db_path)
    store.set("session_user", "{}")
    store.set("session_user", '{"id": "u1"}')

    reopened = SqliteKeyValueStore(db_path)
    assert reopened.get("session_user") == '{"id": "u1"}'
    assert reopened.get("missing") is None

    reopened.delete("session_user")
    assert store.get("session_user") is None


def test_sqlite_store_lists_keys_by_prefix(tmp_path):
    store = SqliteKeyValueStore(tmp_path / "kv.sqlite")
    store.set(sharing_key("b"), "true")
    store.set(sharing_key("a"), "false")
    store.set(talent_flag_key("a"), "{}")

    assert store.keys("sharing_") == ["sharing_a", "sharing_b"]
    assert len(store.keys()) == 3


def test_in_memory_sqlite_keeps_single_connection():
    store = SqliteKeyValueStore(":memory:")
    set_json(store, "talent_flag_u", {"preferred_regions": ["Europe"]})
    assert get_json(store, "talent_flag_u") == {"preferred_regions": ["Europe"]}


def test_memory_store_matches_sqlite_behaviour():
    store = MemoryKeyValueStore()
    assert get_json(store, "missing") is None
    store.set("sharing_u", "true")
    store.delete("sharing_u")
    store.delete("sharing_u")
    assert store.keys() == []
