"""Tests for the key-value store and persisted favorites."""

import json
import threading

from moodtunes.services.storage import FAVORITES_KEY, FavoritesStore, KeyValueStore


class TestKeyValueStore:
    def test_missing_file_reads_as_empty(self, kv_store):
        assert kv_store.get_item("anything") is None

    def test_set_get_overwrite(self, kv_store):
        kv_store.set_item("a", "1")
        kv_store.set_item("b", "2")

        assert kv_store.get_item("a") == "1"
        assert KeyValueStore(kv_store.path).get_item("b") == "2"

        kv_store.set_item("a", "3")
        assert kv_store.get_item("a") == "3"
        assert kv_store.get_item("b") == "2"

    def test_write_leaves_no_temp_files(self, kv_store):
        kv_store.set_item("k", "v")
        kv_store.set_item("k", "w")

        assert [p.name for p in kv_store.path.parent.iterdir()] == ["storage.json"]

    def test_creates_parent_directories(self, tmp_path):
        store = KeyValueStore(tmp_path / "nested" / "dir" / "storage.json")
        store.set_item("k", "v")
        assert store.path.exists()

    def test_corrupt_file_is_treated_as_empty(self, kv_store):
        kv_store.path.write_text("{not json", encoding="utf-8")

        assert kv_store.get_item("k") is None
        kv_store.set_item("k", "v")
        assert kv_store.get_item("k") == "v"


class TestFavoritesStore:
    def test_absent_key_loads_empty(self, favorites_store):
        assert favorites_store.load() == []

    def test_round_trip_keeps_ids_and_order(self, favorites_store, make_track):
        favorites = [make_track(3), make_track(1), make_track(2, previewUrl=None)]

        favorites_store.save(favorites)
        loaded = FavoritesStore(KeyValueStore(favorites_store.store.path)).load()

        assert [t.track_id for t in loaded] == [3, 1, 2]
        assert loaded == favorites

    def test_stored_as_json_array_under_fixed_key(self, favorites_store, make_track):
        favorites_store.save([make_track(42)])

        raw = json.loads(favorites_store.store.path.read_text(encoding="utf-8"))
        assert list(raw) == [FAVORITES_KEY]
        records = json.loads(raw[FAVORITES_KEY])
        assert records[0]["trackId"] == 42
        assert records[0]["trackName"] == "Song 42"

    def test_save_rewrites_in_full(self, favorites_store, make_track):
        favorites_store.save([make_track(1), make_track(2)])
        favorites_store.save([make_track(2)])

        assert [t.track_id for t in favorites_store.load()] == [2]

    def test_malformed_entries_and_duplicates_are_dropped(self, kv_store):
        kv_store.set_item(
            FAVORITES_KEY,
            json.dumps([{"trackId": 1, "trackName": "A"}, {"trackName": "no id"}, "junk", {"trackId": 1}]),
        )

        loaded = FavoritesStore(kv_store).load()

        assert [t.track_id for t in loaded] == [1]
        assert loaded[0].track_name == "A"

    def test_non_list_value_loads_empty(self, kv_store):
        kv_store.set_item(FAVORITES_KEY, json.dumps({"trackId": 1}))
        assert FavoritesStore(kv_store).load() == []

        kv_store.set_item(FAVORITES_KEY, "not json")
        assert FavoritesStore(kv_store).load() == []

    def test_infinite_track_id_is_dropped(self, kv_store):
        kv_store.set_item(FAVORITES_KEY, json.dumps([{"trackId": float("inf")}, {"trackId": 2}]))

        assert [t.track_id for t in FavoritesStore(kv_store).load()] == [2]

    def test_load_during_concurrent_saves_never_sees_partial_file(self, favorites_store, make_track):
        favorites = [make_track(i) for i in range(1, 400)]
        favorites_store.save(favorites)
        stop = threading.Event()

        def keep_saving():
            while not stop.is_set():
                favorites_store.save(favorites)

        writer = threading.Thread(target=keep_saving)
        writer.start()
        try:
            reader = FavoritesStore(KeyValueStore(favorites_store.store.path))
            short_loads = [n for n in (len(reader.load()) for _ in range(200)) if n != len(favorites)]
        finally:
            stop.set()
            writer.join()

        assert short_loads == []
